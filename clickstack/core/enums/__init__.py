"""
Core enums for the clickstack configuration generator.
"""

from .resource import ResourceType

__all__ = [
    'ResourceType'
]
