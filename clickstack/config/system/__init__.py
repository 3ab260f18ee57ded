"""
System configuration domain.
"""

from .config import GeneratorConfig, load_environment_overrides

__all__ = [
    'GeneratorConfig',
    'load_environment_overrides'
]
