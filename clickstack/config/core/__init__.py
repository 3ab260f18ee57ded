"""
Core configuration management components.

- ConfigProvider: Abstract provider interface and implementations
"""

from .provider import ConfigProvider, FileConfigProvider, RuntimeConfigProvider

__all__ = [
    'ConfigProvider',
    'FileConfigProvider', 
    'RuntimeConfigProvider'
]
