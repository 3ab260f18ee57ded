"""
Core exceptions for the clickstack configuration generator.

This module provides all exception classes used throughout the package,
organized by domain and with a clear inheritance hierarchy.
"""

# Base exceptions
from .base import (
    ClickstackError,
    ValidationError,
    ConfigurationError,
    NotFoundError
)

# Tomcat exceptions
from .tomcat import (
    PreconditionError,
    ElementLookupError
)

# Metadata exceptions
from .metadata import MetadataError

__all__ = [
    # Base exceptions
    'ClickstackError',
    'ValidationError',
    'ConfigurationError',
    'NotFoundError',
    
    # Tomcat exceptions
    'PreconditionError',
    'ElementLookupError',
    
    # Metadata exceptions
    'MetadataError'
]
