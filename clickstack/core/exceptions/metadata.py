"""
Metadata exceptions.
"""

from .base import ValidationError


class MetadataError(ValidationError):
    """Raised when a metadata document is malformed or lacks a required field."""
    
    def __init__(self, field: str, message: str = None, resource_name: str = None):
        self.resource_name = resource_name
        if resource_name:
            field = f"{resource_name}.{field}"
        super().__init__(field, None, message)
