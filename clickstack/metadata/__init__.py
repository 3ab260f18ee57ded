"""
Deployment metadata: bound resources and runtime property sections.
"""

from .resource import Resource, Database, Email, SessionStore, guess_driver_class_name
from .metadata import Metadata
from .loader import load_metadata, parse_metadata, parse_resource

__all__ = [
    'Resource',
    'Database',
    'Email',
    'SessionStore',
    'guess_driver_class_name',
    'Metadata',
    'load_metadata',
    'parse_metadata',
    'parse_resource'
]
