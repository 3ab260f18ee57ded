"""
Resource-related enums.
"""

from enum import Enum


class ResourceType(Enum):
    """Kinds of resources that can be bound to an application."""
    DATABASE = "database"
    EMAIL = "email"
    SESSION_STORE = "session-store"
