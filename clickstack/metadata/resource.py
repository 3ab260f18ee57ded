"""
Resources bound to an application.

Each resource class carries a ``resource_type`` tag so that consumers can
dispatch on the tag instead of on the Python class.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Optional
from urllib.parse import urlsplit

from clickstack.core.enums import ResourceType


DEFAULT_VALIDATION_QUERY = "select 1"

JDBC_DRIVERS: Dict[str, str] = {
    "mysql": "com.mysql.jdbc.Driver",
    "postgres": "org.postgresql.Driver",
    "postgresql": "org.postgresql.Driver",
}


def guess_driver_class_name(url: str) -> Optional[str]:
    """Return the JDBC driver matching the scheme of ``url``, or None."""
    scheme = urlsplit(url).scheme.lower()
    return JDBC_DRIVERS.get(scheme)


@dataclass(frozen=True)
class Resource:
    """Base class of all bound resources."""
    name: str

    resource_type: ClassVar[ResourceType]


@dataclass(frozen=True)
class Database(Resource):
    """A relational database, exposed to the application as a DataSource."""
    url: str
    username: str
    password: str
    driver_class_name: str
    validation_query: str = DEFAULT_VALIDATION_QUERY
    properties: Dict[str, str] = field(default_factory=dict)

    resource_type: ClassVar[ResourceType] = ResourceType.DATABASE


@dataclass(frozen=True)
class Email(Resource):
    """An SMTP account, exposed as a mail session."""
    username: str
    password: str
    host: str
    properties: Dict[str, str] = field(default_factory=dict)

    resource_type: ClassVar[ResourceType] = ResourceType.EMAIL


@dataclass(frozen=True)
class SessionStore(Resource):
    """A memcached cluster holding HTTP sessions."""
    nodes: str
    username: str
    password: str
    properties: Dict[str, str] = field(default_factory=dict)

    resource_type: ClassVar[ResourceType] = ResourceType.SESSION_STORE


RESOURCE_CLASSES = {
    ResourceType.DATABASE: Database,
    ResourceType.EMAIL: Email,
    ResourceType.SESSION_STORE: SessionStore,
}
