"""
Metadata loading.

A metadata file is a YAML (or JSON) document::

    resources:
      mydb:
        type: database
        url: mysql://host/db
        username: u
        password: p
        properties:
          maxActive: 5
    runtime:
      privateApp:
        secretKey: s3cr3t

Resource order in the file is kept.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from clickstack.core.enums import ResourceType
from clickstack.core.exceptions import MetadataError
from clickstack.logger import get_clickstack_logger

from .metadata import Metadata
from .resource import (
    DEFAULT_VALIDATION_QUERY, Database, Email, Resource, SessionStore,
    guess_driver_class_name
)


logger = get_clickstack_logger().bind(component="MetadataLoader")


def _to_str(value: Any) -> str:
    """Render a YAML scalar the way it must appear in an XML attribute."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _string_map(value: Any, field: str, resource_name: str = None) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise MetadataError(field, "must be a mapping", resource_name)
    return {str(k): _to_str(v) for k, v in value.items()}


def _required(entry: Mapping[str, Any], field: str, resource_name: str) -> str:
    value = entry.get(field)
    if value is None or _to_str(value) == "":
        raise MetadataError(field, "is required", resource_name)
    return _to_str(value)


def _optional(entry: Mapping[str, Any], field: str, default: Optional[str]) -> Optional[str]:
    value = entry.get(field)
    if value is None or _to_str(value) == "":
        return default
    return _to_str(value)


def _parse_database(name: str, entry: Mapping[str, Any]) -> Database:
    url = _required(entry, "url", name)
    driver = _optional(entry, "driver", None) or guess_driver_class_name(url)
    if driver is None:
        raise MetadataError("driver", f"is required for url '{url}'", name)
    return Database(
        name=name,
        url=url,
        username=_required(entry, "username", name),
        password=_required(entry, "password", name),
        driver_class_name=driver,
        validation_query=_optional(entry, "validationQuery", DEFAULT_VALIDATION_QUERY),
        properties=_string_map(entry.get("properties"), "properties", name),
    )


def _parse_email(name: str, entry: Mapping[str, Any]) -> Email:
    return Email(
        name=name,
        username=_required(entry, "username", name),
        password=_required(entry, "password", name),
        host=_required(entry, "host", name),
        properties=_string_map(entry.get("properties"), "properties", name),
    )


def _parse_session_store(name: str, entry: Mapping[str, Any]) -> SessionStore:
    return SessionStore(
        name=name,
        nodes=_required(entry, "nodes", name),
        username=_required(entry, "username", name),
        password=_required(entry, "password", name),
        properties=_string_map(entry.get("properties"), "properties", name),
    )


RESOURCE_PARSERS = {
    ResourceType.DATABASE: _parse_database,
    ResourceType.EMAIL: _parse_email,
    ResourceType.SESSION_STORE: _parse_session_store,
}


def parse_resource(key: str, entry: Mapping[str, Any]) -> Optional[Resource]:
    """
    Build a resource from one entry of the ``resources`` mapping.

    Returns None for an unknown resource type, which is skipped rather
    than rejected.
    """
    if not isinstance(entry, Mapping):
        raise MetadataError("resources", "entry must be a mapping", key)

    raw_type = _required(entry, "type", key)
    try:
        resource_type = ResourceType(raw_type)
    except ValueError:
        logger.warning("Skip resource of unknown type", resource=key, type=raw_type)
        return None

    name = _optional(entry, "name", key)
    return RESOURCE_PARSERS[resource_type](name, entry)


def parse_metadata(data: Optional[Mapping[str, Any]]) -> Metadata:
    """Build a Metadata object from an already parsed document."""
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise MetadataError("metadata", "top level must be a mapping")

    raw_resources = data.get("resources") or {}
    if not isinstance(raw_resources, Mapping):
        raise MetadataError("resources", "must be a mapping of resource name to resource")

    resources: Dict[str, Resource] = {}
    for key, entry in raw_resources.items():
        resource = parse_resource(str(key), entry)
        if resource is not None:
            resources[str(key)] = resource

    raw_runtime = data.get("runtime") or {}
    if not isinstance(raw_runtime, Mapping):
        raise MetadataError("runtime", "must be a mapping of section name to properties")

    runtime_properties = {
        str(section): _string_map(values, "runtime", str(section))
        for section, values in raw_runtime.items()
    }

    return Metadata(resources, runtime_properties)


def load_metadata(path) -> Metadata:
    """Load a metadata file from disk."""
    path = Path(path)
    if not path.is_file():
        raise MetadataError("metadata", f"file '{path}' does not exist")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise MetadataError("metadata", f"cannot parse '{path}': {e}") from e

    metadata = parse_metadata(data)
    logger.info("Metadata loaded", path=str(path), resources=len(metadata.resources))
    return metadata
