"""
Read-only view of a deployment descriptor.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .resource import Resource


class Metadata:
    """
    Resources and runtime properties of one deployment.

    ``resources`` keeps insertion order, which is also the order in which
    configuration elements are generated.
    """

    def __init__(self, resources: Optional[Dict[str, Resource]] = None,
                 runtime_properties: Optional[Dict[str, Dict[str, str]]] = None):
        self._resources = dict(resources or {})
        self._runtime_properties = {
            section: dict(values) for section, values in (runtime_properties or {}).items()
        }

    @property
    def resources(self) -> Mapping[str, Resource]:
        return MappingProxyType(self._resources)

    @property
    def runtime_properties(self) -> Mapping[str, Mapping[str, str]]:
        return MappingProxyType(self._runtime_properties)

    def get_resource(self, name: str) -> Optional[Resource]:
        return self._resources.get(name)

    def get_runtime_property(self, section: str) -> Optional[Mapping[str, str]]:
        """Get the properties of a runtime section, or None if it is not configured."""
        values = self._runtime_properties.get(section)
        if values is None:
            return None
        return MappingProxyType(values)

    def __repr__(self):
        return (f"Metadata(resources={list(self._resources)}, "
                f"runtime_sections={list(self._runtime_properties)})")
