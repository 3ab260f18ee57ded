"""
Filesystem checks on a catalina base directory.
"""

from pathlib import Path

from clickstack.core.exceptions import PreconditionError


def check_catalina_base(catalina_base) -> Path:
    """Return ``catalina_base`` as a Path, raising unless it is an existing directory."""
    catalina_base = Path(catalina_base)
    if not catalina_base.exists():
        raise PreconditionError("catalina.base", catalina_base, "does not exist")
    if not catalina_base.is_dir():
        raise PreconditionError("catalina.base", catalina_base, "is not a directory")
    return catalina_base


def resolve_config_file(catalina_base: Path, relative_path: str) -> Path:
    """Resolve a config file below ``catalina_base``, raising if it is missing."""
    path = catalina_base / relative_path
    if not path.is_file():
        raise PreconditionError(Path(relative_path).name, path, "does not exist")
    return path
