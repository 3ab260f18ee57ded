"""
Configuration management for the clickstack generator.

- Core provider infrastructure (YAML file and in-memory providers)
- System settings of the generator itself
- Tomcat defaults and override whitelists
"""

from typing import Mapping, Optional

# Core infrastructure
from .core import ConfigProvider, FileConfigProvider, RuntimeConfigProvider

# Domain configurations
from .system import GeneratorConfig, load_environment_overrides


def get_system_config_provider(config_dir: Optional[str] = None) -> ConfigProvider:
    """Get the system configuration provider, file based when a directory is given."""
    if config_dir is None:
        return RuntimeConfigProvider("system")
    return FileConfigProvider("system", config_dir)


def load_generator_config(config_dir: Optional[str] = None,
                          environ: Optional[Mapping[str, str]] = None) -> GeneratorConfig:
    """
    Load the generator configuration.

    Values come from ``<config_dir>/system.yaml`` when a directory is given,
    then CLICKSTACK_* environment variables override them.
    """
    data = get_system_config_provider(config_dir).get_config()
    data.update(load_environment_overrides(environ))
    return GeneratorConfig.from_dict(data)


__all__ = [
    'ConfigProvider',
    'FileConfigProvider',
    'RuntimeConfigProvider',
    'GeneratorConfig',
    'load_environment_overrides',
    'get_system_config_provider',
    'load_generator_config'
]
