"""
Configuration provider base classes and implementations.

This module provides the foundational provider classes for configuration management.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, TypeVar, Generic
from pathlib import Path
import yaml

from clickstack.core.exceptions import ConfigurationError
from clickstack.logger import get_clickstack_logger

T = TypeVar('T')


class ConfigProvider(ABC, Generic[T]):
    """
    Abstract base class for configuration providers.
    
    Defines the interface that all configuration providers must implement.
    """
    
    def __init__(self, domain: str):
        self.domain = domain
        self.logger = get_clickstack_logger().bind(component=f"ConfigProvider_{domain}")
    
    @abstractmethod
    def get_config(self) -> T:
        """Get current configuration."""
        pass
    
    @abstractmethod
    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Validate configuration data."""
        pass


class FileConfigProvider(ConfigProvider[Dict[str, Any]]):
    """
    File-based configuration provider that reads from YAML files.

    A missing file is not an error: the domain falls back to its defaults.
    """
    
    def __init__(self, domain: str, config_dir: str = "settings"):
        super().__init__(domain)
        self.config_dir = Path(config_dir)
        self._config_cache: Optional[Dict[str, Any]] = None
    
    @property
    def config_file(self) -> Path:
        """Get the configuration file path for this domain."""
        return self.config_dir / f"{self.domain}.yaml"
    
    def get_config(self) -> Dict[str, Any]:
        """Get current configuration from file."""
        if self._config_cache is None:
            self._config_cache = self._load_config()
        return self._config_cache.copy()
    
    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Basic validation - can be overridden by subclasses."""
        return isinstance(config, dict)
    
    def _load_config(self) -> Dict[str, Any]:
        if not self.config_file.exists():
            self.logger.debug("No configuration file, using defaults", config_file=str(self.config_file))
            return {}
        
        try:
            with open(self.config_file, 'r') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(str(self.config_file), reason=f"invalid YAML: {e}") from e
        
        if not self.validate_config(config):
            raise ConfigurationError(str(self.config_file), reason="top level must be a mapping")
        
        self.logger.debug("Configuration loaded", config_file=str(self.config_file))
        return config


class RuntimeConfigProvider(ConfigProvider[Dict[str, Any]]):
    """
    Runtime configuration provider that keeps config in memory.
    """
    
    def __init__(self, domain: str, initial_config: Optional[Dict[str, Any]] = None):
        super().__init__(domain)
        self._config = initial_config or {}
    
    def get_config(self) -> Dict[str, Any]:
        """Get current configuration from memory."""
        return self._config.copy()
    
    def validate_config(self, config: Dict[str, Any]) -> bool:
        """Basic validation."""
        return isinstance(config, dict)
