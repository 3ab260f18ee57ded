"""
System domain configuration classes.

This module defines the settings of the generator itself: how it logs,
how it names itself in generated files and where it expects the
Tomcat configuration files below the catalina base.
"""

from dataclasses import dataclass
from typing import Dict, Any, Mapping
import os


TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class GeneratorConfig:
    """
    Main generator configuration class.
    """
    
    # Basic settings
    tool_name: str = "tomcat-clickstack"
    debug: bool = False
    json_logs: bool = False
    
    # Files below catalina.base
    context_xml_path: str = "conf/context.xml"
    server_xml_path: str = "conf/server.xml"
    context_root_tag: str = "Context"
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'tool_name': self.tool_name,
            'debug': self.debug,
            'json_logs': self.json_logs,
            'context_xml_path': self.context_xml_path,
            'server_xml_path': self.server_xml_path,
            'context_root_tag': self.context_root_tag
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeneratorConfig':
        """Create configuration from dictionary."""
        config = cls()
        
        config.tool_name = data.get('tool_name', config.tool_name)
        config.debug = bool(data.get('debug', config.debug))
        config.json_logs = bool(data.get('json_logs', config.json_logs))
        
        config.context_xml_path = data.get('context_xml_path', config.context_xml_path)
        config.server_xml_path = data.get('server_xml_path', config.server_xml_path)
        config.context_root_tag = data.get('context_root_tag', config.context_root_tag)
        
        return config


def load_environment_overrides(environ: Mapping[str, str] = None) -> Dict[str, Any]:
    """Read CLICKSTACK_* environment variables into configuration keys."""
    environ = os.environ if environ is None else environ
    overrides = {}
    if 'CLICKSTACK_DEBUG' in environ:
        overrides['debug'] = environ['CLICKSTACK_DEBUG'].strip().lower() in TRUE_VALUES
    if 'CLICKSTACK_JSON_LOGS' in environ:
        overrides['json_logs'] = environ['CLICKSTACK_JSON_LOGS'].strip().lower() in TRUE_VALUES
    return overrides
