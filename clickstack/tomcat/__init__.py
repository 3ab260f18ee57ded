from .context_xml_builder import ContextXmlBuilder
from .files import check_catalina_base, resolve_config_file

__all__ = [
    'ContextXmlBuilder',
    'check_catalina_base',
    'resolve_config_file'
]
