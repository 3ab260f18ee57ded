from .xml_utils import XmlDocument

__all__ = ['XmlDocument']
