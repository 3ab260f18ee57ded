"""
Tomcat configuration exceptions.
"""

from .base import ValidationError, NotFoundError


class PreconditionError(ValidationError):
    """Raised when the catalina base or one of its config files is unusable."""
    
    def __init__(self, field: str, path=None, message: str = None):
        self.path = path
        super().__init__(field, str(path) if path is not None else None, message)


class ElementLookupError(NotFoundError):
    """Raised when an XPath query does not match exactly one element."""
    
    def __init__(self, xpath: str, match_count: int):
        self.xpath = xpath
        self.match_count = match_count
        if match_count == 0:
            reason = "no matching element"
        else:
            reason = f"expected a unique element, found {match_count}"
        super().__init__("Element", xpath, reason)
