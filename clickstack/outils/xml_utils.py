"""
XML document helpers built on lxml.

``XmlDocument`` is the narrow surface the Tomcat builders need: create
elements, append them under the root, insert one after a uniquely matched
anchor, stamp a header comment, load and save. Saving keeps comments,
attribute order and the existing whitespace of the template.
"""

from pathlib import Path
from typing import Mapping, Optional

from lxml import etree

from clickstack.core.exceptions import ElementLookupError, PreconditionError


class XmlDocument:
    """An XML document loaded from disk or from a string."""

    def __init__(self, tree: etree._ElementTree, path: Optional[Path] = None):
        self.tree = tree
        self.path = path

    @classmethod
    def load(cls, path) -> "XmlDocument":
        path = Path(path)
        parser = etree.XMLParser(remove_blank_text=False, remove_comments=False)
        try:
            tree = etree.parse(str(path), parser)
        except etree.XMLSyntaxError as e:
            raise PreconditionError(path.name, path, f"malformed XML: {e}") from e
        return cls(tree, path)

    @classmethod
    def from_string(cls, text: str) -> "XmlDocument":
        root = etree.fromstring(text.encode("utf-8"))
        return cls(root.getroottree())

    @property
    def root(self) -> etree._Element:
        return self.tree.getroot()

    @property
    def root_tag(self) -> str:
        return self.root.tag

    def check_root_element(self, expected_tag: str):
        """Raise PreconditionError unless the root element is ``expected_tag``."""
        if self.root_tag != expected_tag:
            raise PreconditionError(
                "root element",
                self.path,
                f"expected <{expected_tag}> but found <{self.root_tag}>"
            )

    def create_element(self, tag: str, attributes: Optional[Mapping[str, str]] = None) -> etree._Element:
        """Create a detached element; attributes keep the mapping's order."""
        element = etree.Element(tag)
        for name, value in (attributes or {}).items():
            element.set(name, value)
        return element

    def append_child(self, element: etree._Element) -> etree._Element:
        """Append ``element`` as the last child of the root element."""
        root = self.root
        children = list(root)
        if children:
            # Keep the indentation of the template: the new element takes over
            # the closing whitespace and the previous last child gets the
            # whitespace used between siblings.
            last = children[-1]
            element.tail = last.tail
            last.tail = children[-2].tail if len(children) > 1 else root.text
        root.append(element)
        return element

    def insert_sibling_after(self, element: etree._Element, anchor: etree._Element) -> etree._Element:
        """Insert ``element`` as the immediate next sibling of ``anchor``."""
        element.tail = anchor.tail
        anchor.addnext(element)
        return element

    def find_all(self, xpath: str) -> list:
        return self.tree.xpath(xpath)

    def find_unique(self, xpath: str) -> etree._Element:
        """Return the single element matching ``xpath``; zero or several matches raise."""
        matches = self.tree.xpath(xpath)
        if len(matches) != 1:
            raise ElementLookupError(xpath, len(matches))
        return matches[0]

    def add_header_comment(self, text: str) -> etree._Comment:
        """Put a comment at document level, ahead of the root element."""
        comment = etree.Comment(f" {text} ")
        self.root.addprevious(comment)
        return comment

    def to_string(self) -> str:
        return etree.tostring(self.tree, xml_declaration=True, encoding="UTF-8").decode("utf-8")

    def save(self, path=None):
        """Write the document to ``path``, defaulting to where it was loaded from."""
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("No path to save the document to")
        self.tree.write(str(target), xml_declaration=True, encoding="UTF-8")
