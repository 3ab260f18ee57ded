"""
Test suite for the XmlDocument helpers.
"""

import unittest
import tempfile
from pathlib import Path

from clickstack.core.exceptions import ElementLookupError, PreconditionError
from clickstack.outils.xml_utils import XmlDocument


TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<!-- stock template -->
<Context reloadable="false">
    <WatchedResource>WEB-INF/web.xml</WatchedResource>
    <Valve className="a"/>
</Context>
"""


class TestXmlDocument(unittest.TestCase):
    """Test XmlDocument lookups and mutations."""

    def setUp(self):
        self.document = XmlDocument.from_string(TEMPLATE)

    def test_root_tag(self):
        self.assertEqual(self.document.root_tag, "Context")
        self.document.check_root_element("Context")

    def test_check_root_element_rejects_other_tag(self):
        with self.assertRaises(PreconditionError) as ctx:
            self.document.check_root_element("Server")
        self.assertIn("expected <Server> but found <Context>", str(ctx.exception))

    def test_create_element_keeps_attribute_order(self):
        element = self.document.create_element("Resource", {"name": "n", "auth": "Container", "type": "t"})

        self.assertEqual(element.tag, "Resource")
        self.assertEqual(list(element.attrib.keys()), ["name", "auth", "type"])

    def test_append_child(self):
        element = self.document.append_child(self.document.create_element("Resource", {"name": "r"}))

        self.assertIs(self.document.root[-1], element)
        self.assertIn('<Resource name="r"/>', self.document.to_string())

    def test_append_child_to_empty_root(self):
        document = XmlDocument.from_string("<Context/>")

        document.append_child(document.create_element("Resource"))

        self.assertEqual(len(document.root), 1)

    def test_find_unique(self):
        element = self.document.find_unique("//Valve[@className='a']")
        self.assertEqual(element.get("className"), "a")

    def test_find_unique_without_match(self):
        with self.assertRaises(ElementLookupError) as ctx:
            self.document.find_unique("//Valve[@className='b']")
        self.assertEqual(ctx.exception.match_count, 0)
        self.assertEqual(ctx.exception.xpath, "//Valve[@className='b']")

    def test_find_unique_with_several_matches(self):
        self.document.append_child(self.document.create_element("Valve", {"className": "a"}))

        with self.assertRaises(ElementLookupError) as ctx:
            self.document.find_unique("//Valve[@className='a']")
        self.assertEqual(ctx.exception.match_count, 2)
        self.assertIn("found 2", str(ctx.exception))

    def test_insert_sibling_after(self):
        anchor = self.document.find_unique("//WatchedResource")
        element = self.document.create_element("Valve", {"className": "new"})

        self.document.insert_sibling_after(element, anchor)

        self.assertEqual([child.tag for child in self.document.root], ["WatchedResource", "Valve", "Valve"])
        self.assertIs(anchor.getnext(), element)

    def test_header_comment_precedes_root(self):
        self.document.add_header_comment("generated")

        serialized = self.document.to_string()
        self.assertLess(serialized.index("<!-- generated -->"), serialized.index("<Context"))
        # the template comment is kept
        self.assertIn("<!-- stock template -->", serialized)

    def test_save_and_load_round_trip(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "context.xml"
            path.write_text(TEMPLATE, encoding="utf-8")

            document = XmlDocument.load(path)
            document.add_header_comment("generated")
            document.append_child(document.create_element("Resource", {"name": "r"}))
            document.save()

            reloaded = XmlDocument.load(path)
            self.assertEqual(reloaded.path, path)
            self.assertEqual(len(reloaded.find_all("/Context/Resource")), 1)
            text = path.read_text(encoding="utf-8")
            self.assertTrue(text.startswith("<?xml"))
            self.assertIn("<!-- generated -->", text)
            self.assertIn("<!-- stock template -->", text)

    def test_load_malformed_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "server.xml"
            path.write_text("<Server><Service>", encoding="utf-8")

            with self.assertRaises(PreconditionError) as ctx:
                XmlDocument.load(path)
            self.assertIn("malformed XML", str(ctx.exception))

    def test_save_without_path(self):
        with self.assertRaises(ValueError):
            self.document.save()


if __name__ == '__main__':
    unittest.main()
