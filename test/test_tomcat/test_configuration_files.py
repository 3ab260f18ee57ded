"""
Integration tests for writing conf/context.xml and conf/server.xml.
"""

import pytest

from clickstack.config import GeneratorConfig
from clickstack.core.exceptions import PreconditionError, ConfigurationError
from clickstack.metadata import Metadata
from clickstack.outils.xml_utils import XmlDocument
from clickstack.tomcat import ContextXmlBuilder


@pytest.mark.integration
class TestBuildTomcatConfigurationFiles:

    def test_files_are_rewritten(self, catalina_base, metadata, clock):
        builder = ContextXmlBuilder(metadata, clock=clock)

        context_xml, server_xml = builder.build_tomcat_configuration_files(catalina_base)

        assert context_xml == catalina_base / "conf" / "context.xml"
        assert server_xml == catalina_base / "conf" / "server.xml"

        context_document = XmlDocument.load(context_xml)
        resources = context_document.find_all("/Context/Resource")
        assert [r.get("name") for r in resources] == ["jdbc/mydb", "mail/default"]
        assert len(context_document.find_all("/Context/Manager")) == 1
        # the template content survives
        assert len(context_document.find_all("/Context/WatchedResource")) == 1

        server_document = XmlDocument.load(server_xml)
        valve = server_document.find_unique("//Valve[@className='com.cloudbees.tomcat.valves.PrivateAppValve']")
        assert valve.get("secretKey") == "s3cr3t"

        text = context_xml.read_text(encoding="utf-8")
        assert "File generated by tomcat-clickstack at 2026-10-17T12:30:00+0200" in text

    def test_accepts_string_path(self, catalina_base, clock):
        ContextXmlBuilder(Metadata(), clock=clock).build_tomcat_configuration_files(str(catalina_base))

        assert "File generated by" in (catalina_base / "conf" / "server.xml").read_text(encoding="utf-8")

    def test_custom_tool_name(self, catalina_base, clock):
        config = GeneratorConfig(tool_name="my-stack")

        ContextXmlBuilder(Metadata(), config=config, clock=clock).build_tomcat_configuration_files(catalina_base)

        assert "File generated by my-stack at" in (catalina_base / "conf" / "context.xml").read_text(encoding="utf-8")

    def test_missing_catalina_base(self, tmp_path):
        with pytest.raises(PreconditionError, match="does not exist"):
            ContextXmlBuilder(Metadata()).build_tomcat_configuration_files(tmp_path / "nowhere")

    def test_catalina_base_is_a_file(self, tmp_path):
        path = tmp_path / "file"
        path.write_text("", encoding="utf-8")

        with pytest.raises(PreconditionError, match="is not a directory"):
            ContextXmlBuilder(Metadata()).build_tomcat_configuration_files(path)

    def test_missing_context_xml(self, catalina_base):
        (catalina_base / "conf" / "context.xml").unlink()

        with pytest.raises(PreconditionError, match="context.xml"):
            ContextXmlBuilder(Metadata()).build_tomcat_configuration_files(catalina_base)

    def test_missing_server_xml(self, catalina_base):
        (catalina_base / "conf" / "server.xml").unlink()

        with pytest.raises(PreconditionError, match="server.xml"):
            ContextXmlBuilder(Metadata()).build_tomcat_configuration_files(catalina_base)

    def test_wrong_context_root_element(self, catalina_base):
        context_xml = catalina_base / "conf" / "context.xml"
        context_xml.write_text("<Server/>", encoding="utf-8")

        with pytest.raises(PreconditionError, match="expected <Context>"):
            ContextXmlBuilder(Metadata()).build_tomcat_configuration_files(catalina_base)

        assert context_xml.read_text(encoding="utf-8") == "<Server/>"

    def test_configuration_error_leaves_files_untouched(self, catalina_base):
        metadata = Metadata(runtime_properties={"privateApp": {}})
        server_xml = catalina_base / "conf" / "server.xml"
        original = server_xml.read_text(encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ContextXmlBuilder(metadata).build_tomcat_configuration_files(catalina_base)

        assert server_xml.read_text(encoding="utf-8") == original
