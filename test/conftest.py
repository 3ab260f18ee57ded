"""
Shared pytest configuration and fixtures for the clickstack tests.
"""

import logging
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

import pytest
import structlog

from clickstack.metadata import Metadata, Database, Email, SessionStore
from clickstack.outils.xml_utils import XmlDocument


SERVER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Server port="8005" shutdown="SHUTDOWN">
  <Service name="Catalina">
    <Connector port="8080" protocol="HTTP/1.1"/>
    <Engine name="Catalina" defaultHost="localhost">
      <Valve className="org.apache.catalina.valves.RemoteIpValve" protocolHeader="x-forwarded-proto"/>
      <Host name="localhost" appBase="webapps"/>
    </Engine>
  </Service>
</Server>
"""

CONTEXT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Context>
    <WatchedResource>WEB-INF/web.xml</WatchedResource>
</Context>
"""

FIXED_TIME = datetime(2026, 10, 17, 12, 30, 0, tzinfo=timezone(timedelta(hours=2)))


def fixed_clock():
    return FIXED_TIME


@pytest.fixture
def server_document():
    return XmlDocument.from_string(SERVER_XML)


@pytest.fixture
def context_document():
    return XmlDocument.from_string(CONTEXT_XML)


@pytest.fixture
def mock_logger():
    return Mock()


@pytest.fixture
def database():
    return Database(
        name="mydb",
        url="mysql://host/db",
        username="u",
        password="p",
        driver_class_name="com.mysql.Driver",
        validation_query="SELECT 1",
        properties={"maxActive": "5"}
    )


@pytest.fixture
def email():
    return Email(name="mail/default", username="a@b.com", password="x", host="smtp.example.com")


@pytest.fixture
def session_store():
    return SessionStore(name="sessions", nodes="n1:host1:11211,n2:host2:11211", username="mc", password="secret")


@pytest.fixture
def metadata(database, email, session_store):
    return Metadata(
        resources={"mydb": database, "mail/default": email, "sessions": session_store},
        runtime_properties={"privateApp": {"secretKey": "s3cr3t"}}
    )


@pytest.fixture
def catalina_base(tmp_path):
    """A catalina.base directory holding the stock conf/ templates."""
    conf = tmp_path / "conf"
    conf.mkdir()
    (conf / "server.xml").write_text(SERVER_XML, encoding="utf-8")
    (conf / "context.xml").write_text(CONTEXT_XML, encoding="utf-8")
    return tmp_path


METADATA_YAML = """
resources:
  mydb:
    type: database
    url: mysql://host/db
    username: u
    password: p
    properties:
      maxActive: 5
      bogus: dropped
  mail/default:
    type: email
    username: a@b.com
    password: x
    host: smtp.example.com
runtime:
  privateApp:
    secretKey: s3cr3t
    enabled: true
"""


@pytest.fixture
def metadata_file(tmp_path):
    path = tmp_path / "metadata.yaml"
    path.write_text(METADATA_YAML, encoding="utf-8")
    return path


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo the logging setup done by the command line between tests."""
    yield
    structlog.reset_defaults()
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
