from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Mapping, FrozenSet, Tuple

from clickstack.config import GeneratorConfig
from clickstack.config.tomcat import defaults
from clickstack.core.enums import ResourceType
from clickstack.core.exceptions import ConfigurationError
from clickstack.metadata import Metadata, Resource, Database, Email, SessionStore
from clickstack.outils.xml_utils import XmlDocument
from clickstack.logger import get_clickstack_logger

from .files import check_catalina_base, resolve_config_file


TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def _local_now() -> datetime:
	return datetime.now().astimezone()


class ContextXmlBuilder:
	"""
	The ContextXmlBuilder writes the resources of a deployment into the
	Tomcat configuration files.

	Databases, mail sessions and session stores become elements of
	``conf/context.xml``; the private application valve, when the
	``privateApp`` runtime section is configured, goes into
	``conf/server.xml`` right after the RemoteIpValve.

	Every element starts from fixed attributes and defaults, then the
	resource's whitelisted properties are applied on top so that operator
	overrides win. Properties outside the whitelist are logged and dropped.
	"""
	def __init__(self, metadata: Metadata, config: GeneratorConfig = None,
	             logger=None, clock: Callable[[], datetime] = _local_now):
		"""
		Parameters
		----------
		metadata: `Metadata`
			The resources and runtime properties of the deployment
		config: `GeneratorConfig`, optional
			Generator settings. Defaults to GeneratorConfig().
		logger: optional
			Logger used for progress and dropped properties. Defaults to
			the package logger bound to this component.
		clock: callable, optional
			Returns the timezone aware time stamped into generated files.
		"""
		self.metadata = metadata
		self.config = config or GeneratorConfig()
		self.logger = logger if logger is not None else get_clickstack_logger().bind(component="ContextXmlBuilder")
		self.clock = clock

		self._resource_builders: Dict[ResourceType, Callable] = {
			ResourceType.DATABASE: self.add_database,
			ResourceType.EMAIL: self.add_email,
			ResourceType.SESSION_STORE: self.add_session_store,
		}

	def _apply_overrides(self, attributes: Dict[str, str], properties: Mapping[str, str],
	                     whitelist: FrozenSet[str], label: str):
		for key, value in properties.items():
			if key in whitelist:
				attributes[key] = value
			else:
				self.logger.debug(f"{label}: ignore unknown property '{key}'")

	def add_database(self, database: Database, server_document: XmlDocument,
	                 context_document: XmlDocument):
		self.logger.info("Insert DataSource", name=database.name, url=database.url)
		attributes = {
			"name": defaults.JNDI_JDBC_PREFIX + database.name,
			"auth": "Container",
			"type": defaults.DATASOURCE_TYPE,
			"url": defaults.JDBC_URL_PREFIX + database.url,
			"driverClassName": database.driver_class_name,
			"username": database.username,
			"password": database.password,
		}
		attributes.update(defaults.DATABASE_POOL_DEFAULTS)
		attributes["validationQuery"] = database.validation_query
		attributes["validationInterval"] = defaults.DATABASE_VALIDATION_INTERVAL_MS

		self._apply_overrides(attributes, database.properties,
		                      defaults.get_property_whitelist(ResourceType.DATABASE), "datasource")

		element = context_document.create_element("Resource", attributes)
		return context_document.append_child(element)

	def add_email(self, email: Email, server_document: XmlDocument,
	              context_document: XmlDocument):
		self.logger.info("Add MailSession", user=email.username)
		attributes = {
			"name": email.name,
			"auth": "Container",
			"type": defaults.MAIL_SESSION_TYPE,
			"mail.smtp.user": email.username,
			"mail.smtp.password": email.password,
			"mail.smtp.host": email.host,
			"mail.smtp.auth": "true",
		}
		self._apply_overrides(attributes, email.properties,
		                      defaults.get_property_whitelist(ResourceType.EMAIL), "mail session")

		element = context_document.create_element("Resource", attributes)
		return context_document.append_child(element)

	def add_session_store(self, store: SessionStore, server_document: XmlDocument,
	                      context_document: XmlDocument):
		self.logger.info("Add Memcache SessionStore", nodes=store.nodes)
		attributes = dict(defaults.SESSION_MANAGER_ATTRIBUTES)
		attributes["memcachedNodes"] = store.nodes
		attributes["username"] = store.username
		attributes["password"] = store.password

		self._apply_overrides(attributes, store.properties,
		                      defaults.get_property_whitelist(ResourceType.SESSION_STORE), "session store")

		element = context_document.create_element("Manager", attributes)
		return context_document.append_child(element)

	def add_private_app_valve(self, server_document: XmlDocument):
		"""
		Insert the PrivateAppValve after the RemoteIpValve of server.xml.

		Does nothing when the ``privateApp`` runtime section is absent. A
		present section without a ``secretKey`` is a configuration error.
		"""
		section = defaults.PRIVATE_APP_SECTION
		properties = self.metadata.get_runtime_property(section)
		if properties is None:
			return None

		self.logger.info("Insert PrivateAppValve")
		attributes = {"className": defaults.PRIVATE_APP_VALVE_CLASS}
		self._apply_overrides(attributes, properties,
		                      defaults.PRIVATE_APP_PROPERTY_WHITELIST, "privateAppValve")

		secret_key = defaults.PRIVATE_APP_SECRET_KEY
		if not attributes.get(secret_key):
			raise ConfigurationError(
				f"{section}.{secret_key}",
				reason=f"invalid '{section}' configuration, '{section}.{secret_key}' is missing"
			)

		remote_ip_valve = server_document.find_unique(defaults.REMOTE_IP_VALVE_XPATH)
		valve = server_document.create_element("Valve", attributes)
		return server_document.insert_sibling_after(valve, remote_ip_valve)

	def build_tomcat_configuration(self, server_document: XmlDocument, context_document: XmlDocument):
		"""Stamp both documents, add every resource in order, then the private app valve."""
		timestamp = self.clock().strftime(TIMESTAMP_FORMAT)
		message = f"File generated by {self.config.tool_name} at {timestamp}"

		server_document.add_header_comment(message)
		context_document.add_header_comment(message)

		for name, resource in self.metadata.resources.items():
			builder = None
			if isinstance(resource, Resource):
				builder = self._resource_builders.get(resource.resource_type)
			if builder is None:
				self.logger.debug("Skip unsupported resource", name=name, kind=type(resource).__name__)
				continue
			builder(resource, server_document, context_document)

		self.add_private_app_valve(server_document)

	def build_tomcat_configuration_files(self, catalina_base) -> Tuple[Path, Path]:
		"""
		Update conf/context.xml and conf/server.xml below ``catalina_base``.

		Returns
		-------
		Tuple[Path, Path]
			The context.xml and server.xml paths that were written
		"""
		catalina_base = check_catalina_base(catalina_base)

		context_xml_path = resolve_config_file(catalina_base, self.config.context_xml_path)
		context_document = XmlDocument.load(context_xml_path)
		context_document.check_root_element(self.config.context_root_tag)

		server_xml_path = resolve_config_file(catalina_base, self.config.server_xml_path)
		server_document = XmlDocument.load(server_xml_path)

		self.build_tomcat_configuration(server_document, context_document)

		context_document.save(context_xml_path)
		server_document.save(server_xml_path)
		self.logger.info("Tomcat configuration written",
		                 context_xml=str(context_xml_path), server_xml=str(server_xml_path))
		return context_xml_path, server_xml_path
