"""
Default attribute values and property whitelists for Tomcat resources.

The whitelists are the keys an operator may override through a resource's
``properties`` (or through the ``privateApp`` runtime section). Anything
outside them is dropped by the builder.
"""

from typing import Dict, FrozenSet

from clickstack.core.enums import ResourceType


# DataSource
DATASOURCE_TYPE = "javax.sql.DataSource"
DATASOURCE_FACTORY = "org.apache.tomcat.jdbc.pool.DataSourceFactory"
JNDI_JDBC_PREFIX = "jdbc/"
JDBC_URL_PREFIX = "jdbc:"

# Pool sizes stay within the 20 connections allowed on a shared MySQL database
DATABASE_POOL_DEFAULTS: Dict[str, str] = {
    "factory": DATASOURCE_FACTORY,
    "maxActive": "20",
    "maxIdle": "10",
    "minIdle": "1",
    "testOnBorrow": "true",
    "testWhileIdle": "true",
}
DATABASE_VALIDATION_INTERVAL_MS = "5000"

DATABASE_PROPERTY_WHITELIST: FrozenSet[str] = frozenset([
    # Commons DBCP attributes
    "minIdle", "maxIdle", "maxActive", "maxWait", "initialSize",
    "validationQuery", "validationQueryTimeout", "testOnBorrow", "testOnReturn",
    "timeBetweenEvictionRunsMillis", "numTestsPerEvictionRun", "minEvictableIdleTimeMillis", "testWhileIdle",
    "removeAbandoned", "removeAbandonedTimeout", "logAbandoned", "defaultAutoCommit", "defaultReadOnly",
    "defaultTransactionIsolation", "poolPreparedStatements", "maxOpenPreparedStatements", "defaultCatalog",
    "connectionInitSqls", "connectionProperties", "accessToUnderlyingConnectionAllowed",
    # Tomcat JDBC pool enhanced attributes
    "factory", "type", "validatorClassName", "initSQL", "jdbcInterceptors", "validationInterval", "jmxEnabled",
    "fairQueue", "abandonWhenPercentageFull", "maxAge", "useEquals", "suspectTimeout", "rollbackOnReturn",
    "commitOnReturn", "alternateUsernameAllowed", "useDisposableConnectionFacade", "logValidationErrors",
    "propagateInterruptState",
])

# Mail session
MAIL_SESSION_TYPE = "javax.mail.Session"

# Memcached session manager
SESSION_MANAGER_ATTRIBUTES: Dict[str, str] = {
    "className": "de.javakaffee.web.msm.MemcachedBackupSessionManager",
    "transcoderFactoryClass": "de.javakaffee.web.msm.serializer.kryo.KryoTranscoderFactory",
    "memcachedProtocol": "binary",
    "requestUriIgnorePattern": r".*\.(ico|png|gif|jpg|css|js)$",
    "sessionBackupAsync": "false",
    "sticky": "false",
}

PROPERTY_WHITELISTS: Dict[ResourceType, FrozenSet[str]] = {
    ResourceType.DATABASE: DATABASE_PROPERTY_WHITELIST,
    ResourceType.EMAIL: frozenset(),
    ResourceType.SESSION_STORE: frozenset(),
}

# Private application valve
PRIVATE_APP_SECTION = "privateApp"
PRIVATE_APP_SECRET_KEY = "secretKey"
PRIVATE_APP_VALVE_CLASS = "com.cloudbees.tomcat.valves.PrivateAppValve"
REMOTE_IP_VALVE_CLASS = "org.apache.catalina.valves.RemoteIpValve"
REMOTE_IP_VALVE_XPATH = f"//Valve[@className='{REMOTE_IP_VALVE_CLASS}']"

PRIVATE_APP_PROPERTY_WHITELIST: FrozenSet[str] = frozenset([
    "className", "secretKey",
    "authenticationEntryPointName",
    "authenticationParameterName", "authenticationHeaderName", "authenticationUri", "authenticationCookieName",
    "enabled", "realmName", "ignoredUriRegexp",
])


def get_property_whitelist(resource_type: ResourceType) -> FrozenSet[str]:
    """Get the override whitelist for a resource kind."""
    return PROPERTY_WHITELISTS[resource_type]
