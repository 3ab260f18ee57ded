"""
Tomcat configuration domain.

Default attribute values and override whitelists per resource kind.
"""

from .defaults import (
    DATABASE_POOL_DEFAULTS, DATABASE_VALIDATION_INTERVAL_MS, DATABASE_PROPERTY_WHITELIST,
    SESSION_MANAGER_ATTRIBUTES, PROPERTY_WHITELISTS,
    PRIVATE_APP_SECTION, PRIVATE_APP_SECRET_KEY, PRIVATE_APP_VALVE_CLASS,
    PRIVATE_APP_PROPERTY_WHITELIST, REMOTE_IP_VALVE_CLASS, REMOTE_IP_VALVE_XPATH,
    get_property_whitelist
)

__all__ = [
    'DATABASE_POOL_DEFAULTS',
    'DATABASE_VALIDATION_INTERVAL_MS',
    'DATABASE_PROPERTY_WHITELIST',
    'SESSION_MANAGER_ATTRIBUTES',
    'PROPERTY_WHITELISTS',
    'PRIVATE_APP_SECTION',
    'PRIVATE_APP_SECRET_KEY',
    'PRIVATE_APP_VALVE_CLASS',
    'PRIVATE_APP_PROPERTY_WHITELIST',
    'REMOTE_IP_VALVE_CLASS',
    'REMOTE_IP_VALVE_XPATH',
    'get_property_whitelist'
]
