"""
Tomcat configuration generator for the clickstack.

Turns the resources bound to an application (databases, mail sessions,
session stores) and its runtime properties into conf/context.xml and
conf/server.xml entries.
"""

__version__ = "0.1.0"
