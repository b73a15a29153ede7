"""SCIM identity management plugin: group members and user groups from a SCIM v2 directory"""

__version__ = "1.0.0"
