"""Utilities for the SCIM identity management plugin"""

from .exceptions import (
    SCIMPluginError,
    InvalidResponseError,
    ResponseBodyError,
    UnexpectedStatusError,
    SCIMClientError,
    ListUsersError,
    ListGroupsError,
    IdentityManagementError,
    GetUsersForGroupError,
    GetGroupsForUserError,
    PluginConfigurationError,
    PluginNotConfiguredError,
    find_cause,
    has_cause,
)

__all__ = [
    "SCIMPluginError",
    "InvalidResponseError",
    "ResponseBodyError",
    "UnexpectedStatusError",
    "SCIMClientError",
    "ListUsersError",
    "ListGroupsError",
    "IdentityManagementError",
    "GetUsersForGroupError",
    "GetGroupsForUserError",
    "PluginConfigurationError",
    "PluginNotConfiguredError",
    "find_cause",
    "has_cause",
]
