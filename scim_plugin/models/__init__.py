"""Data models for the SCIM identity management plugin"""

from .scim import User, Group, ListResponse, PageParams, SortParams, SCIMError, Meta, Email, Name
from .filters import FilterComparison, FilterOperator
from .plugin import (
    ConnectionParams,
    RequestParams,
    PluginConfig,
    GetUsersForGroupResponse,
    GetGroupsForUserResponse,
)

__all__ = [
    "User",
    "Group",
    "ListResponse",
    "PageParams",
    "SortParams",
    "SCIMError",
    "Meta",
    "Email",
    "Name",
    "FilterComparison",
    "FilterOperator",
    "ConnectionParams",
    "RequestParams",
    "PluginConfig",
    "GetUsersForGroupResponse",
    "GetGroupsForUserResponse",
]
