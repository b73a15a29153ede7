"""Exceptions for the SCIM identity management plugin"""

from typing import Optional, Type, TypeVar


E = TypeVar("E", bound=BaseException)


class SCIMPluginError(Exception):
    """Base exception for the SCIM identity management plugin"""

    def __init__(self, message: str, status_code: int = 500, scim_type: str | None = None):
        self.message = message
        self.status_code = status_code
        self.scim_type = scim_type
        super().__init__(message)


# Response decoding

class ResponseBodyError(SCIMPluginError):
    """Response body could not be parsed into the expected type"""

    def __init__(self, detail: str):
        super().__init__(
            message=detail,
            status_code=502,
            scim_type="invalidResponse"
        )


class UnexpectedStatusError(SCIMPluginError):
    """Response status differs from the expected one"""

    def __init__(self, status_code: int, reason: str = ""):
        self.response_status = status_code
        self.reason = reason
        super().__init__(
            message=f"unexpected status code {status_code} {reason}".rstrip(),
            status_code=502,
            scim_type="unexpectedStatus"
        )


class InvalidResponseError(SCIMPluginError):
    """Any decode failure; the cause is a ResponseBodyError or UnexpectedStatusError"""

    def __init__(self, api_name: str, detail: str):
        self.api_name = api_name
        super().__init__(
            message=f"invalid response from {api_name}: {detail}",
            status_code=502,
            scim_type="invalidResponse"
        )


# SCIM client

class SCIMClientError(SCIMPluginError):
    """Error while querying the SCIM backend"""

    default_message = "SCIM request failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message=message or self.default_message,
            status_code=502,
            scim_type="upstream"
        )


class ListUsersError(SCIMClientError):
    default_message = "failed to list users"


class ListGroupsError(SCIMClientError):
    default_message = "failed to list groups"


# Plugin

class IdentityManagementError(SCIMPluginError):
    """Error surfaced across the host query boundary"""

    default_message = "identity management request failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message=message or self.default_message,
            status_code=502,
            scim_type="upstream"
        )


class GetUsersForGroupError(IdentityManagementError):
    default_message = "failed to get users for group"


class GetGroupsForUserError(IdentityManagementError):
    default_message = "failed to get groups for user"


class PluginConfigurationError(SCIMPluginError):
    """Plugin configuration is invalid"""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            status_code=400,
            scim_type="invalidValue"
        )


class PluginNotConfiguredError(SCIMPluginError):
    """A query was issued before the plugin was configured"""

    def __init__(self, message: str = "plugin is not configured"):
        super().__init__(
            message=message,
            status_code=503,
            scim_type="configuration"
        )


def find_cause(exc: BaseException, kind: Type[E]) -> Optional[E]:
    """Returns the first exception of the given kind in the cause chain, starting with exc itself"""
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, kind):
            return current
        seen.add(id(current))
        current = current.__cause__
    return None


def has_cause(exc: BaseException, kind: Type[BaseException]) -> bool:
    """Checks whether the cause chain of exc contains an exception of the given kind"""
    return find_cause(exc, kind) is not None
