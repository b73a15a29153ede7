"""Identity management plugin backed by a SCIM directory"""

import logging
from dataclasses import dataclass
from typing import Optional

import httpx
import yaml
from pydantic import ValidationError

from ..models.plugin import (
    GetGroupsForUserResponse,
    GetUsersForGroupResponse,
    IdentityGroup,
    IdentityUser,
    PluginConfig,
    RequestParams,
)
from ..utils.exceptions import (
    GetGroupsForUserError,
    GetUsersForGroupError,
    ListGroupsError,
    ListUsersError,
    PluginConfigurationError,
    PluginNotConfiguredError,
)
from .client import SCIMClient
from .filter_builder import (
    DEFAULT_GROUPS_FILTER_ATTRIBUTE,
    DEFAULT_USERS_FILTER_ATTRIBUTE,
    build_filter,
)


@dataclass(frozen=True)
class PluginContext:
    """Configured state shared by all queries; replaced as a whole, never mutated"""
    client: SCIMClient
    request_params: RequestParams


class IdentityManagementPlugin:
    """
    Answers "users of a group" and "groups of a user" from a SCIM backend.

    The plugin has to be configured once before any query, either through
    the constructor or through configure(). Queries only read the context,
    so concurrent calls need no locking.
    """

    def __init__(
        self,
        config: Optional[PluginConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.logger = logging.getLogger(__name__)
        self._transport = transport
        self._context: Optional[PluginContext] = None
        if config is not None:
            self._context = self._build_context(config)

    def set_logger(self, logger: logging.Logger):
        self.logger = logger

    @property
    def configured(self) -> bool:
        return self._context is not None

    async def configure(self, yaml_configuration: str):
        """Parses the YAML configuration and (re)creates the SCIM client"""
        self.logger.info("Configuring plugin")

        try:
            raw = yaml.safe_load(yaml_configuration)
        except yaml.YAMLError as e:
            raise PluginConfigurationError(f"failed to parse yaml configuration: {e}") from e

        try:
            config = PluginConfig.model_validate(raw if raw is not None else {})
        except ValidationError as e:
            raise PluginConfigurationError(f"invalid plugin configuration: {e}") from e

        previous = self._context
        self._context = self._build_context(config)
        if previous is not None:
            await previous.client.close()

    async def close(self):
        """Closes the SCIM client; the plugin has to be configured again before the next query"""
        context, self._context = self._context, None
        if context is not None:
            await context.client.close()

    async def get_users_for_group(
        self,
        group_id: str,
        deadline: Optional[float] = None
    ) -> GetUsersForGroupResponse:
        """Returns the users matching group_id, in backend order"""
        context = self._require_context()
        filter = build_filter(
            DEFAULT_GROUPS_FILTER_ATTRIBUTE,
            group_id,
            context.request_params.group_attribute
        )
        try:
            users = await context.client.list_users(True, filter, None, None, deadline=deadline)
        except ListUsersError as e:
            raise GetUsersForGroupError(f"{GetUsersForGroupError.default_message}: {e.message}") from e

        return GetUsersForGroupResponse(
            users=[IdentityUser(name=user.displayName or "") for user in users.Resources]
        )

    async def get_groups_for_user(
        self,
        user_id: str,
        deadline: Optional[float] = None
    ) -> GetGroupsForUserResponse:
        """Returns the groups matching user_id, in backend order"""
        context = self._require_context()
        filter = build_filter(
            DEFAULT_USERS_FILTER_ATTRIBUTE,
            user_id,
            context.request_params.user_attribute
        )
        try:
            groups = await context.client.list_groups(True, filter, None, None, deadline=deadline)
        except ListGroupsError as e:
            raise GetGroupsForUserError(f"{GetGroupsForUserError.default_message}: {e.message}") from e

        return GetGroupsForUserResponse(
            groups=[IdentityGroup(name=group.displayName or "") for group in groups.Resources]
        )

    def _build_context(self, config: PluginConfig) -> PluginContext:
        return PluginContext(
            client=SCIMClient(config.connect_cfg, transport=self._transport),
            request_params=config.request_params
        )

    def _require_context(self) -> PluginContext:
        if self._context is None:
            raise PluginNotConfiguredError()
        return self._context
