"""HTTP client for querying the upstream SCIM API"""

import asyncio
import logging
from typing import Any, Dict, Optional, Type

import httpx

from ..config import settings
from ..models.filters import FilterComparison
from ..models.plugin import ConnectionParams
from ..models.scim import Group, ListResponse, PageParams, SCIMSchema, SortParams, User
from ..utils.exceptions import InvalidResponseError, ListGroupsError, ListUsersError, SCIMClientError
from .decoder import decode_response


logger = logging.getLogger(__name__)

USERS_ENDPOINT = "/Users"
GROUPS_ENDPOINT = "/Groups"
SEARCH_SUFFIX = "/.search"


class SCIMClient:
    """Read-only client for the Users and Groups list endpoints of a SCIM v2 API"""

    def __init__(
        self,
        params: ConnectionParams,
        timeout: Optional[float] = None,
        max_connections: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.params = params
        self.client: Optional[httpx.AsyncClient] = None
        self._setup_client(timeout, max_connections, transport)

    def _setup_client(
        self,
        timeout: Optional[float],
        max_connections: Optional[int],
        transport: Optional[httpx.AsyncBaseTransport]
    ):
        """Sets up the HTTP client; the host is only contacted on the first query"""
        self.client = httpx.AsyncClient(
            auth=httpx.BasicAuth(
                self.params.client_id,
                self.params.client_secret.get_secret_value()
            ),
            timeout=timeout if timeout is not None else settings.upstream_timeout,
            limits=httpx.Limits(
                max_connections=max_connections or settings.upstream_max_connections,
                max_keepalive_connections=20
            ),
            headers=self._prepare_headers(),
            follow_redirects=True,
            transport=transport
        )

    async def close(self):
        """Closes the HTTP client"""
        if self.client:
            await self.client.aclose()

    async def __aenter__(self) -> "SCIMClient":
        return self

    async def __aexit__(self, *args):
        await self.close()

    async def list_users(
        self,
        include_inactive: bool,
        filter: Optional[FilterComparison],
        page_params: Optional[PageParams] = None,
        sort_params: Optional[SortParams] = None,
        deadline: Optional[float] = None
    ) -> ListResponse[User]:
        """Lists users matching the filter; inactive users are excluded unless requested"""
        query = filter.to_query() if filter else None
        if not include_inactive:
            query = f"{query} and active eq true" if query else "active eq true"

        return await self._list(
            USERS_ENDPOINT,
            "ListUsers",
            ListResponse[User],
            ListUsersError,
            query,
            page_params,
            sort_params,
            deadline
        )

    async def list_groups(
        self,
        include_inactive: bool,
        filter: Optional[FilterComparison],
        page_params: Optional[PageParams] = None,
        sort_params: Optional[SortParams] = None,
        deadline: Optional[float] = None
    ) -> ListResponse[Group]:
        """Lists groups matching the filter; groups have no active flag so include_inactive has no effect"""
        return await self._list(
            GROUPS_ENDPOINT,
            "ListGroups",
            ListResponse[Group],
            ListGroupsError,
            filter.to_query() if filter else None,
            page_params,
            sort_params,
            deadline
        )

    async def _list(
        self,
        endpoint: str,
        api_name: str,
        target: Any,
        error_class: Type[SCIMClientError],
        query: Optional[str],
        page_params: Optional[PageParams],
        sort_params: Optional[SortParams],
        deadline: Optional[float]
    ):
        try:
            request = self._build_request(endpoint, query, page_params, sort_params)
            logger.debug(f"{api_name}: {request.method} {request.url} filter={query!r}")
            response = await asyncio.wait_for(self.client.send(request), timeout=deadline)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise error_class(f"{error_class.default_message}: request to {self.params.host} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise error_class(f"{error_class.default_message}: deadline of {deadline}s exceeded") from e

        try:
            return decode_response(api_name, response, httpx.codes.OK, target)
        except InvalidResponseError as e:
            raise error_class(f"{error_class.default_message}: {e}") from e

    def _build_request(
        self,
        endpoint: str,
        query: Optional[str],
        page_params: Optional[PageParams],
        sort_params: Optional[SortParams]
    ) -> httpx.Request:
        """Builds a list request, as a .search POST or a GET with query parameters"""
        params: Dict[str, Any] = {}
        if query is not None:
            params["filter"] = query
        if page_params:
            params.update(page_params.to_query())
        if sort_params:
            params.update(sort_params.to_query())

        base = self.params.host.rstrip("/")
        if self.params.search_method == "POST":
            body = {"schemas": [SCIMSchema.SEARCH_REQUEST.value], **params}
            return self.client.build_request(
                "POST",
                f"{base}{endpoint}{SEARCH_SUFFIX}",
                json=body,
                headers={"Content-Type": "application/scim+json"}
            )
        return self.client.build_request("GET", f"{base}{endpoint}", params=params)

    @staticmethod
    def _prepare_headers() -> Dict[str, str]:
        """Default headers for upstream requests"""
        return {
            "Accept": "application/scim+json",
            "User-Agent": "SCIM-IdM-Plugin/1.0.0",
        }
