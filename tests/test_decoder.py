"""Tests for status-gated response decoding"""

import logging

import httpx
import pytest

from scim_plugin.models.scim import Group, ListResponse, User
from scim_plugin.services.decoder import decode_response
from scim_plugin.utils.exceptions import (
    InvalidResponseError,
    ResponseBodyError,
    UnexpectedStatusError,
    find_cause,
    has_cause,
)
from tests.mock_scim_backend import EMPTY_RESPONSE, LIST_GROUPS_RESPONSE, LIST_USERS_RESPONSE


def test_decodes_matching_status_into_dict():
    response = httpx.Response(200, json=LIST_USERS_RESPONSE)
    assert decode_response("ListUsers", response, 200, dict) == LIST_USERS_RESPONSE


def test_decodes_list_response_with_extension_fields():
    response = httpx.Response(200, json=LIST_USERS_RESPONSE)
    users = decode_response("ListUsers", response, 200, ListResponse[User])
    assert users.totalResults == 1
    assert [u.displayName for u in users.Resources] == ["None"]
    # provider extensions survive as extra fields
    user = users.Resources[0]
    assert user.model_extra["urn:ietf:params:scim:schemas:extension:sap:2.0:User"]["userId"] == "P000011"


def test_decodes_groups():
    response = httpx.Response(200, json=LIST_GROUPS_RESPONSE)
    groups = decode_response("ListGroups", response, 200, ListResponse[Group])
    assert groups.Resources[0].displayName == "KeyAdmin"
    assert groups.Resources[0].members[0].type == "User"


def test_empty_list_is_not_an_error():
    response = httpx.Response(200, json=EMPTY_RESPONSE)
    assert decode_response("ListUsers", response, 200, ListResponse[User]).Resources == []


def test_invalid_json_is_a_body_error():
    response = httpx.Response(200, content=b"{not json")
    with pytest.raises(InvalidResponseError) as exc_info:
        decode_response("ListUsers", response, 200, ListResponse[User])

    assert exc_info.value.api_name == "ListUsers"
    assert "ListUsers" in str(exc_info.value)
    assert has_cause(exc_info.value, ResponseBodyError)
    assert not has_cause(exc_info.value, UnexpectedStatusError)


def test_wrong_shape_is_a_body_error():
    response = httpx.Response(200, json={"Resources": "not a list"})
    with pytest.raises(InvalidResponseError) as exc_info:
        decode_response("ListGroups", response, 200, ListResponse[Group])
    assert has_cause(exc_info.value, ResponseBodyError)


@pytest.mark.parametrize("status, body", [
    (404, b'{"detail": "not found"}'),
    (500, b"internal error"),
    (201, b'{"Resources": []}'),
])
def test_unexpected_status_regardless_of_body(status, body):
    response = httpx.Response(status, content=body)
    with pytest.raises(InvalidResponseError) as exc_info:
        decode_response("ListUsers", response, 200, ListResponse[User])

    cause = find_cause(exc_info.value, UnexpectedStatusError)
    assert cause is not None
    assert cause.response_status == status
    assert not has_cause(exc_info.value, ResponseBodyError)


def test_unexpected_status_logs_body_at_debug(caplog):
    response = httpx.Response(503, content=b"backend down")
    with caplog.at_level(logging.DEBUG, logger="scim_plugin.services.decoder"):
        with pytest.raises(InvalidResponseError):
            decode_response("ListGroups", response, 200, ListResponse[Group])

    records = [r for r in caplog.records if r.name == "scim_plugin.services.decoder"]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert "ListGroups" in records[0].getMessage()
    assert "backend down" in records[0].getMessage()


def test_unreadable_body_on_unexpected_status_is_swallowed():
    async def stream():
        yield b"never read"

    response = httpx.Response(500, content=stream())
    with pytest.raises(InvalidResponseError) as exc_info:
        decode_response("ListUsers", response, 200, ListResponse[User])
    assert has_cause(exc_info.value, UnexpectedStatusError)


@pytest.mark.parametrize("body", [
    {"Resources": None, "totalResults": 0},
    {"Resources": None, "totalResults": None, "startIndex": None, "schemas": None},
    {"totalResults": 0},
], ids=["null Resources", "all nulls", "absent Resources"])
def test_null_list_response_fields_decode_to_defaults(body):
    response = httpx.Response(200, json=body)
    users = decode_response("ListUsers", response, 200, ListResponse[User])

    assert users.Resources == []
    assert users.totalResults == 0
    assert users.startIndex == 1
    assert users.schemas == ["urn:ietf:params:scim:api:messages:2.0:ListResponse"]


def test_null_resource_lists_decode_to_defaults():
    response = httpx.Response(200, json={"Resources": [
        {"displayName": "KeyAdmin", "members": None, "schemas": None},
    ]})
    groups = decode_response("ListGroups", response, 200, ListResponse[Group])

    group = groups.Resources[0]
    assert group.displayName == "KeyAdmin"
    assert group.members == []
    assert group.schemas == ["urn:ietf:params:scim:schemas:core:2.0:Group"]

    response = httpx.Response(200, json={"Resources": [{"displayName": "A", "emails": None, "schemas": None}]})
    user = decode_response("ListUsers", response, 200, ListResponse[User]).Resources[0]
    assert user.emails == []
    assert user.schemas == ["urn:ietf:params:scim:schemas:core:2.0:User"]
