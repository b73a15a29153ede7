"""Decoding of upstream SCIM responses"""

import logging
from functools import lru_cache
from typing import Any, Type, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from ..utils.exceptions import InvalidResponseError, ResponseBodyError, UnexpectedStatusError


logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=32)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode_response(
    api_name: str,
    response: httpx.Response,
    expected_status: int,
    target: Type[T]
) -> T:
    """
    Decodes the response body into target when the status matches.

    Any failure is raised as InvalidResponseError whose cause is either a
    ResponseBodyError (the body did not parse into target) or an
    UnexpectedStatusError. On a status mismatch the raw body is logged at
    debug level and is never parsed.
    """
    if response.status_code == expected_status:
        try:
            return _adapter(target).validate_json(response.content)
        except (ValidationError, httpx.ResponseNotRead) as e:
            cause = ResponseBodyError(str(e))
            cause.__cause__ = e
            raise InvalidResponseError(api_name, cause.message) from cause

    cause = UnexpectedStatusError(response.status_code, response.reason_phrase)
    logger.debug(f"body of unexpected response from {api_name}: {_read_body(response)}")
    raise InvalidResponseError(api_name, cause.message) from cause


def _read_body(response: httpx.Response) -> str:
    """Best-effort body read for diagnostics"""
    try:
        return response.text
    except (httpx.ResponseNotRead, UnicodeDecodeError, LookupError):
        return ""
