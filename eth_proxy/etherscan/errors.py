"""Failure normalization for the Etherscan client.

Centralizes how every failure origin is turned into an InvocationFailure:
1. Transport failures (connection, timeout, non-2xx, payload read) take the
   status listed in TRANSPORT_FAILURE_STATUS
2. Decode failures (body matches no known envelope) are internal errors
"""

import asyncio
from http import HTTPStatus
from typing import Optional, Tuple, Type

import aiohttp
from pydantic import ValidationError

from eth_proxy.core.types import InvocationFailure


# Transport failure origin -> HTTP status, most specific first.
# ClientResponseError carries its own status and is resolved before this table.
TRANSPORT_FAILURE_STATUS: Tuple[Tuple[Type[BaseException], HTTPStatus], ...] = (
    (asyncio.TimeoutError, HTTPStatus.GATEWAY_TIMEOUT),
    (aiohttp.ServerTimeoutError, HTTPStatus.GATEWAY_TIMEOUT),
    (aiohttp.ClientPayloadError, HTTPStatus.BAD_REQUEST),
    (aiohttp.ClientConnectionError, HTTPStatus.BAD_GATEWAY),
    (aiohttp.ClientError, HTTPStatus.INTERNAL_SERVER_ERROR),
)


def transport_status(error: BaseException) -> int:
    """Status code for a transport failure.

    Uses the status carried by the error when it has one (a completed
    response with a non-2xx status), else the first matching table entry,
    else 500.
    """
    if isinstance(error, aiohttp.ClientResponseError) and error.status:
        return error.status
    for origin, status in TRANSPORT_FAILURE_STATUS:
        if isinstance(error, origin):
            return status
    return HTTPStatus.INTERNAL_SERVER_ERROR


def describe_transport_error(error: BaseException) -> str:
    """Textual description of a transport failure.

    Non-2xx responses are described by their reason phrase only, so the
    request URL (which holds the API key) never reaches the caller.
    """
    if isinstance(error, aiohttp.ClientResponseError):
        if error.message:
            return error.message
        try:
            return HTTPStatus(error.status).phrase
        except ValueError:
            return f"HTTP {error.status}"
    return str(error) or type(error).__name__


def from_transport_error(error: BaseException) -> InvocationFailure:
    return InvocationFailure(transport_status(error), describe_transport_error(error))


def describe_decode_error(error: ValidationError, shape: Optional[str] = None) -> str:
    """Textual description of a body that failed to decode.

    Invalid JSON is reported as such; a structural mismatch names the first
    offending field, or the expected shape for untagged unions.
    """
    errors = error.errors()
    if not errors:
        return str(error)
    first = errors[0]
    if first.get("type") == "json_invalid":
        return first["msg"]
    if shape:
        return f"data did not match any variant of {shape}"
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first['msg']}" if loc else first["msg"]


def from_decode_error(error: ValidationError, shape: Optional[str] = None) -> InvocationFailure:
    return InvocationFailure.failure(describe_decode_error(error, shape))
