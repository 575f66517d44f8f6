"""Failure classifier for routing backend calls.

Maps transport faults and non-success responses onto ``DomainError`` kinds.
Whenever a response was received its status code decides the kind; transport
classification only applies when the server was never reached.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from tripclient.domain.constants import UNKNOWN_SERVER_MESSAGE
from tripclient.domain.exceptions import DomainError

_LOGGER = logging.getLogger("tripclient.routing")


def extract_server_message(response: httpx.Response) -> str:
    """Pull the human-readable ``message`` out of an error body."""
    try:
        body: Any = response.json()
    except ValueError:
        return UNKNOWN_SERVER_MESSAGE

    if not isinstance(body, dict):
        return UNKNOWN_SERVER_MESSAGE

    message = body.get("message")
    # validation pipes report one message per rejected field
    if isinstance(message, list):
        parts = [str(item).strip() for item in message if str(item).strip()]
        return "; ".join(parts) or UNKNOWN_SERVER_MESSAGE
    if message is None or not str(message).strip():
        return UNKNOWN_SERVER_MESSAGE
    return str(message).strip()


def classify_response(response: httpx.Response) -> DomainError:
    status = response.status_code
    if status == 400:
        return DomainError.validation(extract_server_message(response))
    if status == 404:
        return DomainError.not_found()
    if status >= 500:
        return DomainError.server_error()
    if 300 <= status < 500:
        return DomainError.generic(extract_server_message(response))
    return DomainError.generic()


def classify_failure(exc: BaseException) -> DomainError:
    if isinstance(exc, DomainError):
        return exc

    if isinstance(exc, httpx.HTTPStatusError):
        error = classify_response(exc.response)
    elif isinstance(exc, httpx.TimeoutException):
        error = DomainError.timeout()
    elif isinstance(exc, httpx.ConnectError):
        error = DomainError.network_unavailable()
    else:
        error = DomainError.generic()

    _LOGGER.debug(
        "routing call failed: %s -> %s",
        type(exc).__name__,
        error.kind.value,
    )
    return error


__all__ = ["classify_failure", "classify_response", "extract_server_message"]
