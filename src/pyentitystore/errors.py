"""Normalization of endpoint failures into readable messages."""

from __future__ import annotations

import inspect
import json
import logging
from collections.abc import Mapping
from typing import Any, NoReturn

from pyentitystore.config import DEFAULT_ERROR_MESSAGE
from pyentitystore.exceptions import ApiCallError

_logger = logging.getLogger(__name__)


def _message_from_payload(payload: Any) -> str | None:
    if isinstance(payload, (bytes, bytearray)):
        payload = payload.decode("utf-8", errors="replace")
    if isinstance(payload, str):
        if not payload.strip():
            return None
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError:
            return None
    if isinstance(payload, Mapping):
        message = payload.get("message")
        if message:
            return str(message)
    return None


async def _message_from_response(response: Any) -> str | None:
    read_json = getattr(response, "json", None)
    if not callable(read_json):
        return None
    try:
        payload = read_json()
        if inspect.isawaitable(payload):
            payload = await payload
    except Exception:  # noqa: BLE001
        _logger.debug("Could not decode error response body", exc_info=True)
        return None
    return _message_from_payload(payload)


async def get_error_message(error: Any, default_message: str = DEFAULT_ERROR_MESSAGE) -> str:
    """Extract the most useful human-readable message from *error*.

    Preference order:

    1. ``message`` of a structured response body, either pre-read
       (``error.body``, as generated clients and :class:`ResponseError` keep it)
       or read from ``error.response.json()``;
    2. the exception's own text;
    3. a JSON rendering of whatever was raised or rejected.

    A falsy *error* yields *default_message*.
    """
    if not error:
        return default_message

    message = _message_from_payload(getattr(error, "body", None))
    if message is None and getattr(error, "response", None) is not None:
        message = await _message_from_response(error.response)
    if message is not None:
        return message

    if isinstance(error, BaseException):
        return str(error) or type(error).__name__

    return json.dumps(error, default=str)


async def handle_error(
    error: Any,
    *,
    endpoint: str = "",
    default_message: str = DEFAULT_ERROR_MESSAGE,
) -> NoReturn:
    """Log *error* and re-raise it as a single :class:`ApiCallError`."""
    message = await get_error_message(error, default_message)
    exc_info = error if isinstance(error, BaseException) else None
    _logger.error("Error message: %s", message, exc_info=exc_info)
    cause = error if isinstance(error, BaseException) else None
    raise ApiCallError(message, endpoint=endpoint) from cause
