"""Request id resolution from headers and storage in the current context."""

from __future__ import annotations

import contextvars
import uuid
from collections.abc import Mapping

REQUEST_ID_HEADER = "X-Request-Id"

_request_id: contextvars.ContextVar[str] = contextvars.ContextVar("request_id")


def resolve_request_id(headers: Mapping[str, str]) -> str:
    """Return the X-Request-Id header value, or a new UUID when it is absent or empty.

    The header name is matched case-insensitively.
    """
    target = REQUEST_ID_HEADER.lower()
    value = next((v for name, v in headers.items() if name.lower() == target), "")
    return value or str(uuid.uuid4())


def set_request_id(request_id: str) -> contextvars.Token[str]:
    """Store the request id in the current context."""
    return _request_id.set(request_id)


def get_request_id() -> str:
    """Return the request id of the current context, or "" when none is set."""
    return _request_id.get("")