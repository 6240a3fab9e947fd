"""Standard JSON response envelopes, returned as (status code, body) pairs."""

from __future__ import annotations

from typing import Any

HTTP_BAD_REQUEST = 400


def _format_response(message: str, data: Any, status: str, meta: Any = None) -> dict[str, Any]:
    response: dict[str, Any] = {"message": message, "data": data, "status": status}
    if meta is not None:
        response["pagination"] = meta
    return response


def response_formatter(code: int, message: str, body: Any) -> tuple[int, dict[str, Any]]:
    """Build a success response."""
    return code, _format_response(message, body, "success")


def response_formatter_with_meta(
    code: int, message: str, body: Any, meta: Any
) -> tuple[int, dict[str, Any]]:
    """Build a success response carrying pagination metadata."""
    return code, _format_response(message, body, "success", meta)


def response_error(
    code: int, message: str, err: BaseException | None
) -> tuple[int, dict[str, Any]]:
    """Build an error response; its message is the error's text."""
    error_message = str(err) if err is not None else ""
    return code, _format_response(error_message, None, "error")


def response_err_validation(
    message: str, err_map: dict[str, Any] | None
) -> tuple[int, dict[str, Any]]:
    """Build a 400 response listing validation errors."""
    return response_err_validation_with_code(message, err_map, HTTP_BAD_REQUEST)


def response_err_validation_with_code(
    message: str, err_map: dict[str, Any] | None, code: int
) -> tuple[int, dict[str, Any]]:
    """Build a validation error response with a chosen status code."""
    response = _format_response(message, None, "error")
    response["errors"] = err_map
    return code, response