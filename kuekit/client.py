"""Small blocking HTTP client helpers with a 30 second timeout."""

from __future__ import annotations

import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Mapping

TIMEOUT = 30.0
DEFAULT_HEADERS = {"Content-Type": "application/json"}


class HTTPStatusError(Exception):
    """The server answered with a status code above 400."""

    def __init__(self, status_code: int, body: bytes) -> None:
        super().__init__(f"status error: {status_code} {body.decode('utf-8', errors='replace')}")
        self.status_code = status_code
        self.body = body


def _is_status_error(status_code: int) -> bool:
    return status_code > 400


def _send(method: str, url: str, headers: Mapping[str, str], body: bytes) -> tuple[int, bytes]:
    request = urllib.request.Request(url, data=body, method=method, headers=dict(headers))
    try:
        with urllib.request.urlopen(request, timeout=TIMEOUT) as response:
            return response.status, response.read()
    except urllib.error.HTTPError as exc:
        try:
            return exc.code, exc.read()
        finally:
            exc.close()


def _checked(method: str, url: str, headers: Mapping[str, str], body: bytes | None) -> bytes:
    status, content = _send(method, url, headers, body or b"")
    if _is_status_error(status):
        raise HTTPStatusError(status, content)
    return content


def get(url: str, body: bytes | None = None) -> bytes:
    """Send a JSON GET request and return the response body."""
    return _checked("GET", url, DEFAULT_HEADERS, body)


def post(url: str, body: bytes | None = None) -> bytes:
    """Send a JSON POST request and return the response body."""
    return _checked("POST", url, DEFAULT_HEADERS, body)


def post_request(url: str, headers: Mapping[str, str], body: bytes | None = None) -> bytes:
    """Send a POST request with the given headers and return the response body."""
    return _checked("POST", url, headers, body)


def auth_post_request(url: str, client_id: str, client_secret: str) -> bytes:
    """Request client-credentials authorisation and return the raw response body.

    "grant_type=client_credentials" is appended to url; the body is form
    encoded. The body is returned whatever the status code.
    """
    form = urllib.parse.urlencode(
        [("client_id", client_id), ("client_secret", client_secret)]
    ).encode()
    headers = {"Content-Type": "application/x-www-form-urlencoded"}
    _, content = _send("POST", url + "grant_type=client_credentials", headers, form)
    return content