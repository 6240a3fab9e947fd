import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from kuekit.client import HTTPStatusError, auth_post_request, get, post, post_request


class _Handler(BaseHTTPRequestHandler):
    def _handle(self):
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""
        if self.path.startswith("/status/"):
            code = int(self.path.rsplit("/", 1)[1])
            payload = b"boom"
        else:
            code = 200
            payload = json.dumps(
                {
                    "method": self.command,
                    "path": self.path,
                    "body": body.decode(),
                    "content_type": self.headers.get("Content-Type"),
                    "custom": self.headers.get("X-Custom"),
                }
            ).encode()
        self.send_response(code)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    do_GET = _handle
    do_POST = _handle

    def log_message(self, *args):
        pass


@pytest.fixture
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def test_get_sends_json_header_and_body(base_url):
    result = json.loads(get(base_url + "/echo", b'{"a":1}'))
    assert result["method"] == "GET"
    assert result["body"] == '{"a":1}'
    assert result["content_type"] == "application/json"


def test_post_echoes_body(base_url):
    result = json.loads(post(base_url + "/items", b'{"name":"kue"}'))
    assert result["method"] == "POST"
    assert result["path"] == "/items"
    assert result["body"] == '{"name":"kue"}'


def test_status_500_raises(base_url):
    with pytest.raises(HTTPStatusError) as info:
        post(base_url + "/status/500", b"")
    assert info.value.status_code == 500
    assert info.value.body == b"boom"
    assert str(info.value).startswith("status error: 500")


def test_status_400_is_not_an_error(base_url):
    assert get(base_url + "/status/400") == b"boom"


def test_post_request_uses_given_headers(base_url):
    headers = {"Content-Type": "text/plain", "X-Custom": "yes"}
    result = json.loads(post_request(base_url + "/x", headers, b"hi"))
    assert result["content_type"] == "text/plain"
    assert result["custom"] == "yes"
    assert result["body"] == "hi"


def test_post_request_status_error(base_url):
    with pytest.raises(HTTPStatusError) as info:
        post_request(base_url + "/status/404", {}, b"")
    assert info.value.status_code == 404


def test_auth_post_request(base_url):
    result = json.loads(
        auth_post_request(base_url + "/oauth?", "my-client", client_secret="secret")
    )
    assert result["path"] == "/oauth?grant_type=client_credentials"
    assert result["body"] == "client_id=my-client&client_secret=secret"
    assert result["content_type"] == "application/x-www-form-urlencoded"


def test_auth_post_request_returns_body_on_error(base_url):
    assert auth_post_request(base_url + "/status/503?", "id", "secret") == b"boom"


def test_connection_refused():
    sock = socket.socket()
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    with pytest.raises(OSError):
        get(f"http://127.0.0.1:{port}/")