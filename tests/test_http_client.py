import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from krauler.http_client import FetchError, fetch_url


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/ok":
            self._reply(200, b"hello world")
        elif self.path == "/redirect":
            self.send_response(302)
            self.send_header("Location", "/ok")
            self.send_header("Content-Length", "0")
            self.end_headers()
        else:
            self._reply(404, b"nope")

    def _reply(self, status, body):
        self.send_response(status)
        self.send_header("Content-Type", "text/plain")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def server():
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    host, port = httpd.server_address[:2]
    yield f"{host}:{port}"
    httpd.shutdown()
    httpd.server_close()


def test_fetch_returns_body(server):
    assert fetch_url(f"http://{server}/ok") == "hello world"


def test_fetch_without_scheme(server):
    assert fetch_url(f"{server}/ok") == "hello world"


def test_fetch_follows_redirect(server):
    assert fetch_url(f"http://{server}/redirect") == "hello world"


def test_fetch_error_status_returns_body(server):
    assert fetch_url(f"http://{server}/missing") == "nope"


def test_fetch_connection_refused_raises():
    with pytest.raises(FetchError):
        fetch_url("http://127.0.0.1:1/")


def test_fetch_unsupported_scheme_raises():
    with pytest.raises(FetchError):
        fetch_url("gopher-nope://example.com/")