from __future__ import annotations

import base64
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import TYPE_CHECKING

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


class _TestRequestHandler(BaseHTTPRequestHandler):
    """Serve the endpoints used by the end-to-end tests."""

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        pass

    def _reply(self, status: int, text: str = "", location: str | None = None) -> None:
        data = text.encode("utf-8")
        self.send_response(status)
        if location is not None:
            self.send_header("Location", location)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(data)

    def do_HEAD(self) -> None:
        self.do_GET()

    def do_GET(self) -> None:
        if self.path == "/download":
            self._reply(200, "this is a response")
        elif self.path == "/redirect":
            self._reply(301, location="/chain-end")
        elif self.path == "/chain-start":
            self._reply(302, location="/chain-middle")
        elif self.path == "/chain-middle":
            self._reply(302, location="/chain-end")
        elif self.path == "/chain-end":
            self._reply(200, "final resource")
        elif self.path == "/debug-header-response":
            headers = [f"{k}={v}" for k, v in self.headers.items() if k.startswith("Debug")]
            self._reply(200, " ".join(headers))
        elif self.path == "/debug-basicauth":
            scheme, _, token = self.headers.get("Authorization", "").partition(" ")
            if scheme != "Basic":
                self._reply(400, "Basic auth missing/malformed")
                return
            self._reply(200, base64.b64decode(token).decode("utf-8").replace(":", "=", 1))
        else:
            self._reply(404, "not found")

    def do_POST(self) -> None:
        length = int(self.headers.get("Content-Length", "0"))
        data = self.rfile.read(length)
        if self.path == "/upload":
            self._reply(200, f"JSON request received: {len(data)} bytes")
        elif self.path == "/content-type":
            self._reply(200, self.headers.get("Content-Type", ""))
        else:
            self._reply(404, "not found")


@pytest.fixture
def http_server() -> Generator[str, None, None]:
    """Start a local HTTP server and return its base URL."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _TestRequestHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join()


@pytest.fixture
def make_transport() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.MockTransport]:
    """Create ``httpx.MockTransport`` objects that record the requests
    they receive in a ``requests`` attribute."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.MockTransport:
        requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        transport = httpx.MockTransport(_handler)
        transport.requests = requests
        return transport

    return _make
