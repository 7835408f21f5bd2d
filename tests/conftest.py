"""
Pytest configuration and shared fixtures for the VMware as a Service SDK tests.

Provides an in-process HTTP server that records every request and replays
queued responses, so operations can be exercised end to end without a
live endpoint.
"""

import json
import os
import tempfile
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from threading import Thread
from typing import Any, Deque, Dict, Generator, List, Optional
from urllib.parse import parse_qs, urlsplit

import pytest

from vmwaas.sdk.authenticators import NoAuthAuthenticator
from vmwaas.sdk.service import VmwareV1


@dataclass
class MockResponse:
    """Response the mock server sends for one request."""
    status: int = 200
    body: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)
    delay: float = 0.0


@dataclass
class RecordedRequest:
    """Request as observed by the mock server."""
    method: str
    path: str
    query: Dict[str, List[str]]
    headers: Dict[str, str]
    body: bytes

    def header(self, name: str) -> Optional[str]:
        for key, value in self.headers.items():
            if key.lower() == name.lower():
                return value
        return None

    def json(self) -> Any:
        return json.loads(self.body.decode("utf-8"))


class MockServer:
    """
    Threaded HTTP server serving queued responses.

    Responses are consumed in order; once the queue is empty the server
    answers 200 with an empty JSON object.
    """

    def __init__(self):
        self.requests: List[RecordedRequest] = []
        self._responses: Deque[MockResponse] = deque()
        self._lock = threading.Lock()
        self._server: Optional[ThreadingHTTPServer] = None
        self._thread: Optional[Thread] = None

    @property
    def url(self) -> str:
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}"

    def enqueue(
        self,
        status: int = 200,
        json_body: Any = None,
        body: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
        delay: float = 0.0,
    ) -> None:
        """Queue the next response; ``json_body`` sets a JSON content type."""
        response_headers = dict(headers or {})
        if json_body is not None:
            body = json.dumps(json_body).encode("utf-8")
            response_headers.setdefault("Content-Type", "application/json")
        with self._lock:
            self._responses.append(
                MockResponse(status=status, body=body or b"", headers=response_headers, delay=delay)
            )

    def _next_response(self) -> MockResponse:
        with self._lock:
            if self._responses:
                return self._responses.popleft()
        return MockResponse(status=200, body=b"{}", headers={"Content-Type": "application/json"})

    def _record(self, request: RecordedRequest) -> None:
        with self._lock:
            self.requests.append(request)

    @property
    def last_request(self) -> RecordedRequest:
        return self.requests[-1]

    def start(self) -> None:
        server = self

        class Handler(BaseHTTPRequestHandler):
            def _handle(self):
                length = int(self.headers.get("Content-Length") or 0)
                payload = self.rfile.read(length) if length else b""
                parts = urlsplit(self.path)
                server._record(RecordedRequest(
                    method=self.command,
                    path=parts.path,
                    query=parse_qs(parts.query),
                    headers=dict(self.headers.items()),
                    body=payload,
                ))

                response = server._next_response()
                if response.delay:
                    time.sleep(response.delay)
                try:
                    self.send_response(response.status)
                    for name, value in response.headers.items():
                        self.send_header(name, value)
                    self.send_header("Content-Length", str(len(response.body)))
                    self.end_headers()
                    self.wfile.write(response.body)
                except (BrokenPipeError, ConnectionResetError):
                    # Client gave up waiting
                    pass

            do_GET = _handle
            do_POST = _handle
            do_PUT = _handle
            do_PATCH = _handle
            do_DELETE = _handle

            def log_message(self, format, *args):
                pass

        self._server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        self._server.daemon_threads = True
        self._thread = Thread(target=self._server.serve_forever, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        if self._server is not None:
            self._server.shutdown()
            self._server.server_close()
            self._server = None


@pytest.fixture
def mock_server() -> Generator[MockServer, None, None]:
    """Start a mock VMware as a Service endpoint for one test."""
    server = MockServer()
    server.start()
    yield server
    server.stop()


@pytest.fixture
def service(mock_server: MockServer) -> Generator[VmwareV1, None, None]:
    """Client without authentication pointed at the mock server."""
    client = VmwareV1(NoAuthAuthenticator(), service_url=mock_server.url)
    yield client
    client.close()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def director_site_payload() -> Dict[str, Any]:
    """A director site as returned by the service."""
    return {
        "crn": "crn:v1:bluemix:public:vmware:us-south:a/123::site-1",
        "href": "https://api.us-south.vmware.cloud.ibm.com/v1/director_sites/site-1",
        "id": "site-1",
        "ordered_at": "2026-03-01T10:00:00.000Z",
        "provisioned_at": "2026-03-01T12:30:00.000Z",
        "name": "my-site",
        "status": "creating",
        "resource_group": {"id": "rg-1", "name": "default", "crn": "crn:rg-1"},
        "pvdcs": [
            {
                "name": "pvdc-a",
                "data_center_name": "dal10",
                "id": "pvdc-1",
                "href": "https://api.us-south.vmware.cloud.ibm.com/v1/director_sites/site-1/pvdcs/pvdc-1",
                "clusters": [],
            }
        ],
        "type": "single_tenant",
        "services": [],
        "rhel_vm_activation_key": "key",
    }


# Hypothesis settings for property-based tests
from hypothesis import settings, Verbosity

settings.register_profile("vmwaas", max_examples=100, verbosity=Verbosity.normal, deadline=None)
settings.register_profile("vmwaas-ci", max_examples=1000, verbosity=Verbosity.verbose, deadline=None)
settings.register_profile("vmwaas-dev", max_examples=10, verbosity=Verbosity.verbose, deadline=None)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "vmwaas"))
