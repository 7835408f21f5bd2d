"""
Unit tests for the execution pipeline: retries, compression,
cancellation and transport failures.
"""

import gzip
import json
import socket
import threading
import time

import pytest

from vmwaas.core.context import Context
from vmwaas.exceptions import (
    ErrorKind,
    NetworkError,
    RequestCancelledError,
    ServerError,
    VmwareError,
)
from vmwaas.logging_config import get_correlation_id
from vmwaas.sdk.authenticators import BearerTokenAuthenticator, IamAuthenticator, NoAuthAuthenticator
from vmwaas.sdk.models import DirectorSiteCollection, PVDCPrototype, ClusterPrototype, FileSharesPrototype
from vmwaas.sdk.options import (
    CreateDirectorSitesOptions,
    GetDirectorSiteOptions,
    ListDirectorSitesOptions,
)
from vmwaas.sdk.service import VmwareV1


def closed_port_url() -> str:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}"


def site_options(cluster_count: int = 1) -> CreateDirectorSitesOptions:
    clusters = [
        ClusterPrototype(
            name=f"cluster-{n:04d}",
            host_count=2,
            host_profile="BM_2S_20_CORES_192_GB",
            file_shares=FileSharesPrototype(storage_two_iops_gb=100),
        )
        for n in range(cluster_count)
    ]
    return CreateDirectorSitesOptions(
        name="my-site",
        pvdcs=[PVDCPrototype(name="pvdc-a", data_center_name="dal10", clusters=clusters)],
    )


class TestRetries:
    """Test the retry loop."""

    def test_retry_then_success(self, service, mock_server):
        """Test a transient 503 is retried."""
        service.enable_retries(3, 0.01)
        mock_server.enqueue(503, {"message": "busy"})
        mock_server.enqueue(200, {"director_sites": []})

        result, response = service.list_director_sites(ListDirectorSitesOptions())

        assert isinstance(result, DirectorSiteCollection)
        assert result.director_sites == []
        assert response.status_code == 200
        assert len(mock_server.requests) == 2

    def test_retries_exhausted(self, service, mock_server):
        """Test the final failure is surfaced after the last retry."""
        service.enable_retries(2, 0.01)
        for _ in range(3):
            mock_server.enqueue(502, {"message": "bad gateway"})

        with pytest.raises(ServerError) as exc_info:
            service.list_director_sites(ListDirectorSitesOptions())

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "bad gateway"
        assert len(mock_server.requests) == 3

    def test_501_not_retried(self, service, mock_server):
        """Test Not Implemented is permanent."""
        service.enable_retries(3, 0.01)
        mock_server.enqueue(501, {"message": "nope"})

        with pytest.raises(ServerError):
            service.list_director_sites(ListDirectorSitesOptions())
        assert len(mock_server.requests) == 1

    def test_client_errors_not_retried(self, service, mock_server):
        """Test 4xx other than 429 is returned immediately."""
        service.enable_retries(3, 0.01)
        mock_server.enqueue(404, {"message": "missing"})

        with pytest.raises(VmwareError) as exc_info:
            service.get_director_site(GetDirectorSiteOptions("site-1"))
        assert exc_info.value.kind == ErrorKind.NOT_FOUND
        assert len(mock_server.requests) == 1

    def test_rate_limit_retried_with_retry_after(self, service, mock_server):
        """Test 429 honors Retry-After within the interval cap."""
        service.enable_retries(1, 0.05)
        mock_server.enqueue(429, {"message": "slow down"}, headers={"Retry-After": "60"})
        mock_server.enqueue(200, {"director_sites": []})

        started = time.monotonic()
        service.list_director_sites(ListDirectorSitesOptions())

        assert time.monotonic() - started < 5.0
        assert len(mock_server.requests) == 2

    def test_no_retries_by_default(self, service, mock_server):
        """Test retries are off until enabled."""
        mock_server.enqueue(503, {"message": "busy"})

        with pytest.raises(ServerError):
            service.list_director_sites(ListDirectorSitesOptions())
        assert len(mock_server.requests) == 1


class TestTransport:
    """Test transport failures."""

    def test_connection_refused(self):
        """Test an unreachable endpoint is a network error without an envelope."""
        with VmwareV1(NoAuthAuthenticator(), service_url=closed_port_url()) as service:
            with pytest.raises(NetworkError) as exc_info:
                service.list_director_sites(ListDirectorSitesOptions())
        assert exc_info.value.kind == ErrorKind.NETWORK
        assert exc_info.value.response is None
        assert exc_info.value.__cause__ is not None

    def test_connection_refused_retried(self):
        """Test transport failures are retried before surfacing."""
        with VmwareV1(NoAuthAuthenticator(), service_url=closed_port_url()) as service:
            service.enable_retries(2, 0.01)
            with pytest.raises(NetworkError):
                service.list_director_sites(ListDirectorSitesOptions())


class TestCompression:
    """Test request body compression."""

    def test_large_body_compressed(self, service, mock_server):
        """Test bodies above the threshold are gzipped when enabled."""
        service.set_enable_gzip_compression(True)
        mock_server.enqueue(202, {"id": "site-1"})

        service.create_director_sites(site_options(cluster_count=20))

        recorded = mock_server.last_request
        assert recorded.header("Content-Encoding") == "gzip"
        body = json.loads(gzip.decompress(recorded.body))
        assert len(body["pvdcs"][0]["clusters"]) == 20

    def test_small_body_not_compressed(self, service, mock_server):
        """Test bodies at or below the threshold are sent as is."""
        service.set_enable_gzip_compression(True)
        mock_server.enqueue(202, {"id": "site-1"})

        service.create_director_sites(site_options(cluster_count=1))

        recorded = mock_server.last_request
        assert recorded.header("Content-Encoding") is None
        assert recorded.json()["name"] == "my-site"

    def test_compression_disabled(self, service, mock_server):
        """Test large bodies are not compressed unless enabled."""
        mock_server.enqueue(202, {"id": "site-1"})

        service.create_director_sites(site_options(cluster_count=20))

        assert mock_server.last_request.header("Content-Encoding") is None


class TestCancellation:
    """Test context cancellation."""

    def test_cancelled_before_start(self, service, mock_server):
        """Test a done context prevents any request."""
        ctx = Context.background()
        ctx.cancel()

        with pytest.raises(RequestCancelledError) as exc_info:
            service.list_director_sites(ListDirectorSitesOptions(), ctx=ctx)

        assert "context canceled" in str(exc_info.value)
        assert exc_info.value.response is None
        assert mock_server.requests == []

    def test_cancel_during_backoff(self, service, mock_server):
        """Test cancellation interrupts the backoff sleep."""
        service.enable_retries(4, 30)
        for _ in range(5):
            mock_server.enqueue(503, {"message": "busy"})
        ctx = Context.background()
        timer = threading.Timer(0.2, ctx.cancel)
        timer.start()

        started = time.monotonic()
        try:
            with pytest.raises(RequestCancelledError):
                service.list_director_sites(ListDirectorSitesOptions(), ctx=ctx)
        finally:
            timer.cancel()

        assert time.monotonic() - started < 5.0
        assert len(mock_server.requests) == 1

    def test_deadline_during_request(self, service, mock_server):
        """Test a deadline shorter than the server's response time."""
        mock_server.enqueue(200, {"director_sites": []}, delay=0.5)

        with pytest.raises(RequestCancelledError) as exc_info:
            service.list_director_sites(ListDirectorSitesOptions(), ctx=Context.with_timeout(0.1))

        assert "deadline exceeded" in str(exc_info.value)
        assert exc_info.value.kind == ErrorKind.CANCELLED

    def test_cancel_during_request(self, service, mock_server):
        """Test an explicit cancel releases the caller while the server is still responding."""
        mock_server.enqueue(200, {"director_sites": []}, delay=3.0)
        ctx = Context.background()
        timer = threading.Timer(0.1, ctx.cancel)
        started = time.monotonic()
        timer.start()

        try:
            with pytest.raises(RequestCancelledError) as exc_info:
                service.list_director_sites(ListDirectorSitesOptions(), ctx=ctx)
        finally:
            timer.cancel()

        assert "context canceled" in str(exc_info.value)
        assert exc_info.value.kind == ErrorKind.CANCELLED
        assert time.monotonic() - started < 1.0

    def test_service_usable_after_abandoned_request(self, service, mock_server):
        """Test a cancelled in-flight attempt does not disturb the next call."""
        mock_server.enqueue(200, {"director_sites": []}, delay=1.0)
        mock_server.enqueue(200, {"director_sites": []})
        ctx = Context.background()
        timer = threading.Timer(0.1, ctx.cancel)
        timer.start()
        try:
            with pytest.raises(RequestCancelledError):
                service.list_director_sites(ListDirectorSitesOptions(), ctx=ctx)
        finally:
            timer.cancel()

        result, response = service.list_director_sites(ListDirectorSitesOptions(), ctx=Context.with_timeout(5.0))
        assert response.status_code == 200
        assert result.director_sites == []

    def test_slow_token_endpoint_honors_deadline(self, mock_server):
        """Test the IAM token exchange is bounded by the operation's deadline."""
        mock_server.enqueue(200, {"access_token": "late", "expires_in": 3600}, delay=3.0)
        authenticator = IamAuthenticator("k", url=mock_server.url, timeout=30.0)

        started = time.monotonic()
        with VmwareV1(authenticator, service_url=mock_server.url) as service:
            with pytest.raises(RequestCancelledError) as exc_info:
                service.list_director_sites(ListDirectorSitesOptions(), ctx=Context.with_timeout(0.3))

        assert "deadline exceeded" in str(exc_info.value)
        assert time.monotonic() - started < 1.5
        assert len(mock_server.requests) == 1
        assert mock_server.last_request.path == "/identity/token"


class TestAuthenticationAndCorrelation:
    """Test per-attempt authentication and correlation ids."""

    def test_authorization_header(self, mock_server):
        """Test the authenticator decorates every attempt."""
        with VmwareV1(BearerTokenAuthenticator("token-1"), service_url=mock_server.url) as service:
            service.enable_retries(1, 0.01)
            mock_server.enqueue(500, {"message": "boom"})
            mock_server.enqueue(200, {"director_sites": []})
            service.list_director_sites(ListDirectorSitesOptions())

        assert [r.header("Authorization") for r in mock_server.requests] == ["Bearer token-1"] * 2

    def test_transaction_id_forwarded(self, service, mock_server):
        """Test the caller's transaction id is sent and echoed."""
        mock_server.enqueue(200, {"director_sites": []})

        _, response = service.list_director_sites(
            ListDirectorSitesOptions(x_global_transaction_id="tx-42")
        )

        assert mock_server.last_request.header("X-Global-Transaction-ID") == "tx-42"
        assert response.transaction_id == "tx-42"
        assert get_correlation_id() is None
