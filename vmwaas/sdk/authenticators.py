"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Authenticators attach credentials to outgoing requests.

Instances are shared by every operation of a service and its clones, so
authenticate() must be safe to call from several threads at once.
"""

import base64
import threading
import time
from abc import ABC, abstractmethod
from typing import Optional

import requests

from vmwaas.core.binder import ApiRequest
from vmwaas.core.context import CANCELED, DEADLINE_EXCEEDED, Context
from vmwaas.exceptions import (
    AuthenticationError,
    InvalidConfigurationError,
    NetworkError,
    RequestCancelledError,
)
from vmwaas.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_IAM_URL = "https://iam.cloud.ibm.com"
IAM_TOKEN_PATH = "/identity/token"
IAM_GRANT_TYPE = "urn:ibm:params:oauth:grant-type:apikey"

# Fraction of a token's lifetime after which it is refreshed
REFRESH_FRACTION = 0.8


def _check_credential(name: str, value: Optional[str]) -> None:
    if not value:
        raise InvalidConfigurationError(f"the {name} shouldn't be None or empty")
    if value.startswith(("{", '"')) or value.endswith(("}", '"')):
        raise InvalidConfigurationError(
            f"the {name} shouldn't start or end with curly brackets or quotes. "
            f"Please remove any surrounding {{, }}, or \" characters"
        )


class Authenticator(ABC):
    """Capability that adds credentials to an ApiRequest."""

    authentication_type: str = ""

    @abstractmethod
    def authenticate(self, request: ApiRequest, ctx: Optional[Context] = None) -> None:
        """
        Add credentials to ``request`` in place.

        ``ctx`` bounds any network call made to obtain the credentials.
        """
        ...

    def validate(self) -> None:
        """
        Check the configuration.

        Raises:
            InvalidConfigurationError: If a credential is missing or malformed
        """
        return None


class NoAuthAuthenticator(Authenticator):
    """Sends requests without credentials."""

    authentication_type = "noauth"

    def authenticate(self, request: ApiRequest, ctx: Optional[Context] = None) -> None:
        return None


class BasicAuthenticator(Authenticator):
    """HTTP basic authentication."""

    authentication_type = "basic"

    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password
        self.validate()
        encoded = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        self._header = f"Basic {encoded}"

    def validate(self) -> None:
        _check_credential("username", self.username)
        _check_credential("password", self.password)

    def authenticate(self, request: ApiRequest, ctx: Optional[Context] = None) -> None:
        request.headers["Authorization"] = self._header


class BearerTokenAuthenticator(Authenticator):
    """Sends a caller-managed bearer token."""

    authentication_type = "bearerToken"

    def __init__(self, bearer_token: str):
        self.bearer_token = bearer_token
        self.validate()

    def validate(self) -> None:
        if not self.bearer_token:
            raise InvalidConfigurationError("the bearer token shouldn't be None or empty")

    def set_bearer_token(self, bearer_token: str) -> None:
        """Replace the token, e.g. after the caller refreshed it."""
        self.bearer_token = bearer_token
        self.validate()

    def authenticate(self, request: ApiRequest, ctx: Optional[Context] = None) -> None:
        request.headers["Authorization"] = f"Bearer {self.bearer_token}"


class IamAuthenticator(Authenticator):
    """
    Exchanges an IBM Cloud API key for IAM access tokens.

    The token is cached and refreshed once 80% of its lifetime has
    elapsed. Refreshes are serialized so concurrent callers trigger a
    single token request.

    Example:
        authenticator = IamAuthenticator(apikey="...")
        service = VmwareV1(authenticator)
    """

    authentication_type = "iam"

    def __init__(
        self,
        apikey: str,
        url: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        disable_ssl_verification: bool = False,
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
    ):
        self.apikey = apikey
        self.url = (url or DEFAULT_IAM_URL).rstrip("/")
        if self.url.endswith(IAM_TOKEN_PATH):
            self.url = self.url[: -len(IAM_TOKEN_PATH)]
        self.client_id = client_id
        self.client_secret = client_secret
        self.disable_ssl_verification = disable_ssl_verification
        self.timeout = timeout
        self.session = session or requests.Session()
        self._lock = threading.Lock()
        self._access_token: Optional[str] = None
        self._refresh_at = 0.0
        self.validate()

    def validate(self) -> None:
        _check_credential("apikey", self.apikey)
        if bool(self.client_id) != bool(self.client_secret):
            raise InvalidConfigurationError("client_id and client_secret must be provided together")

    def authenticate(self, request: ApiRequest, ctx: Optional[Context] = None) -> None:
        request.headers["Authorization"] = f"Bearer {self.get_token(ctx)}"

    def get_token(self, ctx: Optional[Context] = None) -> str:
        """
        Return a valid access token, fetching a new one when due.

        Raises:
            RequestCancelledError: If ``ctx`` ends before a token is available
        """
        remaining = ctx.remaining() if ctx is not None else None
        if not self._lock.acquire(timeout=-1 if remaining is None else max(remaining, 0)):
            raise self._cancelled(ctx, DEADLINE_EXCEEDED)
        try:
            if self._access_token is None or time.time() >= self._refresh_at:
                return self._request_token(ctx)
            return self._access_token
        finally:
            self._lock.release()

    @staticmethod
    def _cancelled(ctx: Optional[Context], default: str = CANCELED) -> RequestCancelledError:
        reason = (ctx.err() if ctx is not None else None) or default
        return RequestCancelledError(f"IAM token request: {reason}")

    def _request_token(self, ctx: Optional[Context] = None) -> str:
        if ctx is not None and ctx.done():
            raise self._cancelled(ctx)

        timeout = self.timeout
        remaining = ctx.remaining() if ctx is not None else None
        deadline_bound = remaining is not None and remaining <= timeout
        if deadline_bound:
            timeout = remaining
            if timeout <= 0:
                raise self._cancelled(ctx, DEADLINE_EXCEEDED)

        token_url = self.url + IAM_TOKEN_PATH
        auth = (self.client_id, self.client_secret) if self.client_id else None
        logger.debug("iam_token_request", url=token_url, timeout=round(timeout, 3))
        try:
            response = self.session.post(
                token_url,
                data={"grant_type": IAM_GRANT_TYPE, "apikey": self.apikey, "response_type": "cloud_iam"},
                headers={"Accept": "application/json"},
                auth=auth,
                timeout=timeout,
                verify=not self.disable_ssl_verification,
            )
        except requests.exceptions.Timeout as e:
            if deadline_bound or (ctx is not None and ctx.done()):
                raise self._cancelled(ctx, DEADLINE_EXCEEDED) from e
            logger.error("iam_token_request_failed", url=token_url, error=str(e))
            raise NetworkError(f"IAM token request failed: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error("iam_token_request_failed", url=token_url, error=str(e))
            raise NetworkError(f"IAM token request failed: {e}") from e

        if response.status_code >= 400:
            logger.warning("iam_token_rejected", status_code=response.status_code)
            raise AuthenticationError(
                f"IAM token request failed with status {response.status_code}: {response.reason}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
            access_token = payload["access_token"]
            expires_in = float(payload.get("expires_in", 3600))
        except (ValueError, KeyError, TypeError) as e:
            raise AuthenticationError(
                "IAM token response did not contain an access token",
                status_code=response.status_code,
            ) from e

        now = time.time()
        self._access_token = access_token
        self._refresh_at = now + expires_in * REFRESH_FRACTION
        logger.info("iam_token_refreshed", expires_in=expires_in)
        return access_token
