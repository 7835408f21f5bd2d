"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Execution pipeline: drives a bound request through authentication,
compression, the retry loop and response decoding, honoring the caller's
cancellation context at every suspension point.

When the caller passes a context, each attempt runs on a worker thread
while the calling thread waits on the context. An explicit cancel or the
deadline releases the caller at once; the abandoned attempt finishes in
the background and its response is discarded.
"""

import concurrent.futures
import contextvars
import functools
import gzip
import threading
import time
from typing import Any, Callable, Optional, Tuple, Type

import requests

from vmwaas.core.binder import ApiRequest
from vmwaas.core.context import CANCELED, DEADLINE_EXCEEDED, Context
from vmwaas.core.response import DetailedResponse, decode_response
from vmwaas.core.retry import RetryPolicy
from vmwaas.core.serialization import Model
from vmwaas.exceptions import NetworkError, RequestCancelledError, VmwareError
from vmwaas.logging_config import (
    correlation_id_var,
    get_logger,
    log_api_error,
    log_api_request,
    log_api_response,
    log_api_retry,
    redact_headers,
)

logger = get_logger(__name__)

DEFAULT_HTTP_TIMEOUT = 30.0
GZIP_THRESHOLD = 1024
MAX_IN_FLIGHT = 32


class Pipeline:
    """
    Sends ApiRequests over a shared requests.Session.

    The session and authenticator are shared by every caller; all
    per-call settings are passed to ``execute``.
    """

    def __init__(self, session: requests.Session, authenticator: Any):
        self.session = session
        self.authenticator = authenticator
        self._executor: Optional[concurrent.futures.ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()

    def close(self) -> None:
        """Stop the worker threads; attempts already running finish on their own."""
        with self._executor_lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=False)

    def _get_executor(self) -> concurrent.futures.ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = concurrent.futures.ThreadPoolExecutor(
                    max_workers=MAX_IN_FLIGHT,
                    thread_name_prefix="vmwaas-http",
                )
            return self._executor

    def execute(
        self,
        request: ApiRequest,
        result_type: Optional[Type[Model]],
        ctx: Optional[Context] = None,
        retry_policy: Optional[RetryPolicy] = None,
        enable_gzip: bool = False,
        verify: bool = True,
        http_timeout: float = DEFAULT_HTTP_TIMEOUT,
    ) -> Tuple[Any, DetailedResponse]:
        """
        Execute a request and decode its response.

        Args:
            request: Bound request
            result_type: Model the success body decodes into
            ctx: Cancellation context; None means no deadline
            retry_policy: Policy to apply, or None to send once
            enable_gzip: Compress eligible bodies above the threshold
            verify: Verify TLS certificates
            http_timeout: Per-attempt socket timeout in seconds

        Returns:
            Tuple of (result, envelope)

        Raises:
            RequestCancelledError: If the context ends before completion
            NetworkError: If the transport fails on the final attempt
            ApiError: If the final response has status >= 400
            ResponseParseError: If the body cannot be decoded
        """
        detached = ctx is not None
        ctx = ctx or Context.background()
        token = correlation_id_var.set(request.transaction_id) if request.transaction_id else None
        try:
            return self._run(request, result_type, ctx, retry_policy, enable_gzip, verify, http_timeout, detached)
        except VmwareError as e:
            log_api_error(
                logger,
                request.operation_id,
                kind=e.kind.value,
                status_code=e.status_code,
                message=e.message,
            )
            raise
        finally:
            if token is not None:
                correlation_id_var.reset(token)

    def _run(
        self,
        request: ApiRequest,
        result_type: Optional[Type[Model]],
        ctx: Context,
        retry_policy: Optional[RetryPolicy],
        enable_gzip: bool,
        verify: bool,
        http_timeout: float,
        detached: bool = False,
    ) -> Tuple[Any, DetailedResponse]:
        self._check_context(request, ctx)

        body = request.body
        if enable_gzip and request.may_gzip and body is not None and len(body) > GZIP_THRESHOLD:
            body = gzip.compress(body)
            request.headers["Content-Encoding"] = "gzip"

        max_retries = retry_policy.max_retries if retry_policy is not None else 0
        last_error: Optional[VmwareError] = None

        for attempt in range(max_retries + 1):  # +1 for initial attempt
            self._check_context(request, ctx)

            remaining = ctx.remaining()
            deadline_bound = remaining is not None and remaining <= http_timeout

            send = functools.partial(self._send, request, body, ctx, attempt, verify, http_timeout)
            started = time.monotonic()
            try:
                http_response = self._dispatch(request, ctx, send) if detached else send()
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
                if ctx.done() or (deadline_bound and isinstance(e, requests.exceptions.Timeout)):
                    raise self._cancelled(request, ctx, DEADLINE_EXCEEDED) from e
                last_error = NetworkError(f"{request.operation_id}: {type(e).__name__}: {e}")
                last_error.__cause__ = e
                reason = type(e).__name__
                retry_after = None
            except requests.exceptions.RequestException as e:
                raise NetworkError(f"{request.operation_id}: {e}") from e
            else:
                log_api_response(
                    logger,
                    request.operation_id,
                    http_response.status_code,
                    round((time.monotonic() - started) * 1000, 2),
                )
                if ctx.done():
                    http_response.close()
                    raise self._cancelled(request, ctx)
                if (
                    retry_policy is None
                    or attempt >= max_retries
                    or not retry_policy.is_retryable_status(http_response.status_code)
                ):
                    return decode_response(request, http_response, result_type)
                reason = str(http_response.status_code)
                retry_after = http_response.headers.get("Retry-After")
                http_response.close()

            if retry_policy is None or attempt >= max_retries:
                raise last_error

            delay = retry_policy.backoff(attempt, retry_after)
            log_api_retry(logger, request.operation_id, attempt + 1, max_retries, delay, reason)
            if not ctx.wait(delay):
                raise self._cancelled(request, ctx)

        raise NetworkError(f"{request.operation_id}: retries exhausted")

    def _send(
        self,
        request: ApiRequest,
        body: Optional[bytes],
        ctx: Context,
        attempt: int,
        verify: bool,
        http_timeout: float,
    ) -> requests.Response:
        """Authenticate and send one attempt."""
        self.authenticator.authenticate(request, ctx)

        timeout = http_timeout
        remaining = ctx.remaining()
        if remaining is not None:
            timeout = min(timeout, remaining)
            if timeout <= 0:
                raise self._cancelled(request, ctx)

        log_api_request(
            logger,
            request.operation_id,
            request.method,
            request.url,
            attempt + 1,
            headers=redact_headers(request.headers),
        )
        return self.session.request(
            request.method,
            request.url,
            params=request.params,
            data=body,
            headers=request.headers,
            timeout=timeout,
            verify=verify,
        )

    def _dispatch(
        self,
        request: ApiRequest,
        ctx: Context,
        send: Callable[[], requests.Response],
    ) -> requests.Response:
        """
        Run one attempt on a worker thread and wait for it or for the context.

        The wait ends when the attempt finishes or the context ends. An
        abandoned attempt's response is closed when it arrives.
        """
        future = self._get_executor().submit(contextvars.copy_context().run, send)
        finished = threading.Event()
        future.add_done_callback(lambda f: finished.set())
        unregister = ctx.on_cancel(finished.set)
        try:
            finished.wait(ctx.remaining())
        finally:
            unregister()

        if future.done():
            return future.result()

        future.add_done_callback(functools.partial(_discard, request.operation_id))
        raise self._cancelled(request, ctx, DEADLINE_EXCEEDED)

    def _check_context(self, request: ApiRequest, ctx: Context) -> None:
        if ctx.done():
            raise self._cancelled(request, ctx)

    @staticmethod
    def _cancelled(request: ApiRequest, ctx: Context, default: str = CANCELED) -> RequestCancelledError:
        return RequestCancelledError(
            f"{request.operation_id}: {ctx.err() or default}",
            transaction_id=request.transaction_id,
        )


def _discard(operation_id: str, future: "concurrent.futures.Future[requests.Response]") -> None:
    try:
        response = future.result()
    except Exception as e:
        logger.debug("abandoned_attempt_failed", operation_id=operation_id, error=str(e))
        return
    response.close()
    logger.debug("abandoned_attempt_discarded", operation_id=operation_id, status_code=response.status_code)
