"""
Logging configuration for the VMware as a Service SDK.

Provides centralized structured logging setup with JSON output for production
and human-readable output for development. Supports correlation IDs so every
event emitted while an operation is in flight carries its transaction id.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import structlog
from structlog.types import EventDict


SDK_LOGGER_NAME = "vmwaas"

# Context variable for correlation ID
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

# Header values that must never reach a log sink
_REDACTED_HEADERS = frozenset({"authorization", "proxy-authorization", "cookie", "set-cookie"})

# Silent until the application configures logging
logging.getLogger(SDK_LOGGER_NAME).addHandler(logging.NullHandler())


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log events if present in context.

    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary to modify

    Returns:
        Modified event dictionary with correlation_id if available
    """
    correlation_id = correlation_id_var.get()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Set correlation ID for the current context.

    Args:
        correlation_id: Optional correlation ID. If None, generates a new UUID.

    Returns:
        The correlation ID that was set
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def clear_correlation_id() -> None:
    """Clear correlation ID from the current context."""
    correlation_id_var.set(None)


def get_correlation_id() -> Optional[str]:
    """
    Get the current correlation ID from context.

    Returns:
        Current correlation ID or None if not set
    """
    return correlation_id_var.get()


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = True,
) -> None:
    """
    Configure structured logging for the SDK.

    Only the ``vmwaas`` logger hierarchy is configured; the host
    application's root logger is left alone and SDK events do not
    propagate to it.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file. If None, logs only to stderr.
        json_format: If True, use JSON format. If False, use human-readable format.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    sdk_logger.setLevel(numeric_level)
    sdk_logger.propagate = False

    # Replace handlers from a previous call
    for existing in list(sdk_logger.handlers):
        sdk_logger.removeHandler(existing)
        existing.close()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    sdk_logger.addHandler(handler)

    processors: list = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_correlation_id,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=log_file is None and sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger under the ``vmwaas`` hierarchy.

    Events always go through the stdlib logger of the same name, so they
    follow the host application's logging configuration and stay silent
    when there is none.

    Args:
        name: Module name (typically __name__) or a short component name.

    Returns:
        Structured logger instance.
    """
    if name != SDK_LOGGER_NAME and not name.startswith(SDK_LOGGER_NAME + "."):
        name = f"{SDK_LOGGER_NAME}.{name}"
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)


def redact_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """
    Return a copy of headers safe for logging.

    Credential-bearing headers are replaced with a fixed marker.
    """
    return {
        key: ("[REDACTED]" if key.lower() in _REDACTED_HEADERS else value)
        for key, value in headers.items()
    }


# Convenience functions for common logging patterns

def log_api_request(
    logger: structlog.stdlib.BoundLogger,
    operation_id: str,
    method: str,
    url: str,
    attempt: int,
    **kwargs: Any,
) -> None:
    """
    Log an outgoing HTTP request.

    Args:
        logger: Logger instance
        operation_id: Operation identifier (e.g. "CreateDirectorSites")
        method: HTTP method
        url: Fully resolved request URL
        attempt: Attempt number, starting at 1
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_request",
        "operation_id": operation_id,
        "method": method,
        "url": url,
        "attempt": attempt,
    }

    log_data.update(kwargs)

    logger.debug("api_request", **log_data)


def log_api_response(
    logger: structlog.stdlib.BoundLogger,
    operation_id: str,
    status_code: int,
    duration_ms: float,
    **kwargs: Any,
) -> None:
    """
    Log a received HTTP response.

    Args:
        logger: Logger instance
        operation_id: Operation identifier
        status_code: HTTP status code
        duration_ms: Round trip duration in milliseconds
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_response",
        "operation_id": operation_id,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }

    log_data.update(kwargs)

    logger.debug("api_response", **log_data)


def log_api_retry(
    logger: structlog.stdlib.BoundLogger,
    operation_id: str,
    attempt: int,
    max_retries: int,
    delay_seconds: float,
    reason: str,
    **kwargs: Any,
) -> None:
    """
    Log a retry decision.

    Args:
        logger: Logger instance
        operation_id: Operation identifier
        attempt: Attempt that failed, starting at 1
        max_retries: Maximum number of retries allowed
        delay_seconds: Backoff before the next attempt
        reason: Status code or transport error that triggered the retry
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_retry",
        "operation_id": operation_id,
        "attempt": attempt,
        "max_retries": max_retries,
        "delay_seconds": delay_seconds,
        "reason": reason,
    }

    log_data.update(kwargs)

    logger.warning("api_retry", **log_data)


def log_api_error(
    logger: structlog.stdlib.BoundLogger,
    operation_id: str,
    kind: str,
    status_code: int = 0,
    message: Optional[str] = None,
    **kwargs: Any,
) -> None:
    """
    Log a classified operation failure.

    Args:
        logger: Logger instance
        operation_id: Operation identifier
        kind: Error kind value
        status_code: HTTP status code, 0 when no response was received
        message: Error message
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_error",
        "operation_id": operation_id,
        "kind": kind,
        "status_code": status_code,
    }

    if message is not None:
        log_data["message"] = message

    log_data.update(kwargs)

    logger.error("api_error", **log_data)
