"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Response decoding.

Turns an HTTP response into either a typed result plus its envelope or a
classified VmwareError that carries the envelope.
"""

import json
from typing import Any, Mapping, Optional, Tuple, Type

import requests
from requests.structures import CaseInsensitiveDict

from vmwaas.core.binder import ApiRequest
from vmwaas.core.serialization import Model, encode_value
from vmwaas.exceptions import ResponseParseError, error_class_for_status
from vmwaas.logging_config import get_logger

logger = get_logger(__name__)

TRANSACTION_ID_HEADERS = ("X-Global-Transaction-Id", "X-Request-Id")


class DetailedResponse:
    """
    Envelope describing the HTTP exchange behind an operation.

    Attributes:
        result: Decoded result, or None when the body was empty
        headers: Response headers (case-insensitive)
        status_code: HTTP status code
        raw_result: Body text, kept when it could not be decoded
        transaction_id: Server correlation id, if any
    """

    def __init__(
        self,
        result: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        status_code: int = 0,
        raw_result: Optional[str] = None,
        transaction_id: Optional[str] = None,
    ):
        self.result = result
        self.headers = CaseInsensitiveDict(headers or {})
        self.status_code = status_code
        self.raw_result = raw_result
        self.transaction_id = transaction_id

    def get_result(self) -> Any:
        return self.result

    def get_headers(self) -> CaseInsensitiveDict:
        return self.headers

    def get_status_code(self) -> int:
        return self.status_code

    def _to_dict(self) -> dict:
        rendered = {"status_code": self.status_code, "headers": dict(self.headers)}
        if self.result is not None:
            rendered["result"] = encode_value(self.result)
        elif self.raw_result is not None:
            rendered["raw_result"] = self.raw_result
        return rendered

    def __str__(self) -> str:
        return json.dumps(self._to_dict(), indent=2, default=str)

    def __repr__(self) -> str:
        return f"DetailedResponse(status_code={self.status_code}, transaction_id={self.transaction_id!r})"


def is_json_content_type(content_type: Optional[str]) -> bool:
    """True for application/json and any +json media type."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def extract_transaction_id(headers: Mapping[str, str], request: Optional[ApiRequest] = None) -> Optional[str]:
    """
    Pick the correlation id for an exchange.

    Prefers the server's headers and falls back to the id the caller sent.
    """
    for name in TRANSACTION_ID_HEADERS:
        value = headers.get(name)
        if value:
            return value
    if request is not None:
        return request.transaction_id
    return None


def extract_error_message(body: Any, default: str) -> str:
    """
    Find a human-readable message in an error body.

    Looks at ``errors[0].message``, ``error``, ``message`` and
    ``errorMessage`` in that order.
    """
    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            message = errors[0].get("message")
            if isinstance(message, str) and message:
                return message
        for key in ("error", "message", "errorMessage"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return default


def decode_response(
    request: ApiRequest,
    http_response: requests.Response,
    result_type: Optional[Type[Model]],
) -> Tuple[Any, DetailedResponse]:
    """
    Decode an HTTP response for ``request``.

    Args:
        request: Request that produced the response
        http_response: Completed response with its body read
        result_type: Model to decode a success body into

    Returns:
        Tuple of (result, envelope); result is None for an empty body

    Raises:
        ApiError: Subclass matching the status for responses >= 400
        ResponseParseError: For malformed JSON, or a non-JSON success body
    """
    status = http_response.status_code
    headers = CaseInsensitiveDict(http_response.headers)
    envelope = DetailedResponse(
        headers=headers,
        status_code=status,
        transaction_id=extract_transaction_id(headers, request),
    )
    content = http_response.content or b""
    has_body = bool(content.strip())
    is_json = is_json_content_type(headers.get("Content-Type"))

    if status >= 400:
        _raise_for_status(http_response, envelope, content if has_body else b"", is_json)

    if not has_body:
        return None, envelope

    text = _decode_text(http_response, content)
    if not is_json:
        envelope.raw_result = text
        if result_type is None:
            return None, envelope
        raise ResponseParseError(
            f"unexpected content type '{headers.get('Content-Type', '')}' in response body",
            status_code=status,
            transaction_id=envelope.transaction_id,
            response=envelope,
        )

    data = _parse_json(text, envelope)
    if result_type is None:
        envelope.result = data
        return data, envelope
    try:
        result = result_type.from_dict(data)
    except ValueError as e:
        envelope.raw_result = text
        raise ResponseParseError(
            f"error unmarshalling {result_type.__name__}: {e}",
            status_code=status,
            transaction_id=envelope.transaction_id,
            response=envelope,
        ) from e
    envelope.result = result
    return result, envelope


def _decode_text(http_response: requests.Response, content: bytes) -> str:
    return content.decode(http_response.encoding or "utf-8", errors="replace")


def _parse_json(text: str, envelope: DetailedResponse) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        envelope.raw_result = text
        raise ResponseParseError(
            f"error processing the HTTP response: invalid JSON: {e}",
            status_code=envelope.status_code,
            transaction_id=envelope.transaction_id,
            response=envelope,
        ) from e


def _raise_for_status(
    http_response: requests.Response,
    envelope: DetailedResponse,
    content: bytes,
    is_json: bool,
) -> None:
    reason = http_response.reason or f"HTTP {envelope.status_code}"
    message = reason
    if content:
        text = _decode_text(http_response, content)
        if is_json:
            data = _parse_json(text, envelope)
            envelope.result = data
            message = extract_error_message(data, reason)
        else:
            envelope.raw_result = text
    error_class = error_class_for_status(envelope.status_code)
    logger.debug(
        "error_response",
        status_code=envelope.status_code,
        error_type=error_class.__name__,
        transaction_id=envelope.transaction_id,
    )
    raise error_class(
        message,
        status_code=envelope.status_code,
        transaction_id=envelope.transaction_id,
        response=envelope,
    )
