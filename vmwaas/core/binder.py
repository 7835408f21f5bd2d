"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Request binding: typed options to an abstract HTTP request.

Options classes are dataclasses whose fields are declared with ``path``,
``query``, ``body``, ``document`` or ``header``. The binder validates a
value against its operation, then fills in the URL, headers, query
string and body. No I/O happens here.
"""

import dataclasses
import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type
from urllib.parse import quote

from requests.structures import CaseInsensitiveDict

from vmwaas.core.common import get_sdk_headers
from vmwaas.core.patch import as_patch
from vmwaas.core.serialization import Model, encode_value
from vmwaas.exceptions import InvalidOptionsError, ServiceURLMissingError, ValidationError

JSON = "application/json"
MERGE_PATCH = "application/merge-patch+json"

TRANSACTION_ID_HEADER = "X-Global-Transaction-ID"

PARAM_KEY = "vmwaas.param"

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


class Location(str, Enum):
    """Where an options field is placed in the HTTP request."""
    PATH = "path"
    QUERY = "query"
    BODY = "body"
    DOCUMENT = "document"
    HEADER = "header"


@dataclass(frozen=True)
class Param:
    location: Location
    name: str
    required: bool = False


def path(name: str) -> Any:
    """Declare a path parameter. Path parameters are always required."""
    return field(default=None, metadata={PARAM_KEY: Param(Location.PATH, name, True)})


def query(name: str, required: bool = False) -> Any:
    return field(default=None, metadata={PARAM_KEY: Param(Location.QUERY, name, required)})


def body(name: str, required: bool = False) -> Any:
    """Declare a property of the JSON request body."""
    return field(default=None, metadata={PARAM_KEY: Param(Location.BODY, name, required)})


def document(name: str) -> Any:
    """Declare a field holding the entire request body."""
    return field(default=None, metadata={PARAM_KEY: Param(Location.DOCUMENT, name, True)})


def header(name: str, kw_only: bool = False) -> Any:
    return field(default=None, kw_only=kw_only, metadata={PARAM_KEY: Param(Location.HEADER, name, False)})


@dataclass(frozen=True)
class Operation:
    """Static description of one API operation."""
    operation_id: str
    method: str
    path: str
    options_type: Type[Any]
    result_type: Optional[Type[Model]]
    content_type: Optional[str] = None
    zero_body: bool = False

    @property
    def may_gzip(self) -> bool:
        """Operations sending a JSON body may have it compressed."""
        return self.content_type is not None


@dataclass
class ApiRequest:
    """HTTP request ready for the execution pipeline."""
    operation_id: str
    method: str
    url: str
    headers: CaseInsensitiveDict
    params: List[Tuple[str, str]] = field(default_factory=list)
    body: Optional[bytes] = None
    may_gzip: bool = False
    requires_auth: bool = True

    @property
    def transaction_id(self) -> Optional[str]:
        """Transaction id the caller attached, if any."""
        return self.headers.get(TRANSACTION_ID_HEADER)


def _params(options: Any) -> List[Tuple[str, Param, Any]]:
    return [
        (f.name, f.metadata[PARAM_KEY], getattr(options, f.name))
        for f in dataclasses.fields(options)
        if PARAM_KEY in f.metadata
    ]


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _validate(operation: Operation, options: Any) -> List[Tuple[str, Param, Any]]:
    if options is None:
        raise InvalidOptionsError(f"{operation.operation_id}: options cannot be nil")
    if not isinstance(options, operation.options_type):
        raise InvalidOptionsError(
            f"{operation.operation_id}: expected {operation.options_type.__name__}, "
            f"got {type(options).__name__}"
        )
    params = _params(options)
    for attr, param, value in params:
        if param.required and (value is None or (param.location == Location.PATH and value == "")):
            raise ValidationError(
                f"{operation.operation_id}: missing required field '{attr}'"
            )
        _validate_models(value)
    if operation.zero_body and getattr(options, "content_length", None) not in (None, 0):
        raise ValidationError(f"{operation.operation_id}: content_length must be 0, request has no body")
    return params


def _validate_models(value: Any) -> None:
    if isinstance(value, Model):
        value.validate()
    elif isinstance(value, (list, tuple)):
        for item in value:
            _validate_models(item)


def _resolve_path(template: str, values: Mapping[str, Any]) -> str:
    def substitute(match: "re.Match[str]") -> str:
        return quote(_stringify(values[match.group(1)]), safe="")
    return _PLACEHOLDER.sub(substitute, template)


def _encode_document(value: Any) -> Any:
    if isinstance(value, Model):
        return as_patch(value)
    if isinstance(value, Mapping):
        return {str(k): encode_value(v) for k, v in value.items()}
    raise ValidationError(f"patch document must be a model or a mapping, got {type(value).__name__}")


def bind_request(
    operation: Operation,
    options: Any,
    base_url: str,
    default_headers: Optional[Mapping[str, str]] = None,
    service_name: str = "vmware",
    service_version: str = "V1",
) -> ApiRequest:
    """
    Build the request for one invocation of ``operation``.

    Checks run in this order: options present, required fields present,
    service URL configured. Headers are layered so later sources win:
    service defaults, Accept, SDK identification, typed header fields,
    then the caller's header map.

    Args:
        operation: Operation descriptor
        options: Options instance of ``operation.options_type``
        base_url: Service URL without trailing slash
        default_headers: Headers configured on the service
        service_name: Service name reported in the analytics header
        service_version: API version reported in the analytics header

    Returns:
        ApiRequest for the execution pipeline

    Raises:
        InvalidOptionsError: If options is None or of the wrong type
        ValidationError: If a required field is missing or a model is invalid
        ServiceURLMissingError: If the service has no URL
    """
    params = _validate(operation, options)
    if not base_url:
        raise ServiceURLMissingError("service URL is empty; set it before invoking operations")

    path_values: Dict[str, Any] = {}
    query_params: List[Tuple[str, str]] = []
    body_fields: Dict[str, Any] = {}
    patch_document: Any = None
    typed_headers: Dict[str, str] = {}

    for _, param, value in params:
        if value is None:
            continue
        if param.location == Location.PATH:
            path_values[param.name] = value
        elif param.location == Location.QUERY:
            query_params.append((param.name, _stringify(value)))
        elif param.location == Location.BODY:
            body_fields[param.name] = encode_value(value, include_read_only=False)
        elif param.location == Location.DOCUMENT:
            patch_document = _encode_document(value)
        elif param.location == Location.HEADER:
            typed_headers[param.name] = _stringify(value)

    headers: CaseInsensitiveDict = CaseInsensitiveDict(default_headers or {})
    headers["Accept"] = JSON
    headers.update(get_sdk_headers(service_name, service_version, operation.operation_id))
    headers.update(typed_headers)

    payload: Optional[bytes] = None
    if operation.zero_body:
        headers["Content-Length"] = "0"
    elif operation.content_type is not None:
        headers["Content-Type"] = operation.content_type
        document_body = patch_document if patch_document is not None else body_fields
        payload = json.dumps(document_body, separators=(",", ":")).encode("utf-8")

    headers.update(options.headers or {})

    return ApiRequest(
        operation_id=operation.operation_id,
        method=operation.method,
        url=base_url + _resolve_path(operation.path, path_values),
        headers=headers,
        params=query_params,
        body=payload,
        may_gzip=operation.may_gzip,
    )
