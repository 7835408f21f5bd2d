"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Vmwaas, a product of Garudex Labs

Model runtime: JSON encoding and decoding for resource models.

Models are dataclasses deriving from Model. Each field declares its wire
name through ``wire()``; the mapping is declarative and never derived
from the Python attribute name. Fields default to UNSET, which is never
emitted. ``None`` is an explicit null and is emitted as JSON null.

Discriminated unions are expressed as a base model declaring
``__discriminator__`` and variant subclasses registered with a ``tag``:

    @dataclass
    class Edge(Model):
        __discriminator__ = "type"
        type: Optional[str] = wire("type")

    @dataclass
    class PerformanceEdge(Edge, tag="performance"):
        size: Optional[str] = wire("size")
"""

import dataclasses
import json
import re
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import (
    Any,
    ClassVar,
    Dict,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from vmwaas.exceptions import ValidationError

M = TypeVar("M", bound="Model")

_WIRE_KEY = "vmwaas.wire"

_RFC3339 = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2})(\.\d+)?([Zz]|[+-]\d{2}:\d{2})?$"
)


class _Unset:
    """Marker for a field the caller never assigned."""

    _instance: ClassVar[Optional["_Unset"]] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_Unset":
        return self

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclasses.dataclass(frozen=True)
class WireField:
    """Serialization metadata attached to a model field."""
    name: str
    required: bool = False
    read_only: bool = False
    omit_empty: bool = False


def wire(
    name: str,
    *,
    required: bool = False,
    read_only: bool = False,
    omit_empty: bool = False,
) -> Any:
    """
    Declare a model field.

    Args:
        name: JSON property name on the wire
        required: Field must be present for the model to validate
        read_only: Field is computed by the server and omitted from request bodies
        omit_empty: Skip empty strings, lists and mappings when encoding
    """
    meta = WireField(name=name, required=required, read_only=read_only, omit_empty=omit_empty)
    return dataclasses.field(default=UNSET, metadata={_WIRE_KEY: meta})


def is_set(value: Any) -> bool:
    """True unless value is the UNSET marker."""
    return value is not UNSET


# Timestamps

def format_datetime(value: datetime) -> str:
    """Render a datetime as RFC 3339 with millisecond precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    base = value.strftime("%Y-%m-%dT%H:%M:%S")
    millis = f"{value.microsecond // 1000:03d}"
    offset = value.utcoffset()
    if not offset:
        return f"{base}.{millis}Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, minutes = divmod(abs(total) // 60, 60)
    return f"{base}.{millis}{sign}{hours:02d}:{minutes:02d}"


def parse_datetime(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp.

    Accepts any number of fractional digits and a ``Z`` or numeric offset.
    Timestamps without an offset are taken as UTC.

    Raises:
        ValueError: If the value is not a timestamp
    """
    if not isinstance(value, str):
        raise ValueError(f"expected timestamp string, got {type(value).__name__}")
    match = _RFC3339.match(value.strip())
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp: {value!r}")
    day, clock, fraction, zone = match.groups()
    parsed = datetime.strptime(f"{day}T{clock}", "%Y-%m-%dT%H:%M:%S")
    if fraction:
        parsed = parsed.replace(microsecond=int(fraction[1:7].ljust(6, "0")))
    if zone is None or zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = 1 if zone[0] == "+" else -1
        hours, minutes = zone[1:].split(":")
        tz = timezone(sign * timedelta(hours=int(hours), minutes=int(minutes)))
    return parsed.replace(tzinfo=tz)


# Model base

class Model:
    """Base class for resource, prototype and patch models."""

    __discriminator__: ClassVar[Optional[str]] = None
    __variants__: ClassVar[Dict[str, Type["Model"]]]
    __tag__: ClassVar[Optional[str]] = None

    def __init_subclass__(cls, tag: Optional[str] = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "__discriminator__" in cls.__dict__:
            cls.__variants__ = {}
        if tag is not None:
            if cls.__discriminator__ is None:
                raise TypeError(f"{cls.__name__} declares a tag but has no discriminated base")
            cls.__tag__ = tag
            cls.__variants__[tag] = cls

    @classmethod
    def wire_fields(cls) -> List[Tuple[str, WireField, Any]]:
        """
        Describe the serializable fields of this model.

        Returns:
            List of (attribute name, wire metadata, resolved type hint)
        """
        cached = cls.__dict__.get("_wire_fields_cache")
        if cached is not None:
            return cached
        hints = get_type_hints(cls)
        described = [
            (f.name, f.metadata[_WIRE_KEY], hints.get(f.name, Any))
            for f in dataclasses.fields(cls)
            if _WIRE_KEY in f.metadata
        ]
        setattr(cls, "_wire_fields_cache", described)
        return described

    def to_dict(self, include_read_only: bool = True) -> Dict[str, Any]:
        """
        Encode this model as a JSON-compatible mapping.

        Args:
            include_read_only: Emit server-computed fields as well

        Raises:
            ValidationError: If a variant's discriminator disagrees with its tag
        """
        self._check_discriminator()
        encoded: Dict[str, Any] = {}
        for attr, meta, _ in self.wire_fields():
            value = getattr(self, attr)
            if value is UNSET:
                if self.__tag__ is not None and meta.name == self.__discriminator__:
                    encoded[meta.name] = self.__tag__
                continue
            if meta.read_only and not include_read_only:
                continue
            value = encode_value(value, include_read_only)
            if meta.omit_empty and _is_empty(value):
                continue
            encoded[meta.name] = value
        return encoded

    @classmethod
    def from_dict(cls: Type[M], data: Mapping[str, Any]) -> M:
        """
        Decode a JSON mapping into this model.

        Union bases select the variant named by the discriminator property
        and fall back to the base when the tag is not registered. Unknown
        properties are ignored.

        Raises:
            ValueError: If the payload does not match the model's shape
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"{cls.__name__}: expected JSON object, got {type(data).__name__}")
        target: Type[M] = cls
        if cls.__discriminator__ is not None and cls.__tag__ is None:
            tag = data.get(cls.__discriminator__)
            if isinstance(tag, str) and tag in cls.__variants__:
                target = cls.__variants__[tag]  # type: ignore[assignment]
        kwargs: Dict[str, Any] = {}
        for attr, meta, hint in target.wire_fields():
            if meta.name not in data:
                continue
            try:
                kwargs[attr] = decode_value(hint, data[meta.name])
            except (TypeError, ValueError) as e:
                raise ValueError(f"{target.__name__}.{meta.name}: {e}") from e
        return target(**kwargs)

    def validate(self) -> None:
        """
        Check that required fields are present, recursing into nested models.

        A union base whose discriminator names a registered variant must
        not need fields only that variant declares.

        Raises:
            ValidationError: If a required field is UNSET or None
        """
        self._check_discriminator()
        for attr, meta, _ in self.wire_fields():
            value = getattr(self, attr)
            if meta.required and (value is UNSET or value is None):
                if self.__tag__ is not None and meta.name == self.__discriminator__:
                    continue
                raise ValidationError(f"{type(self).__name__}: missing required field '{meta.name}'")
            _validate_nested(value)
        self._check_variant_fields()

    def _check_variant_fields(self) -> None:
        if self.__discriminator__ is None or self.__tag__ is not None:
            return
        tag = None
        for attr, meta, _ in self.wire_fields():
            if meta.name == self.__discriminator__:
                tag = getattr(self, attr)
        if isinstance(tag, Enum):
            tag = tag.value
        variant = self.__variants__.get(tag) if isinstance(tag, str) else None
        if variant is None:
            return
        declared = {meta.name for _, meta, _ in self.wire_fields()}
        for _, meta, _ in variant.wire_fields():
            if meta.required and meta.name not in declared:
                raise ValidationError(
                    f"{type(self).__name__}: {self.__discriminator__} '{tag}' requires field "
                    f"'{meta.name}'; use {variant.__name__}"
                )

    def _check_discriminator(self) -> None:
        if self.__tag__ is None:
            return
        for attr, meta, _ in self.wire_fields():
            if meta.name != self.__discriminator__:
                continue
            value = getattr(self, attr)
            if isinstance(value, Enum):
                value = value.value
            if value is not UNSET and value is not None and value != self.__tag__:
                raise ValidationError(
                    f"{type(self).__name__}: '{meta.name}' must be '{self.__tag__}', got '{value}'"
                )

    def __str__(self) -> str:
        return to_json(self, indent=2)


def _validate_nested(value: Any) -> None:
    if isinstance(value, Model):
        value.validate()
    elif isinstance(value, list):
        for item in value:
            _validate_nested(item)
    elif isinstance(value, dict):
        for item in value.values():
            _validate_nested(item)


def _is_empty(value: Any) -> bool:
    return value == "" or (isinstance(value, (list, dict)) and not value)


# Generic encode / decode

def encode_value(value: Any, include_read_only: bool = True) -> Any:
    """Convert a model, collection or scalar into JSON-compatible data."""
    if value is None or isinstance(value, (bool, int, float, str)):
        if isinstance(value, Enum):
            return value.value
        return value
    if isinstance(value, Model):
        return value.to_dict(include_read_only=include_read_only)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, (list, tuple)):
        return [encode_value(item, include_read_only) for item in value if item is not UNSET]
    if isinstance(value, Mapping):
        return {
            str(k): encode_value(v, include_read_only)
            for k, v in value.items()
            if v is not UNSET
        }
    raise TypeError(f"cannot serialize value of type {type(value).__name__}")


def decode_value(hint: Any, value: Any) -> Any:
    """
    Convert JSON data into the Python type described by ``hint``.

    Raises:
        ValueError: If the data cannot represent the hinted type
    """
    if value is None or hint is Any:
        return value
    origin = get_origin(hint)
    if origin is Union:
        members = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(members) == 1:
            return decode_value(members[0], value)
        return value
    if origin in (list, List):
        if not isinstance(value, list):
            raise ValueError(f"expected JSON array, got {type(value).__name__}")
        (item_hint,) = get_args(hint) or (Any,)
        return [decode_value(item_hint, item) for item in value]
    if origin in (dict, Dict):
        if not isinstance(value, dict):
            raise ValueError(f"expected JSON object, got {type(value).__name__}")
        args = get_args(hint)
        item_hint = args[1] if len(args) == 2 else Any
        return {k: decode_value(item_hint, v) for k, v in value.items()}
    if isinstance(hint, type):
        if issubclass(hint, Model):
            return hint.from_dict(value)
        if issubclass(hint, datetime):
            return parse_datetime(value)
        if issubclass(hint, Enum):
            try:
                return hint(value)
            except ValueError:
                return value
        if hint is float and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        if hint in (int, float) and (isinstance(value, bool) or not isinstance(value, (int, float))):
            raise ValueError(f"expected number, got {type(value).__name__}")
        if hint is str and not isinstance(value, str):
            raise ValueError(f"expected string, got {type(value).__name__}")
        if hint is bool and not isinstance(value, bool):
            raise ValueError(f"expected boolean, got {type(value).__name__}")
    return value


def to_json(value: Any, indent: Optional[int] = None) -> str:
    """Serialize a model or plain data to a JSON string."""
    return json.dumps(encode_value(value), indent=indent, ensure_ascii=False)


def to_json_bytes(value: Any) -> bytes:
    """Serialize a request body to compact UTF-8 JSON."""
    return json.dumps(encode_value(value, include_read_only=False), separators=(",", ":")).encode("utf-8")
