"""
JsonValue: a classified JSON payload that keeps its raw bytes.

Responsibilities
- Classify a decoded payload as an object, an array of objects, or neither.
- Retain the exact bytes that produced the payload (or the bytes it was encoded to).
- Expose total accessors: the mismatched view is always an empty container.

Kinds
- NONE:   decoded fine but top level is a scalar, null, or an array with a
          non-object element; also the result of JsonValue.none().
- OBJECT: top level is a JSON object.
- ARRAY:  top level is a JSON array whose elements are all objects ([] included).

Equality
- Structural over JSON types: kinds must match, objects compare by keys and
  values, arrays element-wise. Booleans only equal booleans; numbers compare
  numerically (1 == 1.0). Raw bytes are not compared.
- Two values with empty views are no longer equal across kinds
  (JsonValue.none() != JsonValue.from_object({})).

Notes
- Zero-IO; stdlib json via jsonbundle.core.serde plus pydantic for shape validation.
- Payload containers are shared with the instance; treat them as read-only.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import EncodeError
from .serde import json_dumps_bytes, json_dumps_canonical, to_json
from .typing import BytesLike, JsonArray, JsonObject, JsonPayload

__all__ = [
    "JsonKind",
    "JsonValue",
]

_OBJECT_ADAPTER: TypeAdapter[JsonObject] = TypeAdapter(JsonObject)
_ARRAY_ADAPTER: TypeAdapter[JsonArray] = TypeAdapter(JsonArray)


class JsonKind(str, Enum):
    """Top-level shape of a JsonValue."""

    NONE = "none"
    OBJECT = "object"
    ARRAY = "array"


def _json_equal(a: Any, b: Any) -> bool:
    # bool is an int subclass; keep true/false distinct from 1/0.
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, dict):
        if not isinstance(b, dict) or a.keys() != b.keys():
            return False
        return all(_json_equal(a[k], b[k]) for k in a)
    if isinstance(a, list):
        if not isinstance(b, list) or len(a) != len(b):
            return False
        return all(_json_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (int, float)):
        return isinstance(b, (int, float)) and a == b
    if a is None or b is None:
        return a is b
    return type(a) is type(b) and a == b


def _as_json_input(obj: Any) -> Any:
    # Tuples encode as JSON arrays with the stdlib encoder; accept them as lists.
    if isinstance(obj, Mapping):
        return {k: _as_json_input(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_as_json_input(v) for v in obj]
    return obj


def _is_object_array(body: Any) -> bool:
    return isinstance(body, list) and all(isinstance(item, dict) for item in body)


@dataclass(frozen=True, slots=True, eq=False)
class JsonValue:
    """
    Classified JSON payload paired with its raw bytes.

    Attributes:
        kind (JsonKind): Which variant this value is.
        raw (bytes): Bytes the payload was decoded from or encoded to (b"" for NONE).
        payload (JsonObject | JsonArray | None): Decoded top-level structure.

    Examples:
        >>> v = JsonValue.from_bytes(b'{"a": 1}')
        >>> v.kind, v.as_object, v.as_array
        (<JsonKind.OBJECT: 'object'>, {'a': 1}, [])
        >>> JsonValue.from_bytes(b"42").is_none
        True
    """

    kind: JsonKind = JsonKind.NONE
    raw: bytes = b""
    payload: JsonPayload = None

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def none(cls) -> JsonValue:
        return cls()

    @classmethod
    def from_bytes(cls, data: BytesLike) -> JsonValue:
        """
        Decode a byte buffer and classify its top-level value.

        Args:
            data (bytes | bytearray | memoryview): Encoded JSON text.

        Returns:
            JsonValue: OBJECT or ARRAY retaining a copy of `data`, otherwise NONE.

        Raises:
            DecodeError: If `data` is not valid JSON. Invalid input is never NONE.
        """
        raw = bytes(data)
        body = to_json(raw)
        if isinstance(body, dict):
            return cls(JsonKind.OBJECT, raw, body)
        if _is_object_array(body):
            return cls(JsonKind.ARRAY, raw, body)
        return cls()

    @classmethod
    def from_object(cls, mapping: Mapping[str, Any]) -> JsonValue:
        """
        Wrap an in-memory mapping, re-encoding it to bytes.

        Args:
            mapping (Mapping[str, Any]): Mapping with string keys and JSON values.

        Returns:
            JsonValue: OBJECT value holding a validated copy of `mapping`; tuples
                and nested mappings are copied as lists and dicts.

        Raises:
            EncodeError: If `mapping` is not a mapping, has non-string keys, or
                holds values that cannot be encoded as JSON.
        """
        if not isinstance(mapping, Mapping):
            raise EncodeError(f"expected a mapping, got {type(mapping).__name__}")
        try:
            body = _OBJECT_ADAPTER.validate_python(_as_json_input(mapping))
        except ValidationError as exc:
            raise EncodeError(f"cannot encode JSON object: {exc}") from exc
        return cls(JsonKind.OBJECT, json_dumps_bytes(body), body)

    @classmethod
    def from_array(cls, items: Sequence[Mapping[str, Any]]) -> JsonValue:
        """
        Wrap an in-memory sequence of mappings, re-encoding it to bytes.

        Raises:
            EncodeError: If `items` is not a sequence of JSON-encodable mappings.
        """
        if isinstance(items, (str, bytes, bytearray)) or not isinstance(items, Sequence):
            raise EncodeError(f"expected a sequence of mappings, got {type(items).__name__}")
        for index, item in enumerate(items):
            if not isinstance(item, Mapping):
                raise EncodeError(f"array element {index} is {type(item).__name__}, expected a mapping")
        try:
            body = _ARRAY_ADAPTER.validate_python([_as_json_input(item) for item in items])
        except ValidationError as exc:
            raise EncodeError(f"cannot encode JSON array: {exc}") from exc
        return cls(JsonKind.ARRAY, json_dumps_bytes(body), body)

    @property
    def as_object(self) -> JsonObject:
        """Object view; empty dict unless kind is OBJECT."""
        if self.kind is JsonKind.OBJECT:
            return self.payload  # type: ignore[return-value]
        return {}

    @property
    def as_array(self) -> JsonArray:
        """Array view; empty list unless kind is ARRAY."""
        if self.kind is JsonKind.ARRAY:
            return self.payload  # type: ignore[return-value]
        return []

    @property
    def is_object(self) -> bool:
        return self.kind is JsonKind.OBJECT

    @property
    def is_array(self) -> bool:
        return self.kind is JsonKind.ARRAY

    @property
    def is_none(self) -> bool:
        return self.kind is JsonKind.NONE

    def __bool__(self) -> bool:
        return self.kind is not JsonKind.NONE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonValue):
            return NotImplemented
        return self.kind is other.kind and _json_equal(self.payload, other.payload)

    def __repr__(self) -> str:
        if self.kind is JsonKind.NONE:
            return "JsonValue.none()"
        return f"JsonValue({self.kind.value}, {json_dumps_canonical(self.payload)})"
