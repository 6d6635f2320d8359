"""
JSON encode/decode helpers shared by the core and IO layers.

Provides `to_json` (byte buffer to untyped JSON value) and the single encoding
policy used whenever a JsonValue is built from an in-memory structure. All
parsing is delegated to the stdlib `json` module. This module is zero-IO.

Notes:
    - Decoding accepts bytes in UTF-8, UTF-16 or UTF-32 (detected by `json.loads`).
    - NaN, Infinity and -Infinity literals are rejected as invalid JSON.
    - Encoding policy (json_dumps_bytes):
        - separators=(",", ":")
        - ensure_ascii=False, UTF-8 output
        - allow_nan=False (NaN/Infinity are not JSON)
        - insertion key order (no sorting)
    - json_dumps_canonical additionally sorts keys; use it for stable text
      renderings, not for the retained raw bytes.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import DecodeError, EncodeError
from .typing import BytesLike

__all__ = [
    "to_json",
    "json_dumps_bytes",
    "json_dumps_canonical",
]


def _reject_constant(name: str) -> Any:
    raise DecodeError(f"invalid JSON: {name} is not a JSON number")


def to_json(data: BytesLike) -> Any:
    """
    Deserialize a byte buffer into a JSON value.

    Args:
        data (bytes | bytearray | memoryview): Encoded JSON text.

    Returns:
        Any: Decoded Python object (dict, list, str, int, float, bool, or None).

    Raises:
        DecodeError: If the buffer is not valid Unicode or not valid JSON.

    Examples:
        >>> to_json(b'[{"x": 1}]')
        [{'x': 1}]
    """
    if isinstance(data, memoryview):
        data = data.tobytes()
    try:
        return json.loads(data, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc
    except UnicodeDecodeError as exc:
        raise DecodeError(f"invalid JSON: undecodable bytes at offset {exc.start}") from exc
    except TypeError as exc:
        raise DecodeError(f"invalid JSON: expected a byte buffer, got {type(data).__name__}") from exc


def json_dumps_bytes(obj: Any) -> bytes:
    """
    Encode an object to compact UTF-8 JSON bytes.

    Args:
        obj (Any): JSON-serializable object.

    Returns:
        bytes: Compact JSON encoding in insertion key order.

    Raises:
        EncodeError: If the object contains unsupported values or NaN/Infinity.
    """
    try:
        text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"cannot encode JSON: {exc}") from exc
    return text.encode("utf-8")


def json_dumps_canonical(obj: Any) -> str:
    """Serialize to a canonical JSON string (sorted keys, compact, unicode kept)."""
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
