"""
Core exception types raised while decoding and encoding JSON payloads.

Provides typed exceptions for core-domain failures:
- JsonError as the common base for every error raised by jsonbundle.
- DecodeError when a byte buffer is not valid JSON (or not valid Unicode).
- EncodeError when an in-memory structure cannot be encoded as JSON.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - DecodeError and EncodeError also subclass ValueError, so callers that
      already handle json.JSONDecodeError-style failures keep working.
    - Loader errors (missing or unreadable resources) live in jsonbundle.io.errors.

Examples:
    >>> from jsonbundle.core.errors import DecodeError
    >>> from jsonbundle.core.serde import to_json
    >>> try:
    ...     to_json(b"{not json")
    ... except DecodeError as e:
    ...     msg = str(e)
    >>> "invalid JSON" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "JsonError",
    "DecodeError",
    "EncodeError",
]


class JsonError(Exception):
    """Base class for all jsonbundle errors."""


class DecodeError(JsonError, ValueError):
    """Byte buffer is not syntactically valid JSON."""


class EncodeError(JsonError, ValueError):
    """Structure cannot be encoded as JSON (non-string key, unsupported value, NaN)."""
