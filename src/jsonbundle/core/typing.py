"""
Typing aliases for decoded JSON payloads.

Provides the recursive `Json` value type and the two top-level shapes that
`JsonValue` classifies. This module contains no runtime logic and is zero-IO.

Notes:
    - `Json` is pydantic's recursive JSON alias
      (None | bool | int | float | str | list[Json] | dict[str, Json]).
    - `JsonArray` is deliberately narrow: an array of objects only.

Examples:
    >>> from jsonbundle.core.typing import JsonObject
    >>> def payload() -> JsonObject:
    ...     return {"a": 1, "b": [True, None]}
"""

from __future__ import annotations

from typing import Union

from pydantic import JsonValue as Json

__all__ = [
    "Json",
    "JsonObject",
    "JsonArray",
    "JsonPayload",
    "BytesLike",
]

JsonObject = dict[str, Json]
JsonArray = list[JsonObject]

# Top-level payload carried by a JsonValue (None for the NONE kind).
JsonPayload = Union[JsonObject, JsonArray, None]

BytesLike = Union[bytes, bytearray, memoryview]
