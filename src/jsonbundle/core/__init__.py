"""
Core package for jsonbundle (zero-IO): typing aliases, errors, codec helpers, JsonValue.

## Contracts
- Typing: `Json`, `JsonObject`, `JsonArray` aliases for decoded payloads.
- Errors: `JsonError` base, `DecodeError`, `EncodeError`.
- Serde: `to_json` and the single encoding policy used for retained bytes.
- Value: `JsonValue`, the object/array/none classification with total accessors.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Must not import jsonbundle.io.

## Examples
```python
from jsonbundle.core import JsonValue

v = JsonValue.from_bytes(b'[{"x": 1}, {"x": 2}]')
v.is_array  # True
v.as_object  # {}
JsonValue.from_bytes(b'{"a":1}') == JsonValue.from_object({"a": 1})  # True
```
"""

from __future__ import annotations

from .errors import DecodeError, EncodeError, JsonError
from .serde import to_json
from .value import JsonKind, JsonValue

__all__ = [
    "DecodeError",
    "EncodeError",
    "JsonError",
    "JsonKind",
    "JsonValue",
    "to_json",
]
