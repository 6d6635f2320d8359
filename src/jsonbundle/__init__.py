"""
jsonbundle — classify JSON payloads and load JSON resources from bundles.

## Packages
- jsonbundle.core: zero-IO JsonValue, to_json and error types.
- jsonbundle.io: bundles, file reading, settings, load_json.

## Notes
- All parsing is delegated to the stdlib json module.
- The library logs under the "jsonbundle" logger and installs only a NullHandler.
"""

from __future__ import annotations

import logging

from .core import DecodeError, EncodeError, JsonError, JsonKind, JsonValue, to_json
from .io import (
    DirectoryBundle,
    LoaderSettings,
    NotFoundError,
    PackageBundle,
    ReadError,
    load_json,
    load_json_value,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DecodeError",
    "DirectoryBundle",
    "EncodeError",
    "JsonError",
    "JsonKind",
    "JsonValue",
    "LoaderSettings",
    "NotFoundError",
    "PackageBundle",
    "ReadError",
    "load_json",
    "load_json_value",
    "to_json",
]
