"""
jsonbundle.io — Resource loading layer for JSON payloads.

## Responsibilities
- Resolve logical resource names ("config", "fixtures/list.json") through a ResourceBundle.
- Read resource bytes through a FileSystem and decode them into jsonbundle.core.JsonValue.
- Report missing, unreadable, and malformed resources as distinct errors.

## Public API
- load_json / load_json_value / read_resource: load a named resource from an explicit bundle.
- DirectoryBundle / PackageBundle: bundles over a directory or an importable package.
- LocalFileSystem: default reader.
- LoaderSettings: configuration (env > TOML > defaults) and default bundle construction.
- NotFoundError / ReadError: loader errors (DecodeError comes from jsonbundle.core).

## Import DAG discipline
- Depends only on stdlib and jsonbundle.core.

## Examples
```python
from jsonbundle.io import DirectoryBundle, LoaderSettings, load_json

load_json("config", DirectoryBundle("resources"))  # {'a': 1}
LoaderSettings.load().load_json("list")  # [{'x': 1}, {'x': 2}]
```
"""

from __future__ import annotations

from .bundle import DirectoryBundle, PackageBundle, ResourceBundle
from .config import LoaderSettings
from .errors import LoaderError, NotFoundError, ReadError
from .fs import FileSystem, LocalFileSystem
from .load import load_json, load_json_value, read_resource

__all__ = [
    "DirectoryBundle",
    "FileSystem",
    "LoaderError",
    "LoaderSettings",
    "LocalFileSystem",
    "NotFoundError",
    "PackageBundle",
    "ReadError",
    "ResourceBundle",
    "load_json",
    "load_json_value",
    "read_resource",
]
