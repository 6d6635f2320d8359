"""
Load JSON resources from a bundle.

Overview
- read_resource(): name -> (base, ext) -> bundle path -> bytes.
- load_json_value(): read_resource() then JsonValue.from_bytes().
- load_json(): read_resource() then to_json(), returning the decoded value unchanged.

Errors
- NotFoundError: empty/malformed name, or the bundle has no such resource.
- ReadError: the resolved file could not be read (chained to the OSError).
- DecodeError: the file is not valid JSON (from jsonbundle.core).

Import DAG discipline
- Depends on stdlib, jsonbundle.core, and jsonbundle.io helpers; does not import config.

Notes
- Synchronous and all-or-nothing: either the full value or an exception.
- The bundle is always passed explicitly; see LoaderSettings.bundle() for the default.
"""

from __future__ import annotations

import logging
from typing import Any

from jsonbundle.core.serde import to_json
from jsonbundle.core.value import JsonValue

from .bundle import ResourceBundle
from .errors import NotFoundError, ReadError
from .fs import FileSystem, LocalFileSystem
from .paths import split_resource_name

logger = logging.getLogger(__name__)

_LOCAL_FS = LocalFileSystem()


def read_resource(
    file_name: str,
    bundle: ResourceBundle,
    *,
    fs: FileSystem | None = None,
    default_extension: str = "json",
) -> bytes:
    """
    Resolve a named resource in a bundle and read its bytes.

    Args:
        file_name (str): Logical resource name ("config", "config.json", "dir/list.json").
        bundle (ResourceBundle): Bundle used to resolve the name to a path.
        fs (FileSystem | None): Reader for the resolved path (LocalFileSystem by default).
        default_extension (str): Extension used when `file_name` has none.

    Returns:
        bytes: Full contents of the resource.

    Raises:
        NotFoundError: If the name is malformed or the bundle has no such resource.
        ReadError: If the resolved file cannot be read.
    """
    try:
        name = split_resource_name(file_name, default_extension)
    except ValueError as exc:
        raise NotFoundError(f"invalid resource name {file_name!r}: {exc}") from exc

    path = bundle.resolve_path(name.base_name, name.extension)
    if path is None:
        raise NotFoundError(f"resource {name.file_name!r} not found in {bundle!r}")
    logger.debug("resolved %r to %s", file_name, path)

    reader = fs if fs is not None else _LOCAL_FS
    try:
        return reader.read_all_bytes(path)
    except OSError as exc:
        raise ReadError(f"cannot read resource {name.file_name!r} at {path}: {exc}") from exc


def load_json_value(
    file_name: str,
    bundle: ResourceBundle,
    *,
    fs: FileSystem | None = None,
    default_extension: str = "json",
) -> JsonValue:
    """
    Resolve, read, and decode a named resource into a JsonValue.

    Takes the same arguments as read_resource.

    Returns:
        JsonValue: Classified value retaining the file's raw bytes. Scalars, null and
        arrays holding non-object elements classify as NONE.

    Raises:
        NotFoundError: If the name is malformed or the bundle has no such resource.
        ReadError: If the resolved file cannot be read.
        DecodeError: If the file content is not valid JSON.
    """
    data = read_resource(file_name, bundle, fs=fs, default_extension=default_extension)
    return JsonValue.from_bytes(data)


def load_json(
    file_name: str,
    bundle: ResourceBundle,
    *,
    fs: FileSystem | None = None,
    default_extension: str = "json",
) -> Any:
    """
    Load a named JSON resource and return its decoded value.

    Args:
        file_name (str): Logical resource name; the extension is derived from the
            name, falling back to `default_extension`.
        bundle (ResourceBundle): Bundle used to resolve the name to a path.
        fs (FileSystem | None): Reader for the resolved path (LocalFileSystem by default).
        default_extension (str): Extension used when `file_name` has none.

    Returns:
        Any: The decoded document as-is: usually a dict or a list of dicts, but
        scalars, null and mixed arrays are returned unchanged.

    Raises:
        NotFoundError: If the bundle has no such resource.
        ReadError: If the resolved file cannot be read.
        DecodeError: If the file content is not valid JSON.

    Examples:
        >>> from jsonbundle.io import DirectoryBundle, load_json
        >>> load_json("config", DirectoryBundle("resources"))  # doctest: +SKIP
        {'a': 1}
    """
    data = read_resource(file_name, bundle, fs=fs, default_extension=default_extension)
    return to_json(data)
