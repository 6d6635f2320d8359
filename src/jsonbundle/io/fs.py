"""
Filesystem helpers for jsonbundle.io (file protocol baseline).

Responsibilities
- Define the FileSystem protocol consumed by the loader: read a whole file as bytes.
- Provide LocalFileSystem, the default implementation on top of the local disk.
- Offer small existence checks used by bundles when resolving resource paths.

Import DAG discipline
- stdlib-only; alternative backends can be passed to load_json behind the same protocol.

Notes
- Reads are all-or-nothing: a file is opened, fully read, and closed in one call.
- OSError is propagated unchanged; the loader maps it to ReadError.
"""

from __future__ import annotations

import logging
import os
from typing import Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


@runtime_checkable
class FileSystem(Protocol):
    """Reads resource bytes for the loader."""

    def read_all_bytes(self, path: PathLike) -> bytes:
        """Return the full contents of `path`, raising OSError on failure."""
        ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def read_all_bytes(self, path: PathLike) -> bytes:
        """
        Read a file's full contents.

        Args:
            path (str | os.PathLike[str]): File to read.

        Returns:
            bytes: File contents.

        Raises:
            OSError: If the file is missing, unreadable, or a directory.
        """
        with open(path, "rb") as fh:
            data = fh.read()
        logger.debug("read %d bytes from %s", len(data), os.fspath(path))
        return data


def exists(path: PathLike) -> bool:
    """
    Check whether a path exists.

    Args:
        path (str | os.PathLike[str]): Filesystem path.

    Returns:
        bool: True if the path exists, False otherwise.
    """
    return os.path.exists(path)


def is_file(path: PathLike) -> bool:
    """Check whether a path exists and is a regular file."""
    return os.path.isfile(path)
