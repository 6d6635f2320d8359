"""
Resource bundles: resolve a logical (base name, extension) pair to a file path.

Responsibilities
- Define the ResourceBundle protocol consumed by jsonbundle.io.load.
- DirectoryBundle: resources stored under a root directory on disk.
- PackageBundle: resources shipped inside an importable Python package.

Resolution rules
- "<base_name>.<extension>" when the extension is non-empty, else "<base_name>".
- Base names may contain "/" separators for subdirectories.
- Absolute names and names escaping the bundle root resolve to None.
- Only existing regular files resolve; directories resolve to None.

Notes
- There is no process-wide default bundle. Build one at the composition root
  (see LoaderSettings.bundle()) and pass it explicitly.
"""

from __future__ import annotations

import logging
import os
from importlib import resources
from pathlib import Path, PurePosixPath
from types import ModuleType
from typing import Protocol, runtime_checkable

from .paths import ResourceName

logger = logging.getLogger(__name__)


@runtime_checkable
class ResourceBundle(Protocol):
    """Resolves logical resource names to file-system paths."""

    def resolve_path(self, base_name: str, extension: str) -> Path | None:
        """Return the path of the resource, or None if the bundle has no such resource."""
        ...


def _relative_parts(base_name: str, extension: str) -> tuple[str, ...] | None:
    name = ResourceName(base_name=base_name, extension=extension).file_name
    p = PurePosixPath(name)
    if p.is_absolute() or ".." in p.parts or not p.parts:
        return None
    return p.parts


class DirectoryBundle:
    """
    Bundle rooted at a directory on the local filesystem.

    Attributes:
        root (Path): Directory that holds the resources.

    Examples:
        >>> bundle = DirectoryBundle("resources")  # doctest: +SKIP
        >>> bundle.resolve_path("config", "json")  # doctest: +SKIP
        PosixPath('resources/config.json')
    """

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root)

    def resolve_path(self, base_name: str, extension: str) -> Path | None:
        parts = _relative_parts(base_name, extension)
        if parts is None:
            logger.debug("rejected resource name %r.%r for %s", base_name, extension, self.root)
            return None
        candidate = self.root.joinpath(*parts)
        # Symlinks may still point outside the root; require the real path to stay inside.
        try:
            candidate.resolve().relative_to(self.root.resolve())
        except ValueError:
            return None
        if not candidate.is_file():
            return None
        return candidate

    def __repr__(self) -> str:
        return f"DirectoryBundle({str(self.root)!r})"


class PackageBundle:
    """
    Bundle over data files shipped inside an importable package.

    Args:
        package (str | ModuleType): Package holding the resources (e.g. "myapp.data").

    Notes:
        Only packages installed on a regular filesystem are supported; resources
        inside zip imports resolve to None.
        A package that cannot be imported has no resources; every name resolves
        to None.
    """

    def __init__(self, package: str | ModuleType) -> None:
        self.package = package

    def resolve_path(self, base_name: str, extension: str) -> Path | None:
        parts = _relative_parts(base_name, extension)
        if parts is None:
            return None
        try:
            node = resources.files(self.package)
        except ModuleNotFoundError:
            logger.debug("resource package %r is not importable", self.package)
            return None
        for part in parts:
            node = node / part
        if not isinstance(node, Path) or not node.is_file():
            return None
        return node

    def __repr__(self) -> str:
        name = self.package if isinstance(self.package, str) else self.package.__name__
        return f"PackageBundle({name!r})"
