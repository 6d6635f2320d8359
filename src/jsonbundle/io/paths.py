"""
Resource name helpers for jsonbundle.io.

Overview
- A logical resource name such as "config", "config.json" or "fixtures/list.json"
  is split into a base name and an extension before asking a bundle to resolve it.
- "config"              -> ("config", <default extension>)
- "config.json"         -> ("config", "json")
- "a.b.json"            -> ("a.b", "json")
- "fixtures/list.json"  -> ("fixtures/list", "json")
- "dir/.hidden.json"    -> ("dir/.hidden", "json")
- ".json", "config."   -> ValueError

Import DAG discipline
- stdlib only. No filesystem access happens here.

Notes
- Names are treated as POSIX-style relative paths regardless of platform.
- The extension is the text after the last "." of the last "/"-separated component.
- URL-like names ("file://...", "https://...") are rejected; bundles resolve
  logical names, not locations.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

_DEFAULT_EXTENSION: Final[str] = "json"
_SCHEME_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


@dataclass(slots=True, frozen=True)
class ResourceName:
    """
    A logical resource name split for bundle lookup.

    Attributes:
        base_name (str): Name without extension; may contain "/" separators.
        extension (str): Extension without the leading dot ("" for none).
    """

    base_name: str
    extension: str

    @property
    def file_name(self) -> str:
        """Base name joined with the extension ("config.json")."""
        if not self.extension:
            return self.base_name
        return f"{self.base_name}.{self.extension}"


def normalize_extension(extension: str) -> str:
    """
    Strip whitespace and a leading dot from an extension.

    Args:
        extension (str): Extension such as "json" or ".json".

    Returns:
        str: Extension without the leading dot.
    """
    return (extension or "").strip().lstrip(".")


def split_resource_name(file_name: str, default_extension: str = _DEFAULT_EXTENSION) -> ResourceName:
    """
    Split a logical file name into base name and extension.

    Args:
        file_name (str): Logical resource name, optionally with an extension.
        default_extension (str): Extension used when the name has none ("" to
            look the name up verbatim).

    Returns:
        ResourceName: Split name.

    Raises:
        ValueError: If the name is empty, ends with "/" or ".", is only an extension
            (".json"), contains NUL, or looks like a URL.
    """
    s = (file_name or "").strip()
    if not s:
        raise ValueError("resource name must not be empty")
    if "\x00" in s:
        raise ValueError("resource name must not contain NUL characters")
    if _SCHEME_RE.match(s):
        raise ValueError(f"resource name must be a logical name, not a URL: {s!r}")
    if s.endswith("/"):
        raise ValueError(f"resource name must not end with '/': {s!r}")

    last = s.rpartition("/")[2]
    if last.endswith("."):
        raise ValueError(f"resource name must not end with '.': {s!r}")
    stem, dot, extension = last.rpartition(".")
    if dot:
        if not stem:
            raise ValueError(f"resource name has an extension but no base name: {s!r}")
        return ResourceName(base_name=s[: -len(extension) - 1], extension=extension)
    return ResourceName(base_name=s, extension=normalize_extension(default_extension))
