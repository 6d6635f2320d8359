"""
Configuration for the jsonbundle.io module.

Defines LoaderSettings, a frozen dataclass carrying runtime configuration for
resource loading, and acts as the composition root that turns settings into a
concrete ResourceBundle.

Precedence
- environment > TOML > defaults.
- Environment variables use the JSONBUNDLE_ prefix.
- TOML is read from ./jsonbundle.toml ([loader] table or top-level keys), or
  from ./pyproject.toml under [tool.jsonbundle.loader].

Notes
- Unknown keys and values of the wrong type are ignored, leaving the previous value.
- TOML parsing uses the stdlib tomllib.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .bundle import DirectoryBundle
from .load import load_json
from .paths import normalize_extension

logger = logging.getLogger(__name__)

ENV_PREFIX = "JSONBUNDLE_"


@dataclass(frozen=True)
class LoaderSettings:
    """
    Runtime settings for the jsonbundle.io layer.

    Attributes:
        resource_dir (str): Root directory of the default DirectoryBundle.
        default_extension (str): Extension used for names given without one
            (stored without a leading dot; "" looks names up verbatim).

    Examples:
        >>> from jsonbundle.io import LoaderSettings
        >>> LoaderSettings(resource_dir="fixtures").bundle()
        DirectoryBundle('fixtures')
    """

    resource_dir: str = "resources"
    default_extension: str = "json"

    @classmethod
    def _apply_mapping(cls, base: LoaderSettings, cfg: dict[str, Any] | None) -> LoaderSettings:
        """Apply a loose config mapping onto LoaderSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "resource_dir" in cfg and isinstance(cfg["resource_dir"], str):
            s = replace(s, resource_dir=cfg["resource_dir"])

        if "default_extension" in cfg and isinstance(cfg["default_extension"], str):
            s = replace(s, default_extension=normalize_extension(cfg["default_extension"]))

        return s

    @classmethod
    def from_env(cls, base: LoaderSettings | None = None, prefix: str = ENV_PREFIX) -> LoaderSettings:
        """
        Build LoaderSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - JSONBUNDLE_RESOURCE_DIR
            - JSONBUNDLE_DEFAULT_EXTENSION
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        v = os.getenv(prefix + "RESOURCE_DIR")
        if v:
            mapping["resource_dir"] = v
        # An empty value is meaningful here (look names up verbatim).
        v = os.getenv(prefix + "DEFAULT_EXTENSION")
        if v is not None:
            mapping["default_extension"] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> LoaderSettings:
        """
        Build LoaderSettings from a TOML file.

        Search order when `path` is None:
            1) ./jsonbundle.toml (with either a [loader] table or direct keys)
            2) ./pyproject.toml under [tool.jsonbundle.loader]

        Returns defaults if no file is present or none of them can be parsed.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "jsonbundle.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.is_file():
                continue
            try:
                with p.open("rb") as fh:
                    data = tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("ignoring unreadable settings file %s: %s", p, exc)
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                section = tool.get("jsonbundle", {}) if isinstance(tool, dict) else {}
                cfg = section.get("loader") if isinstance(section, dict) else None
            elif isinstance(data.get("loader"), dict):
                cfg = data["loader"]
            else:
                cfg = data
            if cfg:
                logger.debug("loaded loader settings from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> LoaderSettings:
        """
        Load LoaderSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (jsonbundle.toml, pyproject.toml).

        Returns:
            LoaderSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s

    def bundle(self) -> DirectoryBundle:
        """Build the DirectoryBundle rooted at resource_dir."""
        return DirectoryBundle(self.resource_dir)

    def load_json(self, file_name: str) -> Any:
        """Load a resource from the configured bundle (see jsonbundle.io.load.load_json)."""
        return load_json(file_name, self.bundle(), default_extension=self.default_extension)
