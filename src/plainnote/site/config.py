"""Configuration loader for plainnote.toml.

Example file::

    [site]
    notes_dir = "notes"
    build_dir = "build"
    meta_path = ".notes"
    keep_going = false
    escape_html = false

Every key is optional. Command-line flags override values from the file.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from plainnote.config import NoteConfig
from plainnote.errors import ConfigError
from plainnote.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_NAME = "plainnote.toml"


@dataclass(frozen=True, slots=True)
class SiteConfig:
    """Where notes come from and where the site goes.

    Attributes:
        notes_dir: Directory holding the note files
        build_dir: Output directory; wiped and recreated on every build
        meta_path: Creation-timestamp store
        keep_going: Skip notes that fail to parse instead of aborting
        escape_html: Escape HTML-significant characters in note bodies

    """

    notes_dir: Path = Path("notes")
    build_dir: Path = Path("build")
    meta_path: Path = Path(".notes")
    keep_going: bool = False
    escape_html: bool = False

    @property
    def note_config(self) -> NoteConfig:
        return NoteConfig(escape_html=self.escape_html)

    def with_overrides(self, **overrides: Any) -> SiteConfig:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


_PATH_FIELDS = {"notes_dir", "build_dir", "meta_path"}


def load_site_config(config_path: Path | None = None) -> SiteConfig:
    """Load configuration from a TOML file.

    Search order:
    1. config_path (if provided; must exist)
    2. cwd/plainnote.toml (optional)

    Paths in the file are taken relative to the file's directory.

    Raises:
        ConfigError: If an explicit file is missing, or any file is not valid TOML
    """
    if config_path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_NAME
        if not candidate.is_file():
            return SiteConfig()
        config_path = candidate

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"config file not found: {config_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML in {config_path}: {e}") from e

    section = data.get("site", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[site] in {config_path} must be a table")

    base = config_path.parent
    valid_fields = {f.name for f in fields(SiteConfig)}
    values: dict[str, Any] = {}
    for key, value in section.items():
        if key not in valid_fields:
            logger.warning("ignoring unknown key %r in %s", key, config_path)
            continue
        values[key] = base / value if key in _PATH_FIELDS else value

    logger.debug("loaded site config from %s", config_path)
    return SiteConfig(**values)
