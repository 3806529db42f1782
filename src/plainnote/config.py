"""ContextVar-based compile configuration for plainnote.

Config is set once per ``Notes`` instance and read by the renderer in the
same context. Each thread or task has its own value, so concurrent compiles
with different settings never see each other's configuration.

Usage:
    from plainnote.config import NoteConfig, note_config_context

    with note_config_context(NoteConfig(escape_html=True)):
        html = compile_note(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class NoteConfig:
    """Immutable compile configuration.

    Attributes:
        escape_html: Escape ``<``, ``>``, ``&`` and quotes in text, code,
            link titles and hrefs. Off by default so notes may embed raw HTML.
        mono_class: CSS class of the element wrapping inline code

    """

    escape_html: bool = False
    mono_class: str = "mono"

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "NoteConfig":
        """Create NoteConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> NoteConfig.from_dict({"escape_html": True, "theme": "dark"})
            NoteConfig(escape_html=True, mono_class='mono')

        """
        valid_fields = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in valid_fields})


_DEFAULT_CONFIG: NoteConfig = NoteConfig()

_note_config: ContextVar[NoteConfig] = ContextVar(
    "note_config",
    default=_DEFAULT_CONFIG,
)


def get_note_config() -> NoteConfig:
    """Get the active NoteConfig for this thread/context."""
    return _note_config.get()


def set_note_config(config: NoteConfig) -> None:
    """Set the NoteConfig for the current context only."""
    _note_config.set(config)


def reset_note_config() -> None:
    """Reset to the module-level default configuration."""
    _note_config.set(_DEFAULT_CONFIG)


@contextmanager
def note_config_context(config: NoteConfig) -> Iterator[None]:
    """Use ``config`` for the duration of the block.

    The previous configuration is restored even if the block raises.
    """
    previous = _note_config.get()
    _note_config.set(config)
    try:
        yield
    finally:
        _note_config.set(previous)


__all__ = [
    "NoteConfig",
    "get_note_config",
    "set_note_config",
    "reset_note_config",
    "note_config_context",
]
