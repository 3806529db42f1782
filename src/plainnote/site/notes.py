"""Note discovery and filename-derived identity.

A note's identity is its filename. Everything else the site needs (page
title, output path, index link) is derived from the part of the filename
between the directory and the first dot: ``notes/road_trip.txt`` becomes
``road_trip``, titled "road trip" and published as ``road_trip.html``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

from plainnote.site.metadata import Metadatum
from plainnote.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class NoteLink:
    """An entry on the index page."""

    href: str
    title: str


@dataclass(slots=True)
class Note:
    """One note file and its creation time."""

    filename: str
    content: str
    created: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def path_core(self) -> str:
        name = self.filename.rsplit("/", 1)[-1]
        return name.split(".", 1)[0]

    @property
    def title(self) -> str:
        return self.path_core.replace("_", " ")

    @property
    def html_path(self) -> str:
        return f"{self.path_core}.html"

    def link(self) -> NoteLink:
        """Build the index entry pointing at this note's page."""
        href = self.path_core.replace('"', "&quot;")
        return NoteLink(href=f"./{href}.html", title=self.title)

    def reconcile(self, metadata: list[Metadatum]) -> None:
        """Adopt the stored creation time for this note, if one exists."""
        for meta in metadata:
            if meta.filename == self.filename:
                self.created = meta.created
                return

    def to_metadatum(self) -> Metadatum:
        return Metadatum(filename=self.filename, created=self.created)


def collect_note_paths(notes_dir: Path) -> list[Path]:
    """List regular, non-hidden files directly inside ``notes_dir``.

    Sorted by name so discovery order does not depend on the filesystem.
    """
    return sorted(
        (p for p in notes_dir.iterdir() if p.is_file() and not p.name.startswith(".")),
        key=lambda p: p.name,
    )


def read_note(path: Path) -> Note:
    return Note(filename=path.as_posix(), content=path.read_text(encoding="utf-8"))


def read_notes(notes_dir: Path) -> list[Note]:
    """Read every note in ``notes_dir``.

    Raises:
        FileNotFoundError: If ``notes_dir`` does not exist
    """
    notes = [read_note(path) for path in collect_note_paths(notes_dir)]
    logger.info("found %d notes in %s", len(notes), notes_dir)
    return notes
