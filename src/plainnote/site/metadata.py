"""Creation-timestamp store for notes.

Notes carry no dates of their own, so the first time a note is seen its
creation time is recorded here and reused on every later build.

File format, one record per line::

    notes/first_note.txt 2026-03-01T09:30:00+00:00

The filename and an RFC 3339 timestamp, separated by a single space.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from plainnote.errors import MetadataError
from plainnote.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Metadatum:
    """Stored creation time for one note.

    Examples:
        >>> m = Metadatum.parse("notes/a.txt 2026-03-01T09:30:00Z")
        >>> str(m)
        'notes/a.txt 2026-03-01T09:30:00+00:00'

    """

    filename: str
    created: datetime

    @classmethod
    def parse(cls, line: str) -> Metadatum:
        """Parse one store line.

        Raises:
            MetadataError: If the line is not ``<filename> <timestamp>``
                or the timestamp is not RFC 3339 with a UTC offset
        """
        # Timestamps never contain a space; filenames may.
        filename, sep, stamp = line.rpartition(" ")
        if not sep or not filename or not stamp:
            raise MetadataError("malformed metadatum", line)

        try:
            created = datetime.fromisoformat(stamp)
        except ValueError as e:
            raise MetadataError(f"invalid timestamp ({e})", line) from e
        if created.tzinfo is None:
            raise MetadataError("timestamp has no UTC offset", line)

        return cls(filename=filename, created=created.astimezone(UTC))

    def __str__(self) -> str:
        return f"{self.filename} {self.created.isoformat()}"


def read_metadata(meta_path: Path) -> list[Metadatum]:
    """Read every record from the store.

    A missing store is not an error: it means no note has been seen yet.

    Raises:
        MetadataError: On the first malformed line
    """
    try:
        contents = meta_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("no metadata store at %s, starting fresh", meta_path)
        return []

    return [Metadatum.parse(line) for line in contents.splitlines() if line]


def write_metadata(metadata: list[Metadatum], meta_path: Path) -> None:
    """Replace the store with ``metadata``."""
    meta_path.write_text("\n".join(str(m) for m in metadata), encoding="utf-8")
    logger.debug("wrote %d metadata records to %s", len(metadata), meta_path)
