"""Static site build pipeline.

Steps, in order:
1. read the creation-timestamp store
2. read the notes and adopt their stored creation times
3. sort notes oldest first
4. compile every note body
5. recreate the build directory with the stylesheet
6. write the index page and one page per note
7. persist the timestamp store

Compilation happens before the build directory is touched, so a note that
fails to parse (without ``keep_going``) leaves the previous build in place.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from plainnote import Notes
from plainnote.errors import MetadataError, NoteBuildError, ParseError
from plainnote.site.config import SiteConfig
from plainnote.site.metadata import Metadatum, read_metadata, write_metadata
from plainnote.site.notes import Note, NoteLink, read_notes
from plainnote.site.templates import format_date, render_index, render_note_page, stylesheet
from plainnote.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class BuildReport:
    """Outcome of one site build."""

    build_dir: Path
    built: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


def prep_build_dir(build_dir: Path) -> None:
    """Delete ``build_dir`` if it exists, recreate it, and write ``main.css``."""
    if build_dir.exists():
        shutil.rmtree(build_dir)
    build_dir.mkdir(parents=True)
    (build_dir / "main.css").write_text(stylesheet(), encoding="utf-8")


def write_index(links: list[NoteLink], build_dir: Path) -> Path:
    path = build_dir / "index.html"
    path.write_text(render_index(links), encoding="utf-8")
    return path


def write_note(note: Note, content: str, build_dir: Path) -> Path:
    """Write the page for ``note`` with an already compiled body."""
    page = render_note_page(title=note.title, date=format_date(note.created), content=content)
    path = build_dir / note.html_path
    path.write_text(page, encoding="utf-8")
    return path


def compile_notes(
    notes: list[Note],
    compiler: Notes,
    *,
    keep_going: bool = False,
) -> tuple[list[tuple[Note, str]], list[str]]:
    """Compile every note body.

    Returns:
        (compiled (note, html) pairs in input order, filenames that failed)

    Raises:
        NoteBuildError: On the first ParseError, unless ``keep_going``
    """
    compiled: list[tuple[Note, str]] = []
    failed: list[str] = []
    for note in notes:
        try:
            content = compiler(note.content, source_file=note.filename)
        except ParseError as e:
            if not keep_going:
                raise NoteBuildError(note.filename, e.message) from e
            logger.warning("skipping note: %s", e)
            failed.append(note.filename)
            continue
        compiled.append((note, content))
    return compiled, failed


def write_notes(compiled: list[tuple[Note, str]], build_dir: Path) -> list[str]:
    written = []
    for note, content in compiled:
        write_note(note, content, build_dir)
        written.append(note.filename)
    return written


def load_metadata(meta_path: Path) -> list[Metadatum]:
    """Read the timestamp store, starting from empty if it is malformed."""
    try:
        return read_metadata(meta_path)
    except MetadataError as e:
        logger.warning("ignoring unreadable metadata store %s: %s", meta_path, e)
        return []


def build_site(config: SiteConfig) -> BuildReport:
    """Build the whole site described by ``config``.

    Raises:
        NoteBuildError: If a note fails to parse and ``keep_going`` is off
        FileNotFoundError: If the notes directory does not exist
    """
    metadata = load_metadata(config.meta_path)
    notes = read_notes(config.notes_dir)

    for note in notes:
        note.reconcile(metadata)
    notes.sort(key=lambda n: n.created)

    compiler = Notes(config=config.note_config)
    compiled, failed = compile_notes(notes, compiler, keep_going=config.keep_going)

    prep_build_dir(config.build_dir)
    write_index([note.link() for note, _ in compiled], config.build_dir)
    built = write_notes(compiled, config.build_dir)
    write_metadata([note.to_metadatum() for note in notes], config.meta_path)

    logger.info(
        "built %d notes into %s (%d failed)",
        len(built),
        config.build_dir,
        len(failed),
    )
    return BuildReport(build_dir=config.build_dir, built=built, failed=failed)
