"""Spans and source locations.

A ``Span`` is a half-open ``[start, end)`` interval into one source string.
Tokens and tree nodes carry spans instead of copies of the text; the text is
recovered by slicing the source the span was produced from.

Offsets count characters (code points), not encoded bytes, so a span can
never cut a multi-byte character in half.

Thread Safety:
Span and SourceLocation are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open character interval ``[start, end)`` into a source string.

    Examples:
        >>> source = "Hello world"
        >>> Span(6, 11).slice(source)
        'world'
        >>> len(Span(6, 11))
        5

    """

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, source: str) -> str:
        """Return the text this span covers in ``source``."""
        return source[self.start : self.end]

    def to(self, other: Span) -> Span:
        """Return a span from the start of this span to the end of ``other``."""
        return Span(self.start, other.end)


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Human-readable position of an offset, for error messages.

    ``lineno`` and ``col_offset`` are 1-indexed.

    Examples:
        >>> str(SourceLocation(lineno=3, col_offset=7, offset=20))
        '3:7'
        >>> str(SourceLocation(3, 7, 20, "notes/todo.txt"))
        'notes/todo.txt:3:7'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"


def locate(source: str, offset: int, source_file: str | None = None) -> SourceLocation:
    """Compute the line and column of ``offset`` in ``source``.

    Offsets past the end are clamped to ``len(source)``.

    Args:
        source: Source text the offset points into
        offset: Character offset
        source_file: Optional source file path

    Returns:
        SourceLocation for the offset
    """
    offset = max(0, min(offset, len(source)))
    lineno = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return SourceLocation(
        lineno=lineno,
        col_offset=offset - line_start + 1,
        offset=offset,
        source_file=source_file,
    )
