"""Exception classes for plainnote.

Every parse failure is fatal for the note being compiled: the parser raises
the first error it meets and returns no partial tree.
"""

from __future__ import annotations


class PlainNoteError(Exception):
    """Base exception for all plainnote errors."""

    pass


class ParseError(PlainNoteError):
    """Error during note parsing.

    Raised when the parser meets a construct it cannot accept. Carries the
    character offset of the offending token (or the end of the source when
    the stream ran out) and, when the source was available, its 1-indexed
    line and column.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            offset: Character offset into the source where the error occurred
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.offset = offset
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnexpectedTokenError(ParseError):
    """An inline element cannot start with the current token.

    Stray ``]``, ``(`` or ``)`` at the start of an element.
    """


class UnterminatedCodeError(ParseError):
    """Inline code or fenced code reached end of input before its closer."""


class IncompleteLinkError(ParseError):
    """The input ended in the middle of a ``[title](href)`` link."""


class InvalidLinkError(ParseError):
    """A link had the wrong kind of token at a fixed position."""


class RenderError(PlainNoteError):
    """The renderer met a node it does not know how to render."""

    pass


class MetadataError(PlainNoteError):
    """A line in the creation-timestamp store could not be parsed."""

    def __init__(self, message: str, line: str | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)


class NoteBuildError(PlainNoteError):
    """A note failed to compile while building the site.

    The underlying ParseError is chained as ``__cause__``.
    """

    def __init__(self, filename: str, message: str) -> None:
        self.filename = filename
        super().__init__(f"{filename}: {message}")


class ConfigError(PlainNoteError):
    """The site configuration file is unreadable or malformed."""
