"""Recursive descent parser producing a span-based document tree.

Pulls tokens lazily from the Lexer and builds immutable nodes whose spans
point back into the source string.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal
- `InlineParsingMixin`: Text runs, code and links
- `BlockParsingMixin`: Paragraphs

Parsing is all-or-nothing. The first malformed construct raises a
ParseError and no tree is returned.

"""

from __future__ import annotations

from collections.abc import Iterator

from plainnote.lexer import Lexer
from plainnote.nodes import Document, Paragraph
from plainnote.parsing import (
    BlockParsingMixin,
    InlineParsingMixin,
    TokenNavigationMixin,
)
from plainnote.tokens import Token
from plainnote.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Recursive descent parser for plainnote markup.

    Usage:
        >>> doc = Parser("Hello `world`").parse()
        >>> doc.children[0].children
        (Text(span=Span(start=0, end=6)), Mono(span=Span(start=7, end=12)))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting tree is immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_tokens",
        "_current",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Args:
            source: Note source text
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_file = source_file
        self._tokens: Iterator[Token] = iter(())
        self._current: Token | None = None

    def parse(self) -> Document:
        """Parse the source into a Document.

        Returns:
            Document whose spans index into the source

        Raises:
            ParseError: On the first malformed construct
        """
        self._tokens = Lexer(self._source, self._source_file).tokenize()
        self._current = next(self._tokens, None)

        paragraphs: list[Paragraph] = []
        while not self._at_end():
            paragraph = self._parse_paragraph()
            if paragraph is not None:
                paragraphs.append(paragraph)

        logger.debug(
            "parsed %d paragraphs from %s",
            len(paragraphs),
            self._source_file or "<string>",
        )
        return Document(children=tuple(paragraphs))
