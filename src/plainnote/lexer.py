"""Pull-based lexer for plainnote markup.

Splits a source string into a lazy stream of tokens. Every character of the
source belongs to exactly one token, so joining the token texts in order
gives back the source unchanged.

No regex in the hot path: delimiters are single characters, text runs are
found with a character-class scan.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from plainnote.location import Span
from plainnote.tokens import Token, TokenType
from plainnote.utils.logger import get_logger

logger = get_logger(__name__)

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "\n": TokenType.NEWLINE,
}

# Characters that end a text run
_SPECIAL_CHARS = frozenset("[]()`\n")


class Lexer:
    """Character-by-character lexer producing spanned tokens.

    Usage:
        >>> for token in Lexer("see [docs](x)").tokenize():
        ...     print(token)
        Token(TEXT, 0:4)
        Token(LBRACKET, 4:5)
        Token(TEXT, 5:9)
        Token(RBRACKET, 9:10)
        Token(LPAREN, 10:11)
        Token(TEXT, 11:12)
        Token(RPAREN, 12:13)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = ("_source", "_source_len", "_pos", "_source_file")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Note source text
            source_file: Optional source file path for log messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time, in source order

        Complexity: O(n) where n = len(source)
        Memory: O(1) iterator (tokens yielded, not accumulated)
        """
        source = self._source
        source_len = self._source_len
        count = 0

        while self._pos < source_len:
            start = self._pos
            char = source[start]

            kind = _SINGLE_CHAR_TOKENS.get(char)
            if kind is not None:
                self._pos += 1
            elif char == "`":
                kind = self._scan_backticks()
            else:
                kind = self._scan_text()

            count += 1
            yield Token(kind, Span(start, self._pos))

        logger.debug("lexed %d tokens from %s", count, self._source_file or "<string>")

    def _scan_backticks(self) -> TokenType:
        """Consume a run of backticks and classify it by length.

        One backtick opens or closes inline code, exactly three open or close
        fenced code. Any other run length is plain text.
        """
        start = self._pos
        pos = start
        while pos < self._source_len and self._source[pos] == "`":
            pos += 1
        self._pos = pos

        run = pos - start
        if run == 1:
            return TokenType.BACKTICK
        if run == 3:
            return TokenType.TRIPLE_BACKTICK
        return TokenType.TEXT

    def _scan_text(self) -> TokenType:
        """Consume the longest run of characters that are not delimiters."""
        pos = self._pos
        source = self._source
        while pos < self._source_len and source[pos] not in _SPECIAL_CHARS:
            pos += 1
        self._pos = pos
        return TokenType.TEXT


def tokenize(source: str, source_file: str | None = None) -> Iterator[Token]:
    """Shortcut for ``Lexer(source, source_file).tokenize()``."""
    return Lexer(source, source_file).tokenize()
