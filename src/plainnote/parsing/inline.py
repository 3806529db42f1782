"""Inline element parsing for plainnote.

Dispatches on the lookahead token to one of four element parsers: text runs,
inline code, fenced code and links. Inline constructs never nest.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from plainnote.errors import (
    IncompleteLinkError,
    InvalidLinkError,
    UnexpectedTokenError,
    UnterminatedCodeError,
)
from plainnote.location import Span
from plainnote.nodes import BlockMono, Link, Mono, Text
from plainnote.tokens import Token, TokenType

if TYPE_CHECKING:
    from plainnote.nodes import Inline

# Tokens that end a text run (left for the caller to consume)
_TEXT_STOP = frozenset(
    {
        TokenType.BACKTICK,
        TokenType.TRIPLE_BACKTICK,
        TokenType.LBRACKET,
        TokenType.NEWLINE,
    }
)


class InlineParsingMixin:
    """Mixin for parsing inline elements.

    Required Host Attributes:
        - _current: Token | None

    Required Host Methods (from TokenNavigationMixin):
        - _advance() -> Token | None
        - _error(error_cls, message, offset) -> ParseError

    """

    def _parse_inline(self) -> Inline:
        """Parse one inline element starting at the lookahead token.

        The caller guarantees the stream is not exhausted.
        """
        token = self._current
        match token.type:
            case TokenType.TEXT:
                return self._parse_text()
            case TokenType.BACKTICK:
                return self._parse_mono()
            case TokenType.TRIPLE_BACKTICK:
                return self._parse_block_mono()
            case TokenType.LBRACKET:
                return self._parse_link()
            case _:
                raise self._error(
                    UnexpectedTokenError,
                    f"malformed input: unexpected token {token.value(self._source)!r}",
                    token.start,
                )

    def _parse_text(self) -> Text:
        """Parse a text run.

        Absorbs every following token, stray brackets and parens included,
        until a backtick, triple backtick, ``[`` or newline.
        """
        first = self._advance()
        end = first.end
        while self._current is not None and self._current.type not in _TEXT_STOP:
            end = self._current.end
            self._advance()
        return Text(Span(first.start, end))

    def _parse_mono(self) -> Mono:
        """Parse `inline code`; may span several lines."""
        span = self._scan_delimited(TokenType.BACKTICK, "unterminated inline code")
        return Mono(span)

    def _parse_block_mono(self) -> BlockMono:
        """Parse ```fenced code```."""
        span = self._scan_delimited(TokenType.TRIPLE_BACKTICK, "unterminated fenced code")
        return BlockMono(span)

    def _scan_delimited(self, delimiter: TokenType, unterminated: str) -> Span:
        """Consume an opener, everything up to the matching closer, and the closer.

        Returns:
            Span between the delimiters (both excluded)

        Raises:
            UnterminatedCodeError: If the stream ends before the closer
        """
        opener = self._advance()
        start = opener.end
        end = start
        while True:
            token = self._advance()
            if token is None:
                raise self._error(UnterminatedCodeError, unterminated, opener.start)
            if token.type is delimiter:
                return Span(start, end)
            end = token.end

    def _parse_link(self) -> Link:
        """Parse ``[title](href)``.

        The shape is fixed: ``[``, text, ``]``, ``(``, text, ``)``. No other
        tokens may appear between them.
        """
        opener = self._advance()
        title = self._expect_link_part(TokenType.TEXT, "expected text after '['", opener)
        self._expect_link_part(TokenType.RBRACKET, "expected ']' after title", opener)
        self._expect_link_part(TokenType.LPAREN, "expected '(' after ']'", opener)
        href = self._expect_link_part(TokenType.TEXT, "expected text after '('", opener)
        self._expect_link_part(TokenType.RPAREN, "expected ')' after href", opener)
        return Link(title=title.span, href=href.span)

    def _expect_link_part(self, token_type: TokenType, expected: str, opener: Token) -> Token:
        """Consume the next link token, which must be of ``token_type``."""
        token = self._current
        if token is None:
            raise self._error(IncompleteLinkError, "incomplete link", opener.start)
        if token.type is not token_type:
            raise self._error(InvalidLinkError, f"invalid link: {expected}", token.start)
        self._advance()
        return token
