"""Token navigation utilities for the plainnote parser.

Provides the mixin that walks the lazy token stream with exactly one token
of lookahead, plus the error factory that attaches a source location.
"""

from __future__ import annotations

from collections.abc import Iterator

from plainnote.errors import ParseError
from plainnote.location import locate
from plainnote.tokens import Token, TokenType


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _source: str
        - _source_file: str | None
        - _tokens: Iterator[Token]
        - _current: Token | None (the single lookahead token)

    """

    _source: str
    _source_file: str | None
    _tokens: Iterator[Token]
    _current: Token | None

    def _at_end(self) -> bool:
        """Check if the token stream is exhausted."""
        return self._current is None

    def _at(self, token_type: TokenType) -> bool:
        """Check whether the lookahead token has the given type."""
        return self._current is not None and self._current.type is token_type

    def _advance(self) -> Token | None:
        """Consume the lookahead token and pull the next one.

        Returns:
            The consumed token, or None if the stream was already exhausted.
        """
        consumed = self._current
        self._current = next(self._tokens, None)
        return consumed

    def _error(
        self,
        error_cls: type[ParseError],
        message: str,
        offset: int,
    ) -> ParseError:
        """Build a ParseError located at ``offset`` in the source."""
        loc = locate(self._source, offset, self._source_file)
        return error_cls(
            message,
            offset=loc.offset,
            lineno=loc.lineno,
            col_offset=loc.col_offset,
            source_file=self._source_file,
        )
