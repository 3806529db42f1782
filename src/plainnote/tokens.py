"""Token and TokenType definitions for the plainnote lexer.

The lexer produces a stream of Token objects that the parser consumes.
A Token is only a kind plus a span; its text is sliced from the source on
demand.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from plainnote.location import Span


class TokenType(Enum):
    """Token types produced by the lexer."""

    TEXT = auto()  # run of ordinary characters, or a stray backtick run
    NEWLINE = auto()  # \n
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    BACKTICK = auto()  # `
    TRIPLE_BACKTICK = auto()  # ```


@dataclass(frozen=True, slots=True)
class Token:
    """A classified slice of the source.

    Attributes:
        type: The token type
        span: Where the token sits in the source

    """

    type: TokenType
    span: Span

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    def value(self, source: str) -> str:
        """Return the token's text from the source it was lexed from."""
        return self.span.slice(source)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.span.start}:{self.span.end})"
