"""Parsing subsystem for the plainnote parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream traversal with one token of lookahead
- `InlineParsingMixin`: Text runs, inline code, fenced code, links
- `BlockParsingMixin`: Paragraphs and blank-line separators

Example:
    >>> from plainnote.parsing import (
    ...     TokenNavigationMixin,
    ...     InlineParsingMixin,
    ...     BlockParsingMixin,
    ... )
    >>> class Parser(TokenNavigationMixin, InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from plainnote.parsing.blocks import BlockParsingMixin
from plainnote.parsing.inline import InlineParsingMixin
from plainnote.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "TokenNavigationMixin",
    "InlineParsingMixin",
    "BlockParsingMixin",
]
