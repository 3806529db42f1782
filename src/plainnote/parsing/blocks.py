"""Paragraph parsing for plainnote.

A paragraph ends at a blank line (two consecutive newline tokens) or at the
end of input. A single newline inside a paragraph joins its lines and adds
no content of its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from plainnote.nodes import Paragraph
from plainnote.tokens import TokenType

if TYPE_CHECKING:
    from plainnote.nodes import Inline


class BlockParsingMixin:
    """Mixin for parsing paragraphs.

    Required Host Methods:
        - _at(token_type) -> bool
        - _advance() -> Token | None
        - _parse_inline() -> Inline

    """

    def _parse_paragraph(self) -> Paragraph | None:
        """Parse one paragraph.

        Newlines pair up: the first newline of a pair is consumed and, if a
        second follows, that one is consumed too and the paragraph ends. A
        third newline therefore lands at the start of the next paragraph,
        where it is consumed the same way and dropped.

        Returns:
            The paragraph, or None if it ended before any element was parsed
        """
        children: list[Inline] = []

        while not self._at_end():
            if self._at(TokenType.NEWLINE):
                self._advance()
                if self._at(TokenType.NEWLINE):
                    self._advance()
                    break
                if self._at_end():
                    break

            children.append(self._parse_inline())

        if not children:
            return None
        return Paragraph(children=tuple(children))
