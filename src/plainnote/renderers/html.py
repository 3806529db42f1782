"""HTML renderer (resolver) using the StringBuilder pattern.

Walks a Document and resolves every span against the source string the
document was parsed from. No text is copied until the final join.

Output shape:
- each paragraph is ``<p>`` + elements + ``</p>``, with no newline between
  paragraphs
- every element is followed by one space, including the last one
- text, link titles and hrefs pass through verbatim unless
  ``NoteConfig.escape_html`` is set

Thread Safety:
HtmlRenderer holds only the source and configuration. render() keeps its
state in a local StringBuilder, so concurrent calls are safe.
"""

from __future__ import annotations

import html

from plainnote.config import NoteConfig, get_note_config
from plainnote.errors import RenderError
from plainnote.nodes import BlockMono, Document, Inline, Link, Mono, Paragraph, Text
from plainnote.stringbuilder import StringBuilder
from plainnote.utils.logger import get_logger

logger = get_logger(__name__)


def _passthrough(s: str) -> str:
    return s


def _escape(s: str) -> str:
    return html.escape(s, quote=True)


class HtmlRenderer:
    """Render a Document to an HTML fragment.

    Usage:
        >>> from plainnote.parser import Parser
        >>> source = "[Home](index.html)"
        >>> HtmlRenderer(source).render(Parser(source).parse())
        '<p><a href="index.html">Home</a> </p>'

    """

    __slots__ = ("_source", "_config", "_escape")

    def __init__(self, source: str, *, config: NoteConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            source: The exact source string the document was parsed from
            config: Compile configuration; defaults to the active context config
        """
        self._source = source
        self._config = config if config is not None else get_note_config()
        self._escape = _escape if self._config.escape_html else _passthrough

    def render(self, node: Document) -> str:
        """Render document to HTML string.

        Args:
            node: Document root

        Returns:
            HTML string ("" for an empty document)
        """
        sb = StringBuilder()
        for paragraph in node.children:
            self._render_paragraph(paragraph, sb)
        return sb.build()

    def _render_paragraph(self, para: Paragraph, sb: StringBuilder) -> None:
        sb.append("<p>")
        for child in para.children:
            self._render_inline(child, sb)
            sb.append(" ")
        sb.append("</p>")

    def _render_inline(self, node: Inline, sb: StringBuilder) -> None:
        source = self._source
        escape = self._escape
        match node:
            case Text(span=span):
                sb.append(escape(span.slice(source)))
            case Mono(span=span):
                sb.append(f'<span class="{self._config.mono_class}">')
                sb.append(escape(span.slice(source).strip()))
                sb.append("</span>")
            case BlockMono(span=span):
                sb.append("<pre>")
                sb.append(escape(span.slice(source).strip()))
                sb.append("</pre>")
            case Link(title=title, href=href):
                sb.append('<a href="')
                sb.append(escape(href.slice(source)))
                sb.append('">')
                sb.append(escape(title.slice(source)))
                sb.append("</a>")
            case _:
                logger.debug("cannot render node %r", node)
                raise RenderError(f"unknown inline node: {type(node).__name__}")
