"""
plainnote: publish plain-text notes as a static HTML site.

The core is a small markup compiler. Notes are prose with `inline code`,
```fenced code``` and [links](target.html); paragraphs are separated by a
blank line.

Quick Start:
    >>> from plainnote import parse, render
    >>> source = "Hello `world`"
    >>> doc = parse(source)
    >>> render(doc, source=source)
    '<p>Hello  <span class="mono">world</span> </p>'

    >>> # Or use the high-level Notes class
    >>> from plainnote import Notes
    >>> notes = Notes()
    >>> notes("[Home](index.html)")
    '<p><a href="index.html">Home</a> </p>'

Building a site:
    $ plainnote build --notes notes --out build
"""

from collections.abc import Iterable

from plainnote.config import (
    NoteConfig,
    get_note_config,
    note_config_context,
    reset_note_config,
    set_note_config,
)
from plainnote.errors import (
    ConfigError,
    IncompleteLinkError,
    InvalidLinkError,
    MetadataError,
    NoteBuildError,
    ParseError,
    PlainNoteError,
    RenderError,
    UnexpectedTokenError,
    UnterminatedCodeError,
)
from plainnote.lexer import Lexer, tokenize
from plainnote.location import SourceLocation, Span, locate
from plainnote.nodes import (
    BlockMono,
    Document,
    Inline,
    Link,
    Mono,
    Node,
    Paragraph,
    Text,
)
from plainnote.parser import Parser
from plainnote.renderers.html import HtmlRenderer
from plainnote.tokens import Token, TokenType

__version__ = "0.3.0"


def parse(source: str, *, source_file: str | None = None) -> Document:
    """Parse note source into a Document.

    Args:
        source: Note source text
        source_file: Optional source file path for error messages

    Returns:
        Document whose spans index into ``source``

    Raises:
        ParseError: On the first malformed construct
    """
    return Parser(source, source_file=source_file).parse()


def render(doc: Document, *, source: str, config: NoteConfig | None = None) -> str:
    """Render a Document to HTML.

    Args:
        doc: Document to render
        source: The source string ``doc`` was parsed from
        config: Optional configuration (defaults to the active context config)

    Returns:
        HTML fragment
    """
    return HtmlRenderer(source, config=config).render(doc)


def compile_note(
    source: str,
    *,
    source_file: str | None = None,
    config: NoteConfig | None = None,
) -> str:
    """Lex, parse and render one note in a single call.

    Example:
        >>> compile_note("A\\n\\nB")
        '<p>A </p><p>B </p>'
    """
    doc = parse(source, source_file=source_file)
    return render(doc, source=source, config=config)


class Notes:
    """High-level note compiler combining parser and renderer.

    Usage:
        >>> notes = Notes(config=NoteConfig(escape_html=True))
        >>> notes("1 < 2")
        '<p>1 &lt; 2 </p>'

    Thread Safety:
        Holds only an immutable NoteConfig. Safe to share across threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, config: NoteConfig | None = None) -> None:
        self._config = config or NoteConfig()

    @property
    def config(self) -> NoteConfig:
        return self._config

    def __call__(self, source: str, *, source_file: str | None = None) -> str:
        """Parse and render one note.

        Raises:
            ParseError: On the first malformed construct
        """
        doc = self.parse(source, source_file=source_file)
        return self.render(doc, source=source)

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse note source into a Document."""
        return Parser(source, source_file=source_file).parse()

    def render(self, doc: Document, *, source: str) -> str:
        """Render a Document parsed from ``source`` to HTML."""
        return HtmlRenderer(source, config=self._config).render(doc)

    def compile_many(self, sources: Iterable[str]) -> list[str]:
        """Compile several independent notes, in order.

        The first ParseError aborts the batch.
        """
        return [self(source) for source in sources]


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "compile_note",
    "Notes",
    # Nodes
    "Node",
    "Document",
    "Paragraph",
    "Inline",
    "Text",
    "Mono",
    "BlockMono",
    "Link",
    # Parser components
    "Lexer",
    "tokenize",
    "Parser",
    "HtmlRenderer",
    "Token",
    "TokenType",
    # Location
    "Span",
    "SourceLocation",
    "locate",
    # Configuration (ContextVar-based)
    "NoteConfig",
    "get_note_config",
    "set_note_config",
    "reset_note_config",
    "note_config_context",
    # Errors
    "PlainNoteError",
    "ParseError",
    "UnexpectedTokenError",
    "UnterminatedCodeError",
    "IncompleteLinkError",
    "InvalidLinkError",
    "RenderError",
    "MetadataError",
    "NoteBuildError",
    "ConfigError",
]
