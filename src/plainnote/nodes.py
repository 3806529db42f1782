"""Typed document tree for plainnote.

All nodes are frozen dataclasses with slots. Leaf nodes hold spans into the
source they were parsed from rather than copies of the text, so a tree is
only meaningful together with that source string.

Node Hierarchy:
Node (base)
├── Document
├── Paragraph
└── Inline
    ├── Text       plain prose
    ├── Mono       `inline code`
    ├── BlockMono  ```fenced code```
    └── Link       [title](href)

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from plainnote.location import Span


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes."""


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain prose, rendered verbatim."""

    span: Span


@dataclass(frozen=True, slots=True)
class Mono(Node):
    """Inline code.

    Markup: `code`
    HTML: <span class="mono">code</span>

    The span covers everything between the backticks, newlines included.
    """

    span: Span


@dataclass(frozen=True, slots=True)
class BlockMono(Node):
    """Fenced code.

    Markup: ```code```
    HTML: <pre>code</pre>

    """

    span: Span


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markup: [title](href)
    HTML: <a href="href">title</a>

    """

    title: Span
    href: Span


Inline: TypeAlias = Text | Mono | BlockMono | Link


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """A run of inline elements ended by a blank line or end of input."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node: the paragraphs of one note, in order."""

    children: tuple[Paragraph, ...]


__all__ = [
    "BlockMono",
    "Document",
    "Inline",
    "Link",
    "Mono",
    "Node",
    "Paragraph",
    "Text",
]
