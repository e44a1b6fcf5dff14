"""Typed inline nodes for inkline.

Leaf nodes are frozen dataclasses with slots. Container nodes are frozen too,
but own a mutable ``children`` list that only grows through ``append``; the
scanner builds the tree left to right and never reorders it.

Every node carries a ``parent`` back-reference. It is a plain, non-owning
handle: it is excluded from equality and repr, and the container that
appended a node is its only owner.

Node Hierarchy:
Node (base)
├── Container
│   ├── Paragraph   (output root of one scanned line)
│   ├── Emphasis
│   └── Strong
├── Text
├── CodeSpan
├── Link
├── Image
├── Email
├── HtmlInline
├── HtmlComment
└── SpecialCharacter

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from inkline.location import SourceLocation

# =============================================================================
# Base Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all nodes.

    All nodes track their source span and their logical parent.

    """

    location: SourceLocation
    parent: object | None = field(default=None, kw_only=True, repr=False, compare=False)


@dataclass(frozen=True, slots=True)
class Container(Node):
    """Node that owns an ordered list of children.

    Children are kept in insertion order, which is document order.

    """

    children: list[Inline] = field(default_factory=list)

    def append(self, child: Inline) -> Inline:
        """Append ``child`` as the last child and return it."""
        self.children.append(child)
        return child


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content.

    Escape characters are already removed from ``content``.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Emphasis(Container):
    """Emphasized (italic) text.

    Markdown: *text* or _text_
    HTML: <em>text</em>

    """


@dataclass(frozen=True, slots=True)
class Strong(Container):
    """Strong (bold) text.

    Markdown: **text** or __text__
    HTML: <strong>text</strong>

    A run of three markers produces a Strong whose only child is an Emphasis.

    """


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    Markdown: `code`
    HTML: <code>code</code>

    """

    code: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](url "title"), [text][ref] or <http://url>

    For reference-style links ``url`` holds the reference identifier and
    ``is_reference`` is True.

    """

    url: str
    text: str
    title: str | None = None
    is_reference: bool = False


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markdown: ![alt](url "title") or ![alt][ref]
    HTML: <img src="url" alt="alt" title="title">

    """

    url: str
    alt: str
    title: str | None = None
    is_reference: bool = False


@dataclass(frozen=True, slots=True)
class Email(Node):
    """Email autolink.

    Markdown: <someone@example.com>
    HTML: <a href="mailto:someone@example.com">someone@example.com</a>

    """

    address: str


@dataclass(frozen=True, slots=True)
class HtmlInline(Node):
    """Raw HTML element spanning from an opening tag to its closing tag.

    HTML: passed through unchanged

    """

    html: str


@dataclass(frozen=True, slots=True)
class HtmlComment(Node):
    """HTML comment, ``<!-- ... -->``, passed through unchanged."""

    html: str


@dataclass(frozen=True, slots=True)
class SpecialCharacter(Node):
    """Character that must be escaped in HTML output (``<``, ``>`` or ``&``)."""

    char: str


@dataclass(frozen=True, slots=True)
class Paragraph(Container):
    """Output root for one scanned line.

    ``parent`` is the caller-supplied node of the enclosing block structure.

    """


# Type alias for inline elements
Inline: TypeAlias = (
    Text
    | Emphasis
    | Strong
    | CodeSpan
    | Link
    | Image
    | Email
    | HtmlInline
    | HtmlComment
    | SpecialCharacter
)
