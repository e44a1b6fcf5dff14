"""
inkline: single-pass inline markup scanner

Turns one line of Markdown-style markup into a tree of typed inline nodes
(emphasis, strong, code, links, images, autolinks, raw HTML, comments and
escaped special characters) and renders that tree to HTML.

Quick Start:
    >>> from inkline import parse_line, render
    >>> root = parse_line("Hello *world*")
    >>> render(root)
    'Hello <em>world</em>'

    >>> # Or use the high-level Inkline class
    >>> from inkline import Inkline
    >>> md = Inkline()
    >>> md("**bold** & <b>raw</b>")
    '<strong>bold</strong> &amp; <b>raw</b>'

Block structure is not handled here: the caller decides which lines to scan
and passes the enclosing block node as ``parent``.
"""

from collections.abc import Iterable, Mapping

from inkline.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from inkline.errors import ConfigError, InklineError, RenderError, ScanError
from inkline.location import SourceLocation
from inkline.nodes import (
    CodeSpan,
    Container,
    Email,
    Emphasis,
    HtmlComment,
    HtmlInline,
    Image,
    Inline,
    Link,
    Node,
    Paragraph,
    SpecialCharacter,
    Strong,
    Text,
)
from inkline.parser import LineScanner
from inkline.renderers.html import HtmlRenderer
from inkline.renderers.protocol import ASTRenderer
from inkline.visitor import BaseVisitor, ancestors, walk

__version__ = "0.1.0"


def parse_line(
    line: str,
    parent: object | None = None,
    *,
    lineno: int = 1,
    config: ParseConfig | None = None,
) -> Paragraph:
    """Scan one line of markup into a tree of inline nodes.

    Args:
        line: Markup text without line breaks
        parent: Node of the enclosing block, stored as the root's back-reference
        lineno: Line number recorded in node locations
        config: Configuration for this call; defaults to the active config

    Returns:
        Paragraph root whose children are in document order

    Raises:
        ScanError: If ``line`` is not a string or contains a line break

    Example:
        >>> root = parse_line("[text](http://example.com \\"title\\")")
        >>> link = root.children[0]
        >>> (link.text, link.url, link.title, link.is_reference)
        ('text', 'http://example.com', 'title', False)
    """
    return LineScanner(line, parent, lineno=lineno, config=config).scan()


def render(
    root: Node,
    *,
    references: Mapping[str, tuple[str, str | None]] | None = None,
) -> str:
    """Render a scanned line to HTML.

    Args:
        root: Node returned by ``parse_line`` (or any node below it)
        references: Definitions for reference-style links and images

    Returns:
        HTML string
    """
    config = get_parse_config()
    renderer = HtmlRenderer(references=references, text_transformer=config.text_transformer)
    return renderer.render(root)


class Inkline:
    """High-level processor combining scanner and renderer.

    Usage:
        >>> md = Inkline()
        >>> md("Hello `code`")
        'Hello <code>code</code>'

        >>> root = md.parse("***both***")
        >>> type(root.children[0]).__name__
        'Strong'

    Thread Safety:
        Holds only an immutable config and sets it via ContextVar for the
        duration of each call. Safe to use from several threads.

    """

    __slots__ = ("_config", "_references")

    def __init__(
        self,
        config: ParseConfig | None = None,
        *,
        references: Mapping[str, tuple[str, str | None]] | None = None,
    ) -> None:
        self._config = config or ParseConfig()
        self._references = dict(references or {})

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, line: str) -> str:
        """Scan and render one line."""
        renderer = HtmlRenderer(
            references=self._references,
            text_transformer=self._config.text_transformer,
        )
        return renderer.render(self.parse(line))

    def parse(self, line: str, parent: object | None = None, *, lineno: int = 1) -> Paragraph:
        """Scan one line into a node tree using this instance's config."""
        with parse_config_context(self._config):
            return LineScanner(line, parent, lineno=lineno).scan()

    def parse_many(self, lines: Iterable[str], parent: object | None = None) -> list[Paragraph]:
        """Scan several lines, numbering them from 1.

        Each line gets its own scanner and its own root.
        """
        with parse_config_context(self._config):
            return [
                LineScanner(line, parent, lineno=lineno).scan()
                for lineno, line in enumerate(lines, start=1)
            ]


__all__ = [
    # Main API
    "parse_line",
    "render",
    "Inkline",
    "LineScanner",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "InklineError",
    "ScanError",
    "ConfigError",
    "RenderError",
    # Nodes
    "Node",
    "Container",
    "Inline",
    "Paragraph",
    "Text",
    "Emphasis",
    "Strong",
    "CodeSpan",
    "Link",
    "Image",
    "Email",
    "HtmlInline",
    "HtmlComment",
    "SpecialCharacter",
    "SourceLocation",
    # Rendering and traversal
    "ASTRenderer",
    "HtmlRenderer",
    "BaseVisitor",
    "walk",
    "ancestors",
]
