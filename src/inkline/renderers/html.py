"""HTML renderer using StringBuilder pattern.

Renders a scanned line to HTML in one walk over the node tree.

Thread Safety:
The renderer holds only immutable settings. Multiple threads can share one
HtmlRenderer instance and call render() concurrently.
"""

import html
import re
from collections.abc import Callable, Mapping

from inkline.errors import RenderError
from inkline.nodes import (
    CodeSpan,
    Email,
    Emphasis,
    HtmlComment,
    HtmlInline,
    Image,
    Link,
    Node,
    Paragraph,
    SpecialCharacter,
    Strong,
    Text,
)
from inkline.stringbuilder import StringBuilder
from inkline.utils.logger import get_logger

logger = get_logger(__name__)

# & that does not start &amp;, the only entity the scanner leaves alone
_BARE_AMPERSAND_RE = re.compile(r"&(?!amp;)")

_WHITESPACE_RE = re.compile(r"\s+")


def html_escape(s: str) -> str:
    """Escape text for use inside an attribute value.

    Escapes <, >, & and " but not single quotes.
    """
    return html.escape(s, quote=False).replace('"', "&quot;")


def escape_text(s: str) -> str:
    """Escape element text the way the scanner escapes top-level text.

    Every ``&`` is escaped except one that starts ``&amp;``, which the
    scanner keeps as literal text. Other entities such as ``&copy;`` are
    escaped too, so ``*&copy;*`` and ``&copy;`` render the same.

    Examples:
        >>> escape_text("a < b &amp; c & d &copy;")
        'a &lt; b &amp; c &amp; d &amp;copy;'
    """
    s = _BARE_AMPERSAND_RE.sub("&amp;", s)
    return s.replace("<", "&lt;").replace(">", "&gt;")


def normalize_reference(identifier: str) -> str:
    """Normalize a reference identifier for lookup.

    Matching is case-insensitive with runs of whitespace collapsed.
    """
    return _WHITESPACE_RE.sub(" ", identifier.strip()).casefold()


class HtmlRenderer:
    """Render a node tree to HTML.

    Usage:
        >>> from inkline import parse_line
        >>> HtmlRenderer().render(parse_line("Hello **World**"))
        'Hello <strong>World</strong>'

    Reference-style links and images are resolved through ``references``,
    a mapping from identifier to ``(url, title)``. Unresolved references
    point at ``#identifier``.

    """

    __slots__ = ("_references", "_text_transformer", "_paragraph_tags")

    def __init__(
        self,
        *,
        references: Mapping[str, tuple[str, str | None]] | None = None,
        text_transformer: Callable[[str], str] | None = None,
        paragraph_tags: bool = False,
    ) -> None:
        """Initialize renderer.

        Args:
            references: Reference definitions for ``[text][ref]`` links
            text_transformer: Optional callback applied to plain text nodes
            paragraph_tags: Wrap a rendered Paragraph in ``<p>...</p>``
        """
        self._references = {
            normalize_reference(key): value for key, value in (references or {}).items()
        }
        self._text_transformer = text_transformer
        self._paragraph_tags = paragraph_tags

    def render(self, node: Node) -> str:
        """Render ``node`` and its descendants to an HTML string.

        Raises:
            RenderError: If the tree contains a node type this renderer does not know
        """
        sb = StringBuilder()
        self._render_node(node, sb)
        return sb.build()

    def _render_node(self, node: Node, sb: StringBuilder) -> None:
        match node:
            case Paragraph():
                if self._paragraph_tags:
                    sb.append("<p>")
                self._render_children(node.children, sb)
                if self._paragraph_tags:
                    sb.append("</p>")
            case Text():
                content = node.content
                if self._text_transformer is not None:
                    content = self._text_transformer(content)
                sb.append(escape_text(content))
            case Emphasis():
                sb.append("<em>")
                self._render_children(node.children, sb)
                sb.append("</em>")
            case Strong():
                sb.append("<strong>")
                self._render_children(node.children, sb)
                sb.append("</strong>")
            case CodeSpan():
                sb.append("<code>").append(html_escape(node.code)).append("</code>")
            case Link():
                self._render_link(node, sb)
            case Image():
                self._render_image(node, sb)
            case Email():
                address = html_escape(node.address)
                sb.append(f'<a href="mailto:{address}">{address}</a>')
            case HtmlInline() | HtmlComment():
                sb.append(node.html)
            case SpecialCharacter():
                sb.append(html.escape(node.char, quote=False))
            case _:
                raise RenderError(f"Cannot render node of type {type(node).__name__}")

    def _render_children(self, children: list, sb: StringBuilder) -> None:
        for child in children:
            self._render_node(child, sb)

    def _resolve(self, identifier: str, is_reference: bool, title: str | None) -> tuple[str, str | None]:
        if not is_reference:
            return identifier, title
        resolved = self._references.get(normalize_reference(identifier))
        if resolved is None:
            logger.debug("Unresolved reference %r", identifier)
            return f"#{identifier}", None
        return resolved

    def _render_link(self, link: Link, sb: StringBuilder) -> None:
        url, title = self._resolve(link.url, link.is_reference, link.title)
        sb.append(f'<a href="{html_escape(url)}"')
        if title is not None:
            sb.append(f' title="{html_escape(title)}"')
        sb.append(">").append(escape_text(link.text)).append("</a>")

    def _render_image(self, image: Image, sb: StringBuilder) -> None:
        url, title = self._resolve(image.url, image.is_reference, image.title)
        alt = escape_text(image.alt).replace('"', "&quot;")
        sb.append(f'<img src="{html_escape(url)}" alt="{alt}"')
        if title is not None:
            sb.append(f' title="{html_escape(title)}"')
        sb.append(" />")
