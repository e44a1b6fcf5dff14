"""Traversal helpers for inkline node trees.

Example: collect every link target on a line:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.urls: list[str] = []

        def visit_link(self, node: Link) -> None:
            self.urls.append(node.url)

    collector = LinkCollector()
    collector.visit(parse_line("[a](x) and <http://y>"))

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. ``walk``
    and ``ancestors`` are pure.

"""

from collections.abc import Iterator
from typing import Generic, TypeVar

from inkline.nodes import (
    CodeSpan,
    Container,
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


T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Base visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children of
    container nodes are visited automatically after the node itself.

    """

    def visit(self, node: Node) -> T:
        result = self._dispatch(node)
        if isinstance(node, Container):
            for child in node.children:
                self.visit(child)
        return result

    def visit_default(self, node: Node) -> T:
        return None  # type: ignore[return-value]

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_emphasis(self, node: Emphasis) -> T:
        return self.visit_default(node)

    def visit_strong(self, node: Strong) -> T:
        return self.visit_default(node)

    def visit_code_span(self, node: CodeSpan) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Image) -> T:
        return self.visit_default(node)

    def visit_email(self, node: Email) -> T:
        return self.visit_default(node)

    def visit_html_inline(self, node: HtmlInline) -> T:
        return self.visit_default(node)

    def visit_html_comment(self, node: HtmlComment) -> T:
        return self.visit_default(node)

    def visit_special_character(self, node: SpecialCharacter) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        match node:
            case Paragraph():
                return self.visit_paragraph(node)
            case Text():
                return self.visit_text(node)
            case Emphasis():
                return self.visit_emphasis(node)
            case Strong():
                return self.visit_strong(node)
            case CodeSpan():
                return self.visit_code_span(node)
            case Link():
                return self.visit_link(node)
            case Image():
                return self.visit_image(node)
            case Email():
                return self.visit_email(node)
            case HtmlInline():
                return self.visit_html_inline(node)
            case HtmlComment():
                return self.visit_html_comment(node)
            case SpecialCharacter():
                return self.visit_special_character(node)
            case _:
                return self.visit_default(node)


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants in document order."""
    yield node
    if isinstance(node, Container):
        for child in node.children:
            yield from walk(child)


def ancestors(node: Node) -> Iterator[object]:
    """Follow ``parent`` back-references up from ``node``.

    Stops at the first parent that is not an inkline node, after yielding it,
    so the caller's block node shows up as the last ancestor.
    """
    parent = node.parent
    while parent is not None:
        yield parent
        if not isinstance(parent, Node):
            return
        parent = parent.parent
