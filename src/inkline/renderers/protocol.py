"""ASTRenderer protocol: stable interface for node-tree renderers.

Example:
    from inkline.renderers.protocol import ASTRenderer

    def render_line(renderer: ASTRenderer, root: Paragraph) -> str:
        return renderer.render(root)

"""

from typing import Protocol

from inkline.nodes import Node


class ASTRenderer(Protocol):
    """Protocol for renderers.

    The built-in ``HtmlRenderer`` conforms to this protocol.

    """

    def render(self, node: Node) -> str:
        """Render a node (usually a scanned line's Paragraph) to a string."""
        ...
