"""Renderers for inkline node trees."""

from inkline.renderers.html import HtmlRenderer, escape_text, html_escape
from inkline.renderers.protocol import ASTRenderer

__all__ = ["ASTRenderer", "HtmlRenderer", "escape_text", "html_escape"]
