"""Inline scanning subsystem for inkline.

Provides mixins for each family of constructs recognized in a line:
- Scan loop, flushing and escapes (core)
- HTML, autolinks, email addresses and comments (html)
- Links and images (links)
- Emphasis, strong and code spans (emphasis)
- Special character substitution (special)

"""

from __future__ import annotations

from inkline.parsing.core import InlineScanCoreMixin, Recognizer
from inkline.parsing.emphasis import EmphasisScanMixin
from inkline.parsing.html import HtmlScanMixin, extract_tag_name
from inkline.parsing.links import LinkScanMixin, LinkTarget
from inkline.parsing.special import SpecialCharacterMixin

__all__ = [
    "EmphasisScanMixin",
    "HtmlScanMixin",
    "InlineScanCoreMixin",
    "LinkScanMixin",
    "LinkTarget",
    "Recognizer",
    "SpecialCharacterMixin",
    "extract_tag_name",
]
