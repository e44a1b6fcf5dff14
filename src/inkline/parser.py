"""Single-pass line scanner producing a tree of inline nodes.

Architecture:
The scanner uses a mixin-based design for separation of concerns:
- `InlineScanCoreMixin`: scan loop, dispatch, flushing, escapes
- `HtmlScanMixin`: comments, autolinks, email addresses, raw HTML
- `LinkScanMixin`: images and links
- `EmphasisScanMixin`: emphasis, strong and code spans
- `SpecialCharacterMixin`: ``<``, ``>`` and ``&`` substitution

The order of ``RECOGNIZERS`` is the priority order of the grammar.

Thread Safety:
- Scanner instances are single-use; create one per line.
- Configuration is read from ContextVar (thread-local).

"""

from __future__ import annotations

from inkline.config import ParseConfig, get_parse_config
from inkline.errors import ScanError
from inkline.location import SourceLocation
from inkline.nodes import Paragraph
from inkline.parsing import (
    EmphasisScanMixin,
    HtmlScanMixin,
    InlineScanCoreMixin,
    LinkScanMixin,
    Recognizer,
    SpecialCharacterMixin,
)

RECOGNIZERS: tuple[Recognizer, ...] = (
    Recognizer("escape", InlineScanCoreMixin._at_escape, InlineScanCoreMixin._drop_escape),
    Recognizer("html", HtmlScanMixin._at_html_start, HtmlScanMixin._scan_html),
    Recognizer("code", EmphasisScanMixin._at_code_marker, EmphasisScanMixin._scan_run),
    Recognizer("image", LinkScanMixin._at_image_start, LinkScanMixin._scan_image),
    Recognizer("link", LinkScanMixin._at_link_start, LinkScanMixin._scan_link),
    Recognizer("emphasis", EmphasisScanMixin._at_emphasis_marker, EmphasisScanMixin._scan_run),
    Recognizer(
        "special",
        SpecialCharacterMixin._at_special_character,
        SpecialCharacterMixin._escape_special_character,
    ),
)


class LineScanner(
    InlineScanCoreMixin,
    HtmlScanMixin,
    LinkScanMixin,
    EmphasisScanMixin,
    SpecialCharacterMixin,
):
    """Scanner for one line of inline markup.

    Usage:
            >>> root = LineScanner("Hello *world*").scan()
            >>> [type(child).__name__ for child in root.children]
            ['Text', 'Emphasis']

    Thread Safety:
        Scanner instances are single-use and not thread-safe. Create one per
        line. The cursor, flush boundary and output root live on the instance
        and are never shared between calls.

    """

    __slots__ = (
        "_line",
        "_length",
        "_pos",
        "_flushed",
        "_literal",
        "_lineno",
        "_root",
        "_config",
        "_done",
    )

    _recognizers: tuple[Recognizer, ...] = RECOGNIZERS

    def __init__(
        self,
        line: str,
        parent: object | None = None,
        *,
        lineno: int = 1,
        config: ParseConfig | None = None,
    ) -> None:
        """Initialize scanner state for ``line``.

        Args:
            line: A single line of markup (no newline characters)
            parent: Node of the enclosing block; becomes the root's parent
            lineno: Line number recorded in node locations
            config: Explicit configuration; defaults to the active ContextVar config

        Raises:
            ScanError: If ``line`` is not a string or contains a line break

        """
        if not isinstance(line, str):
            raise ScanError(f"expected a str line, got {type(line).__name__}", lineno=lineno)
        if "\n" in line or "\r" in line:
            col = min(i for i in (line.find("\n"), line.find("\r")) if i != -1) + 1
            raise ScanError("line contains a line break", lineno=lineno, col_offset=col)

        self._line = line
        self._length = len(line)
        self._pos = 0
        self._flushed = 0
        self._literal = -1
        self._lineno = lineno
        self._config = config if config is not None else get_parse_config()
        self._root = Paragraph(
            location=SourceLocation.from_span(lineno, 0, self._length),
            parent=parent,
        )
        self._done = False

    def scan(self) -> Paragraph:
        """Scan the line and hand over the populated output root.

        Raises:
            ScanError: If this scanner has already been used

        """
        if self._done:
            raise ScanError("scanner instances are single-use", lineno=self._lineno)
        self._done = True
        self._scan_line()
        return self._root
