"""Scan loop, dispatcher and plain text flushing.

The scanner walks the line once, left to right. At each cursor position it
tries an ordered table of recognizers. A recognizer whose trigger matches
first flushes pending plain text, then either commits (appends one node and
moves the cursor past its source) or abandons (leaves the cursor alone).
When a recognizer moves the cursor the table is tried again from the top at
the new position, so constructs with no separation between them are all
recognized. When no recognizer moves the cursor, it steps forward by one.

Unrecognized characters are never copied one by one: they stay pending
between the flush boundary and the cursor until a flush turns the whole span
into a single Text node.

Thread Safety:
All state lives on the scanner instance, which is created for a single call.

"""

from collections.abc import Callable
from typing import NamedTuple

from inkline.errors import ScanError
from inkline.location import SourceLocation
from inkline.nodes import Inline, Text
from inkline.utils.logger import get_logger

logger = get_logger(__name__)


class Recognizer(NamedTuple):
    """One entry of the dispatch table.

    ``trigger`` inspects the character at the live cursor; ``handle`` runs
    after pending text has been flushed.
    """

    name: str
    trigger: Callable[..., bool]
    handle: Callable[..., None]


class InlineScanCoreMixin:
    """Scan loop, flush and escape handling.

    Required Host Attributes:
        - _line: str
        - _length: int
        - _pos: int
        - _flushed: int
        - _literal: int
        - _lineno: int
        - _root: Paragraph
        - _config: ParseConfig
        - _recognizers: tuple[Recognizer, ...]

    """

    # Required host attributes (documented, not declared, to avoid slot conflicts)
    # _line: str
    # _length: int
    # _pos: int
    # _flushed: int
    # _literal: int
    # _lineno: int
    # _root: Paragraph
    # _config: ParseConfig
    # _recognizers: tuple[Recognizer, ...]

    def _scan_line(self) -> None:
        """Run the dispatch loop over the whole line, then flush trailing text."""
        recognizers = self._recognizers
        length = self._length

        while self._pos < length:
            for recognizer in recognizers:
                if not recognizer.trigger(self):
                    continue
                start = self._pos
                self._flush()
                recognizer.handle(self)
                self._check_cursor(recognizer.name, start)
                if self._pos != start:
                    break
            else:
                self._pos += 1

        self._flush()

    # =========================================================================
    # Flushing
    # =========================================================================

    def _flush(self) -> None:
        """Turn ``[flush boundary, cursor)`` into plain text.

        Text directly following another Text child extends it, so flushing
        around a dropped escape character does not split the text.
        """
        if self._pos > self._length:
            self._pos = self._length

        start = self._flushed
        end = self._pos
        if start < end:
            content = self._line[start:end]
            location = self._location(start, end)
            children = self._root.children
            if children and isinstance(children[-1], Text):
                previous = children[-1]
                children[-1] = Text(
                    location=previous.location.span_to(location),
                    content=previous.content + content,
                    parent=self._root,
                )
            else:
                self._root.append(Text(location=location, content=content, parent=self._root))

        self._flushed = end

    def _emit(self, node: Inline, end: int) -> None:
        """Append a structural node and move cursor and flush boundary to ``end``."""
        self._root.append(node)
        self._pos = end
        self._flushed = end

    # =========================================================================
    # Escapes
    # =========================================================================

    def _is_literal(self) -> bool:
        """True if the character at the cursor follows a dropped escape character."""
        return self._pos == self._literal

    def _at_escape(self) -> bool:
        return self._line[self._pos] == self._config.escape_char and not self._is_literal()

    def _drop_escape(self) -> None:
        """Drop the escape character and mark the next character literal."""
        self._pos += 1
        self._flushed = self._pos
        self._literal = self._pos

    # =========================================================================
    # Helpers
    # =========================================================================

    def _char_is(self, offset: int, char: str) -> bool:
        """Bounds-checked test of the character at ``cursor + offset``."""
        index = self._pos + offset
        return 0 <= index < self._length and self._line[index] == char

    def _location(self, start: int, end: int) -> SourceLocation:
        return SourceLocation.from_span(self._lineno, start, end)

    def _abandon(self, construct: str, reason: str) -> None:
        """Log a candidate that fell back to plain text."""
        logger.debug(
            "Line %d col %d: not a %s (%s)",
            self._lineno,
            self._pos + 1,
            construct,
            reason,
        )

    def _check_cursor(self, name: str, start: int) -> None:
        if not (0 <= self._flushed <= self._pos <= self._length) or self._pos < start:
            raise ScanError(
                f"recognizer '{name}' left cursor at {self._pos} "
                f"with flush boundary {self._flushed} (started at {start})",
                lineno=self._lineno,
                col_offset=start + 1,
            )
