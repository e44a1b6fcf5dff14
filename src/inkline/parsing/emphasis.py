"""Emphasis, strong and code span recognition.

All three are delimited by terminator runs: a maximal sequence of the same
marker character. The opening run length is counted, then a closing run is
searched for, first as an exact run of the same length, then as the first
unescaped marker of any run length.

Mapping for ``*`` and ``_`` when open and close lengths agree:
    1 -> Emphasis
    2 -> Strong
    3 -> Strong wrapping Emphasis

Code spans accept any closing run, ignore escapes when looking for an exact
closing run, and trim surrounding whitespace.

Unmatched runs fall back to literal text. With
``ParseConfig.preserve_unmatched_runs`` off, mismatched spans and unclosed
runs of three or more markers are dropped instead.
"""

from __future__ import annotations

from inkline.markup import index_of_run, index_of_unescaped, run_length, unescape
from inkline.nodes import CodeSpan, Emphasis, Inline, Strong, Text
from inkline.parsing.charsets import CODE_MARKER, EMPHASIS_MARKERS
from inkline.utils.logger import get_logger

logger = get_logger(__name__)


class EmphasisScanMixin:
    """Mixin for terminator-run constructs.

    Required Host Attributes:
        - _line: str
        - _pos: int
        - _flushed: int
        - _lineno: int
        - _root: Paragraph
        - _config: ParseConfig

    Required Host Methods:
        - _is_literal() -> bool
        - _emit(node, end) -> None
        - _location(start, end) -> SourceLocation

    """

    def _at_code_marker(self) -> bool:
        return self._line[self._pos] == CODE_MARKER and not self._is_literal()

    def _at_emphasis_marker(self) -> bool:
        return self._line[self._pos] in EMPHASIS_MARKERS and not self._is_literal()

    def _scan_run(self) -> None:
        """Consume a terminator-delimited span starting at the cursor."""
        line = self._line
        escape = self._config.escape_char
        start = self._pos
        terminator = line[start]
        open_count = run_length(line, terminator, start)
        body = start + open_count

        # Code spans are raw, so an escape character cannot hide their closing run
        run_escape = None if terminator == CODE_MARKER else escape
        close = index_of_run(line, terminator, open_count, body, run_escape)
        if close != -1:
            close_count = open_count
        else:
            close = index_of_unescaped(line, terminator, body, escape)
            if close == -1:
                self._unterminated_run(terminator, open_count)
                return
            close_count = run_length(line, terminator, close)

        end = close + close_count
        text = line[body:close]

        if terminator == CODE_MARKER:
            self._emit(
                CodeSpan(
                    location=self._location(start, end),
                    code=text.strip(),
                    parent=self._root,
                ),
                end,
            )
            return

        node = self._build_emphasis(open_count, close_count, text, start, end)
        if node is not None:
            self._emit(node, end)
            return

        logger.debug(
            "Line %d col %d: unmatched run %r (open %d, close %d)",
            self._lineno,
            start + 1,
            terminator,
            open_count,
            close_count,
        )
        if self._config.preserve_unmatched_runs:
            # Leave the opening run pending as text and scan the rest normally
            self._pos = body
        else:
            self._pos = end
            self._flushed = end

    def _build_emphasis(
        self, open_count: int, close_count: int, text: str, start: int, end: int
    ) -> Inline | None:
        """Build the node for a matched pair of runs, or None if unsupported."""
        if open_count != close_count or open_count > 3:
            return None

        location = self._location(start, end)
        text_location = self._location(start + open_count, end - close_count)
        content = unescape(text, self._config.escape_char)

        if open_count == 3:
            strong = Strong(location=location, parent=self._root)
            emphasis = Emphasis(location=location, parent=strong)
            if content:
                emphasis.append(Text(location=text_location, content=content, parent=emphasis))
            strong.append(emphasis)
            return strong

        container = (Emphasis if open_count == 1 else Strong)(location=location, parent=self._root)
        if content:
            container.append(Text(location=text_location, content=content, parent=container))
        return container

    def _unterminated_run(self, terminator: str, count: int) -> None:
        """Handle an opening run with no closing marker anywhere after it."""
        end = self._pos + count
        if self._config.preserve_unmatched_runs or count <= 2:
            # Leave the run pending; the next flush emits it as plain text
            self._pos = end
            return

        logger.debug(
            "Line %d col %d: dropping unterminated run of %d %r",
            self._lineno,
            self._pos + 1,
            count,
            terminator,
        )
        self._pos = end
        self._flushed = end
