"""HTML, autolink and comment recognition.

Handles everything that starts with ``<``:
- ``<!-- comment -->`` becomes an HtmlComment
- ``<http://example.com>`` becomes a Link whose text is the URL
- ``<someone@example.com>`` becomes an Email
- ``<span class="x">...</span>`` becomes a single HtmlInline up to the
  matching closing tag; ``<br/>`` stands on its own

Anything else is left for the special character escaper, which turns the
``<`` into an entity.
"""

from __future__ import annotations

from inkline.markup import is_email, is_hyperlink
from inkline.nodes import Email, HtmlComment, HtmlInline, Link
from inkline.parsing.charsets import (
    COMMENT_END,
    COMMENT_START,
    HTML_OR_AUTOLINK_END,
    HTML_OR_AUTOLINK_START,
    SPACE,
)


def extract_tag_name(markup: str) -> str:
    """Return the tag name of the markup between ``<`` and ``>``.

    Examples:
        >>> extract_tag_name('a href="/"')
        'a'
        >>> extract_tag_name("em")
        'em'
    """
    index = markup.find(SPACE)
    if index == -1:
        return markup
    return markup[:index]


class HtmlScanMixin:
    """Mixin for ``<``-delimited constructs.

    Required Host Attributes:
        - _line: str
        - _pos: int
        - _root: Paragraph

    Required Host Methods:
        - _is_literal() -> bool
        - _emit(node, end) -> None
        - _location(start, end) -> SourceLocation
        - _abandon(construct, reason) -> None

    """

    def _at_html_start(self) -> bool:
        return self._line[self._pos] == HTML_OR_AUTOLINK_START and not self._is_literal()

    def _scan_html(self) -> None:
        if self._line.startswith(COMMENT_START, self._pos):
            self._scan_html_comment()
        else:
            self._scan_html_or_autolink()

    def _scan_html_comment(self) -> None:
        """Consume ``<!-- ... -->`` as one opaque node."""
        start = self._pos
        index = self._line.find(COMMENT_END, start + len(COMMENT_START))
        if index == -1:
            self._abandon("comment", "unterminated")
            return

        end = index + len(COMMENT_END)
        self._emit(
            HtmlComment(
                location=self._location(start, end),
                html=self._line[start:end],
                parent=self._root,
            ),
            end,
        )

    def _scan_html_or_autolink(self) -> None:
        """Consume an autolink, an email address or an HTML element."""
        start = self._pos
        close = self._line.find(HTML_OR_AUTOLINK_END, start + 1)
        if close == -1:
            self._abandon("tag", "no closing '>'")
            return

        markup = self._line[start + 1 : close]
        end = close + 1

        if is_hyperlink(markup):
            self._emit(
                Link(
                    location=self._location(start, end),
                    url=markup,
                    text=markup,
                    parent=self._root,
                ),
                end,
            )
            return

        if is_email(markup):
            self._emit(
                Email(location=self._location(start, end), address=markup, parent=self._root),
                end,
            )
            return

        tag_name = extract_tag_name(markup)
        if not tag_name or tag_name.startswith("/"):
            self._abandon("tag", "no tag name")
            return

        # <br/> and <img src="x" /> have no closing tag
        if markup.endswith("/"):
            self._emit(
                HtmlInline(
                    location=self._location(start, end),
                    html=self._line[start:end],
                    parent=self._root,
                ),
                end,
            )
            return

        closing_tag = f"</{tag_name}>"
        index = self._line.find(closing_tag, end)
        if index == -1:
            self._abandon("tag", f"no matching {closing_tag}")
            return

        end = index + len(closing_tag)
        self._emit(
            HtmlInline(
                location=self._location(start, end),
                html=self._line[start:end],
                parent=self._root,
            ),
            end,
        )
