"""Link and image recognition.

Grammar, shared by both constructs:

    ![alt](target "title")    [text](target "title")
    ![alt][ref]               [text][ref]

Spaces are allowed between the closing ``]`` and the target. An inline
target may contain balanced parentheses. An empty reference (``[text][]``)
refers to the link text itself.
"""

from __future__ import annotations

from typing import NamedTuple

from inkline.markup import index_of_paired, parse_link_and_title
from inkline.nodes import Image, Link
from inkline.parsing.charsets import (
    EXCLAMATION,
    HREF_END,
    HREF_START,
    IMAGE_START,
    LINK_END,
    LINK_START,
    SPACE,
)


class LinkTarget(NamedTuple):
    """Target parsed after the closing ``]`` of link text or alt text."""

    url: str
    title: str | None
    is_reference: bool
    end: int


class LinkScanMixin:
    """Mixin for images and links.

    Required Host Attributes:
        - _line: str
        - _length: int
        - _pos: int
        - _root: Paragraph

    Required Host Methods:
        - _is_literal() -> bool
        - _char_is(offset, char) -> bool
        - _emit(node, end) -> None
        - _location(start, end) -> SourceLocation
        - _abandon(construct, reason) -> None

    """

    def _at_image_start(self) -> bool:
        return (
            self._line[self._pos] == EXCLAMATION
            and self._char_is(1, LINK_START)
            and not self._is_literal()
        )

    def _at_link_start(self) -> bool:
        return self._line[self._pos] == LINK_START and not self._is_literal()

    def _scan_image(self) -> None:
        """Consume ``![alt](target "title")`` or ``![alt][ref]``."""
        start = self._pos
        close = self._line.find(LINK_END, start + len(IMAGE_START))
        if close == -1:
            self._abandon("image", "no closing ']'")
            return

        alt = self._line[start + len(IMAGE_START) : close]
        target = self._scan_link_target(close + 1)
        if target is None:
            self._abandon("image", "no target")
            return

        url = target.url
        if target.is_reference and not url:
            url = alt
        self._emit(
            Image(
                location=self._location(start, target.end),
                url=url,
                alt=alt,
                title=target.title,
                is_reference=target.is_reference,
                parent=self._root,
            ),
            target.end,
        )

    def _scan_link(self) -> None:
        """Consume ``[text](target "title")`` or ``[text][ref]``.

        When an image starts inside the brackets, the first ``]`` closes the
        image's alt text and the link text runs to the next one.
        """
        start = self._pos
        close = self._line.find(LINK_END, start + 1)
        if close == -1:
            self._abandon("link", "no closing ']'")
            return

        image = self._line.find(IMAGE_START, start + 1)
        if image != -1 and image < close:
            close = self._line.find(LINK_END, close + 1)
            if close == -1:
                self._abandon("link", "no closing ']' after nested image")
                return

        text = self._line[start + 1 : close].strip()
        target = self._scan_link_target(close + 1)
        if target is None:
            self._abandon("link", "no target")
            return

        url = target.url.strip()
        if target.is_reference and not url:
            url = text
        self._emit(
            Link(
                location=self._location(start, target.end),
                url=url,
                text=text,
                title=target.title,
                is_reference=target.is_reference,
                parent=self._root,
            ),
            target.end,
        )

    def _scan_link_target(self, index: int) -> LinkTarget | None:
        """Parse ``(target "title")`` or ``[ref]`` starting at ``index``.

        Leading spaces are skipped. Returns None when the line ends first or
        a delimiter is missing.
        """
        line = self._line
        length = self._length
        while index < length and line[index] == SPACE:
            index += 1
        if index >= length:
            return None

        opener = line[index]
        if opener == HREF_START:
            close = index_of_paired(line, HREF_END, HREF_START, index + 1)
            if close == -1:
                return None
            url, title = parse_link_and_title(line[index + 1 : close])
            return LinkTarget(url=url, title=title, is_reference=False, end=close + 1)

        if opener == LINK_START:
            close = line.find(LINK_END, index + 1)
            if close == -1:
                return None
            identifier = line[index + 1 : close].strip()
            return LinkTarget(url=identifier, title=None, is_reference=True, end=close + 1)

        return None
