"""Substitution of characters that are unsafe in HTML output.

``<`` and ``>`` are always substituted. ``&`` is substituted unless it
already starts ``&amp;``. Runs last in the dispatch table, so it only sees
angle brackets that no HTML recognizer consumed.
"""

from __future__ import annotations

from inkline.nodes import SpecialCharacter
from inkline.parsing.charsets import AMPERSAND, AMPERSAND_ENTITY_TAIL, ANGLE_BRACKETS


class SpecialCharacterMixin:
    """Mixin for the special character escaper.

    Required Host Attributes:
        - _line: str
        - _length: int
        - _pos: int
        - _root: Paragraph
        - _config: ParseConfig

    Required Host Methods:
        - _emit(node, end) -> None
        - _location(start, end) -> SourceLocation

    """

    def _at_special_character(self) -> bool:
        char = self._line[self._pos]
        if char in ANGLE_BRACKETS:
            return True
        if char != AMPERSAND:
            return False

        remaining = self._length - self._pos - 1
        if remaining < len(AMPERSAND_ENTITY_TAIL):
            return self._config.escape_trailing_ampersand
        return not self._line.startswith(AMPERSAND_ENTITY_TAIL, self._pos + 1)

    def _escape_special_character(self) -> None:
        start = self._pos
        self._emit(
            SpecialCharacter(
                location=self._location(start, start + 1),
                char=self._line[start],
                parent=self._root,
            ),
            start + 1,
        )
