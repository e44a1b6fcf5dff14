"""List-backed string accumulator used by the renderers.

Fragments are collected in a list and joined once, which keeps rendering
linear in the size of the output.
"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<em>").append("hi").append("</em>").build()
            '<em>hi</em>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append ``s`` (empty strings are skipped) and return self for chaining."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all fragments into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)
