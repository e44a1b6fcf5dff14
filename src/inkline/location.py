"""Source spans for inline nodes.

Every node produced by the scanner records where in the line it came from.
Offsets are 0-based and half-open so ``line[loc.offset:loc.end_offset]`` is
the node's source text; ``lineno`` and ``col_offset`` are 1-based for
human-readable messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Span of a node within its source line.

    Attributes:
        lineno: Line number of the scanned line (1-indexed)
        col_offset: Column of the first character (1-indexed)
        offset: Start offset in the line (0-indexed, inclusive)
        end_offset: End offset in the line (0-indexed, exclusive)

    Examples:
            >>> loc = SourceLocation.from_span(3, 0, 5)
            >>> str(loc)
            '3:1'
            >>> loc.length
            5

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0

    def __str__(self) -> str:
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of source characters covered by the span."""
        return self.end_offset - self.offset

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location from this start to ``end``'s end.

        Used when adjacent plain text spans are merged into one node.
        """
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset,
        )

    @classmethod
    def from_span(cls, lineno: int, start: int, end: int) -> SourceLocation:
        """Build a location from 0-based ``[start, end)`` offsets."""
        return cls(lineno=lineno, col_offset=start + 1, offset=start, end_offset=end)

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder for synthetic nodes created outside the scanner."""
        return cls(lineno=0, col_offset=0)
