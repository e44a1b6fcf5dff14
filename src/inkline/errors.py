"""Exception classes for inkline.

Malformed markup never raises: every recognizer either matches or falls
back to plain text. These exceptions signal misuse of the API instead.
"""

from __future__ import annotations


class InklineError(Exception):
    """Base exception for all inkline errors."""

    pass


class ScanError(InklineError):
    """Error raised by the line scanner.

    Raised for invalid input (a non-string, or text spanning several lines),
    for a scanner that is reused after it has run, and when the cursor
    invariants are broken.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number being scanned (1-indexed)
            col_offset: Column where the error occurred (1-indexed)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset

        location = ""
        if lineno is not None:
            location = f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class ConfigError(InklineError):
    """Invalid parse configuration value."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Config field '{field}': {message}")


class RenderError(InklineError):
    """Error during HTML rendering.

    Raised when the renderer meets a node type it does not know.
    """

    pass
