"""Marker characters recognized by the line scanner.

All sets are frozensets for O(1) membership tests and thread-safe sharing.

Usage:
    from inkline.parsing.charsets import EMPHASIS_MARKERS

    if char in EMPHASIS_MARKERS:
        ...
"""

ESCAPE_CHARACTER = "\\"

HTML_OR_AUTOLINK_START = "<"
HTML_OR_AUTOLINK_END = ">"
COMMENT_START = "<!--"
COMMENT_END = "-->"

CODE_MARKER = "`"
ITALIC_OR_BOLD = "*"
ITALIC_OR_BOLD_UNDERSCORE = "_"

EXCLAMATION = "!"
LINK_START = "["
LINK_END = "]"
HREF_START = "("
HREF_END = ")"
IMAGE_START = EXCLAMATION + LINK_START

AMPERSAND = "&"
AMPERSAND_ENTITY_TAIL = "amp;"
SPACE = " "

EMPHASIS_MARKERS: frozenset[str] = frozenset(ITALIC_OR_BOLD + ITALIC_OR_BOLD_UNDERSCORE)

# Always replaced by a SpecialCharacter node; ``&`` has its own rule
ANGLE_BRACKETS: frozenset[str] = frozenset(HTML_OR_AUTOLINK_START + HTML_OR_AUTOLINK_END)
