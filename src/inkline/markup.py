"""Pattern predicates and index searches used by the line scanner.

Everything here is pure: no state, no side effects. Index searches follow
``str.find`` and return -1 when nothing is found.

Escape-aware searches use a two-state scan (normal, just-saw-escape): the
character after an unescaped escape character is skipped, and an escaped
escape character does not escape anything itself.
"""

from __future__ import annotations

import re

# URI autolink: scheme is a letter followed by 1-31 letters, digits, +, - or .
_HYPERLINK_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]{1,31}:[^\s<>]*$")

# local-part@domain, the local part cannot contain backslashes
_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~\-]+@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9\-]{0,61}[a-zA-Z0-9])?)*$"
)

# destination, then an optional title in "", '' or ()
_LINK_AND_TITLE_RE = re.compile(
    r"""^(?P<url><[^<>]*>|\S*)"""
    r"""(?:\s+(?:"(?P<double>.*)"|'(?P<single>.*)'|\((?P<paren>.*)\)))?$""",
    re.DOTALL,
)


def is_hyperlink(text: str) -> bool:
    """Return True if ``text`` is an absolute URI such as ``http://example.com``."""
    return bool(_HYPERLINK_RE.match(text))


def is_email(text: str) -> bool:
    """Return True if ``text`` is a bare email address.

    Examples:
        >>> is_email("someone@example.com")
        True
        >>> is_email("some one@example.com")
        False
    """
    return bool(_EMAIL_RE.match(text))


def parse_link_and_title(text: str) -> tuple[str, str | None]:
    """Split the inside of ``( ... )`` into a target and an optional title.

    The title is enclosed in double quotes, single quotes or parentheses and
    separated from the target by whitespace. A target wrapped in angle
    brackets has them removed. Text that does not fit the pattern is returned
    whole as the target.

    Examples:
        >>> parse_link_and_title('http://example.com "Example"')
        ('http://example.com', 'Example')
        >>> parse_link_and_title("img.png")
        ('img.png', None)
    """
    stripped = text.strip()
    match = _LINK_AND_TITLE_RE.match(stripped)
    if match is None:
        return stripped, None

    url = match.group("url")
    if url.startswith("<") and url.endswith(">"):
        url = url[1:-1]

    for group in ("double", "single", "paren"):
        title = match.group(group)
        if title is not None:
            return url, title
    return url, None


def index_of_paired(text: str, char: str, pair: str, start: int) -> int:
    """Find ``char`` at or after ``start``, skipping balanced ``pair``/``char`` spans.

    Used to find the ``)`` closing a link target that itself contains
    parentheses, as in ``(http://en.wikipedia.org/wiki/Foo_(bar))``.

    Examples:
        >>> index_of_paired("a(b)c)d", ")", "(", 0)
        5
    """
    depth = 0
    for index in range(max(start, 0), len(text)):
        c = text[index]
        if c == pair:
            depth += 1
        elif c == char:
            if depth == 0:
                return index
            depth -= 1
    return -1


def run_length(text: str, char: str, start: int) -> int:
    """Count consecutive ``char`` characters beginning at ``start``."""
    end = start
    length = len(text)
    while end < length and text[end] == char:
        end += 1
    return end - start


def index_of_run(text: str, char: str, count: int, start: int, escape: str | None = "\\") -> int:
    """Find the first unescaped run of exactly ``count`` ``char`` characters.

    Runs are maximal: with ``count=1`` the search skips over ``**``. A run
    whose first character is escaped starts one character later.

    Examples:
        >>> index_of_run("a ** b * c", "*", 1, 0)
        7
        >>> index_of_run("a \\\\** b", "*", 1, 0)
        4
    """
    index = max(start, 0)
    length = len(text)
    while index < length:
        c = text[index]
        if c == escape:
            index += 2
            continue
        if c == char:
            found = run_length(text, char, index)
            if found == count:
                return index
            index += found
            continue
        index += 1
    return -1


def index_of_unescaped(text: str, char: str, start: int, escape: str | None = "\\") -> int:
    """Find the first occurrence of ``char`` not preceded by an unescaped escape.

    Examples:
        >>> index_of_unescaped("a\\\\*b*", "*", 0)
        4
    """
    escaped = False
    for index in range(max(start, 0), len(text)):
        c = text[index]
        if escaped:
            escaped = False
        elif c == escape:
            escaped = True
        elif c == char:
            return index
    return -1


def unescape(text: str, escape: str = "\\") -> str:
    """Remove single-level escape characters from ``text``.

    Examples:
        >>> unescape("a\\\\*b\\\\\\\\c")
        'a*b\\\\c'
    """
    if escape not in text:
        return text
    parts: list[str] = []
    escaped = False
    for c in text:
        if not escaped and c == escape:
            escaped = True
            continue
        escaped = False
        parts.append(c)
    return "".join(parts)


__all__ = [
    "index_of_paired",
    "index_of_run",
    "index_of_unescaped",
    "is_email",
    "is_hyperlink",
    "parse_link_and_title",
    "run_length",
    "unescape",
]
