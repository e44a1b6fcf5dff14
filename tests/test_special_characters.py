"""Tests for substitution of <, > and &."""

import pytest

from inkline import ParseConfig, SpecialCharacter, Text, parse_line


def chars(root) -> list[str]:
    return [c.char for c in root.children if isinstance(c, SpecialCharacter)]


class TestSubstitution:
    @pytest.mark.parametrize("char", ["<", ">", "&"])
    def test_single_character(self, char: str) -> None:
        root = parse_line(f"a {char} b")
        assert [type(c) for c in root.children] == [Text, SpecialCharacter, Text]
        assert chars(root) == [char]

    def test_ampersand_entity_left_alone(self) -> None:
        root = parse_line("&amp; x")
        assert [c.content for c in root.children] == ["&amp; x"]

    def test_other_entities_escaped(self) -> None:
        assert chars(parse_line("&copy; x")) == ["&"]

    def test_consecutive(self) -> None:
        root = parse_line("<<>>")
        assert chars(root) == ["<", "<", ">", ">"]
        assert all(isinstance(c, SpecialCharacter) for c in root.children)

    def test_location(self) -> None:
        node = parse_line("ab&cdef").children[1]
        assert (node.location.offset, node.location.end_offset) == (2, 3)


class TestTrailingAmpersand:
    """An & with fewer than four characters after it."""

    def test_escaped_by_default(self) -> None:
        assert chars(parse_line("a &")) == ["&"]
        assert chars(parse_line("x &b")) == ["&"]

    def test_legacy_bypass(self) -> None:
        config = ParseConfig(escape_trailing_ampersand=False)
        root = parse_line("x &b", config=config)
        assert chars(root) == []
        assert [c.content for c in root.children] == ["x &b"]

    def test_legacy_still_escapes_with_lookahead(self) -> None:
        config = ParseConfig(escape_trailing_ampersand=False)
        assert chars(parse_line("x & more", config=config)) == ["&"]
