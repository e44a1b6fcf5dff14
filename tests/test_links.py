"""Tests for link and image recognition."""

from inkline import Image, Link, Text, parse_line


class TestInlineLinks:
    def test_without_title(self) -> None:
        link = parse_line("[a](http://x)").children[0]
        assert isinstance(link, Link)
        assert (link.text, link.url, link.title) == ("a", "http://x", None)

    def test_single_quoted_title(self) -> None:
        link = parse_line("[a](u 'T')").children[0]
        assert link.title == "T"

    def test_parenthesized_title(self) -> None:
        link = parse_line("[a](u (T))").children[0]
        assert (link.url, link.title) == ("u", "T")

    def test_balanced_parentheses_in_target(self) -> None:
        link = parse_line("[w](http://x.org/a_(b))").children[0]
        assert link.url == "http://x.org/a_(b)"

    def test_angle_bracket_target(self) -> None:
        link = parse_line("[a](<u v>)").children[0]
        assert link.url == "u v"

    def test_empty_target(self) -> None:
        link = parse_line("[a]()").children[0]
        assert isinstance(link, Link)
        assert link.url == ""

    def test_text_and_url_trimmed(self) -> None:
        link = parse_line("[ a ]( u )").children[0]
        assert (link.text, link.url) == ("a", "u")

    def test_space_before_target(self) -> None:
        link = parse_line("[a] (u)").children[0]
        assert isinstance(link, Link)
        assert link.url == "u"

    def test_surrounding_text(self) -> None:
        root = parse_line("see [a](u) now")
        assert [type(c) for c in root.children] == [Text, Link, Text]
        assert root.children[2].content == " now"

    def test_nested_image_in_link_text(self) -> None:
        root = parse_line("[![img](a.png)](http://x)")
        assert len(root.children) == 1
        link = root.children[0]
        assert isinstance(link, Link)
        assert link.text == "![img](a.png)"
        assert link.url == "http://x"


class TestReferenceLinks:
    def test_reference(self) -> None:
        link = parse_line("[text][ref]").children[0]
        assert isinstance(link, Link)
        assert (link.text, link.url, link.title, link.is_reference) == ("text", "ref", None, True)

    def test_reference_after_space(self) -> None:
        link = parse_line("[text] [ref]").children[0]
        assert link.is_reference is True
        assert link.url == "ref"

    def test_empty_reference_uses_text(self) -> None:
        link = parse_line("[Text][]").children[0]
        assert link.url == "Text"
        assert link.is_reference is True


class TestLinkFallbacks:
    """Incomplete links degrade to plain text."""

    def test_no_target(self) -> None:
        root = parse_line("[text] alone")
        assert [c.content for c in root.children] == ["[text] alone"]

    def test_unclosed_text(self) -> None:
        assert [c.content for c in parse_line("[abc").children] == ["[abc"]

    def test_unclosed_target(self) -> None:
        assert [c.content for c in parse_line("[a](b").children] == ["[a](b"]

    def test_unclosed_reference(self) -> None:
        assert [c.content for c in parse_line("[a][b").children] == ["[a][b"]

    def test_trailing_spaces_do_not_overrun(self) -> None:
        assert [c.content for c in parse_line("[a]   ").children] == ["[a]   "]


class TestImages:
    def test_title(self) -> None:
        image = parse_line("![alt](img.png 'T')").children[0]
        assert isinstance(image, Image)
        assert (image.url, image.alt, image.title) == ("img.png", "alt", "T")

    def test_reference(self) -> None:
        image = parse_line("![alt][logo]").children[0]
        assert isinstance(image, Image)
        assert (image.url, image.alt, image.is_reference) == ("logo", "alt", True)

    def test_empty_reference_uses_alt(self) -> None:
        image = parse_line("![logo][]").children[0]
        assert image.url == "logo"

    def test_balanced_parentheses(self) -> None:
        image = parse_line("![a](x_(1).png)").children[0]
        assert image.url == "x_(1).png"

    def test_no_target_is_text(self) -> None:
        root = parse_line("![alt] x")
        assert [c.content for c in root.children] == ["![alt] x"]

    def test_bang_without_bracket(self) -> None:
        assert [c.content for c in parse_line("wow! ok").children] == ["wow! ok"]

    def test_image_location(self) -> None:
        image = parse_line("x ![a](b)").children[1]
        assert (image.location.offset, image.location.end_offset) == (2, 9)
