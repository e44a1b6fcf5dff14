"""Tests for the pure helpers in inkline.markup."""

import pytest

from inkline.markup import (
    index_of_paired,
    index_of_run,
    index_of_unescaped,
    is_email,
    is_hyperlink,
    parse_link_and_title,
    run_length,
    unescape,
)


class TestIsHyperlink:
    @pytest.mark.parametrize(
        "text",
        ["http://example.com", "https://a.b/c?d=e", "ftp://x", "mailto:me@example.com", "irc:"],
    )
    def test_accepts(self, text: str) -> None:
        assert is_hyperlink(text)

    @pytest.mark.parametrize(
        "text",
        ["", "b", "a:b", "http://a b", "1http://x", "span class='x'", "/b"],
    )
    def test_rejects(self, text: str) -> None:
        assert not is_hyperlink(text)


class TestIsEmail:
    @pytest.mark.parametrize("text", ["me@example.com", "first.last+tag@sub.example.org", "a@b"])
    def test_accepts(self, text: str) -> None:
        assert is_email(text)

    @pytest.mark.parametrize("text", ["", "me", "@example.com", "me@", "a b@c.d", "a\\b@c.d"])
    def test_rejects(self, text: str) -> None:
        assert not is_email(text)


class TestParseLinkAndTitle:
    def test_url_only(self) -> None:
        assert parse_link_and_title("  /path  ") == ("/path", None)

    @pytest.mark.parametrize(
        "inner",
        ['/p "T t"', "/p 'T t'", "/p (T t)"],
    )
    def test_title_delimiters(self, inner: str) -> None:
        assert parse_link_and_title(inner) == ("/p", "T t")

    def test_angle_brackets_removed(self) -> None:
        assert parse_link_and_title('<a b> "t"') == ("a b", "t")

    def test_empty(self) -> None:
        assert parse_link_and_title("") == ("", None)

    def test_unparseable_returned_whole(self) -> None:
        assert parse_link_and_title("a b c") == ("a b c", None)


class TestIndexSearches:
    def test_paired_skips_nested(self) -> None:
        assert index_of_paired("Foo_(bar))", ")", "(", 0) == 9

    def test_paired_missing(self) -> None:
        assert index_of_paired("a(b", ")", "(", 0) == -1

    def test_paired_respects_start(self) -> None:
        assert index_of_paired(")x)", ")", "(", 1) == 2

    def test_run_length(self) -> None:
        assert run_length("a***b", "*", 1) == 3
        assert run_length("a***b", "*", 0) == 0

    def test_run_exact_length(self) -> None:
        assert index_of_run("**a*b**", "*", 2, 2) == 5

    def test_run_skips_escaped_marker(self) -> None:
        assert index_of_run("a\\*b*", "*", 1, 0) == 4

    def test_run_custom_escape(self) -> None:
        assert index_of_run("a~*b*", "*", 1, 0, "~") == 4
        assert index_of_run("a\\*b*", "*", 1, 0, "~") == 2

    def test_run_not_found(self) -> None:
        assert index_of_run("a ** b", "*", 1, 0) == -1

    def test_unescaped(self) -> None:
        assert index_of_unescaped("\\**", "*", 0) == 2
        assert index_of_unescaped("\\\\*", "*", 0) == 2
        assert index_of_unescaped("abc", "*", 0) == -1


class TestUnescape:
    def test_drops_single_escapes(self) -> None:
        assert unescape("\\*a\\*") == "*a*"

    def test_escaped_escape_kept_once(self) -> None:
        assert unescape("a\\\\b") == "a\\b"

    def test_trailing_escape_dropped(self) -> None:
        assert unescape("a\\") == "a"

    def test_custom_escape(self) -> None:
        assert unescape("~*a\\", "~") == "*a\\"
