"""Tests for HTML rendering."""

import pytest

from inkline import HtmlRenderer, ParseConfig, parse_config_context, parse_line, render
from inkline.renderers.html import escape_text, html_escape, normalize_reference
from inkline.stringbuilder import StringBuilder


def to_html(line: str, **kwargs) -> str:
    return HtmlRenderer(**kwargs).render(parse_line(line))


class TestInlineElements:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("*a*", "<em>a</em>"),
            ("__a__", "<strong>a</strong>"),
            ("***a***", "<strong><em>a</em></strong>"),
            ("`a < b`", "<code>a &lt; b</code>"),
            ('`"q"`', "<code>&quot;q&quot;</code>"),
            ("<!-- c -->", "<!-- c -->"),
            ("<i>raw</i>", "<i>raw</i>"),
            ("a<br/>b", "a<br/>b"),
            ("<http://x.org>", '<a href="http://x.org">http://x.org</a>'),
            ("<me@x.org>", '<a href="mailto:me@x.org">me@x.org</a>'),
        ],
    )
    def test_element(self, line: str, expected: str) -> None:
        assert to_html(line) == expected

    def test_whitespace_only_strong(self) -> None:
        assert to_html("** **") == "<strong> </strong>"

    def test_empty_line(self) -> None:
        assert to_html("") == ""


class TestLinksAndImages:
    def test_link_with_title(self) -> None:
        assert to_html('[a](/u "T")') == '<a href="/u" title="T">a</a>'

    def test_link_text_escaped(self) -> None:
        assert to_html("[a<b](/u)") == '<a href="/u">a&lt;b</a>'

    def test_attribute_quotes_escaped(self) -> None:
        assert to_html("[a](/u 'say \"hi\"')") == '<a href="/u" title="say &quot;hi&quot;">a</a>'

    def test_image(self) -> None:
        assert to_html('![alt](/i.png "T")') == '<img src="/i.png" alt="alt" title="T" />'

    def test_reference_resolved(self) -> None:
        html = to_html("![pic][Logo]", references={"logo": ("/l.png", None)})
        assert html == '<img src="/l.png" alt="pic" />'

    def test_reference_matching_ignores_case_and_spacing(self) -> None:
        html = to_html("[a][Big   Ref]", references={"big ref": ("/b", None)})
        assert html == '<a href="/b">a</a>'

    def test_unresolved_reference(self) -> None:
        assert to_html("[t][missing]") == '<a href="#missing">t</a>'

    def test_reference_title_from_definition(self) -> None:
        html = to_html("[t][r]", references={"r": ("/r", "From definition")})
        assert html == '<a href="/r" title="From definition">t</a>'


class TestTextEscaping:
    def test_special_characters(self) -> None:
        assert to_html("a < b > c & d") == "a &lt; b &gt; c &amp; d"

    def test_existing_entity_not_double_escaped(self) -> None:
        assert to_html("&amp; x") == "&amp; x"

    def test_escape_text_helper(self) -> None:
        assert escape_text("&amp; &#38; &copy; & <") == "&amp; &amp;#38; &amp;copy; &amp; &lt;"

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("&copy;", "&amp;copy;"),
            ("*&copy;*", "<em>&amp;copy;</em>"),
            ("[&copy;](/u)", '<a href="/u">&amp;copy;</a>'),
            ("![&copy;](/i)", '<img src="/i" alt="&amp;copy;" />'),
        ],
    )
    def test_entities_escaped_everywhere(self, line: str, expected: str) -> None:
        assert to_html(line) == expected

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("&amp;", "&amp;"),
            ("*&amp;*", "<em>&amp;</em>"),
            ("[&amp;](/u)", '<a href="/u">&amp;</a>'),
            ("![&amp;](/i)", '<img src="/i" alt="&amp;" />'),
        ],
    )
    def test_amp_entity_kept_everywhere(self, line: str, expected: str) -> None:
        assert to_html(line) == expected

    def test_html_escape_keeps_single_quotes(self) -> None:
        assert html_escape("'\"<&") == "'&quot;&lt;&amp;"

    def test_normalize_reference(self) -> None:
        assert normalize_reference("  Foo\t BAR ") == "foo bar"


class TestOptions:
    def test_paragraph_tags(self) -> None:
        assert to_html("x *y*", paragraph_tags=True) == "<p>x <em>y</em></p>"

    def test_text_transformer(self) -> None:
        assert to_html("a *b* `c`", text_transformer=str.upper) == "A <em>B</em> <code>c</code>"

    def test_render_uses_active_config(self) -> None:
        config = ParseConfig(text_transformer=lambda s: s.replace("a", "4"))
        root = parse_line("a *a*")
        with parse_config_context(config):
            assert render(root) == "4 <em>4</em>"
        assert render(root) == "a <em>a</em>"

    def test_render_subtree(self) -> None:
        root = parse_line("x **y**")
        assert HtmlRenderer().render(root.children[1]) == "<strong>y</strong>"


class TestStringBuilder:
    def test_chaining(self) -> None:
        sb = StringBuilder()
        assert sb.append("a").append("").append("b").build() == "ab"

    def test_len(self) -> None:
        sb = StringBuilder()
        sb.append("abc").append("de")
        assert len(sb) == 5
