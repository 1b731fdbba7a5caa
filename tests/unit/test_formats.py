"""Tests for the gemtext, HTML and Markdown renderers."""

import pytest

from mdiu import Config, Document, render
from mdiu.config import HtmlConfig, MarkdownConfig
from mdiu.formats import Format, GemtextFormat, HtmlFormat, MarkdownFormat
from mdiu.formats.base import with_lookahead
from mdiu.model import Content, TextBlock


GEMTEXT_KITCHEN_SINK = """\
# title
## section
### subsection

text
=> one-link one link
> quote
```
@_@
```
more text
```emoticon
@_@
```
* one item
=> no-text
=> with-text with text
* an item
* another item
"""

HTML_KITCHEN_SINK = """\
<h1>title</h1>
<h2>section</h2>
<h3>subsection</h3>
<p>text</p>
<p><a href="one-link">one link</a></p>
<blockquote>quote</blockquote>
<pre>
@_@
</pre>
<p>more text</p>
<pre>
@_@
</pre>
<p>one item</p>
<ul>
<li><a href="no-text">no-text</a></li>
<li><a href="with-text">with text</a></li>
</ul>
<ul>
<li>an item</li>
<li>another item</li>
</ul>
"""

MARKDOWN_KITCHEN_SINK = """\
# title

## section

### subsection

text

[one link](one-link)

> quote

    @_@

more text

    @_@

* one item

* [no-text](no-text)
* [with text](with-text)

* an item
* another item
"""


# ---------------------------------------------------------------------------
# Shared behaviour
# ---------------------------------------------------------------------------

class TestCommon:
    @pytest.mark.parametrize("fmt", [GemtextFormat, HtmlFormat, MarkdownFormat])
    def test_deterministic(self, fmt, kitchen_sink):
        renderer = fmt()
        assert renderer.render(kitchen_sink) == renderer.render(kitchen_sink)
        assert fmt().render(kitchen_sink) == renderer.render(kitchen_sink)

    @pytest.mark.parametrize("fmt", [GemtextFormat, HtmlFormat, MarkdownFormat])
    def test_empty_input(self, fmt):
        assert fmt().render([]) == ""

    @pytest.mark.parametrize("fmt", [GemtextFormat, HtmlFormat, MarkdownFormat])
    def test_accepts_iterator(self, fmt, kitchen_sink):
        assert fmt().render(iter(kitchen_sink)) == fmt().render(kitchen_sink)

    def test_input_is_not_consumed(self, kitchen_sink):
        render(kitchen_sink, "html")
        assert render(kitchen_sink, "gemtext") == GEMTEXT_KITCHEN_SINK

    def test_formats_are_closed(self):
        with pytest.raises(TypeError):

            class Custom(Format):
                name = "custom"
                extension = ".txt"

                def render(self, blocks):
                    return ""

    def test_metadata(self):
        assert (GemtextFormat.name, GemtextFormat.extension) == ("gemtext", ".gmi")
        assert (HtmlFormat.name, HtmlFormat.extension) == ("html", ".html")
        assert (MarkdownFormat.name, MarkdownFormat.extension) == ("markdown", ".md")


class TestLookahead:
    def test_pairs(self):
        assert list(with_lookahead("abc")) == [("a", "b"), ("b", "c"), ("c", None)]

    def test_single(self):
        assert list(with_lookahead(["a"])) == [("a", None)]

    def test_empty(self):
        assert list(with_lookahead([])) == []


# ---------------------------------------------------------------------------
# Gemtext
# ---------------------------------------------------------------------------

class TestGemtext:
    def test_kitchen_sink(self, kitchen_sink):
        assert GemtextFormat().render(kitchen_sink) == GEMTEXT_KITCHEN_SINK

    def test_empty_line(self):
        assert render(Document().empty().build()) == "\n"

    def test_links(self):
        blocks = Document().link("a").link_with_label("b", "B").build()
        assert render(blocks, "gemtext") == "=> a\n=> b B\n"

    def test_multiline_preformatted(self):
        blocks = Document().preformatted_with_alt("a\nb", "code").build()
        assert render(blocks, "gemtext") == "```code\na\nb\n```\n"

    def test_unchecked_content_is_written_verbatim(self):
        blocks = [TextBlock(content=Content.unchecked("a\nb"))]
        assert render(blocks, "gemtext") == "a\nb\n"


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

class TestHtml:
    def test_kitchen_sink(self, kitchen_sink):
        assert HtmlFormat().render(kitchen_sink) == HTML_KITCHEN_SINK

    def test_three_links_share_one_list(self):
        blocks = Document().text("a").link("1").link("2").link("3").text("b").build()
        out = render(blocks, "html")
        assert out.count("<ul>") == 1
        assert out.count("</ul>") == 1
        first = out.index('<li><a href="1">')
        last = out.index('<li><a href="3">')
        assert out.index("<ul>") < first
        assert out.index("</ul>") > last
        assert "<ul>" not in out[first:last] and "</ul>" not in out[first:last]

    def test_isolated_link_is_paragraph(self):
        blocks = Document().text("a").link("x").text("b").build()
        assert render(blocks, "html") == '<p>a</p>\n<p><a href="x">x</a></p>\n<p>b</p>\n'

    def test_isolated_list_item_is_paragraph(self):
        blocks = Document().list_item("only").build()
        assert render(blocks, "html") == "<p>only</p>\n"

    def test_adjacent_runs_of_different_kinds(self):
        blocks = Document().link("a").link("b").list_item("c").list_item("d").build()
        assert render(blocks, "html") == (
            "<ul>\n"
            '<li><a href="a">a</a></li>\n'
            '<li><a href="b">b</a></li>\n'
            "</ul>\n"
            "<ul>\n"
            "<li>c</li>\n"
            "<li>d</li>\n"
            "</ul>\n"
        )

    def test_runs_are_separate_per_kind(self):
        blocks = Document().link("a").list_item("b").link("c").build()
        assert "<ul>" not in render(blocks, "html")

    def test_empty_block_breaks_a_run(self):
        blocks = Document().list_item("a").empty().list_item("b").build()
        assert render(blocks, "html") == "<p>a</p>\n<p>b</p>\n"

    def test_two_runs_after_each_other(self):
        blocks = (
            Document().list_item("a").list_item("b").text("t").list_item("c").list_item("d").build()
        )
        out = render(blocks, "html")
        assert out.count("<ul>") == 2
        assert out.count("</ul>") == 2

    def test_multiline_preformatted(self):
        blocks = Document().preformatted("a\nb").build()
        assert render(blocks, "html") == "<pre>\na\nb\n</pre>\n"

    def test_alt_not_emitted_by_default(self):
        blocks = Document().preformatted_with_alt("x", "caption").build()
        assert "caption" not in render(blocks, "html")

    def test_alt_emitted_when_configured(self):
        config = Config(html=HtmlConfig(emit_pre_alt=True))
        blocks = Document().preformatted_with_alt("@_@", "emoticon").build()
        assert HtmlFormat(config).render(blocks) == '<pre title="emoticon">\n@_@\n</pre>\n'

    def test_no_escaping_by_default(self):
        blocks = Document().text("<b>bold</b>").build()
        assert render(blocks, "html") == "<p><b>bold</b></p>\n"

    def test_escaping_when_configured(self):
        config = Config(html=HtmlConfig(escape=True))
        blocks = Document().text("a < b & c").link("/?a=1&b=2").build()
        assert HtmlFormat(config).render(blocks) == (
            "<p>a &lt; b &amp; c</p>\n"
            '<p><a href="/?a=1&amp;b=2">/?a=1&amp;b=2</a></p>\n'
        )


# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------

class TestMarkdown:
    def test_kitchen_sink(self, kitchen_sink):
        assert MarkdownFormat().render(kitchen_sink) == MARKDOWN_KITCHEN_SINK

    def test_single_trailing_newline(self):
        assert render(Document().text("a").build(), "markdown") == "a\n"
        assert render(Document().h3("a").build(), "markdown") == "### a\n"

    def test_empty_blocks_render_nothing(self):
        blocks = Document().empty().text("a").empty().build()
        assert render(blocks, "markdown") == "a\n"

    def test_run_separated_by_one_blank_line(self):
        blocks = Document().text("a").link("x").link_with_label("y", "Y").text("b").build()
        assert render(blocks, "markdown") == "a\n\n* [x](x)\n* [Y](y)\n\nb\n"

    def test_isolated_link(self):
        blocks = Document().text("a").link_with_label("x", "X").text("b").build()
        assert render(blocks, "markdown") == "a\n\n[X](x)\n\nb\n"

    def test_isolated_list_item(self):
        blocks = Document().list_item("a").text("b").build()
        assert render(blocks, "markdown") == "* a\n\nb\n"

    def test_link_run_then_item_run(self):
        blocks = Document().link("a").link("b").list_item("c").list_item("d").build()
        assert render(blocks, "markdown") == "* [a](a)\n* [b](b)\n\n* c\n* d\n"

    def test_multiline_preformatted(self):
        blocks = Document().preformatted("line 1\nline 2").build()
        assert render(blocks, "markdown") == "    line 1\n    line 2\n"

    def test_preformatted_keeps_form_feed_and_unicode_separators(self):
        blocks = Document().preformatted("a\x0cb\nc\u2028d\x85e").build()
        assert render(blocks, "markdown") == "    a\x0cb\n    c\u2028d\x85e\n"

    def test_preformatted_crlf_line_endings(self):
        blocks = Document().preformatted("a\r\nb\r\n").build()
        assert render(blocks, "markdown") == "    a\n    b\n"

    def test_preformatted_keeps_inner_blank_line(self):
        blocks = Document().preformatted("a\n\nb").build()
        assert render(blocks, "markdown") == "    a\n    \n    b\n"

    def test_code_indent_configurable(self):
        config = Config(markdown=MarkdownConfig(code_indent=2))
        blocks = Document().preformatted("a\nb").text("c").build()
        assert MarkdownFormat(config).render(blocks) == "  a\n  b\n\nc\n"
