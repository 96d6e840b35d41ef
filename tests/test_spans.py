"""Tests for span-level rendering and the inline tag whitelist."""

import pytest

from markdown_extra.hosts import MarkdownHost
from markdown_extra.spans import convert_spans, is_inline_tag, sanitize_spans


class TestInlineWhitelist:
    @pytest.mark.parametrize(
        "tag",
        ["<em>", "</em>", "<strong>", '<a href="http://example.com" title="x">', "</a>", "<code>",
         '<img src="a.png" alt="">', "<br>", "<br />", "<BR/>", '<span class="k">', "<del>"],
    )
    def test_inline_tags_allowed(self, tag):
        assert is_inline_tag(tag)

    @pytest.mark.parametrize("tag", ["<p>", "</p>", "<h1>", "<div class='x'>", "<table>", "<ul>", "<li>", "<pre>"])
    def test_block_tags_rejected(self, tag):
        assert not is_inline_tag(tag)


class TestSanitizeSpans:
    def test_strips_paragraph_wrapper(self):
        assert sanitize_spans("<p>Hello <em>world</em></p>") == "Hello <em>world</em>"

    def test_keeps_text_of_removed_tags(self):
        assert sanitize_spans("<h2>Title</h2>") == "Title"

    def test_keeps_links_with_attributes(self):
        html = '<p><a href="http://example.com">link</a></p>'
        assert sanitize_spans(html) == '<a href="http://example.com">link</a>'

    def test_unterminated_tag_removed(self):
        assert sanitize_spans("text <div") == "text "


class TestConvertSpans:
    def test_uses_host_then_filters(self, stub_host):
        host = stub_host("<p><strong>b</strong></p>")
        assert convert_spans("**b**", host) == "<strong>b</strong>"
        assert host.calls == ["**b**"]

    def test_with_markdown_host(self):
        assert convert_spans("*a* and `b`", MarkdownHost()) == "<em>a</em> and <code>b</code>"

    def test_empty_text(self):
        assert convert_spans("", MarkdownHost()) == ""
