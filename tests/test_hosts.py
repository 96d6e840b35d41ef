"""Unit tests for the host converters."""

import warnings
from unittest.mock import patch

from markdown_extra.hosts import MarkdownHost, PandocHost, SanitizingHost, default_span_host
from markdown_extra.sanitizer import sanitize_html


class TestMarkdownHost:
    def test_renders_document(self):
        assert MarkdownHost().render("# Title\n\nText") == "<h1>Title</h1>\n<p>Text</p>"

    def test_instance_reused_between_renders(self):
        host = MarkdownHost()
        host.render("first[^1]")
        assert host.render("second") == "<p>second</p>"

    def test_callable(self):
        assert MarkdownHost()("*a*") == "<p><em>a</em></p>"


class TestPandocHost:
    @patch("markdown_extra.hosts.pypandoc.convert_text")
    def test_render_calls_pypandoc(self, mock_convert):
        """render should delegate to pypandoc and drop the trailing newline."""
        mock_convert.return_value = "<p>x</p>\n"

        html = PandocHost(extra_args=["--wrap=none"]).render("x")

        assert html == "<p>x</p>"
        mock_convert.assert_called_once_with("x", to="html5", format="markdown", extra_args=["--wrap=none"])

    @patch("markdown_extra.hosts.pypandoc.convert_text")
    def test_pandoc_errors_propagate(self, mock_convert):
        """A missing pandoc binary is a deployment error and is not swallowed."""
        mock_convert.side_effect = OSError("No pandoc was found")

        try:
            PandocHost().render("x")
        except OSError as exc:
            assert "pandoc" in str(exc)
        else:
            raise AssertionError("OSError not raised")


class TestSanitizingHost:
    def test_strips_script(self):
        html = SanitizingHost(MarkdownHost()).render("<script>alert(1)</script>\n\nhello")
        assert "<script" not in html
        assert "<p>hello</p>" in html

    def test_keeps_markdown_output(self):
        assert SanitizingHost().render("**b** and [l](http://example.com)") == (
            '<p><strong>b</strong> and <a href="http://example.com">l</a></p>'
        )

    def test_drops_disallowed_attributes(self):
        html = SanitizingHost().render('<span onclick="x()">t</span>')
        assert "onclick" not in html

    def test_wraps_any_host(self, stub_host):
        inner = stub_host("<p>ok</p><iframe src='x'></iframe>")
        assert SanitizingHost(inner).render("anything") == "<p>ok</p>"

    def test_policy_emits_no_css_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            html = sanitize_html('<p><span style="color:red">x</span></p>')
        assert "style" not in html


def test_default_span_host():
    assert isinstance(default_span_host(True), SanitizingHost)
    assert isinstance(default_span_host(False), MarkdownHost)
