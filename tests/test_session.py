"""Tests for the hash-block store and the session lifecycle."""

import logging

from markdown_extra.config import ExtraConfig
from markdown_extra.hosts import MarkdownHost, SanitizingHost
from markdown_extra.session import ConversionSession, HashBlockStore, make_placeholder


class TestHashBlockStore:
    def test_store_returns_indexed_placeholders(self):
        store = HashBlockStore()
        assert store.store("<table></table>") == "<p>~X0X</p>"
        assert store.store("<pre></pre>") == "<p>~X1X</p>"
        assert len(store) == 2

    def test_restore_all_substitutes_in_place(self):
        store = HashBlockStore()
        first = store.store("<dl>\n<dt>a</dt>\n</dl>")
        second = store.store("<pre><code>x</code></pre>")
        text = f"<p>intro</p>\n{second}\n<p>middle</p>\n{first}\n"
        assert store.restore_all(text) == (
            "<p>intro</p>\n<pre><code>x</code></pre>\n<p>middle</p>\n<dl>\n<dt>a</dt>\n</dl>\n"
        )

    def test_restore_all_is_idempotent(self):
        store = HashBlockStore()
        text = "a " + store.store("<b>one</b>") + " b"
        once = store.restore_all(text)
        assert store.restore_all(once) == once

    def test_unknown_index_left_in_place(self, caplog):
        store = HashBlockStore()
        store.store("<hr>")
        with caplog.at_level(logging.WARNING, logger="markdown_extra.session"):
            result = store.restore_all(make_placeholder(7))
        assert result == "<p>~X7X</p>"
        assert "~X7X" in caplog.text

    def test_reset_empties_store(self):
        store = HashBlockStore()
        store.store("<hr>")
        store.reset()
        assert len(store) == 0
        assert store.store("<br>") == "<p>~X0X</p>"


class TestConversionSession:
    def test_default_span_host_sanitizes(self):
        session = ConversionSession()
        assert isinstance(session.span_host, SanitizingHost)

    def test_unsanitized_span_host(self):
        session = ConversionSession(ExtraConfig(sanitize=False))
        assert isinstance(session.span_host, MarkdownHost)

    def test_preprocess_appends_newline(self, session):
        assert session.preprocess("plain text") == "plain text\n"

    def test_preprocess_resets_store(self, session):
        session.preprocess("```\na\n```")
        session.preprocess("```\nb\n```")
        assert len(session.hash_blocks) == 1
        assert session.hash_blocks.blocks[0] == "<pre><code>b</code></pre>"

    def test_postprocess_restores_and_clears(self, session):
        text = session.preprocess("```\ncode\n```")
        assert "<p>~X0X</p>" in text
        html = session.postprocess("<p>~X0X</p>")
        assert html == "<pre><code>code</code></pre>"
        assert len(session.hash_blocks) == 0

    def test_placeholder_separated_by_blank_lines(self, session):
        text = session.preprocess("before\n```\ncode\n```\nafter")
        assert "\n\n<p>~X0X</p>\n\n" in text
