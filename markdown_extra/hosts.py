"""
Host converters.

A host is the baseline markdown engine this package augments. The only
contract the recognizers rely on is ``render(text) -> str`` returning
complete HTML for a markdown document.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import markdown
import pypandoc

from .sanitizer import sanitize_html


class BaseHost:
    def render(self, text: str) -> str:
        raise NotImplementedError

    def __call__(self, text: str) -> str:
        return self.render(text)


class MarkdownHost(BaseHost):
    """Python-Markdown host. Owns a private ``markdown.Markdown`` instance."""

    def __init__(self, extensions: Optional[Iterable] = None, **kwargs):
        self.md = markdown.Markdown(extensions=list(extensions or []), **kwargs)

    def render(self, text: str) -> str:
        self.md.reset()
        return self.md.convert(text)


class PandocHost(BaseHost):
    """Host backed by Pandoc through pypandoc."""

    def __init__(
        self,
        format: str = "markdown",
        to: str = "html5",
        extra_args: Optional[List[str]] = None,
    ):
        self.format = format
        self.to = to
        self.extra_args = list(extra_args or [])

    def render(self, text: str) -> str:
        html = pypandoc.convert_text(
            text,
            to=self.to,
            format=self.format,
            extra_args=self.extra_args,
        )
        return html.rstrip("\n")


class SanitizingHost(BaseHost):
    """Wraps another host and strips anything outside the bleach policy."""

    def __init__(self, inner: Optional[BaseHost] = None):
        self.inner = inner or MarkdownHost()

    def render(self, text: str) -> str:
        return sanitize_html(self.inner.render(text))


def default_span_host(sanitize: bool = True) -> BaseHost:
    """Return the private host used for span and loose-definition rendering."""
    if sanitize:
        return SanitizingHost(MarkdownHost())
    return MarkdownHost()
