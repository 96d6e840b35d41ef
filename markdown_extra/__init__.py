"""Markdown Extra tables, fenced code blocks and definition lists for a host markdown converter."""

from .config import ExtraConfig, get_extra_config
from .extensions.markdown_extra import MarkdownExtraExtension, makeExtension
from .hosts import MarkdownHost, PandocHost, SanitizingHost
from .renderer import postprocess, preprocess, render_markdown
from .session import ConversionSession, HashBlockStore

__all__ = (
    "ConversionSession",
    "ExtraConfig",
    "HashBlockStore",
    "MarkdownExtraExtension",
    "MarkdownHost",
    "PandocHost",
    "SanitizingHost",
    "get_extra_config",
    "makeExtension",
    "postprocess",
    "preprocess",
    "render_markdown",
)
