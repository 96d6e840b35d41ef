# markdown_extra/renderer.py

from .config import ExtraConfig, get_extra_config
from .hosts import MarkdownHost
from .session import ConversionSession


def _session_for(config, span_host=None):
    if not isinstance(config, ExtraConfig):
        config = get_extra_config(config)
    return ConversionSession(config, span_host=span_host)


def preprocess(text, config=None, session=None):
    """
    Pre-pass only: escapes, recognizers, placeholders.

    Pass the same ``session`` to ``postprocess`` afterwards, the stored
    blocks live there.
    """
    session = session or _session_for(config)
    return session.preprocess(text)


def postprocess(html, session):
    """Post-pass only: restore the blocks stored by ``preprocess``"""
    return session.postprocess(html)


def render_markdown(text, config=None, host=None, span_host=None):
    """
    Main rendering function: Markdown Extra pre-pass, host render, post-pass

    Args:
        text: Raw markdown text
        config: ExtraConfig, options dict or None for defaults
        host: Host converter for the document itself (a fresh MarkdownHost by default)
        span_host: Host for embedded markdown; see ConversionSession
    """
    session = _session_for(config, span_host=span_host)
    host = host or MarkdownHost()

    # Pre-processing: Before markdown conversion
    text = session.preprocess(text)

    html = host.render(text)

    # Post-processing: After markdown conversion
    return session.postprocess(html)
