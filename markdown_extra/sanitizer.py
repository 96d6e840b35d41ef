# markdown_extra/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "hr",
            "del",
            "ins",
            "s",
            "strike",
            "sup",
            "sub",
            "kbd",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "blockquote",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            # tables
            "table",
            "thead",
            "tbody",
            "tr",
            "th",
            "td",
            # media
            "img",
        }
    )

    allowed_attrs = {
        "a": ["href", "title"],
        "img": ["src", "alt", "title", "width", "height"],
        "ol": ["start"],
    }

    allowed_protocols = ["http", "https", "ftp", "mailto"]

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_html(html):
    """
    Sanitize host output using bleach.

    Disallowed tags are removed (not escaped). This is the policy behind the
    sanitizing host, so it only ever sees HTML produced from a fragment of
    the document, never the placeholders of the outer conversion.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    try:
        return bleach.clean(
            html,
            tags=allowed_tags,
            attributes=allowed_attrs,
            protocols=allowed_protocols,
            strip=True,
        )
    except Exception as e:
        logger.error(f"Bleach sanitization failed: {e}", exc_info=True)
        return html
