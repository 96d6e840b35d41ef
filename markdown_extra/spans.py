"""
Span-level rendering.

Recognizers embed host-rendered markdown inside their own block markup
(table cells, definition terms). The host always renders a full document,
so the result is filtered down to inline tags. Anything else, e.g. the
``<p>`` wrapper or a heading, is deleted while its text is kept.

This is a whitelist filter, not a security sanitizer.
"""

import re

INLINE_TAGS = re.compile(
    r"^(</?(a|abbr|acronym|applet|area|b|basefont|"
    r"bdo|big|button|cite|code|del|dfn|em|figcaption|"
    r"font|i|iframe|img|input|ins|kbd|label|map|"
    r"mark|meter|object|param|progress|q|ruby|rp|rt|s|"
    r"samp|script|select|small|span|strike|strong|"
    r"sub|sup|textarea|time|tt|u|var|wbr)[^>]*>|"
    r"<(br)\s?/?>)$",
    re.IGNORECASE,
)

_TAG_RE = re.compile(r"<[^>]*>?")


def is_inline_tag(tag: str) -> bool:
    """Whether the tag (with or without attributes) survives span rendering."""
    return INLINE_TAGS.match(tag) is not None


def sanitize_spans(html: str, whitelist=INLINE_TAGS) -> str:
    """Remove every tag that does not match ``whitelist``."""
    return _TAG_RE.sub(lambda m: m.group(0) if whitelist.match(m.group(0)) else "", html)


def convert_spans(text: str, host) -> str:
    """Render ``text`` with the host and keep only span-level tags."""
    return sanitize_spans(host.render(text))
