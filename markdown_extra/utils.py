"""Small text helpers shared by the recognizers."""

from __future__ import annotations

import re

# Start-of-text / end-of-text sentinels. The recognizers express "start of
# text" and "end of text" inside line-oriented patterns with these.
STX = "\x02"
ETX = "\x03"

_TRIM_RE = re.compile(r"^\s+|\s+$")
_RTRIM_RE = re.compile(r"\s+$")


def trim(text: str) -> str:
    return _TRIM_RE.sub("", text)


def rtrim(text: str) -> str:
    return _RTRIM_RE.sub("", text)


def add_anchors(text: str) -> str:
    """Wrap text in STX/ETX sentinels, without doubling existing ones."""
    if not text.startswith(STX):
        text = STX + text
    if not text.endswith(ETX):
        text = text + ETX
    return text


def remove_anchors(text: str) -> str:
    """Strip one leading STX and one trailing ETX sentinel if present."""
    if text.startswith(STX):
        text = text[1:]
    if text.endswith(ETX):
        text = text[:-1]
    return text


def outdent(text: str, tab_width: int = 4) -> str:
    """
    Remove one level of indentation from every line.

    One level is a single tab or up to ``tab_width`` spaces.
    """
    pattern = re.compile(r"^(\t|[ ]{1,%d})" % max(tab_width, 1), re.MULTILINE)
    return pattern.sub("", text)


def encode_code(code: str) -> str:
    """HTML-escape literal code. ``&`` goes first so it is never double-escaped."""
    code = code.replace("&", "&amp;")
    code = code.replace("<", "&lt;")
    code = code.replace(">", "&gt;")
    return code


def strip_sentinels(text: str) -> str:
    """Drop any STX/ETX characters from input text; they are reserved for markers."""
    return text.replace(STX, "").replace(ETX, "")
