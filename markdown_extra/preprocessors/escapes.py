"""
Preprocessor that neutralises escaped Markdown Extra delimiters.

Converts:
    \\|   ->  &#124;
    \\:   ->  &#58;

Runs before every recognizer so an escaped pipe or colon is never read
as a table cell boundary or a definition marker. Markdown has no escape
for the backslash itself, so these two substitutions are the whole rule.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..session import ConversionSession


def process_escapes(text: str, session: "ConversionSession | None" = None) -> str:
    return text.replace("\\|", "&#124;").replace("\\:", "&#58;")
