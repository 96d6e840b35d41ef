"""
Per-conversion state.

Generated markup is stored in a HashBlockStore and replaced in the text by
a placeholder the host passes through untouched. After the host has
rendered the document the placeholders are swapped back for the stored
markup.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from .config import ExtraConfig
from .hosts import BaseHost, default_span_host
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"<p>~X(\d+)X</p>")


def make_placeholder(index: int) -> str:
    # Wrapped in <p> so the host treats it as one raw HTML block and won't wrap it again
    return f"<p>~X{index}X</p>"


class HashBlockStore:
    def __init__(self):
        self.blocks: List[str] = []

    def __len__(self) -> int:
        return len(self.blocks)

    def store(self, block: str) -> str:
        """Save ``block`` and return the placeholder that stands in for it."""
        self.blocks.append(block)
        return make_placeholder(len(self.blocks) - 1)

    def restore_all(self, text: str) -> str:
        """Replace every placeholder in ``text`` with its stored block."""

        def replace(match: re.Match) -> str:
            key = int(match.group(1))
            if key >= len(self.blocks):
                logger.warning(f"No stored block for placeholder {match.group(0)!r}, leaving it in place")
                return match.group(0)
            return self.blocks[key]

        return PLACEHOLDER_RE.sub(replace, text)

    def reset(self) -> None:
        self.blocks = []


class ConversionSession:
    """
    State for one top-level conversion.

    ``preprocess`` runs before the host renders, ``postprocess`` after. A
    session must not be shared by conversions that overlap in time; create
    one per call (``render_markdown`` does).

    Args:
        config: Which recognizers run and how they render
        span_host: Host for embedded markdown. Defaults to a private
            Python-Markdown host, sanitizing when ``config.sanitize`` is set.
    """

    def __init__(self, config: Optional[ExtraConfig] = None, span_host: Optional[BaseHost] = None):
        self.config = config or ExtraConfig()
        self.span_host = span_host or default_span_host(self.config.sanitize)
        self.hash_blocks = HashBlockStore()

    def hash_block(self, block: str) -> str:
        return self.hash_blocks.store(block)

    def preprocess(self, text: str) -> str:
        self.hash_blocks.reset()
        text = apply_preprocessors(text, self)
        logger.debug(f"Pre-pass stored {len(self.hash_blocks)} block(s)")
        return text + "\n"

    def postprocess(self, text: str) -> str:
        text = apply_postprocessors(text, self)
        self.hash_blocks.reset()
        return text
