"""
Configuration for the Markdown Extra pre/post passes.

The option names mirror what the setup routine reads from its caller:

    extensions   "all" or any of "tables", "fenced_code_gfm", "def_list"
    table_class  class attribute for generated <table> elements
    highlighter  None/"none", "prettify" or "highlight"
    sanitize     render embedded markdown with the sanitizing host
    tab_width    spaces per indentation level when outdenting definitions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

TABLES = "tables"
FENCED_CODE = "fenced_code_gfm"
DEF_LIST = "def_list"
ALL = "all"

# Order for an explicit extension list
EXTENSION_ORDER: Tuple[str, ...] = (TABLES, FENCED_CODE, DEF_LIST)
# "all" enables definition lists too and runs fenced code before tables,
# so pipes inside code never become tables
ALL_ORDER: Tuple[str, ...] = (FENCED_CODE, TABLES, DEF_LIST)

HIGHLIGHT_PRETTIFY = "prettify"
HIGHLIGHT_JS = "highlight"
HIGHLIGHTERS = (HIGHLIGHT_PRETTIFY, HIGHLIGHT_JS)

DEFAULT_TAB_WIDTH = 4


@dataclass
class ExtraConfig:
    extensions: Tuple[str, ...] = (ALL,)
    table_class: str = ""
    highlighter: Optional[str] = None
    sanitize: bool = True
    tab_width: int = DEFAULT_TAB_WIDTH
    transformations: Tuple[str, ...] = field(init=False)

    def __post_init__(self):
        if isinstance(self.extensions, str):
            self.extensions = (self.extensions,)
        self.extensions = tuple(self.extensions)

        unknown = [e for e in self.extensions if e != ALL and e not in EXTENSION_ORDER]
        if unknown:
            logger.warning(f"Ignoring unknown Markdown Extra extensions: {', '.join(unknown)}")

        if ALL in self.extensions:
            self.transformations = ALL_ORDER
        else:
            self.transformations = tuple(e for e in EXTENSION_ORDER if e in self.extensions)

        if self.highlighter == "none" or self.highlighter == "":
            self.highlighter = None
        if self.highlighter is not None and self.highlighter not in HIGHLIGHTERS:
            logger.warning(f"Unknown highlighter {self.highlighter!r}, code blocks will use bare classes")
            self.highlighter = None

        self.table_class = self.table_class or ""
        self.tab_width = max(int(self.tab_width), 1)

    @property
    def google_code_prettify(self) -> bool:
        return self.highlighter == HIGHLIGHT_PRETTIFY

    @property
    def highlight_js(self) -> bool:
        return self.highlighter == HIGHLIGHT_JS


def get_extra_config(options: Optional[Mapping[str, Any]] = None) -> ExtraConfig:
    """
    Build an ExtraConfig from a plain options mapping.

    Missing keys take their defaults. Keys outside the known option names
    are ignored.

    Args:
        options: Mapping using the option names listed in this module's docstring

    Returns:
        A validated ExtraConfig
    """
    options = dict(options or {})
    kwargs = {}

    extensions = options.get("extensions")
    if extensions:
        kwargs["extensions"] = extensions_from(extensions)
    if "table_class" in options:
        kwargs["table_class"] = options["table_class"]
    if "highlighter" in options:
        kwargs["highlighter"] = options["highlighter"]
    if "sanitize" in options:
        kwargs["sanitize"] = bool(options["sanitize"])
    if "tab_width" in options:
        kwargs["tab_width"] = options["tab_width"]

    return ExtraConfig(**kwargs)


def extensions_from(value: Sequence[str] | str) -> Tuple[str, ...]:
    """Normalise an extension option that may arrive as a comma-separated string."""
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return tuple(value)
