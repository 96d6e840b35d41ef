# markdown_extra/preprocessors/tables.py
"""
Preprocessor that converts Markdown Extra tables into HTML.

Both pipe styles are recognised:

    | Col 1 | Col 2 |          Col 1 | Col 2
    |:------|------:|          ------|:-----:
    | A     | B     |          A     | B

Output (stored as a hash block, a placeholder takes its place):

    <table class="...">
    <thead>
    <tr>
      <th style="text-align:left;">Col 1</th>
      <th style="text-align:right;">Col 2</th>
    </tr>
    </thead>
    <tbody>
    <tr>
      <td style="text-align:left;">A</td>
      <td style="text-align:right;">B</td>
    </tr>
    </tbody>
    </table>

Cell contents are rendered as span-level markdown. The header row fixes
the column count: short rows are padded with empty cells, extra cells are
dropped.
"""

from __future__ import annotations

import html as html_lib
import logging
import re
from typing import TYPE_CHECKING, List

from ..models import Alignment, TableSpec
from ..spans import convert_spans
from ..utils import trim

if TYPE_CHECKING:
    from ..session import ConversionSession

logger = logging.getLogger(__name__)

LEADING_PIPE_RE = re.compile(
    r"""
    ^
    [ ]{0,3}                    # allowed whitespace
    [|]                         # initial pipe
    (.+)\n                      # header row
    [ ]{0,3}
    [|]([ ]*[-:]+[-| :]*)\n     # separator
    (                           # table body
        (?:[ ]*[|].*\n?)*
    )
    (?:\n|$)                    # stop at final newline
    """,
    re.MULTILINE | re.VERBOSE,
)

NO_LEADING_PIPE_RE = re.compile(
    r"""
    ^
    [ ]{0,3}
    (\S.*[|].*)\n               # header row
    [ ]{0,3}
    ([-:]+[ ]*[|][-| :]*)\n     # separator
    (                           # table body
        (?:.*[|].*\n?)*
    )
    (?:\n|$)
    """,
    re.MULTILINE | re.VERBOSE,
)

CELL_SPLIT_RE = re.compile(r" *[|] *")
_LEADING_PIPE_STRIP_RE = re.compile(r"^ *[|]", re.MULTILINE)
_TRAILING_PIPE_STRIP_RE = re.compile(r"[|] *$", re.MULTILINE)
_BLANK_ROW_RE = re.compile(r"^\s*$")

_ALIGN_RIGHT_RE = re.compile(r"^ *-+: *$")
_ALIGN_CENTER_RE = re.compile(r"^ *:-+: *$")
_ALIGN_LEFT_RE = re.compile(r"^ *:-+ *$")


def classify_alignment(spec: str) -> Alignment:
    """Map one separator token (``---``, ``:--``, ``--:``, ``:-:``) to an Alignment."""
    if _ALIGN_RIGHT_RE.match(spec):
        return Alignment.RIGHT
    if _ALIGN_CENTER_RE.match(spec):
        return Alignment.CENTER
    if _ALIGN_LEFT_RE.match(spec):
        return Alignment.LEFT
    return Alignment.NONE


def _strip_pipes(text: str, count: int = 0) -> str:
    text = _LEADING_PIPE_STRIP_RE.sub("", text, count=count)
    return _TRAILING_PIPE_STRIP_RE.sub("", text, count=count)


def parse_table(header: str, separator: str, body: str) -> TableSpec:
    """
    Split the matched rows of a table into cells.

    Args:
        header: Header row as matched (leading pipe already consumed in the
            leading-pipe style)
        separator: Separator row
        body: Zero or more body lines

    Returns:
        TableSpec whose rows all have exactly as many cells as the header
    """
    header = _strip_pipes(header, count=1)
    separator = _strip_pipes(separator, count=1)
    body = _strip_pipes(body)

    alignments = [classify_alignment(spec) for spec in CELL_SPLIT_RE.split(separator)]
    headers = CELL_SPLIT_RE.split(header)
    col_count = len(headers)

    rows: List[List[str]] = []
    for line in body.split("\n"):
        # can apply to the final row
        if _BLANK_ROW_RE.match(line):
            continue
        cells = CELL_SPLIT_RE.split(line)
        cells.extend([""] * (col_count - len(cells)))
        rows.append(cells[:col_count])

    return TableSpec(headers=headers, alignments=alignments, rows=rows)


def render_table(spec: TableSpec, session: "ConversionSession") -> str:
    host = session.span_host
    table_class = session.config.table_class
    cls = f' class="{html_lib.escape(table_class)}"' if table_class else ""

    parts = [f"<table{cls}>\n", "<thead>\n", "<tr>\n"]
    for i, header in enumerate(spec.headers):
        align = spec.alignment_for(i).style_attr
        parts.append(f"  <th{align}>{convert_spans(trim(header), host)}</th>\n")
    parts.append("</tr>\n</thead>\n<tbody>\n")

    for row in spec.rows:
        parts.append("<tr>\n")
        for j in range(spec.column_count):
            align = spec.alignment_for(j).style_attr
            parts.append(f"  <td{align}>{convert_spans(trim(row[j]), host)}</td>\n")
        parts.append("</tr>\n")

    parts.append("</tbody>\n</table>\n")
    return "".join(parts)


def tables(text: str, session: "ConversionSession") -> str:
    """
    Replace every table in ``text`` with a hash-block placeholder.

    Leading-pipe tables are converted first, so a table whose rows all start
    with a pipe is never re-read by the looser no-leading-pipe pattern.
    """

    def do_table(match: re.Match) -> str:
        spec = parse_table(match.group(1), match.group(2), match.group(3))
        return "\n\n" + session.hash_block(render_table(spec, session)) + "\n\n"

    text, leading = LEADING_PIPE_RE.subn(do_table, text)
    text, no_leading = NO_LEADING_PIPE_RE.subn(do_table, text)
    if leading or no_leading:
        logger.debug(f"Converted {leading + no_leading} table(s)")
    return text
