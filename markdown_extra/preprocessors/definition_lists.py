# markdown_extra/preprocessors/definition_lists.py
"""
Preprocessor for Markdown Extra definition lists.

Syntax:

    Apple
    :   Pomaceous fruit of plants of the genus Malus.

    Orange
    Tangerine

    :   A citrus fruit.

        Second paragraph of a loose definition.

Every line of a term block becomes its own ``<dt>``. A definition is
"tight" (span-level markdown only) unless it is preceded by a blank line or
contains a blank line, in which case it is "loose" and rendered as a full
markdown document.

Markdown has no delimiters for these lists, so they are found in two
steps. First whole lists are located, using the STX/ETX sentinels for
start and end of text. Then each list is split into terms and definitions.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, List

from ..models import Definition, DefinitionGroup
from ..spans import convert_spans
from ..utils import add_anchors, outdent, remove_anchors, rtrim, trim

if TYPE_CHECKING:
    from ..session import ConversionSession

logger = logging.getLogger(__name__)

# A placeholder line left by another recognizer is never a term
_NOT_PLACEHOLDER = r"(?!<p>~X\d+X</p>)"

WHOLE_LIST_RE = re.compile(
    r"""
    (\x02\n?|\n\n)                  # start of text or a blank line
    (                               # whole list
        [ ]{0,3}
        (?:[ \t]*%(np)s\S.*\n)+     # defined term(s)
        \n?
        [ ]{0,3}:[ ]+               # colon starting the first definition
        [\s\S]+?
        (?=
            \n*\x03                 # end of text
        |
            \n{2,}
            (?=\S)
            (?!                     # not another term
                [ ]{0,3}
                (?:\S.*\n)+?
                \n?
                [ ]{0,3}:[ ]+
            )
            (?![ ]{0,3}:[ ]+)       # nor another definition
        )
    )
    """
    % {"np": _NOT_PLACEHOLDER},
    re.VERBOSE,
)

TERM_RE = re.compile(
    r"""
    (\x02\n?|\n\n+)                 # leading line
    (                               # definition terms
        [ ]{0,3}
        (?![:][ ]|[ ])              # not a definition mark or more whitespace
        %(np)s
        (?:\S.*\n)+?                # actual term lines
    )
    (?=\n?[ ]{0,3}:[ ])             # followed by a definition mark
    """
    % {"np": _NOT_PLACEHOLDER},
    re.VERBOSE,
)

DEFINITION_RE = re.compile(
    r"""
    \n(\n+)?                        # leading blank line(s)
    ([ ]{0,3}[:][ ]+)               # marker, whitespace before and after the colon
    ([\s\S]+?)                      # definition text
    (?=\n*                          # stop at the next definition mark,
        (?:
            \n[ ]{0,3}[:][ ]
        |
            \x02\d+\x03             # the next term marker
        |
            \x03                    # or the end of the list
        )
    )
    """,
    re.VERBOSE,
)

# Term markers use the sentinels, which never occur in user text
_TERM_MARKER_RE = re.compile(r"\x02(\d+)\x03")
_TRAILING_BLANKS_RE = re.compile(r"\n{2,}(?=\x03)")
_BLANK_GAP_RE = re.compile(r"\n{2,}")


def _span_lines(text: str, host) -> List[str]:
    return [convert_spans(trim(line), host) for line in text.split("\n") if trim(line)]


def parse_definition_items(list_str: str, session: "ConversionSession") -> List[DefinitionGroup]:
    """
    Split one definition list into term groups with their definitions.

    Terms are span-rendered as they are found. Each term block is replaced by
    a numbered STX/ETX marker so the definition pattern can stop at the next
    term and each definition can find the group it belongs to. Text between
    definitions that is neither a marker nor a definition is kept as terms of
    the group it sits in, so nothing in the list is dropped.

    Args:
        list_str: Text of a single list as found by WHOLE_LIST_RE
        session: Conversion session (span host and tab width)

    Returns:
        Groups in document order
    """
    host = session.span_host
    tab_width = session.config.tab_width
    groups: List[DefinitionGroup] = []
    # terms and definitions before any recognised term block
    leading = DefinitionGroup()

    list_str = add_anchors(list_str)
    list_str = _TRAILING_BLANKS_RE.sub("\n", list_str)

    def do_terms(match: re.Match) -> str:
        groups.append(DefinitionGroup(terms=_span_lines(trim(match.group(2)), host)))
        return f"\n\x02{len(groups) - 1}\x03\n"

    list_str = TERM_RE.sub(do_terms, list_str)

    def take_gap(gap: str, current: DefinitionGroup) -> DefinitionGroup:
        # split() alternates plain text and captured marker numbers
        for i, piece in enumerate(_TERM_MARKER_RE.split(gap)):
            if i % 2:
                if int(piece) < len(groups):
                    current = groups[int(piece)]
            else:
                current.terms.extend(_span_lines(remove_anchors(piece), host))
        return current

    current = leading
    pos = 0
    for match in DEFINITION_RE.finditer(list_str):
        current = take_gap(list_str[pos : match.start()], current)
        leading_line, marker_space, body = match.groups()

        if leading_line or _BLANK_GAP_RE.search(body):
            # replace the marker with the same width of indentation
            body = " " * len(marker_space) + body
            body = outdent(body, tab_width) + "\n\n"
            definition = Definition(body="\n" + host.render(body) + "\n", loose=True)
        else:
            body = rtrim(body)
            definition = Definition(body=convert_spans(outdent(body, tab_width), host))

        current.definitions.append(definition)
        pos = match.end()
    take_gap(list_str[pos:], current)

    if leading.terms or leading.definitions:
        groups.insert(0, leading)
    return groups


def render_definition_list(groups: List[DefinitionGroup]) -> str:
    lines = ["<dl>"]
    for group in groups:
        lines.extend(f"<dt>{term}</dt>" for term in group.terms)
        lines.extend(f"<dd>{definition.body}</dd>" for definition in group.definitions)
    lines.append("</dl>")
    return "\n".join(lines)


def definition_lists(text: str, session: "ConversionSession") -> str:
    count = 0

    def do_list(match: re.Match) -> str:
        nonlocal count
        count += 1
        groups = parse_definition_items(match.group(2), session)
        return match.group(1) + session.hash_block(render_definition_list(groups)) + "\n\n"

    text = WHOLE_LIST_RE.sub(do_list, add_anchors(text))
    if count:
        logger.debug(f"Converted {count} definition list(s)")
    return remove_anchors(text)
