# markdown_extra/preprocessors/fenced_code.py
"""
Preprocessor for GFM-style fenced code blocks.

    ```python
    print("<hi>")
    ```

becomes (highlighter "highlight"):

    <pre><code class="language-python">print("&lt;hi&gt;")</code></pre>

The body is literal text: it is HTML-escaped and never treated as
markdown. With the "prettify" highlighter ``<pre>`` also gets the
``prettyprint`` class. Without a highlighter the language tag is used as
the bare class name.
"""

from __future__ import annotations

import html
import logging
import re
from typing import TYPE_CHECKING

from ..models import CodeBlock
from ..utils import encode_code

if TYPE_CHECKING:
    from ..config import ExtraConfig
    from ..session import ConversionSession

logger = logging.getLogger(__name__)

FENCED_CODE_RE = re.compile(
    r"""
    (?:\A|\n)
    ```(.*)\n           # opening fence and optional language
    ([\s\S]*?)          # literal body, shortest span
    \n```[ \t]*         # closing fence on its own line
    (?=\n|\Z)
    """,
    re.VERBOSE,
)


def render_code_block(block: CodeBlock, config: "ExtraConfig") -> str:
    pre_class = ' class="prettyprint"' if config.google_code_prettify else ""
    code_class = ""
    if block.language:
        language = html.escape(block.language)
        if config.google_code_prettify or config.highlight_js:
            # html5 language- class names, understood by prettify and highlight.js
            code_class = f' class="language-{language}"'
        else:
            code_class = f' class="{language}"'

    return f"<pre{pre_class}><code{code_class}>{encode_code(block.body)}</code></pre>"


def fenced_code_blocks(text: str, session: "ConversionSession") -> str:
    def do_code_block(match: re.Match) -> str:
        block = CodeBlock(body=match.group(2), language=match.group(1).strip() or None)
        return "\n\n" + session.hash_block(render_code_block(block, session.config)) + "\n\n"

    text, count = FENCED_CODE_RE.subn(do_code_block, text)
    if count:
        logger.debug(f"Converted {count} fenced code block(s)")
    return text
