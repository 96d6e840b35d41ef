# markdown_extra/postprocessors/hash_blocks.py
"""
Postprocessor that restores the blocks the recognizers stored.

    <p>~X0X</p>   ->   <table>...</table>

Runs once the host has rendered the document. A placeholder whose index
was never stored is left verbatim so the defect stays visible.
"""

import logging

logger = logging.getLogger(__name__)


def restore_hash_blocks(html, session):
    count = len(session.hash_blocks)
    if not count:
        return html
    logger.debug(f"Restoring {count} stored block(s)")
    return session.hash_blocks.restore_all(html)
