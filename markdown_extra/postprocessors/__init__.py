# markdown_extra/postprocessors/__init__.py

from .hash_blocks import restore_hash_blocks

POSTPROCESSORS = [
    restore_hash_blocks,  # Swap placeholders back for the generated markup
]


def apply_postprocessors(html, session):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, session)
    return html
