# markdown_extra/preprocessors/__init__.py

from ..config import DEF_LIST, FENCED_CODE, TABLES
from ..utils import strip_sentinels
from .definition_lists import definition_lists
from .escapes import process_escapes
from .fenced_code import fenced_code_blocks
from .tables import tables

# Recognizers by extension name, run in the order the config lists them
RECOGNIZERS = {
    TABLES: tables,
    FENCED_CODE: fenced_code_blocks,
    DEF_LIST: definition_lists,
}


def apply_preprocessors(text, session):
    """Normalise escapes, then run every enabled recognizer in order"""
    text = process_escapes(strip_sentinels(text), session)
    for name in session.config.transformations:
        text = RECOGNIZERS[name](text, session)
    return text
