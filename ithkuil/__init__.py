# This file makes the 'ithkuil' directory a Python package.

from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.gloss import GlossFlags
from ithkuil.stream import ParseFlags
from ithkuil.word import gloss_word, parse_word, word_kind

__version__ = "0.1.0"

__all__ = [
    'ParseError',
    'ParseErrorKind',
    'GlossFlags',
    'ParseFlags',
    'parse_word',
    'gloss_word',
    'word_kind',
]
