"""
Word-level dispatch.

A word is tried against each interpretation allowed by its first token, in
a fixed order, and the first one that consumes the whole word wins:

    vowel form   formative, parsing, modular, affixual, referential
    consonant    formative, bias, affixual, referential
    h-form       formative, suppletive, register, MCS, modular
    numeral      formative, numeric, affixual
    ë            referential, affixual

When every interpretation fails, the last one's error is raised. Value
errors (malformed source text) are raised as soon as they appear.
"""
import logging
from typing import Union

from ithkuil.adjuncts import (
    AffixualAdjunct,
    AspectualModularAdjunct,
    BiasAdjunct,
    MCSAdjunct,
    ModularAdjunct,
    MultipleAffixAdjunct,
    NonScopedModularAdjunct,
    NumericAdjunct,
    ParsingAdjunct,
    RegisterAdjunct,
    ScopedModularAdjunct,
    SingleAffixAdjunct,
    SuppletiveAdjunct,
    parse_affixual_adjunct,
    parse_bias_adjunct,
    parse_mcs_adjunct,
    parse_modular_adjunct,
    parse_numeric_adjunct,
    parse_parsing_adjunct,
    parse_register_adjunct,
    parse_suppletive_adjunct,
)
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.formative import Formative, parse_formative
from ithkuil.gloss import GlossFlags
from ithkuil.logging_config import log_with_context
from ithkuil.referential import (
    CombinationReferential,
    DualReferential,
    Referential,
    SingleReferential,
    parse_referential,
)
from ithkuil.stream import ParseFlags, TokenList
from ithkuil.tokens import UA, Consonant, GlottalStop, HForm, Numeral, Schwa, VowelForm

logger = logging.getLogger(__name__)

Word = Union[
    Formative,
    Referential,
    ParsingAdjunct,
    RegisterAdjunct,
    MCSAdjunct,
    SuppletiveAdjunct,
    BiasAdjunct,
    NumericAdjunct,
    ModularAdjunct,
    AffixualAdjunct,
]

DISPATCH = {
    VowelForm: (
        parse_formative,
        parse_parsing_adjunct,
        parse_modular_adjunct,
        parse_affixual_adjunct,
        parse_referential,
    ),
    Consonant: (
        parse_formative,
        parse_bias_adjunct,
        parse_affixual_adjunct,
        parse_referential,
    ),
    HForm: (
        parse_formative,
        parse_suppletive_adjunct,
        parse_register_adjunct,
        parse_mcs_adjunct,
        parse_modular_adjunct,
    ),
    Numeral: (
        parse_formative,
        parse_numeric_adjunct,
        parse_affixual_adjunct,
    ),
    Schwa: (
        parse_referential,
        parse_affixual_adjunct,
    ),
}


def parse_word(word: str, flags: ParseFlags = ParseFlags.NONE) -> Word:
    """
    Parse a single romanized word.

    Args:
        word: The word as written, with any stress marks and diacritics.
        flags: ParseFlags.PERMISSIVE relaxes some formative checks.

    Returns:
        The parsed word: a Formative, a referential or an adjunct.

    Raises:
        ParseError: if no interpretation accepts the word.
    """
    stream = TokenList.from_str(word).stream()

    first = stream.peek()
    if first is None:
        raise ParseError(ParseErrorKind.WordEmpty)
    if isinstance(first, UA):
        raise ParseError(ParseErrorKind.WordInitialUA)
    if isinstance(first, GlottalStop):
        raise ParseError(ParseErrorKind.WordInitialGlottalStop)

    error = None
    for parser in DISPATCH[type(first)]:
        try:
            value = stream.parse_entire(parser, flags)
        except ParseError as e:
            if e.is_value_error:
                raise
            logger.debug(f"'{word}' is not a {parser.__name__[len('parse_'):]}: {e}")
            error = e
        else:
            logger.debug(f"'{word}' parsed by {parser.__name__}")
            return value

    log_with_context(f"No interpretation of '{word}' succeeded", {
        'tokens': " ".join(str(token) for token in stream.tokens_left()),
        'stress': stream.stress,
        'error': error.kind.name,
    })
    raise error


WORD_KINDS = {
    Formative: "formative",
    SingleReferential: "referential",
    DualReferential: "referential",
    CombinationReferential: "referential",
    ParsingAdjunct: "parsing adjunct",
    RegisterAdjunct: "register adjunct",
    MCSAdjunct: "mood/case-scope adjunct",
    SuppletiveAdjunct: "suppletive adjunct",
    BiasAdjunct: "bias adjunct",
    NumericAdjunct: "numeric adjunct",
    AspectualModularAdjunct: "modular adjunct",
    NonScopedModularAdjunct: "modular adjunct",
    ScopedModularAdjunct: "modular adjunct",
    SingleAffixAdjunct: "affixual adjunct",
    MultipleAffixAdjunct: "affixual adjunct",
}


def word_kind(value: Word) -> str:
    """A short name for the kind of a parsed word, e.g. "formative"."""
    return WORD_KINDS[type(value)]


def gloss_word(word: str, flags: GlossFlags = GlossFlags.NONE,
               parse_flags: ParseFlags = ParseFlags.NONE) -> str:
    """Parse a word and gloss it."""
    return parse_word(word, parse_flags).gloss(flags)
