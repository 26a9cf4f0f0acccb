"""
Tokens of romanized New Ithkuil and the tokenizer that produces them.

A normalized, unstressed word is split into maximal runs of consonants,
vowels and digits. Consonant runs starting with h, w or y are h-forms, vowel
runs are looked up in the vowel-form table, and digit runs are numerals.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Union

from ithkuil.errors import ParseError, ParseErrorKind

CONSONANTS = frozenset("bcçčdḑfghjklļmnňprřsštţvwxyzẓž")
VOWELS = frozenset("aäeëioöuü'")
DIGITS = frozenset("0123456789.")
SEPARATOR = "_"


@dataclass(frozen=True)
class Consonant:
    """A run of consonants that is not an h-form."""
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class VowelForm:
    """
    A vowel form: a sequence (1-4), a degree (0-9) and whether it carries a
    glottal stop.
    """
    sequence: int
    degree: int
    has_glottal_stop: bool = False

    def __post_init__(self):
        if self.sequence not in (1, 2, 3, 4):
            raise ValueError(f"Invalid vowel form sequence: {self.sequence}")
        if not 0 <= self.degree <= 9:
            raise ValueError(f"Invalid vowel form degree: {self.degree}")

    @classmethod
    def parse(cls, text: str) -> "VowelForm":
        """Look up a vowel run, raising SourceVowelInvalid if it is unknown."""
        key = text.replace("'", "")
        try:
            sequence, degree = VOWEL_FORMS[key]
        except KeyError:
            raise ParseError(ParseErrorKind.SourceVowelInvalid) from None
        return cls(sequence, degree, "'" in text)

    def with_glottal_stop(self, has_glottal_stop: bool = True) -> "VowelForm":
        return replace(self, has_glottal_stop=has_glottal_stop)

    def as_str(self, is_word_final: bool = False) -> str:
        """
        Canonical spelling. A glottal stop follows a medial vowel form and
        splits a word-final one ("a'a", "a'i").
        """
        text = CANONICAL_VOWEL_FORMS[self.sequence, self.degree]
        if not self.has_glottal_stop:
            return text
        if not is_word_final:
            return text + "'"
        if len(text) == 1:
            return f"{text}'{text}"
        return f"{text[0]}'{text[1:]}"

    def __str__(self) -> str:
        return self.as_str()


class HFormSequence(Enum):
    S0 = "S0"
    SW = "SW"
    SY = "SY"


@dataclass(frozen=True)
class HForm:
    """A consonant run starting with h, w or y."""
    sequence: HFormSequence
    degree: int

    @classmethod
    def parse(cls, text: str) -> "HForm":
        try:
            sequence, degree = H_FORMS[text]
        except KeyError:
            raise ParseError(ParseErrorKind.SourceHFormInvalid) from None
        return cls(sequence, degree)

    def as_str(self) -> str:
        return CANONICAL_H_FORMS[self.sequence, self.degree]

    def __str__(self) -> str:
        return self.as_str()


@dataclass(frozen=True)
class Numeral:
    """A run of digits. Only the integer part is kept."""
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UA:
    """The vowel form üa."""

    def __str__(self) -> str:
        return "üa"


@dataclass(frozen=True)
class Schwa:
    """The vowel ë standing on its own."""

    def __str__(self) -> str:
        return "ë"


@dataclass(frozen=True)
class GlottalStop:
    """A glottal stop with no vowel of its own, usually word-final."""

    def __str__(self) -> str:
        return "'"


Token = Union[Consonant, VowelForm, HForm, Numeral, UA, Schwa, GlottalStop]


VOWEL_FORMS = {
    "ae": (1, 0), "a": (1, 1), "ä": (1, 2), "e": (1, 3), "i": (1, 4),
    "ëi": (1, 5), "ö": (1, 6), "o": (1, 7), "ü": (1, 8), "u": (1, 9),
    "aa": (1, 1), "ää": (1, 2), "ee": (1, 3), "ii": (1, 4),
    "öö": (1, 6), "oo": (1, 7), "üü": (1, 8), "uu": (1, 9),

    "ea": (2, 0), "ai": (2, 1), "au": (2, 2), "ei": (2, 3), "eu": (2, 4),
    "ëu": (2, 5), "ou": (2, 6), "oi": (2, 7), "iu": (2, 8), "ui": (2, 9),

    "üo": (3, 0), "ia": (3, 1), "uä": (3, 1), "ie": (3, 2), "uë": (3, 2),
    "io": (3, 3), "üä": (3, 3), "iö": (3, 4), "üë": (3, 4), "eë": (3, 5),
    "uö": (3, 6), "öë": (3, 6), "uo": (3, 7), "öä": (3, 7), "ue": (3, 8),
    "ië": (3, 8), "ua": (3, 9), "iä": (3, 9),

    "üö": (4, 0), "ao": (4, 1), "aö": (4, 2), "eo": (4, 3), "eö": (4, 4),
    "oë": (4, 5), "öe": (4, 6), "oe": (4, 7), "öa": (4, 8), "oa": (4, 9),
}

CANONICAL_VOWEL_FORMS = {
    (1, 0): "ae", (1, 1): "a", (1, 2): "ä", (1, 3): "e", (1, 4): "i",
    (1, 5): "ëi", (1, 6): "ö", (1, 7): "o", (1, 8): "ü", (1, 9): "u",
    (2, 0): "ea", (2, 1): "ai", (2, 2): "au", (2, 3): "ei", (2, 4): "eu",
    (2, 5): "ëu", (2, 6): "ou", (2, 7): "oi", (2, 8): "iu", (2, 9): "ui",
    (3, 0): "üo", (3, 1): "ia", (3, 2): "ie", (3, 3): "io", (3, 4): "iö",
    (3, 5): "eë", (3, 6): "uö", (3, 7): "uo", (3, 8): "ue", (3, 9): "ua",
    (4, 0): "üö", (4, 1): "ao", (4, 2): "aö", (4, 3): "eo", (4, 4): "eö",
    (4, 5): "oë", (4, 6): "öe", (4, 7): "oe", (4, 8): "öa", (4, 9): "oa",
}

H_FORMS = {
    "h": (HFormSequence.S0, 1),
    "hl": (HFormSequence.S0, 2),
    "hr": (HFormSequence.S0, 3),
    "hm": (HFormSequence.S0, 4),
    "hn": (HFormSequence.S0, 5),
    "hň": (HFormSequence.S0, 6),
    "w": (HFormSequence.SW, 1),
    "hw": (HFormSequence.SW, 2),
    "hrw": (HFormSequence.SW, 3),
    "hmw": (HFormSequence.SW, 4),
    "hnw": (HFormSequence.SW, 5),
    "hňw": (HFormSequence.SW, 6),
    "y": (HFormSequence.SY, 1),
}

CANONICAL_H_FORMS = {value: key for key, value in H_FORMS.items()}

H = HForm(HFormSequence.S0, 1)
HL = HForm(HFormSequence.S0, 2)
HR = HForm(HFormSequence.S0, 3)
HM = HForm(HFormSequence.S0, 4)
HN = HForm(HFormSequence.S0, 5)
HNH = HForm(HFormSequence.S0, 6)
W = HForm(HFormSequence.SW, 1)
HW = HForm(HFormSequence.SW, 2)
Y = HForm(HFormSequence.SY, 1)


def is_geminate(consonant: str) -> bool:
    """Whether a consonant form contains two adjacent identical letters."""
    return any(a == b for a, b in zip(consonant, consonant[1:]))


def _make_token(kind: str, text: str) -> Token:
    if kind == "C":
        if text[0] in "hwy":
            return HForm.parse(text)
        return Consonant(text)

    if kind == "V":
        if text == "'":
            return GlottalStop()
        if text == "ë":
            return Schwa()
        if text == "üa":
            return UA()
        return VowelForm.parse(text)

    # TODO: keep the fractional part once numerals carry decimals
    try:
        return Numeral(int(text))
    except ValueError:
        raise ParseError(ParseErrorKind.SourceNumeralInvalid) from None


def tokenize(word: str) -> List[Token]:
    """
    Split a normalized, unstressed word into tokens.

    An underscore belongs to the consonant class and stays in the run, so
    "ţř_" is a different consonant form from "ţř". A word-final apostrophe
    becomes a GlottalStop token.

    Raises:
        ParseError: SourceCharInvalid, SourceVowelInvalid,
            SourceHFormInvalid or SourceNumeralInvalid on malformed input.
    """
    has_final_glottal_stop = word.endswith("'")
    if has_final_glottal_stop:
        word = word[:-1]

    tokens: List[Token] = []
    kind = None
    current = ""

    for char in word:
        if char in CONSONANTS or char == SEPARATOR:
            char_kind = "C"
        elif char in VOWELS:
            char_kind = "V"
        elif char in DIGITS:
            char_kind = "N"
        else:
            raise ParseError(ParseErrorKind.SourceCharInvalid)

        if char_kind != kind:
            if current:
                tokens.append(_make_token(kind, current))
            kind = char_kind
            current = ""

        current += char

    if current:
        tokens.append(_make_token(kind, current))

    if has_final_glottal_stop:
        tokens.append(GlottalStop())

    return tokens


def tokens_to_string(tokens: List[Token]) -> str:
    """Spell a token list back out with canonical spellings."""
    parts = []
    last = len(tokens) - 1
    for index, token in enumerate(tokens):
        if isinstance(token, VowelForm):
            parts.append(token.as_str(is_word_final=index == last))
        else:
            parts.append(str(token))
    return "".join(parts)
