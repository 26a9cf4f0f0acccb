"""
Orthographic preprocessing of romanized words.

The four steps run in order before tokenizing:

1. normalize: fold alternate spellings and combining diacritics into the
   canonical letters, drop zero-width spaces and leading apostrophes.
2. detect_stress: find the accented syllable, if any.
3. unstress: remove the accent marks once stress has been recorded.
4. tokenize (in ithkuil.tokens).

add_stress is the inverse of steps 2 and 3 and is used when re-emitting
words.
"""
from typing import List, Optional

from ithkuil.categories import Stress
from ithkuil.errors import ParseError, ParseErrorKind

ZERO_WIDTH_SPACE = "\u200b"
APOSTROPHES = "’ʼ‘'"

# Combining mark -> {base letter: precomposed letter}
COMBINING_MARKS = {
    "\u0301": {"a": "á", "e": "é", "i": "í", "o": "ó", "u": "ú"},
    "\u0308": {"a": "ä", "e": "ë", "o": "ö", "u": "ü"},
    "\u0302": {"a": "â", "e": "ê", "o": "ô", "u": "û"},
    "\u0300": {"i": "i", "u": "u"},
    "\u030c": {"c": "č", "s": "š", "z": "ž", "n": "ň", "r": "ř"},
    "\u0327": {"c": "ç", "t": "ţ", "d": "ḑ", "l": "ļ", "n": "ň", "r": "ř"},
    "\u0323": {"t": "ţ", "d": "ḑ", "l": "ļ", "z": "ẓ", "n": "ň", "r": "ř"},
    "\u0307": {"z": "ẓ", "i": "i"},
    "\u0355": {"r": "ř"},
}

ALTERNATE_LETTERS = {
    "ì": "i",
    "ı": "i",
    "ù": "u",
    "ṭ": "ţ",
    "ŧ": "ţ",
    "ț": "ţ",
    "ḍ": "ḑ",
    "đ": "ḑ",
    "ł": "ļ",
    "ḷ": "ļ",
    "ż": "ẓ",
    "ṇ": "ň",
    "ṛ": "ř",
    "ŗ": "ř",
    "’": "'",
    "ʼ": "'",
    "‘": "'",
}

UNSTRESSED = {
    "á": "a",
    "â": "ä",
    "é": "e",
    "ê": "ë",
    "í": "i",
    "ó": "o",
    "ô": "ö",
    "ú": "u",
    "û": "ü",
}

STRESSED = {
    "a": "á",
    "ä": "â",
    "e": "é",
    "ë": "ê",
    "i": "í",
    "o": "ó",
    "ö": "ô",
    "u": "ú",
    "ü": "û",
}

# Vowels that form a diphthong with a following i or u
AFTER_I = {"a", "e", "ë", "o", "u"}
AFTER_U = {"a", "e", "ë", "o", "i"}
STRESSED_AFTER_I = {"á", "é", "ê", "ó", "ú"}
STRESSED_AFTER_U = {"á", "é", "ê", "ó", "í"}

PLAIN_NUCLEI = {"a", "ä", "e", "ë", "o", "ö", "ü"}
STRESSED_NUCLEI = {"á", "â", "é", "ê", "ó", "ô", "û"}

STRESS_BY_COUNT = {
    1: Stress.Ultimate,
    2: Stress.Penultimate,
    3: Stress.Antepenultimate,
}


def normalize(word: str) -> str:
    """
    Canonicalize a romanized word.

    Lowercases the word, removes zero-width spaces, folds combining
    diacritics into precomposed letters, strips one leading apostrophe (a
    word-initial apostrophe marks the absence of a glottal stop) and maps
    alternate letters onto their canonical forms. Normalizing twice gives
    the same result as normalizing once unless the word starts with two
    apostrophes.
    """
    word = word.lower().replace(ZERO_WIDTH_SPACE, "")
    word = "".join(ALTERNATE_LETTERS.get(char, char) for char in word)

    folded: List[str] = []
    for char in word:
        marks = COMBINING_MARKS.get(char)
        if marks is not None and folded and folded[-1] in marks:
            folded[-1] = marks[folded[-1]]
        else:
            folded.append(char)

    word = "".join(folded)
    return word[1:] if word[:1] in APOSTROPHES else word


def detect_stress(word: str) -> Optional[Stress]:
    """
    Detect the stress marked in a normalized word.

    Returns None if no syllable is accented and the word has more than one
    vowel form (the default, penultimate stress). A word with a single
    unaccented vowel form is Monosyllabic.

    Raises:
        ParseError: StressDoubled if two syllables are accented,
            StressInvalid if the accent falls further back than the
            antepenultimate syllable.
    """
    vowel_count = 0
    last_vowel = None
    stress = None

    for char in reversed(word):
        counts = False
        stressed = False

        if last_vowel == "i" and char in AFTER_I | STRESSED_AFTER_I:
            last_vowel = None
            stressed = char in STRESSED_AFTER_I
        elif last_vowel == "u" and char in AFTER_U | STRESSED_AFTER_U:
            last_vowel = None
            stressed = char in STRESSED_AFTER_U
        elif char in ("i", "í"):
            last_vowel = "i"
            counts = True
            stressed = char == "í"
        elif char in ("u", "ú"):
            last_vowel = "u"
            counts = True
            stressed = char == "ú"
        elif char in PLAIN_NUCLEI or char in STRESSED_NUCLEI:
            last_vowel = None
            counts = True
            stressed = char in STRESSED_NUCLEI
        else:
            last_vowel = None

        if counts:
            vowel_count += 1

        if stressed:
            if stress is not None:
                raise ParseError(ParseErrorKind.StressDoubled)
            stress = STRESS_BY_COUNT.get(vowel_count)
            if stress is None:
                raise ParseError(ParseErrorKind.StressInvalid)

    if stress is None and vowel_count == 1:
        return Stress.Monosyllabic

    return stress


def unstress(word: str) -> str:
    """Replace accented vowels with their unaccented counterparts."""
    return "".join(UNSTRESSED.get(char, char) for char in word)


def syllable_nuclei(word: str) -> List[int]:
    """
    Indices of the stressable vowel of each syllable, last syllable first.

    In an i- or u-final diphthong the stress falls on the first vowel, so
    that vowel's index is reported.
    """
    nuclei = []
    index = len(word) - 1
    while index >= 0:
        char = word[index]
        if char in ("i", "u"):
            previous = word[index - 1] if index > 0 else ""
            if previous != char and previous in ("a", "e", "ë", "i", "o", "u"):
                index -= 1
            nuclei.append(index)
        elif char in PLAIN_NUCLEI:
            nuclei.append(index)
        index -= 1
    return nuclei


def add_stress(word: str, stress: Stress) -> str:
    """
    Mark stress on an unaccented, normalized word.

    Monosyllabic stress requires exactly one syllable and leaves the word
    unmarked. The other classes accent the first, second or third syllable
    nucleus from the end.

    Raises:
        ValueError: if the word does not have enough syllables.
    """
    nuclei = syllable_nuclei(word)

    if stress is Stress.Monosyllabic:
        if len(nuclei) != 1:
            raise ValueError(f"'{word}' is not monosyllabic")
        return word

    position = {
        Stress.Ultimate: 1,
        Stress.Penultimate: 2,
        Stress.Antepenultimate: 3,
    }[stress]

    if len(nuclei) < position:
        raise ValueError(f"'{word}' has too few syllables for {stress.long_name} stress")

    index = nuclei[position - 1]
    return word[:index] + STRESSED[word[index]] + word[index + 1:]
