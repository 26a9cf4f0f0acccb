"""
Referents and referent lists.

A referent list is a run of consonants naming one or more referents, plus
an optional perspective marker. Three flavours share the same letters:

- normal lists (referentials), which may carry any perspective and mark
  the doubled referents by repeating a letter ("ll" is the obviative);
- affixual lists (referential affixes), which mark doubled referents with
  a following ç and only take a perspective suffix when it cannot be
  confused with a doubling ç;
- perspectiveless lists, used as the roots of referential formatives.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from ithkuil.categories import Perspective, ReferentEffect, ReferentTarget
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.gloss import GlossFlags


@dataclass(frozen=True)
class Referent:
    target: ReferentTarget
    effect: ReferentEffect = ReferentEffect.NEU

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        output = self.target.gloss(flags)
        if self.effect is not ReferentEffect.NEU or flags & GlossFlags.SHOW_DEFAULTS:
            output += "." + self.effect.gloss(flags)
        return output


def _referent(target: ReferentTarget, effect: ReferentEffect) -> Referent:
    return Referent(target, effect)


NEU, BEN, DET = ReferentEffect.NEU, ReferentEffect.BEN, ReferentEffect.DET

SINGLE_LETTERS: Dict[str, Referent] = {
    "l": _referent(ReferentTarget.M1, NEU),
    "r": _referent(ReferentTarget.M1, BEN),
    "ř": _referent(ReferentTarget.M1, DET),
    "s": _referent(ReferentTarget.M2, NEU),
    "š": _referent(ReferentTarget.M2, BEN),
    "ž": _referent(ReferentTarget.M2, DET),
    "n": _referent(ReferentTarget.P2, NEU),
    "t": _referent(ReferentTarget.P2, BEN),
    "d": _referent(ReferentTarget.P2, DET),
    "m": _referent(ReferentTarget.MA, NEU),
    "p": _referent(ReferentTarget.MA, BEN),
    "b": _referent(ReferentTarget.MA, DET),
    "ň": _referent(ReferentTarget.PA, NEU),
    "k": _referent(ReferentTarget.PA, BEN),
    "g": _referent(ReferentTarget.PA, DET),
    "z": _referent(ReferentTarget.MI, NEU),
    "ţ": _referent(ReferentTarget.MI, BEN),
    "ḑ": _referent(ReferentTarget.MI, DET),
    "ẓ": _referent(ReferentTarget.PI, NEU),
    "f": _referent(ReferentTarget.PI, BEN),
    "v": _referent(ReferentTarget.PI, DET),
    "c": _referent(ReferentTarget.Mx, NEU),
    "č": _referent(ReferentTarget.Mx, BEN),
    "j": _referent(ReferentTarget.Mx, DET),
}

REDUPLICATIVE_LETTERS: Dict[str, Referent] = {
    "th": _referent(ReferentTarget.Rdp, NEU),
    "ph": _referent(ReferentTarget.Rdp, BEN),
    "kh": _referent(ReferentTarget.Rdp, DET),
}

# Letter -> referent written with that letter doubled (or followed by ç)
DOUBLED_REFERENTS: Dict[str, Referent] = {
    "l": _referent(ReferentTarget.Obv, NEU),
    "r": _referent(ReferentTarget.Obv, BEN),
    "ř": _referent(ReferentTarget.Obv, DET),
    "m": _referent(ReferentTarget.PVS, NEU),
    "n": _referent(ReferentTarget.PVS, BEN),
    "ň": _referent(ReferentTarget.PVS, DET),
}

NORMAL_LETTERS = {
    **SINGLE_LETTERS,
    **REDUPLICATIVE_LETTERS,
    **{letter + letter: referent for letter, referent in DOUBLED_REFERENTS.items()},
}
NORMAL_LETTERS_INVERSE = {referent: form for form, referent in NORMAL_LETTERS.items()}

AFFIXUAL_LETTERS = {
    **SINGLE_LETTERS,
    **REDUPLICATIVE_LETTERS,
    **{letter + "ç": referent for letter, referent in DOUBLED_REFERENTS.items()},
}
AFFIXUAL_LETTERS_INVERSE = {referent: form for form, referent in AFFIXUAL_LETTERS.items()}

NORMAL_PERSPECTIVE_MARKERS = [
    ("tļ", Perspective.G),
    ("ļ", Perspective.G),
    ("ç", Perspective.N),
    ("x", Perspective.N),
    ("w", Perspective.A),
    ("y", Perspective.A),
]

AFFIXUAL_PERSPECTIVE_MARKERS = [
    ("tļ", Perspective.G),
    ("ļ", Perspective.G),
    ("ç", Perspective.N),
    ("x", Perspective.N),
]


def _read_referents(text: str, letters: Dict[str, Referent]) -> Tuple[Referent, ...]:
    if not text:
        raise ParseError(ParseErrorKind.ReferentEmpty)

    referents = []
    index = 0
    while index < len(text):
        pair = text[index:index + 2]
        if len(pair) == 2 and pair in letters:
            referents.append(letters[pair])
            index += 2
        elif text[index] in letters:
            referents.append(letters[text[index]])
            index += 1
        else:
            raise ParseError(ParseErrorKind.ReferentInvalid)
    return tuple(referents)


@dataclass(frozen=True)
class ReferentList:
    referents: Tuple[Referent, ...]
    perspective: Perspective = Perspective.M

    def __post_init__(self):
        if not self.referents:
            raise ParseError(ParseErrorKind.ReferentEmpty)

    # -- parsing -------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "ReferentList":
        """
        Parse a referent list as written in a referential. A perspective
        marker may appear at either end.

        Raises:
            ParseError: ReferentEmpty or ReferentInvalid.
        """
        perspective = Perspective.M
        for marker, marker_perspective in NORMAL_PERSPECTIVE_MARKERS:
            if text.startswith(marker):
                text = text[len(marker):]
                perspective = marker_perspective
                break
            if text.endswith(marker):
                text = text[:-len(marker)]
                perspective = marker_perspective
                break

        return cls(_read_referents(text, NORMAL_LETTERS), perspective)

    @classmethod
    def parse_affixual(cls, text: str) -> "ReferentList":
        """Parse the referent list carried by a referential affix."""
        perspective = Perspective.M
        for marker, marker_perspective in AFFIXUAL_PERSPECTIVE_MARKERS:
            if text.startswith(marker):
                text = text[len(marker):]
                perspective = marker_perspective
                break

        if perspective is Perspective.M:
            # A final ç after l, r, ř, m, n or ň doubles that referent instead
            suffixes = [
                ("tļ", Perspective.G, True),
                ("ļ", Perspective.G, not text.endswith("tļ")),
                ("ç", Perspective.N, len(text) >= 2 and text[-2] not in "lrřmnň"),
                ("x", Perspective.N, True),
                ("w", Perspective.A, True),
                ("y", Perspective.A, True),
            ]
            for marker, marker_perspective, allowed in suffixes:
                if allowed and text.endswith(marker):
                    text = text[:-len(marker)]
                    perspective = marker_perspective
                    break

        return cls(_read_referents(text, AFFIXUAL_LETTERS), perspective)

    @classmethod
    def parse_perspectiveless(cls, text: str) -> "ReferentList":
        """Parse the root of a referential formative."""
        return cls(_read_referents(text, NORMAL_LETTERS))

    # -- emission ------------------------------------------------------------

    def to_string(self) -> str:
        letters = "".join(NORMAL_LETTERS_INVERSE[referent] for referent in self.referents)
        if self.perspective is Perspective.G:
            if letters.endswith("t"):
                return "tļ" + letters
            return letters + "ļ"
        if self.perspective is Perspective.N:
            return letters + "x"
        if self.perspective is Perspective.A:
            return letters + "w"
        return letters

    def to_affixual_string(self) -> str:
        letters = "".join(AFFIXUAL_LETTERS_INVERSE[referent] for referent in self.referents)
        if self.perspective is Perspective.G:
            return "ļ" + letters
        if self.perspective is Perspective.N:
            return "x" + letters
        if self.perspective is Perspective.A:
            return letters + "w"
        return letters

    # -- glossing ------------------------------------------------------------

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        """Gloss as e.g. "1m", "[1m+2m]" or "[ma.BEN+G]"."""
        show_perspective = (
            self.perspective is not Perspective.M
            or bool(flags & GlossFlags.SHOW_DEFAULTS)
        )
        parts = [referent.gloss(flags) for referent in self.referents]
        if show_perspective:
            parts.append(self.perspective.gloss(flags))

        output = "+".join(parts)
        if len(self.referents) != 1 or show_perspective:
            return f"[{output}]"
        return output

    def gloss_as_root(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        output = "+".join(referent.gloss(flags) for referent in self.referents)
        if len(self.referents) > 1:
            return f"[{output}]"
        return output
