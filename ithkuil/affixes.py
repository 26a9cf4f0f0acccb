"""
Affixes and affix lists.

An affix is written as a vowel form (Vx, carrying its degree) paired with a
consonant form (Cs). Most pairs are plain affixes, but a handful of Cs forms
and the fourth vowel sequence are reserved for special affix kinds. The
decision is made per pair in this order:

1. S4 with degree 0: a Ca-stacking affix whose Cs is a Ca.
2. Cs "lw" or "ly": a case-stacking affix.
3. Cs one of the twelve case-accessor forms: a case-accessor affix.
4. S1-S3: a plain affix; S4: a thematic referential affix.

A list holding exactly one S3 pair whose Cs is none of the reserved forms
is instead a single appositive referential affix.
"""
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

from ithkuil.ca import Ca
from ithkuil.categories import AffixType, Case, CaseAccessorMode
from ithkuil.codec import (
    APPOSITIVE_CASES,
    THEMATIC_CASES,
    appositive_case_from_degree,
    case_from_vowel,
    case_to_vowel,
    thematic_case_from_degree,
)
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.gloss import GlossFlags, format_consonant
from ithkuil.referents import ReferentList
from ithkuil.tokens import Consonant, Numeral, VowelForm

CASE_STACKING_FORMS = frozenset({"lw", "ly"})

# Cs -> (accessor type, mode)
CASE_ACCESSOR_FORMS = {
    "s": (AffixType.T1, CaseAccessorMode.Normal),
    "z": (AffixType.T2, CaseAccessorMode.Normal),
    "č": (AffixType.T3, CaseAccessorMode.Normal),
    "š": (AffixType.T1, CaseAccessorMode.Inverse),
    "ž": (AffixType.T2, CaseAccessorMode.Inverse),
    "j": (AffixType.T3, CaseAccessorMode.Inverse),
}
CASE_ACCESSOR_FORMS_INVERSE = {value: key for key, value in CASE_ACCESSOR_FORMS.items()}

RESERVED_CS_FORMS = CASE_STACKING_FORMS | frozenset(
    letter + glide for letter in CASE_ACCESSOR_FORMS for glide in "wy"
)

AffixCs = Union[Consonant, Numeral]


def _case_vowel_and_glide(case: Case) -> Tuple[VowelForm, str]:
    """Spell a case as an unglottalized vowel plus w (first 36 cases) or y."""
    vowel = case_to_vowel(case)
    glide = "y" if vowel.has_glottal_stop else "w"
    return vowel.with_glottal_stop(False), glide


@dataclass(frozen=True)
class PlainAffix:
    cs: str
    type: AffixType
    degree: int

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return f"{format_consonant(self.cs, flags)}/{self.degree}{self.type.abbr}"

    def to_vxcs(self) -> Tuple[VowelForm, AffixCs]:
        return VowelForm(self.type.number, self.degree), Consonant(self.cs)


@dataclass(frozen=True)
class NumericAffix:
    value: int
    type: AffixType
    degree: int

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return f"{self.value}/{self.degree}{self.type.abbr}"

    def to_vxcs(self) -> Tuple[VowelForm, AffixCs]:
        return VowelForm(self.type.number, self.degree), Numeral(self.value)


@dataclass(frozen=True)
class CaStackingAffix:
    ca: Ca

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return f"({self.ca.gloss(flags)})"

    def to_vxcs(self) -> Tuple[VowelForm, AffixCs]:
        return VowelForm(4, 0), Consonant(self.ca.to_ungeminated_string())


@dataclass(frozen=True)
class CaseStackingAffix:
    case: Case

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        label = "case_stacking" if flags & GlossFlags.LONG else "case"
        return f"({label}:{self.case.gloss(flags)})"

    def to_vxcs(self) -> Tuple[VowelForm, AffixCs]:
        vowel, glide = _case_vowel_and_glide(self.case)
        return vowel, Consonant("l" + glide)


@dataclass(frozen=True)
class CaseAccessorAffix:
    case: Case
    mode: CaseAccessorMode
    type: AffixType

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return f"({self.mode.gloss(flags)}:{self.case.gloss(flags)}){self.type.abbr}"

    def to_vxcs(self) -> Tuple[VowelForm, AffixCs]:
        vowel, glide = _case_vowel_and_glide(self.case)
        letter = CASE_ACCESSOR_FORMS_INVERSE[self.type, self.mode]
        return vowel, Consonant(letter + glide)


@dataclass(frozen=True)
class ThematicReferentialAffix:
    referents: ReferentList
    case: Case

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return f"({self.referents.gloss(flags)}-{self.case.gloss(flags)})"

    def to_vxcs(self) -> Tuple[VowelForm, AffixCs]:
        degree = THEMATIC_CASES.index(self.case) + 1
        return VowelForm(4, degree), Consonant(self.referents.to_affixual_string())


@dataclass(frozen=True)
class AppositiveReferentialAffix:
    referents: ReferentList
    case: Case

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return f"({self.referents.gloss(flags)}-{self.case.gloss(flags)})"

    def to_vxcs(self) -> Tuple[VowelForm, AffixCs]:
        degree = APPOSITIVE_CASES.index(self.case) + 1
        return VowelForm(3, degree), Consonant(self.referents.to_affixual_string())


Affix = Union[
    PlainAffix,
    NumericAffix,
    CaStackingAffix,
    CaseStackingAffix,
    CaseAccessorAffix,
    ThematicReferentialAffix,
]


def affix_from_vxcs(vx: VowelForm, cs: AffixCs) -> Affix:
    """
    Decode one Vx/Cs pair. The Vx glottal stop belongs to the surrounding
    word and is ignored here.

    Raises:
        ParseError: ExpectedCs, ExpectedCa, ExpectedVc, ExpectedVx or a
            referent error, depending on the affix kind.
    """
    if isinstance(cs, Numeral):
        if vx.degree == 0 and vx.sequence == 4:
            raise ParseError(ParseErrorKind.ExpectedCa)
        if vx.sequence == 4:
            raise ParseError(ParseErrorKind.ExpectedCs)
        return NumericAffix(cs.value, list(AffixType)[vx.sequence - 1], vx.degree)

    if not isinstance(cs, Consonant):
        raise ParseError(ParseErrorKind.ExpectedCs)

    text = cs.text

    if vx.sequence == 4 and vx.degree == 0:
        ca = Ca.from_ungeminated_string(text)
        if ca is None:
            raise ParseError(ParseErrorKind.ExpectedCa)
        return CaStackingAffix(ca)

    if text in CASE_STACKING_FORMS:
        case = case_from_vowel(vx.with_glottal_stop(text == "ly"))
        return CaseStackingAffix(case)

    if text in RESERVED_CS_FORMS:
        affix_type, mode = CASE_ACCESSOR_FORMS[text[0]]
        case = case_from_vowel(vx.with_glottal_stop(text.endswith("y")))
        return CaseAccessorAffix(case, mode, affix_type)

    if vx.sequence == 4:
        if vx.degree == 0:
            raise ParseError(ParseErrorKind.ExpectedVx)
        referents = ReferentList.parse_affixual(text)
        return ThematicReferentialAffix(referents, thematic_case_from_degree(vx.degree))

    return PlainAffix(text, list(AffixType)[vx.sequence - 1], vx.degree)


@dataclass(frozen=True)
class NormalAffixList:
    affixes: Tuple[Affix, ...] = ()

    def __len__(self) -> int:
        return len(self.affixes)

    def __iter__(self):
        return iter(self.affixes)

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return "-".join(affix.gloss(flags) for affix in self.affixes)

    def to_vxcs_pairs(self):
        return [affix.to_vxcs() for affix in self.affixes]


@dataclass(frozen=True)
class AppositiveAffixList:
    affix: AppositiveReferentialAffix

    def __len__(self) -> int:
        return 1

    def __iter__(self):
        return iter((self.affix,))

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return self.affix.gloss(flags)

    def to_vxcs_pairs(self):
        return [self.affix.to_vxcs()]


AffixList = Union[NormalAffixList, AppositiveAffixList]


def is_appositive_pair(vx: VowelForm, cs: AffixCs) -> bool:
    return (
        vx.sequence == 3
        and isinstance(cs, Consonant)
        and cs.text not in RESERVED_CS_FORMS
    )


def affix_list_from_pairs(pairs: Sequence[Tuple[VowelForm, AffixCs]]) -> AffixList:
    """
    Decode a run of Vx/Cs pairs. A lone S3 pair with an unreserved Cs is an
    appositive referential affix; anything else is a list of ordinary
    affixes.
    """
    if len(pairs) == 1 and is_appositive_pair(*pairs[0]):
        vx, cs = pairs[0]
        case = appositive_case_from_degree(vx.degree)
        referents = ReferentList.parse_affixual(cs.text)
        return AppositiveAffixList(AppositiveReferentialAffix(referents, case))

    return NormalAffixList(tuple(affix_from_vxcs(vx, cs) for vx, cs in pairs))


def affix_list_of(affixes: Iterable[Affix]) -> NormalAffixList:
    return NormalAffixList(tuple(affixes))
