"""
Referentials: personal-reference words.

    Single:       [ë] C1 Vc1 [w|y Vc2]
    Dual:         [ë] C1 Vc1 w|y Vc2 C2 [ë]
    Combination:  [ë] C1 Vc1 Cx [Vx Cs ...] [Vc2]

C1 is a referent list, or "a" followed by a suppletive Cp form. Ultimate
stress marks the representative essence.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ithkuil.affixes import Affix, affix_from_vxcs
from ithkuil.categories import Case, Essence, Specification, Stress, SuppletiveAdjunctMode
from ithkuil.codec import case_from_vowel, case_to_vowel, suppletive_mode_from_hform, suppletive_mode_to_hform
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.gloss import GlossFlags, gloss_non_default, join_dashed
from ithkuil.referents import ReferentList
from ithkuil.segments import expect, parse_vxcs
from ithkuil.stream import ParseFlags, TokenList, TokenStream
from ithkuil.tokens import UA, Consonant, HForm, Schwa, Token, VowelForm

logger = logging.getLogger(__name__)

Referent = Union[ReferentList, SuppletiveAdjunctMode]

CX_FORMS = {
    "x": Specification.BSC,
    "xt": Specification.CTE,
    "xp": Specification.CSV,
    "xx": Specification.OBJ,
}
CX_FORMS_INVERSE = {value: key for key, value in CX_FORMS.items()}


def _referent_tokens(referent: Referent) -> List[Token]:
    if isinstance(referent, SuppletiveAdjunctMode):
        return [VowelForm(1, 1), suppletive_mode_to_hform(referent)]
    return [Consonant(referent.to_string())]


def _connector(vc2: VowelForm) -> HForm:
    """y before a Vc2 starting with u or ü, otherwise w."""
    spelled = vc2.as_str()
    return HForm.parse("y" if spelled[0] in "uü" else "w")


def _essence_stress(essence: Essence) -> Stress:
    return Stress.Ultimate if essence is Essence.RPV else Stress.Penultimate


@dataclass(frozen=True)
class SingleReferential:
    referent: Referent
    first_case: Case = Case.THM
    second_case: Optional[Case] = None
    essence: Essence = Essence.NRM

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        parts = [self.referent.gloss(flags)]
        if self.second_case is not None:
            parts += [self.first_case.gloss(flags), self.second_case.gloss(flags)]
        else:
            parts.append(gloss_non_default(self.first_case, flags))
        parts.append(gloss_non_default(self.essence, flags))
        return join_dashed(parts)

    def to_tokens(self) -> TokenList:
        tokens = _referent_tokens(self.referent)
        tokens.append(case_to_vowel(self.first_case))
        if self.second_case is not None:
            vc2 = case_to_vowel(self.second_case)
            tokens += [_connector(vc2), vc2]
        return TokenList(tokens, _essence_stress(self.essence))

    def to_string(self) -> str:
        return self.to_tokens().to_string()


@dataclass(frozen=True)
class DualReferential:
    first_referent: Referent
    first_case: Case
    second_case: Case
    second_referent: ReferentList
    essence: Essence = Essence.NRM

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return join_dashed([
            self.first_referent.gloss(flags),
            self.first_case.gloss(flags),
            self.second_case.gloss(flags),
            self.second_referent.gloss(flags),
            gloss_non_default(self.essence, flags),
        ])

    def to_tokens(self) -> TokenList:
        tokens = _referent_tokens(self.first_referent)
        vc2 = case_to_vowel(self.second_case)
        tokens += [
            case_to_vowel(self.first_case),
            _connector(vc2),
            vc2,
            Consonant(self.second_referent.to_string()),
        ]
        return TokenList(tokens, _essence_stress(self.essence))

    def to_string(self) -> str:
        return self.to_tokens().to_string()


@dataclass(frozen=True)
class CombinationReferential:
    referent: Referent
    first_case: Case = Case.THM
    specification: Specification = Specification.BSC
    affixes: Tuple[Affix, ...] = ()
    second_case: Optional[Case] = None
    essence: Essence = Essence.NRM

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        parts = [
            self.referent.gloss(flags),
            gloss_non_default(self.first_case, flags),
            self.specification.gloss(flags),
        ]
        parts += [affix.gloss(flags) for affix in self.affixes]
        if self.second_case is not None:
            parts.append(self.second_case.gloss(flags))
        parts.append(gloss_non_default(self.essence, flags))
        return join_dashed(parts)

    def to_tokens(self) -> TokenList:
        tokens = _referent_tokens(self.referent)
        tokens += [case_to_vowel(self.first_case), Consonant(CX_FORMS_INVERSE[self.specification])]
        for affix in self.affixes:
            tokens += affix.to_vxcs()
        if self.second_case is Case.THM:
            tokens.append(UA())
        elif self.second_case is not None:
            tokens.append(case_to_vowel(self.second_case))
        return TokenList(tokens, _essence_stress(self.essence))

    def to_string(self) -> str:
        return self.to_tokens().to_string()


Referential = Union[SingleReferential, DualReferential, CombinationReferential]


def _parse_referent(stream: TokenStream) -> Referent:
    first = stream.peek()
    if isinstance(first, VowelForm) and first == VowelForm(1, 1):
        stream.next_any()
        cp = expect(stream, HForm, ParseErrorKind.ExpectedCp)
        return suppletive_mode_from_hform(cp)

    stream.next(Schwa)
    consonant = expect(stream, Consonant, ParseErrorKind.ExpectedReferent)
    return ReferentList.parse(consonant.text)


def _parse_essence(stream: TokenStream, flags: ParseFlags) -> Essence:
    if stream.stress is Stress.Ultimate:
        return Essence.RPV
    if stream.stress is Stress.Antepenultimate:
        raise ParseError(ParseErrorKind.AntepenultimateStress)
    return Essence.NRM


def parse_referential(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> Referential:
    """
    Parse a single, dual or combination referential.

    Raises:
        ParseError: ExpectedReferent, ExpectedCp, ExpectedVc, ExpectedCx
            or a referent error.
    """
    essence = _parse_essence(stream, flags)
    referent = _parse_referent(stream)
    first_case = case_from_vowel(expect(stream, VowelForm, ParseErrorKind.ExpectedVc))

    if stream.is_done():
        return SingleReferential(referent, first_case, None, essence)

    following = stream.peek()

    if isinstance(following, HForm):
        if following.as_str() not in ("w", "y"):
            raise ParseError(ParseErrorKind.ExpectedVc)
        stream.next_any()
        second_case = case_from_vowel(expect(stream, VowelForm, ParseErrorKind.ExpectedVc))
        second = stream.next(Consonant)
        if second is None:
            return SingleReferential(referent, first_case, second_case, essence)
        stream.next(Schwa)
        return DualReferential(referent, first_case, second_case, ReferentList.parse(second.text), essence)

    cx = expect(stream, Consonant, ParseErrorKind.ExpectedCx)
    try:
        specification = CX_FORMS[cx.text]
    except KeyError:
        raise ParseError(ParseErrorKind.ExpectedCx) from None

    affixes = []
    while len(stream.tokens_left()) >= 2:
        vx, cs = parse_vxcs(stream, flags)
        affixes.append(affix_from_vxcs(vx, cs))

    second_case = None
    final = stream.next_any()
    if isinstance(final, UA):
        second_case = Case.THM
    elif isinstance(final, VowelForm):
        if final != VowelForm(1, 1):
            second_case = case_from_vowel(final)
    elif final is not None:
        raise ParseError(ParseErrorKind.ExpectedVc)

    return CombinationReferential(
        referent, first_case, specification, tuple(affixes), second_case, essence)
