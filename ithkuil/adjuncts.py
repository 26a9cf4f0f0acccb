"""
Adjuncts: the short function words that modify formatives.

    Parsing      Vp '
    Register     h Vm
    MCS          hr Vc
    Suppletive   Cp Vc
    Bias         Cb
    Numeric      N
    Modular      [w|y] Vn Cn [Vn Cm] Vn|Vh   or   [w|y] Vn(aspect)
    Affixual     Vx Cs [Vs]   or   [ë] Cs Vx Cz Vx Cs ... [Vz]
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ithkuil.affixes import Affix, affix_from_vxcs
from ithkuil.categories import (
    AffixualAdjunctMode,
    AffixualAdjunctScope,
    Aspect,
    Bias,
    Case,
    ModularAdjunctMode,
    ModularAdjunctScope,
    MoodOrCaseScope,
    Register,
    Stress,
    SuppletiveAdjunctMode,
    Valence,
)
from ithkuil.codec import (
    MCS,
    Vn,
    affixual_scope_from_cz,
    affixual_scope_from_vowel,
    affixual_scope_to_cz,
    affixual_scope_to_vowel,
    aspect_from_vowel,
    bias_from_consonant,
    bias_to_consonant,
    case_from_vowel,
    case_to_vowel,
    mcs_from_vowel,
    mcs_to_vowel,
    modular_mode_from_hform,
    modular_mode_to_hform,
    modular_scope_from_vowel,
    modular_scope_to_vowel,
    register_from_vowel,
    register_to_vowel,
    stress_from_vowel,
    stress_to_vowel,
    suppletive_mode_from_hform,
    suppletive_mode_to_hform,
    vn_from_vowel,
    vn_to_vowel,
)
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.gloss import GlossFlags, gloss_non_default, join_dashed
from ithkuil.segments import (
    VnCn,
    expect,
    parse_csvx,
    parse_hh,
    parse_hr,
    parse_numeral,
    parse_vncm,
    parse_vncn,
    parse_vxcs,
    vncm_to_tokens,
)
from ithkuil.stream import ParseFlags, TokenList, TokenStream
from ithkuil.tokens import HR, Consonant, GlottalStop, H, HForm, Numeral, Schwa, VowelForm, is_geminate

logger = logging.getLogger(__name__)


def _affixual_mode(stream: TokenStream) -> AffixualAdjunctMode:
    if stream.stress is Stress.Ultimate:
        return AffixualAdjunctMode.Concatenated
    if stream.stress is Stress.Antepenultimate:
        raise ParseError(ParseErrorKind.AntepenultimateStress)
    return AffixualAdjunctMode.Full


# ---------------------------------------------------------------------------
# Simple adjuncts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ParsingAdjunct:
    """Announces the stress of the following word."""
    stress: Stress

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return self.stress.gloss(flags)

    def to_tokens(self) -> TokenList:
        return TokenList([stress_to_vowel(self.stress), GlottalStop()])

    def to_string(self) -> str:
        return self.to_tokens().to_string()


def parse_parsing_adjunct(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> ParsingAdjunct:
    stress = stress_from_vowel(expect(stream, VowelForm, ParseErrorKind.ExpectedVp))
    expect(stream, GlottalStop, ParseErrorKind.ExpectedGs)
    return ParsingAdjunct(stress)


@dataclass(frozen=True)
class RegisterAdjunct:
    register: Register

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return self.register.gloss(flags)

    def to_tokens(self) -> TokenList:
        return TokenList([H, register_to_vowel(self.register)])

    def to_string(self) -> str:
        return self.to_tokens().to_string()


def parse_register_adjunct(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> RegisterAdjunct:
    parse_hh(stream, flags)
    vowel = expect(stream, VowelForm, ParseErrorKind.ExpectedVm)
    return RegisterAdjunct(register_from_vowel(vowel))


@dataclass(frozen=True)
class MCSAdjunct:
    mcs: MCS

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return self.mcs.gloss(flags)

    def to_tokens(self) -> TokenList:
        return TokenList([HR, mcs_to_vowel(self.mcs)])

    def to_string(self) -> str:
        return self.to_tokens().to_string()


def parse_mcs_adjunct(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> MCSAdjunct:
    parse_hr(stream, flags)
    vowel = expect(stream, VowelForm, ParseErrorKind.ExpectedCn)
    return MCSAdjunct(mcs_from_vowel(vowel))


@dataclass(frozen=True)
class SuppletiveAdjunct:
    mode: SuppletiveAdjunctMode
    case: Case = Case.THM

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return join_dashed([self.mode.gloss(flags), gloss_non_default(self.case, flags)])

    def to_tokens(self) -> TokenList:
        return TokenList([suppletive_mode_to_hform(self.mode), case_to_vowel(self.case)])

    def to_string(self) -> str:
        return self.to_tokens().to_string()


def parse_suppletive_adjunct(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> SuppletiveAdjunct:
    mode = suppletive_mode_from_hform(expect(stream, HForm, ParseErrorKind.ExpectedCp))
    case = case_from_vowel(expect(stream, VowelForm, ParseErrorKind.ExpectedVc))
    return SuppletiveAdjunct(mode, case)


@dataclass(frozen=True)
class BiasAdjunct:
    bias: Bias

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return self.bias.gloss(flags)

    def to_tokens(self) -> TokenList:
        return TokenList([Consonant(bias_to_consonant(self.bias))])

    def to_string(self) -> str:
        return self.to_tokens().to_string()


def parse_bias_adjunct(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> BiasAdjunct:
    consonant = expect(stream, Consonant, ParseErrorKind.ExpectedCb)
    return BiasAdjunct(bias_from_consonant(consonant.text))


@dataclass(frozen=True)
class NumericAdjunct:
    value: int

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return f"‘{self.value}’"

    def to_tokens(self) -> TokenList:
        return TokenList([Numeral(self.value)])

    def to_string(self) -> str:
        return self.to_tokens().to_string()


def parse_numeric_adjunct(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> NumericAdjunct:
    return NumericAdjunct(parse_numeral(stream, flags).value)


# ---------------------------------------------------------------------------
# Modular adjuncts
# ---------------------------------------------------------------------------

def _mode_tokens(mode: ModularAdjunctMode):
    hform = modular_mode_to_hform(mode)
    return [] if hform is None else [hform]


def _gloss_modular(parts, flags: GlossFlags) -> str:
    output = join_dashed(parts)
    return output or Valence.MNO.gloss(flags)


@dataclass(frozen=True)
class AspectualModularAdjunct:
    """A modular adjunct carrying only an aspect."""
    aspect: Aspect
    mode: ModularAdjunctMode = ModularAdjunctMode.Full

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return join_dashed([gloss_non_default(self.mode, flags), self.aspect.gloss(flags)])

    def to_tokens(self) -> TokenList:
        return TokenList(_mode_tokens(self.mode) + [vn_to_vowel(self.aspect)], Stress.Penultimate)

    def to_string(self) -> str:
        return self.to_tokens().to_string()


@dataclass(frozen=True)
class NonScopedModularAdjunct:
    vn1: Vn
    cn: MoodOrCaseScope
    vn3: Vn
    vn2: Optional[Vn] = None
    mode: ModularAdjunctMode = ModularAdjunctMode.Full

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        parts = [
            gloss_non_default(self.mode, flags),
            gloss_non_default(self.vn1, flags),
            gloss_non_default(self.cn, flags),
        ]
        if self.vn2 is not None:
            parts.append(gloss_non_default(self.vn2, flags))
        parts.append(gloss_non_default(self.vn3, flags))
        return _gloss_modular(parts, flags)

    def to_tokens(self) -> TokenList:
        tokens = _mode_tokens(self.mode) + VnCn(self.vn1, self.cn).to_tokens()
        if self.vn2 is not None:
            tokens += vncm_to_tokens(self.vn2)
        tokens.append(vn_to_vowel(self.vn3))
        return TokenList(tokens, Stress.Penultimate)

    def to_string(self) -> str:
        return self.to_tokens().to_string()


@dataclass(frozen=True)
class ScopedModularAdjunct:
    vn1: Vn
    cn: MoodOrCaseScope
    scope: ModularAdjunctScope
    vn2: Optional[Vn] = None
    mode: ModularAdjunctMode = ModularAdjunctMode.Full

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        parts = [
            gloss_non_default(self.mode, flags),
            gloss_non_default(self.vn1, flags),
            gloss_non_default(self.cn, flags),
        ]
        if self.vn2 is not None:
            parts.append(gloss_non_default(self.vn2, flags))
        parts.append(gloss_non_default(self.scope, flags))
        return _gloss_modular(parts, flags)

    def to_tokens(self) -> TokenList:
        tokens = _mode_tokens(self.mode) + VnCn(self.vn1, self.cn).to_tokens()
        if self.vn2 is not None:
            tokens += vncm_to_tokens(self.vn2)
        tokens.append(modular_scope_to_vowel(self.scope))
        return TokenList(tokens, Stress.Ultimate)

    def to_string(self) -> str:
        return self.to_tokens().to_string()


ModularAdjunct = Union[AspectualModularAdjunct, NonScopedModularAdjunct, ScopedModularAdjunct]


def parse_modular_adjunct(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> ModularAdjunct:
    """
    Parse a modular adjunct. Without a leading VnCn the adjunct is a bare
    aspect; otherwise stress decides whether the final vowel is a scope
    (ultimate) or a third Vn.
    """
    mode = modular_mode_from_hform(stream.next(HForm))

    vncn = stream.try_parse(parse_vncn, flags)
    if vncn is None:
        vowel = expect(stream, VowelForm, ParseErrorKind.ExpectedVn)
        return AspectualModularAdjunct(aspect_from_vowel(vowel), mode)

    vn2 = stream.try_parse(parse_vncm, flags)
    final = expect(stream, VowelForm, ParseErrorKind.ExpectedVn)

    if stream.stress is Stress.Ultimate:
        return ScopedModularAdjunct(vncn.vn, vncn.cn, modular_scope_from_vowel(final), vn2, mode)
    if stream.stress is Stress.Antepenultimate:
        raise ParseError(ParseErrorKind.AntepenultimateStress)
    if final.has_glottal_stop:
        raise ParseError(ParseErrorKind.GlottalizedVn)
    return NonScopedModularAdjunct(vncn.vn, vncn.cn, vn_from_vowel(final, False), vn2, mode)


# ---------------------------------------------------------------------------
# Affixual adjuncts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SingleAffixAdjunct:
    affix: Affix
    scope: AffixualAdjunctScope = AffixualAdjunctScope.VDom
    mode: AffixualAdjunctMode = AffixualAdjunctMode.Full

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return join_dashed([
            self.affix.gloss(flags),
            gloss_non_default(self.scope, flags),
            gloss_non_default(self.mode, flags),
        ])

    def to_tokens(self) -> TokenList:
        tokens = list(self.affix.to_vxcs())
        if self.scope is not AffixualAdjunctScope.VDom:
            tokens.append(affixual_scope_to_vowel(self.scope))
        return TokenList(tokens, _affixual_stress(self.mode))

    def to_string(self) -> str:
        return self.to_tokens().to_string()


@dataclass(frozen=True)
class MultipleAffixAdjunct:
    first_affix: Affix
    other_affixes: Tuple[Affix, ...]
    first_scope: AffixualAdjunctScope = AffixualAdjunctScope.VDom
    other_scope: Optional[AffixualAdjunctScope] = None
    mode: AffixualAdjunctMode = AffixualAdjunctMode.Full

    def __post_init__(self):
        if not self.other_affixes:
            raise ValueError("a multiple-affix adjunct needs at least two affixes")

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        parts = [self.first_affix.gloss(flags), gloss_non_default(self.first_scope, flags)]
        parts += [affix.gloss(flags) for affix in self.other_affixes]
        if self.other_scope is not None:
            parts.append(gloss_non_default(self.other_scope, flags))
        parts.append(gloss_non_default(self.mode, flags))
        return join_dashed(parts)

    def to_tokens(self) -> TokenList:
        tokens = []
        vx, cs = self.first_affix.to_vxcs()
        if isinstance(cs, Consonant) and is_geminate(cs.text):
            tokens.append(Schwa())
        cz, has_glottal_stop = affixual_scope_to_cz(self.first_scope)
        tokens += [cs, vx.with_glottal_stop(has_glottal_stop), cz]
        for affix in self.other_affixes:
            tokens += affix.to_vxcs()
        if self.other_scope is not None:
            tokens.append(affixual_scope_to_vowel(self.other_scope))
        return TokenList(tokens, _affixual_stress(self.mode))

    def to_string(self) -> str:
        return self.to_tokens().to_string()


AffixualAdjunct = Union[SingleAffixAdjunct, MultipleAffixAdjunct]


def _affixual_stress(mode: AffixualAdjunctMode) -> Stress:
    return Stress.Ultimate if mode is AffixualAdjunctMode.Concatenated else Stress.Penultimate


def parse_single_affix_adjunct(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> SingleAffixAdjunct:
    vx, cs = parse_vxcs(stream, flags)
    affix = affix_from_vxcs(vx, cs)
    scope = AffixualAdjunctScope.VDom
    vs = stream.next(VowelForm)
    if vs is not None:
        scope = affixual_scope_from_vowel(vs, ParseErrorKind.ExpectedVs)
    return SingleAffixAdjunct(affix, scope, _affixual_mode(stream))


def parse_multiple_affix_adjunct(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> MultipleAffixAdjunct:
    stream.next(Schwa)
    vx, cs = parse_csvx(stream, flags)
    cz = expect(stream, HForm, ParseErrorKind.ExpectedCz)
    first_scope = affixual_scope_from_cz(cz, vx.has_glottal_stop)
    first_affix = affix_from_vxcs(vx.with_glottal_stop(False), cs)

    other_affixes = [affix_from_vxcs(*parse_vxcs(stream, flags))]
    while True:
        pair = stream.try_parse(parse_vxcs, flags)
        if pair is None:
            break
        other_affixes.append(affix_from_vxcs(*pair))

    other_scope = None
    vz = stream.next(VowelForm)
    if vz is not None:
        other_scope = affixual_scope_from_vowel(vz, ParseErrorKind.ExpectedVz)

    return MultipleAffixAdjunct(
        first_affix, tuple(other_affixes), first_scope, other_scope, _affixual_mode(stream))


def parse_affixual_adjunct(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> AffixualAdjunct:
    """Try the single-affix shape first, then the multiple-affix one."""
    try:
        return stream.parse_entire(parse_single_affix_adjunct, flags)
    except ParseError:
        return stream.parse(parse_multiple_affix_adjunct, flags)
