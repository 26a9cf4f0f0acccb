"""
Bidirectional mappings between phonological forms and category values.

Decoders take a VowelForm (or an h-form or consonant string) and return a
category value, raising the ParseError named after the slot being read.
Encoders are total: every legal value has exactly one canonical form.
"""
from typing import Tuple, Union

from ithkuil.categories import (
    AffixualAdjunctScope,
    Aspect,
    Bias,
    Case,
    CaseScope,
    Effect,
    IllocutionOrValidation,
    Level,
    ModularAdjunctMode,
    ModularAdjunctScope,
    Mood,
    MoodOrCaseScope,
    Phase,
    Register,
    Stress,
    SuppletiveAdjunctMode,
    Valence,
)
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.tokens import HForm, HFormSequence, VowelForm

Vn = Union[Valence, Phase, Effect, Level, Aspect]
MCS = Union[Mood, CaseScope]


def _invert(table):
    return {value: key for key, value in table.items()}


# ---------------------------------------------------------------------------
# Case (Vc)
# ---------------------------------------------------------------------------

def case_from_vowel(vowel: VowelForm) -> Case:
    """
    Decode a Vc. The case index is 36*glottal + 9*(sequence - 1) + (degree - 1).

    Raises:
        ParseError: ExpectedVc for degree 0 or an unused table slot.
    """
    if vowel.degree == 0:
        raise ParseError(ParseErrorKind.ExpectedVc)
    index = 36 * vowel.has_glottal_stop + 9 * (vowel.sequence - 1) + (vowel.degree - 1)
    case = Case.from_index(index)
    if case is None:
        raise ParseError(ParseErrorKind.ExpectedVc)
    return case


def case_to_vowel(case: Case) -> VowelForm:
    glottal, remainder = divmod(case.index, 36)
    return VowelForm(remainder // 9 + 1, remainder % 9 + 1, bool(glottal))


THEMATIC_CASES = list(Case)[0:9]
APPOSITIVE_CASES = list(Case)[9:18]


def thematic_case_from_degree(degree: int) -> Case:
    return THEMATIC_CASES[degree - 1]


def appositive_case_from_degree(degree: int) -> Case:
    if degree == 0:
        raise ParseError(ParseErrorKind.AppositiveDegreeZero)
    return APPOSITIVE_CASES[degree - 1]


# ---------------------------------------------------------------------------
# Vn, Cn and Cm
# ---------------------------------------------------------------------------

NON_ASPECTUAL_VN_BLOCKS = (Valence, Phase, Effect, Level)


def is_aspect(vn: Vn) -> bool:
    return isinstance(vn, Aspect)


def vn_from_vowel(vowel: VowelForm, is_aspectual: bool) -> Vn:
    """
    Decode a Vn. Whether it is an aspect comes from the accompanying Cn or
    Cm; otherwise the sequence picks valence, phase, effect or level. The
    glottal stop is ignored here and handled by the caller.

    Raises:
        ParseError: ExpectedVn for degree 0.
    """
    if vowel.degree == 0:
        raise ParseError(ParseErrorKind.ExpectedVn)
    if is_aspectual:
        return list(Aspect)[9 * (vowel.sequence - 1) + vowel.degree - 1]
    return list(NON_ASPECTUAL_VN_BLOCKS[vowel.sequence - 1])[vowel.degree - 1]


def vn_to_vowel(vn: Vn) -> VowelForm:
    if isinstance(vn, Aspect):
        index = list(Aspect).index(vn)
        return VowelForm(index // 9 + 1, index % 9 + 1)
    sequence = NON_ASPECTUAL_VN_BLOCKS.index(type(vn)) + 1
    return VowelForm(sequence, list(type(vn)).index(vn) + 1)


def aspect_from_vowel(vowel: VowelForm) -> Aspect:
    if vowel.has_glottal_stop:
        raise ParseError(ParseErrorKind.GlottalizedVn)
    return vn_from_vowel(vowel, True)


def cn_from_hform(hform: HForm) -> Tuple[MoodOrCaseScope, bool]:
    """Decode a Cn into its mood/case-scope and whether its Vn is an aspect."""
    is_aspectual = hform.sequence in (HFormSequence.SW, HFormSequence.SY)
    return list(MoodOrCaseScope)[hform.degree - 1], is_aspectual


def cn_to_hform(mcs: MoodOrCaseScope, is_aspectual: bool) -> HForm:
    degree = list(MoodOrCaseScope).index(mcs) + 1
    return HForm(HFormSequence.SW if is_aspectual else HFormSequence.S0, degree)


def cm_from_consonant(text: str) -> bool:
    """Decode a Cm, returning whether its Vn is an aspect."""
    if text == "n":
        return False
    if text == "ň":
        return True
    raise ParseError(ParseErrorKind.ExpectedCm)


def cm_to_consonant(is_aspectual: bool) -> str:
    return "ň" if is_aspectual else "n"


# ---------------------------------------------------------------------------
# Direct lookups
# ---------------------------------------------------------------------------

MCS_VOWELS = {
    (1, 1): Mood.FAC,
    (1, 3): Mood.SUB,
    (1, 4): Mood.ASM,
    (1, 7): Mood.SPC,
    (1, 6): Mood.COU,
    (1, 9): Mood.HYP,
    (2, 1): CaseScope.CCN,
    (2, 3): CaseScope.CCA,
    (2, 8): CaseScope.CCS,
    (2, 7): CaseScope.CCQ,
    (1, 8): CaseScope.CCP,
    (2, 9): CaseScope.CCV,
}
MCS_VOWELS_INVERSE = _invert(MCS_VOWELS)

VK_VOWELS = {
    (1, 1): IllocutionOrValidation.OBS,
    (1, 2): IllocutionOrValidation.REC,
    (1, 3): IllocutionOrValidation.PUP,
    (1, 4): IllocutionOrValidation.RPR,
    (1, 5): IllocutionOrValidation.USP,
    (1, 6): IllocutionOrValidation.IMA,
    (1, 7): IllocutionOrValidation.CVN,
    (1, 8): IllocutionOrValidation.ITU,
    (1, 9): IllocutionOrValidation.INF,
    (2, 1): IllocutionOrValidation.DIR,
    (2, 2): IllocutionOrValidation.DEC,
    (2, 3): IllocutionOrValidation.IRG,
    (2, 4): IllocutionOrValidation.VER,
    (2, 6): IllocutionOrValidation.ADM,
    (2, 7): IllocutionOrValidation.POT,
    (2, 8): IllocutionOrValidation.HOR,
    (2, 9): IllocutionOrValidation.CNJ,
}
VK_VOWELS_INVERSE = _invert(VK_VOWELS)

REGISTER_VOWELS = {
    (1, 1): Register.DSV,
    (1, 3): Register.PNT,
    (1, 4): Register.SPF,
    (1, 7): Register.EXM,
    (1, 9): Register.CGT,
    (2, 1): Register.DSV_END,
    (2, 3): Register.PNT_END,
    (2, 8): Register.SPF_END,
    (2, 7): Register.EXM_END,
    (2, 9): Register.CGT_END,
    (1, 8): Register.END,
}
REGISTER_VOWELS_INVERSE = _invert(REGISTER_VOWELS)

STRESS_VOWELS = {
    (1, 1): Stress.Monosyllabic,
    (1, 3): Stress.Ultimate,
    (1, 7): Stress.Penultimate,
    (1, 9): Stress.Antepenultimate,
}
STRESS_VOWELS_INVERSE = _invert(STRESS_VOWELS)

MODULAR_SCOPE_VOWELS = {
    (1, 1): ModularAdjunctScope.Formative,
    (1, 3): ModularAdjunctScope.MCS,
    (1, 4): ModularAdjunctScope.OverAdjacent,
    (1, 7): ModularAdjunctScope.UnderAdjacent,
    (1, 9): ModularAdjunctScope.OverAdjacent,
}
MODULAR_SCOPE_VOWELS_INVERSE = {
    ModularAdjunctScope.Formative: (1, 1),
    ModularAdjunctScope.MCS: (1, 3),
    ModularAdjunctScope.OverAdjacent: (1, 4),
    ModularAdjunctScope.UnderAdjacent: (1, 7),
}

AFFIXUAL_SCOPE_VOWELS = {
    (1, 1): AffixualAdjunctScope.VDom,
    (1, 9): AffixualAdjunctScope.VSub,
    (1, 3): AffixualAdjunctScope.VIIDom,
    (1, 4): AffixualAdjunctScope.VIISub,
    (1, 7): AffixualAdjunctScope.Formative,
    (1, 6): AffixualAdjunctScope.OverAdj,
}
AFFIXUAL_SCOPE_VOWELS_INVERSE = _invert(AFFIXUAL_SCOPE_VOWELS)


def _lookup(table, vowel: VowelForm, error: ParseErrorKind):
    if vowel.has_glottal_stop:
        raise ParseError(error)
    try:
        return table[vowel.sequence, vowel.degree]
    except KeyError:
        raise ParseError(error) from None


def mcs_from_vowel(vowel: VowelForm) -> MCS:
    """Decode the vowel of an MCS adjunct. (S2, D2) is unused."""
    return _lookup(MCS_VOWELS, vowel, ParseErrorKind.ExpectedCn)


def mcs_to_vowel(mcs: MCS) -> VowelForm:
    return VowelForm(*MCS_VOWELS_INVERSE[mcs])


def vk_from_vowel(vowel: VowelForm) -> IllocutionOrValidation:
    return _lookup(VK_VOWELS, vowel, ParseErrorKind.ExpectedVk)


def vk_to_vowel(vk: IllocutionOrValidation) -> VowelForm:
    return VowelForm(*VK_VOWELS_INVERSE[vk])


def register_from_vowel(vowel: VowelForm) -> Register:
    return _lookup(REGISTER_VOWELS, vowel, ParseErrorKind.ExpectedVm)


def register_to_vowel(register: Register) -> VowelForm:
    return VowelForm(*REGISTER_VOWELS_INVERSE[register])


def stress_from_vowel(vowel: VowelForm) -> Stress:
    """Decode the Vp of a parsing adjunct."""
    return _lookup(STRESS_VOWELS, vowel, ParseErrorKind.ExpectedVp)


def stress_to_vowel(stress: Stress) -> VowelForm:
    return VowelForm(*STRESS_VOWELS_INVERSE[stress])


def modular_scope_from_vowel(vowel: VowelForm) -> ModularAdjunctScope:
    return _lookup(MODULAR_SCOPE_VOWELS, vowel, ParseErrorKind.ExpectedVh)


def modular_scope_to_vowel(scope: ModularAdjunctScope) -> VowelForm:
    return VowelForm(*MODULAR_SCOPE_VOWELS_INVERSE[scope])


def affixual_scope_from_vowel(vowel: VowelForm, error=ParseErrorKind.ExpectedVs) -> AffixualAdjunctScope:
    """Decode a Vs or Vz scope vowel."""
    return _lookup(AFFIXUAL_SCOPE_VOWELS, vowel, error)


def affixual_scope_to_vowel(scope: AffixualAdjunctScope) -> VowelForm:
    return VowelForm(*AFFIXUAL_SCOPE_VOWELS_INVERSE[scope])


# Cz depends on whether the preceding Vx carries a glottal stop.
CZ_FORMS = {
    (False, "h"): AffixualAdjunctScope.VDom,
    (False, "hw"): AffixualAdjunctScope.Formative,
    (True, "h"): AffixualAdjunctScope.VSub,
    (True, "hl"): AffixualAdjunctScope.VIIDom,
    (True, "hr"): AffixualAdjunctScope.VIISub,
    (True, "hw"): AffixualAdjunctScope.OverAdj,
}
CZ_FORMS_INVERSE = _invert(CZ_FORMS)


def affixual_scope_from_cz(hform: HForm, vx_has_glottal_stop: bool) -> AffixualAdjunctScope:
    try:
        return CZ_FORMS[vx_has_glottal_stop, hform.as_str()]
    except KeyError:
        raise ParseError(ParseErrorKind.ExpectedCz) from None


def affixual_scope_to_cz(scope: AffixualAdjunctScope) -> Tuple[HForm, bool]:
    """Returns the Cz h-form and whether the preceding Vx takes a glottal stop."""
    has_glottal_stop, text = CZ_FORMS_INVERSE[scope]
    return HForm.parse(text), has_glottal_stop


# ---------------------------------------------------------------------------
# Consonantal adjunct forms
# ---------------------------------------------------------------------------

SUPPLETIVE_FORMS = {
    "hl": SuppletiveAdjunctMode.CAR,
    "hm": SuppletiveAdjunctMode.QUO,
    "hn": SuppletiveAdjunctMode.NAM,
    "hň": SuppletiveAdjunctMode.PHR,
}
SUPPLETIVE_FORMS_INVERSE = _invert(SUPPLETIVE_FORMS)


def suppletive_mode_from_hform(hform: HForm) -> SuppletiveAdjunctMode:
    try:
        return SUPPLETIVE_FORMS[hform.as_str()]
    except KeyError:
        raise ParseError(ParseErrorKind.ExpectedCp) from None


def suppletive_mode_to_hform(mode: SuppletiveAdjunctMode) -> HForm:
    return HForm.parse(SUPPLETIVE_FORMS_INVERSE[mode])


def modular_mode_from_hform(hform) -> ModularAdjunctMode:
    """Decode an optional w/y prefix. A missing prefix is the Full mode."""
    if hform is None:
        return ModularAdjunctMode.Full
    text = hform.as_str()
    if text == "w":
        return ModularAdjunctMode.Parent
    if text == "y":
        return ModularAdjunctMode.Concatenated
    raise ParseError(ParseErrorKind.ExpectedCn)


def modular_mode_to_hform(mode: ModularAdjunctMode):
    return {
        ModularAdjunctMode.Full: None,
        ModularAdjunctMode.Parent: HForm.parse("w"),
        ModularAdjunctMode.Concatenated: HForm.parse("y"),
    }[mode]


BIAS_FORMS = {
    "lf": Bias.ACC, "mçt": Bias.ACH, "lļ": Bias.ADS, "drr": Bias.ANN,
    "lst": Bias.ANP, "řs": Bias.APB, "vvz": Bias.APH, "xtļ": Bias.ARB,
    "ňj": Bias.ATE, "pļļ": Bias.CMD, "rrj": Bias.CNV, "ššč": Bias.COI,
    "gžž": Bias.CRP, "ňţ": Bias.CRR, "kšš": Bias.CTP, "gvv": Bias.CTV,
    "gzj": Bias.DCC, "žžg": Bias.DEJ, "mřř": Bias.DES, "cč": Bias.DFD,
    "kff": Bias.DIS, "ẓmm": Bias.DLC, "řřx": Bias.DOL, "ffx": Bias.DPB,
    "pfc": Bias.DRS, "mmf": Bias.DUB, "gzz": Bias.EUH, "vvt": Bias.EUP,
    "kçç": Bias.EXA, "rrs": Bias.EXG, "lzp": Bias.FOR, "žžj": Bias.FSC,
    "mmh": Bias.GRT, "pšš": Bias.IDG, "vvr": Bias.IFT, "vll": Bias.IPL,
    "žžv": Bias.IPT, "mmž": Bias.IRO, "lçp": Bias.ISP, "řřn": Bias.IVD,
    "msk": Bias.MAN, "pss": Bias.MNF, "ççk": Bias.OPT, "ksp": Bias.PES,
    "mll": Bias.PPT, "sl": Bias.PPV, "llh": Bias.PPX, "žžt": Bias.PSC,
    "nnţ": Bias.PSM, "kll": Bias.RAC, "llm": Bias.RFL, "šš": Bias.RPU,
    "mmř": Bias.RSG, "mmļ": Bias.RVL, "ļţ": Bias.SAT, "ltç": Bias.SGS,
    "rnž": Bias.SKP, "ňňs": Bias.SOL, "ļļč": Bias.STU, "llč": Bias.TRP,
    "ksk": Bias.VEX,
}
BIAS_FORMS_INVERSE = _invert(BIAS_FORMS)


def bias_from_consonant(text: str) -> Bias:
    try:
        return BIAS_FORMS[text]
    except KeyError:
        raise ParseError(ParseErrorKind.ExpectedCb) from None


def bias_to_consonant(bias: Bias) -> str:
    return BIAS_FORMS_INVERSE[bias]
