"""
Formatives: the content words of New Ithkuil.

A formative is written as up to ten slots:

    [Cc] Vv Cr Vr [Cs Vx ...] Ca [Vx Cs ...] [Vn Cn] [Vc/Vk]

Cc picks concatenation and the Ca shortcut series, Vv packs stem, version
and a shortcut, Cr is the root, Vr packs function, specification and
context. Slot V affixes precede a geminated Ca; slot VII affixes follow it.
Stress picks the relation: penultimate is nominal, ultimate is verbal and
antepenultimate is framed. In concatenated formatives stress instead tells
whether the case lies in the upper half of the case table.

The parser reads the ends of the word first (the Vc/Vk vowel from the back,
Cc and Vv from the front) and then decides how to split the middle.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from ithkuil.affixes import AffixList, NormalAffixList, affix_list_from_pairs
from ithkuil.ca import Ca
from ithkuil.categories import (
    AffixShortcut,
    Case,
    CaseScope,
    CaShortcut,
    Context,
    Function,
    IllocutionOrValidation,
    Mood,
    MoodOrCaseScope,
    NominalMode,
    Specification,
    Stem,
    Stress,
    Valence,
    Version,
)
from ithkuil.codec import (
    Vn,
    case_from_vowel,
    case_to_vowel,
    cn_from_hform,
    cn_to_hform,
    vk_from_vowel,
    vk_to_vowel,
    vn_from_vowel,
)
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.gloss import GlossFlags, format_consonant, gloss_non_default, join_dashed, join_dotted
from ithkuil.orthography import syllable_nuclei
from ithkuil.referents import ReferentList
from ithkuil.segments import VnCn, expect, parse_vxcs
from ithkuil.stream import ParseFlags, TokenList, TokenStream
from ithkuil.tokens import Consonant, HForm, HFormSequence, Numeral, Token, VowelForm, is_geminate, tokens_to_string

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Roots
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NormalRoot:
    cr: str

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return format_consonant(self.cr, flags)

    def to_token(self) -> Token:
        return Consonant(self.cr)


@dataclass(frozen=True)
class NumericRoot:
    value: int

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return str(self.value)

    def to_token(self) -> Token:
        return Numeral(self.value)


@dataclass(frozen=True)
class ReferentialRoot:
    referents: ReferentList

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return self.referents.gloss_as_root(flags)

    def to_token(self) -> Token:
        return Consonant(self.referents.to_string())


@dataclass(frozen=True)
class AffixualRoot:
    """An affix used as a root. Its degree is carried by the Vr."""
    cs: str
    degree: int

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        return f"{format_consonant(self.cs, flags)}/{self.degree}-D{self.degree}"

    def to_token(self) -> Token:
        return Consonant(self.cs)


Root = Union[NormalRoot, NumericRoot, ReferentialRoot, AffixualRoot]


# ---------------------------------------------------------------------------
# Relations
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NominalRelation:
    """Nominal, framed and concatenated formatives carry a case."""
    mode: NominalMode = NominalMode.NOM
    case_scope: CaseScope = CaseScope.CCN
    case: Case = Case.THM

    @property
    def mcs(self) -> CaseScope:
        return self.case_scope

    @property
    def is_concatenated(self) -> bool:
        return self.mode in (NominalMode.T1, NominalMode.T2)


@dataclass(frozen=True)
class VerbalRelation:
    mood: Mood = Mood.FAC
    ivl: IllocutionOrValidation = IllocutionOrValidation.OBS

    @property
    def mcs(self) -> Mood:
        return self.mood

    @property
    def is_concatenated(self) -> bool:
        return False


Relation = Union[NominalRelation, VerbalRelation]


# ---------------------------------------------------------------------------
# Slot tables
# ---------------------------------------------------------------------------

# Cc -> (Ca shortcut series, concatenation)
CC_FORMS = {
    "w": ("w", None),
    "y": ("y", None),
    "h": (None, NominalMode.T1),
    "hl": ("w", NominalMode.T1),
    "hr": ("w", NominalMode.T2),
    "hm": ("y", NominalMode.T1),
    "hn": ("y", NominalMode.T2),
    "hw": (None, NominalMode.T2),
}
CC_FORMS_INVERSE = {value: key for key, value in CC_FORMS.items()}

# Indexed by Vv sequence
CA_SHORTCUT_SERIES = {
    "w": [CaShortcut.Default, CaShortcut.G, CaShortcut.N, CaShortcut.G_RPV],
    "y": [CaShortcut.PRX, CaShortcut.RPV, CaShortcut.A, CaShortcut.PRX_RPV],
}
AFFIX_SHORTCUTS = [AffixShortcut.NONE, AffixShortcut.NEG4, AffixShortcut.DCD4, AffixShortcut.DCD5]

# Vv degree -> (stem, version) for normal and numeric roots
STEM_VERSION_DEGREES = {
    1: (Stem.S1, Version.PRC),
    2: (Stem.S1, Version.CPT),
    3: (Stem.S2, Version.PRC),
    4: (Stem.S2, Version.CPT),
    9: (Stem.S3, Version.PRC),
    8: (Stem.S3, Version.CPT),
    7: (Stem.S0, Version.PRC),
    6: (Stem.S0, Version.CPT),
}
STEM_VERSION_DEGREES_INVERSE = {value: key for key, value in STEM_VERSION_DEGREES.items()}

REFERENTIAL_VV_DEGREE = 0
AFFIXUAL_VV_DEGREE = 5

# Vv sequence -> (version, function) for affixual roots
AFFIXUAL_VV_SEQUENCES = {
    1: (Version.PRC, Function.STA),
    2: (Version.CPT, Function.STA),
    3: (Version.PRC, Function.DYN),
    4: (Version.CPT, Function.DYN),
}
AFFIXUAL_VV_SEQUENCES_INVERSE = {value: key for key, value in AFFIXUAL_VV_SEQUENCES.items()}

# Vr degree -> (specification, function)
VR_DEGREES = {
    1: (Specification.BSC, Function.STA),
    2: (Specification.CTE, Function.STA),
    3: (Specification.CSV, Function.STA),
    4: (Specification.OBJ, Function.STA),
    9: (Specification.BSC, Function.DYN),
    8: (Specification.CTE, Function.DYN),
    7: (Specification.CSV, Function.DYN),
    6: (Specification.OBJ, Function.DYN),
}
VR_DEGREES_INVERSE = {value: key for key, value in VR_DEGREES.items()}

CONTEXTS = list(Context)


# ---------------------------------------------------------------------------
# The formative
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Formative:
    root: Root
    stem: Stem = Stem.S1
    version: Version = Version.PRC
    function: Function = Function.STA
    specification: Specification = Specification.BSC
    context: Context = Context.EXS
    ca: Ca = field(default_factory=Ca)
    slot_v: AffixList = field(default_factory=NormalAffixList)
    slot_vii: AffixList = field(default_factory=NormalAffixList)
    vn: Vn = Valence.MNO
    relation: Relation = field(default_factory=NominalRelation)
    affix_shortcut: AffixShortcut = AffixShortcut.NONE
    ca_shortcut: Optional[CaShortcut] = None
    has_cn_shortcut: bool = False

    @property
    def word_type(self) -> str:
        """One of "normal", "numeric", "referential" or "affixual"."""
        return {
            NormalRoot: "normal",
            NumericRoot: "numeric",
            ReferentialRoot: "referential",
            AffixualRoot: "affixual",
        }[type(self.root)]

    # -- glossing ------------------------------------------------------------

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        relation = self.relation
        show_defaults = bool(flags & GlossFlags.SHOW_DEFAULTS)

        slot_i = relation.mode.gloss(flags) if relation.is_concatenated else ""

        shortcut_ca = gloss_non_default(self.ca, flags) if self.ca_shortcut is not None else ""
        if isinstance(self.root, ReferentialRoot):
            slot_ii = join_dotted([gloss_non_default(self.version, flags), shortcut_ca])
        elif isinstance(self.root, AffixualRoot):
            slot_ii = join_dotted([
                gloss_non_default(self.version, flags),
                gloss_non_default(self.function, flags),
            ])
        else:
            slot_ii = join_dotted([
                self.stem.gloss(flags),
                gloss_non_default(self.version, flags),
                shortcut_ca,
            ])

        if isinstance(self.root, AffixualRoot):
            slot_iii = self.root.gloss(flags)
            context = gloss_non_default(self.context, flags)
            if context:
                slot_iii += "." + context
            slot_iv = ""
        else:
            slot_iii = self.root.gloss(flags)
            slot_iv = join_dotted(
                gloss_non_default(item, flags)
                for item in (self.function, self.specification, self.context)
            )

        slot_v = self.slot_v.gloss(flags)

        if self.has_cn_shortcut:
            slot_vi = relation.mcs.gloss(flags)
        elif self.ca_shortcut is not None:
            slot_vi = "{Ca}" if len(self.slot_v) else ""
        else:
            slot_vi = self.ca.gloss(flags)
            if not slot_vi and len(self.slot_v):
                slot_vi = "{Ca}"

        slot_vii = self.slot_vii.gloss(flags)
        if self.affix_shortcut is not AffixShortcut.NONE:
            slot_vii = join_dashed([slot_vii, self.affix_shortcut.gloss(flags)])

        if self.has_cn_shortcut:
            slot_viii = ""
        else:
            slot_viii = join_dotted([
                gloss_non_default(self.vn, flags),
                gloss_non_default(relation.mcs, flags),
            ])

        if isinstance(relation, VerbalRelation):
            slot_ix = relation.ivl.gloss(flags)
        else:
            slot_ix = gloss_non_default(relation.case, flags)

        slot_x = ""
        if isinstance(relation, NominalRelation) and relation.mode is NominalMode.FRM:
            slot_x = "\\" + NominalMode.FRM.gloss(flags)
        elif show_defaults and not relation.is_concatenated:
            slot_x = "\\UNF"

        return join_dashed([
            slot_i, slot_ii, slot_iii, slot_iv, slot_v,
            slot_vi, slot_vii, slot_viii, slot_ix,
        ]) + slot_x

    # -- emission ------------------------------------------------------------

    def _vv(self) -> VowelForm:
        if isinstance(self.root, ReferentialRoot):
            sequence = 1 if self.version is Version.PRC else 2
            return VowelForm(sequence, REFERENTIAL_VV_DEGREE)

        if isinstance(self.root, AffixualRoot):
            sequence = AFFIXUAL_VV_SEQUENCES_INVERSE[self.version, self.function]
            return VowelForm(sequence, AFFIXUAL_VV_DEGREE)

        degree = STEM_VERSION_DEGREES_INVERSE[self.stem, self.version]
        if self.ca_shortcut is not None:
            series = _ca_shortcut_series(self.ca_shortcut)
            sequence = CA_SHORTCUT_SERIES[series].index(self.ca_shortcut) + 1
        else:
            sequence = AFFIX_SHORTCUTS.index(self.affix_shortcut) + 1
        return VowelForm(sequence, degree)

    def _vr(self) -> VowelForm:
        sequence = CONTEXTS.index(self.context) + 1
        if isinstance(self.root, AffixualRoot):
            return VowelForm(sequence, self.root.degree)
        return VowelForm(sequence, VR_DEGREES_INVERSE[self.specification, self.function])

    def _vc(self) -> VowelForm:
        relation = self.relation
        if isinstance(relation, VerbalRelation):
            return vk_to_vowel(relation.ivl)
        vowel = case_to_vowel(relation.case)
        if relation.is_concatenated:
            return vowel.with_glottal_stop(False)
        return vowel

    def _stress(self) -> Stress:
        relation = self.relation
        if isinstance(relation, VerbalRelation):
            return Stress.Ultimate
        if relation.mode is NominalMode.FRM:
            return Stress.Antepenultimate
        if relation.is_concatenated and relation.case.index >= 36:
            return Stress.Ultimate
        return Stress.Penultimate

    def _cc(self) -> Optional[HForm]:
        series = _ca_shortcut_series(self.ca_shortcut) if self.ca_shortcut is not None else None
        concatenation = self.relation.mode if self.relation.is_concatenated else None
        if series is None and concatenation is None:
            return None
        return HForm.parse(CC_FORMS_INVERSE[series, concatenation])

    def _middle(self) -> List[Token]:
        tokens: List[Token] = []

        if self.ca_shortcut is not None:
            slot_v = self.slot_v.to_vxcs_pairs()
            for index, (vx, cs) in enumerate(slot_v):
                tokens += [vx.with_glottal_stop(index == len(slot_v) - 1), cs]
        elif self.has_cn_shortcut:
            tokens.append(cn_to_hform(MoodOrCaseScope.from_specific(self.relation.mcs), False))
        elif len(self.slot_v):
            for vx, cs in self.slot_v.to_vxcs_pairs():
                tokens += [cs, vx]
            tokens.append(Consonant(self.ca.to_geminated_string()))
        else:
            tokens.append(Consonant(self.ca.to_ungeminated_string()))

        for vx, cs in self.slot_vii.to_vxcs_pairs():
            tokens += [vx, cs]

        if not self.has_cn_shortcut:
            vncn = VnCn(self.vn, MoodOrCaseScope.from_specific(self.relation.mcs))
            if not vncn.is_default():
                tokens += vncn.to_tokens()

        return tokens

    def to_tokens(self) -> TokenList:
        """
        Build the canonical token list. Vv and Vc/Vk are left out when they
        hold their default forms, unless the stress needs more syllables.

        Raises:
            ValueError: if no spelling can carry the formative's stress.
        """
        cc = self._cc()
        vv = self._vv().with_glottal_stop(len(self.slot_v) > 1)
        vc = self._vc()
        stress = self._stress()
        middle = self._middle()

        default_vowel = VowelForm(1, 1)
        show_vv = cc is not None or vv != default_vowel
        show_vc = vc != default_vowel
        needed = {Stress.Ultimate: 1, Stress.Penultimate: 2, Stress.Antepenultimate: 3}[stress]

        while True:
            tokens: List[Token] = []
            if cc is not None:
                tokens.append(cc)
            if show_vv:
                tokens.append(vv)
            tokens.append(self.root.to_token())
            if self.ca_shortcut is None:
                tokens.append(self._vr())
            tokens += middle
            if show_vc:
                tokens.append(vc)

            nuclei = len(syllable_nuclei(tokens_to_string(tokens)))
            if nuclei >= needed:
                break
            if not show_vc:
                show_vc = True
            elif not show_vv:
                show_vv = True
            else:
                raise ValueError(f"cannot spell formative with {stress.long_name} stress")

        if stress is Stress.Ultimate and nuclei == 1:
            stress = Stress.Monosyllabic
        return TokenList(tokens, stress)

    def to_string(self) -> str:
        return self.to_tokens().to_string()


def _ca_shortcut_series(shortcut: CaShortcut) -> str:
    return "w" if shortcut in CA_SHORTCUT_SERIES["w"] else "y"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _check_cn_shortcut(cn: HForm) -> MoodOrCaseScope:
    if cn.sequence is not HFormSequence.S0:
        raise ParseError(ParseErrorKind.AspectualCnShortcut)
    if cn.degree == 1:
        raise ParseError(ParseErrorKind.DefaultCnShortcut)
    mcs, _ = cn_from_hform(cn)
    return mcs


def _next_cs(stream: TokenStream):
    cs = stream.next((Consonant, Numeral))
    if cs is None:
        raise ParseError(ParseErrorKind.ExpectedCs)
    if isinstance(cs, Consonant) and is_geminate(cs.text):
        raise ParseError(ParseErrorKind.GeminatedCs)
    return cs


def _parse_slot_vii(stream: TokenStream) -> Tuple[List[Tuple[VowelForm, Token]], bool]:
    """Read VxCs pairs to the end of the stream. Only one Vx may be glottalized."""
    pairs = []
    has_glottal_stop = False
    while not stream.is_done():
        vx, cs = parse_vxcs(stream)
        if isinstance(cs, Consonant) and is_geminate(cs.text):
            raise ParseError(ParseErrorKind.GeminatedCs)
        if vx.has_glottal_stop:
            if has_glottal_stop:
                raise ParseError(ParseErrorKind.DoublyGlottalizedVx)
            has_glottal_stop = True
        pairs.append((vx.with_glottal_stop(False), cs))
    return pairs, has_glottal_stop


def _has_geminate(tokens) -> bool:
    return any(isinstance(token, Consonant) and is_geminate(token.text) for token in tokens)


def parse_formative(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> Formative:
    """
    Parse a formative from a token stream.

    Raises:
        ParseError: naming the first slot that could not be read.
    """
    vc = stream.next_back(VowelForm)

    # Slot I: Cc
    series, concatenation = None, None
    cc = stream.next(HForm)
    if cc is not None:
        try:
            series, concatenation = CC_FORMS[cc.as_str()]
        except KeyError:
            raise ParseError(ParseErrorKind.ExpectedCc) from None

    stress = stream.stress
    is_verbal = False
    is_high = False
    mode = NominalMode.NOM
    if concatenation is None:
        if stress in (Stress.Ultimate, Stress.Monosyllabic):
            is_verbal = True
        elif stress is Stress.Antepenultimate:
            mode = NominalMode.FRM
    else:
        mode = concatenation
        if stress in (Stress.Ultimate, Stress.Monosyllabic):
            is_high = True
        elif stress is Stress.Antepenultimate and not flags & ParseFlags.PERMISSIVE:
            raise ParseError(ParseErrorKind.AntepenultimateStress)

    # Slot II: Vv
    vv = stream.next(VowelForm)
    if vv is None:
        if cc is not None:
            raise ParseError(ParseErrorKind.ExpectedVv)
        vv = VowelForm(1, 1)

    stem, version, function = Stem.S1, Version.PRC, Function.STA
    if vv.degree == AFFIXUAL_VV_DEGREE:
        word_type = "affixual"
        version, function = AFFIXUAL_VV_SEQUENCES[vv.sequence]
    elif vv.degree == REFERENTIAL_VV_DEGREE:
        word_type = "referential"
        if vv.sequence > 2:
            raise ParseError(ParseErrorKind.ExpectedVv)
        version = Version.PRC if vv.sequence == 1 else Version.CPT
    else:
        word_type = "normal"
        stem, version = STEM_VERSION_DEGREES[vv.degree]

    ca_shortcut = None
    affix_shortcut = AffixShortcut.NONE
    if series is not None:
        if word_type == "affixual":
            raise ParseError(ParseErrorKind.AffixualFormativeWithCaShortcut)
        if word_type == "referential":
            raise ParseError(ParseErrorKind.ExpectedCc)
        ca_shortcut = CA_SHORTCUT_SERIES[series][vv.sequence - 1]
    elif word_type == "normal":
        affix_shortcut = AFFIX_SHORTCUTS[vv.sequence - 1]

    # Slot III: Cr
    token = stream.next_any()
    if isinstance(token, Numeral):
        if word_type != "normal":
            raise ParseError(ParseErrorKind.ExpectedNonNumericRoot)
        root = NumericRoot(token.value)
    elif isinstance(token, Consonant):
        if word_type == "referential":
            root = ReferentialRoot(ReferentList.parse_perspectiveless(token.text))
        else:
            root = NormalRoot(token.text)
    else:
        raise ParseError(ParseErrorKind.ExpectedRoot)

    # Slot IV: Vr
    specification, context = Specification.BSC, Context.EXS
    vr_has_glottal_stop = False
    if ca_shortcut is None:
        vr = expect(stream, VowelForm, ParseErrorKind.ExpectedVr)
        vr_has_glottal_stop = vr.has_glottal_stop
        context = CONTEXTS[vr.sequence - 1]
        if word_type == "affixual":
            root = AffixualRoot(root.cr, vr.degree)
        else:
            try:
                specification, function = VR_DEGREES[vr.degree]
            except KeyError:
                raise ParseError(ParseErrorKind.ExpectedVr) from None

    # Slots VIII and VI (Cn shortcut only), read from the back
    vncn = None
    just_cn = None
    if isinstance(stream.peek_back(), HForm):
        cn = stream.next_back_any()
        before = stream.peek_back()
        if isinstance(before, VowelForm):
            vn_vowel = stream.next_back_any()
            mcs, is_aspectual = cn_from_hform(cn)
            vncn = VnCn(
                vn_from_vowel(vn_vowel, is_aspectual), mcs, vn_vowel.has_glottal_stop)
        elif before is None:
            just_cn = cn
        else:
            raise ParseError(ParseErrorKind.ExpectedVn)

    # Slots V, VI and VII
    slot_v_pairs: list = []
    slot_vii_pairs: list = []
    vx_has_glottal_stop = False
    cn_shortcut_mcs = None
    ca = Ca()

    if ca_shortcut is not None:
        if just_cn is not None:
            raise ParseError(ParseErrorKind.ExpectedVn)
        ca = Ca.from_shortcut(ca_shortcut)
        slot_v_ended = False
        while not stream.is_done():
            vx = expect(stream, VowelForm, ParseErrorKind.ExpectedVx)
            cs = _next_cs(stream)
            slot_vii_pairs.append((vx.with_glottal_stop(False), cs))
            if vx.has_glottal_stop:
                if slot_v_ended:
                    raise ParseError(ParseErrorKind.MultipleEndOfSlotVMarkers)
                slot_v_pairs, slot_vii_pairs = slot_vii_pairs, []
                slot_v_ended = True
    elif just_cn is not None:
        cn_shortcut_mcs = _check_cn_shortcut(just_cn)
    elif isinstance(stream.peek(), HForm):
        if vncn is not None:
            raise ParseError(ParseErrorKind.ExpectedCa)
        cn_shortcut_mcs = _check_cn_shortcut(stream.next_any())
        slot_vii_pairs, vx_has_glottal_stop = _parse_slot_vii(stream)
    elif _has_geminate(stream.tokens_left()):
        while True:
            cs = stream.next((Consonant, Numeral))
            if cs is None:
                raise ParseError(ParseErrorKind.ExpectedCs)
            if isinstance(cs, Consonant) and is_geminate(cs.text):
                geminated = Ca.from_geminated_string(cs.text)
                if geminated is None:
                    raise ParseError(ParseErrorKind.ExpectedCa)
                ca = geminated
                break
            vx = expect(stream, VowelForm, ParseErrorKind.ExpectedVx)
            if vx.has_glottal_stop:
                if vx_has_glottal_stop:
                    raise ParseError(ParseErrorKind.DoublyGlottalizedVx)
                vx_has_glottal_stop = True
            slot_v_pairs.append((vx.with_glottal_stop(False), cs))
        slot_vii_pairs, slot_vii_glottal = _parse_slot_vii(stream)
        if slot_vii_glottal:
            if vx_has_glottal_stop:
                raise ParseError(ParseErrorKind.DoublyGlottalizedVx)
            vx_has_glottal_stop = True
    else:
        ca_token = expect(stream, Consonant, ParseErrorKind.ExpectedCa)
        ungeminated = Ca.from_ungeminated_string(ca_token.text)
        if ungeminated is None:
            raise ParseError(ParseErrorKind.ExpectedCa)
        ca = ungeminated
        slot_vii_pairs, vx_has_glottal_stop = _parse_slot_vii(stream)

    if not flags & ParseFlags.PERMISSIVE:
        if vv.has_glottal_stop and len(slot_v_pairs) <= 1:
            raise ParseError(ParseErrorKind.TooFewSlotVAffixes)
        if not vv.has_glottal_stop and len(slot_v_pairs) > 1:
            raise ParseError(ParseErrorKind.TooManySlotVAffixes)

    slot_v = affix_list_from_pairs(slot_v_pairs)
    slot_vii = affix_list_from_pairs(slot_vii_pairs)

    # Slot IX: the formative's single glottal stop may be written on Vr,
    # a Vx or Vn as well as on Vc/Vk itself.
    vc = vc if vc is not None else VowelForm(1, 1)
    for has_glottal_stop in (
        vr_has_glottal_stop,
        vx_has_glottal_stop,
        vncn is not None and vncn.has_glottal_stop,
    ):
        if has_glottal_stop:
            if vc.has_glottal_stop:
                raise ParseError(ParseErrorKind.DoublyGlottalizedFormative)
            vc = vc.with_glottal_stop()

    cn = vncn.cn if vncn is not None else MoodOrCaseScope.FAC_CCN
    if cn_shortcut_mcs is not None:
        cn = cn_shortcut_mcs
    vn = vncn.vn if vncn is not None else Valence.MNO

    if is_verbal:
        relation = VerbalRelation(cn.mood, vk_from_vowel(vc))
    elif concatenation is None:
        relation = NominalRelation(mode, cn.case_scope, case_from_vowel(vc))
    else:
        if vc.has_glottal_stop:
            raise ParseError(ParseErrorKind.GlottalizedVc)
        case = case_from_vowel(vc.with_glottal_stop(is_high))
        relation = NominalRelation(mode, cn.case_scope, case)

    formative = Formative(
        root=root,
        stem=stem,
        version=version,
        function=function,
        specification=specification,
        context=context,
        ca=ca,
        slot_v=slot_v,
        slot_vii=slot_vii,
        vn=vn,
        relation=relation,
        affix_shortcut=affix_shortcut,
        ca_shortcut=ca_shortcut,
        has_cn_shortcut=cn_shortcut_mcs is not None,
    )
    logger.debug(f"Parsed formative: {formative.gloss()}")
    return formative
