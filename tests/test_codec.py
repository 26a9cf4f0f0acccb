"""
Unit tests for the vowel and consonant codecs.

Tests:
- Vc decoding with the glottal stop and the unused table slots
- Vn, Cn and Cm decoding
- Direct lookup tables and their inverses
"""

import pytest

from ithkuil import codec
from ithkuil.categories import (
    CASE_GAPS,
    AffixualAdjunctScope,
    Aspect,
    Bias,
    Case,
    Effect,
    Level,
    ModularAdjunctMode,
    ModularAdjunctScope,
    MoodOrCaseScope,
    Phase,
    Register,
    Stress,
    Valence,
)
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.tokens import HForm, HFormSequence, VowelForm


class TestCase:
    """Test the case vowel (Vc)"""

    @pytest.mark.parametrize("vowel,case", [
        (VowelForm(1, 1), Case.THM),
        (VowelForm(1, 3), Case.ABS),
        (VowelForm(1, 7), Case.ERG),
        (VowelForm(4, 8), Case.CVS),
        (VowelForm(1, 1, True), Case.PRN),
        (VowelForm(3, 3, True), Case.ALL),
        (VowelForm(4, 9, True), Case.PLM),
    ])
    def test_case_from_vowel(self, vowel, case):
        """Test the 36g + 9(s-1) + (d-1) index formula."""
        assert codec.case_from_vowel(vowel) is case

    def test_degree_zero(self):
        """Test that D0 is not a case."""
        with pytest.raises(ParseError) as exc_info:
            codec.case_from_vowel(VowelForm(1, 0))
        assert exc_info.value.kind is ParseErrorKind.ExpectedVc

    @pytest.mark.parametrize("index", CASE_GAPS)
    def test_unused_slots(self, index):
        """Test that the four unused table slots are rejected."""
        glottal, remainder = divmod(index, 36)
        vowel = VowelForm(remainder // 9 + 1, remainder % 9 + 1, bool(glottal))
        with pytest.raises(ParseError) as exc_info:
            codec.case_from_vowel(vowel)
        assert exc_info.value.kind is ParseErrorKind.ExpectedVc

    def test_every_case_has_a_vowel(self):
        """Test that case_to_vowel inverts case_from_vowel for all 68 cases."""
        assert len(Case) == 68
        for case in Case:
            assert codec.case_from_vowel(codec.case_to_vowel(case)) is case

    def test_thematic_and_appositive_degrees(self):
        """Test the affix case tables used by case accessors and appositives."""
        assert codec.thematic_case_from_degree(1) is Case.THM
        assert codec.thematic_case_from_degree(9) is Case.IND
        assert codec.appositive_case_from_degree(1) is Case.POS
        with pytest.raises(ParseError) as exc_info:
            codec.appositive_case_from_degree(0)
        assert exc_info.value.kind is ParseErrorKind.AppositiveDegreeZero


class TestVn:
    """Test Vn, Cn and Cm"""

    @pytest.mark.parametrize("vowel,vn", [
        (VowelForm(1, 1), Valence.MNO),
        (VowelForm(1, 7), Valence.DEM),
        (VowelForm(2, 6), Phase.FRE),
        (VowelForm(3, 1), Effect.BEN1),
        (VowelForm(4, 9), Level.MAX),
    ])
    def test_non_aspectual(self, vowel, vn):
        """Test that the sequence picks the Vn block."""
        assert codec.vn_from_vowel(vowel, False) is vn
        assert codec.vn_to_vowel(vn) == vowel

    @pytest.mark.parametrize("vowel,aspect", [
        (VowelForm(1, 1), Aspect.RTR),
        (VowelForm(2, 1), Aspect.RSM),
        (VowelForm(4, 9), Aspect.SQN),
    ])
    def test_aspectual(self, vowel, aspect):
        """Test that aspects fill all four sequences in order."""
        assert codec.vn_from_vowel(vowel, True) is aspect
        assert codec.vn_to_vowel(aspect) == vowel

    def test_degree_zero(self):
        """Test that D0 is not a Vn."""
        with pytest.raises(ParseError) as exc_info:
            codec.vn_from_vowel(VowelForm(1, 0), False)
        assert exc_info.value.kind is ParseErrorKind.ExpectedVn

    def test_glottalized_aspect(self):
        """Test that a modular adjunct aspect cannot carry a glottal stop."""
        with pytest.raises(ParseError) as exc_info:
            codec.aspect_from_vowel(VowelForm(1, 1, True))
        assert exc_info.value.kind is ParseErrorKind.GlottalizedVn

    def test_cn(self):
        """Test that w/y-series Cn marks an aspectual Vn."""
        assert codec.cn_from_hform(HForm(HFormSequence.S0, 2)) == (MoodOrCaseScope.SUB_CCA, False)
        assert codec.cn_from_hform(HForm(HFormSequence.SW, 1)) == (MoodOrCaseScope.FAC_CCN, True)
        assert codec.cn_to_hform(MoodOrCaseScope.HYP_CCV, True) == HForm(HFormSequence.SW, 6)

    def test_cm(self):
        """Test the Cm of modular adjuncts."""
        assert codec.cm_from_consonant("n") is False
        assert codec.cm_from_consonant("ň") is True
        with pytest.raises(ParseError) as exc_info:
            codec.cm_from_consonant("m")
        assert exc_info.value.kind is ParseErrorKind.ExpectedCm


class TestLookups:
    """Test direct lookup tables"""

    def test_mcs_gap(self):
        """Test that (S2, D2) is not a mood or case-scope."""
        with pytest.raises(ParseError) as exc_info:
            codec.mcs_from_vowel(VowelForm(2, 2))
        assert exc_info.value.kind is ParseErrorKind.ExpectedCn

    def test_vk_gap(self):
        """Test that (S2, D5) is not an illocution or validation."""
        with pytest.raises(ParseError) as exc_info:
            codec.vk_from_vowel(VowelForm(2, 5))
        assert exc_info.value.kind is ParseErrorKind.ExpectedVk

    def test_register(self):
        """Test register vowels, including the END register."""
        assert codec.register_from_vowel(VowelForm(1, 1)) is Register.DSV
        assert codec.register_from_vowel(VowelForm(1, 8)) is Register.END
        assert codec.register_to_vowel(Register.CGT_END) == VowelForm(2, 9)

    def test_parsing_stress(self):
        """Test the Vp of parsing adjuncts."""
        assert codec.stress_from_vowel(VowelForm(1, 3)) is Stress.Ultimate
        with pytest.raises(ParseError) as exc_info:
            codec.stress_from_vowel(VowelForm(1, 3, True))
        assert exc_info.value.kind is ParseErrorKind.ExpectedVp

    def test_modular_scope_duplicate(self):
        """Test that both (1,4) and (1,9) read as OverAdjacent and (1,4) is written."""
        assert codec.modular_scope_from_vowel(VowelForm(1, 9)) is ModularAdjunctScope.OverAdjacent
        assert codec.modular_scope_to_vowel(ModularAdjunctScope.OverAdjacent) == VowelForm(1, 4)

    def test_cz_depends_on_glottal_stop(self):
        """Test that the same Cz means different scopes after a glottal Vx."""
        h = HForm.parse("h")
        assert codec.affixual_scope_from_cz(h, False) is AffixualAdjunctScope.VDom
        assert codec.affixual_scope_from_cz(h, True) is AffixualAdjunctScope.VSub
        with pytest.raises(ParseError) as exc_info:
            codec.affixual_scope_from_cz(HForm.parse("hl"), False)
        assert exc_info.value.kind is ParseErrorKind.ExpectedCz

    @pytest.mark.parametrize("scope", list(AffixualAdjunctScope))
    def test_cz_inverse(self, scope):
        """Test that every affixual scope has a Cz spelling."""
        hform, has_glottal_stop = codec.affixual_scope_to_cz(scope)
        assert codec.affixual_scope_from_cz(hform, has_glottal_stop) is scope

    def test_modular_mode(self):
        """Test the optional w/y prefix of modular adjuncts."""
        assert codec.modular_mode_from_hform(None) is ModularAdjunctMode.Full
        assert codec.modular_mode_from_hform(HForm.parse("w")) is ModularAdjunctMode.Parent
        assert codec.modular_mode_to_hform(ModularAdjunctMode.Concatenated) == HForm.parse("y")

    def test_bias_table_is_complete(self):
        """Test that every bias has exactly one consonant form."""
        assert len(codec.BIAS_FORMS) == len(Bias)
        for bias in Bias:
            assert codec.bias_from_consonant(codec.bias_to_consonant(bias)) is bias
        with pytest.raises(ParseError) as exc_info:
            codec.bias_from_consonant("lk")
        assert exc_info.value.kind is ParseErrorKind.ExpectedCb
