"""
Unit tests for adjuncts.

Tests:
- Parsing, register, MCS, suppletive, bias and numeric adjuncts
- Aspectual, non-scoped and scoped modular adjuncts
- Single and multiple affixual adjuncts
"""

import pytest

from ithkuil.adjuncts import (
    AspectualModularAdjunct,
    MultipleAffixAdjunct,
    NonScopedModularAdjunct,
    ScopedModularAdjunct,
    SingleAffixAdjunct,
    parse_affixual_adjunct,
    parse_bias_adjunct,
    parse_mcs_adjunct,
    parse_modular_adjunct,
    parse_numeric_adjunct,
    parse_parsing_adjunct,
    parse_register_adjunct,
    parse_suppletive_adjunct,
)
from ithkuil.affixes import PlainAffix
from ithkuil.categories import (
    AffixType,
    AffixualAdjunctMode,
    AffixualAdjunctScope,
    Aspect,
    ModularAdjunctMode,
    ModularAdjunctScope,
    MoodOrCaseScope,
    Valence,
)
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.gloss import GlossFlags
from ithkuil.stream import parse_str


class TestSimpleAdjuncts:
    """Test the fixed-shape adjuncts"""

    @pytest.mark.parametrize("parser,word,expected", [
        (parse_parsing_adjunct, "a'", "MON"),
        (parse_parsing_adjunct, "e'", "ULT"),
        (parse_register_adjunct, "ha", "DSV"),
        (parse_register_adjunct, "hu", "CGT"),
        (parse_mcs_adjunct, "hre", "SUB"),
        (parse_suppletive_adjunct, "hňa", "[PHR]"),
        (parse_suppletive_adjunct, "hňo", "[PHR]-ERG"),
        (parse_bias_adjunct, "lf", "ACC"),
        (parse_numeric_adjunct, "12", "‘12’"),
    ])
    def test_gloss_and_respell(self, parser, word, expected):
        """Test glossing each adjunct and spelling it back out."""
        adjunct = parse_str(parser, word)
        assert adjunct.gloss() == expected
        assert adjunct.to_string() == word

    def test_long_gloss(self):
        """Test long names for a register."""
        assert parse_str(parse_register_adjunct, "hu").gloss(GlossFlags.LONG) == "cogitant"

    def test_parsing_adjunct_needs_glottal_stop(self):
        """Test that a bare vowel is not a parsing adjunct."""
        with pytest.raises(ParseError) as exc_info:
            parse_str(parse_parsing_adjunct, "e")
        assert exc_info.value.kind is ParseErrorKind.ExpectedGs

    def test_unknown_bias(self):
        """Test that an unknown consonant cluster is not a bias."""
        with pytest.raises(ParseError) as exc_info:
            parse_str(parse_bias_adjunct, "lk")
        assert exc_info.value.kind is ParseErrorKind.ExpectedCb

    def test_unknown_suppletive_form(self):
        """Test that only hl, hm, hn and hň start a suppletive adjunct."""
        with pytest.raises(ParseError) as exc_info:
            parse_str(parse_suppletive_adjunct, "ha")
        assert exc_info.value.kind is ParseErrorKind.ExpectedCp


class TestModularAdjunct:
    """Test parse_modular_adjunct()"""

    def test_aspect_only(self):
        """Test that a lone vowel is an aspect."""
        adjunct = parse_str(parse_modular_adjunct, "a")
        assert adjunct == AspectualModularAdjunct(Aspect.RTR)
        assert adjunct.gloss() == "RTR"
        assert adjunct.to_string() == "a"

    def test_parent_mode(self):
        """Test the w prefix."""
        adjunct = parse_str(parse_modular_adjunct, "wa")
        assert adjunct.mode is ModularAdjunctMode.Parent
        assert adjunct.gloss() == "{parent}-RTR"

    def test_non_scoped(self):
        """Test that penultimate stress makes the final vowel a Vn."""
        adjunct = parse_str(parse_modular_adjunct, "ahla")
        assert adjunct == NonScopedModularAdjunct(Valence.MNO, MoodOrCaseScope.SUB_CCA, Valence.MNO)
        assert adjunct.gloss() == "SUB/CCA"
        assert adjunct.to_string() == "ahla"

    def test_non_scoped_with_valences(self):
        """Test non-default Vn values on both ends."""
        assert parse_str(parse_modular_adjunct, "ehlo").gloss() == "CRO-SUB/CCA-DEM"

    def test_scoped(self):
        """Test that ultimate stress makes the final vowel a scope."""
        adjunct = parse_str(parse_modular_adjunct, "ahlá")
        assert isinstance(adjunct, ScopedModularAdjunct)
        assert adjunct.scope is ModularAdjunctScope.Formative
        assert adjunct.gloss() == "SUB/CCA"
        assert adjunct.to_string() == "ahlá"

    def test_all_defaults_gloss_as_mno(self):
        """Test that a modular adjunct never glosses as an empty string."""
        adjunct = NonScopedModularAdjunct(Valence.MNO, MoodOrCaseScope.FAC_CCN, Valence.MNO)
        assert adjunct.gloss() == "MNO"

    def test_glottalized_final_vn(self):
        """Test that the final Vn of a non-scoped adjunct has no glottal stop."""
        with pytest.raises(ParseError) as exc_info:
            parse_str(parse_modular_adjunct, "ahla'a")
        assert exc_info.value.kind is ParseErrorKind.GlottalizedVn


class TestAffixualAdjunct:
    """Test parse_affixual_adjunct()"""

    def test_single_affix(self):
        """Test a single affix with the default scope."""
        adjunct = parse_str(parse_affixual_adjunct, "er")
        assert adjunct == SingleAffixAdjunct(PlainAffix("r", AffixType.T1, 3))
        assert adjunct.gloss() == "r/3₁"

    def test_single_affix_scope(self):
        """Test a Vs scope after the affix."""
        adjunct = parse_str(parse_affixual_adjunct, "eru")
        assert adjunct.scope is AffixualAdjunctScope.VSub
        assert adjunct.gloss() == "r/3₁-{v.sub}"

    def test_single_affix_concatenated(self):
        """Test that ultimate stress marks the concatenated mode."""
        adjunct = parse_str(parse_affixual_adjunct, "erú")
        assert adjunct.mode is AffixualAdjunctMode.Concatenated
        assert adjunct.gloss() == "r/3₁-{v.sub}-{concat}"
        assert adjunct.to_string() == "erú"

    def test_multiple_affixes(self):
        """Test a Cz scope between the first and the other affixes."""
        adjunct = parse_str(parse_affixual_adjunct, "lehetu")
        assert isinstance(adjunct, MultipleAffixAdjunct)
        assert adjunct.first_scope is AffixualAdjunctScope.VDom
        assert adjunct.other_scope is AffixualAdjunctScope.VSub
        assert adjunct.gloss() == "l/3₁-t/3₁-{v.sub}"
        assert adjunct.to_string() == "lehetu"

    def test_geminate_first_cs(self):
        """Test that a geminate first Cs is preceded by ë."""
        adjunct = parse_str(parse_affixual_adjunct, "ëllehet")
        assert adjunct.first_affix == PlainAffix("ll", AffixType.T1, 3)
        assert adjunct.to_string() == "ëllehet"

    def test_multiple_needs_other_affixes(self):
        """Test that a multiple-affix adjunct cannot be built with one affix."""
        with pytest.raises(ValueError):
            MultipleAffixAdjunct(PlainAffix("l", AffixType.T1, 3), ())
