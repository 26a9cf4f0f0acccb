"""
Tests for the tokenizer and token spellings.
"""
import unittest

from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.tokens import (
    UA,
    Consonant,
    GlottalStop,
    HForm,
    HFormSequence,
    Numeral,
    Schwa,
    VowelForm,
    is_geminate,
    tokenize,
    tokens_to_string,
)


class TestTokenize(unittest.TestCase):

    def test_simple_word(self):
        """Tests tokenizing 'rrata' into alternating consonants and vowels."""
        self.assertEqual(tokenize("rrata"), [
            Consonant("rr"), VowelForm(1, 1), Consonant("t"), VowelForm(1, 1),
        ])

    def test_vowel_form_table(self):
        """Tests that vowel runs are looked up as (sequence, degree)."""
        self.assertEqual(tokenize("io")[0], VowelForm(3, 3))
        self.assertEqual(tokenize("ae")[0], VowelForm(1, 0))
        self.assertEqual(tokenize("oë")[0], VowelForm(4, 5))

    def test_doubled_vowels_are_series_one(self):
        """Tests that doubled S1 spellings read as the single vowel."""
        self.assertEqual(tokenize("aa"), [VowelForm(1, 1)])

    def test_h_forms(self):
        """Tests that consonant runs starting with h, w or y are h-forms."""
        self.assertEqual(tokenize("hla")[0], HForm(HFormSequence.S0, 2))
        self.assertEqual(tokenize("wa")[0], HForm(HFormSequence.SW, 1))
        self.assertEqual(tokenize("ya")[0], HForm(HFormSequence.SY, 1))

    def test_special_vowels(self):
        """Tests üa, ë and the word-final glottal stop."""
        self.assertEqual(tokenize("üal"), [UA(), Consonant("l")])
        self.assertEqual(tokenize("ëla"), [Schwa(), Consonant("l"), VowelForm(1, 1)])
        self.assertEqual(tokenize("a'"), [VowelForm(1, 1), GlottalStop()])

    def test_glottal_stop_inside_vowel_form(self):
        """Tests that an apostrophe inside a vowel run marks that vowel form."""
        self.assertEqual(tokenize("a'o"), [VowelForm(4, 1, True)])
        self.assertEqual(tokenize("la'l"), [Consonant("l"), VowelForm(1, 1, True), Consonant("l")])

    def test_numerals(self):
        """Tests that digit runs become numerals."""
        self.assertEqual(tokenize("12"), [Numeral(12)])

    def test_underscore_stays_in_consonant_run(self):
        """Tests that an underscore is kept as part of the consonant form."""
        self.assertEqual(
            tokenize("malëuţřait"),
            [Consonant("m"), VowelForm(1, 1), Consonant("l"), VowelForm(2, 5),
             Consonant("ţř"), VowelForm(2, 1), Consonant("t")],
        )
        self.assertEqual(
            tokenize("malëuţř_ait"),
            [Consonant("m"), VowelForm(1, 1), Consonant("l"), VowelForm(2, 5),
             Consonant("ţř_"), VowelForm(2, 1), Consonant("t")],
        )
        self.assertEqual(tokenize("ţ_řa"), [Consonant("ţ_ř"), VowelForm(1, 1)])

    def test_underscore_starts_consonant_run(self):
        """Tests that an underscore after a vowel opens a new consonant run."""
        self.assertEqual(tokenize("a_la"), [VowelForm(1, 1), Consonant("_l"), VowelForm(1, 1)])

    def test_invalid_character(self):
        """Tests that characters outside the alphabet raise SourceCharInvalid."""
        with self.assertRaises(ParseError) as context:
            tokenize("la#")
        self.assertEqual(context.exception.kind, ParseErrorKind.SourceCharInvalid)

    def test_invalid_vowel_form(self):
        """Tests that an unknown vowel run raises SourceVowelInvalid."""
        with self.assertRaises(ParseError) as context:
            tokenize("laaa")
        self.assertEqual(context.exception.kind, ParseErrorKind.SourceVowelInvalid)

    def test_invalid_h_form(self):
        """Tests that an unknown h-form raises SourceHFormInvalid."""
        with self.assertRaises(ParseError) as context:
            tokenize("hka")
        self.assertEqual(context.exception.kind, ParseErrorKind.SourceHFormInvalid)

    def test_invalid_numeral(self):
        """Tests that a fractional numeral raises SourceNumeralInvalid."""
        with self.assertRaises(ParseError) as context:
            tokenize("1.5")
        self.assertEqual(context.exception.kind, ParseErrorKind.SourceNumeralInvalid)
        self.assertTrue(context.exception.is_value_error)


class TestTokenSpelling(unittest.TestCase):

    def test_canonical_vowel_spelling(self):
        """Tests that doubled spellings re-emit as canonical forms."""
        self.assertEqual(tokens_to_string(tokenize("rraata")), "rrata")

    def test_medial_glottal_stop(self):
        """Tests that a medial glottal vowel form is spelled V'."""
        tokens = [Consonant("l"), VowelForm(1, 1, True), Consonant("l")]
        self.assertEqual(tokens_to_string(tokens), "la'l")

    def test_final_glottal_stop(self):
        """Tests that a word-final glottal vowel form is split around the apostrophe."""
        self.assertEqual(tokens_to_string([Consonant("l"), VowelForm(1, 1, True)]), "la'a")
        self.assertEqual(tokens_to_string([Consonant("l"), VowelForm(2, 1, True)]), "la'i")

    def test_vowel_form_range(self):
        """Tests that out-of-range vowel forms are rejected."""
        with self.assertRaises(ValueError):
            VowelForm(5, 1)
        with self.assertRaises(ValueError):
            VowelForm(1, 10)

    def test_is_geminate(self):
        """Tests detection of doubled letters."""
        self.assertTrue(is_geminate("ll"))
        self.assertTrue(is_geminate("rtt"))
        self.assertFalse(is_geminate("lt"))


if __name__ == '__main__':
    unittest.main()
