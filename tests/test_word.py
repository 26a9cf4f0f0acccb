"""
Tests for word-level dispatch and glossing.
"""
import unittest

from ithkuil import gloss_word, parse_word, word_kind
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.formative import Formative
from ithkuil.gloss import GlossFlags
from ithkuil.referential import DualReferential
from ithkuil.stream import ParseFlags
from ithkuil.word import DISPATCH, WORD_KINDS

GLOSSES = [
    # Formatives
    ("hliosulţe", "T1-S2.N-s-lţ/9₁-ABS"),
    ("ašflaleče", "S1-šfl-č/3₁-ABS"),
    ("aesmlal", "[2m+ma+1m]"),
    ("holřäksa", "T1-S0-lř-CTE-DSC"),
    ("ırburučpaızya", "S2.CPT-rb-DYN-G-čp/9₁-(acc:ACT)₂"),
    ("oëtil", "CPT.DYN-t/4-D4"),
    ("rrahla", "S1-rr-CCA"),
    # Referentials
    ("lo", "1m-ERG"),
    ("la", "1m"),
    ("lawe", "1m-THM-ABS"),
    ("lawes", "1m-THM-ABS-2m"),
    ("lá", "1m-RPV"),
    ("ahňax", "[PHR]-BSC"),
    ("ahňaxeltüa", "[PHR]-BSC-lt/3₁-THM"),
    # Affixual adjuncts
    ("er", "r/3₁"),
    ("erú", "r/3₁-{v.sub}-{concat}"),
    ("lehetu", "l/3₁-t/3₁-{v.sub}"),
    # Modular adjuncts
    ("a", "RTR"),
    ("wa", "{parent}-RTR"),
    ("ahla", "SUB/CCA"),
    ("ehlo", "CRO-SUB/CCA-DEM"),
    # Other adjuncts
    ("a'", "MON"),
    ("ha", "DSV"),
    ("hre", "SUB"),
    ("hňo", "[PHR]-ERG"),
    ("lf", "ACC"),
    ("12", "‘12’"),
]


class TestParseWord(unittest.TestCase):

    def test_glosses(self):
        """Tests that each word is routed to the right parser and glossed."""
        for word, expected in GLOSSES:
            with self.subTest(word=word):
                self.assertEqual(parse_word(word).gloss(), expected)

    def test_formative_is_tried_first(self):
        """Tests that a word that reads as a formative is a formative."""
        self.assertIsInstance(parse_word("rrata"), Formative)

    def test_falls_through_to_referential(self):
        """Tests a consonant-initial word that only the referential parser accepts."""
        self.assertIsInstance(parse_word("lawes"), DualReferential)

    def test_permissive(self):
        """Tests that parse flags reach the formative parser."""
        with self.assertRaises(ParseError):
            parse_word("rratakallo")
        self.assertIsInstance(parse_word("rratakallo", ParseFlags.PERMISSIVE), Formative)

    def test_dispatch_covers_leading_tokens(self):
        """Tests that every possible leading token has interpretations to try."""
        for parsers in DISPATCH.values():
            self.assertTrue(parsers)


class TestParseWordErrors(unittest.TestCase):

    def assertParseError(self, word, kind):
        with self.assertRaises(ParseError) as context:
            parse_word(word)
        self.assertEqual(context.exception.kind, kind)

    def test_empty(self):
        """Tests empty words, including a lone apostrophe."""
        self.assertParseError("", ParseErrorKind.WordEmpty)
        self.assertParseError("'", ParseErrorKind.WordEmpty)

    def test_initial_ua(self):
        """Tests that no word starts with üa."""
        self.assertParseError("üala", ParseErrorKind.WordInitialUA)

    def test_initial_glottal_stop(self):
        """Tests that a second leading apostrophe is a glottal stop, which cannot start a word."""
        self.assertParseError("''", ParseErrorKind.WordInitialGlottalStop)

    def test_source_errors(self):
        """Tests that malformed text is reported before dispatch."""
        self.assertParseError("la#", ParseErrorKind.SourceCharInvalid)
        self.assertParseError("alálá", ParseErrorKind.StressDoubled)

    def test_last_error_wins(self):
        """Tests that the error of the last interpretation tried is raised."""
        self.assertParseError("lk", ParseErrorKind.ExpectedVc)

    def test_failure_is_logged(self):
        """Tests that a failed word is logged with its tokens."""
        with self.assertLogs(level='DEBUG') as logs:
            with self.assertRaises(ParseError):
                parse_word("lk")
        self.assertTrue(any("No interpretation of 'lk' succeeded" in line for line in logs.output))
        self.assertTrue(any("tokens: lk" in line for line in logs.output))


class TestWordHelpers(unittest.TestCase):

    def test_word_kind(self):
        """Tests the short names for parsed words."""
        self.assertEqual(word_kind(parse_word("hliosulţe")), "formative")
        self.assertEqual(word_kind(parse_word("lawes")), "referential")
        self.assertEqual(word_kind(parse_word("a'")), "parsing adjunct")
        self.assertEqual(word_kind(parse_word("ahla")), "modular adjunct")
        self.assertEqual(word_kind(parse_word("lehetu")), "affixual adjunct")
        self.assertEqual(word_kind(parse_word("12")), "numeric adjunct")

    def test_every_word_class_has_a_kind(self):
        """Tests that every concrete word class has a kind."""
        self.assertEqual(len(WORD_KINDS), 15)

    def test_gloss_word(self):
        """Tests parsing and glossing in one call."""
        self.assertEqual(gloss_word("lo"), "1m-ERG")
        self.assertEqual(gloss_word("lo", GlossFlags.LONG), "speaker-ergative")


if __name__ == '__main__':
    unittest.main()
