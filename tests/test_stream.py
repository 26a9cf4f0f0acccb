"""
Tests for token streams and the speculative parsing protocol.
"""
import unittest

from ithkuil.categories import Stress
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.stream import ParseFlags, TokenList, TokenStream, parse_str
from ithkuil.tokens import Consonant, VowelForm


def consume_then_fail(stream, flags):
    stream.next_any()
    stream.next_back_any()
    raise ParseError(ParseErrorKind.ExpectedCa)


def consume_one(stream, flags):
    return stream.next_any()


class TestTokenStream(unittest.TestCase):

    def setUp(self):
        self.stream = TokenList.from_str("rrata").stream()

    def test_next_only_takes_matching_kind(self):
        """Tests that next() leaves the stream alone on a kind mismatch."""
        self.assertIsNone(self.stream.next(VowelForm))
        self.assertEqual(self.stream.next(Consonant), Consonant("rr"))
        self.assertEqual(self.stream.next_back(VowelForm), VowelForm(1, 1))
        self.assertEqual(self.stream.tokens_left(), (VowelForm(1, 1), Consonant("t")))

    def test_failed_parse_restores_cursors(self):
        """Tests that a failing parser leaves tokens_left() unchanged."""
        before = self.stream.tokens_left()
        with self.assertRaises(ParseError):
            self.stream.parse(consume_then_fail)
        self.assertEqual(self.stream.tokens_left(), before)

    def test_try_parse_returns_none(self):
        """Tests that try_parse() swallows the error and rolls back."""
        before = self.stream.tokens_left()
        self.assertIsNone(self.stream.try_parse(consume_then_fail))
        self.assertEqual(self.stream.tokens_left(), before)

    def test_parse_entire_requires_every_token(self):
        """Tests that leftover tokens raise TooManyTokens and roll back."""
        before = self.stream.tokens_left()
        with self.assertRaises(ParseError) as context:
            self.stream.parse_entire(consume_one)
        self.assertEqual(context.exception.kind, ParseErrorKind.TooManyTokens)
        self.assertEqual(self.stream.tokens_left(), before)

    def test_stress_travels_with_stream(self):
        """Tests that the detected stress is available to parsers."""
        self.assertIsNone(self.stream.stress)
        self.assertEqual(TokenList.from_str("rratá").stream().stress, Stress.Ultimate)

    def test_empty_stream(self):
        """Tests peeking and popping on an empty stream."""
        stream = TokenStream([])
        self.assertTrue(stream.is_done())
        self.assertIsNone(stream.peek())
        self.assertIsNone(stream.next_any())
        self.assertIsNone(stream.next_back_any())

    def test_parse_str(self):
        """Tests parsing a whole word with a single parser."""
        self.assertEqual(parse_str(consume_one, "l", ParseFlags.NONE), Consonant("l"))


class TestTokenList(unittest.TestCase):

    def test_from_str_normalizes_and_unstresses(self):
        """Tests that from_str() runs the whole preprocessing pipeline."""
        token_list = TokenList.from_str("RRATÁ")
        self.assertEqual(token_list.stress, Stress.Ultimate)
        self.assertEqual(token_list.tokens, [
            Consonant("rr"), VowelForm(1, 1), Consonant("t"), VowelForm(1, 1),
        ])

    def test_to_string_marks_non_penultimate_stress(self):
        """Tests that only ultimate and antepenultimate stress are written."""
        tokens = [Consonant("l"), VowelForm(1, 1), Consonant("l"), VowelForm(1, 1)]
        self.assertEqual(TokenList(tokens, Stress.Ultimate).to_string(), "lalá")
        self.assertEqual(TokenList(tokens, Stress.Penultimate).to_string(), "lala")
        self.assertEqual(TokenList(tokens[:2], Stress.Monosyllabic).to_string(), "la")

    def test_append(self):
        """Tests appending tokens."""
        token_list = TokenList()
        token_list.append(Consonant("l"), VowelForm(1, 1))
        self.assertEqual(token_list.to_string(), "la")


if __name__ == '__main__':
    unittest.main()
