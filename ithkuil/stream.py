"""
Token streams and the speculative parsing protocol.

A parser is any callable taking ``(stream, flags)`` and returning a value or
raising ParseError. Parsers may consume tokens freely before failing;
TokenStream.parse snapshots the two cursors beforehand and restores them on
failure, so a failed attempt never changes the stream. Word-type dispatch
relies on this to try several interpretations of the same tokens.
"""
import logging
from dataclasses import dataclass, field
from enum import Flag, auto
from typing import Callable, List, Optional, Tuple, TypeVar

from ithkuil.categories import Stress
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.orthography import add_stress, detect_stress, normalize, unstress
from ithkuil.tokens import Token, tokenize, tokens_to_string

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ParseFlags(Flag):
    """Options controlling how strictly words are parsed."""
    NONE = 0
    # Relax slot V affix counts and concatenated-formative stress checks
    PERMISSIVE = auto()


Parser = Callable[["TokenStream", ParseFlags], T]


class TokenStream:
    """A cursor pair over an immutable list of tokens."""

    def __init__(self, tokens, stress: Optional[Stress] = None):
        self._tokens: Tuple[Token, ...] = tuple(tokens)
        self.start = 0
        self.end = len(self._tokens)
        self.stress = stress

    def __repr__(self) -> str:
        return f"TokenStream({list(self.tokens_left())!r}, stress={self.stress})"

    def tokens_left(self) -> Tuple[Token, ...]:
        """The unconsumed tokens."""
        return self._tokens[self.start:self.end]

    def is_done(self) -> bool:
        return self.start >= self.end

    def peek(self) -> Optional[Token]:
        if self.is_done():
            return None
        return self._tokens[self.start]

    def peek_back(self) -> Optional[Token]:
        if self.is_done():
            return None
        return self._tokens[self.end - 1]

    def next_any(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self.start += 1
        return token

    def next_back_any(self) -> Optional[Token]:
        token = self.peek_back()
        if token is not None:
            self.end -= 1
        return token

    def next(self, kind) -> Optional[Token]:
        """Pop the front token if it is an instance of ``kind``."""
        token = self.peek()
        if isinstance(token, kind):
            self.start += 1
            return token
        return None

    def next_back(self, kind) -> Optional[Token]:
        """Pop the back token if it is an instance of ``kind``."""
        token = self.peek_back()
        if isinstance(token, kind):
            self.end -= 1
            return token
        return None

    def parse(self, parser: Parser, flags: ParseFlags = ParseFlags.NONE):
        """Run a parser, rolling the stream back if it fails."""
        snapshot = (self.start, self.end)
        try:
            return parser(self, flags)
        except ParseError:
            self.start, self.end = snapshot
            raise

    def try_parse(self, parser: Parser, flags: ParseFlags = ParseFlags.NONE):
        """Like parse, but return None instead of raising."""
        try:
            return self.parse(parser, flags)
        except ParseError:
            return None

    def parse_entire(self, parser: Parser, flags: ParseFlags = ParseFlags.NONE):
        """Run a parser that must consume every remaining token."""
        snapshot = (self.start, self.end)
        try:
            value = parser(self, flags)
            if not self.is_done():
                raise ParseError(ParseErrorKind.TooManyTokens)
            return value
        except ParseError:
            self.start, self.end = snapshot
            raise


@dataclass
class TokenList:
    """The tokens of a word together with its stress."""
    tokens: List[Token] = field(default_factory=list)
    stress: Optional[Stress] = None

    @classmethod
    def from_str(cls, word: str) -> "TokenList":
        """Normalize, detect stress, unstress and tokenize a word."""
        word = normalize(word)
        stress = detect_stress(word)
        tokens = tokenize(unstress(word))
        return cls(tokens, stress)

    def append(self, *tokens: Token):
        self.tokens.extend(tokens)

    def stream(self) -> TokenStream:
        return TokenStream(self.tokens, self.stress)

    def to_string(self) -> str:
        """
        Spell the word out. Ultimate and antepenultimate stress are always
        marked; penultimate and monosyllabic stress are the unmarked forms.
        """
        word = tokens_to_string(self.tokens)
        if self.stress in (Stress.Ultimate, Stress.Antepenultimate):
            return add_stress(word, self.stress)
        return word


def parse_str(parser: Parser, word: str, flags: ParseFlags = ParseFlags.NONE):
    """Parse an entire word with a single parser."""
    stream = TokenList.from_str(word).stream()
    logger.debug(f"Parsing '{word}' as {getattr(parser, '__qualname__', parser)}")
    return stream.parse_entire(parser, flags)
