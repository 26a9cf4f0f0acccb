"""
Parsers for the small token segments shared by several word types.

Every parser here follows the stream protocol: it takes ``(stream, flags)``,
consumes tokens from the front and raises ParseError on failure. Callers
wrap them in TokenStream.parse to get rollback.
"""
from dataclasses import dataclass
from typing import List, Tuple, Union

from ithkuil.categories import MoodOrCaseScope, Valence
from ithkuil.codec import Vn, cm_from_consonant, cm_to_consonant, cn_from_hform, cn_to_hform, is_aspect, vn_from_vowel, vn_to_vowel
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.stream import ParseFlags, TokenStream
from ithkuil.tokens import H, HR, Consonant, GlottalStop, HForm, Numeral, Token, VowelForm


def expect(stream: TokenStream, kind, error: ParseErrorKind):
    """Pop the front token if it is a ``kind``, else raise ``error``."""
    token = stream.next(kind)
    if token is None:
        raise ParseError(error)
    return token


def expect_back(stream: TokenStream, kind, error: ParseErrorKind):
    token = stream.next_back(kind)
    if token is None:
        raise ParseError(error)
    return token


def parse_hh(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> HForm:
    if stream.peek() != H:
        raise ParseError(ParseErrorKind.ExpectedHh)
    return stream.next_any()


def parse_hr(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> HForm:
    if stream.peek() != HR:
        raise ParseError(ParseErrorKind.ExpectedHr)
    return stream.next_any()


def parse_glottal_stop(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> GlottalStop:
    return expect(stream, GlottalStop, ParseErrorKind.ExpectedGs)


def parse_numeral(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> Numeral:
    return expect(stream, Numeral, ParseErrorKind.ExpectedNn)


@dataclass(frozen=True)
class VnCn:
    """A Vn vowel with the Cn h-form that tells how to read it."""
    vn: Vn = Valence.MNO
    cn: MoodOrCaseScope = MoodOrCaseScope.FAC_CCN
    has_glottal_stop: bool = False

    def is_default(self) -> bool:
        return self.vn is Valence.MNO and self.cn is MoodOrCaseScope.FAC_CCN

    def to_tokens(self) -> List[Token]:
        vowel = vn_to_vowel(self.vn).with_glottal_stop(self.has_glottal_stop)
        return [vowel, cn_to_hform(self.cn, is_aspect(self.vn))]


def _vncn(stream: TokenStream, allow_glottal_stop: bool) -> VnCn:
    vowel = expect(stream, VowelForm, ParseErrorKind.ExpectedVn)
    if vowel.has_glottal_stop and not allow_glottal_stop:
        raise ParseError(ParseErrorKind.GlottalizedVn)
    hform = expect(stream, HForm, ParseErrorKind.ExpectedCn)
    mcs, aspectual = cn_from_hform(hform)
    return VnCn(vn_from_vowel(vowel, aspectual), mcs, vowel.has_glottal_stop)


def parse_vncn(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> VnCn:
    """Parse a Vn followed by a Cn. The Vn may not carry a glottal stop."""
    return _vncn(stream, allow_glottal_stop=False)


def parse_vncn_with_glottal_stop(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> VnCn:
    """Like parse_vncn, but record a glottal stop on the Vn instead of failing."""
    return _vncn(stream, allow_glottal_stop=True)


def parse_vncm(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> Vn:
    """Parse a Vn followed by the Cm consonant n or ň."""
    vowel = expect(stream, VowelForm, ParseErrorKind.ExpectedVn)
    if vowel.has_glottal_stop:
        raise ParseError(ParseErrorKind.GlottalizedVn)
    consonant = expect(stream, Consonant, ParseErrorKind.ExpectedCm)
    return vn_from_vowel(vowel, cm_from_consonant(consonant.text))


def vncm_to_tokens(vn: Vn) -> List[Token]:
    return [vn_to_vowel(vn), Consonant(cm_to_consonant(is_aspect(vn)))]


AffixCs = Union[Consonant, Numeral]


def parse_vxcs(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> Tuple[VowelForm, AffixCs]:
    """Parse an affix written vowel first."""
    vx = expect(stream, VowelForm, ParseErrorKind.ExpectedVx)
    cs = stream.next((Consonant, Numeral))
    if cs is None:
        raise ParseError(ParseErrorKind.ExpectedCs)
    return vx, cs


def parse_csvx(stream: TokenStream, flags: ParseFlags = ParseFlags.NONE) -> Tuple[VowelForm, AffixCs]:
    """Parse an affix written consonant first. Returns the pair as (Vx, Cs)."""
    cs = stream.next((Consonant, Numeral))
    if cs is None:
        raise ParseError(ParseErrorKind.ExpectedCs)
    vx = expect(stream, VowelForm, ParseErrorKind.ExpectedVx)
    return vx, cs
