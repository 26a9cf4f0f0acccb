"""
Parse errors for romanized New Ithkuil words.

Every failure the analysis engine can report is a member of the closed
ParseErrorKind enumeration. Members carry a fixed human-readable message
and are split into two classes:

- value errors: the input is malformed at the source level (bad characters,
  unknown vowel forms, doubled stress). No other word interpretation can
  succeed, so dispatch stops immediately.
- type errors: the token shape does not match the construct being parsed.
  The caller rolls the stream back and tries the next interpretation.
"""
from enum import Enum


class ParseErrorKind(Enum):
    """The reason a word failed to parse."""

    # Source-level (value) errors
    SourceCharInvalid = "encountered an invalid character"
    SourceVowelInvalid = "encountered an invalid vowel form"
    SourceHFormInvalid = "encountered an invalid h-form"
    SourceNumeralInvalid = "encountered an invalid numeral"
    StressDoubled = "the word is marked with stress twice"
    StressInvalid = "stress is marked on an impossible syllable"

    # Word-level errors
    WordEmpty = "the word is empty"
    WordInitialUA = "the word begins with üa"
    WordInitialGlottalStop = "the word begins with a glottal stop"
    TooManyTokens = "the word has extra tokens after a complete parse"

    # Missing or malformed slots
    ExpectedVc = "expected a Vc case form"
    ExpectedVk = "expected a Vk illocution/validation form"
    ExpectedVn = "expected a Vn form"
    ExpectedCn = "expected a Cn mood/case-scope form"
    ExpectedCm = "expected a Cm form"
    ExpectedVm = "expected a Vm register form"
    ExpectedVp = "expected a Vp stress form"
    ExpectedVh = "expected a Vh scope form"
    ExpectedVs = "expected a Vs scope form"
    ExpectedVz = "expected a Vz scope form"
    ExpectedCz = "expected a Cz scope form"
    ExpectedCp = "expected a Cp suppletive form"
    ExpectedCb = "expected a Cb bias form"
    ExpectedHh = "expected the h-form h"
    ExpectedHr = "expected the h-form hr"
    ExpectedGs = "expected a glottal stop"
    ExpectedNn = "expected a numeral"
    ExpectedCc = "expected a Cc concatenation form"
    ExpectedVv = "expected a Vv form"
    ExpectedVr = "expected a Vr form"
    ExpectedRoot = "expected a root"
    ExpectedNonNumericRoot = "expected a non-numeric root"
    ExpectedReferentialRoot = "expected a referential root"
    ExpectedCa = "expected a Ca form"
    ExpectedCs = "expected a Cs affix form"
    ExpectedVx = "expected a Vx affix degree"
    ExpectedNonDefaultCn = "expected a non-default Cn form"
    ExpectedReferent = "expected a referent"
    ExpectedCx = "expected a Cx specification form"

    # Glottal stop placement
    GlottalizedVn = "a Vn form may not carry a glottal stop here"
    GlottalizedVc = "a Vc form may not carry a glottal stop in a concatenated formative"
    GeminatedCs = "a Cs form may not be geminated here"
    MultipleEndOfSlotVMarkers = "slot V may only be terminated once"
    DoublyGlottalizedVx = "more than one slot VII affix carries a glottal stop"
    DoublyGlottalizedFormative = "the formative carries more than one glottal stop"
    TooFewSlotVAffixes = "a glottalized Vv requires more than one slot V affix"
    TooManySlotVAffixes = "an unglottalized Vv allows at most one slot V affix"

    # Shortcuts and stress
    DefaultCnShortcut = "a Cn shortcut may not use the default Cn"
    AspectualCnShortcut = "a Cn shortcut may not be aspectual"
    AffixualFormativeWithCaShortcut = "an affixual formative may not use a Ca shortcut"
    AntepenultimateStress = "antepenultimate stress is not allowed here"

    # Referents and appositive affixes
    ReferentInvalid = "encountered an invalid referent"
    ReferentEmpty = "a referent list may not be empty"
    AppositiveDegreeZero = "an appositive referential affix may not use degree 0"

    @property
    def message(self) -> str:
        return self.value

    @property
    def is_value_error(self) -> bool:
        """Whether this error means the input itself is malformed."""
        return self in _VALUE_ERRORS


_VALUE_ERRORS = frozenset({
    ParseErrorKind.SourceCharInvalid,
    ParseErrorKind.SourceVowelInvalid,
    ParseErrorKind.SourceHFormInvalid,
    ParseErrorKind.SourceNumeralInvalid,
    ParseErrorKind.StressDoubled,
    ParseErrorKind.StressInvalid,
})


class ParseError(ValueError):
    """Raised when a word, or part of one, cannot be parsed."""

    def __init__(self, kind: ParseErrorKind):
        super().__init__(kind.message)
        self.kind = kind

    @property
    def is_value_error(self) -> bool:
        return self.kind.is_value_error

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name})"
