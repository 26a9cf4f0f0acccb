"""
The Ca complex and its morphophonology.

A Ca packs five categories (affiliation, configuration, extension,
perspective and essence) into one consonant cluster. Building that cluster
takes three steps, and parsing one undoes them in reverse:

    Ca --concatenate--> unallomorphed --allomorph--> ungeminated --geminate--> geminated

Only the ungeminated and geminated forms ever appear in words. The
geminated form marks the end of slot V in a formative.
"""
from dataclasses import dataclass
from typing import Optional

from ithkuil.categories import (
    Affiliation,
    CaShortcut,
    Configuration,
    Essence,
    Extension,
    Perspective,
)
from ithkuil.gloss import GlossFlags, gloss_non_default, join_dotted


@dataclass(frozen=True)
class Ca:
    affiliation: Affiliation = Affiliation.CSL
    configuration: Configuration = Configuration.UPX
    extension: Extension = Extension.DEL
    perspective: Perspective = Perspective.M
    essence: Essence = Essence.NRM

    def is_default(self) -> bool:
        return self == Ca()

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        """Dot-join the non-default categories, e.g. "MSC.GRA"."""
        return join_dotted(
            gloss_non_default(item, flags)
            for item in (self.affiliation, self.configuration, self.extension,
                         self.perspective, self.essence)
        )

    # -- building ------------------------------------------------------------

    def to_unallomorphed_string(self) -> str:
        shortcut = _STANDALONE_FORMS_INVERSE.get(self)
        if shortcut is not None:
            return shortcut

        output = AFFILIATION_FORMS[self.affiliation]
        output += CONFIGURATION_FORMS[self.configuration]
        if self.configuration is Configuration.UPX:
            output += UNIPLEX_EXTENSION_FORMS[self.extension]
        else:
            output += EXTENSION_FORMS[self.extension]

        without_tpk, with_tpk = PERSPECTIVE_ESSENCE_FORMS[self.perspective, self.essence]
        if output.endswith(("t", "p", "k")):
            return output + with_tpk
        return output + without_tpk

    def to_ungeminated_string(self) -> str:
        return allomorph(self.to_unallomorphed_string())

    def to_geminated_string(self) -> str:
        return geminate(self.to_ungeminated_string())

    def to_string(self, is_geminate: bool = False) -> str:
        if is_geminate:
            return self.to_geminated_string()
        return self.to_ungeminated_string()

    # -- parsing -------------------------------------------------------------

    @classmethod
    def from_unallomorphed_string(cls, text: str) -> Optional["Ca"]:
        """
        Read a Ca off an unallomorphed string, front to back. Returns None
        if letters are left over.
        """
        if text in _STANDALONE_FORMS:
            return _STANDALONE_FORMS[text]

        reader = _Reader(text)

        affiliation = Affiliation.CSL
        if len(text) > 1:
            affiliation = {
                "l": Affiliation.ASO,
                "r": Affiliation.COA,
                "ř": Affiliation.VAR,
            }.get(reader.peek(), Affiliation.CSL)
            if affiliation is not Affiliation.CSL:
                reader.pop()

        configuration = reader.pop_table(CONFIGURATION_READER, Configuration.UPX)

        if configuration is Configuration.UPX:
            extension = reader.pop_table(UNIPLEX_EXTENSION_READER, Extension.DEL)
        else:
            extension = reader.pop_table(EXTENSION_READER, Extension.DEL)

        perspective, essence = reader.pop_table(
            PERSPECTIVE_ESSENCE_READER, (Perspective.M, Essence.NRM))

        if not reader.is_done():
            return None

        return cls(affiliation, configuration, extension, perspective, essence)

    @classmethod
    def from_ungeminated_string(cls, text: str) -> Optional["Ca"]:
        return cls.from_unallomorphed_string(unallomorph(text))

    @classmethod
    def from_geminated_string(cls, text: str) -> Optional["Ca"]:
        ungeminated = ungeminate(text)
        if ungeminated is None:
            return None
        return cls.from_ungeminated_string(ungeminated)

    @classmethod
    def from_string(cls, text: str, is_geminate: bool = False) -> Optional["Ca"]:
        if is_geminate:
            return cls.from_geminated_string(text)
        return cls.from_ungeminated_string(text)

    @classmethod
    def from_shortcut(cls, shortcut: CaShortcut) -> "Ca":
        return CA_SHORTCUTS[shortcut]


class _Reader:
    """Front-to-back cursor used while decoding an unallomorphed Ca."""

    def __init__(self, text: str):
        self.text = text
        self.index = 0

    def is_done(self) -> bool:
        return self.index >= len(self.text)

    def peek(self) -> str:
        return self.text[self.index:self.index + 1]

    def pop(self) -> str:
        char = self.peek()
        self.index += len(char)
        return char

    def pop_table(self, table, default):
        """Take the longest prefix found in ``table``."""
        for length in (2, 1):
            chunk = self.text[self.index:self.index + length]
            if len(chunk) == length and chunk in table:
                self.index += length
                return table[chunk]
        return default


# ---------------------------------------------------------------------------
# Component forms
# ---------------------------------------------------------------------------

_STANDALONE_FORMS = {
    "nļ": Ca(affiliation=Affiliation.ASO),
    "rļ": Ca(affiliation=Affiliation.COA),
    "ň": Ca(affiliation=Affiliation.VAR),
    "l": Ca(),
    "tļ": Ca(essence=Essence.RPV),
    "v": Ca(perspective=Perspective.N),
    "j": Ca(perspective=Perspective.A),
}
_STANDALONE_FORMS_INVERSE = {value: key for key, value in _STANDALONE_FORMS.items()}

AFFILIATION_FORMS = {
    Affiliation.CSL: "",
    Affiliation.ASO: "l",
    Affiliation.COA: "r",
    Affiliation.VAR: "ř",
}

CONFIGURATION_FORMS = {
    Configuration.UPX: "",
    Configuration.MSS: "t",
    Configuration.MSC: "k",
    Configuration.MSF: "p",
    Configuration.MDS: "ţ",
    Configuration.MDC: "f",
    Configuration.MDF: "ç",
    Configuration.MFS: "z",
    Configuration.MFC: "ž",
    Configuration.MFF: "ẓ",
    Configuration.DPX: "s",
    Configuration.DSS: "c",
    Configuration.DSC: "ks",
    Configuration.DSF: "ps",
    Configuration.DDS: "ţs",
    Configuration.DDC: "fs",
    Configuration.DDF: "š",
    Configuration.DFS: "č",
    Configuration.DFC: "kš",
    Configuration.DFF: "pš",
}
CONFIGURATION_READER = {
    form: configuration
    for configuration, form in CONFIGURATION_FORMS.items()
    if form
}

UNIPLEX_EXTENSION_FORMS = {
    Extension.DEL: "",
    Extension.PRX: "d",
    Extension.ICP: "g",
    Extension.ATV: "b",
    Extension.GRA: "gz",
    Extension.DPL: "bz",
}
UNIPLEX_EXTENSION_READER = {
    form: extension
    for extension, form in UNIPLEX_EXTENSION_FORMS.items()
    if form
}

EXTENSION_FORMS = {
    Extension.DEL: "",
    Extension.PRX: "t",
    Extension.ICP: "k",
    Extension.ATV: "p",
    Extension.GRA: "g",
    Extension.DPL: "b",
}
EXTENSION_READER = {
    form: extension
    for extension, form in EXTENSION_FORMS.items()
    if form
}

# (perspective, essence) -> (form, form after t/p/k)
PERSPECTIVE_ESSENCE_FORMS = {
    (Perspective.M, Essence.NRM): ("", ""),
    (Perspective.G, Essence.NRM): ("r", "r"),
    (Perspective.N, Essence.NRM): ("w", "w"),
    (Perspective.A, Essence.NRM): ("y", "y"),
    (Perspective.M, Essence.RPV): ("l", "l"),
    (Perspective.G, Essence.RPV): ("ř", "ř"),
    (Perspective.N, Essence.RPV): ("m", "h"),
    (Perspective.A, Essence.RPV): ("n", "ç"),
}
PERSPECTIVE_ESSENCE_READER = {
    form: key
    for key, forms in PERSPECTIVE_ESSENCE_FORMS.items()
    for form in forms
    if form
}

CA_SHORTCUTS = {
    CaShortcut.Default: Ca(),
    CaShortcut.PRX: Ca(extension=Extension.PRX),
    CaShortcut.G: Ca(perspective=Perspective.G),
    CaShortcut.RPV: Ca(essence=Essence.RPV),
    CaShortcut.N: Ca(perspective=Perspective.N),
    CaShortcut.A: Ca(perspective=Perspective.A),
    CaShortcut.G_RPV: Ca(perspective=Perspective.G, essence=Essence.RPV),
    CaShortcut.PRX_RPV: Ca(extension=Extension.PRX, essence=Essence.RPV),
}
CA_SHORTCUTS_INVERSE = {value: key for key, value in CA_SHORTCUTS.items()}


# ---------------------------------------------------------------------------
# Allomorphy
# ---------------------------------------------------------------------------

ALLOMORPHS = [
    ("pp", "mp"), ("tt", "nt"), ("kk", "nk"), ("ll", "pļ"), ("pb", "mb"),
    ("kg", "ng"), ("çy", "nd"), ("rr", "ns"), ("rř", "nš"), ("řr", "ňs"),
    ("řř", "ňš"), ("ngn", "ňn"),
]
# Applied only after the first letter
NON_INITIAL_ALLOMORPHS = [
    ("gm", "x"), ("gn", "ň"), ("çx", "xw"), ("bm", "v"), ("bn", "ḑ"),
]
FINAL_ALLOMORPHS = [("fv", "vw"), ("ţḑ", "ḑy")]

UNALLOMORPHS_FIRST = [("ḑy", "ţḑ"), ("vw", "fv")]
NON_INITIAL_UNALLOMORPHS = [
    ("ḑ", "bn"), ("v", "bm"), ("xw", "çx"), ("ň", "gn"), ("x", "gm"),
]
UNALLOMORPHS = [
    ("ňn", "ngn"), ("gnn", "ngn"), ("ňš", "řř"), ("gnš", "řř"),
    ("ňs", "řr"), ("gns", "řr"), ("nš", "rř"), ("ns", "rr"), ("nd", "çy"),
    ("ng", "kg"), ("mb", "pb"), ("pļ", "ll"), ("nk", "kk"), ("nt", "tt"),
    ("mp", "pp"),
]


def _replace_all(text: str, pairs) -> str:
    for old, new in pairs:
        text = text.replace(old, new)
    return text


def allomorph(ca: str) -> str:
    """Apply the allomorphic substitutions to an unallomorphed Ca."""
    if len(ca) <= 1:
        return ca
    ca = _replace_all(ca, ALLOMORPHS)
    ca = ca[:1] + _replace_all(ca[1:], NON_INITIAL_ALLOMORPHS)
    return _replace_all(ca, FINAL_ALLOMORPHS)


def unallomorph(ca: str) -> str:
    """Undo allomorph."""
    if len(ca) <= 1:
        return ca
    ca = _replace_all(ca, UNALLOMORPHS_FIRST)
    ca = ca[:1] + _replace_all(ca[1:], NON_INITIAL_UNALLOMORPHS)
    return _replace_all(ca, UNALLOMORPHS)


# ---------------------------------------------------------------------------
# Gemination
# ---------------------------------------------------------------------------

STOPS = "tkpdgb"
LIQUIDS_AND_APPROXIMANTS = "lrřwy"
SIBILANTS = "sšzžçcč"
PREFIX_DOUBLED = "fţvḑmnň"

GEMINATES = [
    ("pt", "bbḑ"), ("pk", "bbv"), ("kt", "ggḑ"), ("kp", "ggv"),
    ("tk", "ḑvv"), ("tp", "ddv"), ("pm", "vvm"), ("km", "xxm"),
    ("kn", "xxn"), ("tm", "ḑḑm"), ("tn", "ḑḑn"), ("bm", "mmw"),
    ("bn", "mml"), ("gm", "ňňw"), ("gn", "ňňl"), ("dm", "nnw"),
    ("dn", "nnl"),
]
# "vvn" is an accepted variant of "vvm"
UNGEMINATES = [(geminate, plain) for plain, geminate in GEMINATES] + [("vvn", "pm")]


def try_geminate_ignoring_lrr(ca: str) -> Optional[str]:
    """Geminate a Ca that has no leading l, r or ř. None if no rule applies."""
    if len(ca) == 0:
        return ""
    if len(ca) == 1:
        return ca + ca
    if ca == "tļ":
        return "ttļ"

    if ca[0] in STOPS and ca[1] in LIQUIDS_AND_APPROXIMANTS:
        return ca[0] + ca

    for index, char in enumerate(ca):
        if char in SIBILANTS:
            return ca[:index] + char + ca[index:]

    if ca[0] in PREFIX_DOUBLED:
        return ca[0] + ca

    if ca[0] in "tkp" and ca[1] in "fţç":
        return ca[0] + ca

    for plain, geminated in GEMINATES:
        if plain in ca:
            return ca.replace(plain, geminated)

    return None


def try_geminate(ca: str) -> Optional[str]:
    if ca[:1] in ("l", "r", "ř"):
        prefix, rest = ca[0], ca[1:]
        if not rest:
            return prefix + prefix
        geminated = try_geminate_ignoring_lrr(rest)
        if geminated is None:
            return prefix + ca
        return prefix + geminated
    return try_geminate_ignoring_lrr(ca)


def geminate(ca: str) -> str:
    """Geminate an ungeminated Ca, doubling its first letter as a last resort."""
    geminated = try_geminate(ca)
    if geminated is None:
        return ca[0] + ca
    return geminated


def ungeminate(ca: str) -> Optional[str]:
    """Undo geminate. Returns None for an empty string."""
    if not ca:
        return None

    for geminated, plain in UNGEMINATES:
        if geminated in ca:
            return ca.replace(geminated, plain)

    for index in range(len(ca) - 1):
        if ca[index] == ca[index + 1]:
            return ca[:index] + ca[index + 1:]

    return ca
