"""
Grammatical categories of New Ithkuil.

Each category is a closed enumeration whose members carry an abbreviation
(the short gloss) and a long name (the long gloss). Unless a category says
otherwise, its first member is the default value, which glosses omit.
"""
from enum import Enum

from ithkuil.gloss import GlossFlags


class Category(Enum):
    """Base class for glossable grammatical categories."""

    def __init__(self, abbr, long_name):
        self.abbr = abbr
        self.long_name = long_name

    @classmethod
    def default(cls):
        return next(iter(cls))

    def is_default(self) -> bool:
        return self is type(self).default()

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        if flags & GlossFlags.LONG:
            return self.long_name
        return self.abbr

    def __str__(self) -> str:
        return self.abbr


class Stress(Category):
    Monosyllabic = ("MON", "monosyllabic")
    Ultimate = ("ULT", "ultimate")
    Penultimate = ("PEN", "penultimate")
    Antepenultimate = ("ANT", "antepenultimate")

    @classmethod
    def default(cls):
        return cls.Penultimate


class Case(Category):
    """The 68 cases, each at a fixed index in a 72-slot table."""

    def __init__(self, abbr, long_name, index):
        super().__init__(abbr, long_name)
        self.index = index

    THM = ("THM", "thematic", 0)
    INS = ("INS", "instrumental", 1)
    ABS = ("ABS", "absolutive", 2)
    AFF = ("AFF", "affective", 3)
    STM = ("STM", "stimulative", 4)
    EFF = ("EFF", "effectuative", 5)
    ERG = ("ERG", "ergative", 6)
    DAT = ("DAT", "dative", 7)
    IND = ("IND", "inducive", 8)
    POS = ("POS", "possessive", 9)
    PRP = ("PRP", "proprietive", 10)
    GEN = ("GEN", "genitive", 11)
    ATT = ("ATT", "attributive", 12)
    PDC = ("PDC", "productive", 13)
    ITP = ("ITP", "interpretative", 14)
    OGN = ("OGN", "originative", 15)
    IDP = ("IDP", "interdependent", 16)
    PAR = ("PAR", "partitive", 17)
    APL = ("APL", "applicative", 18)
    PUR = ("PUR", "purposive", 19)
    TRA = ("TRA", "transmissive", 20)
    DFR = ("DFR", "deferential", 21)
    CRS = ("CRS", "contrastive", 22)
    TSP = ("TSP", "transpositive", 23)
    CMM = ("CMM", "commutative", 24)
    CMP = ("CMP", "comparative", 25)
    CSD = ("CSD", "considerative", 26)
    FUN = ("FUN", "functive", 27)
    TFM = ("TFM", "transformative", 28)
    CLA = ("CLA", "classificative", 29)
    RSL = ("RSL", "resultative", 30)
    CSM = ("CSM", "consumptive", 31)
    CON = ("CON", "concessive", 32)
    AVR = ("AVR", "aversive", 33)
    CVS = ("CVS", "conversive", 34)
    SIT = ("SIT", "situative", 35)
    PRN = ("PRN", "pertinential", 36)
    DSP = ("DSP", "descriptive", 37)
    COR = ("COR", "correlative", 38)
    CPS = ("CPS", "compositive", 39)
    COM = ("COM", "comitative", 40)
    UTL = ("UTL", "utilitative", 41)
    PRD = ("PRD", "predicative", 42)
    RLT = ("RLT", "relative", 44)
    ACT = ("ACT", "activative", 45)
    ASI = ("ASI", "assimilative", 46)
    ESS = ("ESS", "essive", 47)
    TRM = ("TRM", "terminative", 48)
    SEL = ("SEL", "selective", 49)
    CFM = ("CFM", "conformative", 50)
    DEP = ("DEP", "dependent", 51)
    VOC = ("VOC", "vocative", 53)
    LOC = ("LOC", "locative", 54)
    ATD = ("ATD", "attendant", 55)
    ALL = ("ALL", "allative", 56)
    ABL = ("ABL", "ablative", 57)
    ORI = ("ORI", "orientative", 58)
    IRL = ("IRL", "interrelative", 59)
    INV = ("INV", "intrative", 60)
    NAV = ("NAV", "navigative", 62)
    CNR = ("CNR", "concursive", 63)
    ASS = ("ASS", "assessive", 64)
    PER = ("PER", "periodic", 65)
    PRO = ("PRO", "prolapsive", 66)
    PCV = ("PCV", "precursive", 67)
    PCR = ("PCR", "postcursive", 68)
    ELP = ("ELP", "elapsive", 69)
    PLM = ("PLM", "prolimitive", 71)

    @classmethod
    def from_index(cls, index: int):
        """Look up a case by table index, returning None for unused slots."""
        return _CASES_BY_INDEX.get(index)


_CASES_BY_INDEX = {case.index: case for case in Case}

# Unused slots in the case table.
CASE_GAPS = (43, 52, 61, 70)


class Mood(Category):
    FAC = ("FAC", "factual")
    SUB = ("SUB", "subjunctive")
    ASM = ("ASM", "assumptive")
    SPC = ("SPC", "speculative")
    COU = ("COU", "counterfactive")
    HYP = ("HYP", "hypothetical")


class CaseScope(Category):
    CCN = ("CCN", "natural")
    CCA = ("CCA", "antecedent")
    CCS = ("CCS", "subaltern")
    CCQ = ("CCQ", "qualifier")
    CCP = ("CCP", "precedent")
    CCV = ("CCV", "successive")


class MoodOrCaseScope(Category):
    """A Cn value before the formative it belongs to decides how to read it."""
    FAC_CCN = ("FAC/CCN", "factual/natural")
    SUB_CCA = ("SUB/CCA", "subjunctive/antecedent")
    ASM_CCS = ("ASM/CCS", "assumptive/subaltern")
    SPC_CCQ = ("SPC/CCQ", "speculative/qualifier")
    COU_CCP = ("COU/CCP", "counterfactive/precedent")
    HYP_CCV = ("HYP/CCV", "hypothetical/successive")

    @property
    def mood(self) -> Mood:
        return list(Mood)[list(MoodOrCaseScope).index(self)]

    @property
    def case_scope(self) -> CaseScope:
        return list(CaseScope)[list(MoodOrCaseScope).index(self)]

    @classmethod
    def from_specific(cls, value):
        """Widen a Mood or CaseScope into the combined Cn value."""
        return list(cls)[list(type(value)).index(value)]


class Valence(Category):
    MNO = ("MNO", "monoactive")
    PRL = ("PRL", "parallel")
    CRO = ("CRO", "corollary")
    RCP = ("RCP", "reciprocal")
    CPL = ("CPL", "complementary")
    DUP = ("DUP", "duplicative")
    DEM = ("DEM", "demonstrative")
    CNG = ("CNG", "contingent")
    PTI = ("PTI", "participatory")


class Phase(Category):
    PUN = ("PUN", "punctual")
    ITR = ("ITR", "iterative")
    REP = ("REP", "repetitive")
    ITM = ("ITM", "intermittent")
    RCT = ("RCT", "recurrent")
    FRE = ("FRE", "frequentative")
    FRG = ("FRG", "fragmentative")
    VAC = ("VAC", "vacillitative")
    FLC = ("FLC", "fluctuative")

    # Only Valence.MNO is the default Vn.
    def is_default(self) -> bool:
        return False


class Effect(Category):
    BEN1 = ("1:BEN", "beneficial_to_speaker")
    BEN2 = ("2:BEN", "beneficial_to_addressee")
    BEN3 = ("3:BEN", "beneficial_to_3rd_party")
    BENSELF = ("SLF:BEN", "beneficial_to_self")
    UNK = ("UNK", "unknown")
    DETSELF = ("SLF:DET", "detrimental_to_self")
    DET3 = ("3:DET", "detrimental_to_3rd_party")
    DET2 = ("2:DET", "detrimental_to_addressee")
    DET1 = ("1:DET", "detrimental_to_speaker")

    def is_default(self) -> bool:
        return False


class Level(Category):
    MIN = ("MIN", "minimal")
    SBE = ("SBE", "subequative")
    IFR = ("IFR", "inferior")
    DFC = ("DFC", "deficient")
    EQU = ("EQU", "equative")
    SUR = ("SUR", "surpassive")
    SPL = ("SPL", "superlative")
    SPQ = ("SPQ", "superequative")
    MAX = ("MAX", "maximal")

    def is_default(self) -> bool:
        return False


class Aspect(Category):
    RTR = ("RTR", "retrospective")
    PRS = ("PRS", "prospective")
    HAB = ("HAB", "habitual")
    PRG = ("PRG", "progressive")
    IMM = ("IMM", "imminent")
    PCS = ("PCS", "precessive")
    REG = ("REG", "regulative")
    SMM = ("SMM", "summative")
    ATP = ("ATP", "anticipatory")
    RSM = ("RSM", "resumptive")
    CSS = ("CSS", "cessative")
    PAU = ("PAU", "pausal")
    RGR = ("RGR", "regressive")
    PCL = ("PCL", "preclusive")
    CNT = ("CNT", "continuative")
    ICS = ("ICS", "incessative")
    EXP = ("EXP", "experiential")
    IRP = ("IRP", "interruptive")
    PMP = ("PMP", "preemptive")
    CLM = ("CLM", "climactic")
    DLT = ("DLT", "dilatory")
    TMP = ("TMP", "temporary")
    XPD = ("XPD", "expenditive")
    LIM = ("LIM", "limitative")
    EPD = ("EPD", "expeditive")
    PTC = ("PTC", "protractive")
    PPR = ("PPR", "preparatory")
    DCL = ("DCL", "disclusive")
    CCL = ("CCL", "conclusive")
    CUL = ("CUL", "culminative")
    IMD = ("IMD", "intermediative")
    TRD = ("TRD", "tardative")
    TNS = ("TNS", "transitional")
    ITC = ("ITC", "intercommutative")
    MTV = ("MTV", "motive")
    SQN = ("SQN", "sequential")

    def is_default(self) -> bool:
        return False


class IllocutionOrValidation(Category):
    OBS = ("OBS", "observational")
    REC = ("REC", "recollective")
    PUP = ("PUP", "purportive")
    RPR = ("RPR", "reportive")
    USP = ("USP", "unspecified")
    IMA = ("IMA", "imaginary")
    CVN = ("CVN", "conventional")
    ITU = ("ITU", "intuitive")
    INF = ("INF", "inferential")
    DIR = ("DIR", "directive")
    DEC = ("DEC", "declarative")
    IRG = ("IRG", "interrogative")
    VER = ("VER", "verificative")
    ADM = ("ADM", "admonitive")
    POT = ("POT", "potentiative")
    HOR = ("HOR", "hortative")
    CNJ = ("CNJ", "conjectural")


class Register(Category):
    DSV = ("DSV", "discursive")
    PNT = ("PNT", "parenthetical")
    SPF = ("SPF", "specificative")
    EXM = ("EXM", "exemplificative")
    CGT = ("CGT", "cogitant")
    DSV_END = ("DSV_END", "discursive_end")
    PNT_END = ("PNT_END", "parenthetical_end")
    SPF_END = ("SPF_END", "specificative_end")
    EXM_END = ("EXM_END", "exemplificative_end")
    CGT_END = ("CGT_END", "cogitant_end")
    END = ("END", "end")


class Version(Category):
    PRC = ("PRC", "processual")
    CPT = ("CPT", "completive")


class Stem(Category):
    S1 = ("S1", "stem_one")
    S2 = ("S2", "stem_two")
    S3 = ("S3", "stem_three")
    S0 = ("S0", "stem_zero")


class Function(Category):
    STA = ("STA", "static")
    DYN = ("DYN", "dynamic")


class Specification(Category):
    BSC = ("BSC", "basic")
    CTE = ("CTE", "contential")
    CSV = ("CSV", "constitutive")
    OBJ = ("OBJ", "objective")


class Context(Category):
    EXS = ("EXS", "existential")
    FNC = ("FNC", "functional")
    RPS = ("RPS", "representational")
    AMG = ("AMG", "amalgamative")


class Affiliation(Category):
    CSL = ("CSL", "consolidative")
    ASO = ("ASO", "associative")
    COA = ("COA", "coalescent")
    VAR = ("VAR", "variative")


class Configuration(Category):
    UPX = ("UPX", "uniplex")
    MSS = ("MSS", "multiplex_similar_separate")
    MSC = ("MSC", "multiplex_similar_connected")
    MSF = ("MSF", "multiplex_similar_fused")
    MDS = ("MDS", "multiplex_dissimilar_separate")
    MDC = ("MDC", "multiplex_dissimilar_connected")
    MDF = ("MDF", "multiplex_dissimilar_fused")
    MFS = ("MFS", "multiplex_fuzzy_separate")
    MFC = ("MFC", "multiplex_fuzzy_connected")
    MFF = ("MFF", "multiplex_fuzzy_fused")
    DPX = ("DPX", "duplex")
    DSS = ("DSS", "duplex_similar_separate")
    DSC = ("DSC", "duplex_similar_connected")
    DSF = ("DSF", "duplex_similar_fused")
    DDS = ("DDS", "duplex_dissimilar_separate")
    DDC = ("DDC", "duplex_dissimilar_connected")
    DDF = ("DDF", "duplex_dissimilar_fused")
    DFS = ("DFS", "duplex_fuzzy_separate")
    DFC = ("DFC", "duplex_fuzzy_connected")
    DFF = ("DFF", "duplex_fuzzy_fused")


class Extension(Category):
    DEL = ("DEL", "delimitive")
    PRX = ("PRX", "proximal")
    ICP = ("ICP", "inceptive")
    ATV = ("ATV", "attenuative")
    GRA = ("GRA", "graduative")
    DPL = ("DPL", "depletive")


class Perspective(Category):
    M = ("M", "monadic")
    G = ("G", "agglomerative")
    N = ("N", "nomic")
    A = ("A", "abstract")


class Essence(Category):
    NRM = ("NRM", "normal")
    RPV = ("RPV", "representative")


class AffixType(Category):
    T1 = ("₁", "type_one")
    T2 = ("₂", "type_two")
    T3 = ("₃", "type_three")

    @property
    def number(self) -> int:
        return list(AffixType).index(self) + 1


class CaseAccessorMode(Category):
    Normal = ("acc", "case_accessor")
    Inverse = ("ia", "inverse_accessor")


class AffixShortcut(Category):
    """An affix implied by the Vv of a formative without a Ca shortcut."""
    NONE = ("{none}", "{none}")
    NEG4 = ("r/4", "NEG/4")
    DCD4 = ("t/4", "DCD/4")
    DCD5 = ("t/5", "DCD/5")

    def gloss(self, flags: GlossFlags = GlossFlags.NONE) -> str:
        if self is AffixShortcut.NONE:
            return self.abbr
        if flags & GlossFlags.FORMAT_MARKDOWN:
            consonant, degree = self.abbr.split("/")
            return f"**{consonant}**/{degree}"
        return self.abbr


class CaShortcut(Category):
    """A Ca value implied by the Cc and Vv of a formative."""
    Default = ("Default", "default")
    PRX = ("PRX", "proximal")
    G = ("G", "agglomerative")
    RPV = ("RPV", "representative")
    N = ("N", "nomic")
    A = ("A", "abstract")
    G_RPV = ("G/RPV", "agglomerative_representative")
    PRX_RPV = ("PRX/RPV", "proximal_representative")


class NominalMode(Category):
    NOM = ("NOM", "nominal")
    T1 = ("T1", "type_one")
    T2 = ("T2", "type_two")
    FRM = ("FRM", "framed")


class ReferentTarget(Category):
    M1 = ("1m", "speaker")
    M2 = ("2m", "monadic_addressee")
    P2 = ("2p", "polyadic_addressee")
    MA = ("ma", "monadic_animate")
    PA = ("pa", "polyadic_animate")
    MI = ("mi", "monadic_inanimate")
    PI = ("pi", "polyadic_inanimate")
    Mx = ("Mx", "mixed_3rd_party")
    Rdp = ("Rdp", "reduplicative")
    Obv = ("Obv", "obviative")
    PVS = ("PVS", "provisional")


class ReferentEffect(Category):
    NEU = ("NEU", "neutral")
    BEN = ("BEN", "beneficial")
    DET = ("DET", "detrimental")


class SuppletiveAdjunctMode(Category):
    CAR = ("[CAR]", "[carrier]")
    QUO = ("[QUO]", "[quotative]")
    NAM = ("[NAM]", "[naming]")
    PHR = ("[PHR]", "[phrasal]")


class ModularAdjunctMode(Category):
    Full = ("{full}", "{full}")
    Parent = ("{parent}", "{parent}")
    Concatenated = ("{concat}", "{concatenated}")


class ModularAdjunctScope(Category):
    Formative = ("{formative}", "{formative}")
    MCS = ("{mcs}", "{mood_or_case_scope}")
    UnderAdjacent = ("{under.adj}", "{under_adjacent}")
    OverAdjacent = ("{over.adj}", "{over_adjacent}")


class AffixualAdjunctScope(Category):
    VDom = ("{v.dom}", "{slot_v_dominant}")
    VSub = ("{v.sub}", "{slot_v_subordinate}")
    VIIDom = ("{vii.dom}", "{slot_vii_dominant}")
    VIISub = ("{vii.sub}", "{slot_vii_subordinate}")
    Formative = ("{formative}", "{formative}")
    OverAdj = ("{over.adj}", "{over_adjacent}")


class AffixualAdjunctMode(Category):
    Full = ("{full}", "{full}")
    Concatenated = ("{concat}", "{concatenated}")


class Bias(Category):
    ACC = ("ACC", "accidental")
    ACH = ("ACH", "archetypal")
    ADS = ("ADS", "admissive")
    ANN = ("ANN", "announcive")
    ANP = ("ANP", "anticipative")
    APB = ("APB", "approbative")
    APH = ("APH", "apprehensive")
    ARB = ("ARB", "arbitrary")
    ATE = ("ATE", "attentive")
    CMD = ("CMD", "comedic")
    CNV = ("CNV", "contensive")
    COI = ("COI", "coincidental")
    CRP = ("CRP", "corruptive")
    CRR = ("CRR", "corrective")
    CTP = ("CTP", "contemptive")
    CTV = ("CTV", "contemplative")
    DCC = ("DCC", "disconcertive")
    DEJ = ("DEJ", "dejective")
    DES = ("DES", "desperative")
    DFD = ("DFD", "diffident")
    DIS = ("DIS", "disappointive")
    DLC = ("DLC", "delectative")
    DOL = ("DOL", "dolorous")
    DPB = ("DPB", "disapprobative")
    DRS = ("DRS", "derisive")
    DUB = ("DUB", "dubitative")
    EUH = ("EUH", "euphoric")
    EUP = ("EUP", "euphemistic")
    EXA = ("EXA", "exasperative")
    EXG = ("EXG", "exigent")
    FOR = ("FOR", "fortuitous")
    FSC = ("FSC", "fascinative")
    GRT = ("GRT", "gratificative")
    IDG = ("IDG", "indignative")
    IFT = ("IFT", "infatuative")
    IPL = ("IPL", "implicative")
    IPT = ("IPT", "impatient")
    IRO = ("IRO", "ironic")
    ISP = ("ISP", "insipid")
    IVD = ("IVD", "invidious")
    MAN = ("MAN", "mandatory")
    MNF = ("MNF", "manifestive")
    OPT = ("OPT", "optimal")
    PES = ("PES", "pessimistic")
    PPT = ("PPT", "propitious")
    PPV = ("PPV", "propositive")
    PPX = ("PPX", "perplexive")
    PSC = ("PSC", "prosaic")
    PSM = ("PSM", "presumptive")
    RAC = ("RAC", "reactive")
    RFL = ("RFL", "reflective")
    RPU = ("RPU", "repulsive")
    RSG = ("RSG", "resignative")
    RVL = ("RVL", "revelative")
    SAT = ("SAT", "satiative")
    SGS = ("SGS", "suggestive")
    SKP = ("SKP", "skeptical")
    SOL = ("SOL", "solicitative")
    STU = ("STU", "stupefactive")
    TRP = ("TRP", "triumphant")
    VEX = ("VEX", "vexative")
