"""
Unit tests for orthographic preprocessing.

Tests:
- Normalization of alternate letters, combining marks and apostrophes
- Stress detection, including diphthongs and error cases
- Unstressing and re-marking stress
"""

import pytest

from ithkuil.categories import Stress
from ithkuil.errors import ParseError, ParseErrorKind
from ithkuil.orthography import add_stress, detect_stress, normalize, syllable_nuclei, unstress


class TestNormalize:
    """Test normalize()"""

    def test_lowercases(self):
        """Test that words are lowercased."""
        assert normalize("RRATA") == "rrata"

    def test_strips_leading_apostrophe(self):
        """Test that a word-initial apostrophe is dropped."""
        assert normalize("’ala") == "ala"
        assert normalize("'ala") == "ala"

    def test_keeps_second_leading_apostrophe(self):
        """Test that only the first of two leading apostrophes is dropped."""
        assert normalize("''ala") == "'ala"
        assert normalize("’'a") == "'a"

    def test_keeps_interior_apostrophe(self):
        """Test that curly apostrophes inside a word become plain ones."""
        assert normalize("a’la") == "a'la"

    def test_removes_zero_width_space(self):
        """Test that U+200B is removed."""
        assert normalize("ka\u200bla") == "kala"

    def test_folds_combining_marks(self):
        """Test folding of combining diacritics into precomposed letters."""
        assert normalize("a\u0301la") == "ála"
        assert normalize("ka\u0308") == "kä"
        assert normalize("t\u0327a") == "ţa"
        assert normalize("c\u030ca") == "ča"
        assert normalize("z\u0323a") == "ẓa"

    @pytest.mark.parametrize("alternate,canonical", [
        ("ı", "i"),
        ("ì", "i"),
        ("ù", "u"),
        ("ṭ", "ţ"),
        ("ț", "ţ"),
        ("đ", "ḑ"),
        ("ł", "ļ"),
        ("ż", "ẓ"),
        ("ṇ", "ň"),
        ("ŗ", "ř"),
    ])
    def test_alternate_letters(self, alternate, canonical):
        """Test mapping of alternate letters onto canonical ones."""
        assert normalize(alternate) == canonical

    @pytest.mark.parametrize("word", [
        "Hliosulţe", "’ála", "ırburučpaızya", "Ţäła", "ma\u200blëuţř_ait",
    ])
    def test_idempotent(self, word):
        """Test that normalizing twice is the same as normalizing once."""
        once = normalize(word)
        assert normalize(once) == once


class TestDetectStress:
    """Test detect_stress()"""

    def test_unmarked_word_has_default_stress(self):
        """Test that an unaccented polysyllable returns None."""
        assert detect_stress("alala") is None

    def test_single_vowel_is_monosyllabic(self):
        """Test that one unaccented vowel means Monosyllabic."""
        assert detect_stress("la") is Stress.Monosyllabic

    @pytest.mark.parametrize("word,stress", [
        ("alalá", Stress.Ultimate),
        ("alála", Stress.Penultimate),
        ("álala", Stress.Antepenultimate),
        ("alái", Stress.Ultimate),
        ("aláu", Stress.Ultimate),
    ])
    def test_marked_stress(self, word, stress):
        """Test detection of accented syllables, including diphthongs."""
        assert detect_stress(word) is stress

    def test_doubled_stress(self):
        """Test that two accents raise StressDoubled."""
        with pytest.raises(ParseError) as exc_info:
            detect_stress("álalá")
        assert exc_info.value.kind is ParseErrorKind.StressDoubled

    def test_stress_too_far_back(self):
        """Test that an accent before the antepenult raises StressInvalid."""
        with pytest.raises(ParseError) as exc_info:
            detect_stress("álalala")
        assert exc_info.value.kind is ParseErrorKind.StressInvalid


class TestStressMarking:
    """Test unstress() and add_stress()"""

    def test_unstress(self):
        """Test removal of accent marks."""
        assert unstress("áâéêíóôúû") == "aäeëioöuü"
        assert unstress("lálu") == "lalu"

    def test_add_stress(self):
        """Test marking stress on the right nucleus."""
        assert add_stress("alala", Stress.Ultimate) == "alalá"
        assert add_stress("alala", Stress.Antepenultimate) == "álala"
        assert add_stress("la", Stress.Monosyllabic) == "la"

    def test_add_stress_on_diphthong(self):
        """Test that stress on an i-final diphthong goes on its first vowel."""
        assert add_stress("kaila", Stress.Penultimate) == "káila"

    def test_add_stress_needs_enough_syllables(self):
        """Test that too few syllables is a ValueError."""
        with pytest.raises(ValueError):
            add_stress("lala", Stress.Antepenultimate)
        with pytest.raises(ValueError):
            add_stress("lala", Stress.Monosyllabic)

    def test_syllable_nuclei(self):
        """Test that nuclei are listed from the end of the word."""
        assert syllable_nuclei("kaila") == [4, 1]

    @pytest.mark.parametrize("stress,min_syllables", [
        (Stress.Monosyllabic, 1),
        (Stress.Ultimate, 2),
        (Stress.Penultimate, 2),
        (Stress.Antepenultimate, 3),
    ])
    def test_stress_round_trip(self, stress, min_syllables):
        """Test that adding then detecting stress gives the same stress."""
        max_syllables = 1 if stress is Stress.Monosyllabic else 5
        for count in range(min_syllables, max_syllables + 1):
            word = "la" * count
            assert detect_stress(add_stress(word, stress)) is stress
