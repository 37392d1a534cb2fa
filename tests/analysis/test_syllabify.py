"""Tests for spelling-based syllabification."""

import pytest

from spellphonics.analysis.syllabify import (
    get_syllables,
    syllabify_root,
)


class TestGetSyllables:
    def test_short_word_single_syllable(self):
        assert get_syllables("cat") == ["cat"]

    def test_vccv_split(self):
        assert get_syllables("happy") == ["hap", "py"]

    def test_vcv_split(self):
        assert get_syllables("open") == ["o", "pen"]

    def test_plural_ies(self):
        assert get_syllables("fairies") == ["fair", "ies"]

    def test_consonant_le_kept_together(self):
        syllables = get_syllables("little")
        assert syllables == ["lit", "tle"]
        assert "t" not in syllables
        assert "le" not in syllables

    def test_prefix_root_suffix(self):
        assert get_syllables("unhappy") == ["un", "hap", "py"]

    def test_stacked_suffixes(self):
        assert get_syllables("hopelessness")[-2:] == ["less", "ness"]

    def test_suffix_ing(self):
        assert get_syllables("jumping") == ["jump", "ing"]

    def test_uppercase_normalized(self):
        assert get_syllables("HAPPY") == ["hap", "py"]

    def test_empty(self):
        assert get_syllables("") == []

    def test_single_letter(self):
        assert get_syllables("a") == ["a"]


class TestSyllabifyRoot:
    def test_short_stem(self):
        assert syllabify_root("hop") == ["hop"]

    def test_vowel_team_not_split(self):
        assert syllabify_root("rain") == ["rain"]

    def test_blend_suppresses_split(self):
        # "ch" after a vowel is a blend, so no break inside "teach"
        assert syllabify_root("teach") == ["teach"]

    def test_vccv(self):
        assert syllabify_root("rabbit") == ["rab", "bit"]
        assert syllabify_root("sunset") == ["sun", "set"]

    def test_lone_consonant_merged(self):
        # raw split is "jum" + "p"
        assert syllabify_root("jump") == ["jump"]

    def test_lone_vowel_kept(self):
        assert syllabify_root("open") == ["o", "pen"]


@pytest.mark.parametrize("word", [
    "cat", "happy", "open", "fairies", "little", "hopelessness",
    "butterfly", "elephant", "Strawberry", "understand", "x", "1234",
    "queue", "rhythm", "beautiful", "catching",
])
class TestInvariants:
    def test_reconstruction(self, word):
        assert "".join(get_syllables(word)) == word.lower()

    def test_no_empty_syllables(self, word):
        assert all(len(s) >= 1 for s in get_syllables(word))

    def test_no_lone_consonants(self, word):
        syllables = get_syllables(word)
        if len(syllables) > 1:
            assert not any(len(s) == 1 and s not in "aeiou" for s in syllables)

