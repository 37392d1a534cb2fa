"""Tests for speech-safe syllable rewriting."""

import pytest

from spellphonics.speak.pronounce import rewrite_for_speech


class TestExactMatch:
    def test_consonant_le(self):
        assert rewrite_for_speech("tle") == "tul"

    def test_unchanged_suffix(self):
        assert rewrite_for_speech("ing") == "ing"

    def test_suffix(self):
        assert rewrite_for_speech("tion") == "shun"
        assert rewrite_for_speech("ies") == "eez"

    def test_case_insensitive(self):
        assert rewrite_for_speech("TLE") == "tul"

    def test_cluster(self):
        assert rewrite_for_speech("th") == "thuh"

    def test_plural_s_not_spelled(self):
        assert rewrite_for_speech("s") == "ss"


class TestSuffixMatch:
    def test_longest_suffix(self):
        assert rewrite_for_speech("nation") == "na-shun"

    def test_consonant_le_suffix(self):
        assert rewrite_for_speech("castle") == "ca-sul"

    def test_trivial_prefix_falls_back_to_shorter_key(self):
        # "s" + "ing" is skipped (one letter, no vowel), "si" + "ng" is taken
        assert rewrite_for_speech("sing") == "si-ng"

    def test_every_table_section_matches_at_the_end(self):
        assert rewrite_for_speech("bath") == "ba-thuh"
        assert rewrite_for_speech("fire") == "fi-ree"


class TestSchwaFallback:
    def test_single_consonant(self):
        assert rewrite_for_speech("t") == "tuh"

    def test_two_consonants(self):
        assert rewrite_for_speech("bl") == "bluh"

    def test_three_consonants(self):
        assert rewrite_for_speech("str") == "struh"

    def test_y_is_not_a_vowel(self):
        assert rewrite_for_speech("py") == "pyuh"
        assert rewrite_for_speech("by") == "byuh"

    def test_three_letters_ending_in_y(self):
        # "ly" is a known suffix, but "f" alone is not a usable remainder
        assert rewrite_for_speech("fly") == "flyuh"


@pytest.mark.parametrize("syllable", ["hap", "lit", "pen", "fair", "o"])
def test_pronounceable_unchanged(syllable):
    assert rewrite_for_speech(syllable) == syllable
