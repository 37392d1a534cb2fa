"""Tests for letter-position syllable lookups."""

from spellphonics.speak.hints import (
    get_phonics_hint_for_position,
    get_syllable_at_index,
    locate_syllable_at_letter_index,
)


class TestSyllableAtIndex:
    def test_first_syllable(self):
        loc = get_syllable_at_index("happy", 1)
        assert loc.syllable == "hap"
        assert loc.syllable_index == 0
        assert loc.position_in_syllable == 1

    def test_second_syllable(self):
        loc = get_syllable_at_index("happy", 3)
        assert loc.syllable == "py"
        assert loc.syllable_index == 1
        assert loc.position_in_syllable == 0

    def test_last_letter(self):
        loc = get_syllable_at_index("happy", 4)
        assert loc.syllable == "py"
        assert loc.position_in_syllable == 1

    def test_out_of_range(self):
        assert get_syllable_at_index("cat", 5) is None
        assert get_syllable_at_index("cat", 3) is None

    def test_negative(self):
        assert get_syllable_at_index("cat", -1) is None

    def test_empty_word(self):
        assert get_syllable_at_index("", 0) is None

    def test_alias(self):
        assert locate_syllable_at_letter_index("open", 0).syllable == "o"


class TestPhonicsHint:
    def test_hint_uses_rewritten_syllable(self):
        hint = get_phonics_hint_for_position("little", 4)
        assert hint.syllable == "tle"
        assert hint.pronunciation == "tul"
        assert hint.syllable_index == 1
        assert hint.hint_text == 'Listen to this sound: "tle"'

    def test_hint_plain_syllable(self):
        hint = get_phonics_hint_for_position("little", 0)
        assert hint.syllable == "lit"
        assert hint.pronunciation == "lit"

    def test_out_of_range(self):
        assert get_phonics_hint_for_position("cat", 9) is None
