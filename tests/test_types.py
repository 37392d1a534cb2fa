"""Tests for core data types."""

from spellphonics.types import (
    AffixSplit,
    GuideEntry,
    LetterSound,
    PhonicsBreakdown,
    PhonicsHint,
    SyllableLocation,
)


def test_affix_split_join():
    split = AffixSplit(prefixes=["un"], stem="help", suffixes=["ful", "ness"])
    assert split.join() == "unhelpfulness"


def test_breakdown_to_dict():
    b = PhonicsBreakdown(
        word="ship", syllables=["ship"], sounds=["sh", "i", "p"],
        blends=["sh"], pattern="CCVC (consonant blend)",
    )
    d = b.to_dict()
    assert d["word"] == "ship"
    assert d["sounds"] == ["sh", "i", "p"]
    assert d["pattern"] == "CCVC (consonant blend)"


def test_guide_entry_to_dict():
    entry = GuideEntry(letter="ai", type="blend", sound="ā")
    assert entry.to_dict() == {"letter": "ai", "type": "blend", "sound": "ā"}


def test_letter_sound_defaults():
    ls = LetterSound(letter="c", letter_index=0, syllable="cat", syllable_index=0)
    assert ls.is_part_of_blend is False
    assert ls.blend_type is None
    assert ls.to_dict()["syllable"] == "cat"


def test_syllable_location_equality():
    a = SyllableLocation(syllable="py", syllable_index=1, position_in_syllable=0)
    b = SyllableLocation("py", 1, 0)
    assert a == b


def test_hint_to_dict():
    hint = PhonicsHint(syllable="tle", pronunciation="tul",
                       hint_text='Listen to this sound: "tle"', syllable_index=1)
    assert hint.to_dict()["pronunciation"] == "tul"
