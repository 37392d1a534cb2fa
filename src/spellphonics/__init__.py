"""spellphonics — English phonics breakdown for spelling practice."""

from spellphonics.analysis import (
    classify_pattern,
    classify_token,
    get_letter_sound_mapping,
    get_phonics_breakdown,
    get_pronunciation_guide,
    get_syllables,
    identify_blends,
    strip_affixes,
    syllabify_root,
    tokenize_sounds,
)
from spellphonics.speak import (
    SpeechError,
    SpeechSettings,
    speak_phonics,
    speak_phonics_hint,
    speak_syllables,
)
from spellphonics.speak.hints import (
    get_phonics_hint_for_position,
    get_syllable_at_index,
    locate_syllable_at_letter_index,
)
from spellphonics.speak.pronounce import rewrite_for_speech
from spellphonics.types import (
    AffixSplit,
    GuideEntry,
    LetterSound,
    PhonicsBreakdown,
    PhonicsHint,
    SyllableLocation,
)

__all__ = [
    "AffixSplit",
    "GuideEntry",
    "LetterSound",
    "PhonicsBreakdown",
    "PhonicsHint",
    "SpeechError",
    "SpeechSettings",
    "SyllableLocation",
    "classify_pattern",
    "classify_token",
    "get_letter_sound_mapping",
    "get_phonics_breakdown",
    "get_phonics_hint_for_position",
    "get_pronunciation_guide",
    "get_syllable_at_index",
    "get_syllables",
    "identify_blends",
    "locate_syllable_at_letter_index",
    "rewrite_for_speech",
    "speak_phonics",
    "speak_phonics_hint",
    "speak_syllables",
    "strip_affixes",
    "syllabify_root",
    "tokenize_sounds",
]
