"""Spelling analysis: syllables, sound tokens and phonics patterns for a word."""

from spellphonics.analysis.affixes import strip_affixes
from spellphonics.analysis.patterns import classify_pattern, identify_blends
from spellphonics.analysis.sounds import (
    classify_token,
    get_letter_sound_mapping,
    get_pronunciation_guide,
    tokenize_sounds,
)
from spellphonics.analysis.syllabify import (
    get_syllables,
    syllabify_root,
)
from spellphonics.types import PhonicsBreakdown


def get_phonics_breakdown(word: str) -> PhonicsBreakdown:
    """Build the full phonics breakdown for ``word``.

    Nothing is cached; each call recomputes from the word.
    """
    return PhonicsBreakdown(
        word=word.lower(),
        syllables=get_syllables(word),
        sounds=tokenize_sounds(word),
        blends=identify_blends(word),
        pattern=classify_pattern(word),
    )


__all__ = [
    "classify_pattern",
    "classify_token",
    "get_letter_sound_mapping",
    "get_phonics_breakdown",
    "get_pronunciation_guide",
    "get_syllables",
    "identify_blends",
    "strip_affixes",
    "syllabify_root",
    "tokenize_sounds",
]
