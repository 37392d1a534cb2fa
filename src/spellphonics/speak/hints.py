"""Letter-position lookups for syllable-based spelling hints."""

from spellphonics.analysis.syllabify import get_syllables
from spellphonics.speak.pronounce import rewrite_for_speech
from spellphonics.types import PhonicsHint, SyllableLocation

HINT_TEMPLATE = 'Listen to this sound: "{syllable}"'


def get_syllable_at_index(word: str, letter_index: int) -> SyllableLocation | None:
    """Find the syllable holding ``word[letter_index]``.

    Returns None when the index is outside ``0 <= letter_index < len(word)``.
    """
    position = 0
    for i, syllable in enumerate(get_syllables(word)):
        start = position
        end = position + len(syllable)
        if start <= letter_index < end:
            return SyllableLocation(
                syllable=syllable,
                syllable_index=i,
                position_in_syllable=letter_index - start,
            )
        position = end
    return None


locate_syllable_at_letter_index = get_syllable_at_index


def get_phonics_hint_for_position(word: str, letter_index: int) -> PhonicsHint | None:
    """Hint for one letter: say its whole syllable rather than the letter name."""
    location = get_syllable_at_index(word, letter_index)
    if location is None:
        return None

    return PhonicsHint(
        syllable=location.syllable,
        pronunciation=rewrite_for_speech(location.syllable),
        hint_text=HINT_TEMPLATE.format(syllable=location.syllable),
        syllable_index=location.syllable_index,
    )
