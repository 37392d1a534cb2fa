"""Sound tokenization: greedy split of a word into phonics sound units."""

from spellphonics.analysis.syllabify import get_syllables
from spellphonics.tables import load_tables
from spellphonics.types import GuideEntry, LetterSound, SoundType


def _is_two_letter_sound(pair: str) -> bool:
    tables = load_tables()
    return (
        pair in tables.sound_map
        or pair in tables.consonant_blends
        or pair in tables.vowel_teams
        or pair in tables.ending_blends
    )


def tokenize_sounds(word: str) -> list[str]:
    """Split ``word`` into sound tokens, longest match first (3, 2, then 1 letters)."""
    sound_map = load_tables().sound_map
    w = word.lower()
    sounds = []
    i = 0

    while i < len(w):
        three = w[i:i + 3]
        if len(three) == 3 and three in sound_map:
            sounds.append(three)
            i += 3
            continue

        two = w[i:i + 2]
        if len(two) == 2 and _is_two_letter_sound(two):
            sounds.append(two)
            i += 2
            continue

        sounds.append(w[i])
        i += 1

    return sounds


def _has_silent_e(word: str) -> bool:
    w = word.lower()
    if len(w) < 2 or not w.endswith("e"):
        return False
    if load_tables().is_vowel(w[-2]):
        return False
    return len(get_syllables(w)) > 1


def classify_token(token: str, word: str | None = None, is_last: bool = False) -> SoundType:
    """Classify a sound token as vowel, consonant, blend or silent.

    The silent check only applies to the final token of ``word`` (pass
    ``is_last=True``): a lone 'e' after a consonant, in a word of more
    than one syllable.
    """
    t = token.lower()
    if len(t) > 1:
        return "blend"
    if t == "e" and word is not None and is_last and _has_silent_e(word):
        return "silent"
    if load_tables().is_vowel(t):
        return "vowel"
    return "consonant"


def get_pronunciation_guide(word: str) -> list[GuideEntry]:
    """One entry per sound token, with its type and the sound to display."""
    sound_map = load_tables().sound_map
    sounds = tokenize_sounds(word)
    guide = []
    for i, sound in enumerate(sounds):
        sound_type = classify_token(sound, word, is_last=i == len(sounds) - 1)
        display = sound_map.get(sound, sound) if sound_type == "blend" else sound
        guide.append(GuideEntry(letter=sound, type=sound_type, sound=display))
    return guide


def get_letter_sound_mapping(word: str) -> list[LetterSound]:
    """Map every letter to its syllable and flag two-letter blends within it.

    A letter counts as part of a blend if it pairs with its right or left
    neighbour (inside the same syllable) to form a consonant blend or a
    vowel team; the left pairing wins when both apply.
    """
    tables = load_tables()

    def blend_kind(pair: str) -> str | None:
        if pair in tables.vowel_teams:
            return "vowel-team"
        if pair in tables.consonant_blends:
            return "consonant-blend"
        return None

    mapping = []
    letter_index = 0
    for syllable_index, syllable in enumerate(get_syllables(word)):
        for i, letter in enumerate(syllable):
            blend_type = None
            if i < len(syllable) - 1:
                blend_type = blend_kind(syllable[i:i + 2]) or blend_type
            if i > 0:
                blend_type = blend_kind(syllable[i - 1:i + 1]) or blend_type

            mapping.append(LetterSound(
                letter=letter,
                letter_index=letter_index,
                syllable=syllable,
                syllable_index=syllable_index,
                is_part_of_blend=blend_type is not None,
                blend_type=blend_type,
            ))
            letter_index += 1

    return mapping
