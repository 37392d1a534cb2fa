"""Speech helpers: feed phonics text, one unit at a time, to a speech engine.

The engine itself is injected. A speaker is any callable
``speak(text, rate)`` that blocks until the utterance is done; pauses
between units, voice choice and cancellation are up to the speaker.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from spellphonics.analysis.sounds import tokenize_sounds
from spellphonics.analysis.syllabify import get_syllables
from spellphonics.speak.hints import get_phonics_hint_for_position
from spellphonics.speak.pronounce import rewrite_for_speech

logger = logging.getLogger(__name__)

Speaker = Callable[[str, float], None]
IndexCallback = Callable[[int], None]


class SpeechError(Exception):
    """Raised by a speaker when a single utterance fails."""


@dataclass
class SpeechSettings:
    """Speaking rates (1.0 = engine default). Slow by default for children."""
    phonics_rate: float = 0.5      # sound-by-sound
    syllable_rate: float = 0.6     # syllable-by-syllable
    hint_rate: float = 0.5         # single-syllable hints


def _say(speak: Speaker, text: str, rate: float) -> bool:
    """Speak one unit. A SpeechError skips the unit instead of aborting."""
    try:
        speak(text, rate)
    except SpeechError as e:
        logger.warning(f"Speech failed for {text!r}: {e}")
        return False
    return True


def speak_phonics(
    word: str,
    speak: Speaker,
    on_sound: IndexCallback | None = None,
    settings: SpeechSettings | None = None,
) -> list[str]:
    """Speak ``word`` sound token by sound token.

    Returns the tokens the speaker accepted; a token that failed with
    SpeechError is left out.
    """
    settings = settings or SpeechSettings()
    sounds = tokenize_sounds(word)
    logger.info(f"Speaking {len(sounds)} sounds for {word!r}")

    spoken = []
    for i, sound in enumerate(sounds):
        if on_sound:
            on_sound(i)
        if _say(speak, sound, settings.phonics_rate):
            spoken.append(sound)
    return spoken


def speak_syllables(
    word: str,
    speak: Speaker,
    on_syllable: IndexCallback | None = None,
    settings: SpeechSettings | None = None,
) -> list[str]:
    """Speak ``word`` syllable by syllable ("con" - "ven" - "ient").

    Each syllable goes through :func:`rewrite_for_speech` first. Returns
    the texts the speaker accepted, leaving out any that failed.
    """
    settings = settings or SpeechSettings()
    syllables = get_syllables(word)
    logger.info(f"Speaking {len(syllables)} syllables for {word!r}")

    spoken = []
    for i, syllable in enumerate(syllables):
        if on_syllable:
            on_syllable(i)
        text = rewrite_for_speech(syllable)
        if _say(speak, text, settings.syllable_rate):
            spoken.append(text)
    return spoken


def speak_phonics_hint(
    word: str,
    letter_index: int,
    speak: Speaker,
    settings: SpeechSettings | None = None,
) -> str | None:
    """Speak the syllable sound for one letter.

    Returns the spoken text, or None when the index is out of range or the
    speaker failed.
    """
    settings = settings or SpeechSettings()
    hint = get_phonics_hint_for_position(word, letter_index)
    if hint is None:
        return None

    if not _say(speak, hint.pronunciation, settings.hint_rate):
        return None
    return hint.pronunciation


__all__ = [
    "Speaker",
    "SpeechError",
    "SpeechSettings",
    "speak_phonics",
    "speak_phonics_hint",
    "speak_syllables",
]
