"""Rewrite syllables into spellings a speech engine reads correctly."""

import logging

from spellphonics.tables import load_tables

logger = logging.getLogger(__name__)

SCHWA = "uh"


def _has_vowel(text: str) -> bool:
    vowel = load_tables().is_vowel
    return any(vowel(ch) for ch in text)


def rewrite_for_speech(syllable: str) -> str:
    """Return the text to hand to the speech engine for ``syllable``.

    Resolution order:

    1. exact table entry ("tle" -> "tul");
    2. longest known suffix at the end of a longer syllable, joined to a
       pronounceable remainder with a hyphen ("castle" -> "ca-sul");
    3. a vowel-less fragment of up to three letters gets a schwa ("t" -> "tuh");
    4. anything else is returned unchanged.
    """
    tables = load_tables()
    lower = syllable.lower()

    exact = tables.pronunciation.get(lower)
    if exact is not None:
        return exact

    for suffix, spoken in tables.suffix_pronunciation:
        if len(lower) <= len(suffix) or not lower.endswith(suffix):
            continue
        prefix = lower[: -len(suffix)]
        if _has_vowel(prefix) or len(prefix) >= 2:
            return f"{prefix}-{spoken}"

    if 1 <= len(lower) <= 3 and not _has_vowel(lower):
        logger.debug(f"No vowel in {lower!r}, adding schwa")
        return lower + SCHWA

    return syllable
