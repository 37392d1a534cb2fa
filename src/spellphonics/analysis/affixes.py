"""Affix stripping: peel known prefixes and suffixes off a word."""

import logging

from spellphonics.tables import load_tables
from spellphonics.types import AffixSplit

logger = logging.getLogger(__name__)

PLURAL_IES = "ies"


def _valid_stem(stem: str) -> bool:
    """A stem must keep at least two letters and a written vowel."""
    tables = load_tables()
    return len(stem) >= 2 and any(tables.is_vowel(ch) for ch in stem)


def _strip_suffixes(word: str) -> tuple[str, list[str]]:
    suffixes = load_tables().suffixes
    remaining = word
    found: list[str] = []

    matched = True
    while matched and len(remaining) > 2:
        matched = False
        for suffix in suffixes:
            if not remaining.endswith(suffix) or len(remaining) <= len(suffix) + 1:
                continue
            stem = remaining[: -len(suffix)]
            if _valid_stem(stem):
                found.insert(0, suffix)
                remaining = stem
                matched = True
                break

    return remaining, found


def _strip_prefixes(word: str) -> tuple[list[str], str]:
    prefixes = load_tables().prefixes
    remaining = word
    found: list[str] = []

    matched = True
    while matched and len(remaining) > 2:
        matched = False
        for prefix in prefixes:
            if not remaining.startswith(prefix) or len(remaining) <= len(prefix) + 1:
                continue
            stem = remaining[len(prefix):]
            if _valid_stem(stem):
                found.append(prefix)
                remaining = stem
                matched = True
                break

    return found, remaining


def strip_affixes(word: str) -> AffixSplit:
    """Split ``word`` into prefixes, stem and suffixes.

    Suffixes are stripped before prefixes, each pass repeating until no
    table entry matches, so stacked suffixes ("hope-less-ness") all come
    off. A word ending in "ies" keeps "ies" as its only suffix and skips
    the generic passes. The parts always join back to ``word.lower()``.
    """
    w = word.lower()

    if w.endswith(PLURAL_IES) and len(w) - len(PLURAL_IES) >= 2:
        stem = w[: -len(PLURAL_IES)]
        logger.debug(f"{w!r}: plural -ies, stem {stem!r}")
        return AffixSplit(prefixes=[], stem=stem, suffixes=[PLURAL_IES])

    remaining, suffixes = _strip_suffixes(w)
    prefixes, stem = _strip_prefixes(remaining)

    if prefixes or suffixes:
        logger.debug(f"{w!r}: prefixes={prefixes} stem={stem!r} suffixes={suffixes}")
    return AffixSplit(prefixes=prefixes, stem=stem, suffixes=suffixes)
