"""Syllabification: spelling-based splitting of words into syllables."""

from spellphonics.analysis.affixes import strip_affixes
from spellphonics.tables import load_tables


def _is_lone_consonant(syllable: str) -> bool:
    return len(syllable) == 1 and not load_tables().is_vowel(syllable)


def _merge_fragments(syllables: list[str]) -> list[str]:
    """Fold single-consonant fragments into their neighbour.

    A lone consonant joins the syllable before it; a lone consonant at the
    start absorbs the syllable after it. A lone vowel is a real open
    syllable ("o-pen") and stays.
    """
    merged: list[str] = []
    for syl in syllables:
        if merged and (_is_lone_consonant(syl) or _is_lone_consonant(merged[-1])):
            merged[-1] += syl
        else:
            merged.append(syl)
    return merged


def syllabify_root(stem: str) -> list[str]:
    """Split an affix-free stem into syllables.

    Single greedy pass, left to right:

    - a vowel team is consumed whole and never split;
    - VCV breaks before the consonant ("o-pen") unless consonant + vowel
      is a consonant blend;
    - VCCV breaks between the consonants ("hap-py") unless they form a
      consonant blend or an ending blend.
    """
    if len(stem) <= 3:
        return [stem]

    tables = load_tables()
    vowel = tables.is_vowel
    syllables: list[str] = []
    current = ""
    i = 0

    while i < len(stem):
        current += stem[i]

        if i < len(stem) - 1:
            curr = stem[i]
            nxt = stem[i + 1]
            after_next = stem[i + 2] if i < len(stem) - 2 else ""

            if curr + nxt in tables.vowel_teams:
                current += nxt
                i += 2
                continue

            if vowel(curr) and not vowel(nxt) and after_next and vowel(after_next):
                if nxt + after_next not in tables.consonant_blends:
                    syllables.append(current)
                    current = ""
            elif not vowel(curr) and not vowel(nxt) and i > 0 and vowel(stem[i - 1]):
                pair = curr + nxt
                if pair not in tables.consonant_blends and pair not in tables.ending_blends:
                    syllables.append(current)
                    current = ""

        i += 1

    if current:
        syllables.append(current)

    merged = _merge_fragments(syllables)
    return merged if merged else [stem]


def get_syllables(word: str) -> list[str]:
    """Break ``word`` into syllables: prefixes + root syllables + suffixes.

    The result always joins back to ``word.lower()``.
    """
    w = word.lower()
    if not w:
        return []
    if len(w) <= 3:
        return [w]

    split = strip_affixes(w)
    return [*split.prefixes, *syllabify_root(split.stem), *split.suffixes]

