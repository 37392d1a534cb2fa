"""Phonics pattern labels and blend detection for display."""

from spellphonics.tables import load_tables

CVC = "CVC (short vowel)"
CVCE = "CVCe (magic e)"
CVVC = "CVVC (vowel team)"
CCVC = "CCVC (consonant blend)"
BASIC = "basic pattern"


def classify_pattern(word: str) -> str:
    """Label ``word`` with the first matching phonics pattern.

    Checked in order: CVC, CVCe, any vowel team, leading consonant blend,
    then the basic label.
    """
    tables = load_tables()
    vowel = tables.is_vowel
    w = word.lower()

    if len(w) == 3 and not vowel(w[0]) and vowel(w[1]) and not vowel(w[2]):
        return CVC

    if len(w) >= 4 and w.endswith("e"):
        if not vowel(w[-2]) and vowel(w[-3]):
            return CVCE

    if any(team in w for team in tables.vowel_teams):
        return CVVC

    if any(w.startswith(blend) for blend in tables.consonant_blends):
        return CCVC

    return BASIC


def identify_blends(word: str) -> list[str]:
    """Return consonant blends, vowel teams and ending blends present in ``word``."""
    tables = load_tables()
    w = word.lower()
    found = [
        pattern
        for group in (tables.consonant_blends, tables.vowel_teams, tables.ending_blends)
        for pattern in group
        if pattern in w
    ]
    return list(dict.fromkeys(found))
