"""Phonics lookup tables, loaded once from the packaged YAML file."""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
TABLES_PATH = DATA_DIR / "phonics.yaml"

# Earlier sections win when a spelling appears twice
PRONUNCIATION_SECTIONS = ("plural", "suffixes", "consonant_le", "prefixes", "clusters")


@dataclass(frozen=True)
class PhonicsTables:
    """Read-only view of every lookup table the engine uses."""
    vowels: frozenset[str]
    consonant_blends: tuple[str, ...]     # declaration order kept for display
    ending_blends: tuple[str, ...]
    vowel_teams: tuple[str, ...]
    suffixes: tuple[str, ...]             # longest first
    prefixes: tuple[str, ...]             # longest first
    sound_map: Mapping[str, str]
    pronunciation: Mapping[str, str]      # every section, exact lookup
    suffix_pronunciation: tuple[tuple[str, str], ...]  # every entry, longest key first

    def is_vowel(self, ch: str) -> bool:
        return ch in self.vowels


def _string_list(raw: dict, key: str) -> list[str]:
    value = raw.get(key)
    if isinstance(value, dict):
        # Grouped table: flatten groups in file order
        items = [item for group in value.values() for item in group]
    elif isinstance(value, list):
        items = value
    else:
        raise ValueError(f"Table '{key}' missing or malformed in {TABLES_PATH}")
    return [str(item).lower() for item in items]


def _longest_first(items: list[str]) -> tuple[str, ...]:
    # sorted() is stable, so equal-length entries keep file order
    unique = list(dict.fromkeys(items))
    return tuple(sorted(unique, key=len, reverse=True))


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Missing phonics tables: {path}")
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Phonics tables must be a mapping: {path}")
    return data


def build_tables(raw: dict) -> PhonicsTables:
    """Freeze a raw table mapping into a :class:`PhonicsTables`."""
    sections = raw.get("pronunciation")
    if not isinstance(sections, dict):
        raise ValueError("Table 'pronunciation' missing or malformed")

    pronunciation: dict[str, str] = {}
    for name in PRONUNCIATION_SECTIONS:
        for key, value in (sections.get(name) or {}).items():
            key, value = str(key).lower(), str(value)
            pronunciation.setdefault(key, value)

    sound_map = {str(k).lower(): str(v) for k, v in (raw.get("sound_map") or {}).items()}

    return PhonicsTables(
        vowels=frozenset(_string_list(raw, "vowels")),
        consonant_blends=tuple(_string_list(raw, "consonant_blends")),
        ending_blends=tuple(_string_list(raw, "ending_blends")),
        vowel_teams=tuple(_string_list(raw, "vowel_teams")),
        suffixes=_longest_first(_string_list(raw, "suffixes")),
        prefixes=_longest_first(_string_list(raw, "prefixes")),
        sound_map=MappingProxyType(sound_map),
        pronunciation=MappingProxyType(pronunciation),
        suffix_pronunciation=tuple(
            sorted(pronunciation.items(), key=lambda kv: len(kv[0]), reverse=True)
        ),
    )


@lru_cache(maxsize=1)
def load_tables() -> PhonicsTables:
    """Load and freeze the packaged phonics tables (cached after first call)."""
    tables = build_tables(_load_yaml(TABLES_PATH))
    logger.debug(
        f"Loaded phonics tables: {len(tables.suffixes)} suffixes, "
        f"{len(tables.prefixes)} prefixes, {len(tables.pronunciation)} pronunciations"
    )
    return tables
