"""Core data types for spellphonics."""

from dataclasses import dataclass
from typing import Literal

SoundType = Literal["vowel", "consonant", "blend", "silent"]
BlendType = Literal["vowel-team", "consonant-blend"]


@dataclass
class AffixSplit:
    """A word split into prefixes, stem and suffixes."""
    prefixes: list[str]
    stem: str
    suffixes: list[str]

    def join(self) -> str:
        return "".join(self.prefixes) + self.stem + "".join(self.suffixes)


@dataclass
class PhonicsBreakdown:
    """Everything the phonics view shows for one word."""
    word: str                # lowercased
    syllables: list[str]
    sounds: list[str]        # greedy sound tokens
    blends: list[str]        # blends / vowel teams found, no duplicates
    pattern: str             # classification label

    def to_dict(self) -> dict:
        """Serialize for JSON output."""
        return {
            "word": self.word,
            "syllables": list(self.syllables),
            "sounds": list(self.sounds),
            "blends": list(self.blends),
            "pattern": self.pattern,
        }


@dataclass
class GuideEntry:
    """One coloured block in the pronunciation guide."""
    letter: str              # the token text, may be several letters
    type: SoundType
    sound: str

    def to_dict(self) -> dict:
        return {"letter": self.letter, "type": self.type, "sound": self.sound}


@dataclass
class LetterSound:
    """How a single letter sits inside its syllable."""
    letter: str
    letter_index: int
    syllable: str
    syllable_index: int
    is_part_of_blend: bool = False
    blend_type: BlendType | None = None

    def to_dict(self) -> dict:
        return {
            "letter": self.letter,
            "letter_index": self.letter_index,
            "syllable": self.syllable,
            "syllable_index": self.syllable_index,
            "is_part_of_blend": self.is_part_of_blend,
            "blend_type": self.blend_type,
        }


@dataclass
class SyllableLocation:
    """The syllable holding a given letter position."""
    syllable: str
    syllable_index: int
    position_in_syllable: int


@dataclass
class PhonicsHint:
    """A spoken hint for a letter: the sound of its whole syllable."""
    syllable: str
    pronunciation: str       # text handed to the speech engine
    hint_text: str
    syllable_index: int

    def to_dict(self) -> dict:
        return {
            "syllable": self.syllable,
            "pronunciation": self.pronunciation,
            "hint_text": self.hint_text,
            "syllable_index": self.syllable_index,
        }
