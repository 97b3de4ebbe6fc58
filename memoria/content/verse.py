"""
Verse data model.

Verses come from a corpus owned by the host; the engine only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from memoria.exceptions import InvalidVerse, VerseNotFound


class Testament(str, Enum):
    """Which testament a verse belongs to."""

    OLD = "AT"  # Antiguo Testamento
    NEW = "NT"  # Nuevo Testamento


class Difficulty(str, Enum):
    """Difficulty tier of a verse."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @classmethod
    def parse(cls, value: "str | Difficulty") -> "Difficulty":
        """Accept enum values, English names or the corpus' Spanish labels."""
        if isinstance(value, Difficulty):
            return value
        key = value.strip().lower()
        key = _SPANISH_LABELS.get(key, key)
        return cls(key)


_SPANISH_LABELS = {
    "principiante": "beginner",
    "intermedio": "intermediate",
    "avanzado": "advanced",
}


@dataclass(frozen=True)
class Verse:
    """A single scripture verse, identified by its reference."""

    reference: str
    text: str
    testament: Testament = Testament.NEW
    theme: str = ""
    difficulty: Difficulty = Difficulty.BEGINNER

    @classmethod
    def from_dict(cls, data: dict) -> "Verse":
        """Build a verse from a corpus record ({ref|reference, text, book|testament, ...})."""
        return cls(
            reference=data.get("reference") or data.get("ref", ""),
            text=data.get("text", ""),
            testament=Testament(data.get("testament") or data.get("book") or "NT"),
            theme=data.get("theme", ""),
            difficulty=Difficulty.parse(data.get("difficulty") or "beginner"),
        )

    @property
    def tokens(self) -> list[str]:
        """Whitespace-separated words, punctuation attached."""
        return self.text.split()

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


def find_verse(corpus: Iterable[Verse], reference: str) -> Verse:
    """Look up a verse by reference, raising VerseNotFound on a miss."""
    for verse in corpus:
        if verse.reference == reference:
            return verse
    raise VerseNotFound(reference)


def next_verse(pool: Sequence[Verse], index: int) -> tuple[int, Verse]:
    """Return the (index, verse) after ``index``, wrapping to the start."""
    if not pool:
        raise InvalidVerse("Verse pool is empty")
    next_index = (index + 1) % len(pool)
    return next_index, pool[next_index]
