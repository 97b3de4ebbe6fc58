"""
Distractor generation for choice drills.

Wrong options are other verses from the same pool. The pool is filtered
by the host (theme, difficulty) before it gets here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from loguru import logger

from memoria.content.randomness import RandomSource, default_random, shuffled
from memoria.content.verse import Verse

DEFAULT_DISTRACTORS = 2


class ChoiceField(str, Enum):
    """Which verse field the options show."""

    TEXT = "text"  # multiple choice: pick the verse text
    REFERENCE = "reference"  # reference matching: pick the citation


def pick_distractors(
    pool: Sequence[Verse],
    exclude: Verse,
    k: int = DEFAULT_DISTRACTORS,
    rng: RandomSource | None = None,
) -> list[Verse]:
    """
    Sample up to ``k`` wrong verses from ``pool``.

    Verses sharing the excluded verse's reference or text are never
    returned. A short pool yields a short list, possibly empty.
    """
    seen: set[str] = set()
    candidates: list[Verse] = []
    for verse in pool:
        if verse.reference == exclude.reference or verse.text == exclude.text:
            continue
        if verse.reference in seen:
            continue
        seen.add(verse.reference)
        candidates.append(verse)

    if len(candidates) < k:
        logger.debug(f"Pool has only {len(candidates)} distractor(s) for {exclude.reference}, wanted {k}")

    return shuffled(candidates, rng or default_random())[:max(k, 0)]


@dataclass(frozen=True)
class ChoiceDrill:
    """A verse with its shuffled options."""

    verse: Verse
    field: ChoiceField
    options: tuple[str, ...]

    @property
    def answer(self) -> str:
        return getattr(self.verse, self.field.value)

    @property
    def correct_index(self) -> int:
        return self.options.index(self.answer)

    @property
    def is_playable(self) -> bool:
        """False when no distractor was available; the host should skip the drill."""
        return len(self.options) > 1

    def check(self, selected: str | int) -> bool:
        """Judge a selection given as option text or option index."""
        if isinstance(selected, int):
            if not 0 <= selected < len(self.options):
                return False
            selected = self.options[selected]
        return selected == self.answer


def build_choice_drill(
    verse: Verse,
    pool: Sequence[Verse],
    field: ChoiceField | str = ChoiceField.TEXT,
    k: int = DEFAULT_DISTRACTORS,
    rng: RandomSource | None = None,
) -> ChoiceDrill:
    """Combine the correct option with distractors and shuffle them."""
    field = ChoiceField(field)
    rng = rng or default_random()
    answer = getattr(verse, field.value)

    wrong: list[str] = []
    for distractor in pick_distractors(pool, verse, k, rng):
        option = getattr(distractor, field.value)
        # Distinct references can still share a text in some corpora
        if option != answer and option not in wrong:
            wrong.append(option)

    options = tuple(shuffled([answer, *wrong], rng))
    return ChoiceDrill(verse=verse, field=field, options=options)
