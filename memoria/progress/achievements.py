"""
Achievements as pure predicates over a stats snapshot.

Icons, colours and other presentation belong to the host; unlocked status
is computed on demand and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from .stats import SessionStats


@dataclass(frozen=True)
class Achievement:
    """A named milestone."""

    id: str
    name: str
    description: str
    predicate: Callable[[SessionStats], bool]

    def is_unlocked(self, stats: SessionStats) -> bool:
        return bool(self.predicate(stats))


DEFAULT_ACHIEVEMENTS: tuple[Achievement, ...] = (
    Achievement("start", "Primer Paso", "Completa tu primer versículo", lambda s: s.correct >= 1),
    Achievement("streak3", "En Fuego", "Racha de 3 versículos", lambda s: s.streak >= 3),
    Achievement("master10", "Aprendiz", "10 versículos correctos", lambda s: s.correct >= 10),
    Achievement("streak10", "Imparable", "Racha de 10 versículos", lambda s: s.streak >= 10),
    Achievement("expert50", "Maestro", "50 versículos correctos", lambda s: s.correct >= 50),
)


def evaluate(achievements: Iterable[Achievement], stats: SessionStats) -> list[Achievement]:
    """Return the achievements whose predicate holds for ``stats``."""
    return [a for a in achievements if a.is_unlocked(stats)]


def get_achievement(achievement_id: str) -> Achievement | None:
    """Look up a default achievement by id."""
    for achievement in DEFAULT_ACHIEVEMENTS:
        if achievement.id == achievement_id:
            return achievement
    return None
