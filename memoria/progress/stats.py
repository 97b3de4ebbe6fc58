"""
Session statistics as a pure reducer.

The host persists SessionStats and WeakVerse lists however it likes; this
module only computes the next value from the previous one.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Sequence

from loguru import logger

from memoria.content.verse import Verse
from memoria.verification import PracticeMode

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class AttemptResult:
    """Outcome of one verse in one session."""

    correct: bool
    attempts_used: int
    mode: PracticeMode
    reference: str | None = None
    score: float | None = None  # verifier score, when a verifier was involved

    def __post_init__(self):
        if self.attempts_used < 1:
            raise ValueError(f"attempts_used must be at least 1, got {self.attempts_used}")


@dataclass(frozen=True)
class SessionStats:
    """Running totals for a learner."""

    correct: int = 0
    incorrect: int = 0
    streak: int = 0  # consecutive correct answers
    best_streak: int = 0
    active_days: frozenset[date] = field(default_factory=frozenset)
    weekly_progress: tuple[int, ...] = (0,) * DAYS_PER_WEEK  # Monday first

    @property
    def total(self) -> int:
        return self.correct + self.incorrect

    @property
    def accuracy(self) -> float:
        """Share of correct answers (0.0 with no answers yet)."""
        return self.correct / self.total if self.total else 0.0


@dataclass(frozen=True)
class WeakVerse:
    """A verse the learner keeps missing."""

    verse: Verse
    failures: int = 1

    @property
    def reference(self) -> str:
        return self.verse.reference


class StatsTracker:
    """
    Stateless reducers over attempt outcomes.

    Correct answers extend the streak and count toward the day of the week;
    a wrong answer resets the streak. Nothing here reads back into
    verification.
    """

    @staticmethod
    def reduce(previous: SessionStats, result: AttemptResult, today: date) -> SessionStats:
        """Fold one attempt into the stats."""
        if not result.correct:
            return replace(previous, incorrect=previous.incorrect + 1, streak=0)

        streak = previous.streak + 1
        weekly = list(previous.weekly_progress)
        weekly[today.weekday()] += 1
        return replace(
            previous,
            correct=previous.correct + 1,
            streak=streak,
            best_streak=max(previous.best_streak, streak),
            active_days=previous.active_days | {today},
            weekly_progress=tuple(weekly),
        )

    @classmethod
    def reduce_all(
        cls, results: Sequence[AttemptResult], today: date, initial: SessionStats | None = None
    ) -> SessionStats:
        """Fold a sequence of attempts made on the same day."""
        stats = initial or SessionStats()
        for result in results:
            stats = cls.reduce(stats, result, today)
        return stats

    @staticmethod
    def record_failure(weak: Sequence[WeakVerse], verse: Verse) -> list[WeakVerse]:
        """Add ``verse`` to the weak list or bump its failure count."""
        updated: list[WeakVerse] = []
        found = False
        for entry in weak:
            if entry.reference == verse.reference:
                entry = replace(entry, failures=entry.failures + 1)
                found = True
            updated.append(entry)
        if not found:
            updated.append(WeakVerse(verse=verse))
        logger.debug(f"Weak verse recorded: {verse.reference}")
        return updated

    @staticmethod
    def review_queue(weak: Sequence[WeakVerse]) -> list[Verse]:
        """Weak verses, most failures first (ties keep insertion order)."""
        return [entry.verse for entry in sorted(weak, key=lambda e: -e.failures)]
