"""
Practice runner: walks a verse pool in one mode.

Glue a host would otherwise write itself. It builds a session for the
current verse, folds each finished attempt into the stats, tracks weak
verses and moves on to the next verse, wrapping at the end of the pool.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from loguru import logger

from memoria.content.randomness import RandomSource, default_random
from memoria.content.verse import Verse, next_verse
from memoria.exceptions import InvalidVerse
from memoria.progress.achievements import DEFAULT_ACHIEVEMENTS, Achievement, evaluate
from memoria.progress.stats import AttemptResult, SessionStats, StatsTracker, WeakVerse
from memoria.verification import PracticeMode

from .session import PracticeSession, create_session


class PracticeRunner:
    """Runs one practice mode over a filtered pool of verses."""

    def __init__(
        self,
        pool: Sequence[Verse],
        mode: PracticeMode | str,
        *,
        stats: SessionStats | None = None,
        weak_verses: Sequence[WeakVerse] = (),
        choice_pool: Sequence[Verse] | None = None,
        rng: RandomSource | None = None,
    ):
        """
        Args:
            pool: Verses to practice, already filtered by the host
            mode: Practice mode for every verse
            stats: Stats to continue from
            weak_verses: Weak verses to continue from
            choice_pool: Where choice drills draw distractors (defaults to pool)
            rng: Random source shared by every session
        """
        if not pool:
            raise InvalidVerse("Cannot practice an empty verse pool")
        self.pool = list(pool)
        self.mode = PracticeMode(mode)
        self.stats = stats or SessionStats()
        self.weak_verses: list[WeakVerse] = list(weak_verses)
        self.choice_pool = list(choice_pool) if choice_pool is not None else self.pool
        self.rng = rng or default_random()
        self.index = 0
        self._session: PracticeSession | None = None

    @property
    def current_verse(self) -> Verse:
        return self.pool[self.index]

    def current_session(self) -> PracticeSession:
        """Session for the current verse, created on first access."""
        if self._session is None:
            self._session = create_session(self.mode, self.current_verse, self.choice_pool, self.rng)
        return self._session

    def complete(self, result: AttemptResult, today: date) -> Verse:
        """
        Record a finished attempt and advance.

        Returns:
            The next verse to practice
        """
        self.stats = StatsTracker.reduce(self.stats, result, today)
        if not result.correct:
            self.weak_verses = StatsTracker.record_failure(self.weak_verses, self.current_verse)

        self.index, verse = next_verse(self.pool, self.index)
        self._session = None
        logger.debug(
            f"Runner stats: correct={self.stats.correct} incorrect={self.stats.incorrect} "
            f"streak={self.stats.streak}; next {verse.reference}"
        )
        return verse

    def unlocked_achievements(
        self, achievements: Sequence[Achievement] = DEFAULT_ACHIEVEMENTS
    ) -> list[Achievement]:
        return evaluate(achievements, self.stats)
