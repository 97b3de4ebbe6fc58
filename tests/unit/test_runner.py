"""
Unit tests for the practice runner.
"""

from datetime import date

import pytest
from memoria.content.randomness import SeededRandom
from memoria.exceptions import InvalidVerse
from memoria.practice.runner import PracticeRunner
from memoria.practice.session import TimedChallengeSession
from memoria.verification import PracticeMode

TODAY = date(2024, 3, 6)


def _play_timed(runner, answer):
    session = runner.current_session()
    session.start()
    session.update_answer(answer)
    return session.on_expire()


class TestPracticeRunner:
    """Test walking a pool of verses."""

    @pytest.fixture
    def runner(self, sample_pool):
        return PracticeRunner(sample_pool[:3], PracticeMode.TIMED, rng=SeededRandom(0))

    def test_session_matches_mode(self, runner, juan_3_16):
        session = runner.current_session()

        assert isinstance(session, TimedChallengeSession)
        assert session.verse is juan_3_16
        assert runner.current_session() is session

    def test_correct_attempt_advances(self, runner, juan_3_16, salmo_23):
        result = _play_timed(runner, juan_3_16.text)
        next_verse = runner.complete(result, TODAY)

        assert next_verse is salmo_23
        assert runner.stats.correct == 1
        assert runner.weak_verses == []
        assert runner.current_session().verse is salmo_23

    def test_failed_attempt_marks_weak(self, runner, juan_3_16):
        result = _play_timed(runner, "")
        runner.complete(result, TODAY)

        assert runner.stats.incorrect == 1
        assert [w.reference for w in runner.weak_verses] == [juan_3_16.reference]

    def test_wraps_around(self, runner, juan_3_16):
        for verse in list(runner.pool):
            runner.complete(_play_timed(runner, verse.text), TODAY)

        assert runner.current_verse is juan_3_16
        assert runner.stats.streak == 3
        assert [a.id for a in runner.unlocked_achievements()] == ["start", "streak3"]

    def test_choice_mode_uses_choice_pool(self, sample_pool):
        runner = PracticeRunner(sample_pool[:1], "multiple_choice", choice_pool=sample_pool, rng=SeededRandom(1))
        assert len(runner.current_session().options) == 3

    def test_empty_pool_raises(self):
        with pytest.raises(InvalidVerse):
            PracticeRunner([], PracticeMode.TIMED)
