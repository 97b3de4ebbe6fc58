"""
Practice session state machines.

Sessions are single-threaded and synchronous. Every transition is caused
either by a verifier outcome or by the host's countdown (``on_tick`` /
``on_expire``); the engine never owns a clock.

Flows:
- FillBlanksSession: PREVIEW -> BLANKED -> SUCCESS | BLANKED (retry) | FAILED
- RecallSession: READ -> BLANKED | FREE_WRITE -> RESULT -> READ (retry);
  BLANKED | FREE_WRITE -> READ (back)
- TimedChallengeSession: READY -> RUNNING -> RESULT
- ChoiceSession: PENDING -> RESULT
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from loguru import logger

from memoria.config import get_settings
from memoria.content.randomness import RandomSource, default_random
from memoria.content.verse import Verse
from memoria.drills.distractors import ChoiceDrill, ChoiceField, build_choice_drill
from memoria.exceptions import InvalidTransition, InvalidVerse
from memoria.progress.stats import AttemptResult
from memoria.verification import PracticeMode, get_verifier
from memoria.verification.base import VerificationResult, Verifier
from memoria.verification.blanks import BlankSpec, blank_verse
from memoria.verification.sequence_aligner import SequenceAlignerVerifier
from memoria.verification.token_overlap import TokenOverlapVerifier


class SessionState(str, Enum):
    """Every state any session can be in."""

    # Fill-blanks
    PREVIEW = "preview"
    BLANKED = "blanked"
    SUCCESS = "success"
    FAILED = "failed"
    # Generic recall
    READ = "read"
    FREE_WRITE = "free_write"
    RESULT = "result"
    # Timed / choice
    READY = "ready"
    RUNNING = "running"
    PENDING = "pending"


TERMINAL_STATES = frozenset({SessionState.SUCCESS, SessionState.FAILED, SessionState.RESULT})


class PracticeSession:
    """Shared bookkeeping for the per-mode state machines."""

    mode: PracticeMode

    def __init__(self, verse: Verse, state: SessionState):
        self.verse = verse
        self.state = state
        self.result: AttemptResult | None = None
        self.last_check: VerificationResult | None = None

    @property
    def is_complete(self) -> bool:
        return self.state in TERMINAL_STATES

    def _require(self, action: str, *states: SessionState) -> None:
        if self.state not in states:
            raise InvalidTransition(action, self.state.value)

    def _finish(self, state: SessionState, result: AttemptResult) -> AttemptResult:
        self.state = state
        self.result = result
        logger.info(
            f"{self.verse.reference} [{result.mode.value}] -> {state.value} "
            f"(correct={result.correct}, attempts={result.attempts_used})"
        )
        return result


def _require_text(verse: Verse) -> None:
    if verse.is_blank:
        raise InvalidVerse(f"Verse {verse.reference!r} has no text")


def _verifier_for(mode: PracticeMode) -> Verifier:
    """Verifier for a mode, with pass thresholds taken from settings."""
    settings = get_settings()
    if mode is PracticeMode.FULL_VERSE:
        return SequenceAlignerVerifier(threshold=settings.sequence_pass_threshold)
    if mode is PracticeMode.TIMED:
        return TokenOverlapVerifier(threshold=settings.overlap_pass_threshold)
    return get_verifier(mode)


class FillBlanksSession(PracticeSession):
    """
    Show the verse for a few seconds, then hide words.

    The learner types the hidden words (any order). Three failed attempts
    reveal the verse and count as incorrect.
    """

    mode = PracticeMode.FILL_BLANKS

    def __init__(
        self,
        verse: Verse,
        rng: RandomSource | None = None,
        *,
        preview_seconds: int | None = None,
        max_attempts: int | None = None,
    ):
        _require_text(verse)
        super().__init__(verse, SessionState.PREVIEW)
        settings = get_settings()
        self.rng = rng or default_random()
        self.seconds_left = settings.preview_seconds if preview_seconds is None else preview_seconds
        self.max_attempts = settings.max_fill_attempts if max_attempts is None else max_attempts
        self.blank_config = settings.get_blank_config()
        self.failed_attempts = 0
        self.blank_spec: BlankSpec | None = None

        if self.seconds_left <= 0:
            self._hide_words()

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.failed_attempts

    @property
    def masked_text(self) -> str | None:
        return self.blank_spec.masked_text() if self.blank_spec else None

    def on_tick(self, seconds_left: int) -> None:
        """Countdown update from the host; blanks appear at zero."""
        if self.state is not SessionState.PREVIEW:
            return
        self.seconds_left = max(0, seconds_left)
        if self.seconds_left == 0:
            self._hide_words()

    def on_expire(self) -> None:
        """Preview countdown finished. Safe to call more than once."""
        if self.state is SessionState.PREVIEW:
            self.seconds_left = 0
            self._hide_words()

    def submit(self, answer: str) -> VerificationResult:
        """Check the typed words against the blanks."""
        self._require("submit an answer", SessionState.BLANKED)
        check = _verifier_for(self.mode).check(answer, self.blank_spec)
        self.last_check = check

        if check.correct:
            self._finish(
                SessionState.SUCCESS,
                AttemptResult(
                    correct=True,
                    attempts_used=self.failed_attempts + 1,
                    mode=self.mode,
                    reference=self.verse.reference,
                    score=check.score,
                ),
            )
            return check

        self.failed_attempts += 1
        if self.failed_attempts >= self.max_attempts:
            self._finish(
                SessionState.FAILED,
                AttemptResult(
                    correct=False,
                    attempts_used=self.max_attempts,
                    mode=self.mode,
                    reference=self.verse.reference,
                    score=check.score,
                ),
            )
        else:
            logger.debug(f"{self.verse.reference}: {self.attempts_left} attempt(s) left")
        return check

    def _hide_words(self) -> None:
        self.blank_spec = blank_verse(self.verse, self.rng, **self.blank_config)
        self.state = SessionState.BLANKED


class RecallSession(PracticeSession):
    """
    Read the verse, then recall it by filling blanks or writing it out.

    Each sub-mode gets one submission; the result can be retried from the
    start. Before submitting, ``back`` returns to the reading step.
    """

    mode = PracticeMode.FULL_VERSE

    def __init__(self, verse: Verse, rng: RandomSource | None = None):
        _require_text(verse)
        super().__init__(verse, SessionState.READ)
        self.rng = rng or default_random()
        self.blank_spec: BlankSpec | None = None

    @property
    def sub_mode(self) -> PracticeMode | None:
        if self.state is SessionState.BLANKED:
            return PracticeMode.FILL_BLANKS
        if self.state is SessionState.FREE_WRITE:
            return PracticeMode.FULL_VERSE
        return None

    def choose_blanks(self) -> BlankSpec:
        """Hide some words and wait for the learner to fill them."""
        self._require("choose fill-blanks", SessionState.READ)
        self.blank_spec = blank_verse(self.verse, self.rng, **get_settings().get_blank_config())
        self.state = SessionState.BLANKED
        return self.blank_spec

    def choose_free_write(self) -> None:
        """Hide the whole verse."""
        self._require("choose free writing", SessionState.READ)
        self.state = SessionState.FREE_WRITE

    def submit(self, answer: str) -> VerificationResult:
        """Verify the answer with the sub-mode's strategy and finish."""
        self._require("submit an answer", SessionState.BLANKED, SessionState.FREE_WRITE)
        mode = self.sub_mode
        target = self.blank_spec if mode is PracticeMode.FILL_BLANKS else self.verse.text
        check = _verifier_for(mode).check(answer, target)
        self.last_check = check
        self._finish(
            SessionState.RESULT,
            AttemptResult(
                correct=check.correct,
                attempts_used=1,
                mode=mode,
                reference=self.verse.reference,
                score=check.score,
            ),
        )
        return check

    def back(self) -> None:
        """Leave the chosen sub-mode without answering and read again."""
        self._require("go back", SessionState.BLANKED, SessionState.FREE_WRITE)
        self.state = SessionState.READ
        self.blank_spec = None

    def retry(self) -> None:
        """Go back to reading the verse."""
        self._require("retry", SessionState.RESULT)
        self.state = SessionState.READ
        self.result = None
        self.last_check = None
        self.blank_spec = None


class TimedChallengeSession(PracticeSession):
    """
    Write as much of the verse as possible before the countdown ends.

    Whatever text exists at expiry is scored; resolving twice returns the
    same result.
    """

    mode = PracticeMode.TIMED

    def __init__(self, verse: Verse, *, duration_seconds: int | None = None):
        _require_text(verse)
        super().__init__(verse, SessionState.READY)
        settings = get_settings()
        self.duration = settings.timed_challenge_seconds if duration_seconds is None else duration_seconds
        self.seconds_left = self.duration
        self.answer = ""

    def start(self) -> None:
        self._require("start", SessionState.READY)
        self.state = SessionState.RUNNING

    def update_answer(self, text: str) -> None:
        """Keep the learner's partial answer."""
        self._require("type an answer", SessionState.RUNNING)
        self.answer = text or ""

    def on_tick(self, seconds_left: int) -> None:
        """Countdown update from the host; resolves at zero."""
        if self.state is not SessionState.RUNNING:
            return
        self.seconds_left = max(0, seconds_left)
        if self.seconds_left == 0:
            self.resolve()

    def on_expire(self) -> AttemptResult:
        """Time is up: score whatever was typed."""
        self.seconds_left = 0
        return self.resolve()

    def resolve(self) -> AttemptResult:
        """Score the current answer now. Idempotent once resolved."""
        if self.result is not None:
            return self.result
        self._require("resolve", SessionState.RUNNING)
        check = _verifier_for(self.mode).check(self.answer, self.verse.text)
        self.last_check = check
        return self._finish(
            SessionState.RESULT,
            AttemptResult(
                correct=check.correct,
                attempts_used=1,
                mode=self.mode,
                reference=self.verse.reference,
                score=check.score,
            ),
        )


class ChoiceSession(PracticeSession):
    """Pick the right text (multiple choice) or reference (matching)."""

    def __init__(self, drill: ChoiceDrill):
        super().__init__(drill.verse, SessionState.PENDING)
        self.drill = drill
        self.mode = (
            PracticeMode.MULTIPLE_CHOICE if drill.field is ChoiceField.TEXT else PracticeMode.MATCH_REFERENCE
        )
        self.selected: str | None = None

    @property
    def options(self) -> tuple[str, ...]:
        return self.drill.options

    def select(self, option: str | int) -> AttemptResult:
        """Record the learner's pick (option text or index)."""
        self._require("select an option", SessionState.PENDING)
        is_correct = self.drill.check(option)
        if isinstance(option, int) and 0 <= option < len(self.options):
            self.selected = self.options[option]
        else:
            self.selected = str(option)
        return self._finish(
            SessionState.RESULT,
            AttemptResult(
                correct=is_correct,
                attempts_used=1,
                mode=self.mode,
                reference=self.verse.reference,
                score=1.0 if is_correct else 0.0,
            ),
        )


def create_session(
    mode: PracticeMode | str,
    verse: Verse,
    pool: Sequence[Verse] = (),
    rng: RandomSource | None = None,
) -> PracticeSession:
    """Build the session for a practice mode."""
    mode = PracticeMode(mode)
    rng = rng or default_random()

    if mode is PracticeMode.FILL_BLANKS:
        return FillBlanksSession(verse, rng)
    if mode is PracticeMode.FULL_VERSE:
        return RecallSession(verse, rng)
    if mode is PracticeMode.TIMED:
        return TimedChallengeSession(verse)

    field = ChoiceField.TEXT if mode is PracticeMode.MULTIPLE_CHOICE else ChoiceField.REFERENCE
    drill = build_choice_drill(verse, pool, field, get_settings().distractor_count, rng)
    return ChoiceSession(drill)
