"""
Token-overlap scorer for the timed challenge.

Deliberately permissive: no accent folding, no punctuation stripping, and a
user word counts when it is a substring of a verse word or contains one.
It scores whatever text exists when the countdown ends.
"""

from typing import Sequence

from loguru import logger

from memoria.exceptions import InvalidVerse

from . import PracticeMode, register
from .base import VerificationResult, round_half_up

PASS_PERCENT = 70.0  # inclusive


def count_overlapping(user_words: Sequence[str], verse_words: Sequence[str]) -> int:
    """Count user words that overlap (substring either way) some verse word."""
    return sum(
        1
        for word in user_words
        if any(word in verse_word or verse_word in word for verse_word in verse_words)
    )


@register(PracticeMode.TIMED)
class TokenOverlapVerifier:
    """Partial-word recall scored as a percentage of verse length."""

    def __init__(self, threshold: float = PASS_PERCENT):
        self.threshold = threshold

    def describe(self) -> str:
        return "Partial words count; 70% of the verse length passes"

    def check(self, answer: str, target: str) -> VerificationResult:
        """Score the answer against the verse text."""
        verse_words = (target or "").lower().split()
        if not verse_words:
            raise InvalidVerse("Verse text is empty")

        user_words = (answer or "").lower().split()
        matched = count_overlapping(user_words, verse_words)
        accuracy = matched * 100 / len(verse_words)
        is_correct = accuracy >= self.threshold

        logger.debug(f"Token overlap: {matched} matching words, {accuracy:.1f}%")

        return VerificationResult(
            correct=is_correct,
            score=accuracy,
            max_score=100.0,
            feedback=f"{'Passed' if is_correct else 'Not yet'}: {round_half_up(accuracy)}% recalled",
            user_answer=answer or "",
            correct_answer=target,
        )
