"""
Sequence-alignment verifier for full-verse recall.

Words must come in verse order. The learner may drop a single word
between two matched words; two dropped words in a row stop the alignment
from catching up, and transpositions or substitutions never match.
"""

from typing import Sequence

from loguru import logger

from memoria.exceptions import InvalidVerse

from . import PracticeMode, register
from .base import VerificationResult
from .normalizer import normalize

PASS_THRESHOLD = 0.8  # exclusive


def count_aligned_hits(user_words: Sequence[str], verse_words: Sequence[str]) -> int:
    """
    Walk the answer with a cursor into the verse.

    A word equal to the verse word at the cursor is a hit (cursor + 1); a
    word equal to the one after it is a hit with one skipped word
    (cursor + 2); anything else is ignored and the cursor stays put.
    """
    hits = 0
    cursor = 0
    for word in user_words:
        if cursor < len(verse_words) and verse_words[cursor] == word:
            hits += 1
            cursor += 1
        elif cursor + 1 < len(verse_words) and verse_words[cursor + 1] == word:
            hits += 1
            cursor += 2
    return hits


@register(PracticeMode.FULL_VERSE)
class SequenceAlignerVerifier:
    """Literal recall with one-word skip tolerance."""

    def __init__(self, threshold: float = PASS_THRESHOLD):
        self.threshold = threshold

    def describe(self) -> str:
        return "Words in order; one omitted word at a time is tolerated"

    def check(self, answer: str, target: str) -> VerificationResult:
        """Align the answer against the verse text."""
        verse_words = normalize(target or "").split()
        if not verse_words:
            raise InvalidVerse("Verse text is empty after normalization")

        user_words = normalize(answer or "").split()
        hits = count_aligned_hits(user_words, verse_words)
        accuracy = hits / len(verse_words)
        is_correct = accuracy > self.threshold

        logger.debug(f"Sequence alignment: {hits}/{len(verse_words)} words ({accuracy:.2f})")

        if is_correct:
            feedback = f"Correct! {hits}/{len(verse_words)} words in order."
        else:
            feedback = f"{hits}/{len(verse_words)} words in order. Keep practicing."

        return VerificationResult(
            correct=is_correct,
            score=accuracy,
            feedback=feedback,
            user_answer=answer or "",
            correct_answer=target,
        )
