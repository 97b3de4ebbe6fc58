"""
Set-match verifier for fill-in-the-blanks.

The learner types the missing words in any order, in one box. Each blank
is satisfied when its expected word appears anywhere in the answer.
Accents are significant: an accented verse word needs an accented answer.
"""

from loguru import logger

from memoria.exceptions import InvalidVerse

from . import PracticeMode, register
from .base import VerificationResult
from .blanks import BlankSpec
from .normalizer import normalize_loose, strip_loose_punctuation


@register(PracticeMode.FILL_BLANKS)
class SetMatchVerifier:
    """Order-independent membership check of hidden words."""

    def describe(self) -> str:
        return "Every hidden word must appear in the answer, in any order"

    def check(self, answer: str, target: BlankSpec) -> VerificationResult:
        """Check that every blank's expected word is in the answer."""
        if not target.blanks:
            raise InvalidVerse("Blank spec has no blanks to verify")

        user_words = set(normalize_loose(answer or "").split(" ")) - {""}
        expected = [strip_loose_punctuation(b.expected) for b in target.blanks]
        missing = [word for word in expected if word not in user_words]
        satisfied = len(expected) - len(missing)
        is_correct = not missing

        logger.debug(f"Set match: {satisfied}/{len(expected)} blanks satisfied")

        if is_correct:
            feedback = "Correct! All missing words found."
        else:
            feedback = f"{len(missing)} word(s) still missing."

        return VerificationResult(
            correct=is_correct,
            score=satisfied / len(expected),
            feedback=feedback,
            user_answer=answer or "",
            correct_answer=", ".join(b.word for b in target.blanks),
            missing=missing,
        )
