"""
Base protocol and types for answer verifiers.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Protocol


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (not banker's rounding)."""
    return int(math.floor(value + 0.5))


@dataclass
class VerificationResult:
    """Result of checking a typed answer."""
    correct: bool
    score: float  # fraction for blanks/sequence, percentage for overlap
    feedback: str
    user_answer: str
    correct_answer: str
    max_score: float = 1.0
    missing: list[str] = field(default_factory=list)

    @property
    def percent(self) -> int:
        """Score as a whole percentage, the way it is shown to the learner."""
        if self.max_score <= 0:
            return 0
        return round_half_up(self.score / self.max_score * 100)


class Verifier(Protocol):
    """Protocol for answer verifiers."""

    def check(self, answer: str, target: Any) -> VerificationResult:
        """Judge ``answer`` against ``target`` (a BlankSpec or verse text)."""
        ...

    def describe(self) -> str:
        """One-line description of what the verifier tolerates."""
        ...
