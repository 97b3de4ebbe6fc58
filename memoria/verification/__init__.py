"""
Answer verification strategies for memoria practice sessions.

Each text-recall practice mode has its own verifier module with:
- check(): Judge the learner's typed answer against its target
- describe(): Short description of the tolerance model

Choice modes (multiple choice, reference matching) have no verifier:
they are judged by option identity in memoria.drills.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .base import Verifier


class PracticeMode(str, Enum):
    """Practice modes offered to the learner."""
    FILL_BLANKS = "fill_blanks"
    FULL_VERSE = "full_verse"
    TIMED = "timed"
    MULTIPLE_CHOICE = "multiple_choice"
    MATCH_REFERENCE = "match_reference"


# Verifier registry - populated by @register decorator
VERIFIERS: dict[PracticeMode, "Verifier"] = {}


def register(mode: PracticeMode):
    """Decorator to register a verifier for a practice mode."""
    def decorator(cls):
        VERIFIERS[mode] = cls()
        return cls
    return decorator


def get_verifier(mode: str | PracticeMode) -> "Verifier | None":
    """Get the verifier for a practice mode."""
    if isinstance(mode, str) and not isinstance(mode, PracticeMode):
        try:
            mode = PracticeMode(mode.lower())
        except ValueError:
            return None
    return VERIFIERS.get(mode)


# Import verifiers to trigger registration
from . import set_match
from . import sequence_aligner
from . import token_overlap

from .base import VerificationResult
from .blanks import Blank, BlankSpec, blank_verse, select_blanks
from .normalizer import normalize, normalize_loose, tokenize

__all__ = [
    "Blank",
    "BlankSpec",
    "PracticeMode",
    "VERIFIERS",
    "VerificationResult",
    "blank_verse",
    "get_verifier",
    "normalize",
    "normalize_loose",
    "register",
    "select_blanks",
    "tokenize",
]
