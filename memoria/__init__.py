"""
memoria: verse memorization and recall-verification engine.

Pure, synchronous building blocks for scripture memory drills: blank
selection, answer verification, distractors, practice sessions and
mastery tracking.
"""

from .content import Difficulty, RandomSource, SeededRandom, Testament, Verse
from .exceptions import InvalidTransition, InvalidVerse, MemoriaError, VerseNotFound
from .progress import AttemptResult, SessionStats, StatsTracker
from .verification import PracticeMode, get_verifier, normalize, normalize_loose, select_blanks

__version__ = "1.0.0"

__all__ = [
    "AttemptResult",
    "Difficulty",
    "InvalidTransition",
    "InvalidVerse",
    "MemoriaError",
    "PracticeMode",
    "RandomSource",
    "SeededRandom",
    "SessionStats",
    "StatsTracker",
    "Testament",
    "Verse",
    "VerseNotFound",
    "get_verifier",
    "normalize",
    "normalize_loose",
    "select_blanks",
]
