"""
Verse records and the randomness seam shared by every drill.
"""

from .randomness import RandomSource, SeededRandom, default_random, shuffled
from .verse import Difficulty, Testament, Verse, find_verse, next_verse

__all__ = [
    "Difficulty",
    "RandomSource",
    "SeededRandom",
    "Testament",
    "Verse",
    "default_random",
    "find_verse",
    "next_verse",
    "shuffled",
]
