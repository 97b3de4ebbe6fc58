"""
Choice-based drills: multiple choice and reference matching.
"""

from .distractors import ChoiceDrill, ChoiceField, build_choice_drill, pick_distractors

__all__ = [
    "ChoiceDrill",
    "ChoiceField",
    "build_choice_drill",
    "pick_distractors",
]
