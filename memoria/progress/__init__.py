"""
Mastery tracking: stats reduction, weak verses, achievements and study plans.
"""

from .achievements import DEFAULT_ACHIEVEMENTS, Achievement, evaluate, get_achievement
from .plans import DEFAULT_PLANS, PlanDay, StudyPlan, completion_ratio, next_day, resolve_day
from .stats import AttemptResult, SessionStats, StatsTracker, WeakVerse

__all__ = [
    "Achievement",
    "AttemptResult",
    "DEFAULT_ACHIEVEMENTS",
    "DEFAULT_PLANS",
    "PlanDay",
    "SessionStats",
    "StatsTracker",
    "StudyPlan",
    "WeakVerse",
    "completion_ratio",
    "evaluate",
    "get_achievement",
    "next_day",
    "resolve_day",
]
