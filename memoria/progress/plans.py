"""
Multi-day study plans.

A plan is a fixed list of days, each pointing at a verse reference. The
host stores which days are done and passes them in.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable

from memoria.content.verse import Verse, find_verse
from memoria.verification import PracticeMode

# Plan days open in fill-blanks mode
PLAN_PRACTICE_MODE = PracticeMode.FILL_BLANKS


@dataclass(frozen=True)
class PlanDay:
    """One day of a study plan."""

    day: int
    title: str
    verse_reference: str


@dataclass(frozen=True)
class StudyPlan:
    """A named sequence of daily verses."""

    id: str
    name: str
    description: str
    days: tuple[PlanDay, ...]

    def get_day(self, day: int) -> PlanDay:
        for plan_day in self.days:
            if plan_day.day == day:
                return plan_day
        raise KeyError(f"Plan {self.id!r} has no day {day}")


DEFAULT_PLANS: tuple[StudyPlan, ...] = (
    StudyPlan(
        id="fundamentos",
        name="Fundamentos de la Fe",
        description="Un plan de 7 días para cimentar tu fe.",
        days=(
            PlanDay(1, "Salvación Segura", "Juan 3:16"),
            PlanDay(2, "La Palabra de Dios", "Salmos 119:105"),
            PlanDay(3, "El Poder de la Oración", "Jeremías 33:3"),
            PlanDay(4, "Confianza Total", "Proverbios 3:5-6"),
            PlanDay(5, "Perdón y Gracia", "1 Juan 1:9"),
            PlanDay(6, "Nueva Vida", "2 Corintios 5:17"),
            PlanDay(7, "La Gran Comisión", "Mateo 28:19"),
        ),
    ),
)


def next_day(plan: StudyPlan, completed: AbstractSet[int]) -> PlanDay | None:
    """First day not yet completed, or None when the plan is finished."""
    for plan_day in plan.days:
        if plan_day.day not in completed:
            return plan_day
    return None


def completion_ratio(plan: StudyPlan, completed: AbstractSet[int]) -> float:
    """Fraction of the plan's days that are completed."""
    if not plan.days:
        return 0.0
    done = sum(1 for plan_day in plan.days if plan_day.day in completed)
    return done / len(plan.days)


def resolve_day(plan: StudyPlan, day: int, corpus: Iterable[Verse]) -> Verse:
    """
    The verse to practice on a plan day.

    Raises:
        KeyError: If the plan has no such day
        VerseNotFound: If the corpus lacks the day's reference
    """
    return find_verse(corpus, plan.get_day(day).verse_reference)
