"""
Practice sessions: one small state machine per practice mode.
"""

from .runner import PracticeRunner
from .session import (
    ChoiceSession,
    FillBlanksSession,
    PracticeSession,
    RecallSession,
    SessionState,
    TimedChallengeSession,
    create_session,
)

__all__ = [
    "ChoiceSession",
    "FillBlanksSession",
    "PracticeRunner",
    "PracticeSession",
    "RecallSession",
    "SessionState",
    "TimedChallengeSession",
    "create_session",
]
