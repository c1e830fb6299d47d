"""Closed value sets stored as strings on the models.

Each enum exposes ``parse`` which maps a stored value to a member, or to
``None`` when the value is missing or unknown. Callers decide the fallback.
"""

from enum import Enum
from typing import Optional


class _ParsableEnum(str, Enum):

    @classmethod
    def parse(cls, value) -> Optional["_ParsableEnum"]:
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        raw = value.value if isinstance(value, Enum) else str(value).strip()
        try:
            return cls(raw)
        except ValueError:
            return None

    @classmethod
    def values(cls):
        return [member.value for member in cls]


class TopicStatus(_ParsableEnum):
    NEW = "new"
    LEARNING = "learning"
    REVISED = "revised"


class Difficulty(_ParsableEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class PriorityWeight(_ParsableEnum):
    BALANCED = "Balanced"
    FOCUS_HARD = "Focus on Hard Topics"
    FOCUS_EASY = "Focus on Easy Topics"


class DailyStudyGoal(_ParsableEnum):
    THIRTY_MINUTES = "30 minutes"
    ONE_HOUR = "1 hour"
    TWO_HOURS = "2 hours"
    THREE_HOURS = "3 hours"
    FOUR_PLUS_HOURS = "4+ hours"


class ReminderType(_ParsableEnum):
    OVERDUE = "overdue"
    URGENT = "urgent"
