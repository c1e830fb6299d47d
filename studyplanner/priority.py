"""
Priority scoring for study topics.

A topic's score is the sum of independent contributions: status, difficulty,
the learner's preference weighting, an overdue penalty, exam urgency of the
parent subject and an age boost for topics not yet revised. Scores are not
normalized or clamped, so very overdue or exam-adjacent topics dominate.
"""

from datetime import datetime

from studyplanner.datetime_utils import as_datetime, days_since, days_until, reference_now
from studyplanner.enums import Difficulty, PriorityWeight, TopicStatus
from studyplanner.schemas import StudyPreferences
from studyplanner.urgency import exam_urgency_score

STATUS_WEIGHTS = {
    TopicStatus.NEW: 5,
    TopicStatus.LEARNING: 3,
    TopicStatus.REVISED: 1,
}
UNKNOWN_STATUS_WEIGHT = 0

DIFFICULTY_WEIGHTS = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 2,
    Difficulty.HARD: 3,
}
UNKNOWN_DIFFICULTY_WEIGHT = DIFFICULTY_WEIGHTS[Difficulty.MEDIUM]

PREFERENCE_BONUSES = {
    PriorityWeight.FOCUS_HARD: {Difficulty.HARD: 3, Difficulty.MEDIUM: 1},
    PriorityWeight.FOCUS_EASY: {Difficulty.EASY: 2},
}

OVERDUE_BASE_PENALTY = 25
OVERDUE_PER_DAY = 2
EXAM_BOOST_WINDOW_DAYS = 30
EXAM_BOOST_PER_DAY = 0.5
AGE_BOOST_PER_DAY = 0.1


def status_weight(status) -> int:
    parsed = TopicStatus.parse(status)
    if parsed is None:
        return UNKNOWN_STATUS_WEIGHT
    return STATUS_WEIGHTS[parsed]


def difficulty_weight(difficulty) -> int:
    parsed = Difficulty.parse(difficulty)
    if parsed is None:
        return UNKNOWN_DIFFICULTY_WEIGHT
    return DIFFICULTY_WEIGHTS[parsed]


def preference_bonus(difficulty, preferences: StudyPreferences = None) -> int:
    """Extra weight from the learner's topic priority preference"""
    if preferences is None or preferences.topic_priority_weight is None:
        return 0
    bonuses = PREFERENCE_BONUSES.get(preferences.topic_priority_weight, {})
    return bonuses.get(Difficulty.parse(difficulty), 0)


def overdue_penalty(next_review_date, now: datetime) -> float:
    """25 plus 2 per (fractional) day past the review date; 0 when not overdue"""
    if not next_review_date or as_datetime(next_review_date) >= now:
        return 0.0
    days_overdue = days_since(next_review_date, now)
    return OVERDUE_BASE_PENALTY + days_overdue * OVERDUE_PER_DAY


def exam_proximity_boost(exam_date, now: datetime) -> float:
    """Boost for unrevised topics that grows as an exam within 30 days nears"""
    if not exam_date:
        return 0.0
    days_until_exam = days_until(exam_date, now)
    if 0 < days_until_exam <= EXAM_BOOST_WINDOW_DAYS:
        return (EXAM_BOOST_WINDOW_DAYS - days_until_exam) * EXAM_BOOST_PER_DAY
    return 0.0


def age_boost(created_at, now: datetime) -> float:
    if not created_at:
        return 0.0
    return days_since(created_at, now) * AGE_BOOST_PER_DAY


def calculate_priority_score(topic, subject, preferences: StudyPreferences = None, now: datetime = None) -> float:
    """
    Score a topic for review; higher means more urgent.

    Args:
        topic: Object with status, difficulty, next_review_date and created_at
        subject: Parent subject (exam_date is read), may be None
        preferences: Learner preferences, None for defaults
        now: Reference instant (defaults to current UTC time, aware values are converted to UTC)

    Returns:
        Unbounded real-valued score
    """
    now = reference_now(now)
    unrevised = TopicStatus.parse(topic.status) != TopicStatus.REVISED

    score = 0.0
    score += status_weight(topic.status)
    score += difficulty_weight(topic.difficulty)
    score += preference_bonus(topic.difficulty, preferences)
    score += overdue_penalty(topic.next_review_date, now)

    exam_date = subject.exam_date if subject is not None else None
    if exam_date:
        score += exam_urgency_score(exam_date, now)
        if unrevised:
            score += exam_proximity_boost(exam_date, now)

    if unrevised:
        score += age_boost(topic.created_at, now)

    return score
