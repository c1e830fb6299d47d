from sqlalchemy.orm import Session
from datetime import datetime
from typing import Dict, List
import logging

from studyplanner.crud import (
    get_subjects_by_user,
    get_topics_by_user,
    get_topics_with_subject,
    get_user,
    update_priority_score
)
from studyplanner.datetime_utils import reference_now
from studyplanner.enums import DailyStudyGoal
from studyplanner.models import Subject, Topic
from studyplanner.priority import calculate_priority_score
from studyplanner.schemas import StudyPreferences

logger = logging.getLogger(__name__)

# Number of topics recommended per session, by daily study goal
TARGET_TOPICS_BY_GOAL = {
    DailyStudyGoal.THIRTY_MINUTES: 5,
    DailyStudyGoal.ONE_HOUR: 8,
    DailyStudyGoal.TWO_HOURS: 12,
    DailyStudyGoal.THREE_HOURS: 15,
    DailyStudyGoal.FOUR_PLUS_HOURS: 20,
}
DEFAULT_TARGET_TOPICS = 10


def target_topic_count(daily_study_goal) -> int:
    """Schedule length for a daily study goal; unknown or missing goals get the default"""
    goal = DailyStudyGoal.parse(daily_study_goal)
    return TARGET_TOPICS_BY_GOAL.get(goal, DEFAULT_TARGET_TOPICS)


def refresh_priority_scores(
    db: Session,
    user_id: int,
    preferences: StudyPreferences = None,
    now: datetime = None
) -> int:
    """
    Recompute and store the priority score of every topic of a user.

    Topics whose subject cannot be found keep their previous score.

    Args:
        db: Database session
        user_id: Owner of the topics
        preferences: Learner preferences (looked up from the user when omitted)
        now: Reference instant (defaults to current UTC time, aware values are converted to UTC)

    Returns:
        Number of topics whose score was refreshed
    """
    now = reference_now(now)
    if preferences is None:
        preferences = StudyPreferences.from_user(get_user(db, user_id))

    topics = get_topics_by_user(db, user_id)
    subjects_by_id: Dict[int, Subject] = {s.id: s for s in get_subjects_by_user(db, user_id)}

    refreshed = 0
    for topic in topics:
        subject = subjects_by_id.get(topic.subject_id)
        if subject is None:
            logger.debug("Skipping topic %s: subject %s not found", topic.id, topic.subject_id)
            continue
        score = calculate_priority_score(topic, subject, preferences, now)
        update_priority_score(db, topic, score, commit=False)
        refreshed += 1

    db.commit()
    logger.info("Refreshed priority scores for %d of %d topics (user %s)", refreshed, len(topics), user_id)
    return refreshed


def build_schedule(db: Session, user_id: int, now: datetime = None) -> List[Topic]:
    """
    Build the study schedule for a user.

    Scores are refreshed first, then the user's topics are ordered by score
    (ties broken by topic id) and cut to the length set by the daily study
    goal. A user that does not exist gets the default preferences.
    """
    preferences = StudyPreferences.from_user(get_user(db, user_id))
    refresh_priority_scores(db, user_id, preferences, now)

    target = target_topic_count(preferences.daily_study_goal)
    schedule = get_topics_with_subject(db, user_id, limit=target)
    logger.info("Built schedule of %d topics (target %d) for user %s", len(schedule), target, user_id)
    return schedule
