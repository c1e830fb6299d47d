from sqlalchemy.orm import Session
from datetime import datetime
from typing import List
import logging
import math

from studyplanner.crud import coerce_id, get_topics_with_subject
from studyplanner.datetime_utils import as_datetime, days_until, reference_now, today
from studyplanner.enums import ReminderType, TopicStatus
from studyplanner.models import Subject, Topic
from studyplanner.schemas import Reminder

logger = logging.getLogger(__name__)

URGENT_WINDOW_DAYS = 7


def list_upcoming_exams(db: Session, user_id: int, now: datetime = None) -> List[Subject]:
    """Subjects with an exam today or later, soonest first"""
    user_id = coerce_id(user_id, "user")
    return db.query(Subject).filter(
        Subject.user_id == user_id,
        Subject.exam_date.isnot(None),
        Subject.exam_date >= today(now)
    ).order_by(Subject.exam_date.asc(), Subject.id.asc()).all()


def _is_overdue(topic: Topic, now: datetime) -> bool:
    return bool(topic.next_review_date) and as_datetime(topic.next_review_date) < now


def overdue_message(topic: Topic, subject: Subject) -> str:
    return f'Topic "{topic.name}" in subject "{subject.name}" is overdue for review.'


def urgent_message(topic: Topic, subject: Subject, days_until_exam: float) -> str:
    return (
        f'Topic "{topic.name}" in subject "{subject.name}" is urgent! '
        f"Exam in {math.ceil(days_until_exam)} days."
    )


def list_reminders(db: Session, user_id: int, now: datetime = None) -> List[Reminder]:
    """
    Collect overdue and urgent reminders for a user's topics.

    A topic is overdue when its next review date has passed. It is urgent when
    its subject's exam is at most 7 days away and the topic is not revised.
    One topic can produce both reminders.
    """
    now = reference_now(now)
    reminders = []

    for topic in sorted(get_topics_with_subject(db, user_id), key=lambda t: t.id):
        subject = topic.subject
        if subject is None:
            logger.debug("Skipping topic %s without subject", topic.id)
            continue

        if _is_overdue(topic, now):
            reminders.append(Reminder(
                type=ReminderType.OVERDUE,
                topic=topic.name,
                subject=subject.name,
                message=overdue_message(topic, subject),
                topic_id=topic.id,
                subject_id=subject.id
            ))

        if subject.exam_date:
            days_until_exam = days_until(subject.exam_date, now)
            revised = TopicStatus.parse(topic.status) == TopicStatus.REVISED
            if 0 < days_until_exam <= URGENT_WINDOW_DAYS and not revised:
                reminders.append(Reminder(
                    type=ReminderType.URGENT,
                    topic=topic.name,
                    subject=subject.name,
                    message=urgent_message(topic, subject, days_until_exam),
                    topic_id=topic.id,
                    subject_id=subject.id
                ))

    return reminders


def list_due_topics(db: Session, user_id: int, now: datetime = None, window_days: float = 1) -> List[Topic]:
    """Topics that are overdue or due within the next window_days, earliest first"""
    now = reference_now(now)
    due = [
        topic for topic in get_topics_with_subject(db, user_id)
        if topic.next_review_date and days_until(topic.next_review_date, now) <= window_days
    ]
    return sorted(due, key=lambda t: (t.next_review_date, t.id))
