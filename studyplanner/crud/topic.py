from sqlalchemy.orm import Session, joinedload
from studyplanner.crud.ids import coerce_id
from studyplanner.errors import NotFoundError
from studyplanner.enums import TopicStatus
from studyplanner.intervals import ReviewIntervals
from studyplanner.models import Subject, Topic
from studyplanner.schemas import TopicCreate, TopicUpdate
from datetime import date
from typing import List, Optional

def create_topic(db: Session, user_id: int, topic: TopicCreate, reference_date: date = None) -> Topic:
    """Create a topic in one of the user's subjects"""
    user_id = coerce_id(user_id, "user")
    subject = db.query(Subject).filter(
        Subject.id == coerce_id(topic.subject_id, "subject"),
        Subject.user_id == user_id
    ).first()
    if not subject:
        raise NotFoundError("Subject", topic.subject_id)

    data = topic.model_dump()
    data["next_review_date"] = topic.next_review_date or ReviewIntervals.calculate_next_review_date(
        topic.difficulty,
        reference_date=reference_date
    )
    db_topic = Topic(user_id=user_id, **data)
    db.add(db_topic)
    db.commit()
    db.refresh(db_topic)
    return db_topic

def get_topic(db: Session, topic_id: int) -> Optional[Topic]:
    """Get topic by ID"""
    topic_id = coerce_id(topic_id, "topic")
    return db.query(Topic).filter(Topic.id == topic_id).first()

def get_topics_by_user(db: Session, user_id: int) -> List[Topic]:
    """Get all topics of a user"""
    user_id = coerce_id(user_id, "user")
    return db.query(Topic).filter(Topic.user_id == user_id).order_by(Topic.id).all()

def get_topics_by_subject(db: Session, subject_id: int) -> List[Topic]:
    """Get all topics of a subject"""
    subject_id = coerce_id(subject_id, "subject")
    return db.query(Topic).filter(Topic.subject_id == subject_id).order_by(Topic.id).all()

def get_topics_with_subject(db: Session, user_id: int, limit: int = None) -> List[Topic]:
    """Get a user's topics with subject loaded, highest priority score first"""
    user_id = coerce_id(user_id, "user")
    query = db.query(Topic).options(joinedload(Topic.subject)).filter(
        Topic.user_id == user_id
    ).order_by(Topic.priority_score.desc(), Topic.id.asc())
    if limit is not None:
        query = query.limit(limit)
    return query.all()

def update_topic(db: Session, topic_id: int, topic_data: TopicUpdate, reference_date: date = None) -> Topic:
    """
    Update a topic.

    Moving a topic to "learning" or "revised" without an explicit review date
    counts as a review and reschedules the next review from today.
    """
    db_topic = get_topic(db, topic_id)
    if not db_topic:
        raise NotFoundError("Topic", topic_id)

    updates = topic_data.model_dump(exclude_none=True)
    for key, value in updates.items():
        setattr(db_topic, key, value)

    reviewed = topic_data.status in (TopicStatus.LEARNING, TopicStatus.REVISED)
    if reviewed and topic_data.next_review_date is None:
        db_topic.next_review_date = ReviewIntervals.calculate_next_review_date(
            db_topic.difficulty,
            last_reviewed=reference_date or date.today()
        )

    db.commit()
    db.refresh(db_topic)
    return db_topic

def update_priority_score(db: Session, topic: Topic, score: float, commit: bool = True) -> Topic:
    """Persist a recomputed priority score; commit=False leaves the flush to the caller"""
    topic.priority_score = score
    if commit:
        db.commit()
    return topic

def delete_topic(db: Session, topic_id: int) -> None:
    """Delete a topic"""
    db_topic = get_topic(db, topic_id)
    if not db_topic:
        raise NotFoundError("Topic", topic_id)
    db.delete(db_topic)
    db.commit()
