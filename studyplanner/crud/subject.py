from sqlalchemy.orm import Session
from studyplanner.crud.ids import coerce_id
from studyplanner.errors import NotFoundError
from studyplanner.models import Subject
from studyplanner.schemas import SubjectCreate, SubjectUpdate
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

def create_subject(db: Session, user_id: int, subject: SubjectCreate) -> Subject:
    """Create a subject for a user"""
    db_subject = Subject(user_id=coerce_id(user_id, "user"), **subject.model_dump())
    db.add(db_subject)
    db.commit()
    db.refresh(db_subject)
    return db_subject

def get_subject(db: Session, subject_id: int) -> Optional[Subject]:
    """Get subject by ID"""
    subject_id = coerce_id(subject_id, "subject")
    return db.query(Subject).filter(Subject.id == subject_id).first()

def get_subjects_by_user(db: Session, user_id: int) -> List[Subject]:
    """Get all subjects of a user"""
    user_id = coerce_id(user_id, "user")
    return db.query(Subject).filter(Subject.user_id == user_id).order_by(Subject.id).all()

def update_subject(db: Session, subject_id: int, subject_data: SubjectUpdate) -> Subject:
    """Update subject name or exam date"""
    db_subject = get_subject(db, subject_id)
    if not db_subject:
        raise NotFoundError("Subject", subject_id)
    for key, value in subject_data.model_dump(exclude_none=True).items():
        setattr(db_subject, key, value)
    db.commit()
    db.refresh(db_subject)
    return db_subject

def delete_subject(db: Session, subject_id: int) -> int:
    """Delete a subject and its topics; returns number of topics removed"""
    db_subject = get_subject(db, subject_id)
    if not db_subject:
        raise NotFoundError("Subject", subject_id)
    removed = len(db_subject.topics)
    db.delete(db_subject)
    db.commit()
    logger.info("Deleted subject %s with %d topics", subject_id, removed)
    return removed
