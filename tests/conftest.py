"""Pytest configuration and shared fixtures."""

import itertools
from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import studyplanner.models  # noqa: F401
from studyplanner.database import Base
from studyplanner.models import Subject, Topic, User

# Fixed reference instant for scoring and reminders
NOW = datetime(2026, 3, 10, 9, 0)


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    counter = itertools.count(1)

    def _make(**kwargs):
        n = next(counter)
        kwargs.setdefault("name", f"Learner {n}")
        kwargs.setdefault("email", f"learner{n}@example.com")
        user = User(**kwargs)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def make_subject(db):
    def _make(user_id, name="Biology", exam_date=None):
        subject = Subject(user_id=user_id, name=name, exam_date=exam_date)
        db.add(subject)
        db.commit()
        db.refresh(subject)
        return subject

    return _make


@pytest.fixture
def make_topic(db):
    def _make(subject=None, **kwargs):
        if subject is not None:
            kwargs.setdefault("subject_id", subject.id)
            kwargs.setdefault("user_id", subject.user_id)
        kwargs.setdefault("name", "Cell division")
        kwargs.setdefault("status", "new")
        kwargs.setdefault("difficulty", "medium")
        kwargs.setdefault("created_at", NOW)
        topic = Topic(**kwargs)
        db.add(topic)
        db.commit()
        db.refresh(topic)
        return topic

    return _make


@pytest.fixture
def now():
    return NOW
