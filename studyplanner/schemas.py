from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import date

from studyplanner.enums import DailyStudyGoal, Difficulty, PriorityWeight, ReminderType, TopicStatus

class StudyPreferences(BaseModel):
    """Immutable learner preferences passed into each scoring call"""
    topic_priority_weight: Optional[PriorityWeight] = None
    daily_study_goal: Optional[DailyStudyGoal] = None

    class Config:
        frozen = True

    @field_validator("topic_priority_weight", mode="before")
    @classmethod
    def _parse_weight(cls, value):
        # Unknown labels behave like an absent preference
        return PriorityWeight.parse(value)

    @field_validator("daily_study_goal", mode="before")
    @classmethod
    def _parse_goal(cls, value):
        return DailyStudyGoal.parse(value)

    @classmethod
    def from_user(cls, user) -> "StudyPreferences":
        """Build preferences from a user record; a missing user gives defaults"""
        if user is None:
            return cls()
        return cls(
            topic_priority_weight=user.topic_priority_weight,
            daily_study_goal=user.daily_study_goal
        )

class UserCreate(BaseModel):
    """Schema for creating a learner profile"""
    name: str
    email: str
    topic_priority_weight: Optional[PriorityWeight] = None
    daily_study_goal: Optional[DailyStudyGoal] = None
    email_notifications_enabled: bool = True

    class Config:
        use_enum_values = True

class PreferencesUpdate(BaseModel):
    """Schema for changing learner preferences; None leaves a field unchanged"""
    topic_priority_weight: Optional[PriorityWeight] = None
    daily_study_goal: Optional[DailyStudyGoal] = None
    email_notifications_enabled: Optional[bool] = None

    class Config:
        use_enum_values = True

class SubjectCreate(BaseModel):
    """Schema for creating a subject"""
    name: str
    exam_date: Optional[date] = None

class SubjectUpdate(BaseModel):
    """Schema for updating a subject; None leaves a field unchanged"""
    name: Optional[str] = None
    exam_date: Optional[date] = None

class SubjectResponse(SubjectCreate):
    """Schema for subject response"""
    id: int
    user_id: int

    class Config:
        from_attributes = True

class TopicCreate(BaseModel):
    """Schema for creating a topic"""
    subject_id: int
    name: str
    status: TopicStatus = TopicStatus.NEW
    difficulty: Difficulty = Difficulty.MEDIUM
    next_review_date: Optional[date] = None

    class Config:
        use_enum_values = True
        validate_default = True

class TopicUpdate(BaseModel):
    """Schema for updating a topic; None leaves a field unchanged"""
    name: Optional[str] = None
    status: Optional[TopicStatus] = None
    difficulty: Optional[Difficulty] = None
    next_review_date: Optional[date] = None

    class Config:
        use_enum_values = True

class ScheduledTopic(BaseModel):
    """Schema for a topic in a study schedule, with subject fields joined"""
    id: int
    name: str
    status: str
    difficulty: str
    priority_score: float
    next_review_date: Optional[date] = None
    subject_id: int
    subject_name: Optional[str] = None
    exam_date: Optional[date] = None

    @classmethod
    def from_topic(cls, topic) -> "ScheduledTopic":
        subject = topic.subject
        return cls(
            id=topic.id,
            name=topic.name,
            status=topic.status,
            difficulty=topic.difficulty,
            priority_score=topic.priority_score,
            next_review_date=topic.next_review_date,
            subject_id=topic.subject_id,
            subject_name=subject.name if subject else None,
            exam_date=subject.exam_date if subject else None
        )

class Reminder(BaseModel):
    """Overdue or urgent reminder for a topic"""
    type: ReminderType
    topic: str
    subject: str
    message: str
    topic_id: Optional[int] = None
    subject_id: Optional[int] = None
