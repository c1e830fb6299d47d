from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from studyplanner.database import Base

class User(Base):
    """Learner profile with study preferences"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    topic_priority_weight = Column(String)  # "Balanced", "Focus on Hard Topics", "Focus on Easy Topics"
    daily_study_goal = Column(String)  # "30 minutes" ... "4+ hours"
    email_notifications_enabled = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    subjects = relationship("Subject", back_populates="user", cascade="all, delete-orphan")
    topics = relationship("Topic", back_populates="user")
