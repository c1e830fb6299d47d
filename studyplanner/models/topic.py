from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from studyplanner.database import Base

class Topic(Base):
    """Unit of study content within a subject"""
    __tablename__ = "topics"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False, index=True)
    name = Column(String, nullable=False)
    status = Column(String, nullable=False, default="new")  # new, learning, revised
    difficulty = Column(String, nullable=False, default="medium")  # easy, medium, hard
    next_review_date = Column(Date)

    # Cached ranking value, only valid as of the last schedule build for the user
    priority_score = Column(Float, nullable=False, default=0.0)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="topics")
    subject = relationship("Subject", back_populates="topics")
