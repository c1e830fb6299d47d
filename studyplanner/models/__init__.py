from studyplanner.models.user import User
from studyplanner.models.subject import Subject
from studyplanner.models.topic import Topic

__all__ = [
    "User",
    "Subject",
    "Topic"
]
