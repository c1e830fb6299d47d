from studyplanner.crud.ids import coerce_id
from studyplanner.crud.user import create_user, get_user, update_user_preferences
from studyplanner.crud.subject import (
    create_subject,
    get_subject,
    get_subjects_by_user,
    update_subject,
    delete_subject
)
from studyplanner.crud.topic import (
    create_topic,
    get_topic,
    get_topics_by_user,
    get_topics_by_subject,
    get_topics_with_subject,
    update_topic,
    update_priority_score,
    delete_topic
)

__all__ = [
    "coerce_id",
    "create_user",
    "get_user",
    "update_user_preferences",
    "create_subject",
    "get_subject",
    "get_subjects_by_user",
    "update_subject",
    "delete_subject",
    "create_topic",
    "get_topic",
    "get_topics_by_user",
    "get_topics_by_subject",
    "get_topics_with_subject",
    "update_topic",
    "update_priority_score",
    "delete_topic",
]
