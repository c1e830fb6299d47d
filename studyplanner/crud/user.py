from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from studyplanner.crud.ids import coerce_id
from studyplanner.errors import DuplicateEmailError, NotFoundError
from studyplanner.models import User
from studyplanner.schemas import UserCreate, PreferencesUpdate
from typing import Optional

def create_user(db: Session, user: UserCreate) -> User:
    """Create a new learner profile; emails are unique"""
    data = user.model_dump()
    db_user = User(**data)
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateEmailError(user.email) from e
    db.refresh(db_user)
    return db_user

def get_user(db: Session, user_id: int) -> Optional[User]:
    """Get user by ID"""
    user_id = coerce_id(user_id, "user")
    return db.query(User).filter(User.id == user_id).first()

def update_user_preferences(db: Session, user_id: int, preferences: PreferencesUpdate) -> User:
    """Update study preferences; fields left as None are unchanged"""
    db_user = get_user(db, user_id)
    if not db_user:
        raise NotFoundError("User", user_id)
    for key, value in preferences.model_dump(exclude_none=True).items():
        setattr(db_user, key, value)
    db.commit()
    db.refresh(db_user)
    return db_user
