"""Exceptions raised by the study planner."""


class StudyPlannerError(Exception):
    """Base class for study planner errors."""


class InvalidIdentifierError(StudyPlannerError, ValueError):
    """An identifier does not have the shape of a record id."""

    def __init__(self, value, kind: str = "record"):
        super().__init__(f"Invalid {kind} id: {value!r}")
        self.value = value
        self.kind = kind


class NotFoundError(StudyPlannerError, LookupError):
    """A record targeted by an update or delete does not exist."""

    def __init__(self, kind: str, record_id: int):
        super().__init__(f"{kind} {record_id} not found")
        self.kind = kind
        self.record_id = record_id


class DuplicateEmailError(StudyPlannerError, ValueError):
    """A learner profile with the same email already exists."""

    def __init__(self, email: str):
        super().__init__(f"A profile with email {email!r} already exists")
        self.email = email
