from datetime import date, datetime
from typing import Optional, Union

from studyplanner.datetime_utils import days_until

# (upper bound in days, urgency); bounds are inclusive
URGENCY_BRACKETS = [
    (1, 50),    # day before the exam
    (3, 40),
    (7, 30),    # week before
    (14, 20),
    (30, 15),   # month before
    (60, 10),
    (90, 5),
]
DISTANT_EXAM_URGENCY = 2


def urgency_for_days(days_until_exam: Optional[float]) -> int:
    """Discrete urgency contribution for a number of days until the exam"""
    if days_until_exam is None or days_until_exam <= 0:
        return 0

    for upper_bound, urgency in URGENCY_BRACKETS:
        if days_until_exam <= upper_bound:
            return urgency

    return DISTANT_EXAM_URGENCY


def exam_urgency_score(exam_date: Optional[Union[date, datetime]], now: datetime = None) -> int:
    """Urgency contribution of a subject's exam date; 0 when there is no exam or it has passed"""
    if not exam_date:
        return 0
    return urgency_for_days(days_until(exam_date, now))
