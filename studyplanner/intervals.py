from datetime import date, timedelta
from typing import Dict, List

from studyplanner.enums import Difficulty

# Review gaps in days per difficulty tier
REVIEW_INTERVALS: Dict[Difficulty, List[int]] = {
    Difficulty.EASY: [1, 3, 7, 14, 30],
    Difficulty.MEDIUM: [1, 2, 5, 10, 21],
    Difficulty.HARD: [1, 1, 2, 3, 5],
}


class ReviewIntervals:
    """
    Fixed review gaps per difficulty tier.

    No repetition count is tracked per topic, so every calculation uses the
    first gap of the tier. The remaining gaps are kept for when topics carry
    a review counter.
    """

    @staticmethod
    def intervals_for(difficulty) -> List[int]:
        """Review gaps for a difficulty, falling back to medium"""
        tier = Difficulty.parse(difficulty) or Difficulty.MEDIUM
        return list(REVIEW_INTERVALS[tier])

    @staticmethod
    def calculate_next_review_date(
        difficulty,
        last_reviewed: date = None,
        reference_date: date = None  # Optional: use custom date instead of today
    ) -> date:
        """
        Calculate the next review date for a topic.

        Args:
            difficulty: "easy", "medium" or "hard" (unknown values count as medium)
            last_reviewed: Date of the last review, if any
            reference_date: Date used when there is no last review (defaults to today)

        Returns:
            last_reviewed (or reference date) plus the first gap of the tier
        """
        interval = ReviewIntervals.intervals_for(difficulty)[0]
        base_date = last_reviewed or reference_date or date.today()
        return base_date + timedelta(days=interval)
