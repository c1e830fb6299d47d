"""Priority-based study scheduling: ranked review plans, exam and reminder views."""

__version__ = "0.1.0"
