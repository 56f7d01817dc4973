"""SQLModel exports for Habit Tracker."""

from .category import Category
from .tracker_models import ActionLog, ActionTemplate, DailyPlan

__all__ = [
    "Category",
    "ActionTemplate",
    "ActionLog",
    "DailyPlan",
]
