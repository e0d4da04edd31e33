from habitdesk.models.base import Base
from habitdesk.models.habit import DAILY, WEEKLY, Habit
from habitdesk.models.habit_checkin import HabitCheckin
from habitdesk.models.strategy import Strategy
from habitdesk.models.workspace import Workspace

__all__ = [
    "Base",
    "DAILY",
    "WEEKLY",
    "Habit",
    "HabitCheckin",
    "Strategy",
    "Workspace",
]
