from habitdesk.crud.checkins import list_checkins, record_checkin
from habitdesk.crud.habits import create_habit, delete_habit, get_habit_counts, get_owned_habit, toggle_habit_active, update_habit
from habitdesk.crud.progress import HabitFilters, HabitProgress, aggregate_progress, get_habit_with_progress, list_habits_with_progress
from habitdesk.crud.results import Invalid, NotFound
from habitdesk.crud.workspaces import create_strategy, create_workspace, list_strategies, list_workspaces

__all__ = [
    "Invalid",
    "NotFound",
    "create_workspace",
    "list_workspaces",
    "create_strategy",
    "list_strategies",
    "create_habit",
    "update_habit",
    "toggle_habit_active",
    "delete_habit",
    "get_owned_habit",
    "get_habit_counts",
    "record_checkin",
    "list_checkins",
    "HabitFilters",
    "HabitProgress",
    "aggregate_progress",
    "list_habits_with_progress",
    "get_habit_with_progress",
]
