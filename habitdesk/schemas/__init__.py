from habitdesk.schemas.checkin import CheckinIn, CheckinOut
from habitdesk.schemas.habit import HabitIn, HabitListOut, HabitOut, HabitProgressOut, HabitSummaryOut
from habitdesk.schemas.workspace import StrategyIn, StrategyOut, WorkspaceIn, WorkspaceOut

__all__ = [
    "CheckinIn",
    "CheckinOut",
    "HabitIn",
    "HabitOut",
    "HabitProgressOut",
    "HabitListOut",
    "HabitSummaryOut",
    "WorkspaceIn",
    "WorkspaceOut",
    "StrategyIn",
    "StrategyOut",
]
