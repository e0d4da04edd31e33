from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel


class HabitIn(BaseModel):
    title: str
    description: Optional[str] = None
    frequency: Optional[str] = "Daily"
    target_count: int = 1
    is_active: Optional[bool] = None
    workspace_id: int
    strategy_id: Optional[int] = None


class HabitOut(BaseModel):
    id: int
    workspace_id: int
    strategy_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    frequency: str
    target_count: int
    is_active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class HabitProgressOut(BaseModel):
    id: int
    workspace_id: int
    workspace_name: str = ""
    strategy_id: Optional[int] = None
    strategy_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    frequency: str
    target_count: int
    is_active: bool
    period_start: date
    period_end: date
    period_count: int
    today_count: int

    class Config:
        from_attributes = True


class HabitListOut(BaseModel):
    count: int
    items: list[HabitProgressOut]


class HabitSummaryOut(BaseModel):
    habits: int
    active_habits: int
