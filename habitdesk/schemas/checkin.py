from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel


class CheckinIn(BaseModel):
    note: Optional[str] = None


class CheckinOut(BaseModel):
    id: int
    habit_id: int
    occurred_on: date
    count: int
    note: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
