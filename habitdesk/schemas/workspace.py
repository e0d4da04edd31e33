from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class WorkspaceIn(BaseModel):
    name: str
    description: Optional[str] = None


class WorkspaceOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class StrategyIn(BaseModel):
    name: str
    workspace_id: Optional[int] = None


class StrategyOut(BaseModel):
    id: int
    name: str
    workspace_id: Optional[int] = None
    status: str
    created_at: datetime

    class Config:
        from_attributes = True
