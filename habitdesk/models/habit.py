from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, CheckConstraint, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from habitdesk.models.base import Base

DAILY = "Daily"
WEEKLY = "Weekly"


class Habit(Base):
    """A repeatable routine tied to a workspace and, optionally, a strategy.

    ``target_count`` is per period: per day for Daily habits, per Monday-Sunday
    week for Weekly ones.
    """

    __tablename__ = "habits"
    __table_args__ = (CheckConstraint("target_count >= 1", name="ck_habits_target_count_positive"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    owner_id: Mapped[str] = mapped_column(String(450), index=True)
    workspace_id: Mapped[int] = mapped_column(ForeignKey("workspaces.id", ondelete="CASCADE"), index=True)
    strategy_id: Mapped[Optional[int]] = mapped_column(ForeignKey("strategies.id", ondelete="SET NULL"), index=True, nullable=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[Optional[str]] = mapped_column(String(2000), nullable=True)
    frequency: Mapped[str] = mapped_column(String(16), default=DAILY)
    target_count: Mapped[int] = mapped_column(Integer, default=1)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
