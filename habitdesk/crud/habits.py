import logging
from datetime import datetime
from typing import Optional, Union

from sqlalchemy import and_, delete, func, select
from sqlalchemy.orm import Session

from habitdesk.crud.results import Invalid, NotFound
from habitdesk.crud.workspaces import get_owned_strategy, get_owned_workspace
from habitdesk.models import Habit
from habitdesk.period import normalize_frequency
from habitdesk.schemas import HabitIn

logger = logging.getLogger(__name__)

TITLE_MAX = 200
DESCRIPTION_MAX = 2000


def get_owned_habit(db: Session, owner_id: str, habit_id: int) -> Optional[Habit]:
    return db.scalar(select(Habit).where(and_(Habit.id == habit_id, Habit.owner_id == owner_id)))


def _validate(db: Session, owner_id: str, data: HabitIn) -> Optional[Invalid]:
    title = (data.title or "").strip()
    if not title:
        return Invalid("title", "Title is required.")
    if len(title) > TITLE_MAX:
        return Invalid("title", f"Title must be at most {TITLE_MAX} characters.")
    if data.description and len(data.description.strip()) > DESCRIPTION_MAX:
        return Invalid("description", f"Description must be at most {DESCRIPTION_MAX} characters.")
    if not get_owned_workspace(db, owner_id, data.workspace_id):
        return Invalid("workspace_id", "Workspace not found.")
    if data.strategy_id is not None and not get_owned_strategy(db, owner_id, data.strategy_id):
        return Invalid("strategy_id", "Strategy not found.")
    return None


def _apply(habit: Habit, data: HabitIn) -> None:
    habit.title = data.title.strip()
    habit.description = (data.description or "").strip() or None
    habit.frequency = normalize_frequency(data.frequency)
    habit.target_count = max(1, int(data.target_count or 1))
    if data.is_active is not None:
        habit.is_active = data.is_active
    habit.workspace_id = data.workspace_id
    habit.strategy_id = data.strategy_id


def create_habit(db: Session, owner_id: str, data: HabitIn) -> Union[Habit, Invalid]:
    error = _validate(db, owner_id, data)
    if error:
        return error

    habit = Habit(owner_id=owner_id)
    _apply(habit, data)
    db.add(habit)
    db.commit()
    db.refresh(habit)
    logger.info("habit %s created for owner %s (%s x%s)", habit.id, owner_id, habit.frequency, habit.target_count)
    return habit


def update_habit(db: Session, owner_id: str, habit_id: int, data: HabitIn) -> Union[Habit, NotFound, Invalid]:
    habit = get_owned_habit(db, owner_id, habit_id)
    if not habit:
        return NotFound("habit", habit_id)

    error = _validate(db, owner_id, data)
    if error:
        return error

    _apply(habit, data)
    habit.updated_at = datetime.utcnow()
    db.add(habit)
    db.commit()
    db.refresh(habit)
    logger.info("habit %s updated by owner %s", habit.id, owner_id)
    return habit


def toggle_habit_active(db: Session, owner_id: str, habit_id: int) -> Union[Habit, NotFound]:
    habit = get_owned_habit(db, owner_id, habit_id)
    if not habit:
        return NotFound("habit", habit_id)

    habit.is_active = not habit.is_active
    habit.updated_at = datetime.utcnow()
    db.add(habit)
    db.commit()
    db.refresh(habit)
    logger.info("habit %s active=%s", habit.id, habit.is_active)
    return habit


def delete_habit(db: Session, owner_id: str, habit_id: int) -> Optional[NotFound]:
    result = db.execute(delete(Habit).where(and_(Habit.id == habit_id, Habit.owner_id == owner_id)))
    if not result.rowcount:
        db.rollback()
        return NotFound("habit", habit_id)

    db.commit()
    logger.info("habit %s deleted by owner %s", habit_id, owner_id)
    return None


def get_habit_counts(db: Session, owner_id: str) -> dict[str, int]:
    total = db.scalar(select(func.count()).select_from(Habit).where(Habit.owner_id == owner_id)) or 0
    active = db.scalar(
        select(func.count()).select_from(Habit).where(and_(Habit.owner_id == owner_id, Habit.is_active.is_(True)))
    ) or 0
    return {"habits": int(total), "active_habits": int(active)}
