import logging
from datetime import date, datetime
from typing import Optional, Union

from sqlalchemy import and_, case, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from habitdesk.crud.habits import get_owned_habit
from habitdesk.crud.results import NotFound
from habitdesk.models import DAILY, Habit, HabitCheckin
from habitdesk.period import utc_today

logger = logging.getLogger(__name__)

NOTE_MAX = 500

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _capped(habit: Habit, value):
    """Clamp a count (int or SQL expression) to the habit's target for Daily habits."""
    if habit.frequency != DAILY:
        return value
    if isinstance(value, int):
        return min(habit.target_count, value)
    return case((value > habit.target_count, habit.target_count), else_=value)


def _upsert_statement(db: Session, habit: Habit, owner_id: str, today: date, note: Optional[str]):
    dialect = db.get_bind().dialect.name
    insert = _UPSERT_DIALECTS.get(dialect)
    if insert is None:
        raise RuntimeError(f"check-in upsert is not supported on the {dialect!r} dialect")

    stmt = insert(HabitCheckin).values(
        habit_id=habit.id,
        owner_id=owner_id,
        occurred_on=today,
        count=_capped(habit, 1),
        note=note,
        created_at=datetime.utcnow(),
    )
    updates = {"count": _capped(habit, HabitCheckin.count + 1)}
    if note is not None:
        updates["note"] = note
    return stmt.on_conflict_do_update(index_elements=["habit_id", "owner_id", "occurred_on"], set_=updates)


def record_checkin(
    db: Session,
    owner_id: str,
    habit_id: int,
    note: Optional[str] = None,
    today: Optional[date] = None,
) -> Union[HabitCheckin, NotFound]:
    habit = get_owned_habit(db, owner_id, habit_id)
    if not habit:
        return NotFound("habit", habit_id)

    today = today or utc_today()
    note = (note or "").strip()[:NOTE_MAX] or None

    db.execute(_upsert_statement(db, habit, owner_id, today, note))
    db.commit()

    checkin = db.scalar(
        select(HabitCheckin)
        .where(
            and_(
                HabitCheckin.habit_id == habit_id,
                HabitCheckin.owner_id == owner_id,
                HabitCheckin.occurred_on == today,
            )
        )
        .execution_options(populate_existing=True)
    )
    logger.info("habit %s checked in by owner %s on %s (count=%s)", habit_id, owner_id, today, checkin.count)
    return checkin


def list_checkins(db: Session, owner_id: str, habit_id: int, start: date, end_exclusive: date) -> list[HabitCheckin]:
    return list(
        db.scalars(
            select(HabitCheckin)
            .where(
                and_(
                    HabitCheckin.owner_id == owner_id,
                    HabitCheckin.habit_id == habit_id,
                    HabitCheckin.occurred_on >= start,
                    HabitCheckin.occurred_on < end_exclusive,
                )
            )
            .order_by(HabitCheckin.occurred_on)
        )
    )
