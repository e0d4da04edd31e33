"""Per-period completion totals for habits.

The batch form costs two round trips regardless of list size: one query for
the habits and one for every check-in inside the union of their windows.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Sequence, Union

from sqlalchemy import and_, case, func, select
from sqlalchemy.orm import Session

from habitdesk.crud.results import NotFound
from habitdesk.models import DAILY, WEEKLY, Habit, HabitCheckin, Strategy, Workspace
from habitdesk.period import resolve_period, union_window, utc_today

Names = dict[int, tuple[str, Optional[str]]]


@dataclass
class HabitFilters:
    workspace_id: Optional[int] = None
    strategy_id: Optional[int] = None
    frequency: Optional[str] = None
    q: Optional[str] = None


@dataclass
class HabitProgress:
    id: int
    workspace_id: int
    workspace_name: str
    strategy_id: Optional[int]
    strategy_name: Optional[str]
    title: str
    description: Optional[str]
    frequency: str
    target_count: int
    is_active: bool
    period_start: date
    period_end: date
    period_count: int
    today_count: int

    @classmethod
    def build(
        cls,
        habit: Habit,
        window: tuple[date, date],
        period_count: int,
        today_count: int,
        workspace_name: str = "",
        strategy_name: Optional[str] = None,
    ) -> "HabitProgress":
        start, end_exclusive = window
        return cls(
            id=habit.id,
            workspace_id=habit.workspace_id,
            workspace_name=workspace_name,
            strategy_id=habit.strategy_id,
            strategy_name=strategy_name,
            title=habit.title,
            description=habit.description,
            frequency=habit.frequency,
            target_count=habit.target_count,
            is_active=habit.is_active,
            period_start=start,
            period_end=end_exclusive - timedelta(days=1),
            period_count=period_count,
            today_count=today_count,
        )


def _named_habits_query(owner_id: str):
    return (
        select(Habit, Workspace.name, Strategy.name)
        .outerjoin(Workspace, and_(Workspace.id == Habit.workspace_id, Workspace.owner_id == owner_id))
        .outerjoin(Strategy, and_(Strategy.id == Habit.strategy_id, Strategy.owner_id == owner_id))
        .where(Habit.owner_id == owner_id)
    )


def aggregate_progress(
    db: Session,
    owner_id: str,
    habits: Sequence[Habit],
    today: Optional[date] = None,
    names: Optional[Names] = None,
) -> list[HabitProgress]:
    if not habits:
        return []

    today = today or utc_today()
    names = names or {}
    windows = {habit.id: resolve_period(habit.frequency, today) for habit in habits}
    min_start, max_end = union_window(windows.values())

    rows = db.execute(
        select(HabitCheckin.habit_id, HabitCheckin.occurred_on, HabitCheckin.count).where(
            and_(
                HabitCheckin.owner_id == owner_id,
                HabitCheckin.habit_id.in_(list(windows)),
                HabitCheckin.occurred_on >= min_start,
                HabitCheckin.occurred_on < max_end,
            )
        )
    ).all()

    by_habit: dict[int, list[tuple[date, int]]] = defaultdict(list)
    for habit_id, occurred_on, count in rows:
        by_habit[habit_id].append((occurred_on, count))

    result: list[HabitProgress] = []
    for habit in habits:
        start, end_exclusive = windows[habit.id]
        own = by_habit.get(habit.id, [])
        period_count = sum(count for day, count in own if start <= day < end_exclusive)
        today_count = sum(count for day, count in own if day == today)
        workspace_name, strategy_name = names.get(habit.id, ("", None))
        result.append(
            HabitProgress.build(habit, windows[habit.id], period_count, today_count, workspace_name or "", strategy_name)
        )
    return result


def list_habits_with_progress(
    db: Session,
    owner_id: str,
    filters: Optional[HabitFilters] = None,
    today: Optional[date] = None,
) -> list[HabitProgress]:
    filters = filters or HabitFilters()
    query = _named_habits_query(owner_id)

    if filters.workspace_id is not None:
        query = query.where(Habit.workspace_id == filters.workspace_id)
    if filters.strategy_id is not None:
        query = query.where(Habit.strategy_id == filters.strategy_id)

    frequency = (filters.frequency or "").strip().lower()
    if frequency in (DAILY.lower(), WEEKLY.lower()):
        query = query.where(Habit.frequency == (DAILY if frequency == DAILY.lower() else WEEKLY))

    q = (filters.q or "").strip()
    if q:
        query = query.where(Habit.title.icontains(q, autoescape=True) | Habit.description.icontains(q, autoescape=True))

    query = query.order_by(
        Habit.is_active.desc(),
        case((Habit.frequency == DAILY, 0), else_=1),
        Habit.title,
    )

    rows = db.execute(query).all()
    habits = [habit for habit, _, _ in rows]
    names = {habit.id: (workspace_name, strategy_name) for habit, workspace_name, strategy_name in rows}
    return aggregate_progress(db, owner_id, habits, today=today, names=names)


def get_habit_with_progress(
    db: Session,
    owner_id: str,
    habit_id: int,
    today: Optional[date] = None,
) -> Union[HabitProgress, NotFound]:
    row = db.execute(_named_habits_query(owner_id).where(Habit.id == habit_id)).first()
    if not row:
        return NotFound("habit", habit_id)

    habit, workspace_name, strategy_name = row
    today = today or utc_today()
    start, end_exclusive = resolve_period(habit.frequency, today)

    period_count, today_count = db.execute(
        select(
            func.coalesce(func.sum(HabitCheckin.count), 0),
            func.coalesce(func.sum(case((HabitCheckin.occurred_on == today, HabitCheckin.count), else_=0)), 0),
        ).where(
            and_(
                HabitCheckin.owner_id == owner_id,
                HabitCheckin.habit_id == habit.id,
                HabitCheckin.occurred_on >= start,
                HabitCheckin.occurred_on < end_exclusive,
            )
        )
    ).one()

    return HabitProgress.build(
        habit,
        (start, end_exclusive),
        int(period_count),
        int(today_count),
        workspace_name or "",
        strategy_name,
    )
