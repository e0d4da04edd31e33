from datetime import timedelta
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from habitdesk.api.deps import get_db, get_owner_id, unwrap
from habitdesk.crud import (
    HabitFilters,
    create_habit,
    delete_habit,
    get_habit_counts,
    get_habit_with_progress,
    list_checkins,
    list_habits_with_progress,
    record_checkin,
    toggle_habit_active,
    update_habit,
)
from habitdesk.schemas import CheckinIn, CheckinOut, HabitIn, HabitListOut, HabitOut, HabitProgressOut, HabitSummaryOut

router = APIRouter(prefix="/v1/habits", tags=["habits"])


@router.get("", response_model=HabitListOut)
def habits_list(
    workspace_id: Optional[int] = None,
    strategy_id: Optional[int] = None,
    frequency: Optional[str] = None,
    q: Optional[str] = None,
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    filters = HabitFilters(workspace_id=workspace_id, strategy_id=strategy_id, frequency=frequency, q=q)
    items = list_habits_with_progress(db, owner_id, filters)
    return {"count": len(items), "items": [HabitProgressOut.model_validate(item) for item in items]}


@router.get("/summary", response_model=HabitSummaryOut)
def habits_summary(owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)) -> Dict[str, int]:
    return get_habit_counts(db, owner_id)


@router.get("/{habit_id}")
def habit_detail(habit_id: int, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)) -> Dict[str, Any]:
    progress = unwrap(get_habit_with_progress(db, owner_id, habit_id))
    checkins = list_checkins(
        db,
        owner_id,
        habit_id,
        progress.period_start,
        progress.period_end + timedelta(days=1),
    )
    return {
        "habit": HabitProgressOut.model_validate(progress),
        "checkins": [CheckinOut.model_validate(c) for c in checkins],
    }


@router.post("", response_model=HabitOut, status_code=201)
def habit_create(payload: HabitIn, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    return unwrap(create_habit(db, owner_id, payload))


@router.put("/{habit_id}", response_model=HabitOut)
def habit_update(habit_id: int, payload: HabitIn, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    return unwrap(update_habit(db, owner_id, habit_id, payload))


@router.post("/{habit_id}/toggle", response_model=HabitOut)
def habit_toggle(habit_id: int, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    return unwrap(toggle_habit_active(db, owner_id, habit_id))


@router.delete("/{habit_id}")
def habit_delete(habit_id: int, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)) -> Dict[str, Any]:
    unwrap(delete_habit(db, owner_id, habit_id))
    return {"ok": True, "deleted": habit_id}


@router.post("/{habit_id}/checkins", response_model=CheckinOut)
def habit_checkin(
    habit_id: int,
    payload: Optional[CheckinIn] = None,
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db),
):
    note = payload.note if payload else None
    return unwrap(record_checkin(db, owner_id, habit_id, note=note))
