from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from habitdesk.api.deps import get_db, get_owner_id, unwrap
from habitdesk.crud import create_strategy, create_workspace, list_strategies, list_workspaces
from habitdesk.schemas import StrategyIn, StrategyOut, WorkspaceIn, WorkspaceOut

router = APIRouter(prefix="/v1", tags=["workspaces"])


@router.get("/workspaces", response_model=list[WorkspaceOut])
def workspaces_list(owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    return list_workspaces(db, owner_id)


@router.post("/workspaces", response_model=WorkspaceOut, status_code=201)
def workspace_create(payload: WorkspaceIn, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    return unwrap(create_workspace(db, owner_id, payload.name, payload.description))


@router.get("/strategies", response_model=list[StrategyOut])
def strategies_list(
    workspace_id: Optional[int] = None,
    owner_id: str = Depends(get_owner_id),
    db: Session = Depends(get_db),
):
    return list_strategies(db, owner_id, workspace_id)


@router.post("/strategies", response_model=StrategyOut, status_code=201)
def strategy_create(payload: StrategyIn, owner_id: str = Depends(get_owner_id), db: Session = Depends(get_db)):
    return unwrap(create_strategy(db, owner_id, payload.name, payload.workspace_id))
