import logging
from typing import Optional, Union

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from habitdesk.crud.results import Invalid
from habitdesk.models import Strategy, Workspace

logger = logging.getLogger(__name__)


def get_owned_workspace(db: Session, owner_id: str, workspace_id: int) -> Optional[Workspace]:
    return db.scalar(select(Workspace).where(and_(Workspace.id == workspace_id, Workspace.owner_id == owner_id)))


def get_owned_strategy(db: Session, owner_id: str, strategy_id: int) -> Optional[Strategy]:
    return db.scalar(select(Strategy).where(and_(Strategy.id == strategy_id, Strategy.owner_id == owner_id)))


def list_workspaces(db: Session, owner_id: str) -> list[Workspace]:
    return list(db.scalars(select(Workspace).where(Workspace.owner_id == owner_id).order_by(Workspace.name)))


def list_strategies(db: Session, owner_id: str, workspace_id: Optional[int] = None) -> list[Strategy]:
    query = select(Strategy).where(Strategy.owner_id == owner_id).order_by(Strategy.name)
    if workspace_id is not None:
        query = query.where(Strategy.workspace_id == workspace_id)
    return list(db.scalars(query))


def create_workspace(db: Session, owner_id: str, name: str, description: Optional[str] = None) -> Union[Workspace, Invalid]:
    name = (name or "").strip()
    if not name:
        return Invalid("name", "Workspace name is required.")
    if len(name) > 120:
        return Invalid("name", "Workspace name must be at most 120 characters.")

    workspace = Workspace(owner_id=owner_id, name=name, description=(description or "").strip() or None)
    db.add(workspace)
    db.commit()
    db.refresh(workspace)
    logger.info("workspace %s created for owner %s", workspace.id, owner_id)
    return workspace


def create_strategy(db: Session, owner_id: str, name: str, workspace_id: Optional[int] = None) -> Union[Strategy, Invalid]:
    name = (name or "").strip()
    if not name:
        return Invalid("name", "Strategy name is required.")
    if len(name) > 160:
        return Invalid("name", "Strategy name must be at most 160 characters.")
    if workspace_id is not None and not get_owned_workspace(db, owner_id, workspace_id):
        return Invalid("workspace_id", "Workspace not found.")

    strategy = Strategy(owner_id=owner_id, name=name, workspace_id=workspace_id)
    db.add(strategy)
    db.commit()
    db.refresh(strategy)
    logger.info("strategy %s created for owner %s", strategy.id, owner_id)
    return strategy
