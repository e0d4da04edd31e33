from typing import Iterator

from fastapi import HTTPException, Request
from sqlalchemy.orm import Session

from habitdesk.config import settings
from habitdesk.crud import Invalid, NotFound
from habitdesk.db import SessionLocal


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_owner_id(request: Request) -> str:
    owner_id = (request.headers.get(settings.OWNER_HEADER) or "").strip()
    if not owner_id:
        raise HTTPException(status_code=401, detail="owner identity required")
    return owner_id


def unwrap(result):
    if isinstance(result, NotFound):
        raise HTTPException(status_code=404, detail=result.message)
    if isinstance(result, Invalid):
        raise HTTPException(status_code=400, detail={"field": result.field, "message": result.message})
    return result
