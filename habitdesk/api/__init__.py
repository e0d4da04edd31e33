from fastapi import APIRouter

from habitdesk.api.habits import router as habits_router
from habitdesk.api.workspaces import router as workspaces_router

router = APIRouter()
router.include_router(habits_router)
router.include_router(workspaces_router)

__all__ = ["router"]
