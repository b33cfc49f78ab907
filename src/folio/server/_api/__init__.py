from fastapi import APIRouter

from ._health import router as health_router
from ._projects import router as projects_router

router = APIRouter(prefix="/api")

router.include_router(health_router)
router.include_router(projects_router)
