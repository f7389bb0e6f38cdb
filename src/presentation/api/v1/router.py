from fastapi import APIRouter

from .health import health_router
from .localities import localities_router
from .submit import submit_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(localities_router, tags=["Localities"])
router.include_router(submit_router, tags=["Submissions"])
