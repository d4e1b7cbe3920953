"""
===============================================================================
CRC CARD — interfaces/api/http/router.py
===============================================================================

Responsibilities:
    - Assemble the resource routers into a single APIRouter.
    - The application mounts the result under /api/v1.
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from .routers.notes import router as notes_router
from .routers.users import router as users_router
from .routers.work_hours import router as work_hours_router


def build_router() -> APIRouter:
    router = APIRouter()
    router.include_router(users_router)
    router.include_router(work_hours_router)
    router.include_router(notes_router)
    return router


router = build_router()
