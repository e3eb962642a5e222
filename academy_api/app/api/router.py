"""
Top-level router for the academy API.

Aggregates the resource routers.  The application mounts this router
under ``/api``; the Indonesian resource names (``pemain``, ``pelatih``,
``jadwal``) are part of the public URL contract used by the frontend.
"""

from fastapi import APIRouter

from .endpoints import auth, coaches, players, schedules

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(players.router, prefix="/pemain", tags=["pemain"])
router.include_router(coaches.router, prefix="/pelatih", tags=["pelatih"])
router.include_router(schedules.router, prefix="/jadwal", tags=["jadwal"])
