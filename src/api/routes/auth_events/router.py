"""Router dos eventos do provedor de identidade."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.auth_events.user_created import router as user_created_router

router = APIRouter()

router.include_router(user_created_router)
