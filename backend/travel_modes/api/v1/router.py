"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from travel_modes.api.v1.routes import modes

api_router = APIRouter()

api_router.include_router(modes.router, prefix="/modes", tags=["Modes"])
