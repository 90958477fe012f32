"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from guidepace.api.v1.routes import estimate, gpx

api_router = APIRouter()

api_router.include_router(estimate.router, prefix="/estimate", tags=["Estimation"])
api_router.include_router(gpx.router, prefix="/gpx", tags=["GPX"])
