"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from applicant_tracker.api.routes.applicant_routes import router as applicant_router
from applicant_tracker.api.routes.upload_routes import router as upload_router

# Routes shared by both storage backends
api_router = APIRouter()
api_router.include_router(applicant_router)

__all__ = ["api_router", "upload_router"]
