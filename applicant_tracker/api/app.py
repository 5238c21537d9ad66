"""
App factory - builds the FastAPI app for a given settings/store pair.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from applicant_tracker.api.deps import build_store
from applicant_tracker.api.routes import api_router, upload_router
from applicant_tracker.core.config import Settings, get_settings
from applicant_tracker.core.errors import register_exception_handlers
from applicant_tracker.core.logging_config import configure_logging
from applicant_tracker.services.store import ApplicantStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[ApplicantStore] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)
    store = store if store is not None else build_store(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Applicant tracking API: applicants, comments and resumes.",
        version="1.0.0",
        debug=settings.debug
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")
    if getattr(store, "assets", None) is not None:
        app.include_router(upload_router, prefix="/api")

    # Uploaded resumes are linked as "applications/<name>"
    settings.resume_dir.mkdir(parents=True, exist_ok=True)
    resumes = StaticFiles(directory=str(settings.resume_dir))
    app.mount(f"/{settings.resume_subdir}", resumes, name="resumes")
    app.mount(f"/public/{settings.resume_subdir}", resumes, name="public-resumes")

    @app.on_event("startup")
    def startup_event() -> None:
        """Prepare storage; an unreachable backend aborts startup."""
        store.initialize()
        logger.info("%s ready with %s storage", settings.app_name, store.backend_name)

    @app.get("/health", tags=["Health"])
    def health_check():
        ok = store.ping()
        return {
            "status": "healthy" if ok else "degraded",
            "backend": store.backend_name,
            "storage": "connected" if ok else "disconnected"
        }

    return app

