"""
FastAPI dependencies - hand each request the store chosen at startup.
"""

from fastapi import Request

from applicant_tracker.core.config import Settings
from applicant_tracker.core.errors import ValidationFailure
from applicant_tracker.db.mongodb import get_collection
from applicant_tracker.services.file_service import JsonFileApplicantService
from applicant_tracker.services.mongo_service import MongoApplicantService
from applicant_tracker.services.store import ApplicantStore
from applicant_tracker.utils.file_upload import ResumeAssetManager


def build_store(settings: Settings) -> ApplicantStore:
    """Create the record store selected by settings.storage_backend."""
    if settings.storage_backend == "mongo":
        return MongoApplicantService(get_collection(settings))

    assets = ResumeAssetManager(
        public_dir=settings.public_dir,
        subdir=settings.resume_subdir,
        max_file_size_mb=settings.max_upload_mb
    )
    return JsonFileApplicantService(settings.data_file, assets=assets)


def get_store(request: Request) -> ApplicantStore:
    return request.app.state.store


def get_assets(request: Request) -> ResumeAssetManager:
    assets = getattr(request.app.state.store, "assets", None)
    if assets is None:
        raise ValidationFailure("Resume upload is not available for this storage backend")
    return assets
