from __future__ import annotations

from pathlib import Path

import mongomock
import pytest
from fastapi.testclient import TestClient

from applicant_tracker.api.app import create_app
from applicant_tracker.core.config import Settings
from applicant_tracker.services.file_service import JsonFileApplicantService
from applicant_tracker.services.mongo_service import MongoApplicantService
from applicant_tracker.utils.file_upload import ResumeAssetManager


def make_settings(tmp_path: Path, backend: str) -> Settings:
    return Settings(
        storage_backend=backend,
        data_file=tmp_path / "data" / "applicants.json",
        public_dir=tmp_path / "public",
        log_level="WARNING",
    )


@pytest.fixture
def assets(tmp_path: Path) -> ResumeAssetManager:
    manager = ResumeAssetManager(public_dir=tmp_path / "public", max_file_size_mb=1)
    manager.ensure_dir()
    return manager


@pytest.fixture
def file_store(tmp_path: Path, assets: ResumeAssetManager) -> JsonFileApplicantService:
    store = JsonFileApplicantService(tmp_path / "data" / "applicants.json", assets=assets)
    store.initialize()
    return store


@pytest.fixture
def mongo_store() -> MongoApplicantService:
    collection = mongomock.MongoClient().db.applicants
    store = MongoApplicantService(collection)
    store.initialize()
    return store


@pytest.fixture
def file_client(tmp_path: Path):
    app = create_app(make_settings(tmp_path, "file"))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def mongo_client(tmp_path: Path):
    store = MongoApplicantService(mongomock.MongoClient().db.applicants)
    app = create_app(make_settings(tmp_path, "mongo"), store=store)
    with TestClient(app) as client:
        yield client


@pytest.fixture(params=["file", "mongo"])
def client(request: pytest.FixtureRequest):
    """API client for each storage backend; both must answer identically."""
    return request.getfixturevalue(f"{request.param}_client")
