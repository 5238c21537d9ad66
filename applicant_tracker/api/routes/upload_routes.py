"""
Upload Routes (JSON-file backend only)

POST /upload-resume - Store a resume PDF; returns the path to put in resumePath
"""

from fastapi import APIRouter, Depends, File, Form, UploadFile
from typing import Optional

from applicant_tracker.api.deps import get_assets
from applicant_tracker.core.errors import ValidationFailure
from applicant_tracker.schemas.schemas import ResumeUploadResponse
from applicant_tracker.utils.file_upload import ResumeAssetManager

router = APIRouter(tags=["Resumes"])


@router.post("/upload-resume", response_model=ResumeUploadResponse)
def upload_resume(
    file: Optional[UploadFile] = File(None, description="Resume file (PDF only)"),
    file_name: Optional[str] = Form(None, alias="fileName"),
    assets: ResumeAssetManager = Depends(get_assets)
):
    """
    Upload a resume PDF.

    The file is stored under `fileName` when given, otherwise under
    `<timestamp>_<original name>`. Upload does not touch any applicant;
    the client sets resumePath/resumeName on the record afterwards.
    """
    if file is None or not file.filename:
        raise ValidationFailure("No file uploaded")

    # Sync endpoint: runs in the threadpool, off the event loop
    content = file.file.read()
    file_path, stored_name = assets.store(
        content,
        content_type=file.content_type,
        original_name=file.filename,
        requested_name=file_name
    )

    return ResumeUploadResponse(
        file_path=file_path,
        file_name=stored_name,
        original_name=file.filename
    )
