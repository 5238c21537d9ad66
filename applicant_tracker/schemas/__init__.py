"""
Schemas module - Request/Response schemas for API endpoints.
"""

from applicant_tracker.schemas.schemas import (
    Applicant,
    ApplicantCreate,
    ApplicantFields,
    ApplicantResponse,
    ApplicantUpdate,
    Comment,
    CommentResponse,
    MessageResponse,
    ResumeUploadResponse,
)

__all__ = [
    "Applicant",
    "ApplicantCreate",
    "ApplicantFields",
    "ApplicantResponse",
    "ApplicantUpdate",
    "Comment",
    "CommentResponse",
    "MessageResponse",
    "ResumeUploadResponse",
]
