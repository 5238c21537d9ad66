"""
Applicant Routes

GET /applicants - List all applicants
POST /applicants - Create applicant (id and dateAdded are assigned here)
PUT /applicants/{applicant_id} - Update only the supplied fields
DELETE /applicants/{applicant_id} - Delete applicant (and its resume file)
POST /applicants/{applicant_id}/comments - Add or replace the author's comment
DELETE /clear-all - Delete every applicant
"""

from fastapi import APIRouter, Depends, Path
from typing import Annotated, List

from applicant_tracker.api.deps import get_store
from applicant_tracker.services.store import ApplicantStore
from applicant_tracker.schemas.schemas import (
    Applicant, ApplicantCreate, ApplicantUpdate, ApplicantResponse,
    Comment, CommentResponse, MessageResponse, INT64_MAX, INT64_MIN
)

router = APIRouter(tags=["Applicants"])

# Ids are stored as BSON int64; anything outside that range cannot exist
ApplicantId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]


@router.get("/applicants", response_model=List[Applicant])
def list_applicants(store: ApplicantStore = Depends(get_store)):
    """Get all applicants in storage order."""
    return store.list_applicants()


@router.post("/applicants", response_model=ApplicantResponse)
def create_applicant(data: ApplicantCreate, store: ApplicantStore = Depends(get_store)):
    """Create an applicant. Client-supplied id/dateAdded are ignored."""
    applicant = store.insert(data)
    return ApplicantResponse(applicant=applicant)


@router.put("/applicants/{applicant_id}", response_model=ApplicantResponse)
def update_applicant(
    applicant_id: ApplicantId,
    data: ApplicantUpdate,
    store: ApplicantStore = Depends(get_store)
):
    """Update applicant. Only provided fields are changed; comments are untouched."""
    applicant = store.update_by_id(applicant_id, data)
    return ApplicantResponse(applicant=applicant)


@router.delete("/applicants/{applicant_id}", response_model=MessageResponse)
def delete_applicant(applicant_id: ApplicantId, store: ApplicantStore = Depends(get_store)):
    store.delete_by_id(applicant_id)
    return MessageResponse()


@router.post("/applicants/{applicant_id}/comments", response_model=CommentResponse)
def add_comment(
    applicant_id: ApplicantId,
    comment: Comment,
    store: ApplicantStore = Depends(get_store)
):
    """
    Add a comment. An earlier comment by the same person is removed,
    so each person has at most one comment and the newest is last.
    """
    saved = store.add_comment(applicant_id, comment)
    return CommentResponse(comment=saved)


@router.delete("/clear-all", response_model=MessageResponse)
def clear_all(store: ApplicantStore = Depends(get_store)):
    """Delete every applicant (and, for the file backend, their resumes)."""
    store.delete_all()
    return MessageResponse()
