"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
JSON uses camelCase keys (fullName, resumePath, ...); Python code uses snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List

# Range of a BSON int64, the type applicant ids are stored as
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


# ============================================================
# COMMENT SCHEMAS
# ============================================================

class Comment(CamelModel):
    person: str
    text: Optional[str] = None
    date: Optional[str] = None


# ============================================================
# APPLICANT SCHEMAS
# ============================================================

class ApplicantFields(CamelModel):
    """Caller-editable applicant fields. Used for both create and partial update."""
    full_name: Optional[str] = None
    linkedin_url: Optional[str] = None
    expected_salary: Optional[str] = None
    notes: Optional[str] = None
    resume_name: Optional[str] = None
    resume_path: Optional[str] = None


class ApplicantCreate(ApplicantFields):
    pass


class ApplicantUpdate(ApplicantFields):
    pass


class Applicant(ApplicantFields):
    id: int
    date_added: str
    comments: List[Comment] = Field(default_factory=list)

    def to_document(self) -> dict:
        """Serialize with JSON key names, as stored in MongoDB and the JSON file."""
        return self.model_dump(by_alias=True)


# ============================================================
# RESPONSE SCHEMAS
# ============================================================

class ApplicantResponse(CamelModel):
    success: bool = True
    applicant: Applicant


class CommentResponse(CamelModel):
    success: bool = True
    comment: Comment


class ResumeUploadResponse(CamelModel):
    success: bool = True
    file_path: str
    file_name: str
    original_name: Optional[str] = None


class MessageResponse(CamelModel):
    success: bool = True
