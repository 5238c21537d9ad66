from datetime import date

import pytest
from pydantic import ValidationError

from applicant_tracker.core.config import Settings
from applicant_tracker.schemas.schemas import Applicant, ApplicantCreate
from applicant_tracker.services.store import format_date_added, new_applicant, next_applicant_id


def test_ids_are_strictly_increasing() -> None:
    ids = [next_applicant_id() for _ in range(50)]
    assert ids == sorted(set(ids))


def test_date_added_has_no_zero_padding() -> None:
    assert format_date_added(date(2025, 3, 7)) == "3/7/2025"
    assert format_date_added(date(2024, 12, 25)) == "12/25/2024"


def test_new_applicant_stamps_id_and_date() -> None:
    applicant = new_applicant(ApplicantCreate(full_name="Ada Lovelace", notes="first"))

    assert applicant.id > 0
    assert applicant.date_added == format_date_added()
    assert applicant.full_name == "Ada Lovelace"
    assert applicant.comments == []


def test_applicant_uses_camel_case_json() -> None:
    applicant = Applicant.model_validate(
        {"id": 1, "dateAdded": "1/1/2025", "fullName": "Ada", "linkedinUrl": "https://x", "expectedSalary": 90000}
    )
    doc = applicant.to_document()

    assert doc["fullName"] == "Ada"
    assert doc["linkedinUrl"] == "https://x"
    assert doc["expectedSalary"] == "90000"
    assert doc["dateAdded"] == "1/1/2025"


def test_settings_reject_unknown_backend() -> None:
    with pytest.raises(ValidationError):
        Settings(storage_backend="postgres")


def test_settings_cors_origin_list() -> None:
    settings = Settings(cors_origins="http://localhost:5173, https://example.com")
    assert settings.cors_origin_list == ["http://localhost:5173", "https://example.com"]
