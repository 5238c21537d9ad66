"""
Record Store contract shared by the MongoDB and JSON-file backends.

Both backends expose the same operations and must be indistinguishable
to API clients:
    list_applicants, insert, update_by_id, add_comment, delete_by_id, delete_all

Ids come from the clock (epoch milliseconds), bumped by one when two
applicants are created within the same millisecond.
"""

import threading
import time
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from applicant_tracker.schemas.schemas import (
    Applicant,
    ApplicantCreate,
    ApplicantUpdate,
    Comment,
)


_id_lock = threading.Lock()
_last_id = 0


def next_applicant_id() -> int:
    """Current time in ms, strictly increasing within this process."""
    global _last_id
    with _id_lock:
        candidate = int(time.time() * 1000)
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
        return candidate


def format_date_added(day: Optional[date] = None) -> str:
    """Human-readable creation date, e.g. 3/7/2025."""
    day = day or date.today()
    return f"{day.month}/{day.day}/{day.year}"


def new_applicant(payload: ApplicantCreate) -> Applicant:
    """Build a fresh record from a create payload, stamping id and dateAdded."""
    return Applicant(
        **payload.model_dump(exclude={"id", "date_added", "comments"}),
        id=next_applicant_id(),
        date_added=format_date_added(),
    )


class ApplicantStore(ABC):
    """Persistence for applicant records."""

    backend_name = "abstract"

    def initialize(self) -> None:
        """Prepare storage at startup (indexes, directories)."""

    @abstractmethod
    def ping(self) -> bool:
        ...

    @abstractmethod
    def list_applicants(self) -> List[Applicant]:
        ...

    @abstractmethod
    def insert(self, payload: ApplicantCreate) -> Applicant:
        ...

    @abstractmethod
    def update_by_id(self, applicant_id: int, payload: ApplicantUpdate) -> Applicant:
        """Overwrite only the fields set on payload. Raises NotFoundError."""

    @abstractmethod
    def add_comment(self, applicant_id: int, comment: Comment) -> Comment:
        """Replace any comment by the same person, append at the end. Raises NotFoundError."""

    @abstractmethod
    def delete_by_id(self, applicant_id: int) -> None:
        """Raises NotFoundError."""

    @abstractmethod
    def delete_all(self) -> None:
        ...
