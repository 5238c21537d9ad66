"""
JSON File Service - applicant records in a single JSON document.

The file holds an array of applicant objects. Every mutating operation
reads the whole array, changes it in memory and rewrites the file.

Read-modify-write cycles are serialized by a lock inside this process.
Nothing coordinates separate processes pointed at the same file: two
workers writing concurrently can still lose an update (last write wins).
"""

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from pydantic import ValidationError

from applicant_tracker.core.errors import NOT_FOUND_MESSAGE, NotFoundError, PersistenceError
from applicant_tracker.schemas.schemas import (
    Applicant,
    ApplicantCreate,
    ApplicantUpdate,
    Comment,
)
from applicant_tracker.services.comments import merge_comment
from applicant_tracker.services.store import ApplicantStore, new_applicant
from applicant_tracker.utils.file_upload import ResumeAssetManager

logger = logging.getLogger(__name__)


def _find_index(applicants: List[Applicant], applicant_id: int) -> int:
    for index, applicant in enumerate(applicants):
        if applicant.id == applicant_id:
            return index
    raise NotFoundError(NOT_FOUND_MESSAGE)


class JsonFileApplicantService(ApplicantStore):
    """
    Handles applicant storage in a flat JSON file, plus resume cleanup.
    """

    backend_name = "file"

    def __init__(self, data_file: Path, assets: Optional[ResumeAssetManager] = None):
        self.data_file = Path(data_file)
        self.assets = assets
        self._lock = threading.RLock()

    def initialize(self) -> None:
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            if not self.data_file.exists():
                self._write([])
        except OSError as e:
            raise PersistenceError(f"Cannot prepare data file {self.data_file}: {e}")
        if self.assets is not None:
            self.assets.ensure_dir()
        logger.info("Using applicant file %s", self.data_file)

    def ping(self) -> bool:
        try:
            self._read()
            return True
        except PersistenceError as e:
            logger.warning("Applicant file unreadable: %s", e.message)
            return False

    # --------------------------------------------------------
    # Raw file access
    # --------------------------------------------------------

    def _read(self) -> List[Applicant]:
        """Load all applicants. A missing file is an empty list."""
        if not self.data_file.exists():
            return []
        try:
            with open(self.data_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Error reading applicants file: {e}")

        if not isinstance(data, list):
            raise PersistenceError("Error reading applicants file: expected a JSON array")
        try:
            return [Applicant.model_validate(item) for item in data]
        except ValidationError as e:
            raise PersistenceError(f"Error reading applicants file: {e}")

    def _write(self, applicants: List[Applicant]) -> None:
        """Rewrite the whole file atomically (temp file + rename)."""
        payload = [applicant.to_document() for applicant in applicants]
        directory = self.data_file.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".applicants-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2)
                os.replace(tmp_path, self.data_file)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as e:
            raise PersistenceError(f"Error writing applicants file: {e}")

    @contextmanager
    def _editing(self) -> Iterator[List[Applicant]]:
        """Read the list, let the caller mutate it, write it back on success."""
        with self._lock:
            applicants = self._read()
            yield applicants
            self._write(applicants)

    # --------------------------------------------------------
    # Store operations
    # --------------------------------------------------------

    def list_applicants(self) -> List[Applicant]:
        with self._lock:
            return self._read()

    def insert(self, payload: ApplicantCreate) -> Applicant:
        applicant = new_applicant(payload)
        with self._editing() as applicants:
            applicants.append(applicant)
        logger.info("Inserted applicant %s", applicant.id)
        return applicant

    def update_by_id(self, applicant_id: int, payload: ApplicantUpdate) -> Applicant:
        fields = payload.model_dump(exclude_unset=True)
        with self._editing() as applicants:
            index = _find_index(applicants, applicant_id)
            updated = applicants[index].model_copy(update=fields)
            applicants[index] = updated
        logger.info("Updated applicant %s (%s)", applicant_id, ", ".join(fields) or "no fields")
        return updated

    def add_comment(self, applicant_id: int, comment: Comment) -> Comment:
        with self._editing() as applicants:
            index = _find_index(applicants, applicant_id)
            applicant = applicants[index]
            applicants[index] = applicant.model_copy(
                update={"comments": merge_comment(applicant.comments, comment)}
            )
        logger.info("Comment by %s saved on applicant %s", comment.person, applicant_id)
        return comment

    def delete_by_id(self, applicant_id: int) -> None:
        with self._editing() as applicants:
            index = _find_index(applicants, applicant_id)
            removed = applicants.pop(index)
            self._delete_resume(removed)
        logger.info("Deleted applicant %s", applicant_id)

    def delete_all(self) -> None:
        with self._editing() as applicants:
            for applicant in applicants:
                self._delete_resume(applicant)
            count = len(applicants)
            applicants.clear()
        logger.info("Cleared %d applicants", count)

    def _delete_resume(self, applicant: Applicant) -> None:
        if self.assets is not None and applicant.resume_path:
            self.assets.delete_if_exists(applicant.resume_path)
