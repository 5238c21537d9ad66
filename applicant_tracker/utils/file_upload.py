"""
Resume Asset Manager - stores uploaded resume PDFs on disk.

Layout:
    <public_dir>/<resume_subdir>/<file name>

Records reference a resume by its path relative to public_dir
(e.g. "applications/1718000000000_cv.pdf"), which is also the URL path
the file is served under.

Only PDF uploads are accepted (declared content type application/pdf).
"""

import logging
import os
import time
from pathlib import Path, PurePath
from typing import Optional, Tuple

from applicant_tracker.core.errors import ValidationFailure, PersistenceError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
DEFAULT_MAX_FILE_SIZE_MB = 10


def generate_file_name(original_name: str) -> str:
    """Timestamp-prefixed name for uploads without a requested name."""
    return f"{int(time.time() * 1000)}_{original_name}"


def safe_file_name(name: str) -> str:
    """Strip any directory part so a name cannot point outside the asset dir."""
    name = PurePath(name.replace("\\", "/")).name
    return "" if name == ".." else name


class ResumeAssetManager:
    """
    Handles resume files for the JSON-file backend.
    """

    def __init__(
        self,
        public_dir: Path,
        subdir: str = "applications",
        max_file_size_mb: int = DEFAULT_MAX_FILE_SIZE_MB
    ):
        self.public_dir = Path(public_dir)
        self.subdir = subdir
        self.asset_dir = self.public_dir / subdir
        self.max_file_size_bytes = max_file_size_mb * 1024 * 1024
        self.max_file_size_mb = max_file_size_mb

    def ensure_dir(self) -> None:
        self.asset_dir.mkdir(parents=True, exist_ok=True)

    def store(
        self,
        content: bytes,
        content_type: Optional[str],
        original_name: Optional[str],
        requested_name: Optional[str] = None
    ) -> Tuple[str, str]:
        """
        Write an uploaded resume to the asset directory.

        Args:
            content: Raw file bytes
            content_type: Declared MIME type of the upload
            original_name: Client-side file name
            requested_name: Name to store under; generated when empty

        Returns:
            Tuple of (relative_path, stored_file_name)

        Raises:
            ValidationFailure if the upload is not a PDF or too large (nothing is written)
            PersistenceError if the file cannot be written
        """
        if content_type != PDF_CONTENT_TYPE:
            raise ValidationFailure("Only PDF files are allowed")

        if len(content) > self.max_file_size_bytes:
            raise ValidationFailure(f"File too large. Maximum size: {self.max_file_size_mb}MB")

        original_name = safe_file_name(original_name or "resume.pdf")
        file_name = safe_file_name(requested_name) if requested_name else ""
        if not file_name:
            file_name = generate_file_name(original_name)

        self.ensure_dir()
        target = self.asset_dir / file_name
        try:
            target.write_bytes(content)
        except OSError as e:
            raise PersistenceError(f"Failed to save resume: {e}")

        logger.info("Stored resume %s (%d bytes)", file_name, len(content))
        return f"{self.subdir}/{file_name}", file_name

    def resolve(self, relative_path: str) -> Optional[Path]:
        """Absolute path for a stored resume, or None if it points outside public_dir."""
        root = self.public_dir.resolve()
        candidate = (root / relative_path.lstrip("/\\")).resolve()
        if candidate == root or root not in candidate.parents:
            return None
        return candidate

    def delete_if_exists(self, relative_path: Optional[str]) -> bool:
        """
        Remove a stored resume. Missing files are not an error.
        Failures are logged and never raised.

        Returns True if a file was removed.
        """
        if not relative_path:
            return False

        path = self.resolve(relative_path)
        if path is None:
            logger.warning("Ignoring resume path outside asset directory: %s", relative_path)
            return False

        try:
            if path.is_file():
                os.remove(path)
                logger.info("Deleted resume %s", relative_path)
                return True
        except OSError as e:
            logger.warning("Could not delete resume %s: %s", relative_path, e)
        return False
