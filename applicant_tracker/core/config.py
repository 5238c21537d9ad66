"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_name: str = "Applicant Tracker"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: str = "*"

    # Which record store backs the API: "file" or "mongo"
    storage_backend: str = "file"

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "applicant_tracker"
    mongodb_collection: str = "applicants"

    # JSON file backend
    data_file: Path = Path("./data/applicants.json")
    public_dir: Path = Path("./public")
    resume_subdir: str = "applications"
    max_upload_mb: int = 10

    @field_validator("storage_backend")
    @classmethod
    def validate_backend(cls, value: str) -> str:
        value = value.lower()
        allowed = {"file", "mongo"}
        if value not in allowed:
            raise ValueError(f"storage_backend must be one of {sorted(allowed)}")
        return value

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def resume_dir(self) -> Path:
        """Directory holding uploaded resume PDFs."""
        return self.public_dir / self.resume_subdir

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
