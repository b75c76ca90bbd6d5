# /app/config.py

"""
Application-wide settings, loaded from environment variables (and an optional
`.env` file) with pydantic-settings.

Components never read `os.environ` themselves. The router layer obtains the
cached `Settings` object through the `get_settings` dependency and passes the
relevant values down to the services explicitly.
"""

from functools import lru_cache
from typing import Annotated, List, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # --- App ---
    APP_TITLE: str = "Education Center API"
    APP_DESCRIPTION: str = "Administration backend for subjects, groups, students, test results, achievements and graduates."
    APP_VERSION: str = "1.0.0"

    # --- Database ---
    # Defaults to a local SQLite file for development.
    DATABASE_URL: str = "sqlite:///./education_center.db"

    # --- CORS ---
    CORS_ORIGINS: Annotated[List[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:5174",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:5174",
        "http://127.0.0.1:3000",
    ]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v):
        # "a, b ,c" -> ["a", "b", "c"]
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    # --- Pagination ---
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # --- Uploads ---
    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_MB: int = 5
    ALLOWED_IMAGE_EXTENSIONS: List[str] = [".jpeg", ".jpg", ".png", ".gif", ".webp"]

    # --- Logging ---
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def max_upload_bytes(self) -> int:
        return self.MAX_UPLOAD_MB * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """FastAPI dependency (and plain accessor) returning the process-wide settings."""
    return Settings()
