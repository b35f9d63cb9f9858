"""
Grading configuration.

Centralized configuration management with environment variables.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Grading settings"""

    # Exam scoring
    PASSING_SCORE: float = 70.0  # percentage, 0-100

    # Free-text partial credit
    PARTIAL_CREDIT_THRESHOLD: float = 0.7  # similarity must be strictly above
    PARTIAL_CREDIT_RATIO: float = 0.5
    MAX_SIMILARITY_LENGTH: int = 10000  # characters

    # Teacher review
    REVIEW_CORRECT_RATIO: float = 0.6
    ESSAY_REVIEW_MESSAGE: str = (
        "Essay answers require manual or AI grading before they are scored."
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or text
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="EXAM_GRADING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
