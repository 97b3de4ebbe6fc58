"""
Configuration settings for the memoria engine.

Uses Pydantic Settings for environment variable management with .env file support.
Every value has a default matching the drill rules, so the engine works
without any environment at all.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from MEMORIA_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MEMORIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Logging & Randomness
    # ========================================
    log_level: str = Field(
        default="INFO",
        description="Minimum loguru level for setup_logging()",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for blank selection and option shuffling (None = OS entropy)",
    )

    # ========================================
    # Countdowns
    # ========================================
    preview_seconds: int = Field(
        default=5,
        ge=0,
        description="Read-only preview before blanks appear in fill-blanks mode",
    )
    timed_challenge_seconds: int = Field(
        default=30,
        ge=1,
        description="Length of the timed free-recall challenge",
    )

    # ========================================
    # Drill rules
    # ========================================
    max_fill_attempts: int = Field(
        default=3,
        ge=1,
        description="Failed fill-blanks attempts before the verse is revealed",
    )
    distractor_count: int = Field(
        default=2,
        ge=0,
        description="Wrong options shown in choice drills",
    )
    min_blanks: int = Field(default=3, ge=1, description="Lower clamp on blanks per verse")
    max_blanks: int = Field(default=5, ge=1, description="Upper clamp on blanks per verse")
    blank_ratio: float = Field(
        default=0.4,
        gt=0.0,
        le=1.0,
        description="Share of words hidden for beginner/intermediate verses",
    )
    advanced_blank_ratio: float = Field(
        default=0.6,
        gt=0.0,
        le=1.0,
        description="Share of words hidden for advanced verses",
    )

    # ========================================
    # Pass thresholds
    # ========================================
    sequence_pass_threshold: float = Field(
        default=0.8,
        description="Full-verse recall passes when accuracy is strictly above this",
    )
    overlap_pass_threshold: float = Field(
        default=70.0,
        description="Timed recall passes when the percentage reaches this",
    )

    def get_blank_config(self) -> dict[str, float | int]:
        """Get blank selection parameters as keyword arguments."""
        return {
            "ratio": self.blank_ratio,
            "advanced_ratio": self.advanced_blank_ratio,
            "min_blanks": self.min_blanks,
            "max_blanks": self.max_blanks,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
