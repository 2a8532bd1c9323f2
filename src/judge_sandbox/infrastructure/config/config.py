"""
Environment configuration for the judge sandbox.

Loads configuration from environment variables (prefix ``JUDGE_SANDBOX_``)
and an optional ``.env`` file using pydantic-settings.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="JUDGE_SANDBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============== Judge0 ==============
    judge0_base_url: str = Field(
        default="https://ce.judge0.com", description="Judge0 API base URL"
    )
    judge0_auth_token: Optional[str] = Field(
        default=None, description="X-Auth-Token for self-hosted Judge0"
    )
    judge0_rapidapi_key: Optional[str] = Field(
        default=None, description="X-RapidAPI-Key for the hosted marketplace endpoint"
    )
    judge0_rapidapi_host: Optional[str] = Field(
        default=None, description="X-RapidAPI-Host for the hosted marketplace endpoint"
    )
    request_timeout: float = Field(
        default=30.0, gt=0, description="Timeout for each HTTP call in seconds"
    )

    # ============== Polling ==============
    poll_interval_seconds: float = Field(default=1.0, ge=0)
    max_poll_attempts: int = Field(default=10, ge=1)

    # ============== Executor ==============
    executor_type: Literal["judge0", "docker"] = Field(default="judge0")

    # ============== Validation ==============
    validator_default_time_limit: float = Field(default=10, gt=0)
    validator_default_memory_limit: int = Field(default=256, gt=0)
    validator_max_concurrency: int = Field(
        default=1, ge=1, description="Test cases run at once; 1 runs them serially"
    )
    feedback_max_failures: int = Field(default=3, ge=0)

    # ============== Logging ==============
    log_level: str = Field(default="INFO")
    log_format: Literal["text", "json"] = Field(default="text")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()

    @field_validator("judge0_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache()
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
