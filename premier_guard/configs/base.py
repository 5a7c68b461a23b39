"""
Shared settings base.

Every settings class in the service reads the same `.env` file with
case-insensitive keys; unknown keys are ignored so one file can feed the
API and the seeding job.

Dependencies: pydantic_settings
System role: Parent of the aggregate Settings object
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict
from pydantic import Field


class BaseSettings(PydanticBaseSettings):
    """Common `.env` handling plus the process-wide log level."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root logger level for the API and the seeding job",
    )
