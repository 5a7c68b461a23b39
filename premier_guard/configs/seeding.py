"""
Seeding job configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Offline index population configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SeedSettings(BaseSettings):
    """CSV-to-index seeding configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    csv_path: str = Field(
        default="training_dataset.csv",
        description="CSV file with a 'team' column",
    )
    batch_size: int = Field(default=10, description="Rows per upsert call", ge=1)
