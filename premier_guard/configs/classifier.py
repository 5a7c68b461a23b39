"""
Classifier configuration settings.

Thresholds, chunking parameters and the whitelist used by the
classification pipeline.

Dependencies: pydantic, pydantic_settings
System role: Tuning knobs for chunking and verdict aggregation
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClassifierSettings(BaseSettings):
    """Classification pipeline configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSIFIER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    word_threshold: float = Field(
        default=0.90,
        description="Score a word chunk must exceed to be flagged",
    )
    semantic_threshold: float = Field(
        default=0.86,
        description="Score a semantic chunk must exceed to be flagged",
    )
    max_message_length: int = Field(
        default=100,
        description="Maximum accepted message length in characters (inclusive)",
        ge=1,
    )
    chunk_size: int = Field(default=10, description="Target semantic chunk size", ge=1)
    chunk_overlap: int = Field(default=6, description="Overlap between semantic chunks", ge=0)
    whitelist: list[str] = Field(
        default=["occold fc"],
        description="Phrases removed from messages before analysis",
    )

    @field_validator("whitelist")
    @classmethod
    def normalise_whitelist(cls, value: list[str]) -> list[str]:
        """Whitelist matching is case-insensitive and whitespace-normalised."""
        return [" ".join(phrase.lower().split()) for phrase in value if phrase.strip()]
