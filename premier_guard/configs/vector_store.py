"""
Vector store configuration settings.

Connection details for the hosted team-name index. The index embeds raw
text itself, so no embedding model is configured here.

Dependencies: pydantic, pydantic_settings
System role: Vector index configuration for similarity queries
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Upstash Vector index configuration (VECTOR_URL, VECTOR_TOKEN)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(default="", description="REST URL of the vector index")
    token: str = Field(default="", description="Access token for the vector index")
    top_k: int = Field(
        default=1,
        description="Neighbours requested per chunk (only the best one is used)",
        ge=1,
    )
