"""
Chunk and similarity domain models.

Represents the per-chunk results flowing from the vector index into the
verdict aggregator.

Dependencies: pydantic
System role: Chunk-level data structures for one classification request
"""

from enum import Enum

from pydantic import BaseModel, Field


class ChunkKind(str, Enum):
    """Chunking strategy that produced a chunk."""

    WORD = "word"
    SEMANTIC = "semantic"


class SimilarityResult(BaseModel):
    """Best index match for a single chunk."""

    chunk: str = Field(description="Chunk text that was queried")
    kind: ChunkKind = Field(description="Chunker that produced the chunk")
    matched_label: str | None = Field(default=None, description="Team name of the nearest entry")
    score: float = Field(default=0.0, description="Similarity score reported by the index")


class Flag(BaseModel):
    """A chunk match whose score exceeded the threshold for its kind."""

    team: str = Field(description="Team the chunk matched")
    score: float = Field(description="Similarity score of the match")
