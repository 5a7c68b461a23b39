"""
Upstash Vector client wrapper.

Provides high-level interface for the team-name index: top-1 similarity
queries for chunks and batch upserts for the seeding job. The index embeds
raw text server-side, so chunks are sent as `data`.

Dependencies: upstash_vector, premier_guard.configs, premier_guard.core.exceptions
System role: Vector store client for similarity queries
"""

import logging

from upstash_vector import AsyncIndex, Vector
from upstash_vector.errors import UpstashError

from premier_guard.configs.vector_store import VectorStoreSettings
from premier_guard.core.exceptions import VectorStoreError
from premier_guard.models.chunk import ChunkKind, SimilarityResult
from premier_guard.models.index_entry import IndexEntry

logger = logging.getLogger(__name__)


class TeamIndexClient:
    """
    Upstash Vector client for team-name lookups.

    No retries: a failed call surfaces to the caller as VectorStoreError.
    """

    def __init__(
        self,
        settings: VectorStoreSettings,
        index: AsyncIndex | None = None,
    ) -> None:
        """
        Initialize client with configuration.

        Args:
            settings: Vector store settings (url, token, top_k)
            index: Pre-built index, mainly for tests

        Raises:
            ValueError: When no index is given and url or token is empty
        """
        self.config = settings
        if index is None:
            if not settings.url or not settings.token:
                raise ValueError("VECTOR_URL and VECTOR_TOKEN must be configured")
            index = AsyncIndex(url=settings.url, token=settings.token, retries=0)
        self._index = index

    async def query(self, chunk: str, kind: ChunkKind) -> SimilarityResult:
        """
        Find the nearest team entry for a chunk.

        Args:
            chunk: Chunk text
            kind: Chunker that produced the chunk

        Returns:
            SimilarityResult: Best match, or score 0.0 with no label when
            the index returned nothing

        Raises:
            VectorStoreError: If the query fails
        """
        try:
            matches = await self._index.query(
                data=chunk,
                top_k=self.config.top_k,
                include_metadata=True,
            )
        except UpstashError as e:
            raise VectorStoreError(
                message="Failed to query team index",
                operation="query",
                details={"error": str(e), "chunk": chunk, "kind": kind.value},
            ) from e

        if not matches:
            return SimilarityResult(chunk=chunk, kind=kind)

        best = matches[0]
        metadata = best.metadata or {}
        logger.debug(
            f"{__name__}:query - {kind.value} chunk matched",
            extra={"chunk": chunk, "score": best.score, "team": metadata.get("team")},
        )
        return SimilarityResult(
            chunk=chunk,
            kind=kind,
            matched_label=metadata.get("team"),
            score=float(best.score),
        )

    async def upsert(self, entries: list[IndexEntry]) -> None:
        """
        Upsert team entries into the index.

        Args:
            entries: Entries with id, data and team metadata

        Raises:
            VectorStoreError: If the upsert fails
        """
        vectors = [
            Vector(
                id=entry.id,
                data=entry.data,
                metadata=entry.metadata.model_dump(),
            )
            for entry in entries
        ]
        try:
            await self._index.upsert(vectors=vectors)
        except UpstashError as e:
            raise VectorStoreError(
                message="Failed to upsert entries into team index",
                operation="upsert",
                details={
                    "error": str(e),
                    "entry_count": len(entries),
                    "first_id": entries[0].id if entries else None,
                },
            ) from e
