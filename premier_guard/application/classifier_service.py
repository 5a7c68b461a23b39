"""
Premier League classification service.

Runs every word and semantic chunk against the team index concurrently,
collects the matches that clear their threshold, and resolves one verdict.

Flag resolution:
- any flag: highest-scoring flag wins (ties keep chunk order, words first)
- no flag: highest semantic-chunk score, not flagged (word chunks count as 0.0)

Dependencies: asyncio, premier_guard.boundary.vdb, premier_guard.configs
System role: Classification orchestration (chunking + aggregation)
"""

import asyncio
import logging
from typing import Protocol

from premier_guard.application.chunker import SemanticChunker, WordChunker
from premier_guard.application.whitelist import WhitelistFilter
from premier_guard.configs.classifier import ClassifierSettings
from premier_guard.models.chunk import ChunkKind, Flag, SimilarityResult
from premier_guard.models.verdict import Verdict

logger = logging.getLogger(__name__)


class SimilarityIndex(Protocol):
    """Anything that can answer a top-1 similarity query for a chunk."""

    async def query(self, chunk: str, kind: ChunkKind) -> SimilarityResult: ...


class VerdictAggregator:
    """Query all chunks and turn the results into a single verdict."""

    def __init__(
        self,
        index: SimilarityIndex,
        word_threshold: float = 0.90,
        semantic_threshold: float = 0.86,
    ) -> None:
        """
        Args:
            index: Similarity query client
            word_threshold: Score a word chunk must exceed to be flagged
            semantic_threshold: Score a semantic chunk must exceed to be flagged
        """
        self._index = index
        self._thresholds = {
            ChunkKind.WORD: word_threshold,
            ChunkKind.SEMANTIC: semantic_threshold,
        }

    async def collect(
        self,
        word_chunks: list[str],
        semantic_chunks: list[str],
    ) -> list[SimilarityResult]:
        """
        Query every chunk concurrently and wait for all of them.

        Empty word chunks (from consecutive whitespace) are not sent to the
        index. Any failing query fails the whole collection.

        Returns:
            list[SimilarityResult]: Results in chunk order, word chunks first
        """
        queries = [
            self._index.query(chunk, ChunkKind.WORD) for chunk in word_chunks if chunk
        ] + [
            self._index.query(chunk, ChunkKind.SEMANTIC) for chunk in semantic_chunks
        ]
        return list(await asyncio.gather(*queries))

    def flags_for(self, results: list[SimilarityResult]) -> list[Flag]:
        """
        Build a flag for every result above its kind's threshold.

        Duplicate team/score pairs are kept as separate flags.
        """
        flags: list[Flag] = []
        for result in results:
            if result.score <= self._thresholds[result.kind]:
                continue
            if result.matched_label is None:
                logger.warning(
                    "Match above threshold has no team metadata",
                    extra={"chunk": result.chunk, "score": result.score},
                )
                continue
            flags.append(Flag(team=result.matched_label, score=result.score))
        return flags

    def resolve(self, results: list[SimilarityResult]) -> Verdict:
        """
        Resolve the verdict for a set of chunk results.

        Args:
            results: Results from collect()

        Returns:
            Verdict: Flagged verdict for the best flag, otherwise the best
            semantic score (word chunks count as 0.0 when unflagged)
        """
        flags = self.flags_for(results)
        if flags:
            best = sorted(flags, key=lambda flag: flag.score, reverse=True)[0]
            return Verdict(is_premier_league=True, score=best.score, flagged_for=best.team)

        # Word chunks only contribute through flags; unflagged they score 0.0
        observed = [
            result.score if result.kind == ChunkKind.SEMANTIC else 0.0
            for result in results
        ]
        return Verdict(is_premier_league=False, score=max(observed, default=0.0))

    async def aggregate(
        self,
        word_chunks: list[str],
        semantic_chunks: list[str],
    ) -> Verdict:
        """Query all chunks and resolve their verdict."""
        results = await self.collect(word_chunks, semantic_chunks)
        return self.resolve(results)


class TeamClassifier:
    """Decide whether a message mentions a Premier League team."""

    def __init__(self, settings: ClassifierSettings, index: SimilarityIndex) -> None:
        """
        Initialize the pipeline stages once at construction.

        Args:
            settings: Classifier settings (thresholds, chunking, whitelist)
            index: Similarity query client
        """
        self.settings = settings
        self._whitelist = WhitelistFilter(settings.whitelist)
        self._word_chunker = WordChunker()
        self._semantic_chunker = SemanticChunker(
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
        )
        self._aggregator = VerdictAggregator(
            index=index,
            word_threshold=settings.word_threshold,
            semantic_threshold=settings.semantic_threshold,
        )

    async def classify(self, message: str) -> Verdict:
        """
        Classify a validated message.

        Args:
            message: Message text (already length-checked)

        Returns:
            Verdict: Classification result

        Raises:
            VectorStoreError: If any similarity query fails
        """
        filtered = self._whitelist.apply(message)

        word_chunks = self._word_chunker.split(filtered)
        semantic_chunks = self._semantic_chunker.split(filtered)

        logger.info(
            "Chunked message",
            extra={
                "word_chunks": len(word_chunks),
                "semantic_chunks": len(semantic_chunks),
            },
        )

        verdict = await self._aggregator.aggregate(word_chunks, semantic_chunks)

        logger.info(
            "Message classified",
            extra={
                "is_premier_league": verdict.is_premier_league,
                "score": verdict.score,
                "flagged_for": verdict.flagged_for,
            },
        )
        return verdict
