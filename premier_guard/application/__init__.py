"""Classification pipeline: whitelist filtering, chunking and verdict aggregation."""

from .chunker import SemanticChunker, WordChunker
from .classifier_service import TeamClassifier, VerdictAggregator
from .whitelist import WhitelistFilter

__all__ = [
    "SemanticChunker",
    "TeamClassifier",
    "VerdictAggregator",
    "WhitelistFilter",
    "WordChunker",
]
