"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory team index, classifier settings, classifier and HTTP client fixtures
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

import pytest
from fastapi.testclient import TestClient

from premier_guard.api.deps.dependencies import get_team_classifier
from premier_guard.api.main import create_app
from premier_guard.application.classifier_service import TeamClassifier
from premier_guard.configs.classifier import ClassifierSettings
from premier_guard.models.chunk import ChunkKind, SimilarityResult


class FakeTeamIndex:
    """
    In-memory stand-in for the team index.

    Chunks are looked up case-insensitively in `matches`; anything else
    scores `default_score` with no team. Every call is recorded.
    """

    def __init__(
        self,
        matches: dict[str, tuple[str, float]] | None = None,
        default_score: float = 0.1,
        error: Exception | None = None,
    ) -> None:
        self.matches = {chunk.lower(): match for chunk, match in (matches or {}).items()}
        self.default_score = default_score
        self.error = error
        self.calls: list[tuple[str, ChunkKind]] = []

    async def query(self, chunk: str, kind: ChunkKind) -> SimilarityResult:
        self.calls.append((chunk, kind))
        if self.error is not None:
            raise self.error
        team, score = self.matches.get(chunk.lower(), (None, self.default_score))
        return SimilarityResult(chunk=chunk, kind=kind, matched_label=team, score=score)

    def chunks(self, kind: ChunkKind) -> list[str]:
        return [chunk for chunk, chunk_kind in self.calls if chunk_kind == kind]


@pytest.fixture
def classifier_settings() -> ClassifierSettings:
    """Classifier settings with production defaults."""
    return ClassifierSettings(
        word_threshold=0.90,
        semantic_threshold=0.86,
        max_message_length=100,
        chunk_size=10,
        chunk_overlap=6,
        whitelist=["occold fc"],
    )


@pytest.fixture
def fake_index() -> FakeTeamIndex:
    """Index where only 'arsenal' is a confident match."""
    return FakeTeamIndex(matches={"arsenal": ("Arsenal", 0.95)})


@pytest.fixture
def classifier(classifier_settings: ClassifierSettings, fake_index: FakeTeamIndex) -> TeamClassifier:
    """TeamClassifier wired to the fake index."""
    return TeamClassifier(settings=classifier_settings, index=fake_index)


@pytest.fixture
def client(classifier: TeamClassifier):
    """TestClient with the classifier dependency overridden."""
    app = create_app()
    app.dependency_overrides[get_team_classifier] = lambda: classifier
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_index():
    """Factory for FakeTeamIndex instances with custom matches."""
    return FakeTeamIndex
