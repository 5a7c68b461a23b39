"""Tests for configuration loading."""

import pytest

from premier_guard.configs.classifier import ClassifierSettings
from premier_guard.configs.seeding import SeedSettings
from premier_guard.configs.settings import Settings
from premier_guard.configs.vector_store import VectorStoreSettings


class TestDefaults:
    """Default values match the documented behaviour."""

    def test_classifier_defaults(self) -> None:
        settings = ClassifierSettings()

        assert settings.word_threshold == 0.90
        assert settings.semantic_threshold == 0.86
        assert settings.max_message_length == 100
        assert settings.chunk_size == 10
        assert settings.chunk_overlap == 6
        assert settings.whitelist == ["occold fc"]

    def test_seed_defaults(self) -> None:
        settings = SeedSettings()

        assert settings.batch_size == 10
        assert settings.csv_path == "training_dataset.csv"

    def test_aggregated_settings(self) -> None:
        settings = Settings()

        assert isinstance(settings.vector_store, VectorStoreSettings)
        assert settings.vector_store.top_k == 1


class TestEnvironmentOverrides:
    """Environment variables override defaults."""

    def test_vector_credentials_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VECTOR_URL", "https://example-index.upstash.io")
        monkeypatch.setenv("VECTOR_TOKEN", "secret")

        settings = VectorStoreSettings()

        assert settings.url == "https://example-index.upstash.io"
        assert settings.token == "secret"

    def test_threshold_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLASSIFIER_WORD_THRESHOLD", "0.95")

        assert ClassifierSettings().word_threshold == 0.95

    def test_whitelist_normalised(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLASSIFIER_WHITELIST", '["Occold  FC", " ", "Ipswich Wanderers"]')

        assert ClassifierSettings().whitelist == ["occold fc", "ipswich wanderers"]

    def test_log_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.log_level == "debug"
        assert not hasattr(settings, "environment")
