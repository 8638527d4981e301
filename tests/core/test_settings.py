"""
Test suite for configuration settings.

System role: Verification of configuration defaults and validation
"""

import pytest
from pydantic import ValidationError

from newsdigest.configs import ChunkingSettings, DatabaseSettings, Settings, SummarizerSettings, WorkerSettings
from newsdigest.configs.base import BaseSettings


class TestChunkingSettings:
    """Test suite for ChunkingSettings."""

    def test_defaults_and_derived_character_budgets(self) -> None:
        settings = ChunkingSettings()

        assert settings.max_tokens_per_chunk == 1200
        assert settings.max_chars_per_chunk == 4800
        assert settings.min_chars_per_chunk == 1200
        assert settings.overlap_chars == 400

    @pytest.mark.parametrize(
        "overrides",
        [
            {"min_tokens_per_chunk": 50, "max_tokens_per_chunk": 40},
            {"overlap_tokens": 40, "max_tokens_per_chunk": 40},
            {"chunks_per_group": 3, "max_chunks_per_group": 2},
            {"chunks_per_group": 0},
        ],
    )
    def test_inconsistent_budgets_should_be_rejected(self, overrides) -> None:
        with pytest.raises(ValidationError):
            ChunkingSettings(**overrides)

    def test_environment_should_override(self, monkeypatch) -> None:
        monkeypatch.setenv("CHUNKING_MAX_TOKENS_PER_CHUNK", "800")

        assert ChunkingSettings().max_tokens_per_chunk == 800


class TestDatabaseSettings:
    """Test suite for DatabaseSettings.async_database_url."""

    def test_url_should_be_built_from_fields(self) -> None:
        settings = DatabaseSettings(host="db", port=5433, user="u", password="p", db="news", url=None)

        assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5433/news"

    def test_require_ssl_should_add_parameter(self) -> None:
        settings = DatabaseSettings(sslmode="require", url=None)

        assert settings.async_database_url.endswith("?ssl=require")

    @pytest.mark.parametrize("scheme", ["postgres://", "postgresql://"])
    def test_explicit_url_should_use_asyncpg_driver(self, scheme) -> None:
        settings = DatabaseSettings(url=f"{scheme}u:p@host/db")

        assert settings.async_database_url == "postgresql+asyncpg://u:p@host/db"


class TestSummarizerAndWorkerSettings:
    """Test suite for summarizer and worker defaults."""

    def test_summarizer_defaults(self) -> None:
        settings = SummarizerSettings()

        assert settings.max_input_chars == 12000
        assert settings.summary_language == "English"
        assert settings.requests_per_second == pytest.approx(1 / 1.5)
        assert settings.burst == 1

    def test_non_positive_rate_should_be_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SummarizerSettings(requests_per_second=0)

    def test_worker_defaults(self) -> None:
        settings = WorkerSettings()

        assert (settings.chunker_idle_delay, settings.chunker_busy_delay, settings.chunker_error_delay) == (10, 2, 15)
        assert (settings.summarizer_idle_delay, settings.summarizer_busy_delay, settings.summarizer_error_delay) == (15, 5, 30)


class TestBaseSettings:
    """Test suite for the shared settings parent."""

    @pytest.mark.parametrize("settings_cls", [ChunkingSettings, DatabaseSettings, SummarizerSettings, WorkerSettings])
    def test_every_group_should_share_the_parent(self, settings_cls) -> None:
        assert issubclass(settings_cls, BaseSettings)

    def test_log_level_should_be_normalized(self) -> None:
        settings = Settings(log_level=" debug ")

        assert settings.log_level == "DEBUG"

    def test_unknown_log_level_should_be_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WorkerSettings(log_level="chatty")

    def test_environment_should_be_read_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")

        assert Settings().environment == "production"
