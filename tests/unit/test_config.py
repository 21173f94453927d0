"""
Tests pour la configuration (Settings) et le logging.
"""

from pathlib import Path

import pytest
from loguru import logger
from pydantic import ValidationError

from seasonart.config import Settings
from seasonart.logging_config import configure_logging, level_for_verbosity


class TestSettings:
    """Tests pour Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SEASONART_FANART_API_KEY", raising=False)

        settings = Settings()

        assert settings.fanart_enabled is False
        assert settings.cache_ttl_days == 2
        assert settings.default_language == "en"
        assert settings.fanart_base_url == "https://webservice.fanart.tv/v3"

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEASONART_FANART_API_KEY", "abc")
        monkeypatch.setenv("SEASONART_CACHE_TTL_DAYS", "7")

        settings = Settings()

        assert settings.fanart_enabled is True
        assert settings.cache_ttl_days == 7

    def test_paths_are_expanded(self) -> None:
        settings = Settings(cache_dir="~/art-cache")

        assert settings.cache_dir == Path.home() / "art-cache"

    def test_ttl_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(cache_ttl_days=0)

    def test_fixture_settings(self, test_settings: Settings, tmp_path: Path) -> None:
        assert test_settings.fanart_enabled
        assert test_settings.cache_dir == tmp_path / "cache"


class TestLogging:
    """Tests pour configure_logging."""

    @pytest.mark.parametrize(
        "verbose, quiet, expected",
        [
            (0, False, "WARNING"),
            (1, False, "INFO"),
            (2, False, "DEBUG"),
            (5, False, "DEBUG"),
            (2, True, "ERROR"),
        ],
    )
    def test_level_for_verbosity(self, verbose: int, quiet: bool, expected: str) -> None:
        assert level_for_verbosity("WARNING", verbose, quiet) == expected

    def test_writes_json_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "seasonart.log"

        configure_logging(log_level="ERROR", log_file=log_file)
        try:
            logger.debug("cache miss")
            logger.complete()
        finally:
            logger.remove()

        assert log_file.exists()
        assert "cache miss" in log_file.read_text()
