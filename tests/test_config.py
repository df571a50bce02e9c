"""Tests for settings and structlog configuration."""

import pytest
import structlog
from structlog.testing import capture_logs

from fieldcheck.config import Settings, get_settings
from fieldcheck.logging_config import configure_logging


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.DEBUG is False
        assert settings.LOG_LEVEL == "info"
        assert settings.I18N_KEY_PREFIX == "validation"
        assert settings.DEFAULT_HALT_BY == "never"

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIELDCHECK_LOG_LEVEL", "debug")
        monkeypatch.setenv("FIELDCHECK_DEFAULT_HALT_BY", "first-error")
        settings = Settings()
        assert settings.LOG_LEVEL == "debug"
        assert settings.DEFAULT_HALT_BY == "first-error"

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_structlog(self):
        yield
        structlog.reset_defaults()

    def test_filters_below_configured_level(self) -> None:
        configure_logging(Settings(LOG_LEVEL="warning"))
        with capture_logs() as logs:
            logger = structlog.get_logger()
            logger.info("hidden")
            logger.warning("shown")
        assert [entry["event"] for entry in logs] == ["shown"]

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(ValueError):
            configure_logging(Settings(LOG_LEVEL="chatty"))
