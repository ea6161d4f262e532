"""
Tests for application settings.
"""

import pytest
from pydantic import ValidationError

from mindpulse.core.config.settings import Settings


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.SENSITIVITY_FACTOR == 3.0
        assert settings.INTENSIFIER_MULTIPLIER == 1.5
        assert settings.SENTIMENT_MODEL_NAME is None
        assert settings.DEFAULT_STORAGE_PREFERENCE == "local"
        assert settings.API_V1_STR == "/api/v1"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("SENSITIVITY_FACTOR", "2.5")
        monkeypatch.setenv("DEFAULT_STORAGE_PREFERENCE", "HYBRID")
        settings = Settings(_env_file=None)
        assert settings.SENSITIVITY_FACTOR == 2.5
        assert settings.DEFAULT_STORAGE_PREFERENCE == "hybrid"

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="LOUD")

    def test_invalid_storage_preference(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DEFAULT_STORAGE_PREFERENCE="cloud")

    def test_non_positive_sensitivity_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, SENSITIVITY_FACTOR=0)

    def test_remote_base_url_trailing_slash_stripped(self):
        assert Settings(_env_file=None, REMOTE_SYNC_BASE_URL="https://sync.test/").REMOTE_SYNC_BASE_URL == (
            "https://sync.test"
        )
