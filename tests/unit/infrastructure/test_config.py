"""
Unit tests for settings.
"""

import pytest
from pydantic import ValidationError

from judge_sandbox.infrastructure.config import Settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("JUDGE_SANDBOX_JUDGE0_BASE_URL", "JUDGE_SANDBOX_MAX_POLL_ATTEMPTS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.judge0_base_url == "https://ce.judge0.com"
        assert settings.poll_interval_seconds == 1.0
        assert settings.max_poll_attempts == 10
        assert settings.executor_type == "judge0"
        assert settings.validator_max_concurrency == 1

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("JUDGE_SANDBOX_MAX_POLL_ATTEMPTS", "3")
        monkeypatch.setenv("JUDGE_SANDBOX_JUDGE0_AUTH_TOKEN", "secret")

        settings = Settings(_env_file=None)

        assert settings.max_poll_attempts == 3
        assert settings.judge0_auth_token == "secret"

    def test_base_url_trailing_slash_stripped(self):
        settings = Settings(_env_file=None, judge0_base_url="http://localhost:2358/")

        assert settings.judge0_base_url == "http://localhost:2358"

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="verbose")

    def test_invalid_executor_type(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, executor_type="kubernetes")

    def test_concurrency_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, validator_max_concurrency=0)
