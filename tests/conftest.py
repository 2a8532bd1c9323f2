"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package
_src_path = Path(__file__).resolve().parent.parent / "src"
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from judge_sandbox.infrastructure.config import Settings
from tests.helpers import FakeExecutor


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment, with instant polling."""
    return Settings(
        _env_file=None,
        judge0_base_url="https://judge.test",
        poll_interval_seconds=0,
        max_poll_attempts=10,
        request_timeout=5,
    )


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()
