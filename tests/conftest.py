"""Shared fixtures."""

import pytest

from gitcard.config import GitCardConfig, LogFormat
from tests.mocks import API_BASE


@pytest.fixture
def config() -> GitCardConfig:
    return GitCardConfig(
        username="octocat",
        api_base_url=API_BASE,
        log_format=LogFormat.JSON,
        log_level="WARNING",
    )
