"""Shared fixtures for the futbol-nlq test suite."""

import pytest

from futbol_nlq.config import reset_config
from futbol_nlq.nlq.context import ConversationContext
from futbol_nlq.nlq.mock_tools import MockFootballFetcher

CONFIG_VARS = (
    "FUTBOL_NLQ_MAX_HISTORY",
    "FUTBOL_NLQ_LOW_CONFIDENCE",
    "FUTBOL_NLQ_MAX_SUGGESTIONS",
    "FUTBOL_NLQ_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from default configuration."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def context():
    """Fresh conversation context."""
    return ConversationContext()


@pytest.fixture
def fetcher():
    """In-memory data source with the sample payloads."""
    return MockFootballFetcher()
