"""
Shared fixtures and utilities for playlists.list tests.

Fixtures in fixtures/ mirror real YouTube Data API responses.
"""

import json
from pathlib import Path

import pytest

from yt_api.auth import ApiKey

FIXTURES_DIR = Path(__file__).parent / "fixtures"

TEST_API_KEY = "test_youtube_api_key_12345"


def load_fixture(filename: str) -> dict:
    """Load a fixture from JSON file.

    Raises:
        FileNotFoundError: If fixture file doesn't exist
    """
    fixture_path = FIXTURES_DIR / filename
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture file not found: {fixture_path}")

    with open(fixture_path) as f:
        return json.load(f)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep request configuration independent of the developer's shell."""
    for name in ("YOUTUBE_API_BASE_URL", "YOUTUBE_API_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def api_key() -> ApiKey:
    return ApiKey(TEST_API_KEY)
