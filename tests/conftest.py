"""Pytest configuration and shared fixtures for harvest-client tests."""

from pathlib import Path

import pytest

from harvest_client import HarvestClient, HarvestConfig
from harvest_client.testing import RecordingHandler

FIXTURES_DIR = Path(__file__).parent / "fixtures"

BASE_URL = "https://api.harvestapp.com/v2"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    import os

    test_prefixes = ("TEST_", "API_", "HARVEST_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def config():
    return HarvestConfig(access_token="test-token", account_id="123456", base_url=BASE_URL)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
async def harvest(config, handler):
    async with HarvestClient(config, transport=handler.transport()) as client:
        yield client
