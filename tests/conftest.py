"""Shared fixtures for the PWS weather service tests."""

import copy
import json
import os
from pathlib import Path

# Settings are read when config is first imported
os.environ["PWS_API_KEY"] = "test-pws-api-key"
os.environ["PWS_BASE_URL"] = "https://pws.example.com/v2/pws/observations/current"

import pytest
import respx
from fastapi.testclient import TestClient

from app.main import app
from config.settings import settings


FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def _teststation_payload() -> dict:
    with open(FIXTURE_DIR / "pws_current_teststation1.json") as f:
        return json.load(f)


@pytest.fixture
def teststation_payload(_teststation_payload) -> dict:
    """Single-observation envelope for TESTSTATION1, safe to mutate."""
    return copy.deepcopy(_teststation_payload)


@pytest.fixture
def upstream_url() -> str:
    return settings.pws_base_url


@pytest.fixture
def api_key() -> str:
    return settings.pws_api_key


@pytest.fixture
def upstream():
    """Router standing in for the provider; unmatched requests fail the test."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def client(upstream):
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
