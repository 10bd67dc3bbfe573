"""
Pytest fixtures for round tests.
"""

import pytest
from pathlib import Path

from impostor_words.core import RoundParams, build_payload, encode, DEFAULT_CATALOG
from impostor_words.web import RoundServer

CONFIGS_DIR = Path(__file__).resolve().parent.parent / "configs"


@pytest.fixture
def roster():
    """Roster used across tests."""
    return ["Alice", "Bob", "Carol", "Dave", "Erin", "Frank", "Grace", "Heidi"]


@pytest.fixture
def params():
    """Round parameters for a two-impostor round."""
    return RoundParams(seed="room-42", round_number=3, impostor_count=2, word_refresh=0, pair_index=1)


@pytest.fixture
def payload(roster, params):
    """Payload built by the admin for the roster."""
    return build_payload(roster, params)


@pytest.fixture
def encoded_payload(payload):
    """Payload as it travels in a link."""
    return encode(payload)


@pytest.fixture
def catalog():
    return DEFAULT_CATALOG


@pytest.fixture
def configs_dir():
    return CONFIGS_DIR


@pytest.fixture
def client():
    """Flask test client for the round server."""
    server = RoundServer(base_url="https://game.example/play")
    server.app.config["TESTING"] = True
    return server.app.test_client()
