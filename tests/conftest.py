"""
Shared fixtures.
"""

import json

import pytest

from model import Account
from tests.fakes import FakeResponse, FakeTransport, PLAYERS_PAYLOAD


@pytest.fixture
def account():
    return Account("acct-1", "secret-key")


@pytest.fixture
def players_transport():
    return FakeTransport({"/api/v1/get_players": FakeResponse(json.dumps(PLAYERS_PAYLOAD))})
