"""
tests.conftest

Shared fixtures.
"""

from __future__ import annotations

import pytest

from srp_token_client.credentials.base import PoolIdentity
from tests.support import CLIENT_ID, POOL_ID, SHARED_SECRET, FakeCognito


@pytest.fixture
def fake_cognito() -> FakeCognito:
    fake = FakeCognito()
    fake.add_user("alice", "CorrectHorse1!")
    return fake


@pytest.fixture
def identity() -> PoolIdentity:
    return PoolIdentity(shared_secret=SHARED_SECRET, client_id=CLIENT_ID, user_pool_id=POOL_ID)
