"""
Pytest fixtures for Mint Batcher tests: key material, a fast config and a scripted fake client.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from helpers import COLLECTION_ID, MANAGER_ID, SEED_A, SEED_B, FakeSubmissionClient, keystore_value
from mint_batcher.config.settings import MintConfig


@pytest.fixture
def config():
    """Test-speed config with the mint time already in the past."""
    return MintConfig(
        network="testnet",
        rpc_url="https://fullnode.test.invalid",
        mint_time=datetime.now(timezone.utc) - timedelta(hours=1),
        retry_delay_sec=0.0,
        poll_interval_sec=0.01,
        manager_id=MANAGER_ID,
        collection_id=COLLECTION_ID,
    )


@pytest.fixture
def key_env():
    """Two valid keystore entries plus an unrelated variable."""
    return {
        "PRIVATE_KEY_1": keystore_value(SEED_A),
        "PRIVATE_KEY_2": keystore_value(SEED_B),
        "HOME": "/root",
    }


@pytest.fixture
def fake_client():
    return FakeSubmissionClient()
