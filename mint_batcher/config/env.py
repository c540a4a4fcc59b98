"""
Environment variable loading and network resolution for Mint Batcher.

- TEST_MODE: true forces testnet and the test mint contract
- SUI_NETWORK: mainnet | testnet | devnet (default: mainnet)
- SUI_RPC_URL: explicit fullnode endpoint (overrides the network default)
- Loads .env from the project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

# Project root: config is mint_batcher/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

MAINNET_RPC_URL = "https://fullnode.mainnet.sui.io:443"
TESTNET_RPC_URL = "https://fullnode.testnet.sui.io:443"
DEVNET_RPC_URL = "https://fullnode.devnet.sui.io:443"

NETWORK_RPC_URLS: dict[str, str] = {
    "mainnet": MAINNET_RPC_URL,
    "testnet": TESTNET_RPC_URL,
    "devnet": DEVNET_RPC_URL,
}

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


def load_env(path: Path | None = None) -> None:
    """Load .env (project root by default). Safe to call multiple times; never overrides set vars."""
    load_dotenv(path or _ENV_PATH, override=False)


def parse_bool(raw: str | None, default: bool = False) -> bool:
    value = (raw or "").strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


def get_sui_network(env: Mapping[str, str] | None = None) -> str:
    """
    Return the target network: mainnet | testnet | devnet.
    TEST_MODE wins over SUI_NETWORK; unknown values fall back to mainnet.
    """
    env = os.environ if env is None else env
    if parse_bool(env.get("TEST_MODE")):
        return "testnet"
    raw = (env.get("SUI_NETWORK") or "mainnet").strip().lower()
    return raw if raw in NETWORK_RPC_URLS else "mainnet"


def get_sui_rpc_url(env: Mapping[str, str] | None = None) -> str:
    """Resolve the fullnode URL. Order: SUI_RPC_URL > network default."""
    env = os.environ if env is None else env
    url = (env.get("SUI_RPC_URL") or "").strip()
    if url:
        return url
    return NETWORK_RPC_URLS[get_sui_network(env)]


def mask_rpc_url(url: str) -> str:
    """Hide API keys embedded in provider URLs before they reach the logs."""
    for marker in ("api-key=", "apikey=", "token="):
        if marker in url:
            return url.split(marker)[0] + marker + "***"
    return url


def print_startup(script_name: str, config) -> None:
    """Print mode, network, target time and contract at script start."""
    print(f"[mint-batcher] {script_name}")
    print(f"Mode: {'TEST' if config.test_mode else 'PRODUCTION'}")
    print(f"Network: {config.network}")
    print(f"RPC: {mask_rpc_url(config.rpc_url)}")
    print(f"Target mint time: {config.mint_time.isoformat()}")
    print(f"Collection: {config.collection_name}")
    print(f"Package ID: {config.active_package_id}")
