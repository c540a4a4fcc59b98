#!/usr/bin/env python3
"""
Send one test-contract mint right now from the first account (no scheduling, no retry).

Always targets the test package (nft::mint) on testnet, whatever TEST_MODE and
SUI_NETWORK say; meant for checking keys and connectivity before a real drop.

Usage:
  python -m mint_batcher.tools.test_mint
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from typing import Mapping, Sequence

from mint_batcher.config import MintConfig, get_settings, load_env
from mint_batcher.config.env import parse_bool
from mint_batcher.core.exceptions import ConfigurationError, SubmissionError
from mint_batcher.mint_logging import get_logger
from mint_batcher.orchestrator.runner import load_accounts
from mint_batcher.sui_client.client import SubmissionClient, SuiRpcClient
from mint_batcher.transactions.builder import build_test_mint_transaction

logger = get_logger(__name__)


def testnet_settings(env: Mapping[str, str]) -> MintConfig:
    """
    Settings forced onto testnet. SUI_RPC_URL is kept only when the env already
    runs in TEST_MODE (otherwise it points at the production network).
    """
    overlay = dict(env)
    if not parse_bool(overlay.get("TEST_MODE")):
        overlay.pop("SUI_RPC_URL", None)
    overlay["TEST_MODE"] = "true"
    return get_settings(overlay)


async def run_test_mint(
    config: MintConfig,
    client: SubmissionClient,
    env: Mapping[str, str],
) -> str | None:
    """Returns the digest, or None when the submission failed (logged)."""
    identity = load_accounts(env)[0]
    tx = build_test_mint_transaction(identity, config)
    logger.info("test_mint_started", wallet_id=identity.address, target=tx.target, network=config.network)
    try:
        digest = await client.submit(identity, tx)
    except SubmissionError as e:
        logger.error("test_mint_failed", wallet_id=identity.address, error=str(e))
        return None
    logger.info("test_mint_sent", wallet_id=identity.address, digest=digest)
    return digest


async def _run(config: MintConfig) -> str | None:
    async with SuiRpcClient(config.rpc_url, request_timeout_sec=config.request_timeout_sec) as client:
        return await run_test_mint(config, client, os.environ)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send one immediate test mint from the first account.")
    parser.parse_args(argv)
    load_env()
    try:
        config = testnet_settings(os.environ)
        digest = asyncio.run(_run(config))
    except ConfigurationError as e:
        logger.error("test_mint_config_error", error=str(e))
        return 1
    return 0 if digest else 1


if __name__ == "__main__":
    sys.exit(main())
