#!/usr/bin/env python3
"""
Print the SUI balance of every PRIVATE_KEY_* account.

Usage:
  python -m mint_batcher.tools.check_balances

Env: PRIVATE_KEY_<n>, SUI_NETWORK, SUI_RPC_URL, TEST_MODE.
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Sequence

import httpx

from mint_batcher.config import get_settings, load_env
from mint_batcher.core.exceptions import ConfigurationError, MintBatcherError
from mint_batcher.mint_logging import get_logger
from mint_batcher.sui_client.client import SUI_COIN_TYPE, SubmissionClient, SuiRpcClient, mist_to_sui
from mint_batcher.wallet.credentials import load_identities, load_private_keys

logger = get_logger(__name__)


@dataclass(frozen=True)
class AccountBalance:
    address: str
    balance_mist: int

    @property
    def balance_sui(self) -> float:
        return mist_to_sui(self.balance_mist)


async def check_balances(
    client: SubmissionClient,
    env: Mapping[str, str],
    coin_type: str = SUI_COIN_TYPE,
) -> list[AccountBalance]:
    """Query each account in turn; a failed query is logged and skipped."""
    identities = load_identities(load_private_keys(env))
    if not identities:
        raise ConfigurationError("no private keys found (set PRIVATE_KEY_1, PRIVATE_KEY_2, ...)")

    balances: list[AccountBalance] = []
    for identity in identities:
        try:
            mist = await client.get_balance(identity.address, coin_type)
        except (MintBatcherError, httpx.HTTPError) as e:
            logger.error("balance_check_failed", wallet_id=identity.address, error=str(e))
            continue
        balances.append(AccountBalance(address=identity.address, balance_mist=mist))
    return balances


def print_balances(balances: Sequence[AccountBalance]) -> None:
    for item in balances:
        print(f"Address: {item.address}")
        print(f"Balance: {item.balance_sui} SUI")
        print("------------------------\n")


async def _run() -> list[AccountBalance]:
    config = get_settings(require_launchpad=False)
    print(f"Checking balances on {config.network}...\n")
    async with SuiRpcClient(config.rpc_url, request_timeout_sec=config.request_timeout_sec) as client:
        return await check_balances(client, os.environ)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print SUI balances for PRIVATE_KEY_* accounts.")
    parser.parse_args(argv)
    load_env()
    try:
        balances = asyncio.run(_run())
    except ConfigurationError as e:
        logger.error("balance_config_error", error=str(e))
        return 1
    print_balances(balances)
    return 0


if __name__ == "__main__":
    sys.exit(main())
