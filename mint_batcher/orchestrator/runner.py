"""
Mint run orchestration: keys → identities → prepared transactions → wait → burst submit.

All submissions are created in the same loop tick and gathered with
return_exceptions=True, so every wallet reaches a terminal outcome whatever
happens to the others. The only run-fatal condition is having no usable key.

Usage: python -m mint_batcher   (configuration via env / .env only)
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from typing import Mapping, Sequence

from mint_batcher.config import MintConfig, get_settings, load_env
from mint_batcher.config.env import print_startup
from mint_batcher.core.exceptions import ConfigurationError
from mint_batcher.mint_logging import get_logger
from mint_batcher.scheduler.engine import wait_until
from mint_batcher.submitter.executor import SubmissionOutcome, submit_with_retry
from mint_batcher.sui_client.client import SubmissionClient, SuiRpcClient
from mint_batcher.transactions.builder import build_all
from mint_batcher.transactions.models import PreparedTransaction
from mint_batcher.wallet.credentials import load_identities, load_private_keys
from mint_batcher.wallet.identity import Identity

logger = get_logger(__name__)


def load_accounts(env: Mapping[str, str]) -> list[Identity]:
    """
    Keys from env → identities.

    Raises:
        ConfigurationError: no PRIVATE_KEY_* entry decodes, or none yields a valid identity.
    """
    keys = load_private_keys(env)
    if not keys:
        raise ConfigurationError("no private keys found (set PRIVATE_KEY_1, PRIVATE_KEY_2, ...)")
    identities = load_identities(keys)
    if not identities:
        raise ConfigurationError("no valid accounts among the configured private keys")
    return identities


async def submit_all(
    client: SubmissionClient,
    prepared: Sequence[tuple[Identity, PreparedTransaction]],
    config: MintConfig,
) -> list[SubmissionOutcome]:
    """Fan out one submission per wallet and settle all of them (no fail-fast)."""
    results = await asyncio.gather(
        *(
            submit_with_retry(
                client,
                identity,
                tx,
                max_retries=config.max_retries,
                retry_delay_sec=config.retry_delay_sec,
            )
            for identity, tx in prepared
        ),
        return_exceptions=True,
    )
    outcomes: list[SubmissionOutcome] = []
    for (identity, _), result in zip(prepared, results):
        if isinstance(result, BaseException):
            if isinstance(result, asyncio.CancelledError):
                raise result
            logger.error("mint_unexpected_error", wallet_id=identity.address, error=str(result))
            outcomes.append(
                SubmissionOutcome(address=identity.address, success=False, attempts=0, error=str(result))
            )
        else:
            outcomes.append(result)
    return outcomes


async def run_mint(
    config: MintConfig,
    client: SubmissionClient,
    env: Mapping[str, str] | None = None,
) -> list[SubmissionOutcome]:
    """
    Full run: load accounts, pre-build transactions, wait for config.mint_time,
    submit everything at once and wait for every wallet's terminal outcome.

    Raises:
        ConfigurationError: before any scheduling when no account is usable.
    """
    identities = load_accounts(os.environ if env is None else env)
    prepared = await build_all(identities, config)

    await wait_until(config.mint_time, poll_interval_sec=config.poll_interval_sec)

    logger.info("mint_started", wallet_count=len(prepared))
    outcomes = await submit_all(client, prepared, config)
    succeeded = sum(1 for o in outcomes if o.success)
    logger.info(
        "mint_run_finished",
        succeeded=succeeded,
        failed=len(outcomes) - succeeded,
        total=len(outcomes),
    )
    return outcomes


async def _main_async(config: MintConfig) -> list[SubmissionOutcome]:
    async with SuiRpcClient(config.rpc_url, request_timeout_sec=config.request_timeout_sec) as client:
        return await run_mint(config, client)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry. Exit 0 once every wallet is terminal; 1 on configuration errors."""
    parser = argparse.ArgumentParser(
        prog="mint-batcher",
        description=(
            "Submit one NFT mint per PRIVATE_KEY_* account at MINT_TIME. "
            "Configured through environment variables / .env only."
        ),
    )
    parser.parse_args(argv)

    load_env()
    try:
        config = get_settings()
    except ConfigurationError as e:
        logger.error("main_config_error", error=str(e))
        return 1
    print_startup("mint", config)

    try:
        asyncio.run(_main_async(config))
    except ConfigurationError as e:
        logger.error("main_config_error", error=str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("main_interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
