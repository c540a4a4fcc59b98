"""
Mint transaction builder.

Pure data construction: one PreparedTransaction per identity, fixed target and
arguments taken from MintConfig. No network I/O.
"""

from __future__ import annotations

import asyncio
from typing import Sequence

from mint_batcher.config.settings import MintConfig
from mint_batcher.mint_logging import get_logger
from mint_batcher.transactions.models import (
    SUI_CLOCK_OBJECT_ID,
    GasCoinArg,
    ObjectArg,
    PreparedTransaction,
    PureArg,
)
from mint_batcher.wallet.identity import Identity

logger = get_logger(__name__)

MINT_MODULE = "stikz"
MINT_FUNCTION = "mint_order"
TEST_MINT_MODULE = "nft"
TEST_MINT_FUNCTION = "mint"
TEST_NFT_NAME = "Test NFT"
TEST_NFT_DESCRIPTION = "This is a test NFT"
TEST_NFT_URL = "https://example.com/nft.jpg"


def build_mint_transaction(identity: Identity, config: MintConfig) -> PreparedTransaction:
    """Launchpad mint_order call (or the test nft::mint call in test mode) for one sender."""
    if config.test_mode:
        return build_test_mint_transaction(identity, config)
    return PreparedTransaction(
        sender=identity.address,
        package_id=config.package_id,
        module=MINT_MODULE,
        function=MINT_FUNCTION,
        arguments=(
            ObjectArg(config.manager_id),
            ObjectArg(SUI_CLOCK_OBJECT_ID),
            ObjectArg(config.collection_id),
            PureArg(config.collection_name, "string"),
            PureArg(config.mint_quantity, "u64"),
            PureArg(config.mint_price_mist, "u64"),
            PureArg(config.mint_edition, "u64"),
            GasCoinArg(min_balance=config.mint_price_mist * config.mint_quantity),
        ),
        gas_budget=config.gas_budget,
    )


def build_test_mint_transaction(identity: Identity, config: MintConfig) -> PreparedTransaction:
    return PreparedTransaction(
        sender=identity.address,
        package_id=config.test_package_id,
        module=TEST_MINT_MODULE,
        function=TEST_MINT_FUNCTION,
        arguments=(
            PureArg(TEST_NFT_NAME, "string"),
            PureArg(TEST_NFT_DESCRIPTION, "string"),
            PureArg(TEST_NFT_URL, "string"),
        ),
        gas_budget=config.gas_budget,
    )


async def prepare_mint_transaction(identity: Identity, config: MintConfig) -> PreparedTransaction:
    return build_mint_transaction(identity, config)


async def build_all(
    identities: Sequence[Identity],
    config: MintConfig,
) -> list[tuple[Identity, PreparedTransaction]]:
    """Prepare every transaction concurrently; pairs come back in identity order."""
    txs = await asyncio.gather(
        *(prepare_mint_transaction(identity, config) for identity in identities)
    )
    logger.info("transactions_prepared", count=len(txs), target=txs[0].target if txs else None)
    return list(zip(identities, txs))
