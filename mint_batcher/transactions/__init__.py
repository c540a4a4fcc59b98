# Mint transaction models and builder.

from mint_batcher.transactions.builder import build_all, build_mint_transaction
from mint_batcher.transactions.models import (
    GasCoinArg,
    ObjectArg,
    PreparedTransaction,
    PureArg,
)

__all__ = [
    "GasCoinArg",
    "ObjectArg",
    "PreparedTransaction",
    "PureArg",
    "build_all",
    "build_mint_transaction",
]
