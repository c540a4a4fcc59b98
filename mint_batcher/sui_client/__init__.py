# Sui fullnode client.

from mint_batcher.sui_client.client import (
    MIST_PER_SUI,
    SUI_COIN_TYPE,
    SubmissionClient,
    SuiRpcClient,
    mist_to_sui,
)

__all__ = ["MIST_PER_SUI", "SUI_COIN_TYPE", "SubmissionClient", "SuiRpcClient", "mist_to_sui"]
