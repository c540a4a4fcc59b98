# Credentials and signing identities.

from mint_batcher.wallet.credentials import (
    PRIVATE_KEY_PREFIX,
    decode_private_key,
    load_identities,
    load_private_keys,
)
from mint_batcher.wallet.identity import Identity, derive_sui_address

__all__ = [
    "PRIVATE_KEY_PREFIX",
    "Identity",
    "decode_private_key",
    "derive_sui_address",
    "load_identities",
    "load_private_keys",
]
