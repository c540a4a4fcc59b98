"""
Signing identity: Ed25519 keypair plus its derived Sui address.

Sui address = 0x + hex(blake2b-256(flag || public_key)) with flag 0x00 for Ed25519.
Transaction signatures sign blake2b-256(intent || tx_bytes) and are serialized as
base64(flag || signature || public_key).
"""

from __future__ import annotations

import base64
import hashlib
from dataclasses import dataclass, field

from solders.keypair import Keypair

from mint_batcher.core.exceptions import CredentialDecodeError

ED25519_FLAG = 0x00
SECRET_KEY_LEN = 32
# IntentScope::TransactionData, IntentVersion::V0, AppId::Sui
TRANSACTION_INTENT = bytes([0, 0, 0])


def derive_sui_address(public_key: bytes) -> str:
    """Return the 0x-prefixed Sui address for a 32-byte Ed25519 public key."""
    digest = hashlib.blake2b(bytes([ED25519_FLAG]) + public_key, digest_size=32).digest()
    return "0x" + digest.hex()


@dataclass(frozen=True)
class Identity:
    """Immutable signer. Created once per key at startup, never persisted."""

    keypair: Keypair = field(repr=False, compare=False)
    address: str

    @classmethod
    def from_secret_key(cls, secret_key: bytes) -> "Identity":
        """Build from a raw 32-byte Ed25519 secret (seed). Raises CredentialDecodeError otherwise."""
        if len(secret_key) != SECRET_KEY_LEN:
            raise CredentialDecodeError(
                f"secret key must be {SECRET_KEY_LEN} bytes, got {len(secret_key)}"
            )
        try:
            keypair = Keypair.from_seed(bytes(secret_key))
        except (ValueError, TypeError) as e:
            raise CredentialDecodeError(f"invalid Ed25519 secret key: {e}") from e
        return cls(keypair=keypair, address=derive_sui_address(bytes(keypair.pubkey())))

    @property
    def public_key(self) -> bytes:
        return bytes(self.keypair.pubkey())

    def sign_transaction(self, tx_bytes: bytes) -> str:
        """Sign BCS transaction bytes; return the serialized Sui signature (base64)."""
        digest = hashlib.blake2b(TRANSACTION_INTENT + tx_bytes, digest_size=32).digest()
        signature = bytes(self.keypair.sign_message(digest))
        return base64.b64encode(bytes([ED25519_FLAG]) + signature + self.public_key).decode("ascii")
