"""
Credential source: raw signing keys from an environment-like mapping.

Every PRIVATE_KEY_<n> entry holds a base64 Sui keystore value: one scheme flag
byte followed by the 32-byte Ed25519 secret. Bad entries are dropped and logged
by name (never by value) so one typo does not block the other accounts.
"""

from __future__ import annotations

import base64
import binascii
from typing import Iterable, Mapping

from mint_batcher.core.exceptions import CredentialDecodeError
from mint_batcher.mint_logging import get_logger
from mint_batcher.wallet.identity import SECRET_KEY_LEN, Identity

logger = get_logger(__name__)

PRIVATE_KEY_PREFIX = "PRIVATE_KEY_"
SECRET_KEY_OFFSET = 1


def decode_private_key(value: str, source: str | None = None) -> bytes:
    """
    Decode one keystore value into the raw secret slice (bytes 1..33).

    Raises:
        CredentialDecodeError: value is not strict base64.
    """
    try:
        buf = base64.b64decode(value.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise CredentialDecodeError(f"not valid base64: {e}", source=source) from e
    return buf[SECRET_KEY_OFFSET : SECRET_KEY_OFFSET + SECRET_KEY_LEN]


def load_private_keys(env: Mapping[str, str]) -> list[bytes]:
    """
    Return raw key buffers for every PRIVATE_KEY_* entry, in mapping order.
    Empty and undecodable values are skipped. Empty list means no credentials.
    """
    keys: list[bytes] = []
    for name, value in env.items():
        if not name.startswith(PRIVATE_KEY_PREFIX):
            continue
        if not value:
            logger.debug("credential_empty", key_name=name)
            continue
        try:
            keys.append(decode_private_key(value, source=name))
        except CredentialDecodeError as e:
            logger.warning("credential_decode_failed", key_name=name, error=str(e))
    return keys


def load_identities(keys: Iterable[bytes]) -> list[Identity]:
    """Build one Identity per key; keys the signer rejects are logged and dropped."""
    identities: list[Identity] = []
    for idx, key in enumerate(keys, start=1):
        try:
            identity = Identity.from_secret_key(key)
        except CredentialDecodeError as e:
            logger.error("credential_invalid_key", account=idx, error=str(e))
            continue
        logger.info("account_loaded", account=idx, wallet_id=identity.address)
        identities.append(identity)
    return identities
