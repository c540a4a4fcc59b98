"""
Tests for credential loading (wallet.credentials) and identity derivation (wallet.identity).
"""

from __future__ import annotations

import base64
import hashlib

import pytest

from helpers import SEED_A, SEED_B, SEED_C, keystore_value
from mint_batcher.core.exceptions import CredentialDecodeError
from mint_batcher.wallet.credentials import decode_private_key, load_identities, load_private_keys
from mint_batcher.wallet.identity import Identity, derive_sui_address


def test_load_private_keys_selects_prefix_only():
    """Only PRIVATE_KEY_* entries are read; the secret slice is bytes 1..33."""
    env = {
        "PRIVATE_KEY_1": keystore_value(SEED_A),
        "SUI_NETWORK": "testnet",
        "MY_PRIVATE_KEY_2": keystore_value(SEED_B),
    }
    assert load_private_keys(env) == [SEED_A]


def test_load_private_keys_keeps_mapping_order():
    env = {
        "PRIVATE_KEY_3": keystore_value(SEED_C),
        "PRIVATE_KEY_1": keystore_value(SEED_A),
        "PRIVATE_KEY_2": keystore_value(SEED_B),
    }
    assert load_private_keys(env) == [SEED_C, SEED_A, SEED_B]


def test_malformed_entry_is_dropped():
    """{PRIVATE_KEY_1: valid, PRIVATE_KEY_2: 'not-base64!'} yields exactly key A."""
    env = {"PRIVATE_KEY_1": keystore_value(SEED_A), "PRIVATE_KEY_2": "not-base64!"}
    keys = load_private_keys(env)
    assert keys == [SEED_A]
    assert len(load_identities(keys)) == 1


def test_empty_values_skipped():
    assert load_private_keys({"PRIVATE_KEY_1": "", "PRIVATE_KEY_2": keystore_value(SEED_B)}) == [SEED_B]


def test_no_credentials_returns_empty_list():
    assert load_private_keys({"HOME": "/root", "PATH": "/usr/bin"}) == []


def test_decode_private_key_raises_on_bad_base64():
    with pytest.raises(CredentialDecodeError, match="base64"):
        decode_private_key("@@@", source="PRIVATE_KEY_9")


def test_decode_ignores_flag_byte():
    """Scheme flag byte is skipped regardless of its value."""
    assert decode_private_key(keystore_value(SEED_A, flag=1)) == SEED_A


def test_short_buffer_dropped_at_identity_stage():
    """Decodable but too-short buffer: K of N keys become identities."""
    short = base64.b64encode(b"\x00" + b"\x01" * 10).decode("ascii")
    env = {
        "PRIVATE_KEY_1": keystore_value(SEED_A),
        "PRIVATE_KEY_2": short,
        "PRIVATE_KEY_3": keystore_value(SEED_B),
        "PRIVATE_KEY_4": "%%%",
    }
    keys = load_private_keys(env)
    assert len(keys) == 3
    identities = load_identities(keys)
    assert len(identities) == 2
    assert identities[0].address == Identity.from_secret_key(SEED_A).address
    assert identities[1].address == Identity.from_secret_key(SEED_B).address


def test_identity_rejects_wrong_length():
    with pytest.raises(CredentialDecodeError, match="32 bytes"):
        Identity.from_secret_key(b"\x00" * 31)


def test_identity_address_is_deterministic():
    """Building an identity twice from the same key yields the same address."""
    first = Identity.from_secret_key(SEED_A)
    second = Identity.from_secret_key(SEED_A)
    assert first.address == second.address
    assert first == second
    assert first.address != Identity.from_secret_key(SEED_B).address


def test_identity_address_format():
    identity = Identity.from_secret_key(SEED_A)
    assert identity.address.startswith("0x")
    assert len(identity.address) == 66
    expected = "0x" + hashlib.blake2b(b"\x00" + identity.public_key, digest_size=32).hexdigest()
    assert identity.address == expected
    assert derive_sui_address(identity.public_key) == identity.address


def test_sign_transaction_layout():
    """Serialized signature = flag(1) || ed25519 signature(64) || public key(32)."""
    identity = Identity.from_secret_key(SEED_A)
    sig = base64.b64decode(identity.sign_transaction(b"tx-bytes"))
    assert len(sig) == 97
    assert sig[0] == 0
    assert sig[65:] == identity.public_key
    # Ed25519 is deterministic
    assert identity.sign_transaction(b"tx-bytes") == identity.sign_transaction(b"tx-bytes")
    assert identity.sign_transaction(b"tx-bytes") != identity.sign_transaction(b"other")


def test_identity_repr_hides_keypair():
    identity = Identity.from_secret_key(SEED_A)
    assert "keypair" not in repr(identity)
    assert identity.address in repr(identity)
