"""Shared test helpers: keystore encoding and a scripted submission client."""

from __future__ import annotations

import base64

from mint_batcher.core.exceptions import SubmissionError

SEED_A = bytes(range(32))
SEED_B = bytes(range(32, 64))
SEED_C = bytes([7] * 32)


def keystore_value(seed: bytes, flag: int = 0) -> str:
    """Sui keystore encoding: base64(flag || 32-byte secret)."""
    return base64.b64encode(bytes([flag]) + seed).decode("ascii")


class FakeSubmissionClient:
    """
    Scripted client. failures maps address -> number of leading failures
    (use a large number for "always fails").
    """

    def __init__(self, failures: dict[str, int] | None = None, balances: dict[str, int] | None = None):
        self.failures = dict(failures or {})
        self.balances = dict(balances or {})
        self.calls: list[tuple[str, object]] = []

    def attempts_for(self, address: str) -> int:
        return sum(1 for a, _ in self.calls if a == address)

    async def submit(self, identity, tx) -> str:
        self.calls.append((identity.address, tx))
        if self.attempts_for(identity.address) <= self.failures.get(identity.address, 0):
            raise SubmissionError(f"rpc unavailable for {identity.address[:10]}")
        return f"digest-{identity.address[2:10]}-{self.attempts_for(identity.address)}"

    async def get_balance(self, address: str, coin_type: str = "0x2::sui::SUI") -> int:
        if address not in self.balances:
            raise SubmissionError("unknown owner")
        return self.balances[address]


MANAGER_ID = "0x" + "a1" * 32
COLLECTION_ID = "0x" + "c2" * 32
LAUNCHPAD_ENV = {"LAUNCHPAD_MANAGER_ID": MANAGER_ID, "LAUNCHPAD_COLLECTION_ID": COLLECTION_ID}
