"""
Per-wallet submission with bounded retry.

Pending → (Attempting ⇄ RetryWait)* → Succeeded | FailedTerminal.
One wallet's failure is reported in its own SubmissionOutcome and never
raised into sibling submissions.
"""

from __future__ import annotations

import asyncio
import enum
from dataclasses import dataclass
from typing import Awaitable, Callable

from mint_batcher.mint_logging import bind_wallet
from mint_batcher.sui_client.client import SubmissionClient
from mint_batcher.transactions.models import PreparedTransaction
from mint_batcher.wallet.identity import Identity

DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY_SEC = 0.1


class SubmissionState(str, enum.Enum):
    PENDING = "pending"
    ATTEMPTING = "attempting"
    RETRY_WAIT = "retry_wait"
    SUCCEEDED = "succeeded"
    FAILED_TERMINAL = "failed_terminal"


@dataclass(frozen=True)
class SubmissionOutcome:
    """Terminal result for one wallet."""

    address: str
    success: bool
    attempts: int
    digest: str | None = None
    error: str | None = None

    @property
    def state(self) -> SubmissionState:
        return SubmissionState.SUCCEEDED if self.success else SubmissionState.FAILED_TERMINAL


async def submit_with_retry(
    client: SubmissionClient,
    identity: Identity,
    tx: PreparedTransaction,
    *,
    max_retries: int = DEFAULT_MAX_RETRIES,
    retry_delay_sec: float = DEFAULT_RETRY_DELAY_SEC,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> SubmissionOutcome:
    """
    Submit tx, resending the identical payload up to max_retries times after
    a failure (fixed retry_delay_sec between attempts).

    Returns a success outcome with the digest, or a failure outcome with the
    last error once 1 + max_retries attempts are spent. Never raises for
    ordinary exceptions; cancellation propagates.
    """
    log = bind_wallet(identity.address)
    max_attempts = max(0, max_retries) + 1
    last_error: Exception | None = None
    attempt = 0

    while attempt < max_attempts:
        attempt += 1
        log.debug("mint_attempt", attempt=attempt, state=SubmissionState.ATTEMPTING.value)
        try:
            digest = await client.submit(identity, tx)
        except Exception as e:
            last_error = e
            if attempt < max_attempts:
                log.warning(
                    "mint_attempt_failed",
                    attempt=attempt,
                    max_attempts=max_attempts,
                    error=str(e),
                    state=SubmissionState.RETRY_WAIT.value,
                )
                await sleep(retry_delay_sec)
            continue
        log.info("mint_succeeded", attempt=attempt, digest=digest)
        return SubmissionOutcome(
            address=identity.address,
            success=True,
            attempts=attempt,
            digest=digest,
        )

    log.error("mint_failed", attempts=attempt, error=str(last_error))
    return SubmissionOutcome(
        address=identity.address,
        success=False,
        attempts=attempt,
        error=str(last_error),
    )
