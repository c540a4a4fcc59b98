"""
Mint-time scheduler: suspend until the configured wall-clock instant.

Checks the clock immediately, then every poll_interval_sec via asyncio.sleep
(no busy spin). Releases exactly once; there is no cancellation path besides
task cancellation by the caller.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Awaitable, Callable

from mint_batcher.mint_logging import get_logger

logger = get_logger(__name__)

DEFAULT_POLL_INTERVAL_SEC = 0.1
PROGRESS_LOG_EVERY_SEC = 10.0


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def seconds_until(target: datetime, now: datetime | None = None) -> float:
    """Seconds from now to target (negative when target is in the past)."""
    return (target - (now or utc_now())).total_seconds()


async def wait_until(
    target: datetime,
    *,
    poll_interval_sec: float = DEFAULT_POLL_INTERVAL_SEC,
    now: Callable[[], datetime] = utc_now,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> datetime:
    """
    Return once now() >= target. Returns the release time.

    Raises:
        ValueError: target is naive or poll_interval_sec is not positive.
    """
    if target.tzinfo is None or target.utcoffset() is None:
        raise ValueError("target must be timezone-aware")
    if poll_interval_sec <= 0:
        raise ValueError("poll_interval_sec must be positive")

    logger.info(
        "mint_time_waiting",
        target=target.isoformat(),
        seconds_left=round(seconds_until(target, now()), 3),
    )
    last_progress = now()
    while True:
        current = now()
        if current >= target:
            logger.info("mint_time_reached", target=target.isoformat(), released_at=current.isoformat())
            return current
        if (current - last_progress).total_seconds() >= PROGRESS_LOG_EVERY_SEC:
            logger.debug("mint_time_waiting", seconds_left=round(seconds_until(target, current), 1))
            last_progress = current
        await sleep(poll_interval_sec)
