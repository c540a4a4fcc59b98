# Mint-time scheduling.

from mint_batcher.scheduler.engine import seconds_until, utc_now, wait_until

__all__ = ["seconds_until", "utc_now", "wait_until"]
