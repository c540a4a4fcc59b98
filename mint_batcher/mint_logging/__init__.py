"""
Structured logging for Mint Batcher.

Use get_logger() in every module; console output by default, JSON with LOG_FORMAT=json.
"""

from mint_batcher.mint_logging.logger import bind_wallet, configure_structlog, get_logger

__all__ = ["bind_wallet", "configure_structlog", "get_logger"]
