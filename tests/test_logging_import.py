"""
Test that mint_logging can be imported without circular import and the logger works.
"""

from __future__ import annotations


def test_logging_import():
    """Import get_logger from mint_logging and use the logger."""
    from mint_batcher.mint_logging import bind_wallet, get_logger

    logger = get_logger("test")
    assert logger is not None
    for level in ("info", "debug", "warning", "error"):
        assert hasattr(logger, level)
    # Smoke test: should not raise
    logger.info("test_message", key="value")
    bind_wallet("0xabc").warning("test_wallet_message")


def test_json_format_emits_flat_records():
    """LOG_FORMAT=json: one JSON object per line with event_type, level, timestamp, wallet_id."""
    import io
    import json
    import logging

    from mint_batcher.mint_logging import bind_wallet, configure_structlog

    stream = io.StringIO()
    configure_structlog(log_format="json", level=logging.DEBUG, stream=stream)
    try:
        bind_wallet("0xabc").info("mint_succeeded", digest="D1")
    finally:
        configure_structlog()
    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["event_type"] == "mint_succeeded"
    assert "event" not in record
    assert record["level"] == "info"
    assert record["wallet_id"] == "0xabc"
    assert record["digest"] == "D1"
    assert record["timestamp"].endswith("Z")
