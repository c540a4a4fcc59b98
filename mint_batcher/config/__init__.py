"""
Configuration management for Mint Batcher.

Loads settings from environment variables (and .env) once at startup and
exposes them as an immutable MintConfig passed to every component.
"""

from mint_batcher.config.env import load_env  # noqa: F401
from mint_batcher.config.settings import MintConfig, get_settings  # noqa: F401

__all__ = ["MintConfig", "get_settings", "load_env"]
