"""
Application settings.

Responsibilities:
- Build one immutable MintConfig from an environment mapping at startup.
- Validate numbers, object ids and the mint timestamp; raise ConfigurationError on bad values.
- Components receive the config explicitly; nothing reads module-level globals.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Mapping

from mint_batcher.config.env import get_sui_network, get_sui_rpc_url, parse_bool
from mint_batcher.core.exceptions import ConfigurationError

DEFAULT_MINT_TIME = "2025-05-15T15:07:00+01:00"
DEFAULT_NFT_PACKAGE_ID = "0xc8766524653463aa9bd5eef77d86db08bdd4445e50f914deeefca1bef2f40c50"
DEFAULT_TEST_PACKAGE_ID = "0x5c8b5588ee7648bf89c55977f6e818e4d1a9fd8350a619c401d2eea5a8f22e80"
# Launchpad shared objects have no usable default: set LAUNCHPAD_MANAGER_ID /
# LAUNCHPAD_COLLECTION_ID to their object ids for a production run.
OBJECT_ID_RE = re.compile(r"^0x[0-9a-fA-F]{1,64}$")
DEFAULT_COLLECTION_NAME = "Stikz"
DEFAULT_MINT_PRICE_MIST = 10_000_000  # 0.01 SUI
DEFAULT_MINT_QUANTITY = 1
DEFAULT_MINT_EDITION = 0
DEFAULT_GAS_BUDGET = 50_000_000
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY_MS = 100
DEFAULT_POLL_INTERVAL_MS = 100
DEFAULT_REQUEST_TIMEOUT_SEC = 30.0


def _get_int(env: Mapping[str, str], name: str, default: int, minimum: int = 0) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw.replace("_", ""))
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


def _get_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


def _get_object_id(env: Mapping[str, str], name: str, default: str = "", required: bool = False) -> str:
    value = (env.get(name) or default).strip()
    if not value:
        if required:
            raise ConfigurationError(f"{name} must be set to a 0x-prefixed object id")
        return value
    if not OBJECT_ID_RE.match(value):
        raise ConfigurationError(f"{name} must be a 0x-prefixed hex object id, got {value!r}")
    return value


def parse_mint_time(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp that carries an explicit UTC offset."""
    text = raw.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        value = datetime.fromisoformat(text)
    except ValueError as e:
        raise ConfigurationError(f"MINT_TIME is not ISO-8601: {raw!r}") from e
    if value.tzinfo is None or value.utcoffset() is None:
        raise ConfigurationError(f"MINT_TIME must include a UTC offset: {raw!r}")
    return value


@dataclass(frozen=True)
class MintConfig:
    """
    Immutable run configuration, built once by get_settings().

    mint_time: scheduled instant (timezone-aware).
    max_retries: retries after the first attempt (total attempts = max_retries + 1).
    retry_delay_sec / poll_interval_sec: fixed retry backoff and scheduler poll period.
    """

    network: str
    rpc_url: str
    mint_time: datetime
    test_mode: bool = False
    package_id: str = DEFAULT_NFT_PACKAGE_ID
    test_package_id: str = DEFAULT_TEST_PACKAGE_ID
    manager_id: str = ""
    collection_id: str = ""
    collection_name: str = DEFAULT_COLLECTION_NAME
    mint_price_mist: int = DEFAULT_MINT_PRICE_MIST
    mint_quantity: int = DEFAULT_MINT_QUANTITY
    mint_edition: int = DEFAULT_MINT_EDITION
    gas_budget: int = DEFAULT_GAS_BUDGET
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay_sec: float = DEFAULT_RETRY_DELAY_MS / 1000.0
    poll_interval_sec: float = DEFAULT_POLL_INTERVAL_MS / 1000.0
    request_timeout_sec: float = DEFAULT_REQUEST_TIMEOUT_SEC

    @property
    def active_package_id(self) -> str:
        return self.test_package_id if self.test_mode else self.package_id


def get_settings(env: Mapping[str, str] | None = None, require_launchpad: bool = True) -> MintConfig:
    """
    Build MintConfig from env (os.environ when None).

    require_launchpad=False skips the launchpad object id requirement for
    callers that never build a launchpad mint (balance checks).

    Raises:
        ConfigurationError: on malformed numbers, timestamps or object ids, or
            when the launchpad object ids are missing outside test mode.
    """
    env = os.environ if env is None else env
    test_mode = parse_bool(env.get("TEST_MODE"))
    # test mode calls nft::mint, which takes no launchpad objects
    launchpad_required = require_launchpad and not test_mode
    return MintConfig(
        network=get_sui_network(env),
        rpc_url=get_sui_rpc_url(env),
        mint_time=parse_mint_time(env.get("MINT_TIME") or DEFAULT_MINT_TIME),
        test_mode=test_mode,
        package_id=_get_object_id(env, "NFT_PACKAGE_ID", DEFAULT_NFT_PACKAGE_ID),
        test_package_id=_get_object_id(env, "TEST_PACKAGE_ID", DEFAULT_TEST_PACKAGE_ID),
        manager_id=_get_object_id(env, "LAUNCHPAD_MANAGER_ID", required=launchpad_required),
        collection_id=_get_object_id(env, "LAUNCHPAD_COLLECTION_ID", required=launchpad_required),
        collection_name=(env.get("COLLECTION_NAME") or DEFAULT_COLLECTION_NAME).strip(),
        mint_price_mist=_get_int(env, "MINT_PRICE_MIST", DEFAULT_MINT_PRICE_MIST),
        gas_budget=_get_int(env, "GAS_BUDGET", DEFAULT_GAS_BUDGET, minimum=1),
        max_retries=_get_int(env, "MAX_RETRIES", DEFAULT_MAX_RETRIES),
        retry_delay_sec=_get_int(env, "RETRY_DELAY_MS", DEFAULT_RETRY_DELAY_MS) / 1000.0,
        poll_interval_sec=_get_int(env, "POLL_INTERVAL_MS", DEFAULT_POLL_INTERVAL_MS, minimum=1) / 1000.0,
        request_timeout_sec=_get_float(env, "REQUEST_TIMEOUT_SEC", DEFAULT_REQUEST_TIMEOUT_SEC),
    )
