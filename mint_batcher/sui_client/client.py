"""
Sui fullnode JSON-RPC client: transaction submission and balance queries.

Responsibilities:
- Hold one shared httpx.AsyncClient for every concurrent submission.
- Build Move call bytes server-side (unsafe_moveCall), sign locally, execute.
- Resolve the payment coin for calls that take a Coin<SUI> argument,
  splitting one off the gas coin (unsafe_paySui) for single-coin wallets.
- Surface transport, RPC and on-chain failures as SubmissionError.
"""

from __future__ import annotations

import base64
import itertools
from typing import Any, Protocol

import httpx

from mint_batcher.core.exceptions import RpcError, SubmissionError
from mint_batcher.mint_logging import get_logger
from mint_batcher.transactions.models import GasCoinArg, PreparedTransaction
from mint_batcher.wallet.identity import Identity

logger = get_logger(__name__)

SUI_COIN_TYPE = "0x2::sui::SUI"
MIST_PER_SUI = 1_000_000_000
EXECUTE_REQUEST_TYPE = "WaitForLocalExecution"


class SubmissionClient(Protocol):
    """What the mint pipeline needs from a network client."""

    async def submit(self, identity: Identity, tx: PreparedTransaction) -> str: ...

    async def get_balance(self, address: str, coin_type: str = SUI_COIN_TYPE) -> int: ...


def mist_to_sui(mist: int) -> float:
    return mist / MIST_PER_SUI


def select_payment_coin(coins: list[dict[str, Any]], min_balance: int) -> tuple[str, str] | None:
    """
    Pick (gas_coin_id, payment_coin_id) from the sender's SUI coins.

    The richest coin pays gas; the richest remaining coin covering min_balance
    is the payment. Returns None when a payment coin has to be split off the
    gas coin first (single coin, or no other coin is large enough).
    """
    ordered = sorted(coins, key=lambda c: int(c.get("balance", 0)), reverse=True)
    if not ordered:
        raise SubmissionError("sender owns no SUI coins")
    gas_coin = ordered[0]
    for coin in ordered[1:]:
        if int(coin.get("balance", 0)) >= min_balance:
            return gas_coin["coinObjectId"], coin["coinObjectId"]
    if int(gas_coin.get("balance", 0)) <= min_balance:
        raise SubmissionError(f"no SUI coin with balance > {min_balance} MIST to split a payment from")
    return None


class SuiRpcClient:
    """
    Async Sui JSON-RPC client. Use as an async context manager so the
    underlying connection pool is closed:

        async with SuiRpcClient(config.rpc_url) as client:
            digest = await client.submit(identity, tx)
    """

    def __init__(
        self,
        rpc_url: str,
        *,
        request_timeout_sec: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not rpc_url.strip():
            raise ValueError("rpc_url must be non-empty")
        self._rpc_url = rpc_url.rstrip("/")
        self._ids = itertools.count(1)
        self._http = httpx.AsyncClient(
            timeout=httpx.Timeout(request_timeout_sec),
            transport=transport,
        )

    async def __aenter__(self) -> "SuiRpcClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _rpc(self, method: str, params: list[Any]) -> Any:
        """
        Perform one JSON-RPC call and return its result.

        Raises:
            RpcError: error object, non-JSON body, or a reply without a result.
            httpx.HTTPError: transport failure or non-2xx status.
        """
        body = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        resp = await self._http.post(self._rpc_url, json=body)
        resp.raise_for_status()
        try:
            data = resp.json()
        except ValueError as e:
            raise RpcError(f"Sui RPC returned non-JSON body for {method}: {resp.text[:80]!r}", method=method) from e
        if not isinstance(data, dict):
            raise RpcError(f"Sui RPC returned malformed reply for {method}", method=method)
        if "error" in data:
            err = data["error"]
            if isinstance(err, dict):
                message, code = err.get("message", err), err.get("code")
            else:
                message, code = err, None
            raise RpcError(f"Sui RPC error in {method}: {message}", code=code, method=method)
        result = data.get("result")
        if not isinstance(result, dict):
            raise RpcError(f"Sui RPC returned no result object for {method}", method=method)
        return result

    async def get_balance(self, address: str, coin_type: str = SUI_COIN_TYPE) -> int:
        """Total balance in MIST for coin_type."""
        result = await self._rpc("suix_getBalance", [address, coin_type])
        try:
            return int(result.get("totalBalance", 0))
        except (TypeError, ValueError) as e:
            raise RpcError(f"malformed totalBalance: {result.get('totalBalance')!r}", method="suix_getBalance") from e

    async def get_coins(self, address: str, coin_type: str = SUI_COIN_TYPE) -> list[dict[str, Any]]:
        """First page of the owner's coins of coin_type."""
        result = await self._rpc("suix_getCoins", [address, coin_type, None, None])
        return list(result.get("data") or [])

    async def build_move_call(
        self,
        tx: PreparedTransaction,
        *,
        gas_coin_id: str | None = None,
        payment_coin_id: str | None = None,
    ) -> bytes:
        """unsafe_moveCall: let the fullnode serialize the call; return BCS tx bytes."""
        result = await self._rpc(
            "unsafe_moveCall",
            [
                tx.sender,
                tx.package_id,
                tx.module,
                tx.function,
                list(tx.type_arguments),
                tx.encode_arguments(payment_coin_id),
                gas_coin_id,
                str(tx.gas_budget),
            ],
        )
        tx_bytes = result.get("txBytes")
        if not tx_bytes:
            raise RpcError("unsafe_moveCall returned no txBytes", method="unsafe_moveCall")
        return base64.b64decode(tx_bytes)

    async def execute(self, tx_bytes: bytes, signature: str) -> dict[str, Any]:
        return await self._rpc(
            "sui_executeTransactionBlock",
            [
                base64.b64encode(tx_bytes).decode("ascii"),
                [signature],
                {"showEffects": True},
                EXECUTE_REQUEST_TYPE,
            ],
        )

    async def split_payment_coin(self, identity: Identity, coin_id: str, amount: int, gas_budget: int) -> str:
        """
        unsafe_paySui the sender `amount` MIST out of coin_id (which also pays gas).
        Leaves the sender with a separate coin usable as the Move call payment.
        """
        result = await self._rpc(
            "unsafe_paySui",
            [identity.address, [coin_id], [identity.address], [str(amount)], str(gas_budget)],
        )
        tx_bytes = result.get("txBytes")
        if not tx_bytes:
            raise RpcError("unsafe_paySui returned no txBytes", method="unsafe_paySui")
        raw = base64.b64decode(tx_bytes)
        digest = _check_effects(await self.execute(raw, identity.sign_transaction(raw)))
        logger.info("payment_coin_split", wallet_id=identity.address, amount_mist=amount, digest=digest)
        return digest

    async def _resolve_coins(self, identity: Identity, tx: PreparedTransaction) -> tuple[str | None, str | None]:
        if not tx.needs_payment_coin:
            return None, None
        min_balance = max(
            (arg.min_balance for arg in tx.arguments if isinstance(arg, GasCoinArg)),
            default=0,
        )
        coins = await self.get_coins(tx.sender)
        selected = select_payment_coin(coins, min_balance)
        if selected is not None:
            return selected
        gas_coin = max(coins, key=lambda c: int(c.get("balance", 0)))
        await self.split_payment_coin(identity, gas_coin["coinObjectId"], max(min_balance, 1), tx.gas_budget)
        selected = select_payment_coin(await self.get_coins(tx.sender), min_balance)
        if selected is None:
            raise SubmissionError("payment coin split executed but no payment coin is visible yet")
        return selected

    async def submit(self, identity: Identity, tx: PreparedTransaction) -> str:
        """
        Sign and execute tx as identity. Returns the transaction digest.

        Raises:
            SubmissionError: transport failure, RPC error, or failed on-chain effects.
        """
        if identity.address != tx.sender:
            raise SubmissionError(f"transaction sender {tx.sender} does not match signer {identity.address}")
        try:
            gas_coin_id, payment_coin_id = await self._resolve_coins(identity, tx)
            tx_bytes = await self.build_move_call(
                tx, gas_coin_id=gas_coin_id, payment_coin_id=payment_coin_id
            )
            result = await self.execute(tx_bytes, identity.sign_transaction(tx_bytes))
        except httpx.HTTPError as e:
            raise SubmissionError(f"transport error: {e}") from e
        return _check_effects(result)


def _check_effects(result: dict[str, Any]) -> str:
    """Digest of an executed transaction; SubmissionError when effects report failure."""
    digest = result.get("digest")
    status = ((result.get("effects") or {}).get("status") or {})
    if status.get("status") == "failure":
        raise SubmissionError(f"transaction {digest} failed on chain: {status.get('error')}")
    if not digest:
        raise SubmissionError("sui_executeTransactionBlock returned no digest")
    return digest
