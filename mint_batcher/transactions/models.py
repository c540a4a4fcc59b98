"""
Transaction data models.

A PreparedTransaction describes one Move call (target + arguments) bound to a
sender. It is built before the mint instant and resent unchanged on retry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

SUI_CLOCK_OBJECT_ID = "0x6"


@dataclass(frozen=True)
class PureArg:
    """Pure (BCS value) argument; move_type is the declared Move type (string, u64, ...)."""

    value: Any
    move_type: str

    def to_json(self) -> Any:
        # Sui JSON-RPC encodes u64 and wider as decimal strings
        if self.move_type in ("u64", "u128", "u256"):
            return str(int(self.value))
        return self.value


@dataclass(frozen=True)
class ObjectArg:
    """Reference to an on-chain object by id."""

    object_id: str

    def to_json(self) -> Any:
        return self.object_id


@dataclass(frozen=True)
class GasCoinArg:
    """Payment coin; resolved to one of the sender's SUI coins at submission time."""

    min_balance: int = 0

    def to_json(self) -> Any:
        raise TypeError("GasCoinArg must be resolved to a coin object id before encoding")


CallArg = Union[PureArg, ObjectArg, GasCoinArg]


@dataclass(frozen=True)
class PreparedTransaction:
    """Unsigned Move call for one sender. Immutable once built."""

    sender: str
    package_id: str
    module: str
    function: str
    arguments: tuple[CallArg, ...]
    type_arguments: tuple[str, ...] = ()
    gas_budget: int = 50_000_000

    @property
    def target(self) -> str:
        return f"{self.package_id}::{self.module}::{self.function}"

    @property
    def needs_payment_coin(self) -> bool:
        return any(isinstance(arg, GasCoinArg) for arg in self.arguments)

    def encode_arguments(self, payment_coin_id: str | None = None) -> list[Any]:
        """JSON arguments for unsafe_moveCall; GasCoinArg becomes payment_coin_id."""
        encoded: list[Any] = []
        for arg in self.arguments:
            if isinstance(arg, GasCoinArg):
                if payment_coin_id is None:
                    raise ValueError(f"{self.target} needs a payment coin")
                encoded.append(payment_coin_id)
            else:
                encoded.append(arg.to_json())
        return encoded
