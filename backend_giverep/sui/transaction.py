"""
Transaction stage: an append-only plan of programmable transaction commands.

Only what the coin input engine and its callers need is modelled: pure u64
inputs, owned object inputs, the gas coin, SplitCoins and MergeCoins. The
stage is not signed or sent anywhere; to_dict() gives the plan in the same
shape the Sui SDKs use for TransactionData commands, for callers that
finish building the transaction elsewhere.
"""

from __future__ import annotations

import base64
import json
import struct
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from backend_giverep.sui.models import Coin

U64_MAX = 2**64 - 1


@dataclass(frozen=True)
class Argument:
    """
    Handle to a value usable as a command operand.

    kind is one of GasCoin, Input, Result or NestedResult. index points
    into the input table (Input) or the command list (Result/NestedResult).
    """

    kind: str
    index: int | None = None
    result_index: int | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.kind == "GasCoin":
            return {"GasCoin": True}
        if self.kind == "NestedResult":
            return {"NestedResult": [self.index, self.result_index]}
        return {self.kind: self.index}


GAS_COIN = Argument("GasCoin")


def check_u64(value: int, name: str = "value") -> int:
    """Return value if it is an int within u64 range; raise ValueError otherwise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    if not (0 <= value <= U64_MAX):
        raise ValueError(f"{name} must be between 0 and {U64_MAX}, got {value}")
    return value


def encode_u64(value: int) -> str:
    """BCS u64 (little-endian, 8 bytes), base64 encoded."""
    return base64.b64encode(struct.pack("<Q", check_u64(value))).decode("ascii")


class Transaction:
    """
    Caller-owned stage of pending commands.

    Commands and inputs are only ever appended. Object inputs are keyed by
    object id so referencing the same coin twice yields the same Input.
    """

    def __init__(self, sender: str | None = None) -> None:
        self.sender = sender
        self._inputs: list[dict[str, Any]] = []
        self._object_inputs: dict[str, Argument] = {}
        self._commands: list[dict[str, Any]] = []

    @property
    def gas(self) -> Argument:
        """The transaction's gas coin; always available without declaring it."""
        return GAS_COIN

    @property
    def inputs(self) -> Sequence[dict[str, Any]]:
        return tuple(self._inputs)

    @property
    def commands(self) -> Sequence[dict[str, Any]]:
        return tuple(self._commands)

    def pure_u64(self, value: int) -> Argument:
        encoded = encode_u64(value)
        self._inputs.append({"Pure": {"type": "u64", "value": value, "bytes": encoded}})
        return Argument("Input", len(self._inputs) - 1)

    def object_ref(
        self,
        coin: Coin | None = None,
        *,
        object_id: str | None = None,
        version: str | None = None,
        digest: str | None = None,
    ) -> Argument:
        """Reference an owned object by (id, version, digest), from a Coin or explicit fields."""
        if coin is not None:
            object_id, version, digest = coin.coin_object_id, coin.version, coin.digest
        if not object_id or version is None or not digest:
            raise ValueError("object_ref needs object_id, version and digest")
        existing = self._object_inputs.get(object_id)
        if existing is not None:
            return existing
        self._inputs.append(
            {
                "Object": {
                    "ImmOrOwnedObject": {
                        "objectId": object_id,
                        "version": str(version),
                        "digest": digest,
                    }
                }
            }
        )
        arg = Argument("Input", len(self._inputs) - 1)
        self._object_inputs[object_id] = arg
        return arg

    def _add_command(self, command: dict[str, Any]) -> int:
        self._commands.append(command)
        return len(self._commands) - 1

    def merge_coins(self, destination: Argument, sources: Iterable[Argument]) -> None:
        sources = list(sources)
        if not sources:
            raise ValueError("merge_coins needs at least one source coin")
        if destination in sources:
            raise ValueError("cannot merge a coin into itself")
        self._add_command(
            {
                "MergeCoins": {
                    "destination": destination,
                    "sources": sources,
                }
            }
        )

    def split_coins(self, coin: Argument, amounts: Iterable[int | Argument]) -> list[Argument]:
        """Append SplitCoins; returns one NestedResult per amount, in order."""
        args = [a if isinstance(a, Argument) else self.pure_u64(a) for a in amounts]
        if not args:
            raise ValueError("split_coins needs at least one amount")
        index = self._add_command({"SplitCoins": {"coin": coin, "amounts": args}})
        return [Argument("NestedResult", index, i) for i in range(len(args))]

    def to_dict(self) -> dict[str, Any]:
        def _plain(value: Any) -> Any:
            if isinstance(value, Argument):
                return value.to_dict()
            if isinstance(value, dict):
                return {k: _plain(v) for k, v in value.items()}
            if isinstance(value, list):
                return [_plain(v) for v in value]
            return value

        return {
            "sender": self.sender,
            "inputs": [_plain(i) for i in self._inputs],
            "commands": [_plain(c) for c in self._commands],
        }

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)
