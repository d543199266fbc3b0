"""Data types for the `pool_v1` engine.

All types are frozen dataclasses (immutable) or enums.

Units/conventions:
- reserves and amounts are unsigned integers in `[0, 2**256 - 1]`.
- prices are quote-per-base scaled by 1e18.
- principals and asset ids are opaque strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique


@unique
class Action(Enum):
    """One member per pool transition."""
    ADD_LIQUIDITY = "add_liquidity"
    REMOVE_LIQUIDITY = "remove_liquidity"
    SWAP_A_FOR_B = "swap_a_for_b"
    SWAP_B_FOR_A = "swap_b_for_a"


@unique
class Event(Enum):
    """One member per audit fact kind."""
    ADD_LIQUIDITY = "AddLiquidity"
    REMOVE_LIQUIDITY = "RemoveLiquidity"
    SWAP = "Swap"


@unique
class ErrorKind(Enum):
    """Why an operation was rejected."""
    UNAUTHORIZED = "Unauthorized"
    ZERO_AMOUNT = "ZeroAmount"
    INSUFFICIENT_LIQUIDITY = "InsufficientLiquidity"
    INVALID_ASSET = "InvalidAsset"
    OVERFLOW = "Overflow"
    TRANSFER_FAILED = "TransferFailed"
    INVARIANT = "Invariant"


@unique
class TransferKind(Enum):
    PULL = "pull"  # party -> pool custody (transfer_from)
    PUSH = "push"  # pool custody -> party (transfer)


@dataclass(frozen=True)
class Transfer:
    """One asset movement the shell must perform for an accepted step."""

    kind: TransferKind
    asset: str
    party: str
    amount: int


@dataclass(frozen=True)
class PoolState:
    """Complete state of a single two-asset pool."""

    asset_a: str
    asset_b: str
    operator: str
    reserve_a: int = 0
    reserve_b: int = 0


@dataclass(frozen=True)
class ActionParams:
    """Parameters for an action. Unused fields default to 0/False.

    `auth_ok` is decided by the caller's authorization capability before the
    step runs; the core never inspects identities itself.
    """

    action: Action
    caller: str = ""
    amount_a: int = 0      # add_liquidity / remove_liquidity
    amount_b: int = 0      # add_liquidity / remove_liquidity
    amount_in: int = 0     # swap_a_for_b / swap_b_for_a
    auth_ok: bool = False  # add_liquidity / remove_liquidity


@dataclass(frozen=True)
class Effect:
    """Audit fact plus the ordered transfers emitted by an accepted step."""

    event: Event
    caller: str
    amount_a: int = 0
    amount_b: int = 0
    asset_in: str | None = None
    asset_out: str | None = None
    amount_in: int = 0
    amount_out: int = 0
    reserve_a_after: int = 0
    reserve_b_after: int = 0
    transfers: tuple[Transfer, ...] = ()

    def fact(self) -> dict[str, str | int]:
        """Event payload as recorded in the audit log."""
        if self.event is Event.SWAP:
            return {
                "caller": self.caller,
                "asset_in": self.asset_in or "",
                "asset_out": self.asset_out or "",
                "amount_in": self.amount_in,
                "amount_out": self.amount_out,
            }
        return {
            "caller": self.caller,
            "amount_a": self.amount_a,
            "amount_b": self.amount_b,
        }


@dataclass(frozen=True)
class StepResult:
    """Result of a single engine step."""

    accepted: bool
    state: PoolState | None = None
    effect: Effect | None = None
    rejection: ErrorKind | None = None
    detail: str | None = None
