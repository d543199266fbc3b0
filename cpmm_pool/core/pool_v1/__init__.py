"""`pool_v1`: pure-Python engine for a two-asset constant-product pool.

- deterministic, integer-only transitions (u256 amounts, 1e18 price scale),
- immutable state (frozen dataclasses),
- fail-closed guards and invariant checks,
- no I/O: accepted steps describe the transfers the caller must perform.

Public API:
- `create_pool_state(asset_a, asset_b, operator) -> PoolState`
- `step(state, params) -> StepResult`
- `step_or_raise(state, params) -> StepResult` (raises on rejection)
- `price(state, asset) -> int`
- `quote_swap(state, asset_in, amount_in) -> int`
"""

from .engine import price, quote_swap, step, step_or_raise
from .errors import (
    InsufficientLiquidityError,
    InvalidAssetError,
    PoolError,
    PoolInvariantError,
    PoolOverflowError,
    TransferFailedError,
    UnauthorizedError,
    ZeroAmountError,
    error_for,
)
from .math import PRICE_SCALE, U256_MAX
from .state import create_pool_state, state_from_dict, state_to_dict
from .types import (
    Action,
    ActionParams,
    Effect,
    ErrorKind,
    Event,
    PoolState,
    StepResult,
    Transfer,
    TransferKind,
)

__all__ = [
    "step",
    "step_or_raise",
    "price",
    "quote_swap",
    "create_pool_state",
    "state_from_dict",
    "state_to_dict",
    "PRICE_SCALE",
    "U256_MAX",
    "Action",
    "ActionParams",
    "Effect",
    "ErrorKind",
    "Event",
    "PoolState",
    "StepResult",
    "Transfer",
    "TransferKind",
    "PoolError",
    "UnauthorizedError",
    "ZeroAmountError",
    "InsufficientLiquidityError",
    "InvalidAssetError",
    "PoolOverflowError",
    "TransferFailedError",
    "PoolInvariantError",
    "error_for",
]
