"""Invariant checkers for `pool_v1`.

State invariants take a single `PoolState`; transition invariants take the
pre-state, the post-state and the action parameters. Each function returns
True when the invariant holds. `check_all()` and `check_transition()` return
the list of violated invariant IDs (empty = all pass).
"""

from __future__ import annotations

from typing import Callable

from .math import fits_u256, product
from .types import Action, ActionParams, PoolState


def is_asset_id(value: object) -> bool:
    """Asset ids are strings with at least one non-blank character."""
    return isinstance(value, str) and bool(value.strip())


def inv_assets_non_null(s: PoolState) -> bool:
    return is_asset_id(s.asset_a) and is_asset_id(s.asset_b)


def inv_assets_distinct(s: PoolState) -> bool:
    return s.asset_a != s.asset_b


def inv_reserve_a_in_domain(s: PoolState) -> bool:
    return fits_u256(s.reserve_a)


def inv_reserve_b_in_domain(s: PoolState) -> bool:
    return fits_u256(s.reserve_b)


# -- Transition invariants ---------------------------------------------------

_SWAPS = (Action.SWAP_A_FOR_B, Action.SWAP_B_FOR_A)


def tinv_identity_fixed(prev: PoolState, s: PoolState, params: ActionParams) -> bool:
    return (
        prev.asset_a == s.asset_a
        and prev.asset_b == s.asset_b
        and prev.operator == s.operator
    )


def tinv_product_non_decreasing(prev: PoolState, s: PoolState, params: ActionParams) -> bool:
    if params.action not in _SWAPS:
        return True
    return product(s.reserve_a, s.reserve_b) >= product(prev.reserve_a, prev.reserve_b)


def tinv_input_credited(prev: PoolState, s: PoolState, params: ActionParams) -> bool:
    if params.action is Action.SWAP_A_FOR_B:
        return s.reserve_a == prev.reserve_a + params.amount_in and s.reserve_b <= prev.reserve_b
    if params.action is Action.SWAP_B_FOR_A:
        return s.reserve_b == prev.reserve_b + params.amount_in and s.reserve_a <= prev.reserve_a
    return True


def tinv_liquidity_delta_exact(prev: PoolState, s: PoolState, params: ActionParams) -> bool:
    if params.action is Action.ADD_LIQUIDITY:
        return (
            s.reserve_a == prev.reserve_a + params.amount_a
            and s.reserve_b == prev.reserve_b + params.amount_b
        )
    if params.action is Action.REMOVE_LIQUIDITY:
        return (
            s.reserve_a == prev.reserve_a - params.amount_a
            and s.reserve_b == prev.reserve_b - params.amount_b
        )
    return True


# ---------------------------------------------------------------------------
# Registries + check functions
# ---------------------------------------------------------------------------

INVARIANT_REGISTRY: dict[str, Callable[[PoolState], bool]] = {
    "inv_assets_non_null": inv_assets_non_null,
    "inv_assets_distinct": inv_assets_distinct,
    "inv_reserve_a_in_domain": inv_reserve_a_in_domain,
    "inv_reserve_b_in_domain": inv_reserve_b_in_domain,
}

TRANSITION_REGISTRY: dict[str, Callable[[PoolState, PoolState, ActionParams], bool]] = {
    "tinv_identity_fixed": tinv_identity_fixed,
    "tinv_product_non_decreasing": tinv_product_non_decreasing,
    "tinv_input_credited": tinv_input_credited,
    "tinv_liquidity_delta_exact": tinv_liquidity_delta_exact,
}


def check_all(state: PoolState) -> list[str]:
    """Return list of violated state invariant IDs (empty = all pass)."""
    return [
        inv_id
        for inv_id, check_fn in INVARIANT_REGISTRY.items()
        if not check_fn(state)
    ]


def check_transition(prev: PoolState, state: PoolState, params: ActionParams) -> list[str]:
    """Return violated state and transition invariant IDs for one step."""
    violations = check_all(state)
    violations.extend(
        inv_id
        for inv_id, check_fn in TRANSITION_REGISTRY.items()
        if not check_fn(prev, state, params)
    )
    return violations
