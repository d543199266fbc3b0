"""State transition functions for `pool_v1`.

One pure function per action. Each returns a new `PoolState` with the
action's updates applied.

Semantics:
- updates evaluate against the PRE-state and assume the guard passed,
- both reserves change together (simultaneous update),
- we implement updates via `dataclasses.replace()` on frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import replace

from .math import swap_amount_out
from .types import ActionParams, PoolState


def apply_add_liquidity(state: PoolState, params: ActionParams) -> PoolState:
    return replace(
        state,
        reserve_a=state.reserve_a + params.amount_a,
        reserve_b=state.reserve_b + params.amount_b,
    )


def apply_remove_liquidity(state: PoolState, params: ActionParams) -> PoolState:
    return replace(
        state,
        reserve_a=state.reserve_a - params.amount_a,
        reserve_b=state.reserve_b - params.amount_b,
    )


def apply_swap_a_for_b(state: PoolState, params: ActionParams) -> PoolState:
    amount_out = swap_amount_out(state.reserve_a, state.reserve_b, params.amount_in)
    return replace(
        state,
        reserve_a=state.reserve_a + params.amount_in,
        reserve_b=state.reserve_b - amount_out,
    )


def apply_swap_b_for_a(state: PoolState, params: ActionParams) -> PoolState:
    amount_out = swap_amount_out(state.reserve_b, state.reserve_a, params.amount_in)
    return replace(
        state,
        reserve_a=state.reserve_a - amount_out,
        reserve_b=state.reserve_b + params.amount_in,
    )
