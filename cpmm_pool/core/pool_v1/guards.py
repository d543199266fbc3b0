"""Guard functions for `pool_v1`.

One pure function per action. Each evaluates the PRE-state and returns the
`ErrorKind` that rejects the action, or None when the action is allowed.
Checks run in a fixed order so a request that breaks several rules always
reports the same kind.
"""

from __future__ import annotations

from .math import checked_add, swap_amount_out
from .types import ActionParams, ErrorKind, PoolState


def guard_add_liquidity(state: PoolState, params: ActionParams) -> ErrorKind | None:
    if not params.auth_ok:
        return ErrorKind.UNAUTHORIZED
    if params.amount_a == 0 or params.amount_b == 0:
        return ErrorKind.ZERO_AMOUNT
    if checked_add(state.reserve_a, params.amount_a) is None:
        return ErrorKind.OVERFLOW
    if checked_add(state.reserve_b, params.amount_b) is None:
        return ErrorKind.OVERFLOW
    return None


def guard_remove_liquidity(state: PoolState, params: ActionParams) -> ErrorKind | None:
    if not params.auth_ok:
        return ErrorKind.UNAUTHORIZED
    if params.amount_a == 0 or params.amount_b == 0:
        return ErrorKind.ZERO_AMOUNT
    if params.amount_a > state.reserve_a or params.amount_b > state.reserve_b:
        return ErrorKind.INSUFFICIENT_LIQUIDITY
    return None


def _guard_swap(reserve_in: int, reserve_out: int, amount_in: int) -> ErrorKind | None:
    if amount_in == 0:
        return ErrorKind.ZERO_AMOUNT
    if reserve_out == 0:
        return ErrorKind.INSUFFICIENT_LIQUIDITY
    if checked_add(reserve_in, amount_in) is None:
        return ErrorKind.OVERFLOW
    amount_out = swap_amount_out(reserve_in, reserve_out, amount_in)
    if amount_out == 0 or amount_out > reserve_out:
        return ErrorKind.INSUFFICIENT_LIQUIDITY
    return None


def guard_swap_a_for_b(state: PoolState, params: ActionParams) -> ErrorKind | None:
    return _guard_swap(state.reserve_a, state.reserve_b, params.amount_in)


def guard_swap_b_for_a(state: PoolState, params: ActionParams) -> ErrorKind | None:
    return _guard_swap(state.reserve_b, state.reserve_a, params.amount_in)
