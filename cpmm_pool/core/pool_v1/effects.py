"""Effect functions for `pool_v1`.

One pure function per action. Each builds the ``Effect`` from the PRE-state
and the POST-state: the audit fact, the reserves after the step, and the
ordered transfers the shell has to carry out. Swap outputs are read off the
reserve delta so the effect can never disagree with the committed state.
"""

from __future__ import annotations

from .types import ActionParams, Effect, Event, PoolState, Transfer, TransferKind


def effect_add_liquidity(prev: PoolState, state: PoolState, params: ActionParams) -> Effect:
    return Effect(
        event=Event.ADD_LIQUIDITY,
        caller=params.caller,
        amount_a=params.amount_a,
        amount_b=params.amount_b,
        reserve_a_after=state.reserve_a,
        reserve_b_after=state.reserve_b,
        transfers=(
            Transfer(TransferKind.PULL, state.asset_a, params.caller, params.amount_a),
            Transfer(TransferKind.PULL, state.asset_b, params.caller, params.amount_b),
        ),
    )


def effect_remove_liquidity(prev: PoolState, state: PoolState, params: ActionParams) -> Effect:
    return Effect(
        event=Event.REMOVE_LIQUIDITY,
        caller=params.caller,
        amount_a=params.amount_a,
        amount_b=params.amount_b,
        reserve_a_after=state.reserve_a,
        reserve_b_after=state.reserve_b,
        transfers=(
            Transfer(TransferKind.PUSH, state.asset_a, params.caller, params.amount_a),
            Transfer(TransferKind.PUSH, state.asset_b, params.caller, params.amount_b),
        ),
    )


def _swap_effect(
    state: PoolState,
    params: ActionParams,
    *,
    asset_in: str,
    asset_out: str,
    amount_out: int,
) -> Effect:
    # Pull the input first, then push the output.
    return Effect(
        event=Event.SWAP,
        caller=params.caller,
        asset_in=asset_in,
        asset_out=asset_out,
        amount_in=params.amount_in,
        amount_out=amount_out,
        reserve_a_after=state.reserve_a,
        reserve_b_after=state.reserve_b,
        transfers=(
            Transfer(TransferKind.PULL, asset_in, params.caller, params.amount_in),
            Transfer(TransferKind.PUSH, asset_out, params.caller, amount_out),
        ),
    )


def effect_swap_a_for_b(prev: PoolState, state: PoolState, params: ActionParams) -> Effect:
    return _swap_effect(
        state, params,
        asset_in=state.asset_a,
        asset_out=state.asset_b,
        amount_out=prev.reserve_b - state.reserve_b,
    )


def effect_swap_b_for_a(prev: PoolState, state: PoolState, params: ActionParams) -> Effect:
    return _swap_effect(
        state, params,
        asset_in=state.asset_b,
        asset_out=state.asset_a,
        amount_out=prev.reserve_a - state.reserve_a,
    )
