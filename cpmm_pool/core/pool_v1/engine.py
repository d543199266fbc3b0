"""Dispatch-table engine for `pool_v1`.

``step(state, params)`` is the single entry point for transitions. It:

1. Validates parameter domains (ints in the u256 range).
2. Dispatches to the correct guard / update / effect functions.
3. Checks all state and transition invariants on the post-state.
4. Returns a ``StepResult`` (accepted or rejected with an ``ErrorKind``).

``step`` never touches assets; the accepted ``Effect`` lists the transfers
the caller has to perform. ``price`` and ``quote_swap`` are read-only.
"""

from __future__ import annotations

from typing import Callable

from .effects import (
    effect_add_liquidity,
    effect_remove_liquidity,
    effect_swap_a_for_b,
    effect_swap_b_for_a,
)
from .errors import InvalidAssetError, PoolOverflowError, error_for
from .guards import (
    guard_add_liquidity,
    guard_remove_liquidity,
    guard_swap_a_for_b,
    guard_swap_b_for_a,
)
from .invariants import check_transition
from .math import fits_u256, spot_price, swap_amount_out
from .types import Action, ActionParams, Effect, ErrorKind, PoolState, StepResult
from .updates import (
    apply_add_liquidity,
    apply_remove_liquidity,
    apply_swap_a_for_b,
    apply_swap_b_for_a,
)

GuardFn = Callable[[PoolState, ActionParams], "ErrorKind | None"]
UpdateFn = Callable[[PoolState, ActionParams], PoolState]
EffectFn = Callable[[PoolState, PoolState, ActionParams], Effect]

_DISPATCH: dict[Action, tuple[GuardFn, UpdateFn, EffectFn]] = {
    Action.ADD_LIQUIDITY: (
        guard_add_liquidity, apply_add_liquidity, effect_add_liquidity,
    ),
    Action.REMOVE_LIQUIDITY: (
        guard_remove_liquidity, apply_remove_liquidity, effect_remove_liquidity,
    ),
    Action.SWAP_A_FOR_B: (
        guard_swap_a_for_b, apply_swap_a_for_b, effect_swap_a_for_b,
    ),
    Action.SWAP_B_FOR_A: (
        guard_swap_b_for_a, apply_swap_b_for_a, effect_swap_b_for_a,
    ),
}

# Per-action amount fields subject to the u256 domain check.
_AMOUNT_FIELDS: dict[Action, tuple[str, ...]] = {
    Action.ADD_LIQUIDITY: ("amount_a", "amount_b"),
    Action.REMOVE_LIQUIDITY: ("amount_a", "amount_b"),
    Action.SWAP_A_FOR_B: ("amount_in",),
    Action.SWAP_B_FOR_A: ("amount_in",),
}


def _require_amount(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _validate_params(params: ActionParams) -> str | None:
    """Check parameter domain bounds. Returns the offending field or None.

    Raises TypeError for non-int amounts; those are caller bugs, not
    rejections.
    """
    if not isinstance(params.caller, str):
        raise TypeError("caller must be a str")
    for field in _AMOUNT_FIELDS.get(params.action, ()):
        if not fits_u256(_require_amount(field, getattr(params, field))):
            return field
    return None


def step(state: PoolState, params: ActionParams) -> StepResult:
    """Execute one action against the given state.

    Returns ``StepResult`` with ``accepted=True`` on success,
    or ``accepted=False`` with a ``rejection`` kind. The input state is
    never modified.
    """
    entry = _DISPATCH.get(params.action)
    if entry is None:
        raise ValueError(f"unknown action: {params.action!r}")

    bad_field = _validate_params(params)
    if bad_field is not None:
        return StepResult(
            accepted=False,
            rejection=ErrorKind.OVERFLOW,
            detail=f"param_domain:{bad_field}",
        )

    guard_fn, update_fn, effect_fn = entry

    rejection = guard_fn(state, params)
    if rejection is not None:
        return StepResult(accepted=False, rejection=rejection, detail=params.action.value)

    new_state = update_fn(state, params)

    violations = check_transition(state, new_state, params)
    if violations:
        return StepResult(
            accepted=False,
            rejection=ErrorKind.INVARIANT,
            detail=",".join(violations),
        )

    effect = effect_fn(state, new_state, params)
    return StepResult(accepted=True, state=new_state, effect=effect)


def step_or_raise(state: PoolState, params: ActionParams) -> StepResult:
    """Like ``step()`` but raises on rejection instead of returning a result.

    Raises:
        PoolOverflowError: Parameter outside the u256 domain, or a reserve would wrap.
        UnauthorizedError: ``auth_ok`` not set for an operator-only action.
        ZeroAmountError: A required amount is zero.
        InsufficientLiquidityError: Reserves cannot serve the request.
        PoolInvariantError: Post-state violates one or more invariants.
    """
    result = step(state, params)
    if result.accepted:
        return result
    raise error_for(result.rejection or ErrorKind.INVARIANT, result.detail)


def price(state: PoolState, asset: str) -> int:
    """Spot price of ``asset`` in units of the other asset, scaled by 1e18.

    Returns 0 while the queried asset's reserve is empty.

    Raises:
        InvalidAssetError: ``asset`` is not one of the pool's assets.
        PoolOverflowError: the scaled price does not fit u256.
    """
    if asset == state.asset_a:
        value = spot_price(state.reserve_a, state.reserve_b)
    elif asset == state.asset_b:
        value = spot_price(state.reserve_b, state.reserve_a)
    else:
        raise InvalidAssetError(f"not a pool asset: {asset!r}")
    if not fits_u256(value):
        raise PoolOverflowError("price exceeds u256")
    return value


def quote_swap(state: PoolState, asset_in: str, amount_in: int) -> int:
    """Output a swap of ``amount_in`` of ``asset_in`` would receive right now.

    Read-only. Raises the same errors the swap itself would (apart from
    transfer failures), plus ``InvalidAssetError`` for a foreign asset.
    """
    if asset_in == state.asset_a:
        action, reserve_in, reserve_out = Action.SWAP_A_FOR_B, state.reserve_a, state.reserve_b
    elif asset_in == state.asset_b:
        action, reserve_in, reserve_out = Action.SWAP_B_FOR_A, state.reserve_b, state.reserve_a
    else:
        raise InvalidAssetError(f"not a pool asset: {asset_in!r}")

    params = ActionParams(action=action, amount_in=amount_in)
    if _validate_params(params) is not None:
        raise PoolOverflowError("param_domain:amount_in")
    guard_fn = _DISPATCH[action][0]
    rejection = guard_fn(state, params)
    if rejection is not None:
        raise error_for(rejection, action.value)
    return swap_amount_out(reserve_in, reserve_out, amount_in)
