"""State construction and serialization for `pool_v1`.

`create_pool_state()` returns the state of a freshly created pool: both
reserves at zero, asset ids and operator fixed for the pool's lifetime.

Round-trip property (tested): `state_from_dict(state_to_dict(s)) == s` for all valid states.
"""

from __future__ import annotations

from typing import Any, Mapping

from .errors import InvalidAssetError, PoolInvariantError
from .invariants import check_all, is_asset_id
from .types import PoolState

# Auto-derived from PoolState field definitions (single source of truth).
STATE_VAR_NAMES: tuple[str, ...] = tuple(PoolState.__dataclass_fields__)
_STR_VARS = ("asset_a", "asset_b", "operator")
_INT_VARS = ("reserve_a", "reserve_b")


def _require_asset(name: str, value: object) -> str:
    if not is_asset_id(value):
        raise InvalidAssetError(f"{name} must be a non-empty string")
    return value


def create_pool_state(asset_a: str, asset_b: str, operator: str) -> PoolState:
    """Return the initial state for a pool over ``(asset_a, asset_b)``.

    Raises:
        InvalidAssetError: an asset id is null/empty or both ids are equal.
        ValueError: ``operator`` is not a non-empty string.
    """
    a = _require_asset("asset_a", asset_a)
    b = _require_asset("asset_b", asset_b)
    if a == b:
        raise InvalidAssetError(f"asset_a and asset_b must differ: {a!r}")
    if not isinstance(operator, str) or not operator:
        raise ValueError("operator must be a non-empty string")
    return PoolState(asset_a=a, asset_b=b, operator=operator)


def state_to_dict(state: PoolState) -> dict[str, str | int]:
    """Serialize a PoolState to a plain dict."""
    return {name: getattr(state, name) for name in STATE_VAR_NAMES}


def state_from_dict(d: Mapping[str, Any]) -> PoolState:
    """Deserialize a dict to a PoolState. Raises KeyError on missing fields.

    The result is checked against the state invariants, so a snapshot with
    equal assets or out-of-range reserves is refused.
    """
    kwargs: dict[str, Any] = {}
    for name in _STR_VARS:
        val = d[name]
        if not isinstance(val, str):
            raise TypeError(f"state var {name!r} must be str, got {type(val).__name__}")
        kwargs[name] = val
    for name in _INT_VARS:
        val = d[name]
        if isinstance(val, bool) or not isinstance(val, int):
            raise TypeError(f"state var {name!r} must be int, got {type(val).__name__}")
        kwargs[name] = int(val)  # normalize int subclasses
    state = PoolState(**kwargs)
    violations = check_all(state)
    if violations:
        raise PoolInvariantError(violations)
    return state
