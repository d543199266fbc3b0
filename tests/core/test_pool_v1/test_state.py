"""Tests for cpmm_pool/core/pool_v1/state.py."""

import pytest

from cpmm_pool.core.pool_v1 import (
    U256_MAX,
    InvalidAssetError,
    PoolInvariantError,
    PoolState,
    create_pool_state,
    state_from_dict,
    state_to_dict,
)
from cpmm_pool.core.pool_v1.state import STATE_VAR_NAMES


def test_create_starts_empty():
    s = create_pool_state("0xaa", "0xbb", "op")
    assert s == PoolState(asset_a="0xaa", asset_b="0xbb", operator="op", reserve_a=0, reserve_b=0)


def test_create_rejects_equal_assets():
    with pytest.raises(InvalidAssetError):
        create_pool_state("0xaa", "0xaa", "op")


@pytest.mark.parametrize("a,b", [(None, "0xbb"), ("0xaa", None), ("", "0xbb"), ("0xaa", "  ")])
def test_create_rejects_null_assets(a, b):
    with pytest.raises(InvalidAssetError):
        create_pool_state(a, b, "op")


def test_create_rejects_empty_operator():
    with pytest.raises(ValueError):
        create_pool_state("0xaa", "0xbb", "")


def test_state_is_frozen():
    s = create_pool_state("0xaa", "0xbb", "op")
    with pytest.raises(AttributeError):
        s.reserve_a = 5  # type: ignore[misc]


def test_dict_keys():
    s = create_pool_state("0xaa", "0xbb", "op")
    assert tuple(state_to_dict(s)) == STATE_VAR_NAMES


def test_round_trip_large_reserves():
    s = PoolState(asset_a="x", asset_b="y", operator="op", reserve_a=U256_MAX, reserve_b=1)
    assert state_from_dict(state_to_dict(s)) == s


def test_from_dict_missing_field():
    d = state_to_dict(create_pool_state("0xaa", "0xbb", "op"))
    del d["reserve_b"]
    with pytest.raises(KeyError):
        state_from_dict(d)


def test_from_dict_rejects_bool_reserve():
    d = state_to_dict(create_pool_state("0xaa", "0xbb", "op"))
    d["reserve_a"] = True
    with pytest.raises(TypeError):
        state_from_dict(d)


def test_from_dict_checks_invariants():
    d = state_to_dict(create_pool_state("0xaa", "0xbb", "op"))
    d["reserve_a"] = -5
    with pytest.raises(PoolInvariantError) as exc_info:
        state_from_dict(d)
    assert exc_info.value.violations == ["inv_reserve_a_in_domain"]


def test_from_dict_rejects_blank_asset():
    d = state_to_dict(create_pool_state("0xaa", "0xbb", "op"))
    d["asset_a"] = "  "
    with pytest.raises(PoolInvariantError) as exc_info:
        state_from_dict(d)
    assert exc_info.value.violations == ["inv_assets_non_null"]
