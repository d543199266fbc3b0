"""Tests for cpmm_pool/core/pool_v1/invariants.py."""

from dataclasses import replace

from cpmm_pool.core.pool_v1 import U256_MAX, Action, ActionParams, PoolState
from cpmm_pool.core.pool_v1.invariants import (
    INVARIANT_REGISTRY,
    TRANSITION_REGISTRY,
    check_all,
    check_transition,
)

BASE = PoolState(asset_a="a", asset_b="b", operator="op", reserve_a=100, reserve_b=100)


def test_valid_state_passes():
    assert check_all(BASE) == []


def test_registry_ids_match_function_names():
    for inv_id, fn in {**INVARIANT_REGISTRY, **TRANSITION_REGISTRY}.items():
        assert fn.__name__ == inv_id


def test_equal_assets_flagged():
    assert check_all(replace(BASE, asset_b="a")) == ["inv_assets_distinct"]


def test_null_asset_flagged():
    assert "inv_assets_non_null" in check_all(replace(BASE, asset_a=""))


def test_reserve_out_of_domain_flagged():
    assert check_all(replace(BASE, reserve_a=-1)) == ["inv_reserve_a_in_domain"]
    assert check_all(replace(BASE, reserve_b=U256_MAX + 1)) == ["inv_reserve_b_in_domain"]


def test_product_decrease_flagged_for_swaps():
    params = ActionParams(action=Action.SWAP_A_FOR_B, amount_in=10)
    bad = replace(BASE, reserve_a=110, reserve_b=80)  # 8800 < 10000
    assert "tinv_product_non_decreasing" in check_transition(BASE, bad, params)


def test_product_decrease_allowed_for_remove():
    params = ActionParams(action=Action.REMOVE_LIQUIDITY, amount_a=50, amount_b=50)
    after = replace(BASE, reserve_a=50, reserve_b=50)
    assert check_transition(BASE, after, params) == []


def test_swap_must_credit_exact_input():
    params = ActionParams(action=Action.SWAP_B_FOR_A, amount_in=10)
    after = replace(BASE, reserve_a=91, reserve_b=111)
    assert check_transition(BASE, after, params) == ["tinv_input_credited"]


def test_liquidity_delta_must_be_exact():
    params = ActionParams(action=Action.ADD_LIQUIDITY, amount_a=5, amount_b=5)
    after = replace(BASE, reserve_a=105, reserve_b=106)
    assert check_transition(BASE, after, params) == ["tinv_liquidity_delta_exact"]


def test_identity_is_fixed():
    params = ActionParams(action=Action.ADD_LIQUIDITY, amount_a=0, amount_b=0)
    after = replace(BASE, operator="mallory")
    assert check_transition(BASE, after, params) == ["tinv_identity_fixed"]
