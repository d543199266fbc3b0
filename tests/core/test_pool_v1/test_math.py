"""Tests for cpmm_pool/core/pool_v1/math.py — pure arithmetic helpers."""

import pytest

from cpmm_pool.core.pool_v1.math import (
    PRICE_SCALE,
    U256_MAX,
    checked_add,
    fits_u256,
    product,
    spot_price,
    swap_amount_out,
)


class TestDomain:
    def test_bounds(self):
        assert fits_u256(0)
        assert fits_u256(U256_MAX)
        assert not fits_u256(-1)
        assert not fits_u256(U256_MAX + 1)

    def test_checked_add(self):
        assert checked_add(1, 2) == 3
        assert checked_add(U256_MAX, 0) == U256_MAX
        assert checked_add(U256_MAX, 1) is None


class TestSwapAmountOut:
    def test_reference(self):
        assert swap_amount_out(1000, 1000, 111) == 99

    def test_multiply_before_divide(self):
        # Dividing first would give 0 * 999 == 0.
        assert swap_amount_out(1000, 999, 500) == (999 * 500) // 1500

    def test_floor(self):
        assert swap_amount_out(2, 3, 1) == 1  # 3 / 3

    def test_product_never_decreases(self):
        for r_in, r_out, amt in [(1000, 1000, 111), (7, 13, 5), (10**30, 3, 10**29)]:
            out = swap_amount_out(r_in, r_out, amt)
            assert product(r_in + amt, r_out - out) >= product(r_in, r_out)

    def test_zero_denominator(self):
        with pytest.raises(ZeroDivisionError):
            swap_amount_out(0, 10, 0)


class TestSpotPrice:
    def test_scaled(self):
        assert spot_price(4, 1) == PRICE_SCALE // 4

    def test_empty_base(self):
        assert spot_price(0, 123) == 0

    def test_large(self):
        assert spot_price(U256_MAX, U256_MAX) == PRICE_SCALE
