"""Pure arithmetic for the pool engine.

Every function is stateless and operates on plain Python ints.

Amounts live in the unsigned 256-bit domain. Python ints are unbounded, so
products of two in-domain values are exact (they fit the 512-bit double width
an on-chain implementation would need); only results that are stored or
returned are range-checked. Division is `//` (floor).
"""

from __future__ import annotations

U256_MAX: int = (1 << 256) - 1
U512_MAX: int = (1 << 512) - 1
PRICE_SCALE: int = 10**18


def fits_u256(x: int) -> bool:
    return 0 <= x <= U256_MAX


def checked_add(a: int, b: int) -> int | None:
    """``a + b`` or None when the sum leaves the u256 domain."""
    total = a + b
    return total if fits_u256(total) else None


def product(reserve_a: int, reserve_b: int) -> int:
    """Constant-product value ``k = reserve_a * reserve_b`` (double width)."""
    return reserve_a * reserve_b


def swap_amount_out(reserve_in: int, reserve_out: int, amount_in: int) -> int:
    """Exact-in constant-product output, no fee.

    ``amount_out = floor(reserve_out * amount_in / (reserve_in + amount_in))``

    Uses the pre-swap ``reserve_in`` in the denominator and multiplies before
    dividing. Callers must have checked that ``reserve_in + amount_in`` fits
    u256 and is non-zero.
    """
    numerator = reserve_out * amount_in
    if numerator > U512_MAX:
        raise OverflowError("swap numerator exceeds double width")
    denominator = reserve_in + amount_in
    if denominator <= 0:
        raise ZeroDivisionError("swap denominator must be positive")
    return numerator // denominator


def spot_price(reserve_base: int, reserve_quote: int) -> int:
    """Price of one unit of the base asset in quote units, scaled by 1e18.

    Returns 0 for an empty base reserve.
    """
    if reserve_base == 0:
        return 0
    return (reserve_quote * PRICE_SCALE) // reserve_base
