"""Exception types for the pool engine.

Used by ``step_or_raise()`` in ``engine.py`` and by the shell in
``cpmm_pool.integration.pool_engine`` for callers that prefer exceptions
over ``StepResult`` inspection.
"""

from __future__ import annotations

from .types import ErrorKind


class PoolError(Exception):
    """Base class; every rejected pool operation raises a subclass."""

    kind: ErrorKind = ErrorKind.INVARIANT

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        msg = self.kind.value if not detail else f"{self.kind.value}: {detail}"
        super().__init__(msg)


class UnauthorizedError(PoolError):
    """Caller is not the pool operator."""

    kind = ErrorKind.UNAUTHORIZED


class ZeroAmountError(PoolError):
    """A required amount is zero."""

    kind = ErrorKind.ZERO_AMOUNT


class InsufficientLiquidityError(PoolError):
    """Reserves cannot cover the request, or a swap output rounds to zero."""

    kind = ErrorKind.INSUFFICIENT_LIQUIDITY


class InvalidAssetError(PoolError):
    """Asset identifier is null, duplicated, or not one of the pool's assets."""

    kind = ErrorKind.INVALID_ASSET


class PoolOverflowError(PoolError):
    """A value would leave the unsigned 256-bit domain."""

    kind = ErrorKind.OVERFLOW


class TransferFailedError(PoolError):
    """The asset ledger refused or failed one of the operation's transfers."""

    kind = ErrorKind.TRANSFER_FAILED


class PoolInvariantError(PoolError):
    """Raised when a post-state violates one or more invariants."""

    kind = ErrorKind.INVARIANT

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")


_BY_KIND: dict[ErrorKind, type[PoolError]] = {
    ErrorKind.UNAUTHORIZED: UnauthorizedError,
    ErrorKind.ZERO_AMOUNT: ZeroAmountError,
    ErrorKind.INSUFFICIENT_LIQUIDITY: InsufficientLiquidityError,
    ErrorKind.INVALID_ASSET: InvalidAssetError,
    ErrorKind.OVERFLOW: PoolOverflowError,
    ErrorKind.TRANSFER_FAILED: TransferFailedError,
}


def error_for(kind: ErrorKind, detail: str | None = None) -> PoolError:
    """Build the exception matching a rejection kind."""
    if kind is ErrorKind.INVARIANT:
        return PoolInvariantError((detail or "").split(",") if detail else [])
    return _BY_KIND[kind](detail)
