"""
Operator authorization capability.

The engine only asks one question of identity: may this principal manage
liquidity? Anything answering `is_operator(principal) -> bool` can be
injected, which keeps tests free to use mock identities.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..state.balances import Principal


@runtime_checkable
class Authorizer(Protocol):
    def is_operator(self, principal: Principal) -> bool:
        ...


class OperatorAuthorizer:
    """Authorizes exactly one principal, fixed at construction."""

    def __init__(self, operator: Principal):
        if not isinstance(operator, str) or not operator:
            raise ValueError("operator must be a non-empty string")
        self.operator = operator

    def is_operator(self, principal: Principal) -> bool:
        return principal == self.operator

    def __repr__(self) -> str:
        return f"OperatorAuthorizer({self.operator!r})"
