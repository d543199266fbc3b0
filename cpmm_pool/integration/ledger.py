"""
Asset ledger collaborator.

The pool never moves funds itself; it asks one ledger per asset to do so.
`AssetLedger` is the token-style interface the engine consumes:

- `transfer_from(owner, recipient, amount)` pulls funds on the owner's behalf,
- `transfer(recipient, amount)` moves funds out of the pool's custody account,
- `custodian` names that custody account; it must be the pool's address.

The transfer calls report success as a bool. A ledger that raises is treated exactly like
one that returns False.

`InMemoryAssetLedger` is the reference implementation used by the tests and
the offline demo; it is backed by a shared `BalanceTable`.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from ..state.balances import Amount, AssetId, BalanceTable, Principal

logger = logging.getLogger(__name__)


@runtime_checkable
class AssetLedger(Protocol):
    custodian: Principal

    def transfer_from(self, owner: Principal, recipient: Principal, amount: Amount) -> bool:
        ...

    def transfer(self, recipient: Principal, amount: Amount) -> bool:
        ...


class InMemoryAssetLedger:
    """Ledger for one asset whose `transfer` debits the custody principal."""

    def __init__(self, asset: AssetId, custodian: Principal, balances: BalanceTable | None = None):
        if not asset:
            raise ValueError("asset must be non-empty")
        if not custodian:
            raise ValueError("custodian must be non-empty")
        self.asset = asset
        self.custodian = custodian
        self.balances = balances if balances is not None else BalanceTable()

    def balance_of(self, principal: Principal) -> Amount:
        return self.balances.get(principal, self.asset)

    def mint(self, principal: Principal, amount: Amount) -> None:
        """Credit `amount` to `principal` out of thin air (test/demo funding)."""
        self.balances.add(principal, self.asset, amount)

    def _move(self, sender: Principal, recipient: Principal, amount: Amount) -> bool:
        try:
            self.balances.move(self.asset, sender, recipient, amount)
        except ValueError as exc:
            logger.debug("ledger %s refused %s -> %s (%d): %s", self.asset, sender, recipient, amount, exc)
            return False
        return True

    def transfer_from(self, owner: Principal, recipient: Principal, amount: Amount) -> bool:
        return self._move(owner, recipient, amount)

    def transfer(self, recipient: Principal, amount: Amount) -> bool:
        return self._move(self.custodian, recipient, amount)

    def __repr__(self) -> str:
        return f"InMemoryAssetLedger(asset={self.asset!r}, custodian={self.custodian!r})"
