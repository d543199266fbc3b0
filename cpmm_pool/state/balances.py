"""
Multi-asset balance tracking.

Implements BalanceTable[Principal, AssetId] -> Amount
"""

from typing import Dict, Tuple

from ..core.pool_v1.math import U256_MAX


# Type aliases
Principal = str  # opaque caller identity (account address, key, ...)
AssetId = str  # opaque asset identifier
Amount = int  # Non-negative integer in the u256 domain


class BalanceTable:
    """Balance table mapping (principal, asset) -> amount; zero balances are not stored."""

    def __init__(self):
        """Initialize empty balance table."""
        self._balances: Dict[Tuple[Principal, AssetId], Amount] = {}

    def get(self, principal: Principal, asset: AssetId) -> Amount:
        """Get balance for (principal, asset). Returns 0 if not found."""
        return self._balances.get((principal, asset), 0)

    def set(self, principal: Principal, asset: AssetId, amount: Amount) -> None:
        """
        Set balance for (principal, asset).

        Raises:
            ValueError: If amount is negative or above the u256 range
        """
        if amount < 0:
            raise ValueError(f"Balance cannot be negative: {amount}")
        if amount > U256_MAX:
            raise ValueError(f"Balance exceeds u256: {amount}")
        if amount == 0:
            # Remove zero balances to keep table sparse
            self._balances.pop((principal, asset), None)
        else:
            self._balances[(principal, asset)] = amount

    def add(self, principal: Principal, asset: AssetId, delta: Amount) -> None:
        """
        Add delta to balance. Equivalent to set(principal, asset, get(...) + delta).

        Raises:
            ValueError: If resulting balance would be negative or overflow
        """
        current = self.get(principal, asset)
        new_balance = current + delta
        if new_balance < 0:
            raise ValueError(
                f"Insufficient balance: {current} + {delta} = {new_balance} < 0"
            )
        self.set(principal, asset, new_balance)

    def subtract(self, principal: Principal, asset: AssetId, delta: Amount) -> None:
        """
        Subtract delta from balance. Equivalent to add(principal, asset, -delta).

        Raises:
            ValueError: If delta is negative or insufficient balance
        """
        if delta < 0:
            raise ValueError(f"Delta must be non-negative: {delta}")
        self.add(principal, asset, -delta)

    def move(self, asset: AssetId, sender: Principal, recipient: Principal, amount: Amount) -> None:
        """
        Move `amount` of `asset` from sender to recipient, all or nothing.

        Raises:
            ValueError: If amount is negative, the sender is short, or the
                recipient balance would overflow
        """
        if amount < 0:
            raise ValueError(f"Amount must be non-negative: {amount}")
        if self.get(sender, asset) < amount:
            raise ValueError(f"Insufficient balance: {sender} holds {self.get(sender, asset)} < {amount}")
        if sender != recipient and self.get(recipient, asset) + amount > U256_MAX:
            raise ValueError(f"Balance exceeds u256 for {recipient}")
        self.subtract(sender, asset, amount)
        self.add(recipient, asset, amount)

    def __repr__(self) -> str:
        return f"BalanceTable({len(self._balances)} entries)"
