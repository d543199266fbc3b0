"""
State management for the pool's surrounding ledger
"""

from .balances import AssetId, Amount, BalanceTable, Principal

__all__ = [
    "AssetId",
    "Amount",
    "BalanceTable",
    "Principal",
]
