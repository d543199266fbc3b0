# [TESTER] v1

from __future__ import annotations

import pytest

from cpmm_pool.core.pool_v1 import U256_MAX
from cpmm_pool.state.balances import BalanceTable


def test_zero_balances_are_dropped() -> None:
    t = BalanceTable()
    t.set("alice", "A", 5)
    t.set("alice", "A", 0)
    assert t.get("alice", "A") == 0
    assert repr(t) == "BalanceTable(0 entries)"


def test_move_is_all_or_nothing() -> None:
    t = BalanceTable()
    t.set("alice", "A", 5)
    with pytest.raises(ValueError):
        t.move("A", "alice", "bob", 6)
    assert t.get("alice", "A") == 5
    assert t.get("bob", "A") == 0


def test_move_rejects_recipient_overflow() -> None:
    t = BalanceTable()
    t.set("alice", "A", 1)
    t.set("bob", "A", U256_MAX)
    with pytest.raises(ValueError):
        t.move("A", "alice", "bob", 1)
    assert t.get("alice", "A") == 1


def test_set_rejects_out_of_range() -> None:
    t = BalanceTable()
    with pytest.raises(ValueError):
        t.set("alice", "A", -1)
    with pytest.raises(ValueError):
        t.set("alice", "A", U256_MAX + 1)


def test_subtract_below_zero_rejected() -> None:
    t = BalanceTable()
    t.add("alice", "A", 2)
    with pytest.raises(ValueError):
        t.subtract("alice", "A", 3)
    assert t.get("alice", "A") == 2
