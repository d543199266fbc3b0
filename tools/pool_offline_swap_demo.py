#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cpmm_pool.core.pool_v1 import PRICE_SCALE, U256_MAX, PoolError
from cpmm_pool.integration import InMemoryAssetLedger, PoolEngine, PoolEngineConfig, load_pool_config
from cpmm_pool.state.balances import BalanceTable


def _amount(text: str) -> int:
    value = int(text)
    if not 0 <= value <= U256_MAX:
        raise argparse.ArgumentTypeError(f"amount must be in [0, 2**256 - 1]: {text}")
    return value


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Offline constant-product pool demo (in-memory ledgers).")
    ap.add_argument("--config", type=Path, help="YAML pool config (asset_a, asset_b, operator[, pool_address])")
    ap.add_argument("--liquidity-a", type=_amount, default=1000)
    ap.add_argument("--liquidity-b", type=_amount, default=1000)
    ap.add_argument("--swap-in", type=_amount, default=111, help="amount of asset A to swap for B")
    ap.add_argument("--trader", default="trader")
    ap.add_argument("--json", action="store_true", help="print the final snapshot and event log as JSON")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None:
        config = load_pool_config(args.config)
    else:
        config = PoolEngineConfig(asset_a="0x" + "11" * 20, asset_b="0x" + "22" * 20, operator="operator")

    balances = BalanceTable()
    ledger_a = InMemoryAssetLedger(config.asset_a, config.pool_address, balances)
    ledger_b = InMemoryAssetLedger(config.asset_b, config.pool_address, balances)
    ledger_a.mint(config.operator, args.liquidity_a)
    ledger_b.mint(config.operator, args.liquidity_b)
    ledger_a.mint(args.trader, args.swap_in)

    engine = PoolEngine(config, {config.asset_a: ledger_a, config.asset_b: ledger_b})

    try:
        engine.add_liquidity(config.operator, args.liquidity_a, args.liquidity_b)
        print(f"[offline-demo] reserves after add: reserve_a={engine.state.reserve_a} reserve_b={engine.state.reserve_b}")
        quoted = engine.quote(config.asset_a, args.swap_in)
        out = engine.swap_a_for_b(args.trader, args.swap_in)
    except PoolError as exc:
        print(f"[offline-demo] FAIL: {exc}")
        return 1

    print(f"[offline-demo] swap {args.swap_in} A -> {out} B (quoted {quoted})")
    print(f"[offline-demo] reserves after swap: reserve_a={engine.state.reserve_a} reserve_b={engine.state.reserve_b}")
    price_a = engine.price(config.asset_a)
    print(f"[offline-demo] price(A) = {price_a} ({price_a / PRICE_SCALE:.6f} B per A)")
    print(
        f"[offline-demo] trader balances: a={ledger_a.balance_of(args.trader)} "
        f"b={ledger_b.balance_of(args.trader)}"
    )
    if args.json:
        print(json.dumps({"snapshot": engine.snapshot(), "events": [r.to_dict() for r in engine.events]}, indent=2))
    print("[offline-demo] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
