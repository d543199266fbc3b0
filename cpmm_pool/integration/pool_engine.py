"""
Pool execution adapter.

This is an imperative-shell wrapper around the functional core in
`cpmm_pool.core.pool_v1`:
- Resolves the caller's authorization through the injected `Authorizer`.
- Runs the pure `step()` to validate and compute the next state.
- Commits the new state, then performs the step's transfers in order.
- On any transfer failure restores the previous state and reverses the
  transfer legs that already went through, so the failed call leaves no
  observable reserve change.
- Appends the committed fact to the event log.

Operations run one at a time; the host is expected to serialize callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from ..core.pool_v1 import (
    Action,
    ActionParams,
    Effect,
    ErrorKind,
    PoolError,
    PoolState,
    Transfer,
    TransferKind,
    create_pool_state,
    error_for,
    price,
    quote_swap,
    state_to_dict,
    step,
)
from ..state.canonical import canonical_json_bytes, domain_sep_bytes, sha256_hex
from .authorization import Authorizer, OperatorAuthorizer
from .config import PoolEngineConfig
from .events import EventLog, PoolEvent
from .ledger import AssetLedger

logger = logging.getLogger(__name__)

SNAPSHOT_DOMAIN = "CpmmPoolSnapshot"


@dataclass(frozen=True)
class PoolTxResult:
    ok: bool
    state: Optional[PoolState] = None
    effect: Optional[Effect] = None
    event: Optional[PoolEvent] = None
    error: Optional[ErrorKind] = None
    detail: Optional[str] = None
    cause: Optional[BaseException] = None


class _TransferFailed(Exception):
    def __init__(self, transfer: Transfer, cause: Optional[BaseException] = None):
        self.transfer = transfer
        self.cause = cause
        reason = "ledger returned False" if cause is None else f"ledger raised {type(cause).__name__}: {cause}"
        super().__init__(
            f"{transfer.kind.value} {transfer.amount} {transfer.asset} ({transfer.party}): {reason}"
        )


class PoolEngine:
    """Single pool bound to its ledgers, authorizer and event log."""

    def __init__(
        self,
        config: PoolEngineConfig,
        ledgers: Mapping[str, AssetLedger],
        *,
        authorizer: Optional[Authorizer] = None,
        event_log: Optional[EventLog] = None,
        state: Optional[PoolState] = None,
    ):
        for asset in (config.asset_a, config.asset_b):
            if asset not in ledgers:
                raise ValueError(f"no ledger configured for asset {asset!r}")
            custodian = getattr(ledgers[asset], "custodian", None)
            if custodian != config.pool_address:
                raise ValueError(
                    f"ledger for {asset!r} holds custody as {custodian!r}, pool address is {config.pool_address!r}"
                )
        if state is None:
            state = create_pool_state(config.asset_a, config.asset_b, config.operator)
        elif (state.asset_a, state.asset_b, state.operator) != (config.asset_a, config.asset_b, config.operator):
            raise ValueError("state does not belong to the configured pool")

        self.config = config
        self._ledgers: Dict[str, AssetLedger] = {a: ledgers[a] for a in (config.asset_a, config.asset_b)}
        self.authorizer: Authorizer = authorizer if authorizer is not None else OperatorAuthorizer(config.operator)
        self.events = event_log if event_log is not None else EventLog()
        self._state = state

    # -- Read side -------------------------------------------------------

    @property
    def state(self) -> PoolState:
        return self._state

    @property
    def reserves(self) -> tuple:
        return self._state.reserve_a, self._state.reserve_b

    def price(self, asset: str) -> int:
        return price(self._state, asset)

    def quote(self, asset_in: str, amount_in: int) -> int:
        return quote_swap(self._state, asset_in, amount_in)

    def snapshot(self) -> Dict[str, object]:
        """Serialized state plus a digest binding it to the pool's custody account."""
        body = {"pool_address": self.config.pool_address, "state": state_to_dict(self._state)}
        digest = sha256_hex(domain_sep_bytes(SNAPSHOT_DOMAIN) + canonical_json_bytes(body))
        return {**body, "digest": digest}

    # -- Write side ------------------------------------------------------

    def execute(
        self,
        action: Action,
        caller: str,
        *,
        amount_a: int = 0,
        amount_b: int = 0,
        amount_in: int = 0,
    ) -> PoolTxResult:
        """Run one operation; never raises for rule violations or transfer failures."""
        params = ActionParams(
            action=action,
            caller=caller,
            amount_a=amount_a,
            amount_b=amount_b,
            amount_in=amount_in,
            auth_ok=self.authorizer.is_operator(caller),
        )
        prev = self._state
        result = step(prev, params)
        if not result.accepted or result.state is None or result.effect is None:
            rejection = result.rejection or ErrorKind.INVARIANT
            logger.warning("%s by %s rejected: %s (%s)", action.value, caller, rejection.value, result.detail)
            return PoolTxResult(ok=False, state=prev, error=rejection, detail=result.detail)

        self._state = result.state
        try:
            self._run_transfers(result.effect.transfers)
        except _TransferFailed as exc:
            self._state = prev
            logger.error("%s by %s aborted, reserves restored: %s", action.value, caller, exc)
            return PoolTxResult(
                ok=False,
                state=prev,
                error=ErrorKind.TRANSFER_FAILED,
                detail=str(exc),
                cause=exc.cause,
            )

        record = self.events.append(result.effect)
        logger.info(
            "%s by %s committed: reserves=(%d, %d)",
            action.value, caller, self._state.reserve_a, self._state.reserve_b,
        )
        return PoolTxResult(ok=True, state=self._state, effect=result.effect, event=record)

    def add_liquidity(self, caller: str, amount_a: int, amount_b: int) -> Effect:
        return self._execute_or_raise(Action.ADD_LIQUIDITY, caller, amount_a=amount_a, amount_b=amount_b)

    def remove_liquidity(self, caller: str, amount_a: int, amount_b: int) -> Effect:
        return self._execute_or_raise(Action.REMOVE_LIQUIDITY, caller, amount_a=amount_a, amount_b=amount_b)

    def swap_a_for_b(self, caller: str, amount_in: int) -> int:
        """Swap ``amount_in`` of asset A; returns the amount of B paid out."""
        return self._execute_or_raise(Action.SWAP_A_FOR_B, caller, amount_in=amount_in).amount_out

    def swap_b_for_a(self, caller: str, amount_in: int) -> int:
        """Swap ``amount_in`` of asset B; returns the amount of A paid out."""
        return self._execute_or_raise(Action.SWAP_B_FOR_A, caller, amount_in=amount_in).amount_out

    # -- Internals -------------------------------------------------------

    def _execute_or_raise(self, action: Action, caller: str, **amounts: int) -> Effect:
        res = self.execute(action, caller, **amounts)
        if res.ok and res.effect is not None:
            return res.effect
        err: PoolError = error_for(res.error or ErrorKind.INVARIANT, res.detail)
        if res.cause is not None:
            raise err from res.cause
        raise err

    def _move(self, transfer: Transfer) -> bool:
        ledger = self._ledgers[transfer.asset]
        if transfer.kind is TransferKind.PULL:
            return ledger.transfer_from(transfer.party, self.config.pool_address, transfer.amount)
        return ledger.transfer(transfer.party, transfer.amount)

    def _reverse(self, transfer: Transfer) -> bool:
        ledger = self._ledgers[transfer.asset]
        if transfer.kind is TransferKind.PULL:
            return ledger.transfer(transfer.party, transfer.amount)
        return ledger.transfer_from(transfer.party, self.config.pool_address, transfer.amount)

    def _run_transfers(self, transfers) -> None:
        done: List[Transfer] = []
        for transfer in transfers:
            logger.debug("transfer %s", transfer)
            try:
                ok = self._move(transfer)
            except Exception as exc:
                self._compensate(done)
                raise _TransferFailed(transfer, exc) from exc
            if not ok:
                self._compensate(done)
                raise _TransferFailed(transfer)
            done.append(transfer)

    def _compensate(self, done: List[Transfer]) -> None:
        for transfer in reversed(done):
            try:
                ok = self._reverse(transfer)
            except Exception:
                logger.exception("compensating transfer raised: %s", transfer)
                continue
            if not ok:
                logger.error("compensating transfer refused: %s", transfer)
