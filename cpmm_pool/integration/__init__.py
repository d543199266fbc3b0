"""
Imperative shell around the pool core: ledgers, authorization, events,
configuration and the `PoolEngine` adapter.
"""

from .authorization import Authorizer, OperatorAuthorizer
from .config import PoolEngineConfig, load_pool_config, pool_config_from_mapping
from .events import EventLog, PoolEvent
from .ledger import AssetLedger, InMemoryAssetLedger
from .pool_engine import PoolEngine, PoolTxResult

__all__ = [
    "Authorizer",
    "OperatorAuthorizer",
    "PoolEngineConfig",
    "load_pool_config",
    "pool_config_from_mapping",
    "EventLog",
    "PoolEvent",
    "AssetLedger",
    "InMemoryAssetLedger",
    "PoolEngine",
    "PoolTxResult",
]
