"""
Construction-time pool configuration.

A pool is configured once: its two asset identifiers, its operator, and the
ledger principal that custodies its reserves. Configuration can be built in
code or loaded from a YAML document such as::

    asset_a: "0x1111"
    asset_b: "0x2222"
    operator: "alice"
    pool_address: "pool"   # optional
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Union

import yaml

from ..core.pool_v1.errors import InvalidAssetError
from ..core.pool_v1.invariants import is_asset_id

DEFAULT_POOL_ADDRESS = "pool"

_REQUIRED_KEYS = ("asset_a", "asset_b", "operator")
_OPTIONAL_KEYS = ("pool_address",)


@dataclass(frozen=True)
class PoolEngineConfig:
    asset_a: str
    asset_b: str
    operator: str
    # Ledger account holding the pool's reserves.
    pool_address: str = DEFAULT_POOL_ADDRESS

    def __post_init__(self) -> None:
        for name in ("asset_a", "asset_b"):
            value = getattr(self, name)
            if not is_asset_id(value):
                raise InvalidAssetError(f"{name} must be a non-empty string")
        if self.asset_a == self.asset_b:
            raise InvalidAssetError(f"asset_a and asset_b must differ: {self.asset_a!r}")
        if not isinstance(self.operator, str) or not self.operator:
            raise ValueError("operator must be a non-empty string")
        if not isinstance(self.pool_address, str) or not self.pool_address:
            raise ValueError("pool_address must be a non-empty string")
        if self.pool_address == self.operator:
            raise ValueError("pool_address must differ from operator")


def pool_config_from_mapping(obj: Any) -> PoolEngineConfig:
    """Validate a decoded mapping and build the config (fail-closed)."""
    if not isinstance(obj, Mapping):
        raise ValueError("pool config must be a mapping")
    unknown = sorted(str(k) for k in obj.keys() if k not in _REQUIRED_KEYS + _OPTIONAL_KEYS)
    if unknown:
        raise ValueError(f"unknown pool config keys: {', '.join(unknown)}")
    missing = [k for k in _REQUIRED_KEYS if k not in obj]
    if missing:
        raise ValueError(f"missing pool config keys: {', '.join(missing)}")
    for key in _REQUIRED_KEYS + _OPTIONAL_KEYS:
        if key in obj and not isinstance(obj[key], str):
            raise ValueError(f"pool config key {key!r} must be a string")
    return PoolEngineConfig(
        asset_a=obj["asset_a"],
        asset_b=obj["asset_b"],
        operator=obj["operator"],
        pool_address=obj.get("pool_address", DEFAULT_POOL_ADDRESS),
    )


def load_pool_config(path: Union[str, Path]) -> PoolEngineConfig:
    """Load a pool config from a YAML file."""
    obj = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    return pool_config_from_mapping(obj)
