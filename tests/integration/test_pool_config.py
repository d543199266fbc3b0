# [TESTER] v1

from __future__ import annotations

from pathlib import Path

import pytest

from cpmm_pool.core.pool_v1 import InvalidAssetError
from cpmm_pool.integration.config import (
    DEFAULT_POOL_ADDRESS,
    PoolEngineConfig,
    load_pool_config,
    pool_config_from_mapping,
)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "pool.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_yaml(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        'asset_a: "0x1111"\nasset_b: "0x2222"\noperator: alice\npool_address: custody\n',
    )
    cfg = load_pool_config(path)
    assert cfg == PoolEngineConfig(asset_a="0x1111", asset_b="0x2222", operator="alice", pool_address="custody")


def test_pool_address_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path, 'asset_a: "A"\nasset_b: "B"\noperator: alice\n')
    assert load_pool_config(path).pool_address == DEFAULT_POOL_ADDRESS


def test_unquoted_hex_is_not_a_string(tmp_path: Path) -> None:
    # YAML reads a bare 0x1111 as an int.
    path = _write(tmp_path, "asset_a: 0x1111\nasset_b: \"0x2222\"\noperator: alice\n")
    with pytest.raises(ValueError):
        load_pool_config(path)


def test_equal_assets_invalid(tmp_path: Path) -> None:
    path = _write(tmp_path, 'asset_a: "A"\nasset_b: "A"\noperator: alice\n')
    with pytest.raises(InvalidAssetError):
        load_pool_config(path)


def test_empty_asset_invalid() -> None:
    with pytest.raises(InvalidAssetError):
        pool_config_from_mapping({"asset_a": "", "asset_b": "B", "operator": "alice"})


def test_missing_key() -> None:
    with pytest.raises(ValueError, match="operator"):
        pool_config_from_mapping({"asset_a": "A", "asset_b": "B"})


def test_unknown_key() -> None:
    with pytest.raises(ValueError, match="fee_bps"):
        pool_config_from_mapping({"asset_a": "A", "asset_b": "B", "operator": "alice", "fee_bps": 30})


def test_non_mapping_document(tmp_path: Path) -> None:
    path = _write(tmp_path, "- a\n- b\n")
    with pytest.raises(ValueError):
        load_pool_config(path)


def test_pool_address_must_differ_from_operator() -> None:
    with pytest.raises(ValueError):
        PoolEngineConfig(asset_a="A", asset_b="B", operator="alice", pool_address="alice")
