# tests/core/config/test_hashing.py
"""Testes do hash da configuração efetiva (identidade usada pelo SyncContext)."""

import hashlib
from datetime import date

import pytest

from sheetbind.core.config.hashing import compute_config_hash
from sheetbind.core.config.loader import resolve_config


def test_key_order_does_not_matter() -> None:
    a = {"codec": {"key_column": 0, "true_token": "TRUE"}, "headers": {"report_extra_columns": False}}
    b = {"headers": {"report_extra_columns": False}, "codec": {"true_token": "TRUE", "key_column": 0}}
    assert compute_config_hash(a) == compute_config_hash(b)


def test_hash_is_sha256_of_compact_sorted_json() -> None:
    expected = hashlib.sha256(b'{"codec":{"key_column":0}}').hexdigest()
    assert compute_config_hash({"codec": {"key_column": 0}}) == expected
    assert len(expected) == 64


def test_overrides_change_the_hash() -> None:
    assert compute_config_hash(resolve_config()) != compute_config_hash(
        resolve_config({"codec": {"true_token": "YES"}})
    )


def test_yaml_dates_are_hashable() -> None:
    assert compute_config_hash({"since": date(2024, 1, 1)}) == compute_config_hash({"since": "2024-01-01"})


def test_non_dict_is_rejected() -> None:
    with pytest.raises(TypeError):
        compute_config_hash(["not", "a", "dict"])  # type: ignore[arg-type]
