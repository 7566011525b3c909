# tests/core/config/test_merge.py
"""
Testes do deep-merge entre camadas de configuração.

Cobre a sobreposição de seções `codec`/`headers`, a substituição de
listas, a aceitação de chaves declaradas com None e os conflitos de tipo.
"""

import pytest

from sheetbind.core.config.errors import ConfigTypeConflictError
from sheetbind.core.config.merge import deep_merge


def test_override_replaces_scalar_without_mutating_layers() -> None:
    defaults = {"codec": {"key_column": 0, "true_token": "TRUE"}}
    local = {"codec": {"true_token": "YES"}}

    merged = deep_merge(defaults, local)

    assert merged == {"codec": {"key_column": 0, "true_token": "YES"}}
    assert defaults == {"codec": {"key_column": 0, "true_token": "TRUE"}}
    assert local == {"codec": {"true_token": "YES"}}


def test_sections_merge_independently() -> None:
    merged = deep_merge(
        {"codec": {"key_column": 0}, "headers": {"report_extra_columns": False}},
        {"headers": {"report_extra_columns": True}, "extra": {"x": 1}},
    )
    assert merged == {
        "codec": {"key_column": 0},
        "headers": {"report_extra_columns": True},
        "extra": {"x": 1},
    }


def test_lists_are_replaced() -> None:
    merged = deep_merge({"sheets": ["Trips", "Shifts"]}, {"sheets": ["Shifts"]})
    assert merged == {"sheets": ["Shifts"]}


def test_none_in_base_accepts_any_value() -> None:
    merged = deep_merge({"codec": {"note": None}}, {"codec": {"note": "x"}})
    assert merged["codec"]["note"] == "x"


def test_merged_result_is_a_copy() -> None:
    local = {"codec": {"tokens": ["YES"]}}
    merged = deep_merge({}, local)
    merged["codec"]["tokens"].append("SIM")
    assert local == {"codec": {"tokens": ["YES"]}}


def test_section_replaced_by_scalar_is_a_conflict() -> None:
    with pytest.raises(ConfigTypeConflictError, match="'codec'"):
        deep_merge({"codec": {"key_column": 0}}, {"codec": "TRUE"})


def test_conflict_message_names_key_path() -> None:
    with pytest.raises(ConfigTypeConflictError, match=r"codec\.key_column"):
        deep_merge({"codec": {"key_column": 0}}, {"codec": {"key_column": "1"}})


def test_non_dict_root_is_rejected() -> None:
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"codec": {}}, ["codec"])  # type: ignore[arg-type]
