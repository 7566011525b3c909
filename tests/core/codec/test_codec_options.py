from __future__ import annotations

import pytest

from sheetbind.core.codec import CodecOptions
from sheetbind.core.config.errors import InvalidConfigValueError


def test_defaults() -> None:
    options = CodecOptions()
    assert options.key_column == 0
    assert options.true_token == "TRUE"
    assert options.decimal_strip_pattern == r"[^\d.-]"


def test_from_config_overrides_only_given_keys() -> None:
    options = CodecOptions.from_config({"codec": {"true_token": "YES"}})
    assert options.true_token == "YES"
    assert options.key_column == 0


def test_from_config_without_codec_section() -> None:
    assert CodecOptions.from_config({}) == CodecOptions()
    assert CodecOptions.from_config(None) == CodecOptions()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"key_column": -1},
        {"key_column": True},
        {"key_column": "0"},
        {"true_token": "  "},
        {"decimal_strip_pattern": "["},
    ],
)
def test_invalid_values_raise(kwargs) -> None:
    with pytest.raises(InvalidConfigValueError):
        CodecOptions(**kwargs)


def test_codec_section_must_be_mapping() -> None:
    with pytest.raises(InvalidConfigValueError):
        CodecOptions.from_config({"codec": ["TRUE"]})
