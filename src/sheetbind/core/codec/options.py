# src/sheetbind/core/codec/options.py
"""Opções do codec derivadas da configuração efetiva (`codec.*`)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..config.errors import InvalidConfigValueError
from ..config.loader import DEFAULT_CONFIG


_DEFAULTS = DEFAULT_CONFIG["codec"]


@dataclass(frozen=True)
class CodecOptions:
    """
    - key_column: índice da célula-chave; linha com essa célula vazia é ignorada
    - true_token: token booleano verdadeiro (comparação case-insensitive)
    - decimal_strip_pattern: regex dos caracteres removidos antes do parse decimal
    """

    key_column: int = _DEFAULTS["key_column"]
    true_token: str = _DEFAULTS["true_token"]
    decimal_strip_pattern: str = _DEFAULTS["decimal_strip_pattern"]

    def __post_init__(self) -> None:
        if isinstance(self.key_column, bool) or not isinstance(self.key_column, int) or self.key_column < 0:
            raise InvalidConfigValueError(
                f"codec.key_column must be a non-negative int, got {self.key_column!r}"
            )
        if not isinstance(self.true_token, str) or not self.true_token.strip():
            raise InvalidConfigValueError("codec.true_token must be a non-empty string")
        try:
            re.compile(self.decimal_strip_pattern)
        except (re.error, TypeError) as e:
            raise InvalidConfigValueError(
                f"codec.decimal_strip_pattern is not a valid regex: {self.decimal_strip_pattern!r}"
            ) from e

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "CodecOptions":
        codec = (config or {}).get("codec") or {}
        if not isinstance(codec, dict):
            raise InvalidConfigValueError(f"codec must be a mapping, got {type(codec).__name__}")
        return cls(
            key_column=codec.get("key_column", _DEFAULTS["key_column"]),
            true_token=codec.get("true_token", _DEFAULTS["true_token"]),
            decimal_strip_pattern=codec.get("decimal_strip_pattern", _DEFAULTS["decimal_strip_pattern"]),
        )
