# src/sheetbind/core/config/loader.py
"""
Loader canônico de configuração do SheetBind.

A configuração efetiva é resolvida a partir de:
    - defaults embutidos (`DEFAULT_CONFIG`)
    - um arquivo de defaults do projeto (obrigatório quando usado `load_config`)
    - um arquivo local de overrides (opcional)

Chaves reconhecidas (v1):

    codec:
      key_column: 0             # célula-chave; linha com célula vazia é ignorada
      true_token: "TRUE"        # token booleano verdadeiro (case-insensitive)
      decimal_strip_pattern: "[^\\d.-]"
    headers:
      report_extra_columns: false

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults
    - A mesma entrada sempre produz a mesma configuração final

Limites explícitos:
    - Não valida semântica de entidades ou schema
    - Não persiste configuração (o hash fica em `SyncContext.config_hash`)
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml  # PyYAML

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge


DEFAULT_CONFIG: Dict[str, Any] = {
    "codec": {
        "key_column": 0,
        "true_token": "TRUE",
        "decimal_strip_pattern": r"[^\d.-]",
    },
    "headers": {
        "report_extra_columns": False,
    },
}


def _read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


_READERS = {".yaml": _read_yaml, ".yml": _read_yaml, ".json": _read_json}


def _load_file(path: Path) -> Dict[str, Any]:
    """Lê uma camada de configuração; arquivo vazio vale como `{}`."""
    if not path.exists():
        raise DefaultsNotFoundError(f"Config file not found: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise UnsupportedConfigFormatError(f"Unsupported config format: {path.suffix or path.name}")

    data = reader(path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(f"Config root must be a mapping, got {type(data).__name__}")
    return data


def resolve_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Configuração já materializada em memória, resolvida sobre `DEFAULT_CONFIG`."""
    if config is not None and not isinstance(config, dict):
        raise InvalidConfigRootTypeError(f"Config root must be a mapping, got {type(config).__name__}")
    return deep_merge(DEFAULT_CONFIG, config or {})


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Resolve `DEFAULT_CONFIG` ← arquivo de defaults ← arquivo local.

    O arquivo de defaults é obrigatório. O local é opcional e ignorado
    quando não existe.

    Raises:
        DefaultsNotFoundError: arquivo de defaults ausente.
        UnsupportedConfigFormatError: extensão diferente de yaml/yml/json.
        InvalidConfigRootTypeError: raiz do arquivo não é um mapping.
        ConfigTypeConflictError: tipos divergentes entre camadas.
    """
    effective = deep_merge(DEFAULT_CONFIG, _load_file(Path(defaults_path)))

    if local_path is not None and Path(local_path).exists():
        effective = deep_merge(effective, _load_file(Path(local_path)))

    return effective
