# src/sheetbind/core/config/hashing.py
"""
Identidade da configuração efetiva.

`SyncContext.config_hash` usa este hash para ligar os eventos de uma
sincronização à configuração que a governou. Duas configurações com as
mesmas chaves e valores têm o mesmo hash, em qualquer ordem de chaves.
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """SHA-256 (hex) do JSON canônico da configuração (chaves ordenadas, sem espaços)."""
    if not isinstance(config, dict):
        raise TypeError(f"config must be a dict, got {type(config).__name__}")

    # YAML pode produzir datas; viram texto
    payload = json.dumps(config, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
