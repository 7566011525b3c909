# src/sheetbind/core/config/merge.py
"""
Deep-merge das camadas de configuração (DEFAULT_CONFIG → defaults → local).

Regras:
    - seções (dicts) são combinadas chave a chave
    - listas e escalares da camada de cima substituem os de baixo
    - uma chave declarada com None aceita qualquer valor
    - tipos divergentes na mesma chave são um erro, com o caminho pontuado
      da chave na mensagem (ex.: `codec.key_column`)

As camadas de entrada nunca são mutadas.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _merge(base: Dict[str, Any], override: Dict[str, Any], path: str) -> Dict[str, Any]:
    merged: Dict[str, Any] = deepcopy(base)

    for key, value in override.items():
        where = f"{path}.{key}" if path else str(key)
        current = merged.get(key)

        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _merge(current, value, where)
        elif current is None or isinstance(value, list) or type(current) is type(value):
            merged[key] = deepcopy(value)
        else:
            raise ConfigTypeConflictError(
                f"Type conflict at '{where}': {type(current).__name__} vs {type(value).__name__}"
            )

    return merged


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Sobrepõe `override` a `base` e devolve uma nova configuração.

    Raises:
        ConfigTypeConflictError: raiz não-dict ou tipos divergentes na
            mesma chave.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"deep_merge expects dicts at the root, got "
            f"{type(base).__name__} and {type(override).__name__}"
        )
    return _merge(base, override, "")
