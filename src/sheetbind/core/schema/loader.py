"""
Leitura de arquivos de schema de entidades (YAML ou JSON, pela extensão).

Só a leitura e a forma da raiz são verificadas aqui; a estrutura do
schema é validada por `validate_schema`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Union

import yaml

from .errors import (
    SchemaFileNotFoundError,
    SchemaParseError,
    UnsupportedSchemaFormatError,
)


_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


def load_schema(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Raises:
        SchemaFileNotFoundError: caminho vazio ou inexistente.
        UnsupportedSchemaFormatError: extensão diferente de yaml/yml/json.
        SchemaParseError: conteúdo ilegível, vazio ou com raiz não-mapping.
    """
    if not str(path or "").strip():
        raise SchemaFileNotFoundError("schema path is required")

    source = Path(path)
    if not source.is_file():
        raise SchemaFileNotFoundError(f"schema file not found: {source}")

    parse = _PARSERS.get(source.suffix.lower())
    if parse is None:
        raise UnsupportedSchemaFormatError(f"unsupported schema format: {source.suffix or source.name}")

    try:
        data = parse(source.read_text(encoding="utf-8"))
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise SchemaParseError(f"{source.name}: {e}") from e

    if data is None:
        raise SchemaParseError(f"{source.name}: schema file is empty")
    if not isinstance(data, dict):
        raise SchemaParseError(f"{source.name}: schema root must be a mapping, got {type(data).__name__}")
    return data
