"""Erros canônicos do domínio de Schema (SheetBind).

Schemas YAML/JSON declaram entidades fora do código Python. Falhas de
carregamento/validação produzem erros explícitos e estáveis.
"""


class SchemaError(Exception):
    """Erro base do domínio de schema."""


class SchemaFileNotFoundError(SchemaError):
    """Arquivo de schema não existe no caminho informado."""


class UnsupportedSchemaFormatError(SchemaError):
    """Formato de schema não suportado (v1: YAML/JSON)."""


class SchemaParseError(SchemaError):
    """Falha ao parsear YAML/JSON."""


class SchemaValidationError(SchemaError):
    """Schema não é estruturalmente válido."""
