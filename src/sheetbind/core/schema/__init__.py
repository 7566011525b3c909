"""SheetBind — Schema de entidades (core).

Componentes canônicos para o **schema v1**:
 - parsing (YAML/JSON)
 - validação estrutural
 - materialização de entidades como dataclasses
"""

from .build import build_entities  # noqa: F401
from .errors import (  # noqa: F401
    SchemaError,
    SchemaFileNotFoundError,
    SchemaParseError,
    SchemaValidationError,
    UnsupportedSchemaFormatError,
)
from .loader import load_schema  # noqa: F401
from .schema import SheetSchemaV1, attribute_for, validate_schema  # noqa: F401
