# src/sheetbind/core/metadata/__init__.py
"""
Metadados de entidades e workbooks.

- fields   → vocabulário declarativo (`column`, `sheet`, descriptors, enums)
- catalog  → tabela header → {value_kind, role}
- scanner  → `scan_entity`: herança base-primeiro, ordem de declaração
- registry → `MetadataRegistry`: identidade de tipo → TypeDescriptor
"""

from .catalog import HeaderCatalog, HeaderSpec  # noqa: F401
from .errors import (  # noqa: F401
    DuplicateEntityError,
    InvalidColumnDeclarationError,
    MetadataError,
)
from .fields import (  # noqa: F401
    FieldDescriptor,
    FieldRole,
    GroupDescriptor,
    SheetDeclaration,
    SheetRecord,
    TypeDescriptor,
    ValueKind,
    column,
    sheet,
)
from .registry import DEFAULT_REGISTRY, MetadataRegistry, resolve_registry  # noqa: F401
from .scanner import scan_entity  # noqa: F401
