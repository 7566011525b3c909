# src/sheetbind/core/metadata/scanner.py
"""
MetadataScanner — extração de TypeDescriptor a partir de uma entidade.

Responsabilidades:
    - Percorrer a cadeia de herança do tipo mais base até o tipo final
    - Ler apenas os campos próprios de cada classe, em ordem de declaração
    - Resolver value kind e role via `column()` ou `HeaderCatalog`

Invariantes:
    - Campos de ancestrais precedem campos de derivados
    - Header duplicado ou atributo redefinido: vale a primeira ocorrência
      (a mais base)
    - Tipo sem colunas produz descriptor vazio (não é erro)
    - O resultado depende apenas da forma do tipo

Limites explícitos:
    - Não faz cache (ver `MetadataRegistry`)
    - Não lê dados de planilha
"""

from __future__ import annotations

from dataclasses import Field
from typing import Dict, List, Optional

from .catalog import HeaderCatalog
from .errors import InvalidColumnDeclarationError
from .fields import (
    COLUMN_METADATA_KEY,
    ColumnDeclaration,
    FieldDescriptor,
    FieldRole,
    TypeDescriptor,
)


def _own_fields(klass: type) -> List[Field]:
    """Campos de dataclass declarados pela própria classe (não herdados)."""
    declared: Dict[str, Field] = klass.__dict__.get("__dataclass_fields__") or {}
    inherited = [
        base.__dict__.get("__dataclass_fields__") or {}
        for base in klass.__mro__[1:]
    ]
    own: List[Field] = []
    for name, f in declared.items():
        if any(fields.get(name) is f for fields in inherited):
            continue
        own.append(f)
    return own


def _describe(
    decl: ColumnDeclaration,
    *,
    attribute: str,
    owner: str,
    declared_index: int,
    catalog: Optional[HeaderCatalog],
) -> FieldDescriptor:
    spec = catalog.lookup(decl.header) if catalog is not None else None

    kind = decl.kind or (spec.value_kind if spec else None)
    if kind is None:
        raise InvalidColumnDeclarationError(
            f"Column '{decl.header}' on {owner}.{attribute} declares no value kind "
            f"and is not in the header catalog"
        )
    role = decl.role or (spec.role if spec else FieldRole.INPUT)

    return FieldDescriptor(
        header_name=decl.header,
        declared_index=declared_index,
        explicit_order=decl.order,
        role=role,
        value_kind=kind,
        attribute=attribute,
        owner=owner,
    )


def scan_entity(cls: type, catalog: Optional[HeaderCatalog] = None) -> TypeDescriptor:
    """
    Constrói o TypeDescriptor de `cls`.

    Raises:
        TypeError: se `cls` não for uma classe.
        InvalidColumnDeclarationError: coluna sem value kind resolvível.
    """
    if not isinstance(cls, type):
        raise TypeError(f"scan_entity expects a class, got {type(cls).__name__}")

    seen_headers = set()
    seen_attributes = set()
    out: List[FieldDescriptor] = []

    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        declared_index = 0
        for f in _own_fields(klass):
            decl = f.metadata.get(COLUMN_METADATA_KEY) if f.metadata else None
            if not isinstance(decl, ColumnDeclaration):
                continue
            fd = _describe(
                decl,
                attribute=f.name,
                owner=klass.__name__,
                declared_index=declared_index,
                catalog=catalog,
            )
            declared_index += 1
            # atributo redefinido ou header repetido: vale a declaração mais base
            if fd.attribute in seen_attributes or fd.header_name in seen_headers:
                continue
            seen_attributes.add(fd.attribute)
            seen_headers.add(fd.header_name)
            out.append(fd)

    return TypeDescriptor(name=cls.__name__, fields=tuple(out))
