# src/sheetbind/core/metadata/fields.py
"""
Tipos canônicos de metadados do SheetBind.

Este módulo define o vocabulário declarativo usado para descrever como
registros tipados se projetam no modelo posicional de uma planilha.

Componentes principais:
    - FieldRole        → INPUT (dado) ou OUTPUT (coluna calculada pelo backend)
    - ValueKind        → tipo lógico da célula (STRING, INT, DECIMAL, BOOL, DATE)
    - column()         → marcação de um campo de dataclass como coluna
    - SheetRecord      → registro base com `row_id` e `saved`
    - FieldDescriptor  → metadado imutável de uma coluna
    - TypeDescriptor   → sequência canônica de colunas de uma entidade
    - sheet()          → marcação de um atributo de workbook como sheet
    - GroupDescriptor  → metadado imutável de uma sheet

Decisões arquiteturais:
    - Entidades são dataclasses comuns; a marcação vive em `Field.metadata`
    - Campos sem `column()` (ex.: `row_id`, `saved`) não são colunas
    - Descriptors são derivados uma vez por tipo e nunca mutados

Invariantes:
    - `header_name` é único dentro de um TypeDescriptor
    - `explicit_order < 0` equivale a "sem ordem explícita"

Limites explícitos:
    - Não lê planilhas
    - Não interpreta fórmulas

Este módulo existe para que a forma de uma entidade seja a única fonte
da ordem canônica de colunas.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from .errors import InvalidColumnDeclarationError


COLUMN_METADATA_KEY = "sheetbind.column"


class FieldRole(str, Enum):
    """
    Papel de uma coluna na sincronização.

    - INPUT: valor fornecido pelo registro e escrito na planilha
    - OUTPUT: valor calculado pelo backend (fórmula); a posição é reservada
      e nunca recebe dados no encode
    """

    INPUT = "input"
    OUTPUT = "output"


class ValueKind(str, Enum):
    """Tipo lógico de uma célula, usado pela coerção do codec."""

    STRING = "string"
    INT = "int"
    DECIMAL = "decimal"
    BOOL = "bool"
    DATE = "date"


def _as_kind(value: Union[ValueKind, str, None]) -> Optional[ValueKind]:
    if value is None or isinstance(value, ValueKind):
        return value
    try:
        return ValueKind(str(value).lower())
    except ValueError as e:
        raise InvalidColumnDeclarationError(f"Unknown value kind: {value!r}") from e


def _as_role(value: Union[FieldRole, str, None]) -> Optional[FieldRole]:
    if value is None or isinstance(value, FieldRole):
        return value
    try:
        return FieldRole(str(value).lower())
    except ValueError as e:
        raise InvalidColumnDeclarationError(f"Unknown field role: {value!r}") from e


@dataclass(frozen=True)
class ColumnDeclaration:
    """Marcação crua de um campo, antes da resolução pelo catálogo."""

    header: str
    kind: Optional[ValueKind] = None
    role: Optional[FieldRole] = None
    order: Optional[int] = None
    note: Optional[str] = None


def column(
    header: str,
    *,
    kind: Union[ValueKind, str, None] = None,
    role: Union[FieldRole, str, None] = None,
    order: Optional[int] = None,
    note: Optional[str] = None,
    default: Any = None,
) -> Any:
    """
    Marca um campo de dataclass como coluna da planilha.

    Uso:
        @dataclass
        class Amount(SheetRecord):
            pay: Optional[Decimal] = column("Pay", kind=ValueKind.DECIMAL)
            total: Optional[Decimal] = column("Total", kind="decimal", role="output")

    Quando `kind`/`role` são omitidos, o `HeaderCatalog` usado no scan
    fornece os valores do header.

    Raises:
        InvalidColumnDeclarationError: header vazio, kind/role desconhecidos
            ou `order` não inteiro.
    """
    if not isinstance(header, str) or not header.strip():
        raise InvalidColumnDeclarationError("column header must be a non-empty string")
    if order is not None and (isinstance(order, bool) or not isinstance(order, int)):
        raise InvalidColumnDeclarationError(f"column order must be an int, got {order!r}")

    declaration = ColumnDeclaration(
        header=header.strip(),
        kind=_as_kind(kind),
        role=_as_role(role),
        order=order,
        note=note,
    )
    return field(default=default, metadata={COLUMN_METADATA_KEY: declaration})


@dataclass
class SheetRecord:
    """
    Registro base de todas as entidades mapeadas.

    - row_id: número da linha na planilha (1-based; o header é a linha 1)
    - saved: True quando o registro foi lido do backend
    """

    row_id: Optional[int] = None
    saved: bool = False


@dataclass(frozen=True)
class FieldDescriptor:
    """Metadado imutável de uma coluna de entidade."""

    header_name: str
    declared_index: int
    explicit_order: Optional[int]
    role: FieldRole
    value_kind: ValueKind
    attribute: str
    owner: str

    @property
    def is_output(self) -> bool:
        return self.role is FieldRole.OUTPUT

    @property
    def is_ordered(self) -> bool:
        return self.explicit_order is not None and self.explicit_order >= 0


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Sequência canônica de colunas de uma entidade.

    A ordem de `fields` é a ordem canônica: ancestrais antes de derivados,
    cada classe em ordem de declaração.
    """

    name: str
    fields: Tuple[FieldDescriptor, ...] = ()
    _by_header: Dict[str, FieldDescriptor] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        index: Dict[str, FieldDescriptor] = {}
        for fd in self.fields:
            if fd.header_name in index:
                raise InvalidColumnDeclarationError(
                    f"Duplicate header '{fd.header_name}' in entity '{self.name}'"
                )
            index[fd.header_name] = fd
        object.__setattr__(self, "_by_header", index)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @property
    def headers(self) -> Tuple[str, ...]:
        return tuple(fd.header_name for fd in self.fields)

    @property
    def input_fields(self) -> Tuple[FieldDescriptor, ...]:
        return tuple(fd for fd in self.fields if fd.role is FieldRole.INPUT)

    @property
    def output_fields(self) -> Tuple[FieldDescriptor, ...]:
        return tuple(fd for fd in self.fields if fd.role is FieldRole.OUTPUT)

    def field_for(self, header: Any) -> Optional[FieldDescriptor]:
        if header is None:
            return None
        return self._by_header.get(str(header).strip())


# -----------------------------
# Sheets (grupos nomeados)
# -----------------------------

@dataclass(frozen=True)
class SheetDeclaration:
    """Marcação de um atributo de workbook como sheet."""

    name: str
    order: Optional[int] = None


def sheet(name: str, order: Optional[int] = None) -> SheetDeclaration:
    """
    Declara uma sheet em uma classe de workbook.

        class Workbook:
            trips = sheet("Trips")
            summary = sheet("Summary", order=0)

    Ordem negativa equivale a ausência de ordem.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidColumnDeclarationError("sheet name must be a non-empty string")
    if order is not None and (isinstance(order, bool) or not isinstance(order, int)):
        raise InvalidColumnDeclarationError(f"sheet order must be an int, got {order!r}")
    return SheetDeclaration(name=name.strip(), order=order)


@dataclass(frozen=True)
class GroupDescriptor:
    """Metadado imutável de uma sheet dentro de um workbook."""

    name: str
    declared_index: int
    explicit_order: Optional[int] = None
    attribute: Optional[str] = None

    @property
    def is_ordered(self) -> bool:
        return self.explicit_order is not None and self.explicit_order >= 0
