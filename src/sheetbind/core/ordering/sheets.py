# src/sheetbind/core/ordering/sheets.py
"""
SheetOrderResolver — ordem total das sheets de um workbook.

Cada sheet é UNORDERED (sem posição explícita real) ou ORDERED (posição
explícita não negativa). O merge produz uma única ordem:

    1. Todas as UNORDERED primeiro, em ordem de declaração
    2. As ORDERED são inseridas em ordem crescente de posição, cada uma no
       índice (quantidade de UNORDERED) + (posição), limitado ao final
       atual da lista quando o índice ultrapassa o tamanho
    3. Posição negativa equivale a UNORDERED

Empates entre posições iguais (já um erro de validação) são resolvidos
pela ordem de declaração, mantendo o resultado determinístico.

Também expõe utilitários sobre listas de nomes declarados em classes de
constantes (`declaration_order`, `get_sheet_index`, ...).

Limites explícitos:
    - Não cria nem renomeia sheets no backend
    - Validação retorna mensagens; nunca levanta exceção para conflitos
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ..errors import duplicate_order, duplicate_sheet_name, sheet_not_available
from ..metadata.fields import GroupDescriptor, SheetDeclaration


GroupsOrWorkbook = Union[type, Iterable[GroupDescriptor]]


def scan_workbook(cls: type) -> List[GroupDescriptor]:
    """
    Lê as declarações `sheet()` de uma classe de workbook.

    Classes base são lidas primeiro. Um atributo redefinido em uma subclasse
    substitui a declaração, mas mantém a posição original.
    """
    if not isinstance(cls, type):
        raise TypeError(f"scan_workbook expects a class, got {type(cls).__name__}")

    declared: Dict[str, SheetDeclaration] = {}
    for klass in reversed(cls.__mro__):
        for attribute, value in vars(klass).items():
            if isinstance(value, SheetDeclaration):
                declared[attribute] = value

    return [
        GroupDescriptor(
            name=decl.name,
            declared_index=i,
            explicit_order=decl.order,
            attribute=attribute,
        )
        for i, (attribute, decl) in enumerate(declared.items())
    ]


def resolve_sheet_order(groups: Iterable[GroupDescriptor]) -> List[str]:
    items = sorted(groups, key=lambda g: g.declared_index)

    result = [g.name for g in items if not g.is_ordered]
    unordered_count = len(result)

    ordered = sorted(
        (g for g in items if g.is_ordered),
        key=lambda g: (g.explicit_order, g.declared_index),
    )
    # cada repetição de posição empurra as inserções seguintes uma casa,
    # mantendo empatadas juntas e em ordem de declaração
    placed = 0
    positions = set()
    for g in ordered:
        shift = placed - len(positions - {g.explicit_order})
        index = min(unordered_count + g.explicit_order + shift, len(result))
        result.insert(index, g.name)
        placed += 1
        positions.add(g.explicit_order)

    return result


def get_sheet_order(cls: type) -> List[str]:
    return resolve_sheet_order(scan_workbook(cls))


def validate_sheet_mapping(
    groups_or_cls: GroupsOrWorkbook,
    available_sheets: Iterable[str],
) -> List[str]:
    """
    Valida um workbook contra os nomes de sheet disponíveis.

    Erros (em ordem de declaração):
        - sheet ausente de `available_sheets`
        - posição explícita repetida
        - nome de sheet repetido
    """
    if isinstance(groups_or_cls, type):
        workbook = groups_or_cls.__name__
        groups = scan_workbook(groups_or_cls)
    else:
        workbook = "workbook"
        groups = sorted(groups_or_cls, key=lambda g: g.declared_index)

    available = set(available_sheets)
    used_orders = set()
    used_names = set()
    errors: List[str] = []

    for g in groups:
        if g.name not in available:
            errors.append(
                sheet_not_available(
                    workbook=workbook,
                    attribute=g.attribute or g.name,
                    sheet=g.name,
                ).message
            )

        if g.is_ordered:
            if g.explicit_order in used_orders:
                errors.append(duplicate_order(workbook=workbook, order=g.explicit_order).message)
            else:
                used_orders.add(g.explicit_order)

        if g.name in used_names:
            errors.append(duplicate_sheet_name(workbook=workbook, sheet=g.name).message)
        else:
            used_names.add(g.name)

    return errors


# -----------------------------
# Listas de nomes declarados
# -----------------------------

def declaration_order(source: Union[type, Iterable[str]]) -> List[str]:
    """
    Nomes em ordem de declaração.

    `source` pode ser uma classe de constantes (atributos públicos do tipo
    str, bases primeiro) ou um iterável de nomes. Duplicatas são removidas.
    """
    if isinstance(source, type):
        values: List[str] = []
        for klass in reversed(source.__mro__):
            if klass is object:
                continue
            for attribute, value in vars(klass).items():
                if attribute.startswith("_") or not isinstance(value, str):
                    continue
                values.append(value)
    else:
        values = [str(v) for v in source]

    return list(dict.fromkeys(values))


def _label(source: Any) -> str:
    return source.__name__ if isinstance(source, type) else "available sheets"


def validate_sheet_names(known: Union[type, Iterable[str]], names: Iterable[str]) -> List[str]:
    valid = set(declaration_order(known))
    label = _label(known)
    return [f"Sheet name '{name}' is not defined in {label}" for name in names if name not in valid]


def get_sheet_index(order: Union[type, Sequence[str]], name: str) -> int:
    """Índice 0-based de `name`, ou -1 quando ausente."""
    names = declaration_order(order)
    try:
        return names.index(name)
    except ValueError:
        return -1


def is_valid_sheet_name(order: Union[type, Sequence[str]], name: Optional[str]) -> bool:
    if not name:
        return False
    target = name.strip().lower()
    return any(n.lower() == target for n in declaration_order(order))
