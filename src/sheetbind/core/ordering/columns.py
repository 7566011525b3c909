# src/sheetbind/core/ordering/columns.py
"""
ColumnOrderResolver — ordem canônica de colunas de uma entidade.

A ordem canônica é a ordem do TypeDescriptor: campos de ancestrais antes
dos derivados, cada classe em ordem de declaração. Este módulo projeta essa
ordem sobre header rows vindas do backend.

Invariantes:
    - `apply_column_order` é idempotente
    - Headers não mapeados ("unmapped") nunca são descartados; vão para o
      final preservando a ordem relativa original
    - Nenhuma função depende de dados de runtime, apenas da forma do tipo

Limites explícitos:
    - Não lê nem escreve planilhas
    - Não valida conteúdo de células
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from ..errors import duplicate_column_order, mapping_error
from ..metadata.registry import MetadataRegistry, resolve_registry


def _name(header: Any) -> str:
    return "" if header is None else str(header).strip()


def get_column_order(cls: type, *, registry: Optional[MetadataRegistry] = None) -> List[str]:
    """Headers canônicos de `cls`, em ordem."""
    return list(resolve_registry(registry).descriptor_for(cls).headers)


def apply_column_order(
    cls: type,
    header_row: List[Any],
    *,
    registry: Optional[MetadataRegistry] = None,
) -> List[Any]:
    """
    Reordena `header_row` in place.

    Membros canônicos vão para a frente, em ordem canônica; os demais são
    anexados na ordem relativa em que apareciam. Retorna a própria lista.
    """
    canonical = get_column_order(cls, registry=registry)
    rank: Dict[str, int] = {h: i for i, h in enumerate(canonical)}
    unmapped_rank = len(canonical)

    # sorted é estável: unmapped preservam a ordem relativa
    reordered = sorted(header_row, key=lambda h: rank.get(_name(h), unmapped_rank))
    header_row[:] = reordered
    return header_row


def get_column_order_with_fallback(
    cls: type,
    header_row: Optional[Iterable[Any]] = None,
    fallback_headers: Optional[Iterable[Any]] = None,
    *,
    registry: Optional[MetadataRegistry] = None,
) -> List[str]:
    """
    Ordem canônica seguida dos headers extras conhecidos.

    Depois da ordem canônica vêm os `fallback_headers` (quando informados)
    e então os headers restantes de `header_row`, sem duplicatas e sem
    nomes vazios.
    """
    out = get_column_order(cls, registry=registry)
    seen = set(out)

    for source in (fallback_headers, header_row):
        if source is None:
            continue
        for header in source:
            name = _name(header)
            if not name or name in seen:
                continue
            seen.add(name)
            out.append(name)

    return out


def validate_header_mapping(
    cls: type,
    available_names: Iterable[Any],
    *,
    registry: Optional[MetadataRegistry] = None,
) -> List[str]:
    """
    Uma mensagem de erro por coluna cujo header não está em `available_names`.

    Nunca levanta exceção para dados; a lista vazia significa mapeamento válido.
    """
    available = {_name(n) for n in available_names}
    descriptor = resolve_registry(registry).descriptor_for(cls)

    errors: List[str] = []
    for fd in descriptor:
        if fd.header_name not in available:
            errors.append(
                mapping_error(
                    entity=descriptor.name,
                    attribute=fd.attribute,
                    header=fd.header_name,
                ).message
            )
    return errors


def validate_column_order(cls: type, *, registry: Optional[MetadataRegistry] = None) -> List[str]:
    """
    Uma mensagem por `order` explícito repetido entre as colunas de `cls`.

    `order` negativo ou ausente não conta. A ordem canônica não muda; isto
    só aponta declarações conflitantes.
    """
    descriptor = resolve_registry(registry).descriptor_for(cls)

    used = set()
    errors: List[str] = []
    for fd in descriptor:
        if not fd.is_ordered:
            continue
        if fd.explicit_order in used:
            errors.append(duplicate_column_order(entity=descriptor.name, order=fd.explicit_order).message)
        else:
            used.add(fd.explicit_order)
    return errors
