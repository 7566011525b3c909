# src/sheetbind/core/codec/records.py
"""
RecordCodec — decode/encode genérico entre linhas cruas e registros tipados.

Decode:
    - a linha 0 é o header (mapa posição → nome via `parse_header`)
    - linhas cuja célula-chave está vazia/ausente são ignoradas
    - cada coluna é lida pelo nome do header e convertida pelo value kind
    - header ausente ou linha curta mantém o default da dataclass
    - todo registro recebe `saved = True` e `row_id` = linha da planilha
      (1-based; o header é a linha 1)

Encode:
    - uma linha por registro, uma célula por header, na ordem recebida
    - coluna INPUT → valor do registro; OUTPUT ou header desconhecido → None
    - o tamanho da linha é sempre `len(header_names)`, o que preserva as
      posições das colunas calculadas pelo backend (fórmulas)

Falhas de coerção nunca interrompem o decode. Com um `SyncContext`, cada
falha vira um warning estruturado e o resumo vira um evento `info`.

Limites explícitos:
    - Não interpreta fórmulas
    - Não executa I/O com o backend
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..context import SyncContext
from ..errors import coercion_failure
from ..headers.aligner import parse_header
from ..metadata.fields import FieldRole, TypeDescriptor
from ..metadata.registry import MetadataRegistry, resolve_registry
from .coercion import _is_blank, coerce_cell, render_cell
from .options import CodecOptions


DECODE_STEP = "codec.decode"
ENCODE_STEP = "codec.encode"


def _positions(header: Dict[int, str]) -> Dict[str, int]:
    # primeira ocorrência do nome vence
    out: Dict[str, int] = {}
    for index, name in header.items():
        if name and name not in out:
            out[name] = index
    return out


def _decode_row(
    row: Sequence[Any],
    cls: type,
    descriptor: TypeDescriptor,
    positions: Dict[str, int],
    sheet_row: int,
    options: CodecOptions,
    context: Optional[SyncContext],
) -> Any:
    record = cls()
    for fd in descriptor:
        index = positions.get(fd.header_name)
        if index is None or index >= len(row):
            continue
        raw = row[index]
        value, failed = coerce_cell(fd.value_kind, raw, options)
        if failed and context is not None:
            payload = coercion_failure(
                header=fd.header_name,
                value_kind=fd.value_kind.value,
                raw_value=raw,
                row=sheet_row,
            )
            context.add_warning(step_id=DECODE_STEP, message=payload.message)
            context.log(step_id=DECODE_STEP, level="warning", message=payload.message, error=payload.to_dict())
        if value is None:
            continue
        setattr(record, fd.attribute, value)

    record.row_id = sheet_row
    record.saved = True
    return record


def decode(
    rows: Optional[Iterable[Sequence[Any]]],
    cls: type,
    *,
    registry: Optional[MetadataRegistry] = None,
    options: Optional[CodecOptions] = None,
    context: Optional[SyncContext] = None,
) -> List[Any]:
    """
    Converte linhas cruas (header + dados) em registros de `cls`.

    Args:
        rows: linhas da planilha; a primeira é o header.
        cls: entidade (dataclass derivada de `SheetRecord`).
        registry: registry de metadados (default: o registry global).
        options: opções de coerção (default: `CodecOptions()`).
        context: contexto opcional para warnings e eventos.

    Returns:
        Lista de registros, na ordem das linhas.
    """
    descriptor = resolve_registry(registry).descriptor_for(cls)
    opts = options or CodecOptions()

    all_rows = list(rows or [])
    if not all_rows:
        return []

    positions = _positions(parse_header(all_rows[0]))

    records: List[Any] = []
    skipped = 0
    for offset, row in enumerate(all_rows[1:]):
        row = list(row or [])
        key = row[opts.key_column] if opts.key_column < len(row) else None
        if _is_blank(key):
            skipped += 1
            continue
        # header é a linha 1; a primeira linha de dados é a linha 2
        records.append(_decode_row(row, cls, descriptor, positions, offset + 2, opts, context))

    if context is not None:
        context.log(
            step_id=DECODE_STEP,
            level="info",
            message=f"decoded {len(records)} {descriptor.name} rows",
            entity=descriptor.name,
            decoded=len(records),
            skipped=skipped,
        )
    return records


def encode(
    records: Iterable[Any],
    header_names: Sequence[Any],
    *,
    registry: Optional[MetadataRegistry] = None,
    context: Optional[SyncContext] = None,
) -> List[List[Any]]:
    """
    Converte registros em linhas alinhadas a `header_names`.

    Posições de colunas OUTPUT (ou de headers sem coluna correspondente)
    recebem None, nunca um valor.
    """
    reg = resolve_registry(registry)
    headers = ["" if h is None else str(h).strip() for h in header_names]

    out: List[List[Any]] = []
    reserved = 0
    for record in records:
        descriptor = reg.descriptor_for(type(record))
        row: List[Any] = []
        for header in headers:
            fd = descriptor.field_for(header)
            if fd is None or fd.role is not FieldRole.INPUT:
                row.append(None)
                reserved += 1
                continue
            row.append(render_cell(getattr(record, fd.attribute, None)))
        out.append(row)

    if context is not None:
        context.log(
            step_id=ENCODE_STEP,
            level="info",
            message=f"encoded {len(out)} rows",
            rows=len(out),
            columns=len(headers),
            reserved_cells=reserved,
        )
    return out
