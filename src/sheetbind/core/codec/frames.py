# src/sheetbind/core/codec/frames.py
"""
Integração tabular (pandas) para registros decodificados.

- records_to_frame: registros → DataFrame em ordem canônica de colunas
- frame_to_rows: DataFrame → header + linhas aceitas por `decode`

pandas é importado sob demanda; o restante do codec não depende dele.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from ..metadata.registry import MetadataRegistry, resolve_registry


def records_to_frame(
    records: Iterable[Any],
    cls: type,
    *,
    registry: Optional[MetadataRegistry] = None,
    include_row_id: bool = False,
) -> Any:
    import pandas as pd  # type: ignore

    descriptor = resolve_registry(registry).descriptor_for(cls)
    columns = list(descriptor.headers)

    data = []
    for record in records:
        item = {fd.header_name: getattr(record, fd.attribute, None) for fd in descriptor}
        if include_row_id:
            item["row_id"] = record.row_id
        data.append(item)

    if include_row_id:
        columns = ["row_id"] + columns
    return pd.DataFrame(data, columns=columns)


def _cell(value: Any) -> Any:
    import pandas as pd  # type: ignore

    if value is None or value is pd.NA or value is pd.NaT:
        return ""
    if isinstance(value, float) and value != value:
        return ""
    return value


def frame_to_rows(df: Any) -> List[List[Any]]:
    """Header (nomes das colunas) seguido de uma linha por registro do DataFrame."""
    rows: List[List[Any]] = [[str(c) for c in df.columns]]
    for values in df.itertuples(index=False, name=None):
        rows.append([_cell(v) for v in values])
    return rows
