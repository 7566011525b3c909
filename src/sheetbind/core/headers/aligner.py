# src/sheetbind/core/headers/aligner.py
"""
HeaderAligner — diff posicional entre o header observado e o esperado.

Este módulo compara a linha de header lida do backend com a ordem
canônica esperada e produz diagnósticos, sem corrigir nada.

Regras (puramente posicionais, sem correspondência aproximada):
    - índice onde ambos existem e diferem → WARNING
      "Unexpected column [observado] should be [esperado]"
    - header esperado sem entrada observada → ERROR
      "Missing column [esperado]"

Células observadas são comparadas após `str().strip()`. Com `sheet_name`,
cada mensagem recebe o prefixo `[<sheet>!<coluna>]: `.

Limites explícitos:
    - Não reordena headers (ver `ordering.columns`)
    - Colunas extras só são reportadas por `find_extra_columns`
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .messages import Message, MessageType, create_error_message, create_warning_message


def column_letter(index: int) -> str:
    """Letra de coluna estilo planilha para um índice 0-based (0 → A, 26 → AA)."""
    if index < 0:
        raise ValueError(f"column index must be >= 0, got {index}")
    letters = ""
    n = index + 1
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def _cell(value: Any) -> str:
    return "" if value is None else str(value).strip()


def parse_header(row: Optional[Sequence[Any]]) -> Dict[int, str]:
    """Mapa posição → nome (aparado) de uma linha de header."""
    return {i: _cell(v) for i, v in enumerate(row or [])}


def _prefix(sheet_name: Optional[str], index: int) -> str:
    if not sheet_name:
        return ""
    return f"[{sheet_name}!{column_letter(index)}]: "


def check_sheet_headers(
    observed_row: Optional[Sequence[Any]],
    expected_headers: Sequence[str],
    sheet_name: Optional[str] = None,
) -> List[Message]:
    observed = [_cell(v) for v in (observed_row or [])]
    expected = list(expected_headers)

    messages: List[Message] = []
    # índices além de `expected` são colunas extras (ver find_extra_columns)
    for i in range(len(expected)):
        prefix = _prefix(sheet_name, i)
        if i >= len(observed):
            messages.append(
                create_error_message(f"{prefix}Missing column [{expected[i]}]", MessageType.CHECK_SHEET)
            )
        elif observed[i] != expected[i]:
            messages.append(
                create_warning_message(
                    f"{prefix}Unexpected column [{observed[i]}] should be [{expected[i]}]",
                    MessageType.CHECK_SHEET,
                )
            )
    return messages


def find_extra_columns(
    observed_row: Optional[Sequence[Any]],
    expected_headers: Sequence[str],
    sheet_name: Optional[str] = None,
) -> List[Message]:
    expected = set(expected_headers)
    messages: List[Message] = []
    for i, value in enumerate(observed_row or []):
        name = _cell(value)
        if name and name not in expected:
            messages.append(
                create_warning_message(
                    f"{_prefix(sheet_name, i)}Extra column [{name}]",
                    MessageType.CHECK_SHEET,
                )
            )
    return messages
