# src/sheetbind/core/codec/coercion.py
"""
Coerção segura de células por value kind.

Regras (v1):
    - BOOL:    `true_token` (case-insensitive) → True; qualquer outro valor → False
    - INT:     vazio → None; texto com ponto decimal → None; demais caracteres
               não numéricos são removidos, preservando o sinal
    - DECIMAL: remove símbolos de moeda e separadores (mantém dígitos, `.`, `-`);
               vazio ou "-" → None; falha de parse → None
    - STRING:  texto cru, sem alteração
    - DATE:    texto cru, sem tipo intermediário de data

Falhas de coerção nunca levantam exceção: o valor degrada para None e o
chamador é informado via flag `failed`.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Optional, Tuple

from ..metadata.fields import ValueKind
from .options import CodecOptions


_NON_DIGIT = re.compile(r"\D")


def _is_blank(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, str) and v.strip() == "":
        return True
    return False


def _coerce_bool(v: Any, options: CodecOptions) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return False
    return str(v).strip().lower() == options.true_token.strip().lower()


def _coerce_int(v: Any, options: CodecOptions) -> Optional[int]:
    if _is_blank(v) or isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return int(v) if v.is_integer() else None

    s = str(v).strip()
    if "." in s:
        return None
    negative = s.startswith("-")
    digits = _NON_DIGIT.sub("", s)
    if not digits:
        return None
    value = int(digits)
    return -value if negative else value


def _coerce_decimal(v: Any, options: CodecOptions) -> Optional[Decimal]:
    if _is_blank(v) or isinstance(v, bool):
        return None
    if isinstance(v, Decimal):
        return v
    if isinstance(v, (int, float)):
        s = str(v)
    else:
        s = re.sub(options.decimal_strip_pattern, "", str(v).strip())
    if s in {"", "-"}:
        return None
    try:
        value = Decimal(s)
    except InvalidOperation:
        return None
    # NaN/Infinity não representam valores de célula
    return value if value.is_finite() else None


def _passthrough(v: Any, options: CodecOptions) -> Any:
    return v


COERCERS: Dict[ValueKind, Callable[[Any, CodecOptions], Any]] = {
    ValueKind.BOOL: _coerce_bool,
    ValueKind.INT: _coerce_int,
    ValueKind.DECIMAL: _coerce_decimal,
    ValueKind.STRING: _passthrough,
    ValueKind.DATE: _passthrough,
}


def coerce_cell(
    kind: ValueKind,
    raw: Any,
    options: Optional[CodecOptions] = None,
) -> Tuple[Any, bool]:
    """
    Converte uma célula crua para o value kind declarado.

    Returns:
        (valor, failed): `failed` é True quando uma célula não vazia
        (e diferente do marcador "-") degradou para None.
    """
    opts = options or CodecOptions()
    value = COERCERS[kind](raw, opts)
    failed = value is None and not _is_blank(raw) and str(raw).strip() != "-"
    return value, failed


def render_cell(value: Any) -> Any:
    """Representação de um valor de registro para escrita na planilha."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return value
    return str(value)
