"""
SheetBind — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros reportados pelo SheetBind.
Erros de dados e de mapeamento são artefatos de domínio: são devolvidos
como payloads estruturados (ou mensagens derivadas deles) e nunca
interrompem um decode/encode.

Tipos de erro (v1):
    - MAPPING_ERROR     → header de um campo ausente entre os disponíveis
    - ORDERING_CONFLICT → posição explícita ou nome de sheet duplicado
    - COERCION_FAILURE  → célula não interpretável no value kind declarado
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SheetErrorPayload:
    """
    Um problema de mapeamento, ordenação ou coerção, como dado.

    `type` é um dos códigos abaixo; `details` carrega entidade, header,
    sheet ou linha envolvidos; `hint` diz onde corrigir (planilha ou
    declaração).
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return self.message


# Códigos (v1)

MAPPING_ERROR = "MAPPING_ERROR"
ORDERING_CONFLICT = "ORDERING_CONFLICT"
COERCION_FAILURE = "COERCION_FAILURE"


# Fábricas: uma por mensagem

def mapping_error(
    *,
    entity: str,
    attribute: str,
    header: str,
    catalog: str = "available headers",
    hint: str = "Add this header to the available set or update the column declaration.",
) -> SheetErrorPayload:
    return SheetErrorPayload(
        type=MAPPING_ERROR,
        message=(
            f"Property '{attribute}' in entity '{entity}' references header "
            f"'{header}' which is not available in {catalog}."
        ),
        details={"entity": entity, "attribute": attribute, "header": header},
        hint=hint,
    )


def sheet_not_available(
    *,
    workbook: str,
    attribute: str,
    sheet: str,
    catalog: str = "available sheets",
    hint: str = "Add this sheet to the available set or update the sheet declaration.",
) -> SheetErrorPayload:
    return SheetErrorPayload(
        type=MAPPING_ERROR,
        message=(
            f"Property '{attribute}' in entity '{workbook}' references sheet "
            f"'{sheet}' which is not available in {catalog}."
        ),
        details={"entity": workbook, "attribute": attribute, "sheet": sheet},
        hint=hint,
    )


def duplicate_order(*, workbook: str, order: int) -> SheetErrorPayload:
    return SheetErrorPayload(
        type=ORDERING_CONFLICT,
        message=(
            f"Order {order} is used multiple times in entity '{workbook}'. "
            f"Each sheet declaration must have a unique order value."
        ),
        details={"entity": workbook, "order": order},
        hint="Give every ordered sheet a distinct position.",
    )


def duplicate_column_order(*, entity: str, order: int) -> SheetErrorPayload:
    return SheetErrorPayload(
        type=ORDERING_CONFLICT,
        message=(
            f"Order {order} is used multiple times in entity '{entity}'. "
            f"Each column declaration must have a unique order value."
        ),
        details={"entity": entity, "order": order},
        hint="Give every ordered column a distinct position.",
    )


def duplicate_sheet_name(*, workbook: str, sheet: str) -> SheetErrorPayload:
    return SheetErrorPayload(
        type=ORDERING_CONFLICT,
        message=(
            f"Sheet name '{sheet}' is used multiple times in entity '{workbook}'. "
            f"Each sheet declaration must reference a unique sheet name."
        ),
        details={"entity": workbook, "sheet": sheet},
        hint="Remove the duplicated sheet declaration.",
    )


def coercion_failure(
    *,
    header: str,
    value_kind: str,
    raw_value: Any,
    row: Optional[int] = None,
) -> SheetErrorPayload:
    return SheetErrorPayload(
        type=COERCION_FAILURE,
        message=f"Value '{raw_value}' in column '{header}' is not a valid {value_kind}",
        details={
            "header": header,
            "value_kind": value_kind,
            "raw_value": raw_value if raw_value is None else str(raw_value),
            "row": row,
        },
        hint="Fix the cell in the sheet; the field was left empty.",
    )
