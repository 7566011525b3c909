"""Materialização de entidades a partir de um schema v1 validado."""

from __future__ import annotations

from dataclasses import make_dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from ..metadata.fields import SheetRecord, ValueKind, column
from ..metadata.registry import MetadataRegistry, resolve_registry
from .schema import SheetSchemaV1


_ANNOTATIONS = {
    ValueKind.STRING: Optional[str],
    ValueKind.INT: Optional[int],
    ValueKind.DECIMAL: Optional[Decimal],
    ValueKind.BOOL: Optional[bool],
    ValueKind.DATE: Optional[str],
}


def build_entities(
    schema: SheetSchemaV1,
    registry: Optional[MetadataRegistry] = None,
    *,
    module: Optional[str] = None,
) -> Dict[str, type]:
    """
    Cria uma dataclass por entidade e registra cada uma no registry.

    Entidades sem `base` derivam de `SheetRecord`. O retorno preserva a
    ordem de declaração do schema.
    """
    reg = resolve_registry(registry)
    built: Dict[str, type] = {}

    for ent in schema.entities:
        base = built[ent["base"]] if ent.get("base") else SheetRecord

        fields: List[Tuple[str, Any, Any]] = []
        for col in ent["columns"]:
            kind = ValueKind(col["kind"])
            fields.append(
                (
                    col["attribute"],
                    _ANNOTATIONS[kind],
                    column(col["header"], kind=kind, role=col["role"], order=col["order"], note=col["note"]),
                )
            )

        cls = make_dataclass(ent["name"], fields, bases=(base,))
        if module:
            cls.__module__ = module
        reg.register(cls)
        built[ent["name"]] = cls

    return built
