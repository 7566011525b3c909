"""
Schema canônico de entidades — v1.

Estrutura esperada:

    schema_version: "1.0"
    headers:                      # opcional: catálogo de headers
      Pay: {kind: decimal}
      Total: {kind: decimal, role: output}
    entities:
      - name: Amount
        columns:
          - {header: Pay}
          - {header: Total}
          - {header: Cash, kind: decimal, attribute: cash}
      - name: Visit
        base: Amount              # opcional: entidade declarada antes
        columns:
          - {header: Trips, kind: int, order: 0}

Colunas sem `kind` precisam de uma entrada em `headers`.
"""

from __future__ import annotations

import keyword
import re
from dataclasses import dataclass
from typing import Any, Dict, List

from ..metadata.fields import FieldRole, ValueKind
from .errors import SchemaValidationError


_ALLOWED_KINDS = {k.value for k in ValueKind}
_ALLOWED_ROLES = {r.value for r in FieldRole}
_NON_WORD = re.compile(r"\W+")


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise SchemaValidationError(msg)


def attribute_for(header: str) -> str:
    """Nome de atributo Python derivado de um header ("First Trip" → "first_trip")."""
    name = _NON_WORD.sub("_", header.strip()).strip("_").lower()
    if not name or name[0].isdigit() or keyword.iskeyword(name):
        name = f"col_{name}"
    return name


@dataclass(frozen=True)
class SheetSchemaV1:
    """Representação interna explícita do schema v1."""

    schema_version: str
    headers: Dict[str, Dict[str, Any]]
    entities: List[Dict[str, Any]]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": self.schema_version,
            "headers": {h: dict(spec) for h, spec in self.headers.items()},
            "entities": [
                {**e, "columns": [dict(c) for c in e["columns"]]} for e in self.entities
            ],
        }


def _validate_headers(data: Any) -> Dict[str, Dict[str, Any]]:
    headers = data or {}
    _expect(isinstance(headers, dict), "headers must be a mapping")

    out: Dict[str, Dict[str, Any]] = {}
    for header, spec in headers.items():
        _expect(_is_non_empty_str(header), "headers keys must be non-empty strings")
        if isinstance(spec, str):
            spec = {"kind": spec}
        _expect(isinstance(spec, dict), f"headers.{header} must be a mapping")
        kind = spec.get("kind")
        _expect(kind in _ALLOWED_KINDS, f"headers.{header}.kind must be one of {sorted(_ALLOWED_KINDS)}")
        role = spec.get("role", FieldRole.INPUT.value)
        _expect(role in _ALLOWED_ROLES, f"headers.{header}.role must be one of {sorted(_ALLOWED_ROLES)}")
        out[header.strip()] = {"kind": kind, "role": role}
    return out


def _validate_column(
    col: Any,
    where: str,
    catalog: Dict[str, Dict[str, Any]],
) -> Dict[str, Any]:
    _expect(isinstance(col, dict), f"{where} must be a mapping")

    header = col.get("header")
    _expect(_is_non_empty_str(header), f"{where}.header is required")
    header = header.strip()

    entry = catalog.get(header, {})
    kind = col.get("kind", entry.get("kind"))
    _expect(kind is not None, f"{where}.kind is required (header '{header}' is not in headers)")
    _expect(kind in _ALLOWED_KINDS, f"{where}.kind must be one of {sorted(_ALLOWED_KINDS)}")

    role = col.get("role", entry.get("role", FieldRole.INPUT.value))
    _expect(role in _ALLOWED_ROLES, f"{where}.role must be one of {sorted(_ALLOWED_ROLES)}")

    order = col.get("order")
    _expect(
        order is None or (isinstance(order, int) and not isinstance(order, bool)),
        f"{where}.order must be an int",
    )

    attribute = col.get("attribute") or attribute_for(header)
    _expect(
        isinstance(attribute, str) and attribute.isidentifier() and not keyword.iskeyword(attribute),
        f"{where}.attribute must be a valid Python identifier",
    )
    _expect(attribute not in {"row_id", "saved"}, f"{where}.attribute '{attribute}' is reserved")

    return {
        "header": header,
        "kind": kind,
        "role": role,
        "order": order,
        "attribute": attribute,
        "note": col.get("note"),
    }


def validate_schema(data: Any) -> SheetSchemaV1:
    """Valida e materializa um schema v1."""
    _expect(isinstance(data, dict), "schema must be a mapping/dict")

    sv = data.get("schema_version")
    _expect(_is_non_empty_str(sv), "schema_version is required")
    _expect(str(sv) == "1.0", "schema_version must be '1.0' in v1")

    catalog = _validate_headers(data.get("headers"))

    entities = data.get("entities")
    _expect(isinstance(entities, list) and entities, "entities must be a non-empty list")

    seen_entities: List[str] = []
    entity_attributes: Dict[str, set] = {}
    normalized: List[Dict[str, Any]] = []
    for i, ent in enumerate(entities):
        _expect(isinstance(ent, dict), f"entities[{i}] must be a mapping")
        name = ent.get("name")
        _expect(_is_non_empty_str(name) and name.isidentifier(), f"entities[{i}].name must be a valid identifier")
        _expect(name not in seen_entities, f"duplicate entity name: {name}")

        base = ent.get("base")
        if base is not None:
            _expect(base in seen_entities, f"entities[{i}].base references unknown or later entity: {base}")

        columns = ent.get("columns") or []
        _expect(isinstance(columns, list), f"entities[{i}].columns must be a list")

        headers_seen = set()
        attributes_seen = set(entity_attributes.get(base, set())) if base else set()
        cols: List[Dict[str, Any]] = []
        for j, col in enumerate(columns):
            c = _validate_column(col, f"entities[{i}].columns[{j}]", catalog)
            _expect(c["header"] not in headers_seen, f"duplicate header in entity {name}: {c['header']}")
            _expect(c["attribute"] not in attributes_seen, f"duplicate attribute in entity {name}: {c['attribute']}")
            headers_seen.add(c["header"])
            attributes_seen.add(c["attribute"])
            cols.append(c)

        seen_entities.append(name)
        entity_attributes[name] = attributes_seen
        normalized.append({"name": name, "base": base, "columns": cols})

    return SheetSchemaV1(schema_version=str(sv), headers=catalog, entities=normalized)
