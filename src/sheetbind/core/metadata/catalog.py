# src/sheetbind/core/metadata/catalog.py
"""
Catálogo de headers.

Tabela header → {value_kind, role} consultada pelo scanner quando uma
coluna é declarada apenas pelo nome (`column("Pay")`). Permite que várias
entidades compartilhem a definição de um mesmo header.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Union

from .errors import InvalidColumnDeclarationError
from .fields import FieldRole, ValueKind, _as_kind, _as_role


@dataclass(frozen=True)
class HeaderSpec:
    value_kind: ValueKind
    role: FieldRole = FieldRole.INPUT
    note: Optional[str] = None


class HeaderCatalog:
    def __init__(self, entries: Optional[Mapping[str, Any]] = None) -> None:
        self._entries: Dict[str, HeaderSpec] = {}
        for header, spec in (entries or {}).items():
            if isinstance(spec, HeaderSpec):
                self._entries[self._key(header)] = spec
            elif isinstance(spec, Mapping):
                self.define(
                    header,
                    spec.get("kind"),
                    role=spec.get("role") or FieldRole.INPUT,
                    note=spec.get("note"),
                )
            else:
                # forma curta: {"Pay": "decimal"}
                self.define(header, spec)

    @staticmethod
    def _key(header: Any) -> str:
        if not isinstance(header, str) or not header.strip():
            raise InvalidColumnDeclarationError("catalog header must be a non-empty string")
        return header.strip()

    def define(
        self,
        header: str,
        kind: Union[ValueKind, str, None],
        *,
        role: Union[FieldRole, str] = FieldRole.INPUT,
        note: Optional[str] = None,
    ) -> HeaderSpec:
        value_kind = _as_kind(kind)
        if value_kind is None:
            raise InvalidColumnDeclarationError(f"catalog header '{header}' has no value kind")
        spec = HeaderSpec(value_kind=value_kind, role=_as_role(role) or FieldRole.INPUT, note=note)
        self._entries[self._key(header)] = spec
        return spec

    def lookup(self, header: str) -> Optional[HeaderSpec]:
        return self._entries.get(str(header).strip())

    def __contains__(self, header: object) -> bool:
        return isinstance(header, str) and header.strip() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
