# src/sheetbind/core/metadata/registry.py
"""
Registro explícito de entidades mapeadas.

Este módulo define o `MetadataRegistry`, o mapa de identidade de tipo para
o TypeDescriptor correspondente. O registro substitui qualquer cache global
implícito: resolvedores e codec recebem um registry (ou usam o default).

Responsabilidades do módulo:
    - Registrar entidades explicitamente (`register`, também como decorator)
    - Construir e memorizar descriptors sob demanda (`descriptor_for`)
    - Preservar a ordem de registro

Decisões arquiteturais:
    - Entradas são append-only; um descriptor nunca é substituído
    - A construção é determinística, então construtores concorrentes
      produzem valores idênticos (sem lock)
    - Registrar um descriptor diferente para o mesmo tipo é erro fatal

Invariantes:
    - Cada tipo possui no máximo um descriptor
    - `registered()` reflete exatamente a ordem de registro

Limites explícitos:
    - Não lê planilhas
    - Não valida headers disponíveis (ver `ordering.columns`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .catalog import HeaderCatalog
from .errors import DuplicateEntityError
from .fields import TypeDescriptor
from .scanner import scan_entity


@dataclass
class MetadataRegistry:
    """
    Registro canônico de entidades → TypeDescriptor.

    Um catálogo de headers opcional é usado em todos os scans feitos por
    este registry.
    """

    catalog: Optional[HeaderCatalog] = None

    _descriptors: Dict[type, TypeDescriptor] = field(default_factory=dict, init=False, repr=False)
    _order: List[type] = field(default_factory=list, init=False, repr=False)

    def register(self, cls: type, descriptor: Optional[TypeDescriptor] = None) -> type:
        if not isinstance(cls, type):
            raise TypeError(f"register expects a class, got {type(cls).__name__}")

        built = descriptor if descriptor is not None else scan_entity(cls, self.catalog)
        existing = self._descriptors.get(cls)
        if existing is not None:
            if existing != built:
                raise DuplicateEntityError(
                    f"Entity '{cls.__name__}' is already registered with a different descriptor"
                )
            return cls

        self._store(cls, built)
        return cls

    def descriptor_for(self, cls: type) -> TypeDescriptor:
        existing = self._descriptors.get(cls)
        if existing is not None:
            return existing
        built = scan_entity(cls, self.catalog)
        return self._store(cls, built)

    def _store(self, cls: type, descriptor: TypeDescriptor) -> TypeDescriptor:
        # setdefault: se outro construtor chegou antes, o valor dele prevalece
        stored = self._descriptors.setdefault(cls, descriptor)
        if stored is descriptor:
            self._order.append(cls)
        return stored

    def registered(self) -> List[type]:
        return list(self._order)

    def __contains__(self, cls: object) -> bool:
        return cls in self._descriptors


DEFAULT_REGISTRY = MetadataRegistry()


def resolve_registry(registry: Optional[MetadataRegistry]) -> MetadataRegistry:
    return registry if registry is not None else DEFAULT_REGISTRY
