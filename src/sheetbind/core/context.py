# src/sheetbind/core/context.py
"""
Contexto de sincronização compartilhado do SheetBind.

Este módulo define o `SyncContext`, a estrutura explícita que o chamador
passa ao codec e ao mapper para coletar o que aconteceu durante uma
sincronização com o backend de planilhas.

O SyncContext é o único meio de:
    - registro de logs estruturados (eventos)
    - coleta de warnings não fatais (ex.: falhas de coerção) por etapa

Princípios fundamentais:
    - Isolamento por sincronização (cada sync possui seu próprio contexto)
    - Nenhum estado global: o core permanece puro sem um contexto
    - Eventos são dicts serializáveis

Invariantes:
    - Logs sempre incluem `sync_id` e `step_id`
    - Warnings são agrupados por `step_id`

Limites explícitos:
    - Não executa I/O com o backend
    - Não persiste eventos automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .config.hashing import compute_config_hash


@dataclass
class SyncContext:
    """
    Contexto de uma sincronização entre registros tipados e uma planilha.

    Campos canônicos:
    - sync_id: identificador da sincronização
    - created_at: timestamp UTC de criação do contexto
    - config: configuração efetiva (ver `core.config`)
    - meta: metadados livres do chamador (ex.: spreadsheet id)
    - events: log estruturado de eventos
    - warnings: warnings por step_id
    """

    sync_id: str
    created_at: datetime
    config: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @property
    def config_hash(self) -> str:
        return compute_config_hash(self.config)

    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        """Registra um evento; campos extras não sobrescrevem os canônicos."""
        event: Dict[str, Any] = dict(extra)
        event.update(
            sync_id=self.sync_id,
            step_id=step_id,
            level=level,
            message=message,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        self.warnings.setdefault(step_id, []).append(message)

    def events_for(self, step_id: str, level: Optional[str] = None) -> List[Dict[str, Any]]:
        matches = (e for e in self.events if e["step_id"] == step_id)
        return [e for e in matches if level is None or e["level"] == level]
