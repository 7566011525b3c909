# tests/conftest.py
"""
Fixtures compartilhados para testes do SheetBind.

Este módulo define fixtures reutilizáveis que fornecem:
- um MetadataRegistry novo por teste
- um SyncContext determinístico
- YAMLs de configuração semelhantes ao uso real

Decisões arquiteturais:
    - Entidades de exemplo vivem em `tests/_entities.py` (identidade estável)
    - Cada teste recebe um registry próprio; nada depende do registry global
    - Fixtures de configuração são strings para evitar I/O implícito

Invariantes:
    - Nenhuma fixture realiza I/O
    - Dados retornados são determinísticos e isolados

Este módulo existe como infraestrutura de teste e não
como validação funcional da biblioteca.
"""

from datetime import datetime, timezone

import pytest


# =====================================================
# Fixtures
# =====================================================

@pytest.fixture
def registry():
    """MetadataRegistry isolado por teste."""
    from sheetbind.core.metadata import MetadataRegistry

    return MetadataRegistry()


@pytest.fixture
def sync_ctx():
    """SyncContext determinístico (sync_id e created_at fixos)."""
    from sheetbind.core.context import SyncContext

    return SyncContext(
        sync_id="sync-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config={},
        meta={"source": "pytest"},
    )


@pytest.fixture
def shift_rows():
    """Header + linhas cruas de uma sheet de turnos."""
    return [
        ["Date", "Service", "Number", "Active", "Pay"],
        ["2024-01-01", "Uber", "1", "TRUE", "$1,234.50"],
        ["", "Lyft", "2", "FALSE", "10"],
        ["2024-01-02", "Lyft", "3", "false", "-"],
    ]


@pytest.fixture
def config_defaults_yaml() -> str:
    return """\
codec:
  key_column: 0
  true_token: "TRUE"
headers:
  report_extra_columns: false
"""


@pytest.fixture
def config_local_yaml() -> str:
    return """\
codec:
  true_token: "YES"
headers:
  report_extra_columns: true
"""
