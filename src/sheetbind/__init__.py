# src/sheetbind/__init__.py
"""
SheetBind — mapeamento bidirecional entre registros tipados e planilhas.

Este pacote raiz define o namespace público do SheetBind, uma biblioteca
que mantém registros Python fortemente tipados alinhados ao modelo plano e
posicional de linhas/colunas de um backend de planilhas.

Princípios centrais:
    - A forma da entidade é a única fonte da ordem canônica de colunas
    - Colunas calculadas pelo backend (fórmulas) têm a posição reservada
    - Diagnósticos de dados são devolvidos, nunca levantados

Arquitetura em alto nível:
    - core.metadata → declaração de colunas/sheets e registry de entidades
    - core.ordering → ordem canônica de colunas e de sheets
    - core.headers  → diff posicional de headers e mensagens
    - core.codec    → decode/encode de registros
    - core.config   → carregamento, merge e hashing de configuração
    - core.schema   → entidades declaradas em YAML/JSON
    - mapper        → fachada por entidade

Limites explícitos:
    - Não executa I/O com o backend (transporte/autenticação)
    - Não interpreta nem valida fórmulas
    - Não aplica formatação, cores ou proteção de células
"""

from .core.context import SyncContext
from .core.metadata import (
    DEFAULT_REGISTRY,
    FieldRole,
    HeaderCatalog,
    MetadataRegistry,
    SheetRecord,
    ValueKind,
    column,
    sheet,
)
from .mapper import SheetMapper

__all__ = [
    "DEFAULT_REGISTRY",
    "FieldRole",
    "HeaderCatalog",
    "MetadataRegistry",
    "SheetMapper",
    "SheetRecord",
    "SyncContext",
    "ValueKind",
    "column",
    "sheet",
]
