# src/sheetbind/core/__init__.py
"""
Core do SheetBind.

Este pacote contém a implementação canônica e independente de backend do
mapeamento entre registros tipados e planilhas.

O core é projetado para ser:
    - determinístico (a ordem depende apenas da forma dos tipos)
    - testável de forma isolada
    - livre de I/O com o backend

Componentes principais:
    - metadata   → descriptors de colunas e sheets, registry de entidades
    - ordering   → ColumnOrderResolver e SheetOrderResolver
    - headers    → HeaderAligner e mensagens de diagnóstico
    - codec      → RecordCodec (decode/encode, coerção, pandas)
    - config     → resolução de configuração (merge, hashing)
    - schema     → entidades declaradas em arquivo
    - context    → SyncContext (eventos e warnings estruturados)
    - validation → ValidationResult

Limites explícitos:
    - Não depende de clientes de API de planilhas
    - Não interpreta fórmulas
"""
