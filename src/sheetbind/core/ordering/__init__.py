# src/sheetbind/core/ordering/__init__.py
"""
Resolução de ordem canônica.

- columns → ordem de colunas derivada da forma da entidade
- sheets  → merge de sheets com e sem posição explícita
"""

from .columns import (  # noqa: F401
    apply_column_order,
    get_column_order,
    get_column_order_with_fallback,
    validate_column_order,
    validate_header_mapping,
)
from .sheets import (  # noqa: F401
    declaration_order,
    get_sheet_index,
    get_sheet_order,
    is_valid_sheet_name,
    resolve_sheet_order,
    scan_workbook,
    validate_sheet_mapping,
    validate_sheet_names,
)
