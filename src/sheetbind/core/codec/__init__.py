# src/sheetbind/core/codec/__init__.py
"""
Codec de registros.

- options   → `CodecOptions` (lidas de `codec.*` na configuração)
- coercion  → tabela ValueKind → parser
- records   → `decode` / `encode`
- frames    → ponte com pandas
"""

from .coercion import COERCERS, coerce_cell, render_cell  # noqa: F401
from .frames import frame_to_rows, records_to_frame  # noqa: F401
from .options import CodecOptions  # noqa: F401
from .records import decode, encode  # noqa: F401
