# src/sheetbind/core/headers/__init__.py
"""Alinhamento de headers e mensagens de diagnóstico."""

from .aligner import check_sheet_headers, column_letter, find_extra_columns, parse_header  # noqa: F401
from .messages import (  # noqa: F401
    Message,
    MessageLevel,
    MessageType,
    create_error_message,
    create_info_message,
    create_warning_message,
)
