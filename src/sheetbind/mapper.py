# src/sheetbind/mapper.py
"""
SheetMapper — fachada de uma entidade sobre uma sheet.

Este módulo conecta registry, configuração e `SyncContext` aos componentes
do core para uma entidade específica, oferecendo o ciclo completo usado
por uma camada de sincronização externa:

    headers canônicos → validação do header lido → decode → encode

Responsabilidades:
    - Expor a ordem canônica e as visões INPUT/OUTPUT
    - Delegar decode/encode ao codec com as opções configuradas
    - Produzir diagnósticos de header e de estrutura

Decisões arquiteturais:
    - A configuração é resolvida sobre `DEFAULT_CONFIG` uma única vez
    - Diagnósticos são dados (`Message`, `ValidationResult`), não exceções
    - O contexto é opcional; sem ele o mapper não registra eventos

Limites explícitos:
    - Não executa I/O com o backend
    - Não interpreta fórmulas nem formatação
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from .core.codec.coercion import coerce_cell
from .core.codec.options import CodecOptions
from .core.codec.records import decode, encode
from .core.config.loader import resolve_config
from .core.context import SyncContext
from .core.headers.aligner import check_sheet_headers, find_extra_columns, parse_header
from .core.headers.messages import Message
from .core.metadata.fields import TypeDescriptor
from .core.metadata.registry import MetadataRegistry, resolve_registry
from .core.validation import ValidationResult


HEADERS_STEP = "mapper.headers"


class SheetMapper:
    def __init__(
        self,
        cls: type,
        registry: Optional[MetadataRegistry] = None,
        config: Optional[Dict[str, Any]] = None,
        context: Optional[SyncContext] = None,
    ) -> None:
        self.cls = cls
        self.registry = resolve_registry(registry)
        self.config = resolve_config(config if config is not None else (context.config if context else None))
        self.context = context
        self.options = CodecOptions.from_config(self.config)

    @property
    def descriptor(self) -> TypeDescriptor:
        return self.registry.descriptor_for(self.cls)

    # -----------------------------
    # Ordem canônica
    # -----------------------------
    def headers(self) -> List[str]:
        return list(self.descriptor.headers)

    def input_headers(self) -> List[str]:
        return [fd.header_name for fd in self.descriptor.input_fields]

    def output_headers(self) -> List[str]:
        return [fd.header_name for fd in self.descriptor.output_fields]

    # -----------------------------
    # Codec
    # -----------------------------
    def decode(self, rows: Optional[Iterable[Sequence[Any]]]) -> List[Any]:
        return decode(rows, self.cls, registry=self.registry, options=self.options, context=self.context)

    def encode(self, records: Iterable[Any], header_row: Optional[Sequence[Any]] = None) -> List[List[Any]]:
        """Codifica alinhado ao header do backend (ou à ordem canônica, se omitido)."""
        headers = list(header_row) if header_row is not None else self.headers()
        return encode(records, headers, registry=self.registry, context=self.context)

    # -----------------------------
    # Diagnósticos
    # -----------------------------
    def check_headers(self, observed_row: Optional[Sequence[Any]], sheet_name: Optional[str] = None) -> List[Message]:
        expected = self.headers()
        messages = check_sheet_headers(observed_row, expected, sheet_name)

        headers_cfg = self.config.get("headers") or {}
        if headers_cfg.get("report_extra_columns"):
            messages.extend(find_extra_columns(observed_row, expected, sheet_name))

        if self.context is not None:
            for m in messages:
                self.context.log(step_id=HEADERS_STEP, level=m.level.value.lower(), message=m.message)
                if not m.is_error:
                    self.context.add_warning(step_id=HEADERS_STEP, message=m.message)
        return messages

    def validate_sheet(self, header_row: Optional[Sequence[Any]]) -> ValidationResult:
        result = ValidationResult()
        if header_row is None:
            result.add_error("Header row is null")
            return result

        actual = [("" if h is None else str(h).strip()) for h in header_row]
        actual_lower = {h.lower() for h in actual}
        expected = self.headers()
        expected_lower = {h.lower() for h in expected}

        for header in expected:
            if header.lower() not in actual_lower:
                result.add_error(f"Missing expected header: '{header}'")

        for header in actual:
            if header and header.lower() not in expected_lower:
                result.add_warning(f"Unexpected header found: '{header}'")

        return result

    def validate_structure(self, rows: Optional[Sequence[Sequence[Any]]], min_rows: int = 0) -> ValidationResult:
        result = ValidationResult()
        if not rows:
            result.add_error("Sheet data is empty")
            return result

        result.merge(self.validate_sheet(rows[0]))

        data_rows = len(rows) - 1
        if data_rows < min_rows:
            result.add_error(f"Sheet has {data_rows} data rows, but expected at least {min_rows}")

        expected_columns = len(rows[0])
        for i, row in enumerate(rows[1:], start=2):
            size = len(row or [])
            if size != expected_columns:
                result.add_warning(f"Row {i} has {size} columns, expected {expected_columns}")

        return result

    def validate_data_types(
        self,
        sample_row: Optional[Sequence[Any]],
        header_row: Sequence[Any],
    ) -> ValidationResult:
        """Warning para cada célula não vazia que não converte no value kind da coluna."""
        result = ValidationResult()
        if sample_row is None:
            result.add_warning("No sample data row provided for type validation")
            return result

        positions = {name: index for index, name in reversed(list(parse_header(header_row).items()))}
        for fd in self.descriptor:
            index = positions.get(fd.header_name)
            if index is None or index >= len(sample_row):
                continue
            _, failed = coerce_cell(fd.value_kind, sample_row[index], self.options)
            if failed:
                result.add_warning(
                    f"Column '{fd.header_name}' contains data that cannot be converted to {fd.value_kind.value}"
                )
        return result
