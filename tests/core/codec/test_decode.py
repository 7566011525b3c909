from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from sheetbind.core.codec import CodecOptions, decode
from sheetbind.core.codec.records import DECODE_STEP
from sheetbind.core.metadata import SheetRecord, ValueKind, column
from tests._entities import AmountEntity, ShiftEntity


@dataclass
class NoteEntity(SheetRecord):
    name: Optional[str] = column("Name", kind=ValueKind.STRING)
    note: str = column("Note", kind=ValueKind.STRING, default="n/a")
    count: int = column("Count", kind=ValueKind.INT, default=0)


def test_decode_skips_rows_with_blank_key(shift_rows, registry) -> None:
    records = decode(shift_rows, ShiftEntity, registry=registry)

    assert [r.row_id for r in records] == [2, 4]
    assert all(r.saved for r in records)


def test_decode_coerces_by_value_kind(shift_rows, registry) -> None:
    first, second = decode(shift_rows, ShiftEntity, registry=registry)

    assert first.date == "2024-01-01"
    assert first.service == "Uber"
    assert first.number == 1
    assert first.active is True
    assert first.pay == Decimal("1234.50")

    assert second.active is False
    assert second.pay is None


def test_decode_reads_columns_by_header_name(registry) -> None:
    rows = [
        ["Cash", "Pay", "Unknown"],
        ["3", "1.50", "ignored"],
    ]
    (record,) = decode(rows, AmountEntity, registry=registry)

    assert record.pay == Decimal("1.50")
    assert record.cash == Decimal("3")
    assert record.tips is None


def test_decode_output_columns_are_read(registry) -> None:
    rows = [["Pay", "Total"], ["1", "10"]]
    (record,) = decode(rows, AmountEntity, registry=registry)
    assert record.total == Decimal("10")


def test_missing_cells_keep_dataclass_defaults(registry) -> None:
    rows = [
        ["Name", "Note", "Count"],
        ["alpha"],
        ["beta", "", "x"],
        ["gamma", "hello", "4"],
    ]
    alpha, beta, gamma = decode(rows, NoteEntity, registry=registry)

    assert (alpha.note, alpha.count) == ("n/a", 0)
    assert (beta.note, beta.count) == ("", 0)
    assert (gamma.note, gamma.count) == ("hello", 4)


def test_decode_empty_inputs(registry) -> None:
    assert decode(None, ShiftEntity, registry=registry) == []
    assert decode([], ShiftEntity, registry=registry) == []
    assert decode([["Date", "Pay"]], ShiftEntity, registry=registry) == []


def test_key_column_option(registry) -> None:
    rows = [
        ["Date", "Service"],
        ["2024-01-01", ""],
        ["", "Uber"],
    ]
    records = decode(rows, ShiftEntity, registry=registry, options=CodecOptions(key_column=1))

    assert [r.row_id for r in records] == [3]
    assert records[0].service == "Uber"


def test_true_token_option(registry) -> None:
    rows = [["Date", "Active"], ["2024-01-01", "yes"]]
    (record,) = decode(rows, ShiftEntity, registry=registry, options=CodecOptions(true_token="YES"))
    assert record.active is True


def test_coercion_failures_are_recorded_in_context(registry, sync_ctx) -> None:
    rows = [
        ["Date", "Number", "Pay"],
        ["2024-01-01", "1.5", "abc"],
        ["", "2", "2"],
        ["2024-01-02", "3", "-"],
    ]
    records = decode(rows, ShiftEntity, registry=registry, context=sync_ctx)

    assert records[0].number is None
    assert records[0].pay is None
    assert sync_ctx.warnings[DECODE_STEP] == [
        "Value '1.5' in column 'Number' is not a valid int",
        "Value 'abc' in column 'Pay' is not a valid decimal",
    ]

    failures = sync_ctx.events_for(DECODE_STEP, level="warning")
    assert [e["error"]["details"]["row"] for e in failures] == [2, 2]
    assert failures[0]["error"]["type"] == "COERCION_FAILURE"

    (summary,) = sync_ctx.events_for(DECODE_STEP, level="info")
    assert summary["entity"] == "ShiftEntity"
    assert summary["decoded"] == 2
    assert summary["skipped"] == 1
    assert summary["sync_id"] == "sync-test-001"
