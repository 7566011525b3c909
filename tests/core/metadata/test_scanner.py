from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

import pytest

from sheetbind.core.metadata import (
    FieldRole,
    HeaderCatalog,
    InvalidColumnDeclarationError,
    SheetRecord,
    ValueKind,
    column,
    scan_entity,
)
from tests._entities import (
    ADDRESS_HEADERS,
    AddressEntity,
    AmountEntity,
    NoColumnsEntity,
    VisitEntity,
)


def test_scan_follows_inheritance_base_first() -> None:
    descriptor = scan_entity(AddressEntity)
    assert list(descriptor.headers) == ADDRESS_HEADERS


def test_scan_records_owner_and_declared_index() -> None:
    descriptor = scan_entity(AddressEntity)
    trips = descriptor.field_for("Trips")
    address = descriptor.field_for("Address")

    assert trips.owner == "VisitEntity"
    assert trips.declared_index == 0
    assert trips.attribute == "trips"
    assert address.owner == "AddressEntity"
    assert descriptor.field_for("Cash").declared_index == 4


def test_untagged_fields_are_not_columns() -> None:
    descriptor = scan_entity(VisitEntity)
    attributes = [fd.attribute for fd in descriptor]
    assert "row_id" not in attributes
    assert "saved" not in attributes


def test_entity_without_columns_yields_empty_descriptor() -> None:
    descriptor = scan_entity(NoColumnsEntity)
    assert len(descriptor) == 0
    assert descriptor.headers == ()


def test_roles_split_input_and_output() -> None:
    descriptor = scan_entity(AmountEntity)
    assert [fd.header_name for fd in descriptor.output_fields] == ["Total"]
    assert [fd.header_name for fd in descriptor.input_fields] == ["Pay", "Tips", "Bonus", "Cash"]


def test_duplicate_header_keeps_most_base_occurrence() -> None:
    @dataclass
    class Base(SheetRecord):
        pay: Optional[Decimal] = column("Pay", kind="decimal")

    @dataclass
    class Derived(Base):
        pay_again: Optional[str] = column("Pay", kind="string")
        note: Optional[str] = column("Note", kind="string")

    descriptor = scan_entity(Derived)
    assert list(descriptor.headers) == ["Pay", "Note"]
    assert descriptor.field_for("Pay").owner == "Base"
    assert descriptor.field_for("Pay").value_kind is ValueKind.DECIMAL


def test_redefined_attribute_keeps_most_base_declaration() -> None:
    @dataclass
    class Renamed(AmountEntity):
        pay: Optional[Decimal] = column("Payment", kind="decimal")

    descriptor = scan_entity(Renamed)

    assert list(descriptor.headers) == ["Pay", "Tips", "Bonus", "Total", "Cash"]
    assert [fd.attribute for fd in descriptor].count("pay") == 1
    assert descriptor.field_for("Payment") is None
    assert descriptor.field_for("Pay").owner == "AmountEntity"


def test_field_for_strips_header() -> None:
    descriptor = scan_entity(AmountEntity)
    assert descriptor.field_for("  Pay ").attribute == "pay"
    assert descriptor.field_for("Unknown") is None
    assert descriptor.field_for(None) is None


def test_catalog_supplies_kind_and_role() -> None:
    @dataclass
    class Catalogued(SheetRecord):
        pay: Optional[Decimal] = column("Pay")
        total: Optional[Decimal] = column("Total")

    catalog = HeaderCatalog({"Pay": "decimal", "Total": {"kind": "decimal", "role": "output"}})
    descriptor = scan_entity(Catalogued, catalog)

    assert descriptor.field_for("Pay").value_kind is ValueKind.DECIMAL
    assert descriptor.field_for("Pay").role is FieldRole.INPUT
    assert descriptor.field_for("Total").role is FieldRole.OUTPUT


def test_column_without_kind_and_catalog_raises() -> None:
    @dataclass
    class Untyped(SheetRecord):
        pay: Optional[Decimal] = column("Pay")

    with pytest.raises(InvalidColumnDeclarationError):
        scan_entity(Untyped)


def test_blank_header_is_rejected_at_declaration() -> None:
    with pytest.raises(InvalidColumnDeclarationError):
        column("   ", kind="string")


def test_unknown_kind_is_rejected_at_declaration() -> None:
    with pytest.raises(InvalidColumnDeclarationError):
        column("Pay", kind="money")


def test_explicit_order_is_carried() -> None:
    @dataclass
    class Ordered(SheetRecord):
        pay: Optional[Decimal] = column("Pay", kind="decimal", order=3)

    assert scan_entity(Ordered).field_for("Pay").explicit_order == 3


def test_scan_rejects_non_class() -> None:
    with pytest.raises(TypeError):
        scan_entity(AmountEntity())
