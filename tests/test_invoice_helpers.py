from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from xion_invoice.errors import MissingField, MissingId, NonNumericId, NonPositiveAmount
from xion_invoice.models import LineItem
from xion_invoice.utils import (
    compute_total,
    format_amount,
    from_epoch_millis,
    parse_date,
    parse_invoice_id,
    to_epoch_millis,
    validate_draft,
)


def test_compute_total_treats_unparsable_prices_as_zero() -> None:
    items = [{"price": "10"}, {"price": ""}, {"price": "5.5"}]
    assert compute_total(items) == Decimal("15.5")


def test_compute_total_accepts_line_items_and_junk() -> None:
    items = [
        LineItem("a", "10"),
        LineItem("b", None),
        LineItem("c", "abc"),
        LineItem("d", "NaN"),
        LineItem("e", 2.25),
        {"name": "no price"},
    ]
    assert compute_total(items) == Decimal("12.25")


def test_compute_total_of_nothing_is_zero() -> None:
    assert compute_total([]) == 0


def test_compute_total_ignores_out_of_range_prices() -> None:
    items = [{"price": "1e1000000"}, {"price": "9e999999"}, {"price": "-1e1000000"}, {"price": "7"}]
    assert compute_total(items) == Decimal("7")
    assert compute_total([LineItem("a", "1e39"), LineItem("b", "1e38")]) == Decimal("1e38")


@pytest.mark.parametrize(
    "payer, description, due_date, field",
    [
        ("", "Work", "2024-12-25", "payer"),
        ("xion1payer", "  ", "2024-12-25", "description"),
        ("xion1payer", "Work", None, "due_date"),
        (None, "Work", "2024-12-25", "payer"),
    ],
)
def test_validate_draft_missing_field(payer, description, due_date, field) -> None:
    with pytest.raises(MissingField) as excinfo:
        validate_draft(payer, description, due_date, Decimal("30"))
    assert excinfo.value.field == field
    assert excinfo.value.message == "All fields are required."


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-1"), 0, "", "abc"])
def test_validate_draft_non_positive_amount(amount) -> None:
    with pytest.raises(NonPositiveAmount):
        validate_draft("xion1payer", "Work", "2024-12-25", amount)


def test_validate_draft_accepts_complete_draft() -> None:
    assert validate_draft("xion1payer", "Work", "2024-12-25", Decimal("0.01")) is None


def test_missing_field_wins_over_amount() -> None:
    with pytest.raises(MissingField):
        validate_draft("", "Work", "2024-12-25", 0)


@pytest.mark.parametrize("value, expected", [("42", 42), (" 7 ", 7), (3, 3), ("0", 0)])
def test_parse_invoice_id(value, expected) -> None:
    assert parse_invoice_id(value) == expected


@pytest.mark.parametrize("value", ["abc", "4.2", "-1", "1e3", "٣", True, -5])
def test_parse_invoice_id_rejects_non_numeric(value) -> None:
    with pytest.raises(NonNumericId):
        parse_invoice_id(value)


@pytest.mark.parametrize("value", ["", "   ", None])
def test_parse_invoice_id_requires_value(value) -> None:
    with pytest.raises(MissingId):
        parse_invoice_id(value)


@pytest.mark.parametrize(
    "amount, expected",
    [(Decimal("30"), "30"), (Decimal("30.0"), "30"), (Decimal("3E+1"), "30"), (Decimal("15.50"), "15.5"), (30, "30")],
)
def test_format_amount(amount, expected) -> None:
    assert format_amount(amount) == expected


def test_due_dates_are_epoch_milliseconds() -> None:
    assert to_epoch_millis("2024-12-25") == 1_735_084_800_000
    assert to_epoch_millis("12/25/2024") == 1_735_084_800_000
    assert to_epoch_millis(date(2024, 12, 25)) == 1_735_084_800_000
    assert to_epoch_millis("not a date") is None
    assert to_epoch_millis("") is None


def test_epoch_millis_round_trip() -> None:
    moment = datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc)
    assert from_epoch_millis(to_epoch_millis(moment)) == moment


def test_parse_date_assumes_utc_for_naive_values() -> None:
    parsed = parse_date(datetime(2024, 1, 2, 3, 4))
    assert parsed.tzinfo is timezone.utc
