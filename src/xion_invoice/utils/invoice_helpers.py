"""
Helper functions for invoice amounts, validation, ids and dates.

Everything here is pure and synchronous so it can run before every submit
attempt without touching the network.
"""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from decimal import Decimal, InvalidOperation, Overflow, localcontext
from typing import Any, Iterable, Mapping

from xion_invoice.errors import MissingField, MissingId, NonNumericId, NonPositiveAmount

_ZERO = Decimal(0)

# Uint128 tops out below 10**39; larger magnitudes can never be paid.
_MAX_PRICE_EXPONENT = 38


def parse_price(value: Any) -> Decimal:
    """
    Parse a line item price, treating anything unparsable as zero.

    Args:
        value: Raw price as entered in a form (str, int, float, Decimal or None).

    Returns:
        The price as a finite Decimal, or zero. Prices of 10**39 or more are
        also read as zero.
    """
    if value is None or isinstance(value, bool):
        return _ZERO
    if isinstance(value, float):
        value = repr(value)
    try:
        price = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return _ZERO
    if not price.is_finite() or price.adjusted() > _MAX_PRICE_EXPONENT:
        return _ZERO
    return price


def compute_total(items: Iterable[Any]) -> Decimal:
    """
    Sum the prices of the given line items.

    Items may be LineItem objects or mappings with a "price" key. A missing
    or unparsable price counts as zero so the running total always reflects
    the current form state. A sum that leaves the Decimal range is zero.
    """
    total = _ZERO
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        ctx.traps[InvalidOperation] = False
        for item in items:
            if isinstance(item, Mapping):
                raw = item.get("price")
            else:
                raw = getattr(item, "price", None)
            total += parse_price(raw)
    return total if total.is_finite() else _ZERO


def validate_draft(payer: Any, description: Any, due_date: Any, amount: Any) -> None:
    """
    Validate the fields of a draft invoice before it is submitted.

    Raises:
        MissingField: If payer, description or due date is empty or absent.
        NonPositiveAmount: If the amount is zero, negative or not a number.
    """
    for name, value in (("payer", payer), ("description", description), ("due_date", due_date)):
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingField(name)
    if parse_price(amount) <= 0:
        raise NonPositiveAmount(amount)


def format_amount(amount: Decimal | int | str) -> str:
    """
    Return the canonical wire form of an amount.

    Trailing zeros and exponents are removed so that Decimal("30.0")
    and Decimal("3E+1") both serialize as "30".
    """
    value = Decimal(str(amount))
    if value == value.to_integral_value():
        return format(value.to_integral_value(), "f")
    return format(value.normalize(), "f")


def parse_invoice_id(value: Any) -> int:
    """
    Parse an invoice id entered by the user.

    Raises:
        MissingId: If the value is None or blank.
        NonNumericId: If the value is not a non-negative base-10 integer.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingId()
    if isinstance(value, bool):
        raise NonNumericId(value)
    if isinstance(value, int):
        if value < 0:
            raise NonNumericId(value)
        return value
    text = str(value).strip()
    if not text.isascii() or not text.isdigit():
        raise NonNumericId(value)
    return int(text)


def parse_date(value: str | date | datetime | None) -> datetime | None:
    """
    Parse a due date into a timezone-aware UTC datetime.

    Accepts datetime and date objects, ISO strings (as produced by an HTML
    date input) and m/d/Y strings. Naive values are taken to be UTC.

    Returns:
        datetime if parsing succeeds, None otherwise.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    else:
        parsed = _parse_date_str(value)
        if parsed is None:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_date_str(date_str: Any) -> datetime | None:
    if not isinstance(date_str, str):
        return None
    date_str = date_str.strip()
    if not date_str:
        return None

    for fmt in ("%m/%d/%Y", "%m/%d/%y"):
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            pass

    try:
        return datetime.fromisoformat(date_str)
    except (ValueError, TypeError):
        return None


def to_epoch_millis(value: str | date | datetime | None) -> int | None:
    """Convert a due date to integer epoch milliseconds, the on-chain unit."""
    parsed = parse_date(value)
    if parsed is None:
        return None
    return int(parsed.timestamp() * 1000)


def from_epoch_millis(millis: int) -> datetime:
    """Convert on-chain epoch milliseconds back into a UTC datetime."""
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)


def format_date(value: datetime | None) -> str:
    """Format a datetime for display or return the N/A label."""
    if not value:
        return "N/A"
    return value.strftime("%b %d, %Y")
