"""
Invoice domain models and serialization helpers.

The authoritative invoice record lives in the contract. Invoice is the
client's read-only projection of a GetInvoice response; it is rebuilt from
every fetch and never patched in place.

    InvoiceDraft (client-local, never sent verbatim)
    └── LineItem[] (1 to MAX_LINE_ITEMS, only their total is sent)

    Invoice (parsed from the contract query response)

Parsing uses benedict for typed access to loosely-typed JSON, so that
numbers encoded as strings (Uint128 amounts) and plain numbers are both
accepted.
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping, Sequence

from benedict import benedict

from xion_invoice.errors import UnexpectedResponseShape
from xion_invoice.utils import compute_total, format_amount, format_date, from_epoch_millis

MAX_LINE_ITEMS = 5


@dataclass(slots=True)
class LineItem:
    """A single row of a draft invoice. Price is kept as entered."""

    name: str = ""
    price: str | float | int | Decimal | None = ""


@dataclass(slots=True)
class InvoiceDraft:
    """
    An invoice being composed by the issuer.

    Attributes:
        payer: Address that will be asked to pay.
        description: Free text shown to the payer.
        due_date: Due date as a date, datetime or form string.
        items: Line items; only their total is submitted.
    """

    payer: str = ""
    description: str = ""
    due_date: str | date | datetime | None = None
    items: list[LineItem] = field(default_factory=lambda: [LineItem()])

    @property
    def total(self) -> Decimal:
        """Return the current running total of the line items."""
        return compute_total(self.items)

    def add_item(self) -> bool:
        """Append an empty line item. Returns False once the limit is reached."""
        if len(self.items) >= MAX_LINE_ITEMS:
            return False
        self.items.append(LineItem())
        return True

    def remove_item(self, index: int) -> bool:
        """Remove the line item at index. The last remaining item is kept."""
        if len(self.items) <= 1 or not 0 <= index < len(self.items):
            return False
        del self.items[index]
        return True

    def update_item(self, index: int, **changes: Any) -> None:
        """Replace fields of the line item at index."""
        self.items[index] = replace(self.items[index], **changes)


@dataclass(frozen=True, slots=True)
class Invoice:
    """Read-only snapshot of an invoice as reported by the contract."""

    id: int | None
    recipient: str
    amount: Decimal
    description: str
    due_date_ms: int
    is_paid: bool
    issuer: str = ""

    @property
    def due_date(self) -> datetime:
        """Return the due date as a UTC datetime."""
        return from_epoch_millis(self.due_date_ms)

    @property
    def status(self) -> str:
        return "Paid" if self.is_paid else "Unpaid"

    def formatted_amount(self, denom: str) -> str:
        """Return the amount with its denom, e.g. '30 uxion'."""
        return f"{format_amount(self.amount)} {denom}"

    def formatted_due_date(self) -> str:
        return format_date(self.due_date)


def parse_invoice(payload: Any) -> Invoice:
    """
    Parse a GetInvoice query response into an Invoice.

    Args:
        payload: Decoded JSON response of the contract query.

    Raises:
        UnexpectedResponseShape: If the payload is not an object or lacks
            the amount, due date or paid flag.
    """
    if not isinstance(payload, Mapping):
        raise UnexpectedResponseShape(
            "Invoice response could not be read.",
            detail=f"expected object, got {type(payload).__name__}",
        )
    b = benedict(dict(payload), keypath_separator=None)

    amount = b.get_decimal("amount", default=None)
    due_date_ms = b.get_int("due_date", default=None)
    is_paid = b.get_bool("is_paid", default=None)
    if amount is None or due_date_ms is None or is_paid is None:
        raise UnexpectedResponseShape(
            "Invoice response could not be read.",
            detail=f"incomplete invoice payload: {sorted(b.keys())}",
        )

    return Invoice(
        id=b.get_int("id", default=None),
        issuer=b.get_str("issuer", default=""),
        recipient=b.get_str("recipient", default=""),
        amount=amount,
        description=b.get_str("description", default=""),
        due_date_ms=due_date_ms,
        is_paid=is_paid,
    )


def parse_invoice_list(payload: Any) -> list[Invoice]:
    """Parse a GetInvoicesByUser response (a JSON array of invoices)."""
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        raise UnexpectedResponseShape(
            "Invoice list could not be read.",
            detail=f"expected array, got {type(payload).__name__}",
        )
    return [parse_invoice(item) for item in payload]


def serialize_invoice(invoice: Invoice) -> dict:
    """Convert an Invoice into the JSON shape the contract reports."""
    return {
        "id": invoice.id,
        "issuer": invoice.issuer,
        "recipient": invoice.recipient,
        "amount": format_amount(invoice.amount),
        "description": invoice.description,
        "due_date": invoice.due_date_ms,
        "is_paid": invoice.is_paid,
    }
