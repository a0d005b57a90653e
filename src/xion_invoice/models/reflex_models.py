"""
Reflex-compatible models for the invoice UI.

These models extend rx.Base so they can be rendered by Reflex components.
They hold display strings only; the client keeps working from the Invoice
snapshot.
"""

import reflex as rx

from xion_invoice.models.invoice import Invoice


class InvoiceModel(rx.Base):
    """Invoice details as shown on the view and pay pages."""

    id: str = ""
    issuer: str = ""
    recipient: str = ""
    amount: str = ""
    description: str = ""
    due_date: str = ""
    status: str = ""
    is_paid: bool = False


def invoice_to_model(invoice: Invoice, denom: str) -> InvoiceModel:
    """
    Convert an Invoice snapshot to an InvoiceModel.

    Args:
        invoice: Snapshot parsed from the contract.
        denom: Denom appended to the amount.

    Returns:
        InvoiceModel instance.
    """
    return InvoiceModel(
        id="" if invoice.id is None else str(invoice.id),
        issuer=invoice.issuer,
        recipient=invoice.recipient,
        amount=invoice.formatted_amount(denom),
        description=invoice.description,
        due_date=invoice.formatted_due_date(),
        status=invoice.status,
        is_paid=invoice.is_paid,
    )
