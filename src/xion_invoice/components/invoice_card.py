"""
Reflex invoice card component.

Displays the snapshot of one invoice as last fetched from the contract.
"""

import reflex as rx

from xion_invoice.models.reflex_models import InvoiceModel


def invoice_card(invoice: InvoiceModel, actions: rx.Component | None = None) -> rx.Component:
    """
    Build a card displaying an invoice snapshot.

    Args:
        invoice: InvoiceModel var.
        actions: Optional component rendered below the details (pay button).

    Returns:
        The invoice card component.
    """
    return rx.box(
        rx.box(
            rx.icon("file-text", class_name="title-icon"),
            rx.heading(f"Invoice #{invoice.id}", size="3", as_="h3"),
            rx.text(
                invoice.status,
                class_name=rx.cond(invoice.is_paid, "badge paid", "badge unpaid"),
            ),
            class_name="title-row",
        ),
        rx.box(
            _info_block("Amount", invoice.amount),
            _info_block("Recipient", invoice.recipient),
            _info_block("Issuer", invoice.issuer),
            _info_block("Due Date", invoice.due_date),
            _info_block("Description", invoice.description),
            class_name="info-grid surface",
        ),
        actions if actions is not None else rx.fragment(),
        class_name="card invoice-card",
    )


def _info_block(label: str, value) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="label"),
        rx.text(value, class_name="value"),
        class_name="info-block",
    )
