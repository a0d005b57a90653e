"""
Create invoice form for Reflex.

Holds the payer, description, due date and up to five line items, with a
running total recomputed on every edit.
"""

import reflex as rx

from xion_invoice.state import CreateInvoiceState


def invoice_form() -> rx.Component:
    """
    Build the create invoice form.

    Returns:
        The form card with its status line and created id.
    """
    return rx.box(
        _wallet_banner(),
        rx.input(
            placeholder="Payer Address",
            value=CreateInvoiceState.payer,
            on_change=CreateInvoiceState.set_payer,
            class_name="text-input",
        ),
        rx.text_area(
            placeholder="Description",
            value=CreateInvoiceState.description,
            on_change=CreateInvoiceState.set_description,
            class_name="text-input",
        ),
        rx.input(
            type="date",
            value=CreateInvoiceState.due_date,
            on_change=CreateInvoiceState.set_due_date,
            class_name="text-input",
        ),
        rx.foreach(CreateInvoiceState.items, _line_item),
        rx.button(
            "Add Item",
            on_click=CreateInvoiceState.add_item,
            disabled=~CreateInvoiceState.can_add_item,
            variant="soft",
        ),
        rx.text(f"Total Amount: {CreateInvoiceState.total}", class_name="total"),
        rx.button(
            "Create Invoice",
            on_click=CreateInvoiceState.submit,
            loading=CreateInvoiceState.is_loading,
            disabled=CreateInvoiceState.is_loading,
        ),
        rx.cond(CreateInvoiceState.status != "", rx.text(CreateInvoiceState.status, class_name="status")),
        rx.cond(
            CreateInvoiceState.invoice_id != "",
            rx.text(f"Invoice Created! Invoice ID: {CreateInvoiceState.invoice_id}", class_name="success"),
        ),
        class_name="card form-card",
    )


def _line_item(item: rx.Var, index: rx.Var) -> rx.Component:
    """Build one line item row with a remove button."""
    return rx.box(
        rx.input(
            placeholder="Item",
            value=item["name"],
            on_change=lambda value: CreateInvoiceState.set_item_name(index, value),
            class_name="text-input",
        ),
        rx.input(
            type="number",
            placeholder="Price",
            value=item["price"],
            on_change=lambda value: CreateInvoiceState.set_item_price(index, value),
            class_name="text-input",
        ),
        rx.cond(
            CreateInvoiceState.items.length() > 1,
            rx.button(
                "Remove",
                on_click=lambda: CreateInvoiceState.remove_item(index),
                color_scheme="red",
                variant="ghost",
            ),
        ),
        class_name="line-item-row",
    )


def _wallet_banner() -> rx.Component:
    return rx.cond(
        CreateInvoiceState.wallet_address != "",
        rx.text(f"Connected Wallet (Issuer): {CreateInvoiceState.wallet_address}", class_name="muted"),
        rx.text("No wallet connected", class_name="muted"),
    )
