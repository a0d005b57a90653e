"""
Invoice lookup panels for Reflex.

The view panel fetches without a wallet. The pay panel fetches with the
connected wallet and offers a pay button while the invoice is unpaid.
"""

import reflex as rx

from xion_invoice.components.invoice_card import invoice_card
from xion_invoice.state import PayInvoiceState, ViewInvoiceState


def view_panel() -> rx.Component:
    """Build the read-only invoice lookup panel."""
    return rx.box(
        _id_input(ViewInvoiceState),
        rx.button(
            "Fetch Invoice",
            on_click=ViewInvoiceState.fetch,
            loading=ViewInvoiceState.is_loading,
            disabled=ViewInvoiceState.is_loading,
        ),
        _status(ViewInvoiceState),
        rx.cond(ViewInvoiceState.invoice, invoice_card(ViewInvoiceState.invoice)),
        class_name="card lookup-card",
    )


def pay_panel() -> rx.Component:
    """Build the fetch-then-pay panel."""
    pay_button = rx.cond(
        PayInvoiceState.invoice.is_paid,
        rx.fragment(),
        rx.button(
            "Pay Now",
            on_click=PayInvoiceState.pay,
            loading=PayInvoiceState.is_loading,
            disabled=PayInvoiceState.is_loading,
            color_scheme="green",
        ),
    )
    return rx.box(
        rx.cond(
            PayInvoiceState.wallet_address != "",
            rx.text(f"Connected Wallet Address: {PayInvoiceState.wallet_address}", class_name="muted"),
            rx.text("Please connect your wallet to proceed.", class_name="warning"),
        ),
        _id_input(PayInvoiceState),
        rx.button(
            "Fetch Invoice",
            on_click=PayInvoiceState.fetch,
            loading=PayInvoiceState.is_loading,
            disabled=PayInvoiceState.is_loading,
        ),
        _status(PayInvoiceState),
        rx.cond(PayInvoiceState.invoice, invoice_card(PayInvoiceState.invoice, pay_button)),
        class_name="card lookup-card",
    )


def _id_input(state) -> rx.Component:
    return rx.input(
        placeholder="Enter Invoice ID",
        value=state.invoice_id,
        on_change=state.set_invoice_id,
        class_name="text-input",
    )


def _status(state) -> rx.Component:
    return rx.cond(state.status != "", rx.text(state.status, class_name="status"))
