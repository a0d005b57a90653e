"""
Reflex state management for the invoice pages.

Each page (create, view, pay) owns one LifecycleState and changes it only
through lifecycle.reduce(). Network work is delegated to the shared
InvoiceClient; the wallet session is looked up per event, never cached in
page state.
"""

import os
from typing import Awaitable, Callable

import reflex as rx

from xion_invoice.errors import NetworkOrContractError
from xion_invoice.lib import logs
from xion_invoice.lib.config import settings
from xion_invoice.lifecycle import LifecycleEvent, SnapshotCleared, SubmitStarted, event_for, reduce
from xion_invoice.models.common import LifecycleState, Outcome, Phase
from xion_invoice.models.invoice import MAX_LINE_ITEMS, InvoiceDraft, LineItem
from xion_invoice.models.reflex_models import InvoiceModel, invoice_to_model
from xion_invoice.services import get_invoice_client, get_wallet_session
from xion_invoice.services.invoice_client import FETCH_FAILED, PAY_FAILED
from xion_invoice.utils import compute_total

LOG = logs.logger(__file__)

APP_TITLE = os.getenv("XION_INVOICE_TITLE", "Xion Invoices")
APP_SUBTITLE = "Create, view and pay invoices settled on-chain."
PAID_REFRESH_FAILED = "Payment successful! Fetch the invoice again to see its status."


class LifecycleMixin(rx.State, mixin=True):
    """Fields and helpers shared by every invoice page."""

    phase: str = Phase.IDLE.value
    status: str = ""
    invoice: InvoiceModel | None = None

    _lifecycle: LifecycleState = LifecycleState()

    @rx.var
    def is_loading(self) -> bool:
        return self.phase == Phase.LOADING.value

    def _apply(self, event: LifecycleEvent) -> bool:
        """Reduce event into the page lifecycle. Returns False if ignored."""
        previous = self._lifecycle
        self._lifecycle = reduce(previous, event)
        if self._lifecycle is previous:
            return False
        self.phase = self._lifecycle.phase.value
        self.status = self._lifecycle.message
        snapshot = self._lifecycle.snapshot
        self.invoice = invoice_to_model(snapshot, settings().denom) if snapshot else None
        return True

    async def _settle(
        self, call: Callable[[], Awaitable[Outcome]], failure_message: str
    ) -> Outcome:
        """Run a client call; an unexpected exception becomes a FAILED Outcome."""
        try:
            return await call()
        except Exception as exc:
            LOG.error("Unexpected error in %s: %s", type(self).__name__, exc, exc_info=True)
            return Outcome.failed(NetworkOrContractError(failure_message, detail=repr(exc)))


class CreateInvoiceState(LifecycleMixin, rx.State):
    """State of the create page: the draft form and the created id."""

    payer: str = ""
    description: str = ""
    due_date: str = ""
    items: list[dict[str, str]] = [{"name": "", "price": ""}]
    invoice_id: str = ""

    @rx.var
    def total(self) -> str:
        return f"{compute_total(self.items):.2f}"

    @rx.var
    def can_add_item(self) -> bool:
        return len(self.items) < MAX_LINE_ITEMS

    @rx.var
    def wallet_address(self) -> str:
        return get_wallet_session().address or ""

    def set_payer(self, value: str):
        self.payer = value

    def set_description(self, value: str):
        self.description = value

    def set_due_date(self, value: str):
        self.due_date = value

    def set_item_name(self, index: int, value: str):
        self.items[index] = {**self.items[index], "name": value}

    def set_item_price(self, index: int, value: str):
        self.items[index] = {**self.items[index], "price": value}

    def add_item(self):
        draft = self._draft()
        if draft.add_item():
            self.items = [*self.items, {"name": "", "price": ""}]

    def remove_item(self, index: int):
        draft = self._draft()
        if draft.remove_item(index):
            self.items = [item for i, item in enumerate(self.items) if i != index]

    @rx.event
    async def submit(self):
        """Validate the draft and create the invoice on-chain."""
        if not self._apply(SubmitStarted("Creating invoice...")):
            return
        self.invoice_id = ""
        yield

        outcome = await self._settle(
            lambda: get_invoice_client().create(self._draft(), get_wallet_session()),
            "Error creating invoice. Please try again.",
        )
        self._apply(event_for(outcome))
        if outcome.ok:
            self.invoice_id = str(outcome.value)
            LOG.info("Invoice created - id:%s", self.invoice_id)

    def _draft(self) -> InvoiceDraft:
        return InvoiceDraft(
            payer=self.payer,
            description=self.description,
            due_date=self.due_date,
            items=[LineItem(name=i.get("name", ""), price=i.get("price", "")) for i in self.items],
        )


class ViewInvoiceState(LifecycleMixin, rx.State):
    """State of the view page. Works without a connected wallet."""

    invoice_id: str = ""

    def set_invoice_id(self, value: str):
        self.invoice_id = value

    @rx.event
    async def fetch(self):
        if not self._apply(SubmitStarted("Fetching invoice...")):
            return
        yield

        outcome = await self._settle(
            lambda: get_invoice_client().fetch(self.invoice_id), FETCH_FAILED
        )
        self._apply(event_for(outcome))


class PayInvoiceState(LifecycleMixin, rx.State):
    """State of the pay page: fetch an invoice, then settle it."""

    invoice_id: str = ""

    @rx.var
    def wallet_address(self) -> str:
        return get_wallet_session().address or ""

    def set_invoice_id(self, value: str):
        self.invoice_id = value

    @rx.event
    async def fetch(self):
        if not self._apply(SubmitStarted("Fetching invoice...")):
            return
        yield

        outcome = await self._settle(
            lambda: get_invoice_client().fetch(self.invoice_id, session=get_wallet_session()),
            FETCH_FAILED,
        )
        self._apply(event_for(outcome))

    @rx.event
    async def pay(self):
        snapshot = self._lifecycle.snapshot
        if not self._apply(SubmitStarted("Processing payment...")):
            return
        yield

        outcome = await self._settle(
            lambda: get_invoice_client().pay(self.invoice_id, snapshot, get_wallet_session()),
            PAY_FAILED,
        )
        self._apply(event_for(outcome))
        if outcome.ok:
            # Re-read the paid invoice from the contract.
            refreshed = await self._settle(
                lambda: get_invoice_client().fetch(self.invoice_id, session=get_wallet_session()),
                FETCH_FAILED,
            )
            if refreshed.ok:
                self._apply(event_for(refreshed, outcome.message))
            else:
                self._apply(SnapshotCleared(PAID_REFRESH_FAILED))
