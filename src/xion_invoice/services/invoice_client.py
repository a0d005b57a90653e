"""
Invoice lifecycle client.

InvoiceClient drives the invoice contract on behalf of a UI flow. For every
operation it:

1. Runs the local guards (wallet connected, id well formed, draft valid,
   invoice not already paid) without touching the network.
2. Builds the exact contract message with the request builder.
3. Issues the call through the injected signer or reader, bounded by a
   timeout.
4. Parses the response and returns a normalized Outcome.

Expected failures never raise; they resolve to a FAILED Outcome whose
message is safe to show. Raw network errors are only logged.

A second create from the same sender, or a second payment of the same
invoice, is refused while the first one is still pending.
"""

from __future__ import annotations

import asyncio
import contextlib
from typing import Any, Awaitable, Iterator, Mapping, TypeVar

from xion_invoice.errors import (
    AlreadyPaid,
    InvoiceError,
    MissingField,
    NetworkOrContractError,
    NoSnapshot,
    NotConnected,
    OperationInProgress,
    Timeout,
    UnexpectedResponseShape,
)
from xion_invoice.lib import logs, objects
from xion_invoice.lib.config import Settings
from xion_invoice.models.common import Outcome
from xion_invoice.models.invoice import (
    Invoice,
    InvoiceDraft,
    parse_invoice,
    parse_invoice_list,
    serialize_invoice,
)
from xion_invoice.services.contract import ContractReader, WalletSession
from xion_invoice.services.request_builder import (
    AUTO_FEE,
    ExecutionParams,
    build_create_invoice,
    build_get_invoice,
    build_invoices_by_user,
    build_pay_invoice,
)
from xion_invoice.utils import parse_invoice_id, to_epoch_millis, validate_draft

LOG = logs.logger(__file__)

T = TypeVar("T")

INVOICE_ID_ATTRIBUTE = "invoice_id"

CREATED = "Invoice created successfully!"
FETCHED = "Invoice fetched successfully."
LISTED = "Invoices fetched successfully."
PAID = "Payment successful!"
FETCH_FAILED = "Failed to fetch invoice. Please try again."
PAY_FAILED = "Payment failed. Please try again."
MISSING_INVOICE_ID = "Invoice was created but its ID could not be read from the transaction."


def find_event_attribute(tx_result: Any, key: str) -> str | None:
    """
    Return the value of an attribute of the first event of the first log.

    Looks at tx_result["logs"][0]["events"][0]["attributes"] for an entry
    whose "key" equals key. Any missing or malformed level yields None.
    """
    log = _first(tx_result.get("logs") if isinstance(tx_result, Mapping) else None)
    event = _first(log.get("events") if isinstance(log, Mapping) else None)
    attributes = event.get("attributes") if isinstance(event, Mapping) else None
    if not isinstance(attributes, list):
        return None
    for attribute in attributes:
        if isinstance(attribute, Mapping) and attribute.get("key") == key:
            value = attribute.get("value")
            return None if value is None else str(value)
    return None


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def describe_error(exc: BaseException) -> str:
    """Return the error text, with nested response detail when present."""
    text = getattr(exc, "message", None) or str(exc) or exc.__class__.__name__
    response = getattr(exc, "response", None)
    if response is not None:
        detail = getattr(response, "text", None) or str(response)
        if detail and detail not in text:
            text = f"{text} ({detail})"
    return text


class InvoiceClient:
    """
    Client for the invoice contract.

    Attributes:
        contract_address: Address of the invoice contract.
        execution: Fee parameters pinned on invoice creation.
        denom: Denom invoices are paid in.
        timeout: Seconds to wait for each network call, or None for no limit.
    """

    def __init__(
        self,
        contract_address: str,
        execution: ExecutionParams,
        denom: str = "uxion",
        timeout: float | None = 30.0,
        reader: ContractReader | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            contract_address: Address of the invoice contract.
            execution: Fee parameters for invoice creation.
            denom: Payment denom.
            timeout: Per-call timeout in seconds.
            reader: Default read-only client, used by fetch when no wallet
                is connected.
        """
        self.contract_address = contract_address
        self.execution = execution
        self.denom = denom
        self.timeout = timeout
        self._reader = reader
        self._pending: set[str] = set()

    @classmethod
    def from_settings(
        cls, settings: Settings, reader: ContractReader | None = None
    ) -> "InvoiceClient":
        return cls(
            contract_address=settings.contract_address,
            execution=ExecutionParams.from_settings(settings),
            denom=settings.denom,
            timeout=settings.timeout,
            reader=reader,
        )

    def is_pending(self, operation: str, key: Any) -> bool:
        """Return True while an operation ("create" or "pay") is in flight for key."""
        return f"{operation}:{key}" in self._pending

    async def create(self, draft: InvoiceDraft, session: WalletSession | None) -> Outcome:
        """
        Create an invoice from a draft.

        The amount is the draft total computed once here. On success the
        outcome value is the invoice id reported by the contract.
        """
        if session is None or not session.connected:
            return self._fail(NotConnected())

        try:
            amount = draft.total
            due_date_ms = to_epoch_millis(draft.due_date)
            validate_draft(draft.payer, draft.description, due_date_ms, amount)
        except InvoiceError as exc:
            return self._fail(exc)

        message = build_create_invoice(draft.payer, amount, draft.description, due_date_ms)
        LOG.info("Sending transaction with message: %s", objects.to_json(message))

        try:
            with self._in_flight("create", session.address):
                result = await self._call(
                    session.signer.execute(
                        session.address,
                        self.contract_address,
                        message,
                        self.execution.to_fee(),
                        "",
                        [],
                    )
                )
        except (OperationInProgress, Timeout) as exc:
            return self._fail(exc)
        except Exception as exc:
            LOG.error("Error creating invoice: %s", exc, exc_info=True)
            return self._fail(
                NetworkOrContractError(
                    f"Error creating invoice: {describe_error(exc)}", detail=repr(exc)
                )
            )

        LOG.info("Transaction response: %s", objects.to_json(result))
        invoice_id = find_event_attribute(result, INVOICE_ID_ATTRIBUTE)
        if invoice_id is None:
            return self._fail(
                UnexpectedResponseShape(
                    MISSING_INVOICE_ID, detail=f"no {INVOICE_ID_ATTRIBUTE} attribute"
                )
            )
        return Outcome.succeeded(invoice_id, CREATED)

    async def fetch(
        self,
        invoice_id: Any,
        reader: ContractReader | None = None,
        session: WalletSession | None = None,
    ) -> Outcome:
        """
        Fetch an invoice snapshot.

        Works without a wallet as long as a reader is available. On success
        the outcome value is a freshly parsed Invoice.
        """
        try:
            query = build_get_invoice(invoice_id)
        except InvoiceError as exc:
            return self._fail(exc)

        resolved = self._resolve_reader(reader, session)
        if resolved is None:
            return self._fail(NotConnected("Blockchain client is not connected."))

        try:
            response = await self._call(resolved.query_contract_smart(self.contract_address, query))
            invoice = parse_invoice(response)
        except (Timeout, UnexpectedResponseShape) as exc:
            LOG.error("Error fetching invoice %s: %s", invoice_id, exc.detail or exc)
            return self._fail(exc, FETCH_FAILED)
        except Exception as exc:
            LOG.error("Error fetching invoice %s: %s", invoice_id, exc, exc_info=True)
            return self._fail(NetworkOrContractError(FETCH_FAILED, detail=repr(exc)))
        LOG.info("Fetched invoice: %s", objects.to_json(serialize_invoice(invoice)))
        return Outcome.succeeded(invoice, FETCHED)

    async def list_for_user(
        self,
        address: str | None,
        reader: ContractReader | None = None,
        session: WalletSession | None = None,
    ) -> Outcome:
        """Fetch every invoice issued by address. The value is a list of Invoice."""
        if not address or not address.strip():
            return self._fail(MissingField("address"))

        resolved = self._resolve_reader(reader, session)
        if resolved is None:
            return self._fail(NotConnected("Blockchain client is not connected."))

        query = build_invoices_by_user(address)
        try:
            response = await self._call(resolved.query_contract_smart(self.contract_address, query))
            invoices = parse_invoice_list(response)
        except (Timeout, UnexpectedResponseShape) as exc:
            LOG.error("Error listing invoices for %s: %s", address, exc.detail or exc)
            return self._fail(exc, FETCH_FAILED)
        except Exception as exc:
            LOG.error("Error listing invoices for %s: %s", address, exc, exc_info=True)
            return self._fail(NetworkOrContractError(FETCH_FAILED, detail=repr(exc)))
        return Outcome.succeeded(invoices, LISTED)

    async def pay(
        self,
        invoice_id: Any,
        snapshot: Invoice | None,
        session: WalletSession | None,
    ) -> Outcome:
        """
        Pay an invoice previously fetched into snapshot.

        The funds sent are the snapshot's amount, never a value typed by the
        user. Nothing is sent when the snapshot is missing or already paid.
        """
        if snapshot is None:
            return self._fail(NoSnapshot())
        if session is None or not session.connected:
            return self._fail(NotConnected("Wallet not connected."))

        try:
            parsed_id = parse_invoice_id(invoice_id)
        except InvoiceError as exc:
            return self._fail(exc)
        if snapshot.id is not None and snapshot.id != parsed_id:
            LOG.warning("Snapshot is for invoice %s, not %s", snapshot.id, parsed_id)
            return self._fail(NoSnapshot())
        if snapshot.is_paid:
            return self._fail(AlreadyPaid(parsed_id))

        message, funds = build_pay_invoice(parsed_id, snapshot.amount, self.denom)
        LOG.info("Paying invoice %s with funds %s", parsed_id, objects.to_json(funds))

        try:
            with self._in_flight("pay", parsed_id):
                result = await self._call(
                    session.signer.execute(
                        session.address,
                        self.contract_address,
                        message,
                        AUTO_FEE,
                        "",
                        funds,
                    )
                )
        except (OperationInProgress, Timeout) as exc:
            return self._fail(exc)
        except Exception as exc:
            LOG.error("Error during payment: %s", exc, exc_info=True)
            return self._fail(NetworkOrContractError(PAY_FAILED, detail=repr(exc)))

        LOG.info("Payment response: %s", objects.to_json(result))
        return Outcome.succeeded(result, PAID)

    def _resolve_reader(
        self, reader: ContractReader | None, session: WalletSession | None
    ) -> ContractReader | None:
        if reader is not None:
            return reader
        if session is not None and session.signer is not None:
            return session.signer
        return self._reader

    async def _call(self, awaitable: Awaitable[T]) -> T:
        """Await a network call, failing with Timeout once the limit passes."""
        if self.timeout is None:
            return await awaitable
        try:
            return await asyncio.wait_for(awaitable, self.timeout)
        except asyncio.TimeoutError as exc:
            raise Timeout(self.timeout) from exc

    @contextlib.contextmanager
    def _in_flight(self, operation: str, key: Any) -> Iterator[None]:
        marker = f"{operation}:{key}"
        if marker in self._pending:
            raise OperationInProgress(marker)
        self._pending.add(marker)
        try:
            yield
        finally:
            self._pending.discard(marker)

    @staticmethod
    def _fail(error: InvoiceError, message: str | None = None) -> Outcome:
        LOG.info("Operation failed: %s", objects.to_json(error))
        return Outcome.failed(error, message)
