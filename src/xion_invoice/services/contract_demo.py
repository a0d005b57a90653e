"""
Demo implementation of the contract capabilities using in-memory state.

This backend is useful for:
- Local development without a chain or a wallet
- Testing the invoice client end to end
- Demonstrating the application without network dependencies

DemoContract enforces the same rules as the deployed invoice contract and
answers with the same shapes: transaction results carry the created id in
logs[0].events[0].attributes, queries return InvoiceResponse objects.
"""

import asyncio
import hashlib
import itertools
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from xion_invoice.errors import ContractError
from xion_invoice.lib import logs, objects
from xion_invoice.services.contract import ContractSigner

LOG = logs.logger(__file__)


@dataclass
class _StoredInvoice:
    id: int
    issuer: str
    recipient: str
    amount: int
    description: str
    due_date: int
    is_paid: bool = False

    def to_response(self) -> dict:
        return {
            "id": self.id,
            "issuer": self.issuer,
            "recipient": self.recipient,
            "amount": str(self.amount),
            "description": self.description,
            "due_date": self.due_date,
            "is_paid": self.is_paid,
        }


class DemoContract(ContractSigner):
    """
    In-memory invoice contract.

    Every signer call is accepted as if signed by sender_address; there is
    no key management. Paid amounts are credited to the issuer's balance.

    Attributes:
        address: Contract address this instance answers for.
        executed: Every accepted execute message, in order.
    """

    def __init__(self, address: str = "xion1invoicecontract", latency: float = 0.0) -> None:
        """
        Initialize an empty contract.

        Args:
            address: Contract address; calls for any other address fail.
            latency: Seconds to sleep before answering, to mimic the network.
        """
        self.address = address
        self.latency = latency
        self.executed: list[dict[str, Any]] = []
        self.balances: dict[tuple[str, str], int] = {}
        self._invoices: dict[int, _StoredInvoice] = {}
        self._user_invoices: dict[str, list[int]] = {}
        self._sequence = itertools.count(1)
        self._height = itertools.count(1)

    async def execute(
        self,
        sender_address: str,
        contract_address: str,
        message: Mapping[str, Any],
        fee: Mapping[str, Any] | str,
        memo: str = "",
        funds: Sequence[Mapping[str, str]] = (),
    ) -> Mapping[str, Any]:
        await self._delay()
        self._check_contract(contract_address)
        sender = _validate_address(sender_address)

        if "CreateInvoice" in message:
            attributes = self._create_invoice(sender, message["CreateInvoice"])
        elif "PayInvoice" in message:
            attributes = self._pay_invoice(sender, message["PayInvoice"], funds)
        else:
            raise ContractError(f"unknown variant of ExecuteMsg: {sorted(message)}")

        self.executed.append({"sender": sender, "message": dict(message), "funds": list(funds)})
        return self._tx_result(attributes)

    async def query_contract_smart(
        self, contract_address: str, query: Mapping[str, Any]
    ) -> Any:
        await self._delay()
        self._check_contract(contract_address)

        if "GetInvoice" in query:
            invoice_id = _parse_u64(query["GetInvoice"].get("invoice_id"), "invoice_id")
            return self._load(invoice_id).to_response()
        if "GetInvoicesByUser" in query:
            user = _validate_address(query["GetInvoicesByUser"].get("user"))
            return [self._load(i).to_response() for i in self._user_invoices.get(user, [])]
        raise ContractError(f"unknown variant of QueryMsg: {sorted(query)}")

    def _create_invoice(self, sender: str, params: Mapping[str, Any]) -> list[dict[str, str]]:
        recipient = _validate_address(params.get("recipient"))
        if recipient == sender:
            raise ContractError("Cannot create invoice for yourself")
        amount = _parse_uint128(params.get("amount"))
        if amount == 0:
            raise ContractError("Amount must be greater than 0")

        invoice = _StoredInvoice(
            id=next(self._sequence),
            issuer=sender,
            recipient=recipient,
            amount=amount,
            description=str(params.get("description", "")),
            due_date=_parse_u64(params.get("due_date"), "due_date"),
        )
        self._invoices[invoice.id] = invoice
        self._user_invoices.setdefault(sender, []).append(invoice.id)
        LOG.info("Created invoice %s for %s", invoice.id, objects.to_json(invoice))

        return [
            {"key": "_contract_address", "value": self.address},
            {"key": "method", "value": "create_invoice"},
            {"key": "invoice_id", "value": str(invoice.id)},
            {"key": "recipient", "value": recipient},
        ]

    def _pay_invoice(
        self,
        sender: str,
        params: Mapping[str, Any],
        funds: Sequence[Mapping[str, str]],
    ) -> list[dict[str, str]]:
        invoice = self._load(_parse_u64(params.get("invoice_id"), "invoice_id"))
        if invoice.is_paid:
            raise ContractError("Invoice is already paid")
        if invoice.recipient != sender:
            raise ContractError("Only the recipient can pay this invoice")
        if len(funds) != 1 or _parse_uint128(funds[0].get("amount")) != invoice.amount:
            raise ContractError("Incorrect payment amount")

        key = (invoice.issuer, str(funds[0].get("denom", "")))
        self.balances[key] = self.balances.get(key, 0) + invoice.amount
        invoice.is_paid = True
        LOG.info("Invoice %s paid by %s", invoice.id, sender)

        return [
            {"key": "_contract_address", "value": self.address},
            {"key": "method", "value": "pay_invoice"},
            {"key": "invoice_id", "value": str(invoice.id)},
        ]

    def _load(self, invoice_id: int) -> _StoredInvoice:
        try:
            return self._invoices[invoice_id]
        except KeyError as exc:
            raise ContractError(f"Invoice {invoice_id} not found") from exc

    def _tx_result(self, attributes: list[dict[str, str]]) -> dict[str, Any]:
        height = next(self._height)
        tx_hash = hashlib.sha256(objects.to_json([height, attributes]).encode("utf-8"))
        return {
            "height": height,
            "transactionHash": tx_hash.hexdigest().upper(),
            "gasUsed": 0,
            "logs": [{"msg_index": 0, "events": [{"type": "wasm", "attributes": attributes}]}],
        }

    def _check_contract(self, contract_address: str) -> None:
        if contract_address and contract_address != self.address:
            raise ContractError(f"No such contract: {contract_address}")

    async def _delay(self) -> None:
        if self.latency:
            await asyncio.sleep(self.latency)


def _validate_address(value: Any) -> str:
    if not isinstance(value, str) or not value or value != value.strip().lower():
        raise ContractError(f"Invalid address: {value!r}")
    return value


def _parse_uint128(value: Any) -> int:
    if not isinstance(value, str) or not value.isascii() or not value.isdigit():
        raise ContractError(f"Invalid Uint128: {value!r}")
    return int(value)


def _parse_u64(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ContractError(f"Invalid {name}: {value!r}")
    return value
