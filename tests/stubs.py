"""Test doubles shared by the test modules."""

from __future__ import annotations

import asyncio
from decimal import Decimal
from typing import Any, Mapping, Sequence

from xion_invoice.models import Invoice
from xion_invoice.services.contract import ContractSigner

CONTRACT = "xion1contract"
ISSUER = "xion1issuer"
PAYER = "xion1payer"
TREASURY = "xion1treasury"


def tx_result(*attributes: tuple[str, str]) -> dict[str, Any]:
    return {
        "logs": [
            {"events": [{"type": "wasm", "attributes": [{"key": k, "value": v} for k, v in attributes]}]}
        ]
    }


class RecordingSigner(ContractSigner):
    """Signer stub that records every call and answers with canned values."""

    def __init__(
        self,
        result: Any = None,
        query_result: Any = None,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.result = result if result is not None else tx_result(("invoice_id", "1"))
        self.query_result = query_result
        self.error = error
        self.delay = delay
        self.executed: list[dict[str, Any]] = []
        self.queries: list[Mapping[str, Any]] = []

    async def execute(
        self,
        sender_address: str,
        contract_address: str,
        message: Mapping[str, Any],
        fee: Mapping[str, Any] | str,
        memo: str = "",
        funds: Sequence[Mapping[str, str]] = (),
    ) -> Mapping[str, Any]:
        self.executed.append(
            {
                "sender": sender_address,
                "contract": contract_address,
                "message": message,
                "fee": fee,
                "memo": memo,
                "funds": list(funds),
            }
        )
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result

    async def query_contract_smart(self, contract_address: str, query: Mapping[str, Any]) -> Any:
        self.queries.append(query)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.query_result


def unpaid_invoice(invoice_id: int = 1, amount: str = "30") -> Invoice:
    return Invoice(
        id=invoice_id,
        recipient=PAYER,
        amount=Decimal(amount),
        description="Consulting",
        due_date_ms=1_735_084_800_000,
        is_paid=False,
        issuer=ISSUER,
    )
