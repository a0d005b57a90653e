from __future__ import annotations

import asyncio
import base64
import json

import httpx
import pytest

from xion_invoice.errors import ErrorCode, UnexpectedResponseShape
from xion_invoice.lib import clients
from xion_invoice.services.contract_lcd import LcdQueryClient
from xion_invoice.services.invoice_client import InvoiceClient
from xion_invoice.services.request_builder import ExecutionParams

CONTRACT = "xion1contract"
INVOICE = {
    "id": 7,
    "issuer": "xion1issuer",
    "recipient": "xion1payer",
    "amount": "30",
    "description": "Consulting",
    "due_date": 1_735_084_800_000,
    "is_paid": False,
}


def _lcd(handler) -> LcdQueryClient:
    return LcdQueryClient("http://lcd.test/", transport=httpx.MockTransport(handler))


def test_smart_query_encodes_query_in_path() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json={"data": INVOICE})

    result = asyncio.run(_lcd(handler).query_contract_smart(CONTRACT, {"GetInvoice": {"invoice_id": 7}}))

    assert result == INVOICE
    [path] = seen
    prefix = f"/cosmwasm/wasm/v1/contract/{CONTRACT}/smart/"
    assert path.startswith(prefix)
    encoded = path[len(prefix):]
    assert json.loads(base64.urlsafe_b64decode(encoded)) == {"GetInvoice": {"invoice_id": 7}}


def test_http_errors_propagate() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"code": 2, "message": "not found"})

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(_lcd(handler).query_contract_smart(CONTRACT, {"GetInvoice": {"invoice_id": 1}}))


def test_missing_data_field_is_unexpected_shape() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"result": INVOICE})

    with pytest.raises(UnexpectedResponseShape):
        asyncio.run(_lcd(handler).query_contract_smart(CONTRACT, {"GetInvoice": {"invoice_id": 1}}))


def test_client_views_invoice_without_wallet() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": INVOICE})

    client = InvoiceClient(CONTRACT, ExecutionParams(500_000, "100", "uxion"), reader=_lcd(handler))
    outcome = asyncio.run(client.fetch("7"))

    assert outcome.ok
    assert outcome.value.id == 7
    assert outcome.value.recipient == "xion1payer"


def test_client_hides_http_failures() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="rpc error: code = Unknown desc = invoices not found")

    client = InvoiceClient(CONTRACT, ExecutionParams(500_000, "100", "uxion"), reader=_lcd(handler))
    outcome = asyncio.run(client.fetch("7"))

    assert outcome.code is ErrorCode.NETWORK_OR_CONTRACT
    assert outcome.message == "Failed to fetch invoice. Please try again."


def test_shared_client_is_closed_and_recreated() -> None:
    clients.query_client.cache_clear()
    asyncio.run(clients.close_query_client())

    first = clients.query_client()
    asyncio.run(clients.close_query_client())

    assert first._http.is_closed
    assert clients.query_client() is not first
    clients.query_client.cache_clear()
