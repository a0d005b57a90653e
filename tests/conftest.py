from __future__ import annotations

import pytest

from stubs import CONTRACT, ISSUER, TREASURY, RecordingSigner
from xion_invoice.services.contract import WalletSession
from xion_invoice.services.invoice_client import InvoiceClient
from xion_invoice.services.request_builder import ExecutionParams


@pytest.fixture
def execution() -> ExecutionParams:
    return ExecutionParams(gas_limit=500_000, fee_amount="100", fee_denom="uxion", granter=TREASURY)


@pytest.fixture
def client(execution: ExecutionParams) -> InvoiceClient:
    return InvoiceClient(CONTRACT, execution, denom="uxion", timeout=5.0)


@pytest.fixture
def signer() -> RecordingSigner:
    return RecordingSigner()


@pytest.fixture
def session(signer: RecordingSigner) -> WalletSession:
    return WalletSession(address=ISSUER, signer=signer)
