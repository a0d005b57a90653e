from __future__ import annotations

import pytest

from xion_invoice.services import (
    get_contract_backend,
    get_invoice_client,
    get_wallet_session,
)
from xion_invoice.services.contract_demo import DemoContract


def test_demo_backend_is_shared() -> None:
    backend = get_contract_backend("demo")
    assert isinstance(backend, DemoContract)
    assert get_contract_backend("demo") is backend


def test_demo_client_targets_demo_contract() -> None:
    client = get_invoice_client("demo")
    assert client.contract_address == get_contract_backend("demo").address


def test_demo_session_signs_with_backend() -> None:
    session = get_wallet_session("demo")
    assert session.signer is get_contract_backend("demo")


def test_unknown_backend() -> None:
    with pytest.raises(ValueError, match="Unknown contract backend kind"):
        get_contract_backend("mainnet")
