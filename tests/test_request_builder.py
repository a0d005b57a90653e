from __future__ import annotations

from decimal import Decimal

import pytest

from xion_invoice.errors import MissingId, NonNumericId
from xion_invoice.lib.config import Settings
from xion_invoice.services.request_builder import (
    ExecutionParams,
    build_create_invoice,
    build_get_invoice,
    build_invoices_by_user,
    build_pay_invoice,
)


def test_create_invoice_message_shape() -> None:
    message = build_create_invoice("XION1PaYeR", Decimal("30.0"), "Consulting", 1_735_084_800_000)
    assert message == {
        "CreateInvoice": {
            "recipient": "xion1payer",
            "amount": "30",
            "description": "Consulting",
            "due_date": 1_735_084_800_000,
        }
    }


def test_create_invoice_amount_is_a_string() -> None:
    message = build_create_invoice("xion1payer", Decimal("0.1") + Decimal("0.2"), "x", 1)
    assert message["CreateInvoice"]["amount"] == "0.3"


def test_get_invoice_parses_string_ids() -> None:
    assert build_get_invoice("42") == {"GetInvoice": {"invoice_id": 42}}
    assert build_get_invoice(7) == {"GetInvoice": {"invoice_id": 7}}


def test_get_invoice_fails_fast_on_garbage() -> None:
    with pytest.raises(NonNumericId):
        build_get_invoice("abc")
    with pytest.raises(MissingId):
        build_get_invoice("")


def test_pay_invoice_sends_exact_funds() -> None:
    message, funds = build_pay_invoice("3", Decimal("30"), "uxion")
    assert message == {"PayInvoice": {"invoice_id": 3}}
    assert funds == [{"denom": "uxion", "amount": "30"}]


def test_invoices_by_user_lowercases_address() -> None:
    assert build_invoices_by_user("XION1Issuer") == {"GetInvoicesByUser": {"user": "xion1issuer"}}


def test_fee_with_granter() -> None:
    params = ExecutionParams(gas_limit=500_000, fee_amount="100", fee_denom="uxion", granter="xion1treasury")
    assert params.to_fee() == {
        "amount": [{"amount": "100", "denom": "uxion"}],
        "gas": "500000",
        "granter": "xion1treasury",
    }


def test_fee_without_granter_omits_it() -> None:
    params = ExecutionParams(gas_limit=200_000, fee_amount="50", fee_denom="uxion")
    assert "granter" not in params.to_fee()


def test_execution_params_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("XION_INVOICE_GAS_LIMIT", "750000")
    monkeypatch.setenv("XION_INVOICE_FEE_AMOUNT", "250")
    monkeypatch.setenv("XION_INVOICE_FEE_DENOM", "uxion")
    monkeypatch.setenv("XION_INVOICE_GRANTER", "xion1granter")
    params = ExecutionParams.from_settings(Settings.from_env())
    assert params == ExecutionParams(750_000, "250", "uxion", "xion1granter")


def test_settings_defaults(monkeypatch) -> None:
    for name in ("XION_INVOICE_GRANTER", "XION_INVOICE_DENOM", "XION_INVOICE_BACKEND"):
        monkeypatch.delenv(name, raising=False)
    config = Settings.from_env()
    assert config.denom == "uxion"
    assert config.granter is None
    assert config.backend == "demo"
