"""
Builders for the invoice contract's execute and query messages.

Message keys follow the contract's externally tagged enums:

    ExecuteMsg::CreateInvoice { recipient, amount, description, due_date }
    ExecuteMsg::PayInvoice { invoice_id }
    QueryMsg::GetInvoice { invoice_id }
    QueryMsg::GetInvoicesByUser { user }

Amounts are always sent as strings (Uint128) so they never pass through a
float. Due dates are integer epoch milliseconds.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from xion_invoice.lib.config import Settings
from xion_invoice.utils import format_amount, parse_invoice_id

AUTO_FEE = "auto"


@dataclass(frozen=True)
class ExecutionParams:
    """
    Fee parameters pinned on invoice creation.

    The fee is the network fee, separate from the invoice amount. When a
    granter is set the fee is paid from the granter's allowance, so the
    issuer does not need a native balance.
    """

    gas_limit: int
    fee_amount: str
    fee_denom: str
    granter: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ExecutionParams":
        return cls(
            gas_limit=settings.gas_limit,
            fee_amount=settings.fee_amount,
            fee_denom=settings.fee_denom,
            granter=settings.granter,
        )

    def to_fee(self) -> dict[str, Any]:
        """Return the StdFee object passed to the signer."""
        fee: dict[str, Any] = {
            "amount": [{"amount": str(self.fee_amount), "denom": self.fee_denom}],
            "gas": str(self.gas_limit),
        }
        if self.granter:
            fee["granter"] = self.granter
        return fee


def build_create_invoice(
    payer: str,
    amount: Decimal | int | str,
    description: str,
    due_date_millis: int,
) -> dict[str, Any]:
    """Build the CreateInvoice execute message."""
    return {
        "CreateInvoice": {
            "recipient": payer.strip().lower(),
            "amount": format_amount(amount),
            "description": description,
            "due_date": int(due_date_millis),
        }
    }


def build_get_invoice(invoice_id: int | str) -> dict[str, Any]:
    """
    Build the GetInvoice query.

    Raises:
        MissingId: If invoice_id is blank.
        NonNumericId: If invoice_id is not an integer.
    """
    return {"GetInvoice": {"invoice_id": parse_invoice_id(invoice_id)}}


def build_invoices_by_user(address: str) -> dict[str, Any]:
    """Build the GetInvoicesByUser query listing invoices issued by address."""
    return {"GetInvoicesByUser": {"user": address.strip().lower()}}


def build_pay_invoice(
    invoice_id: int | str,
    amount: Decimal | int | str,
    denom: str,
) -> tuple[dict[str, Any], list[dict[str, str]]]:
    """
    Build the PayInvoice execute message and the funds sent with it.

    Args:
        invoice_id: Id of the invoice being paid.
        amount: The invoice amount from the fetched snapshot.
        denom: Denom the invoice is settled in.

    Returns:
        (message, funds) where funds is a single coin of exactly amount.
    """
    message = {"PayInvoice": {"invoice_id": parse_invoice_id(invoice_id)}}
    funds = [{"denom": denom, "amount": format_amount(amount)}]
    return message, funds
