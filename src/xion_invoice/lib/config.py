"""
Runtime configuration for the Xion invoice client.

All deployment policy lives here rather than in the request builder: the
contract address, the payment denom, the flat fee charged on invoice
creation and the treasury account that grants it.

Environment variables used:
- XION_INVOICE_CONTRACT: Invoice contract address
- XION_INVOICE_DENOM: Denom used for invoice payments
- XION_INVOICE_GAS_LIMIT: Gas ceiling for invoice creation
- XION_INVOICE_FEE_AMOUNT / XION_INVOICE_FEE_DENOM: Flat creation fee
- XION_INVOICE_GRANTER: Fee granter (treasury) address
- XION_INVOICE_TIMEOUT: Per-call network timeout in seconds
- XION_LCD_URL: LCD REST endpoint for read-only queries
- XION_INVOICE_BACKEND: Contract backend kind ("demo" or "lcd")
- XION_INVOICE_WALLET: Wallet address used by the demo backend
"""

import functools
import os
from dataclasses import dataclass

DEFAULT_DENOM = "uxion"
DEFAULT_GAS_LIMIT = 500_000
DEFAULT_FEE_AMOUNT = "100"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LCD_URL = "http://localhost:1317"


@dataclass(frozen=True)
class Settings:
    """Resolved configuration values."""

    contract_address: str = ""
    denom: str = DEFAULT_DENOM
    gas_limit: int = DEFAULT_GAS_LIMIT
    fee_amount: str = DEFAULT_FEE_AMOUNT
    fee_denom: str = DEFAULT_DENOM
    granter: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    lcd_url: str = DEFAULT_LCD_URL
    backend: str = "demo"
    wallet_address: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment."""
        return cls(
            contract_address=os.getenv("XION_INVOICE_CONTRACT", ""),
            denom=os.getenv("XION_INVOICE_DENOM", DEFAULT_DENOM),
            gas_limit=int(os.getenv("XION_INVOICE_GAS_LIMIT", str(DEFAULT_GAS_LIMIT))),
            fee_amount=os.getenv("XION_INVOICE_FEE_AMOUNT", DEFAULT_FEE_AMOUNT),
            fee_denom=os.getenv("XION_INVOICE_FEE_DENOM", DEFAULT_DENOM),
            granter=os.getenv("XION_INVOICE_GRANTER") or None,
            timeout=float(os.getenv("XION_INVOICE_TIMEOUT", str(DEFAULT_TIMEOUT))),
            lcd_url=os.getenv("XION_LCD_URL", DEFAULT_LCD_URL),
            backend=os.getenv("XION_INVOICE_BACKEND", "demo").lower(),
            wallet_address=os.getenv("XION_INVOICE_WALLET") or None,
        )


@functools.cache
def settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings.from_env()
