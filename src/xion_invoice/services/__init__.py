"""
Service factory for the Xion invoice client.

This module provides factories returning the configured contract backend,
the wallet session and the InvoiceClient.

Available backends:
- demo: In-memory DemoContract that also acts as the wallet signer
- lcd: Read-only LcdQueryClient; creating and paying need an external
  wallet provider to supply a WalletSession

Instances are cached at the module level, so the same backend is reused
across all requests. Configure via the XION_INVOICE_BACKEND environment
variable.
"""

from functools import cache
from typing import Callable, Dict

from xion_invoice.lib import logs
from xion_invoice.lib.config import settings
from xion_invoice.services.contract import ContractReader, ContractSigner, WalletSession
from xion_invoice.services.contract_demo import DemoContract
from xion_invoice.services.invoice_client import InvoiceClient

LOG = logs.logger(__file__)


def _lcd_backend() -> ContractReader:
    from xion_invoice.lib import clients

    return clients.query_client()


_BACKEND_REGISTRY: Dict[str, Callable[[], ContractReader]] = {
    "demo": lambda: DemoContract(address=settings().contract_address or "xion1invoicecontract"),
    "lcd": _lcd_backend,
}


@cache
def get_contract_backend(kind: str | None = None) -> ContractReader:
    """Return the configured contract backend."""
    resolved_kind = (kind or settings().backend).lower()
    LOG.info("get_contract_backend - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _BACKEND_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown contract backend kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


def get_wallet_session(kind: str | None = None) -> WalletSession:
    """
    Return the wallet session for the configured backend.

    Only the demo backend can sign; its wallet address comes from
    XION_INVOICE_WALLET. Other backends yield a disconnected session.
    """
    backend = get_contract_backend(kind)
    if isinstance(backend, ContractSigner):
        return WalletSession(address=settings().wallet_address, signer=backend)
    return WalletSession()


@cache
def get_invoice_client(kind: str | None = None) -> InvoiceClient:
    """Return the InvoiceClient bound to the configured contract and backend."""
    backend = get_contract_backend(kind)
    client = InvoiceClient.from_settings(settings(), reader=backend)
    if isinstance(backend, DemoContract):
        client.contract_address = backend.address
    return client


__all__ = [
    "ContractReader",
    "ContractSigner",
    "InvoiceClient",
    "WalletSession",
    "get_contract_backend",
    "get_invoice_client",
    "get_wallet_session",
]
