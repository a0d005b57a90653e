"""
Data models and serialization helpers for the Xion invoice client.

This package provides:
- Invoice domain models (Invoice, InvoiceDraft, LineItem)
- Lifecycle models (LifecycleState, Phase, Outcome, OperationStatus)
- Parsing of contract query responses

Reflex-specific models live in models.reflex_models and are imported only
by the UI layer.
"""

from xion_invoice.models.common import (
    LifecycleState,
    OperationStatus,
    Outcome,
    Phase,
)
from xion_invoice.models.invoice import (
    MAX_LINE_ITEMS,
    Invoice,
    InvoiceDraft,
    LineItem,
    parse_invoice,
    parse_invoice_list,
    serialize_invoice,
)

__all__ = [
    "MAX_LINE_ITEMS",
    "Invoice",
    "InvoiceDraft",
    "LifecycleState",
    "LineItem",
    "OperationStatus",
    "Outcome",
    "Phase",
    "parse_invoice",
    "parse_invoice_list",
    "serialize_invoice",
]
