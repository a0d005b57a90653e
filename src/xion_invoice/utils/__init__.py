"""Utility functions shared across the invoice client package."""

from xion_invoice.utils.invoice_helpers import (
    compute_total,
    format_amount,
    format_date,
    from_epoch_millis,
    parse_date,
    parse_invoice_id,
    parse_price,
    to_epoch_millis,
    validate_draft,
)

__all__ = [
    "compute_total",
    "format_amount",
    "format_date",
    "from_epoch_millis",
    "parse_date",
    "parse_invoice_id",
    "parse_price",
    "to_epoch_millis",
    "validate_draft",
]
