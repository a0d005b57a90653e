"""
Reflex UI components for the invoice pages.

Modules:
- invoice_card: Snapshot display of one invoice
- invoice_form: Create invoice form with line items
- invoice_lookup: View and pay panels
"""

from xion_invoice.components.invoice_card import invoice_card
from xion_invoice.components.invoice_form import invoice_form
from xion_invoice.components.invoice_lookup import pay_panel, view_panel

__all__ = ["invoice_card", "invoice_form", "pay_panel", "view_panel"]
