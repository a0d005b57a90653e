"""
Xion Invoice: a client for creating, viewing and paying on-chain invoices.

All invoice state is held by a CosmWasm contract. This package provides
the client side of that protocol: validating drafts before spending gas,
building contract messages, issuing calls through an injected signer or a
read-only reader, and tracking the lifecycle of each UI flow.

Subpackages:
- models: Invoice, draft and lifecycle data models
- services: Contract capabilities, request builder and InvoiceClient
- utils: Amount, validation, id and date helpers
- lib: Logging, configuration and client factories
- components: Reflex UI components

Main entry points:
- services.get_invoice_client(): The configured InvoiceClient
- app.main(): Start the Reflex development server
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
