"""Reflex configuration for the Xion invoice application."""

import reflex as rx

config = rx.Config(
    app_name="xion_invoice",
    app_module_import="xion_invoice.app",
)
