"""
Reflex application entry point for the Xion invoice UI.

This module initializes the Reflex app and registers the home, create,
view and pay pages.
"""

import contextlib
import os

import reflex as rx

from xion_invoice.components import invoice_form, pay_panel, view_panel
from xion_invoice.lib import clients, logs
from xion_invoice.lib.config import settings
from xion_invoice.state import APP_SUBTITLE, APP_TITLE

LOG = logs.logger(__file__)

APP_PORT = int(os.getenv("XION_INVOICE_PORT", "8000"))

LOG.info(
    "backend:%s contract:%s denom:%s",
    settings().backend,
    settings().contract_address or "<demo>",
    settings().denom,
)


def page_header(title: str) -> rx.Component:
    """Build the heading area with a link back home."""
    return rx.box(
        rx.link("Return Home", href="/", class_name="home-link"),
        rx.heading(title, size="6", as_="h1"),
        class_name="page-header",
    )


def _page(title: str, body: rx.Component) -> rx.Component:
    return rx.box(
        rx.box(page_header(title), body, class_name="app-container"),
        class_name="app-shell",
    )


def index() -> rx.Component:
    """Build the landing page with links to each flow."""
    return _page(
        APP_TITLE,
        rx.box(
            rx.text(APP_SUBTITLE, class_name="muted"),
            rx.link("Create Invoice", href="/create", class_name="nav-link"),
            rx.link("View Invoice", href="/view", class_name="nav-link"),
            rx.link("Pay Invoice", href="/pay", class_name="nav-link"),
            class_name="nav-grid",
        ),
    )


def create_page() -> rx.Component:
    return _page("Create an Invoice", invoice_form())


def view_page() -> rx.Component:
    return _page("View Invoice", view_panel())


def pay_page() -> rx.Component:
    return _page("Pay Invoice", pay_panel())


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
)

app.add_page(index, route="/", title=APP_TITLE)
app.add_page(create_page, route="/create", title="Create Invoice")
app.add_page(view_page, route="/view", title="View Invoice")
app.add_page(pay_page, route="/pay", title="Pay Invoice")


@contextlib.asynccontextmanager
async def close_clients():
    """Close the shared chain clients when the server stops."""
    yield
    await clients.close_query_client()


app.register_lifespan_task(close_clients)


def main() -> None:
    """Entrypoint used by the xion-invoice console script."""
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--frontend-port", str(APP_PORT)])


if __name__ == "__main__":
    main()
