"""
Chain client factories.

Provides singleton access to:
- LcdQueryClient (read-only smart queries, no wallet required), closed
  by close_query_client() on app shutdown

Environment variables used:
- XION_LCD_URL: LCD REST endpoint
- XION_INVOICE_TIMEOUT: HTTP timeout in seconds
"""

import functools

from xion_invoice.lib.config import settings
from xion_invoice.services.contract_lcd import LcdQueryClient


@functools.cache
def query_client() -> LcdQueryClient:
    """
    Return the LcdQueryClient for the configured endpoint.

    Returns:
        LcdQueryClient pointing at XION_LCD_URL.
    """
    config = settings()
    return LcdQueryClient(config.lcd_url, timeout=config.timeout)


async def close_query_client() -> None:
    """Close the cached LcdQueryClient, if one was created."""
    if query_client.cache_info().currsize:
        await query_client().aclose()
        query_client.cache_clear()
