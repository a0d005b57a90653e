"""
Library modules supporting the invoice client.

Modules:
    logs: Logging utilities
    objects: JSON serialization of contract messages
    config: Environment-driven settings
    clients: Read-only chain client factory (LCD)

clients is not imported here because it depends on the services package.
"""

from xion_invoice.lib import config, logs, objects

__all__ = ["config", "logs", "objects"]
