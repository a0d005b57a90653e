from __future__ import annotations

import logging

from xion_invoice.lib import logs


def test_module_loggers_share_package_handler() -> None:
    log = logs.logger("/srv/app/xion_invoice/services/invoice_client.py")
    package = logging.getLogger(logs.ROOT_LOGGER)

    assert log.name == "xion_invoice.invoice_client"
    assert log.parent is package
    assert package.handlers
    assert not log.handlers


def test_plain_names_join_package_namespace() -> None:
    assert logs.logger("state").name == "xion_invoice.state"
    assert logs.logger("xion_invoice.app").name == "xion_invoice.app"


def test_set_level() -> None:
    package = logging.getLogger(logs.ROOT_LOGGER)
    previous = package.level
    try:
        logs.set_level("debug")
        assert package.level == logging.DEBUG
        logs.set_level("chatty")
        assert package.level == logging.INFO
    finally:
        package.setLevel(previous)
