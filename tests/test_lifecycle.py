from __future__ import annotations

import pytest

from stubs import unpaid_invoice
from xion_invoice.errors import AlreadyPaid
from xion_invoice.lifecycle import (
    SnapshotCleared,
    SubmitFailed,
    SubmitStarted,
    SubmitSucceeded,
    event_for,
    reduce,
)
from xion_invoice.models import LifecycleState, Outcome, Phase


def test_idle_to_loading_to_success() -> None:
    state = reduce(LifecycleState(), SubmitStarted("Creating invoice..."))
    assert state.phase is Phase.LOADING
    assert state.message == "Creating invoice..."

    state = reduce(state, SubmitSucceeded("Invoice created successfully!", "42"))
    assert state.phase is Phase.SUCCESS
    assert state.result == "42"
    assert state.snapshot is None


def test_started_while_loading_is_ignored() -> None:
    loading = reduce(LifecycleState(), SubmitStarted("first"))
    assert reduce(loading, SubmitStarted("second")) is loading


def test_failure_keeps_snapshot_and_text_message() -> None:
    snapshot = unpaid_invoice()
    state = LifecycleState(phase=Phase.LOADING, snapshot=snapshot)
    state = reduce(state, SubmitFailed("Payment failed. Please try again."))
    assert state.phase is Phase.ERROR
    assert state.message == "Payment failed. Please try again."
    assert state.snapshot is snapshot


def test_snapshot_is_replaced_wholesale() -> None:
    first = unpaid_invoice(1)
    second = unpaid_invoice(2, amount="99")
    state = reduce(LifecycleState(snapshot=first), SubmitSucceeded("ok", second))
    assert state.snapshot is second


def test_error_can_restart() -> None:
    state = LifecycleState(phase=Phase.ERROR, message="bad")
    assert reduce(state, SubmitStarted("again")).phase is Phase.LOADING


def test_reduce_rejects_unknown_events() -> None:
    with pytest.raises(TypeError):
        reduce(LifecycleState(), object())


def test_event_for_outcomes() -> None:
    invoice = unpaid_invoice()
    event = event_for(Outcome.succeeded(invoice, "Invoice fetched successfully."))
    assert event == SubmitSucceeded("Invoice fetched successfully.", invoice)

    event = event_for(Outcome.succeeded({"logs": []}, "Payment successful!"))
    assert event == SubmitSucceeded("Payment successful!", None)

    event = event_for(Outcome.failed(AlreadyPaid(1)))
    assert event == SubmitFailed("Invoice is already paid.")


def test_cleared_snapshot_hides_stale_invoice() -> None:
    state = LifecycleState(phase=Phase.SUCCESS, message="Payment successful!", snapshot=unpaid_invoice())
    state = reduce(state, SnapshotCleared("Fetch the invoice again."))
    assert state.snapshot is None
    assert state.phase is Phase.SUCCESS
    assert state.message == "Fetch the invoice again."
