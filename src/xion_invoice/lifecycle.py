"""
Lifecycle state tracker for the invoice UI flows.

reduce() is a pure function from (state, event) to the next state. A flow
moves idle -> loading -> success/error and may start again from either end
state. A SubmitStarted that arrives while a flow is already loading leaves
the state untouched, so at most one operation is represented per flow.
"""

from dataclasses import dataclass, replace
from typing import Any, Union

from xion_invoice.models.common import LifecycleState, Outcome, Phase
from xion_invoice.models.invoice import Invoice


@dataclass(frozen=True)
class SubmitStarted:
    message: str = ""


@dataclass(frozen=True)
class SubmitSucceeded:
    message: str = ""
    payload: Any = None


@dataclass(frozen=True)
class SubmitFailed:
    message: str = ""


@dataclass(frozen=True)
class SnapshotCleared:
    """The shown invoice no longer matches the contract and must be re-fetched."""

    message: str = ""


LifecycleEvent = Union[SubmitStarted, SubmitSucceeded, SubmitFailed, SnapshotCleared]


def reduce(state: LifecycleState, event: LifecycleEvent) -> LifecycleState:
    """
    Apply a lifecycle event to a state.

    Args:
        state: Current state of the flow.
        event: The event to apply.

    Returns:
        The next state. The input state is never modified.
    """
    if isinstance(event, SubmitStarted):
        if state.phase is Phase.LOADING:
            return state
        return replace(state, phase=Phase.LOADING, message=str(event.message))

    if isinstance(event, SubmitSucceeded):
        if isinstance(event.payload, Invoice):
            return replace(
                state,
                phase=Phase.SUCCESS,
                message=str(event.message),
                snapshot=event.payload,
                result=None,
            )
        result = None if event.payload is None else str(event.payload)
        return replace(state, phase=Phase.SUCCESS, message=str(event.message), result=result)

    if isinstance(event, SubmitFailed):
        return replace(state, phase=Phase.ERROR, message=str(event.message))

    if isinstance(event, SnapshotCleared):
        return replace(state, message=str(event.message), snapshot=None)

    raise TypeError(f"Unknown lifecycle event: {event!r}")


def event_for(outcome: Outcome, success_message: str = "") -> LifecycleEvent:
    """
    Translate a client Outcome into the lifecycle event it implies.

    Non-invoice success values other than strings and ints (transaction
    results, invoice lists) are not carried into the state.
    """
    if outcome.ok:
        payload = outcome.value
        if not isinstance(payload, (Invoice, str, int)):
            payload = None
        return SubmitSucceeded(message=success_message or outcome.message, payload=payload)
    return SubmitFailed(message=outcome.message)
