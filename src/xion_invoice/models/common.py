"""
Common state models for the invoice lifecycle.

This module defines the client-local, ephemeral state objects:

- OperationStatus / Outcome: the normalized result of one client operation
- Phase / LifecycleState: what a UI flow shows for its current operation

Nothing here is persisted; a fresh LifecycleState is created per page load.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from xion_invoice.errors import ErrorCode, InvoiceError
from xion_invoice.models.invoice import Invoice


class OperationStatus(str, Enum):
    """State of a single client operation."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class Outcome:
    """
    Normalized result of an InvoiceClient operation.

    Attributes:
        status: SUCCEEDED or FAILED once the operation has resolved.
        value: The operation's result (invoice id, Invoice, list of Invoice,
            or the raw transaction result for payments).
        error: The InvoiceError describing a failure.
        message: Human-readable text for the end user.
    """

    status: OperationStatus
    value: Any = None
    error: InvoiceError | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.SUCCEEDED

    @property
    def code(self) -> ErrorCode | None:
        """Return the error code of a failed outcome."""
        return self.error.code if self.error else None

    @classmethod
    def succeeded(cls, value: Any = None, message: str = "") -> "Outcome":
        return cls(status=OperationStatus.SUCCEEDED, value=value, message=message)

    @classmethod
    def failed(cls, error: InvoiceError, message: str | None = None) -> "Outcome":
        return cls(
            status=OperationStatus.FAILED,
            error=error,
            message=message if message is not None else error.message,
        )


class Phase(str, Enum):
    """Phase of a UI flow."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class LifecycleState:
    """
    The state one UI flow (create, view or pay) renders from.

    Attributes:
        phase: Current phase of the flow.
        message: Status text; always a plain string.
        snapshot: Last invoice fetched from the contract, replaced wholesale.
        result: Non-invoice payload of the last success (e.g. a created id).
    """

    phase: Phase = Phase.IDLE
    message: str = ""
    snapshot: Invoice | None = None
    result: str | None = field(default=None)

    @property
    def is_loading(self) -> bool:
        return self.phase is Phase.LOADING
