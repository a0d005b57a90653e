"""
Error types for the invoice lifecycle client.

Every failure the client can report carries an ErrorCode and a short,
human-readable message that is safe to show to the end user. The optional
detail holds diagnostic text that is only written to logs.

Local errors (validation, missing ids, missing wallet, paid invoices) are
raised before any network call. Network and contract failures are wrapped
in NetworkOrContractError at the client boundary.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the invoice client."""

    # Pre-flight errors, never reach the network
    MISSING_FIELD = "MISSING_FIELD"
    NON_POSITIVE_AMOUNT = "NON_POSITIVE_AMOUNT"
    NOT_CONNECTED = "NOT_CONNECTED"
    MISSING_ID = "MISSING_ID"
    NON_NUMERIC_ID = "NON_NUMERIC_ID"
    NO_SNAPSHOT = "NO_SNAPSHOT"
    ALREADY_PAID = "ALREADY_PAID"
    OPERATION_IN_PROGRESS = "OPERATION_IN_PROGRESS"

    # Errors after a call was issued
    NETWORK_OR_CONTRACT = "NETWORK_OR_CONTRACT"
    UNEXPECTED_RESPONSE_SHAPE = "UNEXPECTED_RESPONSE_SHAPE"
    TIMEOUT = "TIMEOUT"

    # Raised by contract backends
    CONTRACT_REJECTED = "CONTRACT_REJECTED"


class InvoiceError(Exception):
    """Base exception with a code, a user-facing message and log detail."""

    def __init__(self, code: ErrorCode, message: str, detail: str | None = None):
        self.code = code
        self.message = message
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary."""
        result = {"error": self.code.value, "message": self.message}
        if self.detail:
            result["detail"] = self.detail
        return result


class ValidationError(InvoiceError):
    """A draft invoice failed local validation."""


class MissingField(ValidationError):
    def __init__(self, field: str):
        super().__init__(
            ErrorCode.MISSING_FIELD,
            "All fields are required.",
            detail=f"missing field: {field}",
        )
        self.field = field


class NonPositiveAmount(ValidationError):
    def __init__(self, amount: object):
        super().__init__(
            ErrorCode.NON_POSITIVE_AMOUNT,
            "Total amount must be greater than 0.",
            detail=f"amount: {amount}",
        )


class NotConnected(InvoiceError):
    def __init__(self, message: str = "Wallet not connected or client unavailable."):
        super().__init__(ErrorCode.NOT_CONNECTED, message)


class MissingId(InvoiceError):
    def __init__(self):
        super().__init__(ErrorCode.MISSING_ID, "Invoice ID is required.")


class NonNumericId(InvoiceError):
    def __init__(self, value: object):
        super().__init__(
            ErrorCode.NON_NUMERIC_ID,
            "Please enter a valid Invoice ID.",
            detail=f"invoice id: {value!r}",
        )


class NoSnapshot(InvoiceError):
    def __init__(self):
        super().__init__(ErrorCode.NO_SNAPSHOT, "No invoice details available.")


class AlreadyPaid(InvoiceError):
    def __init__(self, invoice_id: object = None):
        super().__init__(
            ErrorCode.ALREADY_PAID,
            "Invoice is already paid.",
            detail=f"invoice id: {invoice_id}",
        )


class OperationInProgress(InvoiceError):
    def __init__(self, key: str):
        super().__init__(
            ErrorCode.OPERATION_IN_PROGRESS,
            "Another request for this invoice is still in progress.",
            detail=f"pending: {key}",
        )


class NetworkOrContractError(InvoiceError):
    """The call was issued and the network or contract reported a failure."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(ErrorCode.NETWORK_OR_CONTRACT, message, detail=detail)


class UnexpectedResponseShape(InvoiceError):
    """The call succeeded but the expected data is not in the response."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(ErrorCode.UNEXPECTED_RESPONSE_SHAPE, message, detail=detail)


class Timeout(InvoiceError):
    def __init__(self, seconds: float):
        super().__init__(
            ErrorCode.TIMEOUT,
            "The network did not respond in time. Please try again.",
            detail=f"timed out after {seconds}s",
        )


class ContractError(InvoiceError):
    """A contract backend refused to execute a message."""

    def __init__(self, message: str):
        super().__init__(ErrorCode.CONTRACT_REJECTED, message)
