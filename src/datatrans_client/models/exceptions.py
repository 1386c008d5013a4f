"""Custom exceptions for the Datatrans client."""

from typing import Any


class DatatransError(Exception):
    """Base exception for Datatrans client errors."""

    pass


class TransportFailure(DatatransError):
    """
    Raised when the transport could not deliver a usable response.

    This is NOT a declined transaction. No response could be classified,
    so nothing is stored on the Transaction.

    Examples:
    - Network timeout
    - Connection errors
    - Gateway returns 5xx
    - Response body is not JSON
    """

    pass


class MalformedResponse(DatatransError):
    """
    Raised when the gateway returned JSON that is neither success-shaped
    (``transactionId``) nor error-shaped (``error.code`` / ``error.message``).
    """

    def __init__(self, message: str, raw: Any = None) -> None:
        super().__init__(message)
        self.raw = raw


class ResponseNotAvailable(DatatransError):
    """Raised when a Transaction's response is read before authorize() ran."""

    pass
