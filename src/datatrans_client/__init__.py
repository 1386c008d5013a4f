"""Client for the Datatrans JSON transaction API."""

from datatrans_client.config import DatatransSettings
from datatrans_client.models import (
    AuthorizeParams,
    AuthorizeResponse,
    CardParams,
    DatatransError,
    MalformedResponse,
    ResponseNotAvailable,
    TransportFailure,
)
from datatrans_client.transactions import Authorize, Transaction
from datatrans_client.transport import HttpTransport, MockTransport, Transport

__all__ = [
    "DatatransSettings",
    "AuthorizeParams",
    "AuthorizeResponse",
    "CardParams",
    "DatatransError",
    "MalformedResponse",
    "ResponseNotAvailable",
    "TransportFailure",
    "Authorize",
    "Transaction",
    "HttpTransport",
    "MockTransport",
    "Transport",
]
