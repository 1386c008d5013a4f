"""Domain models for the Datatrans client."""

from datatrans_client.models.authorize import (
    AuthorizeParams,
    AuthorizeResponse,
    CardBody,
    CardParams,
    RawResponse,
    RedirectBody,
    RequestBody,
)
from datatrans_client.models.exceptions import (
    DatatransError,
    MalformedResponse,
    ResponseNotAvailable,
    TransportFailure,
)

__all__ = [
    "AuthorizeParams",
    "AuthorizeResponse",
    "CardBody",
    "CardParams",
    "RawResponse",
    "RedirectBody",
    "RequestBody",
    "DatatransError",
    "MalformedResponse",
    "ResponseNotAvailable",
    "TransportFailure",
]
