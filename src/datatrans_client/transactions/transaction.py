"""Transaction orchestrator for the Datatrans JSON API."""

from collections.abc import Mapping
from typing import Any

import structlog

from datatrans_client.config import DatatransSettings
from datatrans_client.models import (
    AuthorizeParams,
    AuthorizeResponse,
    ResponseNotAvailable,
)
from datatrans_client.transactions.authorize import Authorize
from datatrans_client.transactions.response import interpret_response
from datatrans_client.transport.base import Transport
from datatrans_client.transport.http_transport import HttpTransport

logger = structlog.get_logger(__name__)


class Transaction:
    """
    A single Datatrans transaction seen from the merchant side.

    Usage:
        async with Transaction(settings, params) as transaction:
            if await transaction.authorize():
                redirect_to(transaction.start_url)
            else:
                print(transaction.response.error_code, transaction.response.error_message)

    Each authorize() call performs a full round trip and replaces the stored
    response. TransportFailure and MalformedResponse propagate to the caller
    and leave the stored response untouched.
    """

    def __init__(
        self,
        settings: DatatransSettings,
        params: AuthorizeParams | Mapping[str, Any],
        transport: Transport | None = None,
    ) -> None:
        """
        Args:
            settings: Gateway context (credentials, environment)
            params: AuthorizeParams or an equivalent snake_case mapping
            transport: Transport to use; defaults to HttpTransport(settings)
        """
        if not isinstance(params, AuthorizeParams):
            params = AuthorizeParams.from_dict(params)

        self.settings = settings
        self.params = params
        # Only a transport created here is closed by close()
        self._owns_transport = transport is None
        self.transport = transport if transport is not None else HttpTransport(settings)
        self._response: AuthorizeResponse | None = None

    @property
    def response(self) -> AuthorizeResponse:
        """Response of the last authorize() call."""
        if self._response is None:
            raise ResponseNotAvailable("authorize() has not been called on this transaction")
        return self._response

    @property
    def start_url(self) -> str | None:
        """Hosted payment page URL for a successful authorize(), else None."""
        if not self.response.successful:
            return None
        return self.settings.start_url(self.response.transaction_id)

    async def authorize(self) -> bool:
        """
        Initialize the transaction with Datatrans.

        Returns:
            True if Datatrans returned a transactionId, False if it returned
            an error object.

        Raises:
            TransportFailure: The call did not produce a usable JSON reply
            MalformedResponse: The reply was JSON of an unknown shape
        """
        raw = await Authorize(self.settings, self.params, self.transport).process()
        self._response = interpret_response(raw)

        if self._response.successful:
            logger.info(
                "datatrans_authorize_success",
                refno=self.params.refno,
                transaction_id=self._response.transaction_id,
            )
        else:
            logger.info(
                "datatrans_authorize_declined",
                refno=self.params.refno,
                error_code=self._response.error_code,
                error_message=self._response.error_message,
            )

        return self._response.successful

    async def close(self) -> None:
        """Close the HTTP transport if this transaction created it."""
        if self._owns_transport:
            await self.transport.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
