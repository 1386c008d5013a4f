"""Authorize sub-request: one POST /v1/transactions round trip."""

import structlog

from datatrans_client.config import DatatransSettings
from datatrans_client.logging_config import mask_alias
from datatrans_client.models import AuthorizeParams, RawResponse, RequestBody
from datatrans_client.transactions.request_builder import build_request_body
from datatrans_client.transport.base import Transport

logger = structlog.get_logger(__name__)


class Authorize:
    """
    Initializes a transaction with Datatrans.

    Holds the request parameters and hands the built body to the transport.
    Interpretation of the reply is left to the owning Transaction.
    """

    def __init__(
        self,
        settings: DatatransSettings,
        params: AuthorizeParams,
        transport: Transport,
    ) -> None:
        self.settings = settings
        self.params = params
        self.transport = transport

    @property
    def request_body(self) -> RequestBody:
        return build_request_body(self.params)

    async def process(self) -> RawResponse:
        """Send the request body and return the raw decoded reply."""
        body = self.request_body

        logger.info(
            "datatrans_authorize_starting",
            refno=body["refno"],
            amount=body["amount"],
            currency=body["currency"],
            auto_settle=body["autoSettle"],
            payment_methods=body["paymentMethods"],
            card_alias=mask_alias(body["card"]["alias"]) if "card" in body else None,
        )

        return await self.transport.process(body)
