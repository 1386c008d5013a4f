"""
Mock transport for testing without network access.

Answers the way the Datatrans sandbox answers POST /v1/transactions:
- required init fields missing -> INVALID_PROPERTY error object
- otherwise -> a generated 18-digit transactionId

A canned response or an exception can be injected to pin a scenario.
"""

import copy
import uuid

import structlog

from datatrans_client.models import RawResponse, RequestBody
from datatrans_client.transport.base import Transport

logger = structlog.get_logger(__name__)

# Checked in this order; the sandbox reports the first missing one
REQUIRED_INIT_FIELDS = ("currency", "refno", "amount")


class MockTransport(Transport):
    """
    In-memory Transport double.

    Every request body passed to process() is appended to ``requests`` so
    tests can assert on what would have been sent.
    """

    def __init__(
        self,
        response: RawResponse | None = None,
        error: Exception | None = None,
    ) -> None:
        """
        Args:
            response: Canned JSON mapping returned for every call
            error: Exception raised on every call (takes precedence)
        """
        self.response = response
        self.error = error
        self.requests: list[RequestBody] = []

    async def process(self, request_body: RequestBody) -> RawResponse:
        self.requests.append(copy.deepcopy(request_body))

        if self.error is not None:
            logger.info("mock_transport_raising", error_type=type(self.error).__name__)
            raise self.error

        if self.response is not None:
            return copy.deepcopy(self.response)

        for name in REQUIRED_INIT_FIELDS:
            if request_body.get(name) is None:
                logger.info("mock_transport_invalid_property", field=name)
                return {
                    "error": {
                        "code": "INVALID_PROPERTY",
                        "message": f"init.{name} must not be null",
                    }
                }

        transaction_id = str(uuid.uuid4().int)[:18]
        logger.info("mock_transport_authorized", transaction_id=transaction_id)
        return {"transactionId": transaction_id}
