"""
Example usage of Transaction.authorize().

Runs against MockTransport so no credentials or network are needed. Pass
``--sandbox`` to call the real Datatrans sandbox with the credentials from
DATATRANS_MERCHANT_ID / DATATRANS_PASSWORD.
"""

import asyncio
import sys

from datatrans_client import (
    AuthorizeParams,
    CardParams,
    MockTransport,
    Transaction,
)
from datatrans_client.config import settings
from datatrans_client.logging_config import configure_logging_from_settings


def build_params(refno: str | None) -> AuthorizeParams:
    return AuthorizeParams(
        currency="CHF",
        refno=refno,
        amount=1337,  # CHF 13.37
        payment_methods=["ECA", "VIS"],
        success_url="https://pay.sandbox.datatrans.com/upp/merchant/successPage.jsp",
        cancel_url="https://pay.sandbox.datatrans.com/upp/merchant/cancelPage.jsp",
        error_url="https://pay.sandbox.datatrans.com/upp/merchant/errorPage.jsp",
    )


async def example_redirect_flow(use_sandbox: bool):
    """Init a transaction and print where to send the shopper."""
    print("=== Example 1: Redirect flow ===\n")

    transport = None if use_sandbox else MockTransport()
    async with Transaction(settings, build_params("B4B4B4B4B"), transport=transport) as transaction:
        if await transaction.authorize():
            print(f"Transaction ID: {transaction.response.transaction_id}")
            print(f"Start URL: {transaction.start_url}")
        else:
            print(f"Error: {transaction.response.error_code} {transaction.response.error_message}")
    print()


async def example_missing_refno(use_sandbox: bool):
    """The gateway, not the client, rejects a missing refno."""
    print("=== Example 2: Missing refno ===\n")

    transport = None if use_sandbox else MockTransport()
    async with Transaction(settings, build_params(None), transport=transport) as transaction:
        authorized = await transaction.authorize()
    print(f"Authorized: {authorized}")
    print(f"Error code: {transaction.response.error_code}")
    print(f"Error message: {transaction.response.error_message}")
    print()


async def example_card_alias():
    """Authorize a stored card alias without settling."""
    print("=== Example 3: Card alias, autoSettle=False ===\n")

    params = build_params("B4B4B4B4C")
    params.auto_settle = False
    params.card = CardParams(
        alias="AAABcH0Bq92s3kgAESIAAbGj5NIsAHWC",
        expiry_month="06",
        expiry_year="25",
    )

    transport = MockTransport()
    transaction = Transaction(settings, params, transport=transport)
    await transaction.authorize()

    print(f"Sent body: {transport.requests[0]}")
    print(f"Transaction ID: {transaction.response.transaction_id}")
    print()


async def main():
    configure_logging_from_settings(settings)
    use_sandbox = "--sandbox" in sys.argv

    await example_redirect_flow(use_sandbox)
    await example_missing_refno(use_sandbox)
    await example_card_alias()


if __name__ == "__main__":
    asyncio.run(main())
