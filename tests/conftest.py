"""Pytest configuration and shared fixtures for all tests.

This module provides shared test fixtures including:
- Sandbox gateway settings
- Authorize params and the request body they must map to
- Canned Datatrans success / error responses
"""

import pytest

from datatrans_client.config import DatatransSettings
from datatrans_client.models import AuthorizeParams, CardParams

SUCCESS_URL = "https://pay.sandbox.datatrans.com/upp/merchant/successPage.jsp"
CANCEL_URL = "https://pay.sandbox.datatrans.com/upp/merchant/cancelPage.jsp"
ERROR_URL = "https://pay.sandbox.datatrans.com/upp/merchant/errorPage.jsp"


@pytest.fixture
def test_settings():
    """Sandbox settings with dummy credentials."""
    return DatatransSettings(
        merchant_id="1100007006",
        password="test-password",
        environment="sandbox",
        timeout_seconds=5.0,
    )


@pytest.fixture
def valid_params():
    """Params for a plain redirect-flow authorization."""
    return AuthorizeParams(
        currency="CHF",
        refno="B4B4B4B4B",
        amount=1337,
        payment_methods=["ECA", "VIS"],
        success_url=SUCCESS_URL,
        cancel_url=CANCEL_URL,
        error_url=ERROR_URL,
    )


@pytest.fixture
def invalid_params():
    """Params the gateway rejects: refno is missing."""
    return AuthorizeParams(
        currency="CHF",
        refno=None,
        amount=1337,
        payment_methods=["ECA", "VIS"],
    )


@pytest.fixture
def card_params():
    """Tokenized card."""
    return CardParams(
        alias="AAABcH0Bq92s3kgAESIAAbGj5NIsAHWC",
        expiry_month="06",
        expiry_year="25",
    )


@pytest.fixture
def expected_request_body():
    """Body valid_params must map to."""
    return {
        "currency": "CHF",
        "refno": "B4B4B4B4B",
        "amount": 1337,
        "autoSettle": True,
        "paymentMethods": ["ECA", "VIS"],
        "redirect": {
            "successUrl": SUCCESS_URL,
            "cancelUrl": CANCEL_URL,
            "errorUrl": ERROR_URL,
        },
    }


@pytest.fixture
def successful_response():
    return {"transactionId": "230223022302230223"}


@pytest.fixture
def failed_response():
    return {
        "error": {
            "code": "INVALID_PROPERTY",
            "message": "init.refno must not be null",
        }
    }
