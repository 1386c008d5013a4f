"""Unit tests for MockTransport."""

import pytest

from datatrans_client.models import TransportFailure
from datatrans_client.transactions import Transaction, build_request_body
from datatrans_client.transport import MockTransport


@pytest.mark.asyncio
class TestMockTransportSandboxBehavior:
    """Test the default sandbox-like answers."""

    async def test_valid_request_gets_transaction_id(self, valid_params):
        transport = MockTransport()

        result = await transport.process(build_request_body(valid_params))

        assert set(result) == {"transactionId"}
        assert len(result["transactionId"]) == 18
        assert result["transactionId"].isdigit()

    async def test_missing_refno_is_invalid_property(self, invalid_params):
        transport = MockTransport()

        result = await transport.process(build_request_body(invalid_params))

        assert result == {
            "error": {
                "code": "INVALID_PROPERTY",
                "message": "init.refno must not be null",
            }
        }

    async def test_first_missing_field_reported(self, invalid_params):
        body = build_request_body(invalid_params)
        body["currency"] = None

        result = await MockTransport().process(body)

        assert result["error"]["message"] == "init.currency must not be null"

    async def test_transaction_round_trip(self, test_settings, invalid_params):
        transaction = Transaction(test_settings, invalid_params, transport=MockTransport())

        assert await transaction.authorize() is False
        assert transaction.response.error_message == "init.refno must not be null"


@pytest.mark.asyncio
class TestMockTransportCanned:
    """Test canned responses, injected errors and request recording."""

    async def test_returns_copy_of_canned_response(self, valid_params, failed_response):
        transport = MockTransport(response=failed_response)

        result = await transport.process(build_request_body(valid_params))
        result["error"]["code"] = "CHANGED"

        assert transport.response["error"]["code"] == "INVALID_PROPERTY"

    async def test_raises_injected_error(self, valid_params):
        transport = MockTransport(error=TransportFailure("boom"))

        with pytest.raises(TransportFailure, match="boom"):
            await transport.process(build_request_body(valid_params))

        assert len(transport.requests) == 1

    async def test_records_requests(self, valid_params, expected_request_body):
        transport = MockTransport()

        await transport.process(build_request_body(valid_params))
        await transport.process(build_request_body(valid_params))

        assert transport.requests == [expected_request_body, expected_request_body]
