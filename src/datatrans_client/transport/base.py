"""Base interface for Datatrans transports."""

from abc import ABC, abstractmethod

from datatrans_client.models import RawResponse, RequestBody


class Transport(ABC):
    """
    Abstract base class for whatever carries a request body to Datatrans.

    HttpTransport talks to the real API; MockTransport answers locally for
    tests. Transactions depend only on this interface.
    """

    @abstractmethod
    async def process(self, request_body: RequestBody) -> RawResponse:
        """
        Send a request body and return the decoded JSON response.

        Args:
            request_body: Wire-format body built by build_request_body()

        Returns:
            Decoded JSON mapping, either ``{"transactionId": ...}`` or
            ``{"error": {"code": ..., "message": ...}}``.

        Raises:
            TransportFailure: Network errors, timeouts, 5xx, non-JSON bodies.

        Note:
            Gateway-side validation errors are NOT exceptions - they come back
            as an error-shaped mapping.
        """
        pass
