"""HTTP transport for the Datatrans JSON API."""

import uuid

import httpx
import structlog

from datatrans_client.config import DatatransSettings
from datatrans_client.models import RawResponse, RequestBody, TransportFailure
from datatrans_client.transport.base import Transport

logger = structlog.get_logger(__name__)


class HttpTransport(Transport):
    """
    Posts request bodies to a Datatrans endpoint over HTTPS.

    Authenticates with HTTP basic auth (merchant ID / password) and tags each
    call with an X-Request-ID correlation header. Retries are not attempted.
    """

    def __init__(
        self,
        settings: DatatransSettings,
        path: str = "/transactions",
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the transport.

        Args:
            settings: Gateway context (credentials, environment, timeout)
            path: Endpoint path below the API base URL
            http_client: Optional preconfigured client, mainly for tests
        """
        self.url = f"{settings.api_url.rstrip('/')}/{path.lstrip('/')}"
        self.timeout_seconds = settings.timeout_seconds
        if http_client is None:
            http_client = httpx.AsyncClient(
                auth=httpx.BasicAuth(settings.merchant_id, settings.password),
                timeout=settings.timeout_seconds,
            )
        self.http_client = http_client

        logger.info(
            "datatrans_http_transport_initialized",
            url=self.url,
            environment=settings.environment,
            timeout_seconds=settings.timeout_seconds,
        )

    async def close(self) -> None:
        """Close the HTTP client connection pool."""
        await self.http_client.aclose()

    async def process(self, request_body: RequestBody) -> RawResponse:
        """
        POST the body as JSON and decode the reply.

        Raises:
            TransportFailure: timeout, connection error, 5xx or non-JSON body
        """
        correlation_id = str(uuid.uuid4())

        logger.info(
            "datatrans_request",
            url=self.url,
            refno=request_body.get("refno"),
            correlation_id=correlation_id,
        )

        try:
            response = await self.http_client.post(
                self.url,
                headers={
                    "Content-Type": "application/json",
                    "X-Request-ID": correlation_id,
                },
                json=request_body,
            )
        except httpx.TimeoutException as e:
            logger.error(
                "datatrans_timeout",
                url=self.url,
                correlation_id=correlation_id,
                error=str(e),
            )
            raise TransportFailure("Datatrans request timed out") from e

        except httpx.RequestError as e:
            logger.error(
                "datatrans_request_error",
                url=self.url,
                correlation_id=correlation_id,
                error=str(e),
            )
            raise TransportFailure(f"Datatrans request error: {e}") from e

        if response.status_code >= 500:
            logger.error(
                "datatrans_service_error",
                status_code=response.status_code,
                correlation_id=correlation_id,
            )
            raise TransportFailure(
                f"Datatrans unavailable (status: {response.status_code})"
            )

        # 4xx carries the gateway's error object and is returned as data
        try:
            payload = response.json()
        except ValueError as e:
            logger.error(
                "datatrans_invalid_json",
                status_code=response.status_code,
                correlation_id=correlation_id,
            )
            raise TransportFailure(
                f"Datatrans returned a non-JSON body (status: {response.status_code})"
            ) from e

        logger.info(
            "datatrans_response",
            status_code=response.status_code,
            correlation_id=correlation_id,
        )

        return payload

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
