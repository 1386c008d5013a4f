"""
Transports that carry request bodies to Datatrans.

- base.Transport: Abstract interface used by transactions
- http_transport.HttpTransport: Real HTTPS calls via httpx
- mock_transport.MockTransport: Local double that mirrors sandbox answers
"""

from datatrans_client.transport.base import Transport
from datatrans_client.transport.http_transport import HttpTransport
from datatrans_client.transport.mock_transport import MockTransport

__all__ = [
    "Transport",
    "HttpTransport",
    "MockTransport",
]
