"""Datatrans JSON API transactions."""

from datatrans_client.transactions.authorize import Authorize
from datatrans_client.transactions.request_builder import build_request_body
from datatrans_client.transactions.response import interpret_response
from datatrans_client.transactions.transaction import Transaction

__all__ = [
    "Authorize",
    "Transaction",
    "build_request_body",
    "interpret_response",
]
