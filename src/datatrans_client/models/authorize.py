"""Authorize request and response models."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TypedDict

# Decoded JSON as returned by a Transport
RawResponse = dict[str, Any]


class RedirectBody(TypedDict):
    successUrl: str | None
    cancelUrl: str | None
    errorUrl: str | None


class CardBody(TypedDict):
    alias: str
    expiryMonth: str
    expiryYear: str


class _RequestBodyRequired(TypedDict):
    currency: str | None
    refno: str | None
    amount: int | None
    autoSettle: bool
    paymentMethods: list[str]
    redirect: RedirectBody


class RequestBody(_RequestBodyRequired, total=False):
    """Wire-format body of ``POST /v1/transactions``."""

    card: CardBody


@dataclass
class CardParams:
    """
    Tokenized card used for the authorization.

    The alias is the Datatrans card token; month and year are two-digit
    strings ("06", "25").
    """

    alias: str
    expiry_month: str
    expiry_year: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CardParams":
        """Build from either wire keys (expiryMonth) or snake_case keys."""
        return cls(
            alias=data["alias"],
            expiry_month=data.get("expiryMonth", data.get("expiry_month")),
            expiry_year=data.get("expiryYear", data.get("expiry_year")),
        )

    def to_wire(self) -> CardBody:
        return {
            "alias": self.alias,
            "expiryMonth": self.expiry_month,
            "expiryYear": self.expiry_year,
        }


@dataclass
class AuthorizeParams:
    """
    Caller-supplied parameters for an authorization.

    Nothing is validated here. Missing or malformed values are forwarded to
    the gateway, which reports them as an error response.
    """

    currency: str | None
    refno: str | None
    amount: int | None
    payment_methods: Sequence[str] = field(default_factory=list)
    success_url: str | None = None
    cancel_url: str | None = None
    error_url: str | None = None

    # None means "not given"; the request body then defaults to True
    auto_settle: bool | None = None
    card: CardParams | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuthorizeParams":
        """
        Build params from a keyword mapping.

        Args:
            data: Mapping with snake_case keys (currency, refno, amount,
                  payment_methods, success_url, cancel_url, error_url,
                  auto_settle, card). ``card`` may be a CardParams or a mapping;
                  a single payment method string is treated as a one-item list.

        Returns:
            AuthorizeParams
        """
        card = data.get("card")
        if card is not None and not isinstance(card, CardParams):
            card = CardParams.from_dict(card)

        payment_methods = data.get("payment_methods") or []
        if isinstance(payment_methods, str):
            payment_methods = [payment_methods]

        return cls(
            currency=data.get("currency"),
            refno=data.get("refno"),
            amount=data.get("amount"),
            payment_methods=list(payment_methods),
            success_url=data.get("success_url"),
            cancel_url=data.get("cancel_url"),
            error_url=data.get("error_url"),
            auto_settle=data.get("auto_settle"),
            card=card,
        )


@dataclass(frozen=True)
class AuthorizeResponse:
    """
    Interpreted result of an authorize call.

    Holds either a transaction_id (success) or error_code/error_message
    (declined), never both.
    """

    transaction_id: str | None = None
    error_code: str | None = None
    error_message: str | None = None
    raw: RawResponse = field(default_factory=dict, compare=False, repr=False)

    @property
    def successful(self) -> bool:
        return self.transaction_id is not None
