"""Maps AuthorizeParams onto the Datatrans init request body."""

from datatrans_client.models import AuthorizeParams, RequestBody


def build_request_body(params: AuthorizeParams) -> RequestBody:
    """
    Build the JSON body for POST /v1/transactions.

    Values are copied as given; nothing is validated locally. autoSettle
    defaults to True only when the caller left it unset, so an explicit
    False is kept. ``card`` is added at the top level only when supplied.
    """
    body: RequestBody = {
        "currency": params.currency,
        "refno": params.refno,
        "amount": params.amount,
        "autoSettle": True if params.auto_settle is None else params.auto_settle,
        "paymentMethods": list(params.payment_methods),
        "redirect": {
            "successUrl": params.success_url,
            "cancelUrl": params.cancel_url,
            "errorUrl": params.error_url,
        },
    }

    if params.card is not None:
        body["card"] = params.card.to_wire()

    return body
