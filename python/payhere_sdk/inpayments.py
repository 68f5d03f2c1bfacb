"""
Location: python/payhere_sdk/inpayments.py

Summary:
    Inpayments resource client. Requests payments from a payer's mobile
    money account (request-to-pay) and polls their status.

Usage:
    Normally reached through PayhereClient.inpayments. Can also be built
    directly around any httpx.AsyncClient pointed at the gateway.

Example:
    reference_id = await client.inpayments.request_to_pay(
        PaymentRequest(amount="500", processing_number="order-42", msisdn="256772123456")
    )
    payment = await client.inpayments.get_transaction(reference_id)
"""

import uuid
from collections.abc import Mapping
from typing import Union
from urllib.parse import quote

import httpx

from .errors import get_transaction_error
from .transport import get_json, post_json
from .types import Payment, PaymentRequest
from .validate import parse_request, validate_request_to_pay

INPAYMENTS_PATH = "/inpayments"


class Inpayments:
    """
    Client for the request-to-pay collection endpoints.

    Holds only the injected HTTP client; every call is independent and
    nothing about issued reference ids is remembered.
    """

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def request_to_pay(self, request: Union[PaymentRequest, Mapping]) -> str:
        """
        Request a payment from a payer.

        The payer (msisdn) is asked to authorize the debit. The transaction
        stays PENDING until they approve or decline it, or the gateway
        times it out. Poll get_transaction() for the outcome.

        The returned reference id is generated locally. The gateway does not
        echo it back, so it carries no server-side uniqueness guarantee.

        Args:
            request: PaymentRequest or a mapping with the same fields

        Returns:
            Reference id (UUID4 string) for polling

        Raises:
            ValidationError: If the request is invalid (nothing is sent)
            TransactionError: If the gateway rejects it with a known code
            httpx.HTTPError: On any other transport failure
        """
        validate_request_to_pay(request)
        request = parse_request(PaymentRequest, request)

        reference_id = str(uuid.uuid4())
        await post_json(self._http, INPAYMENTS_PATH, request.to_payload())
        return reference_id

    async def get_transaction(self, reference_id: str) -> Payment:
        """
        Fetch the current state of a request-to-pay.

        Call this at intervals until the transaction succeeds or fails.

        Args:
            reference_id: Value returned from request_to_pay()

        Returns:
            Payment record, unchanged, for any status other than FAILED

        Raises:
            TransactionError: Subclass selected by the failure reason when
                the status is FAILED
            httpx.HTTPError: On transport failure
        """
        data = await get_json(self._http, f"{INPAYMENTS_PATH}/{quote(reference_id, safe='')}")
        payment = Payment.model_validate(data)
        if payment.is_failed:
            raise get_transaction_error(payment)
        return payment
