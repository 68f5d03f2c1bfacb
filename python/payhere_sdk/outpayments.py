"""
Location: python/payhere_sdk/outpayments.py

Summary:
    Outpayments resource client. Sends money to a payee's mobile money
    account (transfer / payout) and polls its status.

Usage:
    Normally reached through PayhereClient.outpayments.

Example:
    reference_id = await client.outpayments.transfer(
        TransferRequest(amount="1500", processing_number="payout-7", msisdn="256772123456")
    )
    transfer = await client.outpayments.get_transaction(reference_id)
"""

import uuid
from collections.abc import Mapping
from typing import Union
from urllib.parse import quote

import httpx

from .errors import get_transaction_error
from .transport import get_json, post_json
from .types import Transfer, TransferRequest
from .validate import parse_request, validate_transfer

OUTPAYMENTS_PATH = "/outpayments"


class Outpayments:
    """Client for the transfer (payout) endpoints."""

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def transfer(self, request: Union[TransferRequest, Mapping]) -> str:
        """
        Transfer an amount to a payee account.

        Like request_to_pay(), the returned reference id is generated
        locally and never confirmed by the gateway.

        Args:
            request: TransferRequest or a mapping with the same fields

        Returns:
            Reference id (UUID4 string) for polling

        Raises:
            ValidationError: If the request is invalid (nothing is sent)
            TransactionError: If the gateway rejects it with a known code
            httpx.HTTPError: On any other transport failure
        """
        validate_transfer(request)
        request = parse_request(TransferRequest, request)

        reference_id = str(uuid.uuid4())
        await post_json(self._http, OUTPAYMENTS_PATH, request.to_payload())
        return reference_id

    async def get_transaction(self, reference_id: str) -> Transfer:
        """
        Fetch the current state of a transfer.

        Raises:
            TransactionError: Subclass selected by the failure reason when
                the status is FAILED
            httpx.HTTPError: On transport failure
        """
        data = await get_json(self._http, f"{OUTPAYMENTS_PATH}/{quote(reference_id, safe='')}")
        transfer = Transfer.model_validate(data)
        if transfer.is_failed:
            raise get_transaction_error(transfer)
        return transfer
