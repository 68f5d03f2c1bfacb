"""
Tests for payhere_sdk.outpayments module.

Tests transfer and get_transaction against a patched httpx.AsyncClient.
"""

import uuid
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from payhere_sdk.errors import (
    PayeeNotFoundError,
    PayhereError,
    TransactionFailedError,
    ValidationError,
)
from payhere_sdk.outpayments import Outpayments
from payhere_sdk.types import Transfer, TransferRequest


@pytest.fixture
def outpayments(http):
    """Outpayments bound to the bare test client."""
    return Outpayments(http)


@pytest.fixture
def transfer_request():
    """Valid payout request."""
    return TransferRequest(
        amount="1500",
        processing_number="payout-7",
        msisdn="256701234567",
        narration="Weekly payout",
    )


class TestTransfer:
    """Tests for Outpayments.transfer."""

    async def test_returns_uuid4(self, outpayments, http, transfer_request, make_response):
        """Test that a UUID4 reference id is returned."""
        with patch.object(http, "post", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = make_response(200, method="POST", path="/outpayments")

            reference_id = await outpayments.transfer(transfer_request)

            assert uuid.UUID(reference_id).version == 4

    async def test_posts_to_outpayments(self, outpayments, http, transfer_request, make_response):
        """Test the path and body sent to the gateway."""
        with patch.object(http, "post", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = make_response(200, method="POST")

            await outpayments.transfer(transfer_request)

            mock_post.assert_called_once_with(
                "/outpayments",
                json={
                    "amount": "1500",
                    "processingNumber": "payout-7",
                    "msisdn": "256701234567",
                    "narration": "Weekly payout",
                },
            )

    async def test_validation_error(self, outpayments, http):
        """Test invalid amounts are rejected before sending."""
        with patch.object(http, "post", new_callable=AsyncMock) as mock_post:
            with pytest.raises(ValidationError, match="amount is required"):
                await outpayments.transfer(TransferRequest(msisdn="256701234567"))
            with pytest.raises(ValidationError, match="amount must be a number"):
                await outpayments.transfer({"amount": "lots", "msisdn": "256701234567"})

            mock_post.assert_not_called()

    async def test_malformed_field_is_validation_error(self, outpayments, http):
        """Test a wrongly typed field is reported as ValidationError, not sent."""
        with patch.object(http, "post", new_callable=AsyncMock) as mock_post:
            with pytest.raises(ValidationError) as exc_info:
                await outpayments.transfer({"amount": "100", "narration": {"text": "hi"}})

            assert exc_info.value.field == "narration"
            assert isinstance(exc_info.value, PayhereError)
            mock_post.assert_not_called()

    async def test_numeric_prefix_is_sent(self, outpayments, http, make_response):
        """Test "12abc" passes validation and is sent as given."""
        with patch.object(http, "post", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = make_response(200, method="POST")

            await outpayments.transfer({"amount": "12abc", "msisdn": "256701234567"})

            assert mock_post.call_args.kwargs["json"]["amount"] == "12abc"

    async def test_http_error_propagates(self, outpayments, http, transfer_request, make_response):
        """Test that unrecognised error responses are not wrapped."""
        with patch.object(http, "post", new_callable=AsyncMock) as mock_post:
            mock_post.return_value = make_response(
                503, json={"error": "maintenance"}, method="POST"
            )

            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await outpayments.transfer(transfer_request)

            assert exc_info.value.response.status_code == 503


class TestGetTransaction:
    """Tests for Outpayments.get_transaction."""

    async def test_successful_transfer(self, outpayments, http, successful_transfer, make_response):
        """Test a SUCCESSFUL transfer is returned."""
        with patch.object(http, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = make_response(200, json=successful_transfer)

            transfer = await outpayments.get_transaction("ref-9")

            assert isinstance(transfer, Transfer)
            assert transfer.amount == "1500"
            assert transfer.is_terminal is True
            mock_get.assert_called_once_with("/outpayments/ref-9")

    async def test_numeric_amount_is_coerced(self, outpayments, http, successful_transfer, make_response):
        """Test numeric amounts from the gateway are kept as strings."""
        body = {**successful_transfer, "amount": 1500}
        with patch.object(http, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = make_response(200, json=body)

            transfer = await outpayments.get_transaction("ref-9")

            assert transfer.amount == "1500"

    async def test_failed_payee_not_found(self, outpayments, http, successful_transfer, make_response):
        """Test a FAILED transfer raises the mapped error."""
        body = {**successful_transfer, "status": "FAILED", "reason": "PAYEE_NOT_FOUND"}
        with patch.object(http, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = make_response(200, json=body)

            with pytest.raises(PayeeNotFoundError) as exc_info:
                await outpayments.get_transaction("ref-9")

            assert isinstance(exc_info.value.transaction, Transfer)

    async def test_failed_unknown_reason(self, outpayments, http, successful_transfer, make_response):
        """Test an unknown reason falls back to the generic error."""
        body = {**successful_transfer, "status": "FAILED", "reason": "NEW_CODE"}
        with patch.object(http, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = make_response(200, json=body)

            with pytest.raises(TransactionFailedError):
                await outpayments.get_transaction("ref-9")
