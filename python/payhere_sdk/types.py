"""
Location: python/payhere_sdk/types.py

Summary:
    Pydantic models for the payhere-sdk. Defines the request value objects
    sent to the gateway (PaymentRequest, TransferRequest), the transaction
    records it reports back (Payment, Transfer), and the status and failure
    reason enums.

Usage:
    These models are used by inpayments.py, outpayments.py, validate.py
    and errors.py. Amounts are kept as strings exactly as the gateway
    exchanges them.

Example:
    from payhere_sdk.types import PaymentRequest

    request = PaymentRequest(
        amount="500",
        processing_number="order-42",
        msisdn="256772123456",
        narration="Order 42",
    )
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TransactionStatus(str, Enum):
    """Transaction states reported by the gateway."""

    PENDING = "PENDING"
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"


TERMINAL_STATUSES = frozenset({TransactionStatus.SUCCESSFUL.value, TransactionStatus.FAILED.value})


class FailureReason(str, Enum):
    """Reason codes the gateway attaches to failed transactions and error bodies."""

    PAYEE_NOT_FOUND = "PAYEE_NOT_FOUND"
    PAYER_NOT_FOUND = "PAYER_NOT_FOUND"
    NOT_ALLOWED = "NOT_ALLOWED"
    NOT_ALLOWED_TARGET_ENVIRONMENT = "NOT_ALLOWED_TARGET_ENVIRONMENT"
    INVALID_CALLBACK_URL_HOST = "INVALID_CALLBACK_URL_HOST"
    INVALID_CURRENCY = "INVALID_CURRENCY"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    INTERNAL_PROCESSING_ERROR = "INTERNAL_PROCESSING_ERROR"
    NOT_ENOUGH_FUNDS = "NOT_ENOUGH_FUNDS"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    PAYER_LIMIT_REACHED = "PAYER_LIMIT_REACHED"
    PAYEE_NOT_ALLOWED_TO_RECEIVE = "PAYEE_NOT_ALLOWED_TO_RECEIVE"
    PAYMENT_NOT_APPROVED = "PAYMENT_NOT_APPROVED"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    APPROVAL_REJECTED = "APPROVAL_REJECTED"
    EXPIRED = "EXPIRED"
    TRANSACTION_CANCELED = "TRANSACTION_CANCELED"
    RESOURCE_ALREADY_EXIST = "RESOURCE_ALREADY_EXIST"


class _Request(BaseModel):
    """
    Fields shared by the outgoing request bodies.

    Attributes:
        amount: Amount as a decimal string. Optional here so that
            validate.py, not the model, reports a missing amount.
        processing_number: Caller reference used for reconciliation.
            Shows up in transaction history and is not required to be unique.
        msisdn: Party identifier. A phone number, an e-mail address or a
            party code UUID; the gateway infers the kind from the format.
        narration: Optional message written to the party's history.
    """
    amount: Optional[str] = None
    processing_number: Optional[str] = Field(None, alias="processingNumber")
    msisdn: Optional[str] = None
    narration: Optional[str] = None

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, coerce_numbers_to_str=True
    )

    def to_payload(self) -> dict:
        """Return the camelCase JSON body, dropping unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PaymentRequest(_Request):
    """Request-to-pay body. The msisdn is debited once they approve."""


class TransferRequest(_Request):
    """Transfer body. The amount is credited to the msisdn account."""


class _Transaction(BaseModel):
    """
    Transaction record as reported by the gateway.

    ``status`` stays a plain string: values outside TransactionStatus are
    kept and treated as non-terminal. Unknown extra fields are preserved.
    """
    processing_number: Optional[str] = Field(None, alias="processingNumber")
    amount: Optional[str] = None
    msisdn: Optional[str] = None
    narration: Optional[str] = None
    status: str
    reason: Optional[str] = None

    model_config = ConfigDict(
        populate_by_name=True, extra="allow", coerce_numbers_to_str=True
    )

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def is_failed(self) -> bool:
        return self.status == TransactionStatus.FAILED


class Payment(_Transaction):
    """Result of polling a request-to-pay transaction."""


class Transfer(_Transaction):
    """Result of polling a transfer."""
