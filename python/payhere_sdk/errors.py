"""
Location: python/payhere_sdk/errors.py

Summary:
    Exception hierarchy for the payhere-sdk and the mapping from gateway
    reason codes to exception classes.

Usage:
    ValidationError is raised by validate.py before any request is sent.
    TransactionError subclasses are raised by the resource clients when a
    polled transaction has FAILED, and by transport.py when an error
    response carries a recognised reason code.

Example:
    from payhere_sdk.errors import InsufficientFundsError, TransactionError

    try:
        payment = await client.inpayments.get_transaction(reference_id)
    except InsufficientFundsError:
        ...
    except TransactionError as exc:
        print(exc.reason, exc.transaction)
"""

from typing import Optional, TYPE_CHECKING, Union

if TYPE_CHECKING:
    import httpx

    from .types import Payment, Transfer

from .types import FailureReason


class PayhereError(Exception):
    """Base class for every exception raised by the SDK itself."""
    pass


class ValidationError(PayhereError, ValueError):
    """
    Raised when a required field is missing or malformed.

    Always raised before any network call, so the caller can fix the
    input and try again.

    Attributes:
        field: Name of the offending field, if known
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class TransactionError(PayhereError):
    """
    Raised when the gateway reports a transaction as failed.

    This is a terminal business outcome, never retried by the SDK.

    Attributes:
        reason: Reason code as reported by the gateway (may be None)
        transaction: The failed Payment or Transfer record, when raised
            from a status poll
        response: The HTTP response, when raised from an error body
    """

    default_message = "Transaction failed"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        reason: Optional[str] = None,
        transaction: Optional[Union["Payment", "Transfer"]] = None,
        response: Optional["httpx.Response"] = None,
    ):
        super().__init__(message or self.default_message)
        self.reason = reason
        self.transaction = transaction
        self.response = response


class TransactionFailedError(TransactionError):
    """Failure with an absent or unrecognised reason code."""
    pass


class PayeeNotFoundError(TransactionError):
    default_message = "Payee does not exist"


class PayerNotFoundError(TransactionError):
    default_message = "Payer does not exist"


class NotAllowedError(TransactionError):
    default_message = "Authorization failed. User does not have permission"


class NotAllowedTargetEnvironmentError(TransactionError):
    default_message = "Access to target environment is forbidden"


class InvalidCallbackUrlHostError(TransactionError):
    default_message = "The callback URL host is not whitelisted"


class InvalidCurrencyError(TransactionError):
    default_message = "Currency is not supported"


class ServiceUnavailableError(TransactionError):
    default_message = "Service temporarily unavailable"


class InternalProcessingError(TransactionError):
    default_message = "An internal error occurred while processing"


class InsufficientFundsError(TransactionError):
    default_message = "Not enough funds to complete the transaction"


class PayerLimitReachedError(TransactionError):
    default_message = "The payer's limit has been breached"


class PayeeNotAllowedToReceiveError(TransactionError):
    default_message = "The payee is not allowed to receive funds"


class PaymentNotApprovedError(TransactionError):
    default_message = "The payment was not approved by the payer"


class ResourceNotFoundError(TransactionError):
    default_message = "The requested resource was not found"


class ApprovalRejectedError(TransactionError):
    default_message = "The approval was rejected"


class ExpiredError(TransactionError):
    default_message = "The request has expired"


class TransactionCancelledError(TransactionError):
    default_message = "The transaction was cancelled"


class ResourceAlreadyExistError(TransactionError):
    default_message = "Duplicated reference id. Creation of resource failed"


REASON_ERRORS: dict[str, type[TransactionError]] = {
    FailureReason.PAYEE_NOT_FOUND.value: PayeeNotFoundError,
    FailureReason.PAYER_NOT_FOUND.value: PayerNotFoundError,
    FailureReason.NOT_ALLOWED.value: NotAllowedError,
    FailureReason.NOT_ALLOWED_TARGET_ENVIRONMENT.value: NotAllowedTargetEnvironmentError,
    FailureReason.INVALID_CALLBACK_URL_HOST.value: InvalidCallbackUrlHostError,
    FailureReason.INVALID_CURRENCY.value: InvalidCurrencyError,
    FailureReason.SERVICE_UNAVAILABLE.value: ServiceUnavailableError,
    FailureReason.INTERNAL_PROCESSING_ERROR.value: InternalProcessingError,
    FailureReason.NOT_ENOUGH_FUNDS.value: InsufficientFundsError,
    FailureReason.INSUFFICIENT_FUNDS.value: InsufficientFundsError,
    FailureReason.PAYER_LIMIT_REACHED.value: PayerLimitReachedError,
    FailureReason.PAYEE_NOT_ALLOWED_TO_RECEIVE.value: PayeeNotAllowedToReceiveError,
    FailureReason.PAYMENT_NOT_APPROVED.value: PaymentNotApprovedError,
    FailureReason.RESOURCE_NOT_FOUND.value: ResourceNotFoundError,
    FailureReason.APPROVAL_REJECTED.value: ApprovalRejectedError,
    FailureReason.EXPIRED.value: ExpiredError,
    FailureReason.TRANSACTION_CANCELED.value: TransactionCancelledError,
    FailureReason.RESOURCE_ALREADY_EXIST.value: ResourceAlreadyExistError,
}


def _reason_code(reason) -> Optional[str]:
    if isinstance(reason, FailureReason):
        return reason.value
    return reason if isinstance(reason, str) else None


def is_known_reason(reason) -> bool:
    """Check whether a reason code maps to a specific error class."""
    return _reason_code(reason) in REASON_ERRORS


def get_error(
    reason=None,
    message: Optional[str] = None,
    **kwargs,
) -> TransactionError:
    """
    Build the exception for a gateway reason code.

    Unknown and missing codes fall back to TransactionFailedError so that
    codes introduced later by the gateway still produce an exception.

    Args:
        reason: Reason code string or FailureReason member
        message: Optional message, defaults to the class message
        **kwargs: Forwarded to the exception (transaction, response)

    Returns:
        A TransactionError instance (not raised)
    """
    code = _reason_code(reason)
    error_class = REASON_ERRORS.get(code, TransactionFailedError)
    return error_class(message, reason=code, **kwargs)


def get_transaction_error(transaction: Union["Payment", "Transfer"]) -> TransactionError:
    """
    Build the exception for a failed transaction record.

    Args:
        transaction: Payment or Transfer whose status is FAILED

    Returns:
        TransactionError subclass selected by ``transaction.reason``
    """
    return get_error(transaction.reason, transaction=transaction)


def get_error_from_response(response: "httpx.Response") -> Optional[TransactionError]:
    """
    Translate a gateway error body into an exception.

    The gateway reports request failures as ``{"code": ..., "message": ...}``.
    Only bodies with a recognised code are translated.

    Args:
        response: Non-success httpx response

    Returns:
        TransactionError subclass, or None when the body is not recognised
    """
    try:
        body = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict) or not is_known_reason(body.get("code")):
        return None

    message = body.get("message")
    return get_error(
        body["code"],
        message if isinstance(message, str) and message else None,
        response=response,
    )
