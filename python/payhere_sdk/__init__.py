"""
Location: python/payhere_sdk/__init__.py

Summary:
    Main package initialization for payhere-sdk. Exports all public classes
    and functions for convenient importing.

Usage:
    from payhere_sdk import PayhereClient, Config, PaymentRequest

    # Or import specific modules
    from payhere_sdk.errors import InsufficientFundsError
    from payhere_sdk.validate import validate_request_to_pay

Version: 0.1.0
"""

from .client import PayhereClient
from .config import (
    Config,
    Environment,
    GlobalConfig,
    UserConfig,
    SANDBOX_BASE_URL,
    load_config,
)
from .types import (
    PaymentRequest,
    TransferRequest,
    Payment,
    Transfer,
    TransactionStatus,
    FailureReason,
)
from .inpayments import Inpayments
from .outpayments import Outpayments
from .errors import (
    PayhereError,
    ValidationError,
    TransactionError,
    TransactionFailedError,
    PayeeNotFoundError,
    PayerNotFoundError,
    NotAllowedError,
    NotAllowedTargetEnvironmentError,
    InvalidCallbackUrlHostError,
    InvalidCurrencyError,
    ServiceUnavailableError,
    InternalProcessingError,
    InsufficientFundsError,
    PayerLimitReachedError,
    PayeeNotAllowedToReceiveError,
    PaymentNotApprovedError,
    ResourceNotFoundError,
    ApprovalRejectedError,
    ExpiredError,
    TransactionCancelledError,
    ResourceAlreadyExistError,
    get_error,
    get_transaction_error,
)
from .validate import (
    validate_request_to_pay,
    validate_transfer,
    validate_global_config,
    validate_user_config,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "PayhereClient",
    # Configuration
    "Config",
    "Environment",
    "GlobalConfig",
    "UserConfig",
    "SANDBOX_BASE_URL",
    "load_config",
    # Types
    "PaymentRequest",
    "TransferRequest",
    "Payment",
    "Transfer",
    "TransactionStatus",
    "FailureReason",
    # Resource clients
    "Inpayments",
    "Outpayments",
    # Exceptions
    "PayhereError",
    "ValidationError",
    "TransactionError",
    "TransactionFailedError",
    "PayeeNotFoundError",
    "PayerNotFoundError",
    "NotAllowedError",
    "NotAllowedTargetEnvironmentError",
    "InvalidCallbackUrlHostError",
    "InvalidCurrencyError",
    "ServiceUnavailableError",
    "InternalProcessingError",
    "InsufficientFundsError",
    "PayerLimitReachedError",
    "PayeeNotAllowedToReceiveError",
    "PaymentNotApprovedError",
    "ResourceNotFoundError",
    "ApprovalRejectedError",
    "ExpiredError",
    "TransactionCancelledError",
    "ResourceAlreadyExistError",
    "get_error",
    "get_transaction_error",
    # Validation
    "validate_request_to_pay",
    "validate_transfer",
    "validate_global_config",
    "validate_user_config",
]
