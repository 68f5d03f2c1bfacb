"""
Location: python/payhere_sdk/validate.py

Summary:
    Client-side field checks run before any request is issued. Every
    validator returns None on success and raises ValidationError on the
    first violated rule.

Usage:
    Called by inpayments.py and outpayments.py before sending a request,
    and by client.py when a PayhereClient is constructed.

Example:
    from payhere_sdk.validate import validate_request_to_pay

    validate_request_to_pay({"amount": "abc"})  # raises ValidationError
"""

import math
import numbers
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional, Type, TypeVar, Union

import pydantic

from .config import Environment, GlobalConfig, UserConfig
from .errors import ValidationError
from .types import PaymentRequest, TransferRequest

# Accepts anything with a base-10 integer prefix ("12abc" passes).
_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?[0-9]")

RequestT = TypeVar("RequestT", PaymentRequest, TransferRequest)


def _field(source: Any, name: str, alias: Optional[str] = None) -> Any:
    if source is None:
        return None
    if isinstance(source, Mapping):
        value = source.get(name)
        if value is None and alias:
            value = source.get(alias)
        return value
    return getattr(source, name, None)


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, numbers.Real):
        return math.isfinite(value)
    return isinstance(value, str) and _NUMERIC_PREFIX.match(value) is not None


def _require(value: Any, name: str) -> None:
    if not value:
        raise ValidationError(f"{name} is required", field=name)


def _require_string(value: Any, name: str) -> None:
    _require(value, name)
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string", field=name)


def _validate_amount(request: Any) -> None:
    amount = _field(request, "amount")
    _require(amount, "amount")
    if not _is_numeric(amount):
        raise ValidationError("amount must be a number", field="amount")


def validate_request_to_pay(
    request: Union[PaymentRequest, Mapping, None],
) -> None:
    """
    Check a request-to-pay before it is sent.

    Args:
        request: PaymentRequest, plain mapping, or None

    Raises:
        ValidationError: If amount is missing or not numeric
    """
    _validate_amount(request)


def validate_transfer(
    request: Union[TransferRequest, Mapping, None],
) -> None:
    """
    Check a transfer before it is sent.

    Args:
        request: TransferRequest, plain mapping, or None

    Raises:
        ValidationError: If amount is missing or not numeric
    """
    _validate_amount(request)


def validate_global_config(config: Union[GlobalConfig, Mapping]) -> None:
    """
    Check the gateway location settings.

    Sandbox (or no environment at all) has a default host. Every other
    environment needs an explicit base URL.

    Raises:
        ValidationError: If base_url is missing or not a string outside sandbox
    """
    environment = _field(config, "environment")
    base_url = _field(config, "base_url", "baseUrl")

    if environment and environment != Environment.SANDBOX:
        if not base_url:
            raise ValidationError(
                "baseUrl is required if environment is not sandbox",
                field="baseUrl",
            )
        if not isinstance(base_url, str):
            raise ValidationError("baseUrl must be a string", field="baseUrl")


def validate_user_config(config: Union[UserConfig, Mapping]) -> None:
    """
    Check the application credentials.

    Raises:
        ValidationError: If app_id, username or password is missing or
            not a string
    """
    _require_string(_field(config, "app_id", "appId"), "appId")
    _require_string(_field(config, "username"), "username")
    _require_string(_field(config, "password"), "password")


def parse_request(
    model: Type[RequestT],
    request: Union[RequestT, Mapping],
) -> RequestT:
    """
    Turn a validated request into its model.

    Fields the validators do not check (msisdn, narration, ...) are only
    type-checked here, so model errors are reported as ValidationError too.

    Args:
        model: PaymentRequest or TransferRequest
        request: Model instance or mapping with the same fields

    Raises:
        ValidationError: If a field has the wrong type
    """
    if isinstance(request, model):
        return request
    try:
        return model.model_validate(request)
    except pydantic.ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or None
        message = f"{field}: {error['msg']}" if field else error["msg"]
        raise ValidationError(message, field=field) from exc
