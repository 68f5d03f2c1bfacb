"""
Location: python/payhere_sdk/client.py

Summary:
    Main PayhereClient class for the payhere-sdk. Validates the
    configuration, owns the shared HTTP client and exposes the
    Inpayments and Outpayments resource clients.

Usage:
    The primary entry point for using the SDK. Create a PayhereClient
    with a Config, then use its ``inpayments`` and ``outpayments``
    attributes.

Example:
    from payhere_sdk import PayhereClient, Config, PaymentRequest

    config = Config(app_id="app_123", username="merchant", password="secret")

    async with PayhereClient(config) as client:
        reference_id = await client.inpayments.request_to_pay(
            PaymentRequest(amount="500", processing_number="order-42", msisdn="256772123456")
        )
        payment = await client.inpayments.get_transaction(reference_id)
"""

from typing import Optional

import httpx

from .config import Config
from .inpayments import Inpayments
from .outpayments import Outpayments
from .transport import DEFAULT_TIMEOUT, create_http_client
from .validate import validate_global_config, validate_user_config


class PayhereClient:
    """
    Entry point bundling both resource clients around one HTTP client.

    Attributes:
        config: The validated configuration
        base_url: Base URL requests are sent to
        inpayments: Request-to-pay resource client
        outpayments: Transfer resource client
    """

    def __init__(
        self,
        config: Config,
        *,
        http: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[dict[str, str]] = None,
    ):
        """
        Initialize the PayhereClient.

        Args:
            config: Credentials and gateway location
            http: Optional pre-built httpx.AsyncClient. When given, it is
                used as-is, ``timeout``/``headers`` are ignored, and the
                caller stays responsible for closing it.
            timeout: Request timeout in seconds (default 30)
            headers: Optional extra headers for every request

        Raises:
            ValidationError: If the configuration is incomplete
        """
        validate_global_config(config)
        validate_user_config(config)

        self.config = config
        self.base_url = config.resolved_base_url
        self._owns_http = http is None
        self._http = http or create_http_client(config, timeout=timeout, headers=headers)

        self.inpayments = Inpayments(self._http)
        self.outpayments = Outpayments(self._http)

    async def close(self) -> None:
        """
        Close the HTTP client and release resources.

        Should be called when done with the client, or use
        the async context manager pattern. An injected client is
        left open.
        """
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "PayhereClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args) -> None:
        """Exit async context manager and close resources."""
        await self.close()


__all__ = ["PayhereClient"]
