"""
Location: python/payhere_sdk/transport.py

Summary:
    HTTP transport layer. Builds the configured httpx client, issues the
    JSON requests used by the resource clients, and translates gateway
    error bodies into typed exceptions.

Usage:
    Used by client.py to create the shared httpx.AsyncClient, and by
    inpayments.py / outpayments.py to send requests through it.

Example:
    from payhere_sdk.transport import create_http_client, get_json

    http = create_http_client(config)
    data = await get_json(http, "/inpayments/abc")
"""

import logging
from typing import Any, Optional

import httpx

from .config import Config
from .errors import get_error_from_response

logger = logging.getLogger(__name__)

# Gateway header names
PAYHERE_HEADERS = {
    "APP_ID": "X-Payhere-AppId",
    "ACCEPT": "Accept",
}

DEFAULT_TIMEOUT = 30.0


def create_http_client(
    config: Config,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    headers: Optional[dict[str, str]] = None,
) -> httpx.AsyncClient:
    """
    Create the httpx client shared by the resource clients.

    Requests are authenticated with HTTP basic auth from the username and
    password, and carry the application id header.

    Args:
        config: Validated client configuration
        timeout: Request timeout in seconds (default 30)
        headers: Optional extra headers for every request

    Returns:
        Configured httpx.AsyncClient
    """
    default_headers = {
        PAYHERE_HEADERS["APP_ID"]: config.app_id or "",
        PAYHERE_HEADERS["ACCEPT"]: "application/json",
    }
    default_headers.update(headers or {})

    return httpx.AsyncClient(
        base_url=config.resolved_base_url,
        auth=httpx.BasicAuth(config.username or "", config.password or ""),
        headers=default_headers,
        timeout=timeout,
    )


def raise_for_gateway_error(response: httpx.Response) -> None:
    """
    Raise for a non-success response.

    Error bodies carrying a recognised reason code become the matching
    TransactionError, chained from the httpx error. Anything else is
    raised as httpx.HTTPStatusError, untouched.

    Args:
        response: Response to check

    Raises:
        TransactionError: For recognised gateway error bodies
        httpx.HTTPStatusError: For every other non-success status
    """
    if response.is_success:
        return

    error = get_error_from_response(response)
    if error is None:
        response.raise_for_status()

    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise error from exc


async def post_json(http: httpx.AsyncClient, path: str, body: dict) -> httpx.Response:
    """
    POST a JSON body and check the response.

    Args:
        http: Client to send with
        path: Path relative to the client's base URL
        body: JSON-serialisable request body

    Returns:
        The successful response
    """
    logger.debug("POST %s", path)
    response = await http.post(path, json=body)
    logger.debug("POST %s -> %s", path, response.status_code)
    raise_for_gateway_error(response)
    return response


async def get_json(http: httpx.AsyncClient, path: str) -> Any:
    """
    GET a resource and decode its JSON body.

    Args:
        http: Client to send with
        path: Path relative to the client's base URL

    Returns:
        Decoded JSON body

    Raises:
        json.JSONDecodeError: If the body is not valid JSON
    """
    logger.debug("GET %s", path)
    response = await http.get(path)
    logger.debug("GET %s -> %s", path, response.status_code)
    raise_for_gateway_error(response)
    return response.json()
