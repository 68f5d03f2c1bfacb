"""
Shared pytest fixtures for payhere-sdk tests.

This module provides common fixtures used across all test files,
including sample configuration, gateway transaction bodies and a
factory for httpx responses.
"""

import httpx
import pytest

from payhere_sdk.config import Config

BASE_URL = "https://api.payhere.test/api/v1"


@pytest.fixture
def config():
    """Complete production configuration."""
    return Config(
        app_id="app_test123",
        username="merchant",
        password="s3cret",
        environment="production",
        base_url=BASE_URL,
    )


@pytest.fixture
def sandbox_config():
    """Sandbox configuration relying on the default host."""
    return Config(
        app_id="app_test123",
        username="merchant",
        password="s3cret",
        environment="sandbox",
    )


@pytest.fixture
async def http():
    """Bare httpx client; tests patch its get/post methods."""
    client = httpx.AsyncClient(base_url=BASE_URL)
    yield client
    await client.aclose()


@pytest.fixture
def make_response():
    """Build a real httpx.Response bound to a request."""

    def _make(status_code=200, json=None, method="GET", path="/", content=None):
        request = httpx.Request(method, f"{BASE_URL}{path}")
        if content is not None:
            return httpx.Response(status_code, content=content, request=request)
        return httpx.Response(status_code, json=json, request=request)

    return _make


@pytest.fixture
def pending_payment():
    """Gateway body for a request-to-pay awaiting approval."""
    return {
        "processingNumber": "order-42",
        "amount": "500",
        "msisdn": "256772123456",
        "narration": "Order 42",
        "status": "PENDING",
    }


@pytest.fixture
def failed_payment():
    """Gateway body for a request-to-pay that failed for lack of funds."""
    return {
        "processingNumber": "order-42",
        "amount": "500",
        "msisdn": "256772123456",
        "narration": "Order 42",
        "status": "FAILED",
        "reason": "INSUFFICIENT_FUNDS",
    }


@pytest.fixture
def successful_transfer():
    """Gateway body for a completed payout."""
    return {
        "processingNumber": "payout-7",
        "amount": "1500",
        "msisdn": "256701234567",
        "narration": "Weekly payout",
        "status": "SUCCESSFUL",
    }
