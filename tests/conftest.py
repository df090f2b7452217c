"""
Pytest configuration and fixtures.
"""
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest

from gateway.client import GatewayClient, GatewayResponse
from gateway.config import GatewayConfig

START_URL = "https://gateway.example.test/start/"


@pytest.fixture
def gateway_config() -> GatewayConfig:
    """Gateway settings pointing at a fake host."""
    return GatewayConfig(
        merchant_id="merchant-123",
        title="Online payment",
        description="Pay with the test gateway.",
        request_url="https://gateway.example.test/v1/request",
        verify_url="https://gateway.example.test/v1/verify",
        start_url=START_URL,
        timeout=30,
    )


@pytest.fixture(autouse=True)
def gateway_settings(settings) -> None:
    """Point the Django settings at the same fake gateway host."""
    settings.PAYBRIDGE_GATEWAY = {
        "MERCHANT_ID": "merchant-123",
        "TITLE": "Online payment",
        "DESCRIPTION": "Pay with the test gateway.",
        "REQUEST_URL": "https://gateway.example.test/v1/request",
        "VERIFY_URL": "https://gateway.example.test/v1/verify",
        "START_URL": START_URL,
        "TIMEOUT": 30,
    }


def http_response(body: Any = None, status_code: int = 200, json_error: bool = False) -> MagicMock:
    """Stand-in for ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    if json_error:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session() -> MagicMock:
    """Mocked ``requests.Session``."""
    return MagicMock()


@pytest.fixture
def client_with_session(gateway_config: GatewayConfig, session: MagicMock) -> GatewayClient:
    return GatewayClient(gateway_config, session=session)


class StubGatewayClient:
    """Gateway client returning canned responses and recording every call."""

    def __init__(
        self,
        request_response: Optional[GatewayResponse] = None,
        verify_response: Optional[GatewayResponse] = None,
    ):
        self.request_response = request_response or GatewayResponse(result=100, track_id="1")
        self.verify_response = verify_response or GatewayResponse(result=100, ref_number="1")
        self.requests: list = []
        self.verifications: list = []

    def request_payment(self, payload: Dict[str, Any]) -> GatewayResponse:
        self.requests.append(payload)
        return self.request_response

    def verify(self, track_id: Any) -> GatewayResponse:
        self.verifications.append(track_id)
        return self.verify_response


class FakeOrder:
    def __init__(self, pk=1, number="1001", total=150000, currency="IRT", billing_phone="09121234567"):
        self.pk = pk
        self.number = number
        self.total = total
        self.currency = currency
        self.billing_phone = billing_phone
        self.status = "pending"
        self.transaction_ref = ""
        self.notes: list = []

    @property
    def is_paid(self):
        return self.status == "completed" and bool(self.transaction_ref)


class FakeOrderRepository:
    """In-memory order store implementing ``OrderRepository``."""

    def __init__(self, *orders: FakeOrder):
        self.orders = {str(o.pk): o for o in orders}
        self.transitions: list = []

    def get(self, order_id):
        return self.orders.get(str(order_id))

    def cancel(self, order, note):
        self._transition(order, "cancelled", note)

    def fail(self, order, note):
        self._transition(order, "failed", note)

    def complete(self, order, reference, note):
        order.transaction_ref = reference
        self._transition(order, "completed", note)

    def _transition(self, order, status, note):
        order.status = status
        order.notes.append(note)
        self.transitions.append((order.pk, status))
