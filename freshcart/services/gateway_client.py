# freshcart/services/gateway_client.py
"""
Klient bramki platnosci (Razorpay).

RazorpayClient rozmawia z REST API bramki, FakeGatewayClient symuluje ja
bez zadnych wywolan sieciowych (dev / testy). Wybor przez PAYMENT_GATEWAY.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List
from uuid import uuid4

import requests
from requests import RequestException

from freshcart.services.errors import GatewayError
from freshcart.utils.retry import http_retry
from freshcart.utils.settings import (
    PAYMENT_GATEWAY,
    RAZORPAY_API_URL,
    RAZORPAY_KEY_ID,
    RAZORPAY_KEY_SECRET,
)
from freshcart.utils.logging import get_logger

logger = get_logger(__name__)


class GatewayClient(ABC):
    key_id: str = ""

    @abstractmethod
    def create_order(
        self,
        amount_minor: int,
        currency: str,
        receipt: str,
        notes: Dict[str, str] | None = None,
    ) -> Dict[str, Any]:
        """Create a gateway order, returns the gateway's order entity."""
        ...

    @abstractmethod
    def fetch_payment(self, payment_id: str) -> Dict[str, Any]:
        ...


class RazorpayClient(GatewayClient):
    def __init__(
        self,
        base_url: str | None = None,
        key_id: str | None = None,
        key_secret: str | None = None,
        timeout: int = 5,
    ):
        self.base_url = (base_url or RAZORPAY_API_URL).rstrip("/")
        self.key_id = key_id if key_id is not None else RAZORPAY_KEY_ID
        self.key_secret = key_secret if key_secret is not None else RAZORPAY_KEY_SECRET
        self.timeout = timeout

    def create_order(
        self,
        amount_minor: int,
        currency: str,
        receipt: str,
        notes: Dict[str, str] | None = None,
    ) -> Dict[str, Any]:
        payload = {
            "amount": amount_minor,
            "currency": currency,
            "receipt": receipt,
            "notes": notes or {},
        }
        try:
            return self._post("/orders", payload)
        except RequestException as e:
            logger.error(f"Gateway order creation failed for receipt {receipt}: {e}")
            raise GatewayError("Failed to create payment order") from e

    def fetch_payment(self, payment_id: str) -> Dict[str, Any]:
        try:
            return self._get(f"/payments/{payment_id}")
        except RequestException as e:
            logger.error(f"Fetching gateway payment {payment_id} failed: {e}")
            raise GatewayError("Failed to fetch payment details") from e

    @http_retry()
    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.info(f"RazorpayClient POST {url}")

        resp = requests.post(url, json=payload, auth=(self.key_id, self.key_secret), timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    @http_retry()
    def _get(self, path: str) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.info(f"RazorpayClient GET {url}")

        resp = requests.get(url, auth=(self.key_id, self.key_secret), timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()


class FakeGatewayClient(GatewayClient):
    """Configurable fake gateway, no network calls."""

    key_id = "rzp_test_fake"

    def __init__(self):
        self.should_succeed: bool = True
        self.calls: List[Dict[str, Any]] = []

    def configure(self, should_succeed: bool) -> None:
        self.should_succeed = should_succeed

    def create_order(
        self,
        amount_minor: int,
        currency: str,
        receipt: str,
        notes: Dict[str, str] | None = None,
    ) -> Dict[str, Any]:
        self.calls.append(
            {
                "method": "create_order",
                "amount": amount_minor,
                "currency": currency,
                "receipt": receipt,
            }
        )
        if not self.should_succeed:
            raise GatewayError("Failed to create payment order")

        return {
            "id": f"order_fake_{uuid4().hex[:14]}",
            "entity": "order",
            "amount": amount_minor,
            "currency": currency,
            "receipt": receipt,
            "status": "created",
            "notes": notes or {},
        }

    def fetch_payment(self, payment_id: str) -> Dict[str, Any]:
        self.calls.append({"method": "fetch_payment", "payment_id": payment_id})
        return {"id": payment_id, "entity": "payment", "status": "captured", "method": "upi"}


def build_gateway_client() -> GatewayClient:
    if PAYMENT_GATEWAY == "fake":
        return FakeGatewayClient()
    return RazorpayClient()
