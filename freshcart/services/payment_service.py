# freshcart/services/payment_service.py
import hashlib
import hmac
import json
from decimal import Decimal
from typing import Any, Dict

from freshcart.data.models.payment import PaymentModel
from freshcart.domain.cart import money
from freshcart.domain.enums import (
    ORDER_PAYMENT_STATUS_FOR,
    PAYMENT_TRANSITIONS,
    OrderPaymentStatus,
    PaymentMethod,
    PaymentStatus,
)
from freshcart.repos.storage import OrderStore, PaymentStore
from freshcart.services.errors import GatewayError, InvalidPaymentTransition, NotFoundError
from freshcart.services.gateway_client import GatewayClient
from freshcart.services.notification_service import NotificationService
from freshcart.utils import settings
from freshcart.utils.logging import get_logger

logger = get_logger(__name__)


def _hmac_hex(secret: str, message: bytes) -> str:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def verify_payment_signature(
    gateway_order_id: str,
    gateway_payment_id: str,
    signature: str,
    secret: str | None = None,
) -> bool:
    """
    Check the checkout callback signature.

    The gateway signs ``"<order_id>|<payment_id>"`` with the API key secret
    (HMAC-SHA256, hex). Any failure, a missing secret included, means
    "not verified" and never raises.
    """
    try:
        secret = secret if secret is not None else settings.RAZORPAY_KEY_SECRET
        if not secret or not signature:
            return False
        message = f"{gateway_order_id}|{gateway_payment_id}".encode("utf-8")
        return hmac.compare_digest(_hmac_hex(secret, message), signature)
    except Exception as e:
        logger.error(f"Error verifying payment signature: {e}")
        return False


def verify_webhook_signature(raw_body: bytes | str, signature: str, secret: str | None = None) -> bool:
    """Same HMAC scheme over the raw webhook body, keyed with the webhook secret."""
    try:
        secret = secret if secret is not None else settings.RAZORPAY_WEBHOOK_SECRET
        if not secret or not signature:
            return False
        if isinstance(raw_body, str):
            raw_body = raw_body.encode("utf-8")
        return hmac.compare_digest(_hmac_hex(secret, raw_body), signature)
    except Exception as e:
        logger.error(f"Error verifying webhook signature: {e}")
        return False


WEBHOOK_EVENTS = {
    "payment.authorized": PaymentStatus.AUTHORIZED,
    "payment.captured": PaymentStatus.CAPTURED,
    "payment.failed": PaymentStatus.FAILED,
    "refund.processed": PaymentStatus.REFUNDED,
}


class PaymentService:
    def __init__(
        self,
        orders: OrderStore,
        payments: PaymentStore,
        gateway: GatewayClient,
        notification_service: NotificationService | None = None,
        key_secret: str | None = None,
        webhook_secret: str | None = None,
    ):
        self.orders = orders
        self.payments = payments
        self.gateway = gateway
        self.notification_service = notification_service or NotificationService()
        self.key_secret = key_secret
        self.webhook_secret = webhook_secret

    def initiate(self, order_id: str, user_id: str) -> Dict[str, Any]:
        """
        Use Case: start an online payment for an order.

        The gateway order is created first; a Payment is stored only once the
        gateway acknowledged it.
        """
        order = self.orders.get_order(order_id)
        if not order:
            raise NotFoundError(f"Order {order_id} not found")
        if order.user_id != user_id:
            raise PermissionError("No access to this order")
        if order.payment_status == OrderPaymentStatus.PAID.value:
            raise ValueError("Order is already paid")

        amount = money(Decimal(order.total))
        amount_minor = int(amount * 100)

        gw_order = self.gateway.create_order(
            amount_minor=amount_minor,
            currency=settings.CURRENCY,
            receipt=order.id,
            notes={"order_id": order.id, "user_id": user_id},
        )

        payment = self.payments.create_payment(
            PaymentModel(
                order_id=order.id,
                gateway_order_id=gw_order["id"],
                amount=amount,
                currency=gw_order.get("currency", settings.CURRENCY),
                status=PaymentStatus.CREATED.value,
                payment_method=PaymentMethod.ONLINE.value,
            )
        )

        logger.info(f"Payment {payment.id} created for order {order.id}, gateway order {gw_order['id']}")

        return {
            "payment_id": payment.id,
            "order_id": order.id,
            "gateway_order_id": gw_order["id"],
            "key_id": self.gateway.key_id,
            "amount": amount_minor,
            "currency": payment.currency,
        }

    def confirm(
        self,
        order_id: str,
        gateway_order_id: str,
        gateway_payment_id: str,
        signature: str,
    ) -> bool:
        """
        Use Case: checkout callback after the shopper paid.

        Returns False and leaves everything unchanged when the signature does
        not verify or does not belong to this order.
        """
        if not verify_payment_signature(gateway_order_id, gateway_payment_id, signature, self.key_secret):
            logger.warning(f"Payment signature mismatch for order {order_id}")
            return False

        payment = self.payments.get_payment_by_gateway_order_id(gateway_order_id)
        if not payment or payment.order_id != order_id:
            logger.warning(f"Gateway order {gateway_order_id} does not belong to order {order_id}")
            return False

        if payment.status == PaymentStatus.CAPTURED.value:
            return True

        fields = {"gateway_payment_id": gateway_payment_id, "gateway_signature": signature}
        details = self._payment_details(gateway_payment_id)
        if details:
            fields["payment_details"] = json.dumps(details)
            if details.get("method"):
                fields["payment_method"] = details["method"]

        try:
            self._transition(payment, PaymentStatus.CAPTURED, **fields)
        except InvalidPaymentTransition as e:
            logger.warning(f"Payment {payment.id} for order {order_id} not captured: {e}")
            return False
        return True

    def _payment_details(self, gateway_payment_id: str) -> Dict[str, Any] | None:
        # szczegoly sa tylko informacyjne, podpis juz zweryfikowany
        try:
            return self.gateway.fetch_payment(gateway_payment_id)
        except GatewayError as e:
            logger.warning(f"Could not fetch details for payment {gateway_payment_id}: {e}")
            return None

    def handle_webhook(self, raw_body: bytes, signature: str) -> bool:
        if not verify_webhook_signature(raw_body, signature, self.webhook_secret):
            logger.warning("Webhook signature mismatch")
            return False

        try:
            event = json.loads(raw_body)
        except ValueError:
            raise ValueError("Webhook body is not valid JSON")

        if not isinstance(event, dict):
            raise ValueError("Webhook body must be a JSON object")

        name = event.get("event")
        target = WEBHOOK_EVENTS.get(name) if isinstance(name, str) else None
        if target is None:
            logger.info(f"Ignoring webhook event {name}")
            return True

        entity = event.get("payload")
        for key in ("payment", "entity"):
            if not isinstance(entity, dict):
                break
            entity = entity.get(key)
        if not isinstance(entity, dict):
            raise ValueError(f"Webhook {name} has no payment entity")

        gateway_order_id = entity.get("order_id")
        payment = self.payments.get_payment_by_gateway_order_id(gateway_order_id) if gateway_order_id else None
        if not payment:
            logger.warning(f"Webhook {name} for unknown gateway order {gateway_order_id}")
            return True

        if payment.status == target.value:
            return True

        fields = {"payment_details": json.dumps(entity)}
        if entity.get("id"):
            fields["gateway_payment_id"] = entity["id"]
        if entity.get("method"):
            fields["payment_method"] = entity["method"]

        try:
            self._transition(payment, target, **fields)
        except InvalidPaymentTransition as e:
            # webhooki moga przyjsc w innej kolejnosci
            logger.warning(f"Webhook {name} ignored for payment {payment.id}: {e}")
        return True

    def refund(self, order_id: str) -> PaymentModel:
        # zamowienie moze miec kilka prob platnosci, zwracamy te oplacona
        payment = self.payments.get_captured_payment(order_id) or self.payments.get_payment_by_order_id(order_id)
        if not payment:
            raise NotFoundError(f"No payment for order {order_id}")
        return self._transition(payment, PaymentStatus.REFUNDED)

    def _transition(self, payment: PaymentModel, target: PaymentStatus, **fields) -> PaymentModel:
        current = PaymentStatus(payment.status)
        if target not in PAYMENT_TRANSITIONS[current]:
            raise InvalidPaymentTransition(current.value, target.value)

        updated = self.payments.update_payment(payment.id, status=target.value, **fields)
        logger.info(f"Payment {payment.id}: {current.value} -> {target.value}")

        order_status = ORDER_PAYMENT_STATUS_FOR.get(target)
        order = self.orders.get_order(payment.order_id)
        if order_status and order and order.payment_status != order_status.value:
            self.orders.update_payment_status(payment.order_id, order_status.value)
            self.notification_service.send_payment_notification(payment.order_id, order_status.value)

        return updated
