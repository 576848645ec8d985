# freshcart/services/order_service.py
from decimal import Decimal
from typing import Any, Dict, List, Tuple

from freshcart.data.models._columns import new_id, utcnow
from freshcart.data.models.order import OrderModel
from freshcart.data.models.order_item import OrderItemModel
from freshcart.domain.cart import CartAggregate, money
from freshcart.domain.enums import OrderPaymentStatus, OrderStatus, PaymentMethod
from freshcart.domain.schemas import ShippingInfo
from freshcart.repos.cart_repo import CartRepo
from freshcart.repos.storage import OrderStore
from freshcart.services.errors import NotFoundError
from freshcart.services.notification_service import NotificationService
from freshcart.utils.settings import DELIVERY_FEE
from freshcart.utils.logging import get_logger

logger = get_logger(__name__)


def order_item_amount(item: OrderItemModel) -> Decimal:
    return Decimal(item.unit_price_per_kg) * Decimal(item.weight_kg) * item.quantity


def materialize_order(
    cart: CartAggregate,
    shipping: ShippingInfo,
    payment_method: str,
    notes: str | None,
    user_id: str,
    delivery_fee: Decimal = DELIVERY_FEE,
) -> Tuple[OrderModel, List[OrderItemModel]]:
    """
    Build an order snapshot from the cart.

    Product name and price per kg are copied from the cart lines, never
    re-read from the catalog. The persisted total is the sum of line amounts
    plus the flat delivery fee, the same figure the cart shows as
    ``grand_total``. The cart itself is left untouched.
    """
    if cart.is_empty():
        raise ValueError("Cannot place an order with an empty cart")

    order_id = new_id()
    now = utcnow()

    items = [
        OrderItemModel(
            id=new_id(),
            order_id=order_id,
            position=position,
            product_id=line.product_id,
            product_name=line.name,
            quantity=line.quantity,
            weight_kg=line.weight_kg,
            unit_price_per_kg=line.unit_price_per_kg,
        )
        for position, line in enumerate(cart.lines)
    ]

    subtotal = sum((order_item_amount(i) for i in items), Decimal("0"))

    order = OrderModel(
        id=order_id,
        user_id=user_id,
        total=money(subtotal + delivery_fee),
        delivery_fee=money(delivery_fee),
        status=OrderStatus.PENDING.value,
        payment_status=OrderPaymentStatus.PENDING_PAYMENT.value,
        shipping_name=shipping.name,
        shipping_email=shipping.email,
        shipping_phone=shipping.phone,
        shipping_address=shipping.society_name,
        shipping_flat_number=shipping.flat_number,
        payment_method=payment_method,
        notes=notes,
        created_at=now,
        updated_at=now,
    )
    return order, items


def order_view(order: OrderModel, items: List[OrderItemModel]) -> Dict[str, Any]:
    return {
        "id": order.id,
        "user_id": order.user_id,
        "total": Decimal(order.total),
        "delivery_fee": Decimal(order.delivery_fee),
        "status": order.status,
        "payment_status": order.payment_status,
        "shipping_name": order.shipping_name,
        "shipping_email": order.shipping_email,
        "shipping_phone": order.shipping_phone,
        "shipping_address": order.shipping_address,
        "shipping_flat_number": order.shipping_flat_number,
        "payment_method": order.payment_method,
        "notes": order.notes,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
        "items": [
            {
                "id": i.id,
                "product_id": i.product_id,
                "product_name": i.product_name,
                "quantity": i.quantity,
                "weight_kg": Decimal(i.weight_kg),
                "unit_price_per_kg": Decimal(i.unit_price_per_kg),
                "amount": money(order_item_amount(i)),
            }
            for i in items
        ],
    }


class OrderService:
    """
    Serwis domeny zamowien.
    Separacja od CartService - koszyk czysci dopiero wywolujacy po udanym zapisie.
    """

    def __init__(
        self,
        store: OrderStore,
        cart_repo: CartRepo | None = None,
        notification_service: NotificationService | None = None,
        delivery_fee: Decimal = DELIVERY_FEE,
    ):
        self.store = store
        self.cart_repo = cart_repo
        self.notification_service = notification_service or NotificationService()
        self.delivery_fee = delivery_fee

    def place_order(
        self,
        user_id: str,
        session_id: str,
        shipping: ShippingInfo,
        payment_method: str = PaymentMethod.COD.value,
        notes: str | None = None,
    ) -> Dict[str, Any]:
        """
        Use Case: checkout from the session cart.

        1. Materializes the order snapshot from the cart
        2. Stores order and items atomically
        3. Clears the cart (only after a successful store)
        4. Sends the notification (async)
        """
        cart = self.cart_repo.load(session_id)

        order, items = materialize_order(
            cart,
            shipping,
            payment_method,
            notes,
            user_id,
            delivery_fee=self.delivery_fee,
        )

        # blad zapisu leci wyzej, koszyk zostaje nietkniety
        created = self.store.create_order(order, items)

        self.cart_repo.delete(session_id)

        logger.info(
            f"Order {created.id} placed by user {user_id} from session {session_id}, "
            f"{len(items)} lines, total {created.total}"
        )

        self.notification_service.send_order_notification(user_id, created.id)

        return order_view(created, self.store.get_order_items(created.id))

    # query
    def get_order(self, order_id: str, user_id: str) -> Dict[str, Any]:
        order = self._get(order_id)

        if order.user_id != user_id:
            raise PermissionError("No access to this order")

        return order_view(order, self.store.get_order_items(order.id))

    def get_orders_for_user(self, user_id: str) -> List[Dict[str, Any]]:
        return [
            order_view(o, self.store.get_order_items(o.id))
            for o in self.store.get_orders_by_user(user_id)
        ]

    def list_orders(self) -> List[Dict[str, Any]]:
        return [order_view(o, self.store.get_order_items(o.id)) for o in self.store.list_orders()]

    # admin commands
    def update_status(self, order_id: str, status: str) -> Dict[str, Any]:
        try:
            status = OrderStatus(status).value
        except ValueError:
            raise ValueError(f"Unknown order status: {status}")

        self._get(order_id)
        order = self.store.update_order_status(order_id, status)
        logger.info(f"Order {order_id} status -> {status}")
        return order_view(order, self.store.get_order_items(order_id))

    def update_payment_status(self, order_id: str, payment_status: str) -> Dict[str, Any]:
        try:
            payment_status = OrderPaymentStatus(payment_status).value
        except ValueError:
            raise ValueError(f"Unknown payment status: {payment_status}")

        if self._get(order_id).payment_method != PaymentMethod.COD.value:
            # platnosci online zmienia tylko PaymentService (bramka, webhook, zwrot)
            raise ValueError("Payment status can only be set by hand for cash on delivery orders")

        order = self.store.update_payment_status(order_id, payment_status)
        logger.info(f"Order {order_id} payment status -> {payment_status}")
        return order_view(order, self.store.get_order_items(order_id))

    def _get(self, order_id: str) -> OrderModel:
        order = self.store.get_order(order_id)
        if not order:
            raise NotFoundError(f"Order {order_id} not found")
        return order
