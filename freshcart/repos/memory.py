# freshcart/repos/memory.py
from typing import Dict, List

from freshcart.data.models._columns import new_id, utcnow
from freshcart.data.models.order import OrderModel
from freshcart.data.models.order_item import OrderItemModel
from freshcart.data.models.payment import PaymentModel
from freshcart.domain.enums import PaymentStatus
from freshcart.repos.storage import OrderStore, PaymentStore


class MemoryOrderStore(OrderStore):
    def __init__(self):
        self.orders: Dict[str, OrderModel] = {}
        self.items: Dict[str, List[OrderItemModel]] = {}

    def create_order(self, order: OrderModel, items: List[OrderItemModel]) -> OrderModel:
        order.id = order.id or new_id()
        for position, item in enumerate(items):
            item.id = item.id or new_id()
            item.order_id = order.id
            item.position = position
        # wszystko albo nic - zapis dopiero po przygotowaniu wszystkich linii
        self.items[order.id] = list(items)
        self.orders[order.id] = order
        return order

    def get_order(self, order_id: str) -> OrderModel | None:
        return self.orders.get(order_id)

    def get_orders_by_user(self, user_id: str) -> List[OrderModel]:
        return [o for o in self.list_orders() if o.user_id == user_id]

    def list_orders(self) -> List[OrderModel]:
        return sorted(self.orders.values(), key=lambda o: o.created_at, reverse=True)

    def get_order_items(self, order_id: str) -> List[OrderItemModel]:
        return list(self.items.get(order_id, []))

    def update_order_status(self, order_id: str, status: str) -> OrderModel | None:
        order = self.get_order(order_id)
        if order:
            order.status = status
            order.updated_at = utcnow()
        return order

    def update_payment_status(self, order_id: str, payment_status: str) -> OrderModel | None:
        order = self.get_order(order_id)
        if order:
            order.payment_status = payment_status
            order.updated_at = utcnow()
        return order


class MemoryPaymentStore(PaymentStore):
    def __init__(self):
        self.payments: Dict[str, PaymentModel] = {}

    def create_payment(self, payment: PaymentModel) -> PaymentModel:
        payment.id = payment.id or new_id()
        self.payments[payment.id] = payment
        return payment

    def update_payment(self, payment_id: str, **fields) -> PaymentModel | None:
        payment = self.payments.get(payment_id)
        if payment:
            for key, value in fields.items():
                setattr(payment, key, value)
            payment.updated_at = utcnow()
        return payment

    def get_payment_by_order_id(self, order_id: str) -> PaymentModel | None:
        # od najnowszej proby
        for payment in reversed(list(self.payments.values())):
            if payment.order_id == order_id:
                return payment
        return None

    def get_captured_payment(self, order_id: str) -> PaymentModel | None:
        for payment in reversed(list(self.payments.values())):
            if payment.order_id == order_id and payment.status == PaymentStatus.CAPTURED.value:
                return payment
        return None

    def get_payment_by_gateway_order_id(self, gateway_order_id: str) -> PaymentModel | None:
        for payment in self.payments.values():
            if payment.gateway_order_id == gateway_order_id:
                return payment
        return None
