# freshcart/repos/storage.py
"""
Waski interfejs persystencji zamowien i platnosci.

Dwie implementacje: SQLAlchemy (order_repo / payment_repo) na produkcji
i w pamieci (memory) dla testow.
"""
from abc import ABC, abstractmethod
from typing import List

from freshcart.data.models.order import OrderModel
from freshcart.data.models.order_item import OrderItemModel
from freshcart.data.models.payment import PaymentModel


class OrderStore(ABC):
    @abstractmethod
    def create_order(self, order: OrderModel, items: List[OrderItemModel]) -> OrderModel:
        """Store the order and all of its items, or nothing at all."""
        ...

    @abstractmethod
    def get_order(self, order_id: str) -> OrderModel | None:
        ...

    @abstractmethod
    def get_orders_by_user(self, user_id: str) -> List[OrderModel]:
        ...

    @abstractmethod
    def list_orders(self) -> List[OrderModel]:
        ...

    @abstractmethod
    def get_order_items(self, order_id: str) -> List[OrderItemModel]:
        ...

    @abstractmethod
    def update_order_status(self, order_id: str, status: str) -> OrderModel | None:
        ...

    @abstractmethod
    def update_payment_status(self, order_id: str, payment_status: str) -> OrderModel | None:
        ...


class PaymentStore(ABC):
    @abstractmethod
    def create_payment(self, payment: PaymentModel) -> PaymentModel:
        ...

    @abstractmethod
    def update_payment(self, payment_id: str, **fields) -> PaymentModel | None:
        ...

    @abstractmethod
    def get_payment_by_order_id(self, order_id: str) -> PaymentModel | None:
        """Newest payment attempt for the order."""
        ...

    @abstractmethod
    def get_captured_payment(self, order_id: str) -> PaymentModel | None:
        ...

    @abstractmethod
    def get_payment_by_gateway_order_id(self, gateway_order_id: str) -> PaymentModel | None:
        ...
