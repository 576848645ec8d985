# freshcart/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from freshcart.data.models._columns import utcnow
from freshcart.data.models.order import OrderModel
from freshcart.data.models.order_item import OrderItemModel
from freshcart.repos.storage import OrderStore


class OrderRepo(OrderStore):
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel, items: List[OrderItemModel]) -> OrderModel:
        for position, item in enumerate(items):
            item.position = position
        order.items = list(items)
        try:
            self.db.add(order)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(order)
        return order

    def get_order(self, order_id: str) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def get_orders_by_user(self, user_id: str) -> List[OrderModel]:
        stmt = (
            select(OrderModel)
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def list_orders(self) -> List[OrderModel]:
        stmt = select(OrderModel).order_by(OrderModel.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def get_order_items(self, order_id: str) -> List[OrderItemModel]:
        stmt = (
            select(OrderItemModel)
            .where(OrderItemModel.order_id == order_id)
            .order_by(OrderItemModel.position)
        )
        return list(self.db.execute(stmt).scalars().all())

    def update_order_status(self, order_id: str, status: str) -> OrderModel | None:
        order = self.get_order(order_id)
        if order:
            order.status = status
            order.updated_at = utcnow()
            self.db.commit()
            self.db.refresh(order)
        return order

    def update_payment_status(self, order_id: str, payment_status: str) -> OrderModel | None:
        order = self.get_order(order_id)
        if order:
            order.payment_status = payment_status
            order.updated_at = utcnow()
            self.db.commit()
            self.db.refresh(order)
        return order
