"""Tests for the SQLAlchemy order and payment storage."""

from decimal import Decimal

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from freshcart.data.models import OrderItemModel, OrderModel, PaymentModel
from freshcart.domain.cart import CartAggregate
from freshcart.domain.schemas import ShippingInfo
from freshcart.repos.order_repo import OrderRepo
from freshcart.repos.payment_repo import PaymentRepo
from freshcart.services.catalog_service import CatalogService
from freshcart.services.order_service import materialize_order

SHIPPING = ShippingInfo(
    name="Asha Rao",
    email="asha@example.com",
    phone="9876543210",
    society_name="Green Meadows",
    flat_number="B-402",
)


def _order_for(user, product, quantity=2, weight="0.5"):
    cart = CartAggregate()
    cart.add_item(product.id, product.name, Decimal(product.price), product.image_url, Decimal(weight))
    cart.update_quantity(cart.lines[0].composite_id, quantity)
    return materialize_order(cart, SHIPPING, "cod", None, user.id, delivery_fee=Decimal("50"))


class TestOrderRepo:
    def test_create_and_read_back(self, db, user, product):
        repo = OrderRepo(db)
        order, items = _order_for(user, product)

        repo.create_order(order, items)

        stored = repo.get_order(order.id)
        assert stored.total == Decimal("150.00")
        lines = repo.get_order_items(order.id)
        assert len(lines) == 1
        assert lines[0].quantity == 2
        assert lines[0].weight_kg == Decimal("0.5")
        assert lines[0].unit_price_per_kg == Decimal("100")

    def test_snapshot_survives_catalog_changes(self, db, user, product):
        repo = OrderRepo(db)
        order, items = _order_for(user, product)
        repo.create_order(order, items)

        CatalogService(db).update_product(product.id, {"name": "Heirloom Tomatoes", "price": Decimal("240")})
        db.expire_all()

        line = repo.get_order_items(order.id)[0]
        assert line.product_name == "Organic Tomatoes"
        assert line.unit_price_per_kg == Decimal("100")
        assert CatalogService(db).get_product(product.id).name == "Heirloom Tomatoes"

    def test_snapshot_survives_product_deletion(self, db, user, product):
        repo = OrderRepo(db)
        order, items = _order_for(user, product)
        repo.create_order(order, items)

        CatalogService(db).delete_product(product.id)

        assert repo.get_order_items(order.id)[0].product_name == "Organic Tomatoes"

    def test_failed_write_stores_nothing(self, db, user, product):
        repo = OrderRepo(db)
        order, items = _order_for(user, product)
        items[0].product_name = None  # NOT NULL

        with pytest.raises(IntegrityError):
            repo.create_order(order, items)

        assert db.execute(select(func.count()).select_from(OrderModel)).scalar() == 0
        assert db.execute(select(func.count()).select_from(OrderItemModel)).scalar() == 0

    def test_orders_by_user(self, db, user, admin, product):
        repo = OrderRepo(db)
        for owner in (user, user, admin):
            order, items = _order_for(owner, product)
            repo.create_order(order, items)

        assert len(repo.get_orders_by_user(user.id)) == 2
        assert len(repo.list_orders()) == 3

    def test_status_updates(self, db, user, product):
        repo = OrderRepo(db)
        order, items = _order_for(user, product)
        repo.create_order(order, items)

        assert repo.update_order_status(order.id, "confirmed").status == "confirmed"
        assert repo.update_payment_status(order.id, "paid").payment_status == "paid"
        assert repo.update_order_status("missing", "confirmed") is None


class TestPaymentRepo:
    def test_lookup_by_order_and_gateway_order(self, db, user, product):
        order, items = _order_for(user, product)
        OrderRepo(db).create_order(order, items)
        repo = PaymentRepo(db)

        payment = repo.create_payment(
            PaymentModel(order_id=order.id, gateway_order_id="order_123", amount=Decimal("150.00"), currency="INR")
        )

        assert repo.get_payment_by_order_id(order.id).id == payment.id
        assert repo.get_payment_by_gateway_order_id("order_123").id == payment.id
        assert repo.get_payment_by_gateway_order_id("order_999") is None

        updated = repo.update_payment(payment.id, status="captured", gateway_payment_id="pay_456")
        assert updated.status == "captured"
        assert updated.gateway_payment_id == "pay_456"

    def test_captured_payment_among_several_attempts(self, db, user, product):
        order, items = _order_for(user, product)
        OrderRepo(db).create_order(order, items)
        repo = PaymentRepo(db)

        first = repo.create_payment(
            PaymentModel(order_id=order.id, gateway_order_id="order_1", amount=Decimal("150.00"), currency="INR")
        )
        repo.create_payment(
            PaymentModel(order_id=order.id, gateway_order_id="order_2", amount=Decimal("150.00"), currency="INR")
        )
        assert repo.get_captured_payment(order.id) is None

        repo.update_payment(first.id, status="captured")

        assert repo.get_captured_payment(order.id).gateway_order_id == "order_1"
        assert repo.get_payment_by_order_id(order.id).gateway_order_id == "order_2"
