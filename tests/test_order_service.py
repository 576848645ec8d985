"""Tests for checkout: order materialization and OrderService."""

from decimal import Decimal

import pytest

from freshcart.domain.cart import CartAggregate
from freshcart.domain.schemas import ShippingInfo
from freshcart.repos.cart_repo import MemoryCartRepo
from freshcart.repos.memory import MemoryOrderStore
from freshcart.services.errors import NotFoundError
from freshcart.services.order_service import OrderService, materialize_order


SHIPPING = ShippingInfo(
    name="Asha Rao",
    email="asha@example.com",
    phone="9876543210",
    society_name="Green Meadows",
    flat_number="B-402",
)


def _cart_with_one_line():
    cart = CartAggregate()
    cart.add_item("p1", "Organic Tomatoes", Decimal("100"), "/img.jpg", Decimal("0.5"))
    cart.update_quantity("p1-0.5", 2)
    return cart


class FailingStore(MemoryOrderStore):
    def create_order(self, order, items):
        raise RuntimeError("database unavailable")


class TestMaterializeOrder:
    def test_end_to_end_scenario(self):
        cart = _cart_with_one_line()
        assert cart.total == Decimal("100")

        order, items = materialize_order(cart, SHIPPING, "cod", None, "user-1", delivery_fee=Decimal("50"))

        assert len(items) == 1
        item = items[0]
        assert item.quantity == 2
        assert item.weight_kg == Decimal("0.5")
        assert item.unit_price_per_kg == Decimal("100")
        assert item.product_name == "Organic Tomatoes"
        # suma linii + stala oplata za dostawe
        assert order.total == Decimal("150.00")
        assert order.delivery_fee == Decimal("50.00")

    def test_zero_delivery_fee_gives_item_total(self):
        order, _ = materialize_order(_cart_with_one_line(), SHIPPING, "cod", None, "user-1", delivery_fee=Decimal("0"))
        assert order.total == Decimal("100.00")

    def test_initial_statuses(self):
        order, _ = materialize_order(_cart_with_one_line(), SHIPPING, "online", "ring twice", "user-1")
        assert order.status == "pending"
        assert order.payment_status == "pending_payment"
        assert order.payment_method == "online"
        assert order.notes == "ring twice"

    def test_copies_shipping_fields(self):
        order, _ = materialize_order(_cart_with_one_line(), SHIPPING, "cod", None, "user-1")
        assert order.shipping_name == "Asha Rao"
        assert order.shipping_email == "asha@example.com"
        assert order.shipping_phone == "9876543210"
        assert order.shipping_address == "Green Meadows"
        assert order.shipping_flat_number == "B-402"

    def test_items_point_at_order(self):
        cart = _cart_with_one_line()
        cart.add_item("p2", "Basil", Decimal("150"), "", Decimal("0.1"))
        order, items = materialize_order(cart, SHIPPING, "cod", None, "user-1")
        assert [i.order_id for i in items] == [order.id, order.id]
        assert [i.position for i in items] == [0, 1]

    def test_does_not_touch_cart(self):
        cart = _cart_with_one_line()
        before = cart.to_dict()
        materialize_order(cart, SHIPPING, "cod", None, "user-1")
        assert cart.to_dict() == before

    def test_empty_cart_rejected(self):
        with pytest.raises(ValueError):
            materialize_order(CartAggregate(), SHIPPING, "cod", None, "user-1")

    def test_snapshot_independent_of_cart_edits(self):
        cart = _cart_with_one_line()
        _, items = materialize_order(cart, SHIPPING, "cod", None, "user-1")
        cart.lines[0].name = "Renamed"
        cart.lines[0].unit_price_per_kg = Decimal("999")
        assert items[0].product_name == "Organic Tomatoes"
        assert items[0].unit_price_per_kg == Decimal("100")


class TestPlaceOrder:
    @pytest.fixture
    def setup(self, notifications):
        store = MemoryOrderStore()
        carts = MemoryCartRepo()
        carts.save("sess-1", _cart_with_one_line())
        svc = OrderService(store, cart_repo=carts, notification_service=notifications, delivery_fee=Decimal("50"))
        return svc, store, carts

    def test_places_order_and_clears_cart(self, setup, notifications):
        svc, store, carts = setup

        result = svc.place_order("user-1", "sess-1", SHIPPING)

        assert result["total"] == Decimal("150.00")
        assert len(result["items"]) == 1
        assert result["items"][0]["amount"] == Decimal("100.00")
        assert carts.load("sess-1").is_empty()
        assert notifications.orders == [("user-1", result["id"])]
        assert store.get_order(result["id"]) is not None

    def test_store_failure_keeps_cart(self, notifications):
        carts = MemoryCartRepo()
        carts.save("sess-1", _cart_with_one_line())
        svc = OrderService(FailingStore(), cart_repo=carts, notification_service=notifications)

        with pytest.raises(RuntimeError):
            svc.place_order("user-1", "sess-1", SHIPPING)

        assert carts.load("sess-1").total_items == 2
        assert notifications.orders == []

    def test_empty_session_cart_rejected(self, setup):
        svc, store, _ = setup
        with pytest.raises(ValueError):
            svc.place_order("user-1", "other-session", SHIPPING)
        assert store.list_orders() == []

    def test_get_order_checks_owner(self, setup):
        svc, _, _ = setup
        order = svc.place_order("user-1", "sess-1", SHIPPING)

        assert svc.get_order(order["id"], "user-1")["id"] == order["id"]
        with pytest.raises(PermissionError):
            svc.get_order(order["id"], "user-2")
        with pytest.raises(NotFoundError):
            svc.get_order("missing", "user-1")

    def test_orders_for_user(self, setup):
        svc, _, _ = setup
        svc.place_order("user-1", "sess-1", SHIPPING)
        assert len(svc.get_orders_for_user("user-1")) == 1
        assert svc.get_orders_for_user("user-2") == []

    def test_update_status(self, setup):
        svc, _, _ = setup
        order = svc.place_order("user-1", "sess-1", SHIPPING)

        assert svc.update_status(order["id"], "shipped")["status"] == "shipped"
        with pytest.raises(ValueError):
            svc.update_status(order["id"], "lost")

    def test_cod_settled_by_admin(self, setup):
        svc, _, _ = setup
        order = svc.place_order("user-1", "sess-1", SHIPPING)
        assert svc.update_payment_status(order["id"], "paid")["payment_status"] == "paid"

    def test_online_payment_status_not_set_by_hand(self, notifications):
        carts = MemoryCartRepo()
        carts.save("sess-1", _cart_with_one_line())
        svc = OrderService(MemoryOrderStore(), cart_repo=carts, notification_service=notifications)
        order = svc.place_order("user-1", "sess-1", SHIPPING, payment_method="online")

        with pytest.raises(ValueError):
            svc.update_payment_status(order["id"], "paid")
        assert svc.get_order(order["id"], "user-1")["payment_status"] == "pending_payment"
