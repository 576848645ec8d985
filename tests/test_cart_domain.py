"""Tests for the cart line model and cart aggregate."""

import random
from decimal import Decimal

import pytest

from freshcart.domain.cart import (
    CartAggregate,
    compute_composite_id,
    line_amount,
    money,
)
from freshcart.domain.weights import WEIGHT_OPTIONS, find_weight, is_valid_weight


def _add(cart, product_id="p1", price="100", weight="0.5", name="Tomatoes"):
    return cart.add_item(product_id, name, Decimal(price), "/img.jpg", Decimal(weight))


class TestWeightCatalog:
    def test_values_are_positive_and_ordered(self):
        values = [w.value_kg for w in WEIGHT_OPTIONS]
        assert all(v > 0 for v in values)
        assert values == sorted(values)

    def test_find_weight_ignores_trailing_zeros(self):
        assert find_weight(Decimal("0.50")).display_short == "500g"
        assert find_weight(Decimal("1.0")).label == "1 kilogram"

    def test_unknown_weight(self):
        assert find_weight(Decimal("0.75")) is None
        assert not is_valid_weight(Decimal("3"))


class TestCompositeId:
    def test_is_deterministic(self):
        assert compute_composite_id("p1", Decimal("0.5")) == compute_composite_id("p1", Decimal("0.5"))

    def test_normalizes_weight_representation(self):
        assert compute_composite_id("p1", Decimal("0.50")) == "p1-0.5"
        assert compute_composite_id("p1", Decimal("1.000")) == "p1-1"
        assert compute_composite_id("p1", Decimal("0.25")) == "p1-0.25"

    def test_differs_when_product_or_weight_differs(self):
        base = compute_composite_id("p1", Decimal("0.5"))
        assert compute_composite_id("p2", Decimal("0.5")) != base
        assert compute_composite_id("p1", Decimal("1")) != base

    def test_uuid_product_ids_keep_full_identity(self):
        pid = "6f1c2d9e-0b7a-4c3e-9a55-1d2e3f4a5b6c"
        assert compute_composite_id(pid, Decimal("2")) == f"{pid}-2"


class TestAddItem:
    def test_new_line_starts_at_quantity_one(self):
        cart = CartAggregate()
        line = _add(cart)
        assert line.quantity == 1
        assert line.composite_id == "p1-0.5"
        assert len(cart.lines) == 1

    def test_same_product_and_weight_merges(self):
        cart = CartAggregate()
        _add(cart)
        _add(cart)
        assert len(cart.lines) == 1
        assert cart.lines[0].quantity == 2

    def test_different_weight_makes_new_line(self):
        cart = CartAggregate()
        _add(cart, weight="0.5")
        _add(cart, weight="1")
        assert [l.composite_id for l in cart.lines] == ["p1-0.5", "p1-1"]

    def test_lines_keep_insertion_order(self):
        cart = CartAggregate()
        _add(cart, product_id="b")
        _add(cart, product_id="a")
        _add(cart, product_id="b")
        assert [l.product_id for l in cart.lines] == ["b", "a"]


class TestRemoveAndUpdate:
    def test_remove_existing(self):
        cart = CartAggregate()
        _add(cart)
        cart.remove_item("p1-0.5")
        assert cart.lines == []

    def test_remove_missing_is_noop(self):
        cart = CartAggregate()
        _add(cart)
        before = cart.to_dict()
        cart.remove_item("nope-1")
        assert cart.to_dict() == before

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_removes_line(self, quantity):
        cart = CartAggregate()
        _add(cart)
        cart.update_quantity("p1-0.5", quantity)
        assert cart.get("p1-0.5") is None

    def test_update_quantity_sets_value(self):
        cart = CartAggregate()
        _add(cart)
        cart.update_quantity("p1-0.5", 5)
        assert cart.get("p1-0.5").quantity == 5

    def test_update_quantity_missing_is_noop(self):
        cart = CartAggregate()
        cart.update_quantity("p1-0.5", 3)
        assert cart.lines == []

    def test_clear(self):
        cart = CartAggregate()
        _add(cart)
        _add(cart, product_id="p2")
        cart.clear()
        assert cart.is_empty()
        assert cart.total == 0
        assert cart.total_items == 0


class TestUpdateWeight:
    def test_rekeys_line(self):
        cart = CartAggregate()
        _add(cart, weight="0.5")
        line = cart.update_weight("p1-0.5", Decimal("1"))
        assert line.composite_id == "p1-1"
        assert line.weight_kg == Decimal("1")
        assert cart.get("p1-0.5") is None
        assert line.composite_id == compute_composite_id(line.product_id, line.weight_kg)

    def test_merges_into_existing_line(self):
        cart = CartAggregate()
        _add(cart, weight="0.5")
        _add(cart, weight="1")
        cart.update_quantity("p1-0.5", 2)

        merged = cart.update_weight("p1-0.5", Decimal("1"))

        assert len(cart.lines) == 1
        assert merged.composite_id == "p1-1"
        assert merged.quantity == 3

    def test_same_weight_is_noop(self):
        cart = CartAggregate()
        _add(cart, weight="0.5")
        cart.update_weight("p1-0.5", Decimal("0.50"))
        assert cart.get("p1-0.5").quantity == 1

    def test_missing_line_is_noop(self):
        cart = CartAggregate()
        assert cart.update_weight("p1-0.5", Decimal("1")) is None


class TestTotals:
    def test_line_amount(self):
        cart = CartAggregate()
        line = _add(cart, price="100", weight="0.5")
        line.quantity = 2
        assert line_amount(line) == Decimal("100")

    def test_totals_recomputed_after_mutation(self):
        cart = CartAggregate()
        _add(cart, price="120", weight="0.25")
        _add(cart, product_id="p2", price="80", weight="1")
        assert cart.total_items == 2
        assert cart.total == Decimal("110")

        cart.update_quantity("p2-1", 3)
        assert cart.total_items == 4
        assert cart.total == Decimal("270")

    def test_full_precision_until_presentation(self):
        cart = CartAggregate()
        _add(cart, price="33.33", weight="0.1")
        _add(cart, product_id="p2", price="33.33", weight="0.1")
        _add(cart, product_id="p3", price="33.33", weight="0.1")
        assert cart.total == Decimal("9.999")
        assert money(cart.total) == Decimal("10.00")

    def test_total_never_drifts(self):
        rng = random.Random(42)
        cart = CartAggregate()
        products = [("a", "120"), ("b", "45.50"), ("c", "300")]
        weights = [w.value_kg for w in WEIGHT_OPTIONS]

        for _ in range(300):
            op = rng.choice(["add", "add", "qty", "remove", "weight"])
            if op == "add":
                pid, price = rng.choice(products)
                cart.add_item(pid, pid, Decimal(price), "", rng.choice(weights))
            elif cart.lines:
                target = rng.choice(cart.lines).composite_id
                if op == "qty":
                    cart.update_quantity(target, rng.randint(-1, 5))
                elif op == "remove":
                    cart.remove_item(target)
                else:
                    cart.update_weight(target, rng.choice(weights))

            expected = sum(
                (l.unit_price_per_kg * l.weight_kg * l.quantity for l in cart.lines),
                Decimal("0"),
            )
            assert cart.total == expected
            assert cart.total_items == sum(l.quantity for l in cart.lines)
            ids = [l.composite_id for l in cart.lines]
            assert len(ids) == len(set(ids))
            assert all(l.quantity >= 1 for l in cart.lines)


class TestSerialization:
    def test_from_dict_restores_lines(self):
        cart = CartAggregate()
        _add(cart, price="99.90", weight="0.25")
        _add(cart, price="99.90", weight="0.25")

        restored = CartAggregate.from_dict(cart.to_dict())

        assert restored.total == cart.total
        assert restored.lines[0].weight_kg == Decimal("0.25")
        assert restored.lines[0].quantity == 2
