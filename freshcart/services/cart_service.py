# freshcart/services/cart_service.py
from decimal import Decimal
from typing import Any, Dict

from freshcart.domain.cart import CartAggregate, line_amount, money
from freshcart.domain.weights import find_weight
from freshcart.repos.cart_repo import CartRepo
from freshcart.services.catalog_service import CatalogService
from freshcart.utils.settings import DELIVERY_FEE
from freshcart.utils.logging import get_logger

logger = get_logger(__name__)


def cart_view(session_id: str, cart: CartAggregate, delivery_fee: Decimal = DELIVERY_FEE) -> Dict[str, Any]:
    subtotal = cart.total
    # oplata za dostawe tylko gdy jest co dostarczyc
    fee = delivery_fee if not cart.is_empty() else Decimal("0")

    items = []
    for line in cart.lines:
        option = find_weight(line.weight_kg)
        items.append(
            {
                "composite_id": line.composite_id,
                "product_id": line.product_id,
                "name": line.name,
                "unit_price_per_kg": line.unit_price_per_kg,
                "image_url": line.image_ref,
                "weight_kg": line.weight_kg,
                "weight_label": option.display_short if option else f"{line.weight_kg}kg",
                "quantity": line.quantity,
                "amount": money(line_amount(line)),
            }
        )

    return {
        "session_id": session_id,
        "items": items,
        "total_items": cart.total_items,
        "total": money(subtotal),
        "delivery_fee": money(fee),
        "grand_total": money(subtotal + fee),
    }


class CartService:
    """
    Use case'y koszyka sesji.
    commands (add, update, remove, clear) modyfikuja stan i zapisuja koszyk,
    query (get) tylko odczyt
    """

    def __init__(self, cart_repo: CartRepo, catalog: CatalogService | None = None):
        self.repo = cart_repo
        self.catalog = catalog

    # query
    def get_cart(self, session_id: str) -> Dict[str, Any]:
        return cart_view(session_id, self.repo.load(session_id))

    # commands
    def add_product(self, session_id: str, product_id: str, weight_kg: Decimal) -> Dict[str, Any]:
        if find_weight(weight_kg) is None:
            raise ValueError(f"Unsupported package weight: {weight_kg}")

        # dane produktu czytane tylko teraz, przy dodaniu do koszyka
        pdata = self.catalog.product_snapshot(product_id)

        cart = self.repo.load(session_id)
        line = cart.add_item(
            product_id=pdata["id"],
            name=pdata["name"],
            unit_price_per_kg=pdata["price_per_kg"],
            image_ref=pdata["image_url"],
            weight_kg=weight_kg,
        )
        self.repo.save(session_id, cart)

        logger.info(f"Cart {session_id}: {line.composite_id} quantity now {line.quantity}")
        return cart_view(session_id, cart)

    def update_item(
        self,
        session_id: str,
        composite_id: str,
        quantity: int | None = None,
        weight_kg: Decimal | None = None,
    ) -> Dict[str, Any]:
        if weight_kg is not None and find_weight(weight_kg) is None:
            raise ValueError(f"Unsupported package weight: {weight_kg}")

        cart = self.repo.load(session_id)

        if weight_kg is not None:
            line = cart.update_weight(composite_id, weight_kg)
            if line:
                composite_id = line.composite_id

        if quantity is not None:
            cart.update_quantity(composite_id, quantity)

        self.repo.save(session_id, cart)
        return cart_view(session_id, cart)

    def remove_item(self, session_id: str, composite_id: str) -> Dict[str, Any]:
        cart = self.repo.load(session_id)
        cart.remove_item(composite_id)
        self.repo.save(session_id, cart)
        return cart_view(session_id, cart)

    def clear(self, session_id: str) -> Dict[str, Any]:
        self.repo.delete(session_id)
        return cart_view(session_id, CartAggregate())
