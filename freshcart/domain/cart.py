# freshcart/domain/cart.py
"""
Koszyk sesji klienta.

CartAggregate trzyma uporzadkowana liste linii (produkt + waga) dla jednej
sesji. Sumy sa zawsze liczone od nowa z aktualnych linii, nic nie jest
cache'owane.
"""
from dataclasses import dataclass, asdict
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

COMPOSITE_ID_SEPARATOR = "-"
CENT = Decimal("0.01")


def format_weight(weight_kg: Decimal) -> str:
    # 0.50 -> "0.5", 1.0 -> "1", 100 -> "100"
    return format(Decimal(weight_kg).normalize(), "f")


def compute_composite_id(product_id: str, weight_kg: Decimal) -> str:
    return f"{product_id}{COMPOSITE_ID_SEPARATOR}{format_weight(weight_kg)}"


def money(amount: Decimal) -> Decimal:
    """Round to presentation precision (two places, half up)."""
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass
class CartLine:
    composite_id: str
    product_id: str
    name: str
    unit_price_per_kg: Decimal
    image_ref: str
    weight_kg: Decimal
    quantity: int = 1

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["unit_price_per_kg"] = str(self.unit_price_per_kg)
        data["weight_kg"] = str(self.weight_kg)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartLine":
        return cls(
            composite_id=data["composite_id"],
            product_id=data["product_id"],
            name=data["name"],
            unit_price_per_kg=Decimal(data["unit_price_per_kg"]),
            image_ref=data.get("image_ref", ""),
            weight_kg=Decimal(data["weight_kg"]),
            quantity=int(data["quantity"]),
        )


def line_amount(line: CartLine) -> Decimal:
    return line.unit_price_per_kg * line.weight_kg * line.quantity


class CartAggregate:
    def __init__(self, lines: List[CartLine] | None = None):
        self.lines: List[CartLine] = list(lines or [])

    def get(self, composite_id: str) -> CartLine | None:
        for line in self.lines:
            if line.composite_id == composite_id:
                return line
        return None

    # commands
    def add_item(
        self,
        product_id: str,
        name: str,
        unit_price_per_kg: Decimal,
        image_ref: str,
        weight_kg: Decimal,
    ) -> CartLine:
        composite_id = compute_composite_id(product_id, weight_kg)
        existing = self.get(composite_id)

        if existing:
            existing.quantity += 1
            return existing

        line = CartLine(
            composite_id=composite_id,
            product_id=product_id,
            name=name,
            unit_price_per_kg=Decimal(unit_price_per_kg),
            image_ref=image_ref,
            weight_kg=Decimal(weight_kg),
            quantity=1,
        )
        self.lines.append(line)
        return line

    def remove_item(self, composite_id: str) -> None:
        self.lines = [line for line in self.lines if line.composite_id != composite_id]

    def update_quantity(self, composite_id: str, new_quantity: int) -> None:
        if new_quantity <= 0:
            self.remove_item(composite_id)
            return

        line = self.get(composite_id)
        if line:
            line.quantity = new_quantity

    def update_weight(self, composite_id: str, new_weight_kg: Decimal) -> CartLine | None:
        """
        Change a line's weight and re-key it.

        The line's composite id always matches its (product, weight). When
        another line already holds the new id, the two are merged into that
        line and the quantities are summed.
        """
        line = self.get(composite_id)
        if not line:
            return None

        new_id = compute_composite_id(line.product_id, new_weight_kg)
        if new_id == composite_id:
            return line

        target = self.get(new_id)
        if target:
            target.quantity += line.quantity
            self.remove_item(composite_id)
            return target

        line.weight_kg = Decimal(new_weight_kg)
        line.composite_id = new_id
        return line

    def clear(self) -> None:
        self.lines = []

    # queries
    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def total(self) -> Decimal:
        return sum((line_amount(line) for line in self.lines), Decimal("0"))

    def is_empty(self) -> bool:
        return not self.lines

    def to_dict(self) -> Dict[str, Any]:
        return {"lines": [line.to_dict() for line in self.lines]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CartAggregate":
        return cls([CartLine.from_dict(item) for item in data.get("lines", [])])
