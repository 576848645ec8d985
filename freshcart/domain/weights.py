# freshcart/domain/weights.py
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class WeightOption:
    value_kg: Decimal
    label: str
    display_short: str


WEIGHT_OPTIONS: tuple[WeightOption, ...] = (
    WeightOption(Decimal("0.1"), "100 grams", "100g"),
    WeightOption(Decimal("0.25"), "250 grams", "250g"),
    WeightOption(Decimal("0.5"), "500 grams", "500g"),
    WeightOption(Decimal("1"), "1 kilogram", "1kg"),
    WeightOption(Decimal("2"), "2 kilograms", "2kg"),
)


def find_weight(value_kg: Decimal) -> WeightOption | None:
    for option in WEIGHT_OPTIONS:
        if option.value_kg == value_kg:
            return option
    return None


def is_valid_weight(value_kg: Decimal) -> bool:
    return find_weight(value_kg) is not None
