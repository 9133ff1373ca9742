"""Finalized products: an immutable snapshot of a validated configuration.

Only a builder's successful ``build()`` creates these. Total price is
``(base price + ingredient prices + bread/crust cost) x size multiplier``,
rounded half-up to cents.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Tuple

from snackbar.domain.Catalog import BaseOption, ProductFamily, Size
from snackbar.domain.Ingredient import Ingredient
from snackbar.utilities.constants import CENTS, CURRENCY_SYMBOL


@dataclass(frozen=True, eq=False)
class Product:
    family: ProductFamily
    size: Size
    base: BaseOption
    ingredients: Tuple[Ingredient, ...]
    base_price: Decimal

    base_title = "Base"
    empty_line = "no extra ingredients"

    def ingredients_price(self) -> Decimal:
        return sum((ing.effective_price for ing in self.ingredients), Decimal("0"))

    def total_price(self) -> Decimal:
        subtotal = self.base_price + self.ingredients_price() + self.base.additional_cost
        return (subtotal * self.size.price_multiplier).quantize(CENTS, rounding=ROUND_HALF_UP)

    def _ingredient_lines(self):
        if not self.ingredients:
            return [self.empty_line]
        return [str(ing) for ing in self.ingredients]

    def summary(self) -> str:
        lines = [
            f"{self.family.value.upper()} {self.size.label.upper()}",
            f"{self.base_title}: {self.base.label}",
            "Ingredients:",
        ]
        lines.extend(f"  - {line}" for line in self._ingredient_lines())
        lines.append(f"Total: {CURRENCY_SYMBOL} {self.total_price():.2f}")
        return "\n".join(lines)

    def _key(self):
        # Ingredient equality is by type only, so compare the priced fields
        return (type(self), self.family, self.size, self.base, self.base_price,
                tuple((ing.type, ing.quantity, ing.unit_price, ing.tier) for ing in self.ingredients))

    def __eq__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self) -> str:
        return self.summary()

    def to_dict(self):
        return {
            "family": self.family.name.lower(),
            "size": self.size.name.lower(),
            "base": self.base.name.lower(),
            "base_price": str(self.base_price),
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "total_price": str(self.total_price()),
        }


@dataclass(frozen=True, eq=False)
class Sandwich(Product):
    base_title = "Bread"
    empty_line = "no extra ingredients"


@dataclass(frozen=True, eq=False)
class Pizza(Product):
    base_title = "Crust"
    empty_line = "cheese and tomato sauce only"

    def _ingredient_lines(self):
        if not self.ingredients:
            return [self.empty_line]
        return ["cheese and tomato sauce (base)"] + [str(ing) for ing in self.ingredients]
