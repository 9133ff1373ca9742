"""Ingredient domain entity: catalog type, quantity and the unit price fixed by a pricing strategy."""
from dataclasses import dataclass, replace
from decimal import Decimal

from snackbar.domain.Catalog import IngredientType


@dataclass(frozen=True, eq=False)
class Ingredient:
    type: IngredientType
    quantity: int
    unit_price: Decimal
    tier: str = "standard"
    tag: str = ""

    @property
    def category(self):
        return self.type.category

    @property
    def effective_price(self) -> Decimal:
        '''Unit price fixed at creation times quantity; the catalog price is never consulted again.'''
        return self.unit_price * self.quantity

    def merged_with(self, other: "Ingredient") -> "Ingredient":
        '''
        Returns a copy with both quantities summed.
        The unit price and tier of this (first added) instance are kept.
        '''
        if other.type is not self.type:
            raise ValueError(f"Cannot merge {other.type.label} into {self.type.label}")
        return replace(self, quantity=self.quantity + other.quantity)

    # Two selections are "the same ingredient" when their catalog type matches
    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.type is other.type

    def __hash__(self) -> int:
        return hash(self.type)

    def __str__(self) -> str:
        text = f"{self.quantity}x {self.type.label}" if self.quantity > 1 else self.type.label
        return text + self.tag

    __repr__ = __str__

    def to_dict(self):
        return {
            "name": self.type.name.lower(),
            "label": self.type.label,
            "category": self.type.category.value,
            "quantity": self.quantity,
            "unit_price": str(self.unit_price),
            "effective_price": str(self.effective_price),
            "tier": self.tier,
        }
