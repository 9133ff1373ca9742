"""Ingredient pricing strategies.

Three tiers price the same catalog: standard (catalog price), premium (+30%,
no ketchup or mustard) and promotional (-15%, at least two units). Each tier
is a value carrying its multiplier and admission rule; ``get_strategy``
resolves a tier from its name.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Optional

from snackbar.domain.Catalog import IngredientType
from snackbar.domain.Errors import (
    BelowMinimumQuantity, InvalidQuantity, InvalidType, RestrictedIngredient, UnknownStrategy,
)
from snackbar.domain.Ingredient import Ingredient
from snackbar.utilities.constants import (
    MAX_QUANTITY, MIN_QUANTITY, PREMIUM_MULTIPLIER, PREMIUM_RESTRICTED,
    PROMOTIONAL_DISCOUNT, PROMOTIONAL_MIN_QUANTITY,
)


class StrategyName(Enum):
    STANDARD = "standard"
    PREMIUM = "premium"
    PROMOTIONAL = "promotional"


AdmissionRule = Callable[[IngredientType, int], None]


@dataclass(frozen=True)
class PricingStrategy:
    name: StrategyName
    multiplier: Decimal
    admission_rule: Optional[AdmissionRule] = None
    tag: str = ""

    def create(self, ingredient_type: Optional[IngredientType], quantity: int = 1) -> Ingredient:
        """Price ``quantity`` units of ``ingredient_type`` under this tier."""
        if (not isinstance(quantity, int) or isinstance(quantity, bool)
                or not MIN_QUANTITY <= quantity <= MAX_QUANTITY):
            raise InvalidQuantity(quantity, MIN_QUANTITY, MAX_QUANTITY)
        if ingredient_type is None:
            raise InvalidType()
        if self.admission_rule is not None:
            self.admission_rule(ingredient_type, quantity)
        return Ingredient(
            type=ingredient_type,
            quantity=quantity,
            unit_price=ingredient_type.base_price * self.multiplier,
            tier=self.name.value,
            tag=self.tag,
        )

    def __str__(self) -> str:
        return self.name.value


def _premium_rule(ingredient_type: IngredientType, quantity: int) -> None:
    if ingredient_type.name in PREMIUM_RESTRICTED:
        raise RestrictedIngredient(ingredient_type.label, StrategyName.PREMIUM.value)


def _promotional_rule(ingredient_type: IngredientType, quantity: int) -> None:
    if quantity < PROMOTIONAL_MIN_QUANTITY:
        raise BelowMinimumQuantity(quantity, PROMOTIONAL_MIN_QUANTITY, StrategyName.PROMOTIONAL.value)


STANDARD = PricingStrategy(StrategyName.STANDARD, Decimal("1"))
PREMIUM = PricingStrategy(StrategyName.PREMIUM, PREMIUM_MULTIPLIER, _premium_rule, " (Premium)")
PROMOTIONAL = PricingStrategy(
    StrategyName.PROMOTIONAL,
    Decimal("1") - PROMOTIONAL_DISCOUNT,
    _promotional_rule,
    f" (-{int(PROMOTIONAL_DISCOUNT * 100)}% OFF)",
)

_STRATEGIES = {
    StrategyName.STANDARD: STANDARD,
    StrategyName.PREMIUM: PREMIUM,
    StrategyName.PROMOTIONAL: PROMOTIONAL,
}


def get_strategy(identifier) -> PricingStrategy:
    """Resolve a StrategyName, a strategy or a case-insensitive name to a strategy."""
    if isinstance(identifier, PricingStrategy):
        return identifier
    if isinstance(identifier, StrategyName):
        return _STRATEGIES[identifier]
    if isinstance(identifier, str):
        try:
            return _STRATEGIES[StrategyName(identifier.strip().lower())]
        except ValueError:
            pass
    raise UnknownStrategy(identifier)


__all__ = ['StrategyName', 'PricingStrategy', 'STANDARD', 'PREMIUM', 'PROMOTIONAL', 'get_strategy']
