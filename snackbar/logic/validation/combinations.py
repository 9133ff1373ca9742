"""Combination rules for a candidate product.

``validate(family, size, base, ingredients)`` runs the checks in a fixed order
and stops at the first violation:

1. forbidden ingredient pairs
2. protein / cheese type limits
3. total quantity
4. family rules (sandwich: no small ciabatta, at most 4 types when small;
   pizza: no small stuffed crust, toppings need a protein)

It never mutates its inputs, so it can be re-run freely.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from snackbar.domain.Catalog import BaseOption, Category, ProductFamily, Size
from snackbar.domain.Errors import (
    BaseUnavailableForSize, CombinationError, ForbiddenCombination, MissingProtein,
    TooManyCheeses, TooManyIngredientTypes, TooManyProteins, TotalQuantityExceeded,
)
from snackbar.domain.Ingredient import Ingredient
from snackbar.utilities.constants import (
    CATEGORY_LIMITS, FORBIDDEN_PAIRS, MAX_TOTAL_QUANTITY, SMALL_SANDWICH_MAX_TYPES,
)

__all__ = ["ValidationResult", "validate"]


@dataclass(frozen=True)
class ValidationResult:
    error: Optional[CombinationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_violation(self) -> None:
        if self.error is not None:
            raise self.error

    def __bool__(self) -> bool:
        return self.ok


OK = ValidationResult()

# Base that cannot be ordered small, per family
_NOT_FOR_SMALL = {
    ProductFamily.SANDWICH: BaseOption.CIABATTA,
    ProductFamily.PIZZA: BaseOption.STUFFED_CRUST,
}


def _check_forbidden_pairs(ingredients: Sequence[Ingredient]):
    present = {ing.type.name for ing in ingredients}
    for pair in FORBIDDEN_PAIRS:
        if pair <= present:
            return ForbiddenCombination(pair)
    return None


def _check_category_limits(ingredients: Sequence[Ingredient]):
    counts = Counter(ing.category for ing in ingredients)
    proteins = counts[Category.PROTEIN]
    if proteins > CATEGORY_LIMITS["PROTEIN"]:
        return TooManyProteins(proteins, CATEGORY_LIMITS["PROTEIN"])
    cheeses = counts[Category.CHEESE]
    if cheeses > CATEGORY_LIMITS["CHEESE"]:
        return TooManyCheeses(cheeses, CATEGORY_LIMITS["CHEESE"])
    return None


def _check_total_quantity(ingredients: Sequence[Ingredient]):
    total = sum(ing.quantity for ing in ingredients)
    if total > MAX_TOTAL_QUANTITY:
        return TotalQuantityExceeded(total, MAX_TOTAL_QUANTITY)
    return None


_GENERIC_CHECKS = (_check_forbidden_pairs, _check_category_limits, _check_total_quantity)


def _check_family_rules(family: ProductFamily, size: Size, base: BaseOption,
                        ingredients: Sequence[Ingredient]):
    if size is Size.SMALL and base is _NOT_FOR_SMALL.get(family):
        return BaseUnavailableForSize(base.label, size.label)
    if family is ProductFamily.SANDWICH:
        distinct = len({ing.type for ing in ingredients})
        if size is Size.SMALL and distinct > SMALL_SANDWICH_MAX_TYPES:
            return TooManyIngredientTypes(distinct, SMALL_SANDWICH_MAX_TYPES, size.label)
    elif family is ProductFamily.PIZZA:
        has_protein = any(ing.category is Category.PROTEIN for ing in ingredients)
        if ingredients and not has_protein:
            return MissingProtein()
    return None


def validate(family: ProductFamily, size: Size, base: BaseOption,
             ingredients: Iterable[Ingredient]) -> ValidationResult:
    """Return ``OK`` or a result carrying the first violated rule."""
    items = tuple(ingredients)
    for check in _GENERIC_CHECKS:
        error = check(items)
        if error is not None:
            return ValidationResult(error)
    error = _check_family_rules(family, size, base, items)
    if error is not None:
        return ValidationResult(error)
    return OK
