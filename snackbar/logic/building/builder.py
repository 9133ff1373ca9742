"""Product builders.

A builder accumulates a size, a bread/crust, a base price and ingredient
selections, then ``build()`` validates the whole configuration once and
returns an immutable product. Builders are single-use and thread-confined:
callers must not share one builder between threads.

Adding an ingredient type that is already present merges the two entries:
quantities are summed and the unit price of the first insertion is kept.
"""
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import List, Optional, Type

from snackbar.domain.Catalog import BaseOption, PizzaFlavor, ProductFamily, Size
from snackbar.domain.Errors import (
    BuilderFinalized, ConfigurationError, IncompleteConfiguration, InvalidQuantity, InvalidType,
)
from snackbar.domain.Ingredient import Ingredient
from snackbar.domain.Product import Pizza, Product, Sandwich
from snackbar.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from snackbar.events.event_helpers import publish_product_finalized, publish_product_rejected
from snackbar.logic.pricing.strategies import STANDARD, get_strategy
from snackbar.logic.validation.combinations import validate
from snackbar.utilities.constants import (
    DEFAULT_PIZZA_BASE_PRICE, DEFAULT_SANDWICH_BASE_PRICE, MAX_QUANTITY, MIN_QUANTITY,
)

logger = logging.getLogger(__name__)

__all__ = ["BuilderState", "ProductBuilder", "SandwichBuilder", "PizzaBuilder", "builder_for"]


class BuilderState(Enum):
    ACCUMULATING = "accumulating"
    FINALIZED = "finalized"


class ProductBuilder:
    family: ProductFamily
    product_cls: Type[Product]
    default_size: Optional[Size] = Size.MEDIUM
    default_base: Optional[BaseOption] = None
    default_base_price: Decimal = Decimal("0")

    def __init__(self):
        self.size: Optional[Size] = self.default_size
        self.base: Optional[BaseOption] = self.default_base
        self.base_price: Decimal = self.default_base_price
        self.ingredients: List[Ingredient] = []
        self.state = BuilderState.ACCUMULATING
        self._event_bus = GLOBAL_EVENT_BUS

    # --- Observer helpers -------------------------------------------------
    def set_event_bus(self, bus: EventBus):
        self._event_bus = bus
        return self

    def _ensure_accumulating(self):
        if self.state is BuilderState.FINALIZED:
            raise BuilderFinalized()

    # --- Fluent configuration ---------------------------------------------
    def with_size(self, size: Optional[Size]):
        self._ensure_accumulating()
        self.size = size
        return self

    def with_base(self, base: Optional[BaseOption]):
        self._ensure_accumulating()
        self.base = base
        return self

    def with_base_price(self, price):
        self._ensure_accumulating()
        try:
            value = price if isinstance(price, Decimal) else Decimal(str(price))
        except InvalidOperation:
            raise IncompleteConfiguration(f"Base price must be a number, got {price!r}", "base_price") from None
        if not value.is_finite():
            raise IncompleteConfiguration(f"Base price must be finite, got {price!r}", "base_price")
        self.base_price = value
        return self

    def add_ingredient(self, ingredient: Ingredient):
        '''
        Adds an ingredient, merging it into an existing entry of the same type.
        '''
        self._ensure_accumulating()
        if ingredient is None:
            raise InvalidType()
        for i, existing in enumerate(self.ingredients):
            if existing == ingredient:
                self.ingredients[i] = existing.merged_with(ingredient)
                logger.debug("Merged %s into %s", ingredient, self.ingredients[i])
                return self
        self.ingredients.append(ingredient)
        return self

    # --- Finalization -----------------------------------------------------
    def _check_preconditions(self):
        if self.size is None:
            raise IncompleteConfiguration("Size must be specified", "size")
        if self.base is None:
            raise IncompleteConfiguration(f"{self.product_cls.base_title} must be specified", "base")
        if self.base.family is not self.family:
            raise IncompleteConfiguration(
                f"{self.base.label} is not available for a {self.family.value.lower()}", "base")
        if not self.base_price.is_finite():
            raise IncompleteConfiguration(f"Base price must be finite: {self.base_price}", "base_price")
        if self.base_price < 0:
            raise IncompleteConfiguration(f"Base price cannot be negative: {self.base_price}", "base_price")
        # merging can push one entry past the per-ingredient cap
        for ing in self.ingredients:
            if not MIN_QUANTITY <= ing.quantity <= MAX_QUANTITY:
                raise InvalidQuantity(ing.quantity, MIN_QUANTITY, MAX_QUANTITY)

    def build(self) -> Product:
        """Validate the configuration once and return the finalized product.

        On failure the builder keeps its state, so the caller can adjust and retry.
        """
        self._ensure_accumulating()
        try:
            self._check_preconditions()
            validate(self.family, self.size, self.base, self.ingredients).raise_for_violation()
        except ConfigurationError as e:
            logger.info("Rejected %s: %s", self.family.value.lower(), e)
            publish_product_rejected(self.family, e, self._event_bus)
            raise
        product = self.product_cls(
            family=self.family,
            size=self.size,
            base=self.base,
            ingredients=tuple(self.ingredients),
            base_price=self.base_price,
        )
        total = product.total_price()
        self.state = BuilderState.FINALIZED
        logger.info("Built %s %s for %s", self.size.label, self.family.value.lower(), total)
        publish_product_finalized(product, self._event_bus)
        return product

    def __str__(self) -> str:
        items = ", ".join(str(ing) for ing in self.ingredients) or "-"
        return f"{type(self).__name__}({self.state.value}: {self.size} / {self.base} / {items})"

    __repr__ = __str__


class SandwichBuilder(ProductBuilder):
    family = ProductFamily.SANDWICH
    product_cls = Sandwich
    default_base = BaseOption.WHITE_BREAD
    default_base_price = DEFAULT_SANDWICH_BASE_PRICE


class PizzaBuilder(ProductBuilder):
    family = ProductFamily.PIZZA
    product_cls = Pizza
    default_base = BaseOption.THIN_CRUST
    default_base_price = DEFAULT_PIZZA_BASE_PRICE

    def add_flavor(self, flavor: PizzaFlavor, strategy=STANDARD, quantity: int = 1):
        '''
        Adds every ingredient of a preset flavor, priced by the given strategy.
        A flavor listing the same type twice merges into one entry.
        '''
        self._ensure_accumulating()
        pricing = get_strategy(strategy)
        # price everything first so a strategy error leaves the builder untouched
        created = [pricing.create(t, quantity) for t in flavor.ingredients]
        for ingredient in created:
            self.add_ingredient(ingredient)
        return self


_BUILDERS = {
    ProductFamily.SANDWICH: SandwichBuilder,
    ProductFamily.PIZZA: PizzaBuilder,
}


def builder_for(family: ProductFamily) -> ProductBuilder:
    return _BUILDERS[family]()
