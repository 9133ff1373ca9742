"""Quote endpoint: turns a validated order payload into a finalized product."""
import logging
from fastapi import APIRouter

from snackbar.domain.Catalog import (
    ProductFamily, lookup_base, lookup_family, lookup_flavor, lookup_ingredient, lookup_size,
)
from snackbar.domain.Errors import IncompleteConfiguration
from snackbar.domain.Product import Product
from snackbar.logic.building.builder import builder_for
from snackbar.logic.pricing.strategies import get_strategy
from snackbar.utilities.config import DEFAULT_STRATEGY
from snackbar.utilities.validators import ProductOrderInput

router = APIRouter(prefix="/api/products", tags=["products"])
logger = logging.getLogger(__name__)


def assemble_product(order: ProductOrderInput) -> Product:
    """Feed an order into a fresh builder and build it.

    Raises ConfigurationError subclasses for any rejected selection.
    """
    family = lookup_family(order.family)
    builder = builder_for(family)
    if order.size:
        builder.with_size(lookup_size(order.size))
    if order.base:
        builder.with_base(lookup_base(order.base))
    if order.base_price is not None:
        builder.with_base_price(order.base_price)

    default_strategy = get_strategy(order.strategy or DEFAULT_STRATEGY)
    if order.flavor:
        if family is not ProductFamily.PIZZA:
            raise IncompleteConfiguration("Flavors are only available for pizzas", "flavor")
        builder.add_flavor(lookup_flavor(order.flavor), default_strategy)
    for selection in order.ingredients:
        strategy = get_strategy(selection.strategy) if selection.strategy else default_strategy
        builder.add_ingredient(strategy.create(lookup_ingredient(selection.name), selection.quantity))
    return builder.build()


@router.post("/quote")
def quote_product(order: ProductOrderInput):
    product = assemble_product(order)
    logger.info("Quoted %s at %s", order.family, product.total_price())
    return {
        "product": product.to_dict(),
        "summary": product.summary(),
        "total_price": str(product.total_price()),
    }
