"""Rejected-input errors raised while pricing, validating or building a product.

Every error carries a stable ``code`` and a ``details`` dict naming the rule
and the offending value, so a caller can show a precise message and prompt
again. None of these indicate a defect.
"""
from typing import Any, Dict, Iterable, Optional


class ConfigurationError(ValueError):
    code = "configuration_error"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "code": self.code, "details": self.details}


class UnknownCatalogEntry(ConfigurationError):
    code = "unknown_catalog_entry"

    def __init__(self, kind: str, name: Any):
        super().__init__(f"Unknown {kind}: {name!r}", kind=kind, name=name)


# --- Strategy level -------------------------------------------------------
class StrategyError(ConfigurationError):
    code = "strategy_error"


class InvalidQuantity(StrategyError):
    code = "invalid_quantity"

    def __init__(self, quantity: Any, minimum: int, maximum: int):
        super().__init__(
            f"Quantity must be between {minimum} and {maximum}, got {quantity!r}",
            quantity=quantity, minimum=minimum, maximum=maximum,
        )


class InvalidType(StrategyError):
    code = "invalid_type"

    def __init__(self):
        super().__init__("Ingredient type must be set")


class RestrictedIngredient(StrategyError):
    code = "restricted_ingredient"

    def __init__(self, ingredient: str, strategy: str):
        super().__init__(
            f"{ingredient} is not available in the {strategy} line",
            ingredient=ingredient, strategy=strategy,
        )


class BelowMinimumQuantity(StrategyError):
    code = "below_minimum_quantity"

    def __init__(self, quantity: int, minimum: int, strategy: str):
        super().__init__(
            f"The {strategy} price requires at least {minimum} units, got {quantity}",
            quantity=quantity, minimum=minimum, strategy=strategy,
        )


class UnknownStrategy(StrategyError):
    code = "unknown_strategy"

    def __init__(self, identifier: Any):
        super().__init__(f"Unknown pricing strategy: {identifier!r}", identifier=identifier)


# --- Builder level --------------------------------------------------------
class IncompleteConfiguration(ConfigurationError):
    code = "incomplete_configuration"

    def __init__(self, reason: str, field: Optional[str] = None):
        super().__init__(reason, field=field)


class BuilderFinalized(ConfigurationError):
    code = "builder_finalized"

    def __init__(self):
        super().__init__("Builder already produced a product; start a new builder")


# --- Validation level -----------------------------------------------------
class CombinationError(ConfigurationError):
    code = "combination_error"


class ForbiddenCombination(CombinationError):
    code = "forbidden_combination"

    def __init__(self, pair: Iterable[str]):
        names = sorted(pair)
        super().__init__(f"Combination not allowed: {' + '.join(names)}", pair=names)


class TooManyProteins(CombinationError):
    code = "too_many_proteins"

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"At most {limit} protein types per product, got {count}",
            count=count, limit=limit,
        )


class TooManyCheeses(CombinationError):
    code = "too_many_cheeses"

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"At most {limit} cheese types per product, got {count}",
            count=count, limit=limit,
        )


class TotalQuantityExceeded(CombinationError):
    code = "total_quantity_exceeded"

    def __init__(self, total: int, limit: int):
        super().__init__(
            f"Total ingredient quantity cannot exceed {limit} units, got {total}",
            total=total, limit=limit,
        )


class BaseUnavailableForSize(CombinationError):
    code = "base_unavailable_for_size"

    def __init__(self, base: str, size: str):
        super().__init__(f"{base} is not available for size {size}", base=base, size=size)


class TooManyIngredientTypes(CombinationError):
    code = "too_many_ingredient_types"

    def __init__(self, count: int, limit: int, size: str):
        super().__init__(
            f"A {size} product allows at most {limit} ingredient types, got {count}",
            count=count, limit=limit, size=size,
        )


class MissingProtein(CombinationError):
    code = "missing_protein"

    def __init__(self):
        super().__init__("Pizza toppings must include at least one protein")


__all__ = [
    'ConfigurationError', 'UnknownCatalogEntry',
    'StrategyError', 'InvalidQuantity', 'InvalidType', 'RestrictedIngredient',
    'BelowMinimumQuantity', 'UnknownStrategy',
    'IncompleteConfiguration', 'BuilderFinalized',
    'CombinationError', 'ForbiddenCombination', 'TooManyProteins', 'TooManyCheeses',
    'TotalQuantityExceeded', 'BaseUnavailableForSize', 'TooManyIngredientTypes',
    'MissingProtein',
]
