from decimal import Decimal
from typing import Final

# Money
CURRENCY_SYMBOL: Final[str] = "$"
CENTS: Final[Decimal] = Decimal("0.01")

# Quantity bounds per ingredient entry
MIN_QUANTITY: Final[int] = 1
MAX_QUANTITY: Final[int] = 10

# Pricing tiers
PREMIUM_MULTIPLIER: Final[Decimal] = Decimal("1.3")
PROMOTIONAL_DISCOUNT: Final[Decimal] = Decimal("0.15")
PROMOTIONAL_MIN_QUANTITY: Final[int] = 2
PREMIUM_RESTRICTED: Final[frozenset[str]] = frozenset({"KETCHUP", "MUSTARD"})

# Combination rules
MAX_TOTAL_QUANTITY: Final[int] = 15
CATEGORY_LIMITS: Final[dict[str, int]] = {"PROTEIN": 3, "CHEESE": 2}
SMALL_SANDWICH_MAX_TYPES: Final[int] = 4
# Ordered so the first matching pair is always the same one reported
FORBIDDEN_PAIRS: Final[tuple[frozenset[str], ...]] = (
    frozenset({"GORGONZOLA", "CHEDDAR"}),
    frozenset({"SPECIAL_SAUCE", "BARBECUE"}),
    frozenset({"SPECIAL_SAUCE", "KETCHUP"}),
)

# Family defaults
DEFAULT_SANDWICH_BASE_PRICE: Final[Decimal] = Decimal("15.00")
DEFAULT_PIZZA_BASE_PRICE: Final[Decimal] = Decimal("20.00")
