from decimal import Decimal
import unittest
from snackbar.domain.Catalog import IngredientType
from snackbar.domain.Errors import (
    BelowMinimumQuantity, InvalidQuantity, InvalidType, RestrictedIngredient, UnknownStrategy,
)
from snackbar.logic.pricing.strategies import (
    PREMIUM, PROMOTIONAL, STANDARD, StrategyName, get_strategy,
)


class TestStandardStrategy(unittest.TestCase):

    def test_price_is_catalog_price_times_quantity(self):
        chicken = STANDARD.create(IngredientType.CHICKEN, 2)
        self.assertEqual(chicken.quantity, 2)
        self.assertEqual(chicken.unit_price, Decimal("8.00"))
        self.assertEqual(chicken.effective_price, Decimal("16.00"))
        self.assertEqual(chicken.tier, "standard")

    def test_default_quantity_is_one(self):
        cheddar = STANDARD.create(IngredientType.CHEDDAR)
        self.assertEqual(cheddar.quantity, 1)
        self.assertEqual(cheddar.effective_price, Decimal("5.00"))

    def test_quantity_bounds(self):
        for qty in (1, 10):
            self.assertEqual(STANDARD.create(IngredientType.TOMATO, qty).quantity, qty)
        for qty in (0, -1, 11, "3", 2.5, True):
            with self.assertRaises(InvalidQuantity):
                STANDARD.create(IngredientType.TOMATO, qty)

    def test_missing_type(self):
        for strategy in (STANDARD, PREMIUM, PROMOTIONAL):
            with self.assertRaises(InvalidType):
                strategy.create(None, 2)

    def test_quantity_checked_before_type(self):
        with self.assertRaises(InvalidQuantity):
            STANDARD.create(None, 0)

    def test_quantity_error_names_value(self):
        with self.assertRaises(InvalidQuantity) as ctx:
            STANDARD.create(IngredientType.BACON, 11)
        self.assertEqual(ctx.exception.details["quantity"], 11)
        self.assertEqual(ctx.exception.details["maximum"], 10)


class TestPremiumStrategy(unittest.TestCase):

    def test_thirty_percent_surcharge(self):
        beef = PREMIUM.create(IngredientType.BEEF, 1)
        self.assertEqual(beef.effective_price, Decimal("13.00"))
        gorgonzola = PREMIUM.create(IngredientType.GORGONZOLA, 2)
        self.assertEqual(gorgonzola.effective_price, Decimal("18.20"))
        self.assertEqual(str(gorgonzola), "2x Gorgonzola (Premium)")

    def test_ketchup_and_mustard_restricted_regardless_of_quantity(self):
        for ingredient_type in (IngredientType.KETCHUP, IngredientType.MUSTARD):
            for qty in (1, 5, 10):
                with self.assertRaises(RestrictedIngredient) as ctx:
                    PREMIUM.create(ingredient_type, qty)
                self.assertEqual(ctx.exception.details["ingredient"], ingredient_type.label)

    def test_quantity_checked_before_restriction(self):
        with self.assertRaises(InvalidQuantity):
            PREMIUM.create(IngredientType.KETCHUP, 0)


class TestPromotionalStrategy(unittest.TestCase):

    def test_single_unit_rejected(self):
        with self.assertRaises(BelowMinimumQuantity) as ctx:
            PROMOTIONAL.create(IngredientType.CHICKEN, 1)
        self.assertEqual(ctx.exception.details["minimum"], 2)

    def test_fifteen_percent_discount(self):
        chicken = PROMOTIONAL.create(IngredientType.CHICKEN, 2)
        self.assertEqual(chicken.effective_price, IngredientType.CHICKEN.base_price * 2 * Decimal("0.85"))
        self.assertEqual(chicken.effective_price, Decimal("13.60"))
        bacon = PROMOTIONAL.create(IngredientType.BACON, 3)
        self.assertEqual(bacon.effective_price, Decimal("15.30"))
        self.assertEqual(str(bacon), "3x Bacon (-15% OFF)")

    def test_ketchup_allowed(self):
        self.assertEqual(PROMOTIONAL.create(IngredientType.KETCHUP, 2).quantity, 2)


class TestStrategySelector(unittest.TestCase):

    def test_resolves_names_and_members(self):
        self.assertIs(get_strategy("standard"), STANDARD)
        self.assertIs(get_strategy(" Premium "), PREMIUM)
        self.assertIs(get_strategy("PROMOTIONAL"), PROMOTIONAL)
        self.assertIs(get_strategy(StrategyName.PREMIUM), PREMIUM)
        self.assertIs(get_strategy(PROMOTIONAL), PROMOTIONAL)

    def test_unknown_identifier(self):
        for identifier in ("deluxe", "", None, 3):
            with self.assertRaises(UnknownStrategy):
                get_strategy(identifier)

    def test_strategies_are_reusable(self):
        first = PREMIUM.create(IngredientType.BACON, 2)
        second = PREMIUM.create(IngredientType.BACON, 2)
        self.assertEqual(first.effective_price, second.effective_price)
        self.assertIsNot(first, second)


if __name__ == '__main__':
    unittest.main()
