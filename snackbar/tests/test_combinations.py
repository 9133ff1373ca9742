import unittest
from snackbar.domain.Catalog import BaseOption, IngredientType as T, ProductFamily, Size
from snackbar.domain.Errors import (
    BaseUnavailableForSize, ForbiddenCombination, MissingProtein, TooManyCheeses,
    TooManyIngredientTypes, TooManyProteins, TotalQuantityExceeded,
)
from snackbar.logic.pricing.strategies import STANDARD
from snackbar.logic.validation.combinations import validate

SANDWICH = ProductFamily.SANDWICH
PIZZA = ProductFamily.PIZZA


def items(*selections):
    """Build standard-priced ingredients from types or (type, quantity) pairs."""
    result = []
    for sel in selections:
        t, qty = sel if isinstance(sel, tuple) else (sel, 1)
        result.append(STANDARD.create(t, qty))
    return result


class TestGenericRules(unittest.TestCase):

    def assertViolation(self, result, error_cls):
        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, error_cls)
        with self.assertRaises(error_cls):
            result.raise_for_violation()

    def test_forbidden_pairs(self):
        cases = [
            (T.GORGONZOLA, T.CHEDDAR),
            (T.SPECIAL_SAUCE, T.BARBECUE),
            (T.SPECIAL_SAUCE, T.KETCHUP),
        ]
        for a, b in cases:
            result = validate(SANDWICH, Size.LARGE, BaseOption.WHITE_BREAD, items(T.CHICKEN, a, b))
            self.assertViolation(result, ForbiddenCombination)
            self.assertEqual(result.error.details["pair"], sorted([a.name, b.name]))

    def test_pair_members_alone_are_fine(self):
        self.assertTrue(validate(SANDWICH, Size.LARGE, BaseOption.WHITE_BREAD,
                                 items(T.GORGONZOLA, T.BARBECUE, T.KETCHUP)).ok)

    def test_protein_limit(self):
        ok = items(T.CHICKEN, T.BEEF, T.BACON)
        self.assertTrue(validate(SANDWICH, Size.LARGE, BaseOption.WHITE_BREAD, ok).ok)
        result = validate(SANDWICH, Size.LARGE, BaseOption.WHITE_BREAD, ok + items(T.HAM))
        self.assertViolation(result, TooManyProteins)
        self.assertEqual(result.error.details, {"count": 4, "limit": 3})

    def test_cheese_limit(self):
        result = validate(PIZZA, Size.LARGE, BaseOption.THIN_CRUST,
                          items(T.HAM, T.MOZZARELLA, T.CHEDDAR, T.PARMESAN))
        self.assertViolation(result, TooManyCheeses)

    def test_total_quantity_boundary(self):
        fifteen = items((T.CHICKEN, 10), (T.TOMATO, 5))
        self.assertTrue(validate(SANDWICH, Size.LARGE, BaseOption.WHITE_BREAD, fifteen).ok)
        result = validate(SANDWICH, Size.LARGE, BaseOption.WHITE_BREAD, fifteen + items(T.ONION))
        self.assertViolation(result, TotalQuantityExceeded)
        self.assertEqual(result.error.details["total"], 16)

    def test_fail_fast_order(self):
        # forbidden pair reported before the cheese limit
        result = validate(PIZZA, Size.SMALL, BaseOption.STUFFED_CRUST,
                          items(T.HAM, T.GORGONZOLA, T.CHEDDAR, T.PARMESAN))
        self.assertIsInstance(result.error, ForbiddenCombination)
        # category limit reported before total quantity
        result = validate(SANDWICH, Size.LARGE, BaseOption.WHITE_BREAD,
                          items((T.CHICKEN, 5), (T.BEEF, 5), (T.BACON, 5), (T.HAM, 5)))
        self.assertIsInstance(result.error, TooManyProteins)
        # total quantity reported before family rules
        result = validate(SANDWICH, Size.SMALL, BaseOption.CIABATTA, items((T.CHICKEN, 10), (T.TOMATO, 6)))
        self.assertIsInstance(result.error, TotalQuantityExceeded)


class TestSandwichRules(unittest.TestCase):

    def test_small_ciabatta(self):
        result = validate(SANDWICH, Size.SMALL, BaseOption.CIABATTA, [])
        self.assertIsInstance(result.error, BaseUnavailableForSize)
        self.assertEqual(result.error.details, {"base": "Ciabatta", "size": "Small"})
        self.assertTrue(validate(SANDWICH, Size.MEDIUM, BaseOption.CIABATTA, []).ok)

    def test_small_sandwich_type_limit(self):
        four = items(T.CHICKEN, T.TOMATO, T.LETTUCE, T.ONION)
        self.assertTrue(validate(SANDWICH, Size.SMALL, BaseOption.WHITE_BREAD, four).ok)
        result = validate(SANDWICH, Size.SMALL, BaseOption.WHITE_BREAD, four + items(T.MAYONNAISE))
        self.assertIsInstance(result.error, TooManyIngredientTypes)
        self.assertTrue(validate(SANDWICH, Size.MEDIUM, BaseOption.WHITE_BREAD,
                                 four + items(T.MAYONNAISE)).ok)

    def test_sandwich_needs_no_protein(self):
        self.assertTrue(validate(SANDWICH, Size.MEDIUM, BaseOption.WHITE_BREAD,
                                 items(T.TOMATO, T.LETTUCE)).ok)


class TestPizzaRules(unittest.TestCase):

    def test_small_stuffed_crust(self):
        result = validate(PIZZA, Size.SMALL, BaseOption.STUFFED_CRUST, [])
        self.assertIsInstance(result.error, BaseUnavailableForSize)
        self.assertTrue(validate(PIZZA, Size.MEDIUM, BaseOption.STUFFED_CRUST, []).ok)
        # ciabatta rule is sandwich-only
        self.assertTrue(validate(PIZZA, Size.SMALL, BaseOption.THIN_CRUST, []).ok)

    def test_toppings_need_protein(self):
        result = validate(PIZZA, Size.MEDIUM, BaseOption.THIN_CRUST, items(T.MOZZARELLA, T.OLIVE))
        self.assertIsInstance(result.error, MissingProtein)
        self.assertTrue(validate(PIZZA, Size.MEDIUM, BaseOption.THIN_CRUST,
                                 items(T.MOZZARELLA, T.PEPPERONI)).ok)

    def test_empty_pizza_never_missing_protein(self):
        for size in Size:
            self.assertTrue(validate(PIZZA, size, BaseOption.THIN_CRUST, []).ok)

    def test_small_pizza_has_no_type_limit(self):
        self.assertTrue(validate(PIZZA, Size.SMALL, BaseOption.THIN_CRUST,
                                 items(T.HAM, T.TOMATO, T.ONION, T.OLIVE, T.BELL_PEPPER)).ok)


class TestValidatorPurity(unittest.TestCase):

    def test_revalidating_valid_configuration(self):
        config = items(T.CHICKEN, (T.CHEDDAR, 2), T.LETTUCE)
        snapshot = [(i.type, i.quantity) for i in config]
        for _ in range(3):
            self.assertTrue(validate(SANDWICH, Size.MEDIUM, BaseOption.WHOLE_WHEAT_BREAD, config))
        self.assertEqual([(i.type, i.quantity) for i in config], snapshot)


if __name__ == '__main__':
    unittest.main()
