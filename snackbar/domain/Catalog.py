"""Fixed product catalog: ingredient types, sizes, breads/crusts and pizza flavors.

Everything here is immutable process-wide data. Menu rendering belongs to the
caller; the catalog only offers lookups over the enums.
"""
from decimal import Decimal
from enum import Enum
from typing import Tuple

from snackbar.domain.Errors import UnknownCatalogEntry


class Category(Enum):
    PROTEIN = "Protein"
    CHEESE = "Cheese"
    VEGETABLE = "Vegetable"
    SAUCE = "Sauce"


class ProductFamily(Enum):
    SANDWICH = "Sandwich"
    PIZZA = "Pizza"


class IngredientType(Enum):
    # Proteins
    CHICKEN = ("Chicken", "8.00", Category.PROTEIN)
    BEEF = ("Beef", "10.00", Category.PROTEIN)
    BACON = ("Bacon", "6.00", Category.PROTEIN)
    HAM = ("Ham", "5.00", Category.PROTEIN)
    PEPPERONI = ("Calabrese Sausage", "7.00", Category.PROTEIN)

    # Cheeses
    MOZZARELLA = ("Mozzarella", "4.00", Category.CHEESE)
    CHEDDAR = ("Cheddar", "5.00", Category.CHEESE)
    PARMESAN = ("Parmesan", "6.00", Category.CHEESE)
    GORGONZOLA = ("Gorgonzola", "7.00", Category.CHEESE)

    # Vegetables
    TOMATO = ("Tomato", "2.00", Category.VEGETABLE)
    LETTUCE = ("Lettuce", "1.50", Category.VEGETABLE)
    ONION = ("Onion", "1.00", Category.VEGETABLE)
    BELL_PEPPER = ("Bell Pepper", "2.50", Category.VEGETABLE)
    OLIVE = ("Olive", "3.00", Category.VEGETABLE)

    # Sauces
    BARBECUE = ("Barbecue", "2.00", Category.SAUCE)
    MUSTARD = ("Mustard", "1.00", Category.SAUCE)
    MAYONNAISE = ("Mayonnaise", "1.00", Category.SAUCE)
    KETCHUP = ("Ketchup", "1.00", Category.SAUCE)
    SPECIAL_SAUCE = ("House Special Sauce", "3.00", Category.SAUCE)

    def __init__(self, label: str, base_price: str, category: Category):
        self.label = label
        self.base_price = Decimal(base_price)
        self.category = category

    def __str__(self) -> str:
        return self.label


class Size(Enum):
    SMALL = ("Small", "1.0")
    MEDIUM = ("Medium", "1.5")
    LARGE = ("Large", "2.0")

    def __init__(self, label: str, price_multiplier: str):
        self.label = label
        self.price_multiplier = Decimal(price_multiplier)

    def __str__(self) -> str:
        return self.label


class BaseOption(Enum):
    # Pizza crusts
    THIN_CRUST = ("Thin Crust", "0.00", ProductFamily.PIZZA)
    THICK_CRUST = ("Thick Crust", "2.00", ProductFamily.PIZZA)
    STUFFED_CRUST = ("Stuffed Crust", "5.00", ProductFamily.PIZZA)

    # Sandwich breads
    WHITE_BREAD = ("White Bread", "0.00", ProductFamily.SANDWICH)
    WHOLE_WHEAT_BREAD = ("Whole Wheat Bread", "1.50", ProductFamily.SANDWICH)
    AUSTRALIAN_BREAD = ("Australian Bread", "3.00", ProductFamily.SANDWICH)
    CIABATTA = ("Ciabatta", "4.00", ProductFamily.SANDWICH)

    def __init__(self, label: str, additional_cost: str, family: ProductFamily):
        self.label = label
        self.additional_cost = Decimal(additional_cost)
        self.family = family

    def __str__(self) -> str:
        return self.label


class PizzaFlavor(Enum):
    MARGHERITA = ("Margherita", "Tomato sauce, mozzarella, basil",
                  (IngredientType.MOZZARELLA,))
    CALABRESE = ("Calabrese", "Calabrese sausage, onion, mozzarella",
                 (IngredientType.PEPPERONI, IngredientType.ONION, IngredientType.MOZZARELLA))
    PORTUGUESE = ("Portuguese", "Ham, eggs, onion, olives, mozzarella",
                  (IngredientType.HAM, IngredientType.ONION, IngredientType.OLIVE,
                   IngredientType.MOZZARELLA))
    CHICKEN = ("Chicken", "Shredded chicken, creamy cheese",
               (IngredientType.CHICKEN, IngredientType.MOZZARELLA))
    BACON = ("Bacon", "Bacon, mozzarella",
             (IngredientType.BACON, IngredientType.MOZZARELLA))
    FOUR_CHEESE = ("Four Cheese", "Mozzarella, cheddar, parmesan, provolone",
                   (IngredientType.MOZZARELLA, IngredientType.CHEDDAR,
                    IngredientType.PARMESAN, IngredientType.MOZZARELLA))
    VEGETARIAN = ("Vegetarian", "Tomato, bell pepper, onion, olives, mozzarella",
                  (IngredientType.TOMATO, IngredientType.BELL_PEPPER, IngredientType.ONION,
                   IngredientType.OLIVE, IngredientType.MOZZARELLA))

    def __init__(self, label: str, description: str, ingredients: Tuple[IngredientType, ...]):
        self.label = label
        self.description = description
        self.ingredients = ingredients

    def __str__(self) -> str:
        return f"{self.label} - {self.description}"


def by_category(category: Category) -> Tuple[IngredientType, ...]:
    """Ingredient types of one category, in catalog order."""
    return tuple(t for t in IngredientType if t.category is category)


def bases_for(family: ProductFamily) -> Tuple[BaseOption, ...]:
    return tuple(b for b in BaseOption if b.family is family)


def _lookup(enum_cls, kind: str, name):
    if isinstance(name, enum_cls):
        return name
    key = str(name or '').strip().upper().replace(' ', '_').replace('-', '_')
    try:
        return enum_cls[key]
    except KeyError:
        pass
    # display labels such as "House Special Sauce"
    wanted = str(name or '').strip().casefold()
    for member in enum_cls:
        label = getattr(member, 'label', member.value)
        if isinstance(label, str) and label.casefold() == wanted:
            return member
    raise UnknownCatalogEntry(kind, name)


def lookup_ingredient(name) -> IngredientType:
    return _lookup(IngredientType, 'ingredient', name)


def lookup_size(name) -> Size:
    return _lookup(Size, 'size', name)


def lookup_base(name) -> BaseOption:
    return _lookup(BaseOption, 'base', name)


def lookup_family(name) -> ProductFamily:
    return _lookup(ProductFamily, 'product family', name)


def lookup_flavor(name) -> PizzaFlavor:
    return _lookup(PizzaFlavor, 'pizza flavor', name)


def lookup_category(name) -> Category:
    return _lookup(Category, 'category', name)


__all__ = [
    'Category', 'ProductFamily', 'IngredientType', 'Size', 'BaseOption', 'PizzaFlavor',
    'by_category', 'bases_for', 'lookup_ingredient', 'lookup_size', 'lookup_base',
    'lookup_family', 'lookup_flavor', 'lookup_category',
]
