from typing import Optional
from fastapi import APIRouter, Query

from snackbar.domain.Catalog import (
    IngredientType, PizzaFlavor, Size, BaseOption,
    by_category, bases_for, lookup_category, lookup_family,
)

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def _ingredient_entry(t: IngredientType):
    return {
        "name": t.name.lower(),
        "label": t.label,
        "base_price": str(t.base_price),
        "category": t.category.value,
    }


@router.get("/ingredients")
def list_ingredients(category: Optional[str] = Query(default=None)):
    """Catalog ingredients, optionally restricted to one category."""
    types = by_category(lookup_category(category)) if category else tuple(IngredientType)
    return {"ingredients": [_ingredient_entry(t) for t in types]}


@router.get("/sizes")
def list_sizes():
    return {"sizes": [
        {"name": s.name.lower(), "label": s.label, "price_multiplier": str(s.price_multiplier)}
        for s in Size
    ]}


@router.get("/bases")
def list_bases(family: Optional[str] = Query(default=None)):
    bases = bases_for(lookup_family(family)) if family else tuple(BaseOption)
    return {"bases": [
        {
            "name": b.name.lower(),
            "label": b.label,
            "additional_cost": str(b.additional_cost),
            "family": b.family.name.lower(),
        }
        for b in bases
    ]}


@router.get("/flavors")
def list_flavors():
    return {"flavors": [
        {
            "name": f.name.lower(),
            "label": f.label,
            "description": f.description,
            "ingredients": [t.name.lower() for t in f.ingredients],
        }
        for f in PizzaFlavor
    ]}
