"""
Input validation schemas using Pydantic for the HTTP payloads.
"""
from pydantic import BaseModel, Field, field_validator
from decimal import Decimal
from typing import List, Optional

from snackbar.utilities.constants import MAX_QUANTITY, MIN_QUANTITY


class IngredientSelectionInput(BaseModel):
    """Schema for one ingredient selection."""
    name: str = Field(..., min_length=1, max_length=50)
    quantity: int = Field(1, ge=MIN_QUANTITY, le=MAX_QUANTITY)
    strategy: Optional[str] = None

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()


class ProductOrderInput(BaseModel):
    """Schema for a sandwich or pizza quote request."""
    family: str = Field(..., min_length=1)
    size: Optional[str] = None
    base: Optional[str] = None
    base_price: Optional[Decimal] = Field(None, ge=0)
    strategy: Optional[str] = None
    flavor: Optional[str] = None
    ingredients: List[IngredientSelectionInput] = Field(default_factory=list)

    @field_validator('family')
    @classmethod
    def normalize_family(cls, v):
        v = v.strip().lower()
        if v not in ('sandwich', 'pizza'):
            raise ValueError("family must be 'sandwich' or 'pizza'")
        return v

    @field_validator('size', 'base', 'strategy', 'flavor')
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty strings as 'not given'."""
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v
