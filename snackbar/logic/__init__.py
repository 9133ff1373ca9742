"""Core business logic layer.

Subpackages:
- pricing: ingredient pricing strategies (standard, premium, promotional)
- validation: combination rules for a candidate product
- building: fluent product builders
"""
__all__ = ["pricing", "validation", "building"]
