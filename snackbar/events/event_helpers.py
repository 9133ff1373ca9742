"""Event helper utilities.

Helpers for publishing build outcomes on an event bus (the global one unless
a builder was given its own).

Quick import:
    from snackbar.events.event_helpers import (
        publish_product_finalized, publish_product_rejected,
        PRODUCT_FINALIZED, PRODUCT_REJECTED
    )
"""
from __future__ import annotations
from typing import Any
from .Event_Bus import (
    EventBus, publish,
    PRODUCT_FINALIZED, PRODUCT_REJECTED,
)

__all__ = [
    'publish_product_finalized', 'publish_product_rejected',
    'PRODUCT_FINALIZED', 'PRODUCT_REJECTED',
]


def publish_product_finalized(product: Any, bus: EventBus | None = None):
    """Publish a product.finalized event."""
    publish(PRODUCT_FINALIZED, {
        'product': product,
        'family': product.family.name.lower(),
        'total_price': product.total_price(),
    }, bus)


def publish_product_rejected(family: Any, error: Exception, bus: EventBus | None = None):
    """Publish a product.rejected event."""
    publish(PRODUCT_REJECTED, {
        'family': getattr(family, 'name', str(family)).lower(),
        'error': error,
    }, bus)
