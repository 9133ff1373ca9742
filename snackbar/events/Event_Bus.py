"""Simple Event Bus / Observer implementation for build outcomes.

Event names:
  product.finalized -> payload {"product": Product, "family": str, "total_price": Decimal}
  product.rejected  -> payload {"family": str, "error": ConfigurationError}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
from collections import defaultdict
from typing import Callable, Any, Dict, List
import logging

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PRODUCT_FINALIZED = "product.finalized"
PRODUCT_REJECTED = "product.rejected"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# listener failures never reach the publisher
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish(event_name: str, payload: Any = None, bus: EventBus | None = None) -> None:
	"""Publish an event on the given bus, or the global one."""
	(bus or GLOBAL_EVENT_BUS).publish(event_name, payload)


__all__ = ['EventBus', 'GLOBAL_EVENT_BUS', 'publish', 'PRODUCT_FINALIZED', 'PRODUCT_REJECTED']
