"""Web-facing observers for build events.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - product.finalized
  - product.rejected

and stores a lightweight in-memory ring buffer of recent outcomes that the
web layer can poll.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * A Lock guards the buffer; uvicorn may serve requests from a thread pool.
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone
import logging

from .Event_Bus import (
    GLOBAL_EVENT_BUS, PRODUCT_FINALIZED, PRODUCT_REJECTED
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300  # keep a few hundred recent events
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    evt: Dict[str, Any] = {
        'type': event_name,
        'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
    }
    if isinstance(payload, dict):
        evt['family'] = payload.get('family', '')
        if 'total_price' in payload:
            evt['total_price'] = str(payload['total_price'])
        err = payload.get('error')
        if err is not None:
            evt['code'] = getattr(err, 'code', type(err).__name__)
            evt['reason'] = str(err)
    with _lock:
        evt['id'] = _next_id
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    GLOBAL_EVENT_BUS.subscribe(PRODUCT_FINALIZED, _record)
    GLOBAL_EVENT_BUS.subscribe(PRODUCT_REJECTED, _record)
    _started = True
    logger.info("Build event observers subscribed")


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
