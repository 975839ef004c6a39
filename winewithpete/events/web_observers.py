"""Activity feed observers for the admin dashboard.

This module subscribes to the GLOBAL_EVENT_BUS for:
  - member.tier_changed
  - event.rsvp_created
  - newsletter.subscribed
  - gathering.interest

and stores a lightweight in-memory ring buffer of recent activity that the
admin endpoint polls.

Design:
  * Each entry gets an auto-increment integer id (cursor) so clients can ask
    only for newer entries (since=<last_id_seen>).
  * A Lock guards the buffer; with several worker processes each keeps its
    own feed, which is fine for non-critical notifications.
  * MAX_EVENTS caps memory use.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    GLOBAL_EVENT_BUS, MEMBER_TIER_CHANGED, EVENT_RSVP_CREATED, NEWSLETTER_SUBSCRIBED, GATHERING_INTEREST
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300  # keep a few hundred recent entries
_started = False


def _summarize(event_name: str, payload: Any) -> Dict[str, Any]:
    """Flatten the payload objects into JSON-safe fields."""
    if not isinstance(payload, dict):
        return {}
    if event_name == MEMBER_TIER_CHANGED:
        member = payload.get('member')
        return {
            'email': getattr(member, 'email', ''),
            'previous': payload.get('previous'),
            'tier': payload.get('tier'),
            'source': payload.get('source'),
        }
    if event_name == EVENT_RSVP_CREATED:
        rsvp, event = payload.get('rsvp'), payload.get('event')
        return {
            'email': getattr(rsvp, 'email', ''),
            'name': getattr(rsvp, 'name', ''),
            'event': getattr(event, 'title', ''),
            'attendees': getattr(event, 'current_attendees', None),
        }
    if event_name == NEWSLETTER_SUBSCRIBED:
        sub = payload.get('subscriber')
        return {'email': getattr(sub, 'email', ''), 'name': getattr(sub, 'name', None)}
    if event_name == GATHERING_INTEREST:
        sub = payload.get('subscriber')
        return {
            'email': getattr(sub, 'email', ''),
            'interest_type': payload.get('interest_type'),
            'location': payload.get('location'),
        }
    return {}


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
        }
        evt.update(_summarize(event_name, payload))
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
    for name in (MEMBER_TIER_CHANGED, EVENT_RSVP_CREATED, NEWSLETTER_SUBSCRIBED, GATHERING_INTEREST):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True
    logger.info("Activity feed observers started")


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return entries newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) entries.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events', 'MAX_EVENTS']
