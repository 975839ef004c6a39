"""Simple Event Bus / Observer implementation for site activity.

Event names used so far:
  member.tier_changed -> payload {"member": Member, "previous": str | None, "tier": str, "source": str}
  event.rsvp_created -> payload {"rsvp": EventRSVP, "event": Event}
  newsletter.subscribed -> payload {"subscriber": NewsletterSubscriber}
  gathering.interest -> payload {"subscriber": NewsletterSubscriber, "interest_type": str, "location": str | None}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
MEMBER_TIER_CHANGED = "member.tier_changed"
EVENT_RSVP_CREATED = "event.rsvp_created"
NEWSLETTER_SUBSCRIBED = "newsletter.subscribed"
GATHERING_INTEREST = "gathering.interest"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def publish(self, event_name: str, payload: Any):
		# a failing listener must not break the request that published the event
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:  # pragma: no cover
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def create_event(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus (sugar function)."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'create_event',
	'MEMBER_TIER_CHANGED', 'EVENT_RSVP_CREATED', 'NEWSLETTER_SUBSCRIBED', 'GATHERING_INTEREST'
]
