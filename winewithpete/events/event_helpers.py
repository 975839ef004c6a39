"""Event helper utilities.

Thin wrappers that publish site events on the global event bus with a
consistent payload shape.

Quick import:
    from winewithpete.events.event_helpers import (
        publish_tier_changed, publish_rsvp_created, publish_newsletter_subscribed,
        publish_gathering_interest,
    )
"""
from __future__ import annotations
from typing import Any, Optional
from .Event_Bus import (
    create_event,
    MEMBER_TIER_CHANGED, EVENT_RSVP_CREATED, NEWSLETTER_SUBSCRIBED, GATHERING_INTEREST,
)

__all__ = [
    'publish_tier_changed', 'publish_rsvp_created', 'publish_newsletter_subscribed',
    'publish_gathering_interest',
    'MEMBER_TIER_CHANGED', 'EVENT_RSVP_CREATED', 'NEWSLETTER_SUBSCRIBED', 'GATHERING_INTEREST',
]


def publish_tier_changed(member: Any, previous: Optional[str], source: str):
    """Publish a member.tier_changed event."""
    create_event(MEMBER_TIER_CHANGED, {
        'member': member,
        'previous': previous,
        'tier': member.subscription_tier.value if member.subscription_tier else None,
        'source': source,
    })


def publish_rsvp_created(rsvp: Any, event: Any):
    """Publish an event.rsvp_created event."""
    create_event(EVENT_RSVP_CREATED, {'rsvp': rsvp, 'event': event})


def publish_newsletter_subscribed(subscriber: Any):
    create_event(NEWSLETTER_SUBSCRIBED, {'subscriber': subscriber})


def publish_gathering_interest(subscriber: Any, interest_type: str, location: Optional[str]):
    create_event(GATHERING_INTEREST, {
        'subscriber': subscriber,
        'interest_type': interest_type,
        'location': location,
    })
