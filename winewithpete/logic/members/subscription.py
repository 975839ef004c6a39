"""Membership tier changes driven by payment-processor subscription events.

The webhook payload is assumed verified by the caller. Activation events
carry the purchased tier and the member's user_id in their metadata (the
upgrade checkout puts them there); a deleted subscription drops the member
back to free.
"""
import logging
from typing import Optional

from winewithpete.domain.Member import Member, SubscriptionTier
from winewithpete.events.event_helpers import publish_tier_changed
from winewithpete.infra.Member_Repository import MemberRepository
from winewithpete.utilities.constants import SUBSCRIPTION_ACTIVATING_EVENTS, SUBSCRIPTION_CANCELLED_EVENT
from winewithpete.utilities.errors import MemberNotFoundError
from winewithpete.utilities.validators import SubscriptionEventInput

logger = logging.getLogger(__name__)


def tier_for_event(event: SubscriptionEventInput) -> Optional[SubscriptionTier]:
    """Tier the event moves the member to, or None for events we ignore.

    Raises:
        UnknownTierError: activation event with a missing/unrecognized tier.
    """
    if event.type == SUBSCRIPTION_CANCELLED_EVENT:
        return SubscriptionTier.FREE
    if event.type in SUBSCRIPTION_ACTIVATING_EVENTS:
        return SubscriptionTier.parse(event.metadata().get('subscription_tier'))
    return None


def apply_subscription_event(repo: MemberRepository, event: SubscriptionEventInput) -> Optional[Member]:
    """Apply a subscription event; returns the updated member or None if ignored."""
    tier = tier_for_event(event)
    if tier is None:
        logger.info("Unhandled subscription event type: %s", event.type)
        return None

    user_id = event.metadata().get('user_id')
    member = repo.get_member(user_id)
    if member is None:
        raise MemberNotFoundError(user_id or '')

    previous = member.subscription_tier.value if member.subscription_tier else member.raw_tier
    if member.subscription_tier is tier:
        return member
    member = repo.set_tier(member.user_id, tier)
    publish_tier_changed(member, previous, source=event.type)
    return member


__all__ = ['tier_for_event', 'apply_subscription_event']
