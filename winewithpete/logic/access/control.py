"""Tiered access control for recipe packages.

All checks are pure and fail closed: no member, or a member whose tier could
not be recognized, gets the NO_ACCESS level. The difficulty -> tier table in
required_tier_for is the single source both the package gate and
can_access_content read from.
"""
from __future__ import annotations

import logging
from typing import List, NamedTuple, Optional

from winewithpete.domain.Member import Member, SubscriptionTier
from winewithpete.domain.Package import Package
from winewithpete.utilities.constants import (
    DIFFICULTY_REQUIRED_TIER, TIER_HIERARCHY, TIER_MAX_SERVING_SIZE
)

logger = logging.getLogger(__name__)


class AccessLevel(NamedTuple):
    can_access_package: bool
    max_serving_size: int
    can_access_advanced: bool
    can_access_premium: bool

    def to_dict(self):
        return self._asdict()


NO_ACCESS = AccessLevel(False, 0, False, False)


def _tier_of(member: Optional[Member]) -> Optional[SubscriptionTier]:
    if member is None:
        return None
    tier = member.subscription_tier
    if tier is None:
        logger.warning("Member %s has unrecognized tier %r; denying access", member.user_id, member.raw_tier)
    return tier


def _level_for(tier: Optional[SubscriptionTier]) -> AccessLevel:
    if tier is None:
        return NO_ACCESS
    paid = tier is not SubscriptionTier.FREE
    return AccessLevel(
        can_access_package=True,
        max_serving_size=TIER_MAX_SERVING_SIZE[tier.value],
        can_access_advanced=paid,
        can_access_premium=paid,
    )


def get_access_level(member: Optional[Member]) -> AccessLevel:
    return _level_for(_tier_of(member))


def required_tier_for(difficulty_level: Optional[str]) -> SubscriptionTier:
    """Lowest tier allowed to open a package of this difficulty (unknown levels need founder)."""
    return SubscriptionTier(DIFFICULTY_REQUIRED_TIER.get(difficulty_level, SubscriptionTier.FOUNDER.value))


def is_premium_content(package: Package) -> bool:
    return required_tier_for(package.difficulty_level) is not SubscriptionTier.FREE


def can_access_package(package: Package, member: Optional[Member]) -> bool:
    """Free members are held to free content; every other member gets the generic flag."""
    tier = _tier_of(member)
    if tier is SubscriptionTier.FREE and is_premium_content(package):
        return False
    return _level_for(tier).can_access_package


def can_access_content(package: Package, member: Optional[Member]) -> bool:
    """Strict hierarchy check: member tier must be at least the package's required tier."""
    tier = _tier_of(member)
    if tier is None:
        return False
    required = required_tier_for(package.difficulty_level)
    return TIER_HIERARCHY[tier.value] >= TIER_HIERARCHY[required.value]


def get_available_serving_sizes(package: Package, member: Optional[Member]) -> List[int]:
    tier = _tier_of(member)
    if tier is None or tier is SubscriptionTier.FREE:
        source = package.free_serving_sizes
    else:
        source = package.serving_sizes
    return [size for size in source if size <= _level_for(tier).max_serving_size]


__all__ = [
    'AccessLevel', 'NO_ACCESS', 'get_access_level', 'required_tier_for', 'is_premium_content',
    'can_access_package', 'can_access_content', 'get_available_serving_sizes'
]
