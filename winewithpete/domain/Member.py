"""Member domain entity and the SubscriptionTier enum.

Tiers are parsed at the data-access boundary. A stored record carrying a tier
we do not recognize loads with ``subscription_tier = None`` (and keeps the
raw value in ``raw_tier``) so access checks can fail closed on it.
"""
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union

from winewithpete.utilities.constants import TIER_FREE, TIER_PREMIUM, TIER_FOUNDER
from winewithpete.utilities.errors import UnknownTierError

logger = logging.getLogger(__name__)


class SubscriptionTier(str, Enum):
    FREE = TIER_FREE
    PREMIUM = TIER_PREMIUM
    FOUNDER = TIER_FOUNDER

    @classmethod
    def parse(cls, value) -> "SubscriptionTier":
        """Strict conversion; raises UnknownTierError for anything else."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownTierError(value) from None


class Member:
    def __init__(self, user_id: str, email: str = "", name: Optional[str] = None,
                 subscription_tier: Union[SubscriptionTier, str, None] = SubscriptionTier.FREE,
                 created_at: Optional[str] = None, raw_tier: Optional[str] = None):
        self.user_id = user_id
        self.email = email
        self.name = name
        # plain strings are accepted and parsed strictly; None marks an unrecognized stored tier
        if subscription_tier is not None:
            subscription_tier = SubscriptionTier.parse(subscription_tier)
        self.subscription_tier = subscription_tier
        self.created_at = created_at or datetime.now(timezone.utc).isoformat()
        self.raw_tier = raw_tier if raw_tier is not None else (subscription_tier.value if subscription_tier else None)

    def __str__(self) -> str:
        tier = self.subscription_tier.value if self.subscription_tier else f"unknown:{self.raw_tier}"
        return f"{self.email or self.user_id} [{tier}]"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        raw = d.get("subscription_tier", TIER_FREE)
        try:
            tier = SubscriptionTier.parse(raw)
        except UnknownTierError:
            logger.warning("Member %s has unrecognized tier %r; treating as no access", d.get("user_id"), raw)
            tier = None
        return Member(
            user_id=d.get("user_id", ""),
            email=d.get("email", "") or "",
            name=d.get("name"),
            subscription_tier=tier,
            created_at=d.get("created_at"),
            raw_tier=raw,
        )

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "email": self.email,
            "name": self.name,
            "subscription_tier": self.subscription_tier.value if self.subscription_tier else self.raw_tier,
            "created_at": self.created_at,
        }
