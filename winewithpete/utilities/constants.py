from typing import Final

# Membership tiers, lowest first
TIER_FREE: Final[str] = "free"
TIER_PREMIUM: Final[str] = "premium"
TIER_FOUNDER: Final[str] = "founder"

TIER_HIERARCHY: Final[dict[str, int]] = {TIER_FREE: 0, TIER_PREMIUM: 1, TIER_FOUNDER: 2}

# Largest serving size each tier may scale a package to
TIER_MAX_SERVING_SIZE: Final[dict[str, int]] = {TIER_FREE: 4, TIER_PREMIUM: 8, TIER_FOUNDER: 12}

# Package difficulty -> lowest tier allowed to open it. Anything missing here requires founder.
DIFFICULTY_REQUIRED_TIER: Final[dict[str, str]] = {
    "beginner": TIER_FREE,
    "intermediate": TIER_PREMIUM,
}
DIFFICULTY_LEVELS: Final[tuple[str, ...]] = ("beginner", "intermediate", "advanced")

DEFAULT_SERVING_SIZE: Final[int] = 4

EVENT_TYPES: Final[tuple[str, ...]] = ("open_fire_sunday", "salon_dinner", "other")
RSVP_STATUSES: Final[tuple[str, ...]] = ("pending", "confirmed", "cancelled")

# Payment processor events that carry a tier in their metadata
SUBSCRIPTION_ACTIVATING_EVENTS: Final[tuple[str, ...]] = (
    "checkout.session.completed",
    "customer.subscription.created",
    "customer.subscription.updated",
)
SUBSCRIPTION_CANCELLED_EVENT: Final[str] = "customer.subscription.deleted"

MEMBER_HEADER: Final[str] = "X-Member-Id"
WEBHOOK_SECRET_HEADER: Final[str] = "X-Webhook-Secret"

# Gathering interest form
GATHERING_INTEREST_TYPES: Final[tuple[str, ...]] = ("attend", "host", "collaborate")
DEFAULT_GATHERING_INTEREST: Final[str] = "attend"
