"""Domain exceptions raised by repositories and service helpers.

The HTTP layer maps these onto status codes; pure computations (scaling,
access control) never raise them and fail closed instead.
"""


class WineWithPeteError(Exception):
    """Base class for every domain error raised by this package."""


class UnknownTierError(WineWithPeteError, ValueError):
    def __init__(self, tier):
        super().__init__(f"Unknown subscription tier: {tier!r}")
        self.tier = tier


class MemberNotFoundError(WineWithPeteError):
    def __init__(self, user_id: str):
        super().__init__(f"Member not found: {user_id}")
        self.user_id = user_id


class EventNotFoundError(WineWithPeteError):
    def __init__(self, event_id: str):
        super().__init__(f"Event not found: {event_id}")
        self.event_id = event_id


class DuplicateRSVPError(WineWithPeteError):
    pass


class EventFullError(WineWithPeteError):
    pass


class DuplicateSubscriberError(WineWithPeteError):
    pass


class MetadataFetchError(WineWithPeteError):
    """Upstream page could not be fetched; status_code mirrors the upstream response."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    'WineWithPeteError', 'UnknownTierError', 'MemberNotFoundError', 'EventNotFoundError',
    'DuplicateRSVPError', 'EventFullError', 'DuplicateSubscriberError', 'MetadataFetchError',
]
