"""Newsletter subscriber record."""
from datetime import datetime, timezone
from typing import Optional


class NewsletterSubscriber:
    def __init__(self, id: str, email: str, name: Optional[str] = None, preferences: Optional[dict] = None,
                 is_active: bool = True, created_at: Optional[str] = None):
        self.id = id
        self.email = email
        self.name = name
        self.preferences = dict(preferences) if preferences else {}
        self.is_active = is_active
        self.created_at = created_at or datetime.now(timezone.utc).isoformat()

    def __repr__(self) -> str:
        return f"NewsletterSubscriber({self.email!r})"

    @staticmethod
    def from_dict(data):
        allowed = {"id", "email", "name", "preferences", "is_active", "created_at"}
        return NewsletterSubscriber(**{k: v for k, v in dict(data).items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "preferences": self.preferences,
            "is_active": self.is_active,
            "created_at": self.created_at,
        }
