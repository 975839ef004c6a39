"""Featured essay: a curated link to a long-form piece shown on the site."""
from datetime import datetime, timezone
from typing import Optional


class FeaturedEssay:
    def __init__(self, id: str, url: str, title: Optional[str] = None, excerpt: Optional[str] = None,
                 image_url: Optional[str] = None, published_date: Optional[str] = None,
                 display_order: int = 0, is_active: bool = True, featured_essay: bool = False,
                 created_at: Optional[str] = None, updated_at: Optional[str] = None):
        self.id = id
        self.url = url
        self.title = title
        self.excerpt = excerpt
        self.image_url = image_url
        self.published_date = published_date
        self.display_order = display_order
        self.is_active = is_active
        self.featured_essay = featured_essay
        self.created_at = created_at or datetime.now(timezone.utc).isoformat()
        self.updated_at = updated_at or self.created_at

    def __str__(self) -> str:
        return f"#{self.display_order} {self.title or self.url}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        allowed = {"id", "url", "title", "excerpt", "image_url", "published_date", "display_order",
                   "is_active", "featured_essay", "created_at", "updated_at"}
        return FeaturedEssay(**{k: v for k, v in dict(data).items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "url": self.url,
            "title": self.title,
            "excerpt": self.excerpt,
            "image_url": self.image_url,
            "published_date": self.published_date,
            "display_order": self.display_order,
            "is_active": self.is_active,
            "featured_essay": self.featured_essay,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
