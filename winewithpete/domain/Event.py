"""Community event (open-fire Sunday, salon dinner) and the RSVPs collected for it."""
from datetime import datetime, timezone
from typing import Optional


def parse_event_date(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


class Event:
    def __init__(self, id: str, title: str, event_date: str, description: Optional[str] = None,
                 event_type: str = "other", location: Optional[str] = None,
                 max_attendees: Optional[int] = None, current_attendees: int = 0,
                 is_public: bool = True, is_active: bool = True):
        self.id = id
        self.title = title
        self.description = description
        self.event_type = event_type
        self.event_date = event_date
        self.location = location
        self.max_attendees = max_attendees
        self.current_attendees = current_attendees
        self.is_public = is_public
        self.is_active = is_active

    @property
    def starts_at(self) -> datetime:
        return parse_event_date(self.event_date)

    @property
    def is_full(self) -> bool:
        return self.max_attendees is not None and self.current_attendees >= self.max_attendees

    def __str__(self) -> str:
        return f"{self.title} @ {self.event_date} ({self.current_attendees}/{self.max_attendees or '-'})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        allowed = {"id", "title", "description", "event_type", "event_date", "location",
                   "max_attendees", "current_attendees", "is_public", "is_active"}
        return Event(**{k: v for k, v in dict(data).items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "event_type": self.event_type,
            "event_date": self.event_date,
            "location": self.location,
            "max_attendees": self.max_attendees,
            "current_attendees": self.current_attendees,
            "is_public": self.is_public,
            "is_active": self.is_active,
        }


class EventRSVP:
    def __init__(self, id: str, event_id: str, email: str, name: str, status: str = "pending",
                 notes: Optional[str] = None, created_at: Optional[str] = None):
        self.id = id
        self.event_id = event_id
        self.email = email
        self.name = name
        self.status = status
        self.notes = notes
        self.created_at = created_at or datetime.now(timezone.utc).isoformat()

    def __repr__(self) -> str:
        return f"EventRSVP({self.email!r} -> {self.event_id!r}, {self.status})"

    @staticmethod
    def from_dict(data):
        allowed = {"id", "event_id", "email", "name", "status", "notes", "created_at"}
        return EventRSVP(**{k: v for k, v in dict(data).items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "event_id": self.event_id,
            "email": self.email,
            "name": self.name,
            "status": self.status,
            "notes": self.notes,
            "created_at": self.created_at,
        }
