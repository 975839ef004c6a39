"""Events and their RSVPs.

create_rsvp stores the RSVP as pending and bumps the event attendee count
under the same lock, so the count matches the number of RSVPs written.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from uuid import uuid4

from pydantic import ValidationError

from winewithpete.domain.Event import Event, EventRSVP
from winewithpete.infra import paths
from winewithpete.infra.json_store import atomic_write, read_records, write_lock
from winewithpete.utilities.errors import DuplicateRSVPError, EventFullError, EventNotFoundError
from winewithpete.utilities.validators import EventInput, RSVPInput

logger = logging.getLogger(__name__)


class EventRepository:
    def __init__(self, events_path=None, rsvps_path=None):
        self._events_path = events_path
        self._rsvps_path = rsvps_path

    @property
    def events_path(self):
        return self._events_path or paths.EVENTS_FILE

    @property
    def rsvps_path(self):
        return self._rsvps_path or paths.RSVPS_FILE

    def list_events(self, active_only: bool = True) -> List[Event]:
        events = []
        for entry in read_records(self.events_path):
            try:
                events.append(Event.from_dict(EventInput.model_validate(entry).model_dump()))
            except (ValidationError, ValueError) as e:
                logger.warning(f"Skipping invalid event record: {e}")
        if active_only:
            events = [e for e in events if e.is_active]
        events.sort(key=lambda e: e.starts_at)
        return events

    def upcoming_events(self, now: Optional[datetime] = None) -> List[Event]:
        """Active, public events starting at or after now, soonest first."""
        now = now or datetime.now(timezone.utc)
        return [e for e in self.list_events() if e.is_public and e.starts_at >= now]

    def get_event(self, event_id: str) -> Optional[Event]:
        for event in self.list_events(active_only=False):
            if event.id == event_id:
                return event
        return None

    def list_rsvps(self, event_id: Optional[str] = None) -> List[EventRSVP]:
        rsvps = [EventRSVP.from_dict(r) for r in read_records(self.rsvps_path) if isinstance(r, dict)]
        if event_id is not None:
            rsvps = [r for r in rsvps if r.event_id == event_id]
        return rsvps

    def confirmed_rsvps(self, event_id: str) -> List[EventRSVP]:
        return [r for r in self.list_rsvps(event_id) if r.status == 'confirmed']

    def create_rsvp(self, data: RSVPInput) -> Tuple[EventRSVP, Event]:
        """Record a pending RSVP and increment the event's attendee count; returns (rsvp, event).

        Raises:
            EventNotFoundError: unknown or inactive event.
            DuplicateRSVPError: this email already RSVPed (and didn't cancel).
            EventFullError: max_attendees reached.
        """
        with write_lock:
            events = read_records(self.events_path)
            record = next((e for e in events if isinstance(e, dict) and e.get('id') == data.event_id), None)
            if record is None or not record.get('is_active', True):
                raise EventNotFoundError(data.event_id)
            event = Event.from_dict(record)

            existing = [r for r in self.list_rsvps(data.event_id) if r.status != 'cancelled']
            if any(r.email == data.email for r in existing):
                raise DuplicateRSVPError('You have already RSVPed for this event')
            if event.is_full:
                raise EventFullError('This event is full')

            rsvp = EventRSVP(id=str(uuid4()), event_id=data.event_id, email=data.email,
                             name=data.name, notes=data.notes or None, status='pending')
            rsvps = read_records(self.rsvps_path)
            rsvps.append(rsvp.to_dict())
            atomic_write(self.rsvps_path, rsvps)

            event.current_attendees += 1
            record['current_attendees'] = event.current_attendees
            atomic_write(self.events_path, events)

        logger.info(f"RSVP {rsvp.id} for event {event.id} ({event.current_attendees} attendees)")
        return rsvp, event
