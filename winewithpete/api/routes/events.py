import logging

from fastapi import APIRouter, Depends, HTTPException

from winewithpete.api.dependencies import get_event_repository
from winewithpete.events.event_helpers import publish_rsvp_created
from winewithpete.infra.Event_Repository import EventRepository
from winewithpete.utilities.errors import DuplicateRSVPError, EventFullError, EventNotFoundError
from winewithpete.utilities.validators import RSVPInput

router = APIRouter(prefix="/api/events", tags=["events"])
logger = logging.getLogger(__name__)


@router.get("")
@router.get("/")
def list_upcoming_events(repo: EventRepository = Depends(get_event_repository)):
    events = repo.upcoming_events()
    return {"success": True, "events": [e.to_dict() for e in events]}


@router.post("/rsvp")
def create_rsvp(payload: RSVPInput, repo: EventRepository = Depends(get_event_repository)):
    try:
        rsvp, event = repo.create_rsvp(payload)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except (DuplicateRSVPError, EventFullError) as e:
        raise HTTPException(status_code=409, detail=str(e))

    publish_rsvp_created(rsvp, event)
    return {
        "success": True,
        "data": rsvp.to_dict(),
        "message": "RSVP submitted successfully! You will receive a confirmation email shortly.",
    }
