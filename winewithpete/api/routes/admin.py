from typing import Optional

from fastapi import APIRouter, Depends, Query

from winewithpete.api.dependencies import require_admin
from winewithpete.events.web_observers import get_events

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/activity")
def activity_feed(since: Optional[int] = Query(default=None, ge=0)):
    """Recent signups, RSVPs and tier changes; poll with since=next_cursor."""
    return get_events(since)
