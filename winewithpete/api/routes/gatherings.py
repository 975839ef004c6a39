from fastapi import APIRouter, Depends

from winewithpete.api.dependencies import get_subscriber_repository
from winewithpete.events.event_helpers import publish_gathering_interest
from winewithpete.infra.Subscriber_Repository import SubscriberRepository
from winewithpete.utilities.validators import GatheringInterestInput

router = APIRouter(prefix="/api/gatherings", tags=["gatherings"])


@router.post("/interest")
def register_interest(payload: GatheringInterestInput,
                      repo: SubscriberRepository = Depends(get_subscriber_repository)):
    subscriber = repo.record_gathering_interest(
        payload.email, payload.name, location=payload.location, interest_type=payload.interest_type
    )
    publish_gathering_interest(subscriber, payload.interest_type, payload.location)
    return {
        "success": True,
        "message": "Thank you! We'll notify you when gatherings are announced in your area.",
    }
