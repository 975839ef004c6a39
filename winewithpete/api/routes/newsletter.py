from fastapi import APIRouter, Depends, HTTPException

from winewithpete.api.dependencies import get_subscriber_repository
from winewithpete.events.event_helpers import publish_newsletter_subscribed
from winewithpete.infra.Subscriber_Repository import SubscriberRepository
from winewithpete.utilities.errors import DuplicateSubscriberError
from winewithpete.utilities.validators import NewsletterInput

router = APIRouter(prefix="/api/newsletter", tags=["newsletter"])


@router.post("/subscribe")
def subscribe(payload: NewsletterInput, repo: SubscriberRepository = Depends(get_subscriber_repository)):
    try:
        subscriber = repo.subscribe(payload.email, payload.name)
    except DuplicateSubscriberError as e:
        raise HTTPException(status_code=409, detail=str(e))
    publish_newsletter_subscribed(subscriber)
    return {
        "success": True,
        "data": subscriber.to_dict(),
        "message": "Successfully subscribed to our newsletter!",
    }
