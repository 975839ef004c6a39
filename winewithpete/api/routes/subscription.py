import logging

from fastapi import APIRouter, Depends, HTTPException

from winewithpete.api.dependencies import get_member_repository, require_webhook_secret
from winewithpete.infra.Member_Repository import MemberRepository
from winewithpete.logic.members.subscription import apply_subscription_event
from winewithpete.utilities.errors import MemberNotFoundError, UnknownTierError
from winewithpete.utilities.validators import SubscriptionEventInput

router = APIRouter(prefix="/api/subscription", tags=["subscription"])
logger = logging.getLogger(__name__)


@router.post("/events", dependencies=[Depends(require_webhook_secret)])
def subscription_event(event: SubscriptionEventInput, repo: MemberRepository = Depends(get_member_repository)):
    """Tier changes forwarded from the payment processor's verified webhook."""
    try:
        member = apply_subscription_event(repo, event)
    except UnknownTierError as e:
        logger.error("Subscription event %s: %s", event.id, e)
        raise HTTPException(status_code=400, detail=str(e))
    except MemberNotFoundError:
        raise HTTPException(status_code=404, detail="Member not found")
    return {
        "received": True,
        "member": member.to_dict() if member else None,
    }
