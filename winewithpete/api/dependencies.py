"""Request-scoped dependencies: repositories and caller identity.

The upstream auth layer resolves the session and forwards the member's
user id in the X-Member-Id header. Admin and webhook routes check shared
secrets from the configuration.
"""
import hmac
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from winewithpete.domain.Member import Member
from winewithpete.infra.Essay_Repository import EssayRepository
from winewithpete.infra.Event_Repository import EventRepository
from winewithpete.infra.Member_Repository import MemberRepository
from winewithpete.infra.Package_Repository import PackageRepository
from winewithpete.infra.Subscriber_Repository import SubscriberRepository
from winewithpete.utilities import config

logger = logging.getLogger(__name__)


def get_package_repository() -> PackageRepository:
    return PackageRepository()


def get_member_repository() -> MemberRepository:
    return MemberRepository()


def get_event_repository() -> EventRepository:
    return EventRepository()


def get_subscriber_repository() -> SubscriberRepository:
    return SubscriberRepository()


def get_essay_repository() -> EssayRepository:
    return EssayRepository()


def get_current_member(
    x_member_id: Optional[str] = Header(default=None),
    members: MemberRepository = Depends(get_member_repository),
) -> Optional[Member]:
    """Member for the forwarded user id; None for anonymous or unknown ids."""
    if not x_member_id:
        return None
    member = members.get_member(x_member_id)
    if member is None:
        logger.info("Unknown member id %s; treating request as anonymous", x_member_id)
    return member


def _secret_matches(provided: Optional[str], expected: str) -> bool:
    if not expected or not provided:
        return False
    return hmac.compare_digest(provided.encode(), expected.encode())


def require_admin(authorization: Optional[str] = Header(default=None)) -> None:
    token = None
    if authorization and authorization.startswith('Bearer '):
        token = authorization.split(' ', 1)[1].strip()
    if not _secret_matches(token, config.ADMIN_TOKEN):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_webhook_secret(x_webhook_secret: Optional[str] = Header(default=None)) -> None:
    if not _secret_matches(x_webhook_secret, config.WEBHOOK_SECRET):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid signature")
