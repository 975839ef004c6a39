import logging
from typing import List, Optional

from winewithpete.domain.Member import Member, SubscriptionTier
from winewithpete.infra import paths
from winewithpete.infra.json_store import atomic_write, read_records, write_lock
from winewithpete.utilities.errors import MemberNotFoundError

logger = logging.getLogger(__name__)


class MemberRepository:
    def __init__(self, path=None):
        self._path = path

    @property
    def path(self):
        return self._path or paths.MEMBERS_FILE

    def list_members(self) -> List[Member]:
        return [Member.from_dict(entry) for entry in read_records(self.path) if isinstance(entry, dict)]

    def get_member(self, user_id: Optional[str]) -> Optional[Member]:
        if not user_id:
            return None
        for member in self.list_members():
            if member.user_id == user_id:
                return member
        return None

    def get_by_email(self, email: str) -> Optional[Member]:
        email = (email or '').strip().lower()
        for member in self.list_members():
            if member.email.lower() == email:
                return member
        return None

    def save_member(self, member: Member) -> Member:
        """Insert or replace by user_id."""
        with write_lock:
            records = [r for r in read_records(self.path) if isinstance(r, dict)]
            for i, r in enumerate(records):
                if r.get('user_id') == member.user_id:
                    records[i] = member.to_dict()
                    break
            else:
                records.append(member.to_dict())
            atomic_write(self.path, records)
        return member

    def create_member(self, user_id: str, email: str, name: Optional[str] = None,
                      tier: SubscriptionTier = SubscriptionTier.FREE) -> Member:
        member = Member(user_id=user_id, email=email.strip().lower(), name=name, subscription_tier=tier)
        return self.save_member(member)

    def set_tier(self, user_id: str, tier: SubscriptionTier) -> Member:
        with write_lock:
            member = self.get_member(user_id)
            if member is None:
                raise MemberNotFoundError(user_id)
            member.subscription_tier = SubscriptionTier.parse(tier)
            member.raw_tier = member.subscription_tier.value
            self.save_member(member)
        logger.info(f"Member {user_id} tier set to {member.subscription_tier.value}")
        return member
