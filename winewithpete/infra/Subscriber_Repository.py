import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from winewithpete.domain.Subscriber import NewsletterSubscriber
from winewithpete.infra import paths
from winewithpete.infra.json_store import atomic_write, read_records, write_lock
from winewithpete.utilities.constants import DEFAULT_GATHERING_INTEREST
from winewithpete.utilities.errors import DuplicateSubscriberError

logger = logging.getLogger(__name__)


class SubscriberRepository:
    def __init__(self, path=None):
        self._path = path

    @property
    def path(self):
        return self._path or paths.SUBSCRIBERS_FILE

    def list_active(self) -> List[NewsletterSubscriber]:
        subs = [NewsletterSubscriber.from_dict(r) for r in read_records(self.path) if isinstance(r, dict)]
        return [s for s in subs if s.is_active]

    def subscribe(self, email: str, name: Optional[str] = None) -> NewsletterSubscriber:
        email = email.strip().lower()
        with write_lock:
            records = read_records(self.path)
            if any(isinstance(r, dict) and (r.get('email') or '').lower() == email for r in records):
                raise DuplicateSubscriberError('This email is already subscribed to our newsletter')
            sub = NewsletterSubscriber(id=str(uuid4()), email=email, name=name)
            records.append(sub.to_dict())
            atomic_write(self.path, records)
        logger.info(f"Newsletter subscriber added: {email}")
        return sub

    def record_gathering_interest(self, email: str, name: str, location: Optional[str] = None,
                                  interest_type: str = DEFAULT_GATHERING_INTEREST) -> NewsletterSubscriber:
        """Store gathering interest in the subscriber's preferences, adding the subscriber if new.

        A repeat submission replaces the earlier interest; other preferences are kept.
        """
        email = email.strip().lower()
        interest = {
            'location': location,
            'interest_type': interest_type,
            'submitted_at': datetime.now(timezone.utc).isoformat(),
        }
        with write_lock:
            records = read_records(self.path)
            for i, r in enumerate(records):
                if isinstance(r, dict) and (r.get('email') or '').lower() == email:
                    sub = NewsletterSubscriber.from_dict(r)
                    sub.preferences['gathering_interest'] = interest
                    records[i] = sub.to_dict()
                    break
            else:
                sub = NewsletterSubscriber(id=str(uuid4()), email=email, name=name,
                                           preferences={'gathering_interest': interest})
                records.append(sub.to_dict())
            atomic_write(self.path, records)
        logger.info(f"Gathering interest ({interest_type}) recorded for {email}")
        return sub
