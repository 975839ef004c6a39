import logging
from typing import List

from pydantic import ValidationError

from winewithpete.domain.Essay import FeaturedEssay
from winewithpete.infra import paths
from winewithpete.infra.json_store import read_records
from winewithpete.utilities.validators import EssayInput

logger = logging.getLogger(__name__)


class EssayRepository:
    def __init__(self, path=None):
        self._path = path

    @property
    def path(self):
        return self._path or paths.ESSAYS_FILE

    def list_essays(self, featured_only: bool = False) -> List[FeaturedEssay]:
        """Active essays by display_order; featured_only keeps the one(s) flagged for the start page."""
        essays = []
        for entry in read_records(self.path):
            try:
                validated = EssayInput.model_validate(entry)
            except ValidationError as e:
                logger.warning(f"Skipping invalid essay {entry.get('id') if isinstance(entry, dict) else entry!r}: {e}")
                continue
            essays.append(FeaturedEssay.from_dict(validated.model_dump()))
        essays = [e for e in essays if e.is_active]
        if featured_only:
            essays = [e for e in essays if e.featured_essay]
        essays.sort(key=lambda e: e.display_order)
        return essays
