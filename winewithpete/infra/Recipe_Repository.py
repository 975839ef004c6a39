import logging
from typing import Dict, Iterable, List

from pydantic import ValidationError

from winewithpete.domain.Recipe import Recipe
from winewithpete.infra import paths
from winewithpete.infra.json_store import read_records
from winewithpete.utilities.validators import RecipeInput

logger = logging.getLogger(__name__)


class RecipeRepository:
    def __init__(self, path=None):
        self._path = path

    @property
    def path(self):
        return self._path or paths.RECIPES_FILE

    def list_recipes(self) -> List[Recipe]:
        """Read recipes, skipping records that fail validation (e.g. serves_base <= 0)."""
        recipes = []
        for entry in read_records(self.path):
            try:
                validated = RecipeInput.model_validate(entry)
            except ValidationError as e:
                logger.warning(f"Skipping invalid recipe {entry.get('id') if isinstance(entry, dict) else entry!r}: {e}")
                continue
            recipes.append(Recipe.from_dict(validated.model_dump()))
        return recipes

    def get_many(self, recipe_ids: Iterable[str]) -> Dict[str, Recipe]:
        wanted = set(recipe_ids)
        return {r.id: r for r in self.list_recipes() if r.id in wanted}
