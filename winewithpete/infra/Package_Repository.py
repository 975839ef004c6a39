"""Package repository: reads packages and joins their recipes (hydration)."""
import logging
from typing import List, Optional

from pydantic import ValidationError

from winewithpete.domain.Package import Package
from winewithpete.infra import paths
from winewithpete.infra.json_store import read_records
from winewithpete.infra.Recipe_Repository import RecipeRepository
from winewithpete.utilities.validators import PackageInput

logger = logging.getLogger(__name__)


class PackageRepository:
    def __init__(self, path=None, recipes: Optional[RecipeRepository] = None):
        self._path = path
        self.recipes = recipes or RecipeRepository()

    @property
    def path(self):
        return self._path or paths.PACKAGES_FILE

    def _load(self) -> List[Package]:
        packages = []
        for entry in read_records(self.path):
            try:
                validated = PackageInput.model_validate(entry)
            except ValidationError as e:
                logger.warning(f"Skipping invalid package {entry.get('slug') if isinstance(entry, dict) else entry!r}: {e}")
                continue
            packages.append(Package.from_dict(validated.model_dump()))
        return packages

    def list_packages(self, published_only: bool = True) -> List[Package]:
        """Packages in stored order; unpublished ones only when published_only is False."""
        packages = self._load()
        if published_only:
            packages = [p for p in packages if p.published]
        return packages

    def get_package(self, slug: str, hydrate: bool = True) -> Optional[Package]:
        for package in self._load():
            if package.slug == slug:
                return self.hydrate(package) if hydrate else package
        return None

    def hydrate(self, package: Package) -> Package:
        """Attach full Recipe bodies; ids that don't resolve stay None."""
        found = self.recipes.get_many(pr.recipe_id for pr in package.recipes)
        for pr in package.recipes:
            pr.recipe = found.get(pr.recipe_id)
            if pr.recipe is None:
                logger.warning(f"Package {package.slug}: recipe {pr.recipe_id} not found")
        return package
