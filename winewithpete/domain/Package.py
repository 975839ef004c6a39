"""Package aggregate: a purchasable bundle of recipes with serving-size options.

A PackageRecipe is the join entry stored inside a package. After the
repository hydrates it, ``recipe`` holds the full Recipe body, or stays None
when the referenced recipe could not be found.
"""
from typing import List, Optional

from winewithpete.domain.Recipe import Recipe


class PackageRecipe:
    def __init__(self, recipe_id: str, serves_factor: float = 1.0, recipe: Optional[Recipe] = None):
        self.recipe_id = recipe_id
        self.serves_factor = serves_factor
        self.recipe = recipe

    def __repr__(self) -> str:
        return f"PackageRecipe({self.recipe_id!r}, serves_factor={self.serves_factor})"

    @staticmethod
    def from_dict(data):
        return PackageRecipe(
            recipe_id=data.get("recipe_id", ""),
            serves_factor=data.get("serves_factor", 1.0),
        )

    def to_dict(self, include_recipe: bool = False):
        d = {"recipe_id": self.recipe_id, "serves_factor": self.serves_factor}
        if include_recipe:
            d["recipe"] = self.recipe.to_dict() if self.recipe else None
        return d


class Package:
    def __init__(self, id: str = "", slug: str = "", name: str = "", description: Optional[str] = None,
                 package_type: str = "menu", difficulty_level: str = "beginner",
                 serving_sizes: Optional[List[int]] = None, free_serving_sizes: Optional[List[int]] = None,
                 recipes: Optional[List[PackageRecipe]] = None, wine_pairing: Optional[str] = None,
                 tags: Optional[List[str]] = None, published: bool = False):
        self.id = id
        self.slug = slug
        self.name = name
        self.description = description
        self.package_type = package_type
        self.difficulty_level = difficulty_level
        self.serving_sizes = serving_sizes[:] if serving_sizes else []
        self.free_serving_sizes = free_serving_sizes[:] if free_serving_sizes else []
        self.recipes = recipes[:] if recipes else []
        self.wine_pairing = wine_pairing
        self.tags = tags[:] if tags else []
        self.published = published

    def __str__(self) -> str:
        return f"{self.name} ({self.difficulty_level}) - {len(self.recipes)} recipes - sizes {self.serving_sizes}"

    __repr__ = __str__

    @property
    def is_hydrated(self) -> bool:
        return all(pr.recipe is not None for pr in self.recipes)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        d['recipes'] = [PackageRecipe.from_dict(pr) for pr in d.get('recipes') or []]
        allowed = {"id", "slug", "name", "description", "package_type", "difficulty_level", "serving_sizes",
                   "free_serving_sizes", "recipes", "wine_pairing", "tags", "published"}
        return Package(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self, include_recipes: bool = False):
        return {
            "id": self.id,
            "slug": self.slug,
            "name": self.name,
            "description": self.description,
            "package_type": self.package_type,
            "difficulty_level": self.difficulty_level,
            "serving_sizes": self.serving_sizes,
            "free_serving_sizes": self.free_serving_sizes,
            "recipes": [pr.to_dict(include_recipe=include_recipes) for pr in self.recipes],
            "wine_pairing": self.wine_pairing,
            "tags": self.tags,
            "published": self.published,
        }
