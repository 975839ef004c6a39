"""Recipe domain entity: reference data scaled by packages (serves_base, ingredients, instructions)."""
from winewithpete.domain.Ingredient import Ingredient
from typing import List, Optional


class Recipe:
    def __init__(self, id: str = "", name: str = "", serves_base: int = 1,
                 ingredients: Optional[List[Ingredient]] = None, instructions: Optional[List[str]] = None,
                 description: Optional[str] = None, difficulty: Optional[str] = None,
                 tags: Optional[List[str]] = None):
        self.id = id
        self.name = name
        self.description = description
        self.serves_base = serves_base
        self.ingredients = ingredients[:] if ingredients else []
        self.instructions = instructions[:] if instructions else []
        self.difficulty = difficulty
        self.tags = tags[:] if tags else []

    def __str__(self) -> str:
        return f"{self.name} - serves {self.serves_base} - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        d['ingredients'] = [Ingredient.from_dict(ing) for ing in d.get('ingredients') or []]
        allowed = {"id", "name", "description", "serves_base", "ingredients", "instructions", "difficulty", "tags"}
        return Recipe(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "serves_base": self.serves_base,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "instructions": self.instructions,
            "difficulty": self.difficulty,
            "tags": self.tags,
        }
