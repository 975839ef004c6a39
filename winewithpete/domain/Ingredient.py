"""Ingredient line of a recipe: item, amount (for the recipe's base servings), unit, optional notes."""
from typing import Optional


class Ingredient:
    def __init__(self, item: str = "", amount: float = 0, unit: str = "", notes: Optional[str] = None):
        self.item = item
        self.amount = amount
        self.unit = unit
        self.notes = notes

    def __str__(self) -> str:
        text = f"{self.item} - {self.amount} {self.unit}".rstrip()
        if self.notes:
            text += f" ({self.notes})"
        return text

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            item=d.get("item", "") or "",
            amount=d.get("amount", 0) or 0,
            unit=d.get("unit", "") or "",
            notes=d.get("notes") or None,
        )

    def to_dict(self):
        d = {"item": self.item, "amount": self.amount, "unit": self.unit}
        if self.notes:
            d["notes"] = self.notes
        return d
