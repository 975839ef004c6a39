"""ShoppingItem: one consolidated line of a package shopping list (derived, never persisted)."""
from typing import Optional


class ShoppingItem:
    def __init__(self, item: str, amount: float, unit: str, notes: Optional[str] = None):
        self.item = item
        self.amount = amount
        self.unit = unit
        self.notes = notes

    def __eq__(self, other):
        if not isinstance(other, ShoppingItem):
            return NotImplemented
        return (self.item, self.amount, self.unit, self.notes) == (other.item, other.amount, other.unit, other.notes)

    def __str__(self) -> str:
        return f"{self.item} - {self.amount} {self.unit}".rstrip()

    def __repr__(self) -> str:
        return f"ShoppingItem({self.item!r}, {self.amount!r}, {self.unit!r}, notes={self.notes!r})"

    def to_dict(self):
        return {"item": self.item, "amount": self.amount, "unit": self.unit, "notes": self.notes}
