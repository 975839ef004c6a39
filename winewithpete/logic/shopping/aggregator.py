"""Package shopping list aggregation.

Scales every recipe of a hydrated package to the requested serving size and
merges identical ingredients across recipes. Provides
aggregate_shopping_list(package, serving_size) and format_shopping_amount(amount).
"""
import logging
import math
from fractions import Fraction
from typing import Dict, List, Optional, Tuple

from winewithpete.domain.Package import Package, PackageRecipe
from winewithpete.domain.ShoppingList import ShoppingItem

logger = logging.getLogger(__name__)

NOTES_SEPARATOR = "; "


def _exact(value) -> Fraction:
    # Fraction(float) is exact, so float inputs keep their value; sums stay drift-free
    return Fraction(value)


def _finite(value) -> bool:
    return value is not None and math.isfinite(value)


def scale_factor(package_recipe: PackageRecipe, serving_size: int) -> Optional[Fraction]:
    """(serving_size / serves_base) * serves_factor, or None when the recipe can't be scaled."""
    recipe = package_recipe.recipe
    if recipe is None:
        return None
    if not recipe.serves_base or recipe.serves_base <= 0:
        logger.warning("Recipe %s has serves_base=%r; skipping", recipe.id, recipe.serves_base)
        return None
    if not _finite(package_recipe.serves_factor):
        logger.warning("Package recipe %s has serves_factor=%r; skipping", package_recipe.recipe_id,
                       package_recipe.serves_factor)
        return None
    return _exact(serving_size) / _exact(recipe.serves_base) * _exact(package_recipe.serves_factor)


def _merge_notes(existing: List[str], note: Optional[str]) -> None:
    if note and note not in existing:
        existing.append(note)


def aggregate_shopping_list(package: Package, serving_size: int) -> List[ShoppingItem]:
    """Build the consolidated shopping list for a package at a serving size.

    Args:
        package: Package whose recipes were hydrated by the repository.
        serving_size: Number of servings to shop for.

    Returns:
        ShoppingItem list, one per (item, unit) pair, sorted by item
        (case-sensitive). Entries whose recipe did not hydrate, or recipes
        without ingredients, contribute nothing.
    """
    if not package or not package.recipes:
        return []

    totals: Dict[Tuple[str, str], Fraction] = {}
    notes: Dict[Tuple[str, str], List[str]] = {}

    for package_recipe in package.recipes:
        factor = scale_factor(package_recipe, serving_size)
        if factor is None:
            continue
        for ing in package_recipe.recipe.ingredients or []:
            if ing.amount is not None and not _finite(ing.amount):
                logger.warning("Recipe %s lists %s with amount=%r; skipping", package_recipe.recipe.id,
                               ing.item, ing.amount)
                continue
            key = (ing.item, ing.unit)
            scaled = _exact(ing.amount or 0) * factor
            if key in totals:
                totals[key] += scaled
            else:
                totals[key] = scaled
                notes[key] = []
            _merge_notes(notes[key], ing.notes)

    items = [
        ShoppingItem(item=item, amount=float(amount), unit=unit,
                     notes=NOTES_SEPARATOR.join(notes[(item, unit)]) or None)
        for (item, unit), amount in totals.items()
    ]
    items.sort(key=lambda x: x.item)
    return items


def format_shopping_amount(amount: float) -> str:
    """Render an amount for display: '3', '2.5', '0.33'."""
    if float(amount).is_integer():
        return str(int(amount))
    if amount < 1:
        return f"{amount:.2f}".rstrip('0').rstrip('.')
    text = f"{amount:.1f}"
    return text[:-2] if text.endswith('.0') else text


__all__ = ['aggregate_shopping_list', 'format_shopping_amount', 'scale_factor']
