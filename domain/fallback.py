"""Recipes we can always hand out, shaped around the user's ingredients."""

from dataclasses import dataclass
from typing import Iterable

from domain.errors import InternalFault
from domain.models import FALLBACK_PREFIX, Recipe


@dataclass(frozen=True)
class RecipeTemplate:
    name: str
    ingredients: tuple[str, ...]
    instructions: tuple[str, ...]
    tags: tuple[str, ...] = ()


FALLBACK_TEMPLATES: tuple[RecipeTemplate, ...] = (
    RecipeTemplate(
        name="Garlic Ginger Stir-fry",
        ingredients=("garlic", "ginger", "soy sauce", "oil", "vegetables"),
        instructions=(
            "Heat oil in a wok or large pan",
            "Add minced garlic and ginger, stir-fry for 30 seconds",
            "Add vegetables and stir-fry until tender-crisp",
            "Season with soy sauce and serve hot",
        ),
        tags=("quick", "healthy", "asian"),
    ),
    RecipeTemplate(
        name="Simple Seasoned Dish",
        ingredients=("salt", "pepper", "herbs", "main ingredient"),
        instructions=(
            "Season ingredients with salt and pepper",
            "Add fresh herbs for flavor",
            "Cook until tender",
            "Adjust seasoning to taste",
        ),
        tags=("simple", "classic", "versatile"),
    ),
)


def headline(ingredients: list[str]) -> str:
    # Only the first character is touched: "bok choy" -> "Bok choy".
    first = ingredients[0] if ingredients else ""
    if not first.strip():
        return "Ingredient"
    return first[0].upper() + first[1:]


def merge_ingredients(ours: Iterable[str], theirs: Iterable[str]) -> list[str]:
    """Ours first, then theirs, keeping the first occurrence of each."""
    return list(dict.fromkeys([*ours, *theirs]))


def fallback_recipes(
    ingredients: list[str],
    templates: tuple[RecipeTemplate, ...] = FALLBACK_TEMPLATES,
) -> list[Recipe]:
    if not templates:
        raise InternalFault("No fallback templates configured.")
    name = headline(ingredients)
    return [
        Recipe(
            id=f"{FALLBACK_PREFIX}{i}",
            name=f"{name} Recipe {i}",
            ingredients=merge_ingredients(ingredients, template.ingredients),
            instructions=list(template.instructions),
            tags=list(template.tags),
            degraded=True,
        )
        for i, template in enumerate(templates, start=1)
    ]
