from typing import Any

from jinja2 import Environment

from domain.models import IngredientList, Recipe


DIFFICULTIES = ("Easy", "Medium", "Hard")


class RecipeCard:
    """Display extras for a recipe, made up from its place in the grid."""

    def __init__(self, recipe: Recipe, index: int) -> None:
        self.recipe = recipe
        self.index = index

    def __getattr__(self, name: str) -> Any:
        return getattr(self.recipe, name)

    @property
    def description(self) -> str:
        featured = ", ".join(self.recipe.ingredients[:3])
        return f"A delicious recipe featuring {featured} and more."

    @property
    def cook_time(self) -> str:
        return f"{20 + self.index * 10} mins"

    @property
    def servings(self) -> int:
        return 4 + self.index

    @property
    def difficulty(self) -> str:
        return DIFFICULTIES[self.index % 3]


class RecipeBuilder:
    def __init__(
        self,
        ingredients: IngredientList,
        recipes: list[Recipe] | None = None,
        *,
        environment: Environment,
        template_name: str = "index.html",
    ) -> None:
        self.ingredients = ingredients
        self.recipes = [] if recipes is None else recipes
        self.env = environment
        self.name = template_name

    @property
    def cards(self) -> list[RecipeCard]:
        return [RecipeCard(r, i) for i, r in enumerate(self.recipes)]

    @property
    def degraded(self) -> bool:
        return any(r.degraded for r in self.recipes)

    def render(self) -> str:
        return self.env.get_template(self.name).render(page=self)


class Placeholder:
    def __init__(
        self,
        title: str,
        description: str,
        *,
        environment: Environment,
        template_name: str = "placeholder.html",
    ) -> None:
        self.title = title
        self.description = description
        self.env = environment
        self.name = template_name

    def render(self) -> str:
        return self.env.get_template(self.name).render(page=self)
