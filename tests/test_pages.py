import pytest

from app.html.pages import RecipeCard
from domain.models import Recipe


def recipe() -> Recipe:
    return Recipe(
        id="1",
        name="Omelette",
        ingredients=["egg", "butter", "salt", "chives"],
        instructions=["Whisk", "Cook"],
    )


@pytest.mark.parametrize(
    "index,cook_time,servings,difficulty",
    (
        (0, "20 mins", 4, "Easy"),
        (1, "30 mins", 5, "Medium"),
        (2, "40 mins", 6, "Hard"),
        (3, "50 mins", 7, "Easy"),
    ),
)
def test_recipe_card(
    index: int, cook_time: str, servings: int, difficulty: str
) -> None:
    card = RecipeCard(recipe(), index)
    assert card.cook_time == cook_time
    assert card.servings == servings
    assert card.difficulty == difficulty


def test_recipe_card_description() -> None:
    card = RecipeCard(recipe(), 0)
    assert card.description == (
        "A delicious recipe featuring egg, butter, salt and more."
    )
    assert card.name == "Omelette"
    assert card.id == "1"
