import dataclasses

import pytest

from domain.errors import InternalFault
from domain.fallback import (
    FALLBACK_TEMPLATES,
    RecipeTemplate,
    fallback_recipes,
    headline,
    merge_ingredients,
)


def test_fallback_recipes() -> None:
    got = fallback_recipes(["chicken", "garlic"])

    assert [r.id for r in got] == ["fallback-1", "fallback-2"]
    assert [r.name for r in got] == ["Chicken Recipe 1", "Chicken Recipe 2"]
    assert got[0].ingredients == [
        "chicken",
        "garlic",
        "ginger",
        "soy sauce",
        "oil",
        "vegetables",
    ]
    assert got[1].ingredients == [
        "chicken",
        "garlic",
        "salt",
        "pepper",
        "herbs",
        "main ingredient",
    ]
    assert got[0].tags == ["quick", "healthy", "asian"]
    assert all(r.degraded and r.is_well_formed for r in got)


@pytest.mark.parametrize(
    "ingredients",
    (
        ["tofu"],
        ["salt", "salt", "pepper"],
        ["Garlic", "garlic", "oil"],
        [],
    ),
)
def test_fallback_ingredients_are_a_superset_without_duplicates(
    ingredients: list[str],
) -> None:
    for recipe in fallback_recipes(ingredients):
        assert set(ingredients) <= set(recipe.ingredients)
        assert len(recipe.ingredients) == len(set(recipe.ingredients))
        assert recipe.ingredients[: len(set(ingredients))] == list(
            dict.fromkeys(ingredients)
        )


def test_match_is_case_sensitive() -> None:
    got = fallback_recipes(["Garlic"])
    assert got[0].ingredients[:2] == ["Garlic", "garlic"]


@pytest.mark.parametrize(
    "ingredients,expected",
    (
        (["bok choy"], "Bok choy"),
        (["ABC"], "ABC"),
        (["éclair"], "Éclair"),
        ([], "Ingredient"),
        ([""], "Ingredient"),
        (["  "], "Ingredient"),
    ),
)
def test_headline(ingredients: list[str], expected: str) -> None:
    assert headline(ingredients) == expected


def test_merge_ingredients_keeps_first_occurrence() -> None:
    assert merge_ingredients(["b", "a", "b"], ("a", "c")) == ["b", "a", "c"]


def test_custom_templates() -> None:
    template = RecipeTemplate(
        name="Toast",
        ingredients=("bread", "butter"),
        instructions=("Toast the bread", "Butter it"),
    )
    got = fallback_recipes(["bread"], (template,))
    assert len(got) == 1
    assert got[0].ingredients == ["bread", "butter"]
    assert got[0].tags == []


def test_no_templates() -> None:
    with pytest.raises(InternalFault):
        fallback_recipes(["bread"], ())


def test_templates_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        FALLBACK_TEMPLATES[0].name = "Something else"  # type: ignore[misc]
