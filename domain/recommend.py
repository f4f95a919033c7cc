import logging
from typing import Any

import httpx

from domain.errors import UpstreamUnavailable, ValidationError
from domain.fallback import FALLBACK_TEMPLATES, RecipeTemplate, fallback_recipes
from domain.models import Recipe
from domain.remote import RemoteEndpoint, json_body, post_json, remote_client_factory
from domain.tagged import (
    INGREDIENT_SEPARATOR,
    INSTRUCTION_SEPARATOR,
    TAG_SEPARATOR,
    as_sequence,
    as_text,
)


logger = logging.getLogger(__name__)


# Some deployments return the raw scan result rather than a bare list.
WRAPPER_KEYS = ("Items", "recipes")


def parse_ingredients(body: Any) -> list[str]:
    if not isinstance(body, dict):
        raise ValidationError("Expected a JSON object.")
    ingredients = body.get("ingredients")
    if not isinstance(ingredients, list):
        raise ValidationError("Invalid ingredients array")
    if not all(isinstance(i, str) for i in ingredients):
        raise ValidationError("Ingredients must be strings.")
    return ingredients


def normalize_record(record: dict[str, Any], index: int) -> Recipe:
    name = as_text(record.get("name")) or as_text(record.get("title"))
    return Recipe(
        id=as_text(record.get("id")) or f"recipe-{index + 1}",
        name=name or f"Recipe {index + 1}",
        ingredients=as_sequence(record.get("ingredients"), INGREDIENT_SEPARATOR),
        instructions=as_sequence(record.get("instructions"), INSTRUCTION_SEPARATOR),
        tags=as_sequence(record.get("tags"), TAG_SEPARATOR),
    )


def unique_id(id: str, seen: set[str]) -> str:
    candidate, n = id, 2
    while candidate in seen:
        candidate = f"{id}-{n}"
        n += 1
    seen.add(candidate)
    return candidate


def normalize_records(data: Any) -> list[Recipe]:
    if isinstance(data, dict):
        for key in WRAPPER_KEYS:
            if isinstance(data.get(key), list):
                data = data[key]
                break
    if not isinstance(data, list):
        raise UpstreamUnavailable(
            f"Expected a list of recipes, got {type(data).__name__}"
        )

    recipes: list[Recipe] = []
    seen: set[str] = set()
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise UpstreamUnavailable(f"Record {index} is not an object.")
        recipe = normalize_record(record, index)
        if not recipe.is_well_formed:
            logger.warning("Dropping incomplete recipe %r from upstream", recipe)
            continue
        recipe.id = unique_id(recipe.id, seen)
        recipes.append(recipe)

    if not recipes:
        raise UpstreamUnavailable("No usable recipes in upstream response.")
    return recipes


class RecommendationService:
    def __init__(
        self,
        endpoint: RemoteEndpoint,
        *,
        http_client: httpx.AsyncClient | None = None,
        templates: tuple[RecipeTemplate, ...] = FALLBACK_TEMPLATES,
    ) -> None:
        self.endpoint = endpoint
        self.http_client = (
            remote_client_factory(endpoint.timeout)
            if http_client is None
            else http_client
        )
        self.templates = templates

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def fetch(self, ingredients: list[str]) -> list[Recipe]:
        resp = await post_json(
            self.http_client, self.endpoint, {"ingredients": ingredients}
        )
        return normalize_records(json_body(resp))

    async def recommend(self, ingredients: list[str]) -> list[Recipe]:
        logger.info("Requesting recipes for %s", ingredients)
        try:
            recipes = await self.fetch(ingredients)
        except UpstreamUnavailable as e:
            logger.warning("Recommendation service unavailable, using fallback: %s", e)
            return fallback_recipes(ingredients, self.templates)
        logger.info("Got %d recipes from upstream", len(recipes))
        return recipes
