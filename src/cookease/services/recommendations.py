"""AI recipe recommendations."""

import asyncio
import json
import logging
import re
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from cookease.domain.recipes import Recipe
from cookease.services.errors import (
    RecommendationParseError,
    RecommendationUnavailable,
    UserNotFound,
)
from cookease.services.favorites import FavoritesService
from cookease.services.recipes import RecipeRepository
from cookease.services.users import UserRepository

logger = logging.getLogger(__name__)

RECOMMENDATION_COUNT = 3

_ARRAY_PATTERN = re.compile(r"\[(.*?)\]", re.DOTALL)
_FENCED_PATTERN = re.compile(r"```json\s*([\s\S]*?)\s*```")


class TextGenerator(Protocol):
    """Interface for an opaque text-completion capability."""

    async def generate(self, prompt: str) -> str:
        """Return free-form text for the prompt."""


@dataclass(frozen=True)
class Recommendations:
    """Recommended recipes in the order the generator ranked them."""

    recipes: list[Recipe]
    based_on_favorites: bool


@dataclass
class RecommendationService:
    """Builds a prompt from the catalog and resolves the generator's picks."""

    generator: TextGenerator
    recipe_repository: RecipeRepository
    user_repository: UserRepository
    favorites_service: FavoritesService
    timeout_seconds: float = 30.0

    async def recommend(self, user_id: UUID | None = None) -> Recommendations:
        """Return up to three recommended recipes.

        Ids the generator invents are dropped, so fewer than three recipes may
        come back.
        """
        catalog = self.recipe_repository.list_recipes()
        favorites: list[Recipe] = []
        if user_id is not None:
            if self.user_repository.get_by_id(user_id) is None:
                raise UserNotFound()
            favorites = self.favorites_service.list_favorites(user_id)

        prompt = build_prompt(favorites, catalog)
        try:
            output = await asyncio.wait_for(
                self.generator.generate(prompt), timeout=self.timeout_seconds
            )
        except TimeoutError as exc:
            logger.warning("Recommendation generator timed out")
            raise RecommendationUnavailable() from exc
        except Exception as exc:
            logger.exception("Recommendation generator failed")
            raise RecommendationUnavailable() from exc

        recipe_ids = parse_recipe_ids(output)
        by_id = {str(recipe.id): recipe for recipe in catalog}
        resolved = [by_id[raw] for raw in recipe_ids if raw in by_id]
        return Recommendations(recipes=resolved, based_on_favorites=bool(favorites))


def parse_recipe_ids(text: str) -> list[str]:
    """Extract a JSON array of id strings from generator output.

    Tried in order: the first bracketed array, a ```json fenced block, then the
    whole trimmed text. The first candidate that parses wins.
    """
    candidates: list[str] = []
    array_match = _ARRAY_PATTERN.search(text)
    if array_match:
        candidates.append(f"[{array_match.group(1)}]")
    fenced_match = _FENCED_PATTERN.search(text)
    if fenced_match:
        candidates.append(fenced_match.group(1))
    candidates.append(text.strip())

    for candidate in candidates:
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return [item.strip() for item in value]
    logger.warning("Could not parse recommendation output")
    raise RecommendationParseError()


def build_prompt(favorites: list[Recipe], catalog: list[Recipe]) -> str:
    """Build the generator prompt for personalised or cold-start picks."""
    if favorites:
        favorite_info = [
            {
                "title": recipe.title,
                "country": recipe.country,
                "mainIngredient": recipe.main_ingredient,
                "allergens": recipe.allergens,
            }
            for recipe in favorites
        ]
        favorite_ids = [str(recipe.id) for recipe in favorites]
        database = [_catalog_entry(recipe, with_rating=False) for recipe in catalog]
        return (
            "You are a professional chef AI assistant. Based on the user's "
            f"favorite recipes, recommend {RECOMMENDATION_COUNT} similar recipes "
            "from the available recipe database.\n\n"
            "### User's Favorite Recipes:\n"
            f"{json.dumps(favorite_info, indent=2, ensure_ascii=False)}\n\n"
            "### Available Recipes Database:\n"
            f"{json.dumps(database, indent=2, ensure_ascii=False)}\n\n"
            "### Task:\n"
            "Analyze the user's preferences (cuisine types, ingredients, flavors) "
            f"and recommend {RECOMMENDATION_COUNT} recipes from the database that "
            "match their taste profile.\n\n"
            "### Requirements:\n"
            "- Consider cuisine type, main ingredients, and flavor profiles\n"
            "- Do not recommend these already favorited ids: "
            f"{json.dumps(favorite_ids)}\n"
            f"{_RESPONSE_FORMAT}"
        )

    database = [_catalog_entry(recipe, with_rating=True) for recipe in catalog]
    return (
        f"You are a professional chef AI assistant. Recommend {RECOMMENDATION_COUNT} "
        "diverse and popular recipes from the available recipe database for a new "
        "user.\n\n"
        "### Available Recipes Database:\n"
        f"{json.dumps(database, indent=2, ensure_ascii=False)}\n\n"
        "### Task:\n"
        f"Select {RECOMMENDATION_COUNT} highly rated recipes that represent "
        "different cuisines and cooking styles.\n\n"
        "### Requirements:\n"
        "- Select recipes from different countries if possible\n"
        "- Choose recipes with different main ingredients\n"
        "- Prefer recipes with good ratings\n"
        f"{_RESPONSE_FORMAT}"
    )


_RESPONSE_FORMAT = (
    "- Return ONLY a JSON array of recipe ids, no additional text, e.g.\n"
    '["recipe_id_1", "recipe_id_2", "recipe_id_3"]\n'
)


def _catalog_entry(recipe: Recipe, *, with_rating: bool) -> dict[str, object]:
    entry: dict[str, object] = {
        "id": str(recipe.id),
        "title": recipe.title,
        "country": recipe.country,
        "mainIngredient": recipe.main_ingredient,
        "allergens": recipe.allergens,
        "description": recipe.description,
    }
    if with_rating:
        entry["rating"] = recipe.rating
    return entry
