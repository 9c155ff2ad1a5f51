"""Recipe catalog services."""

import re
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from cookease.domain.recipes import FilterOptions, Recipe, RecipeFilter, RecipePage
from cookease.services.errors import RecipeNotFound, ValidationFailed

# Characters with meaning in PostgREST filter expressions.
_SEARCH_SYNTAX = re.compile(r"[,()]")


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes, newest first."""

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""

    def get_recipes(self, recipe_ids: list[UUID]) -> list[Recipe]:
        """Return the recipes that exist among ``recipe_ids`` in any order."""

    def filter_recipes(self, recipe_filter: RecipeFilter) -> list[Recipe]:
        """Return recipes matching the filter, best rated first."""

    def search_recipes(
        self, query: str, offset: int, limit: int
    ) -> tuple[list[Recipe], int]:
        """Return a page of recipes matching the query and the total count."""

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Create a recipe and return it."""

    def update_recipe(
        self, recipe_id: UUID, payload: dict[str, object]
    ) -> Recipe | None:
        """Update a recipe and return it, or None when it does not exist."""

    def delete_recipe(self, recipe_id: UUID) -> bool:
        """Delete a recipe; return False when it did not exist."""


def parse_recipe_id(raw: str | UUID) -> UUID:
    """Parse a recipe id, treating malformed ids as unknown recipes."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(raw)
    except ValueError as exc:
        raise RecipeNotFound() from exc


def order_by_ids(recipes: list[Recipe], recipe_ids: list[UUID]) -> list[Recipe]:
    """Order recipes as ``recipe_ids`` lists them, dropping unknown ids."""
    by_id = {recipe.id: recipe for recipe in recipes}
    return [by_id[recipe_id] for recipe_id in recipe_ids if recipe_id in by_id]


@dataclass
class RecipeService:
    """Application service for browsing and editing recipes."""

    repository: RecipeRepository

    def list_recipes(self) -> list[Recipe]:
        """Return the full catalog."""
        return self.repository.list_recipes()

    def get_recipe(self, recipe_id: str | UUID) -> Recipe:
        """Return a recipe or raise ``RecipeNotFound``."""
        recipe = self.repository.get_recipe(parse_recipe_id(recipe_id))
        if recipe is None:
            raise RecipeNotFound()
        return recipe

    def filter_options(self) -> FilterOptions:
        """Return sorted distinct countries, main ingredients and allergens."""
        recipes = self.repository.list_recipes()
        return FilterOptions(
            countries=sorted({recipe.country for recipe in recipes}),
            main_ingredients=sorted({recipe.main_ingredient for recipe in recipes}),
            allergens=sorted(
                {allergen for recipe in recipes for allergen in recipe.allergens}
            ),
        )

    def filter_recipes(self, recipe_filter: RecipeFilter) -> list[Recipe]:
        """Return recipes matching the filter."""
        return self.repository.filter_recipes(recipe_filter)

    def search(self, query: str | None, page: int = 1, limit: int = 10) -> RecipePage:
        """Search titles and descriptions, ignoring filter punctuation."""
        cleaned = _SEARCH_SYNTAX.sub(" ", query or "").strip()
        if not cleaned:
            raise ValidationFailed("Search query is required")
        page = max(page, 1)
        limit = max(limit, 1)
        items, total = self.repository.search_recipes(
            cleaned, offset=(page - 1) * limit, limit=limit
        )
        return RecipePage(items=items, total=total, page=page, limit=limit)

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Create a new recipe."""
        return self.repository.create_recipe(payload)

    def update_recipe(
        self, recipe_id: str | UUID, payload: dict[str, object]
    ) -> Recipe:
        """Update a recipe or raise ``RecipeNotFound``."""
        parsed_id = parse_recipe_id(recipe_id)
        if not payload:
            return self.get_recipe(parsed_id)
        updated = self.repository.update_recipe(parsed_id, payload)
        if updated is None:
            raise RecipeNotFound()
        return updated

    def delete_recipe(self, recipe_id: str | UUID) -> None:
        """Delete a recipe or raise ``RecipeNotFound``."""
        if not self.repository.delete_recipe(parse_recipe_id(recipe_id)):
            raise RecipeNotFound()
