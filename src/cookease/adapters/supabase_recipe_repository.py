"""Supabase implementation for the recipe catalog."""

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from cookease.adapters._rows import parse_timestamp
from cookease.domain.recipes import Recipe, RecipeFilter, RecipeIngredient
from cookease.services.recipes import RecipeRepository

# Characters with meaning inside a PostgREST or_() expression.
_FILTER_SYNTAX = re.compile(r"[,()]")


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for recipes."""

    client: Client

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes, newest first."""
        response = (
            self.client.table("recipes")
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_recipe(row) for row in response.data or []]

    def get_recipe(self, recipe_id: UUID) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("id", str(recipe_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def get_recipes(self, recipe_ids: list[UUID]) -> list[Recipe]:
        """Return existing recipes among the ids."""
        if not recipe_ids:
            return []
        response = (
            self.client.table("recipes")
            .select("*")
            .in_("id", [str(recipe_id) for recipe_id in recipe_ids])
            .execute()
        )
        return [_parse_recipe(row) for row in response.data or []]

    def filter_recipes(self, recipe_filter: RecipeFilter) -> list[Recipe]:
        """Return recipes matching the filter, best rated then newest first."""
        query = self.client.table("recipes").select("*")
        if recipe_filter.countries:
            query = query.in_("country", recipe_filter.countries)
        if recipe_filter.main_ingredients:
            query = query.in_("main_ingredient", recipe_filter.main_ingredients)
        if recipe_filter.excluded_allergens:
            query = query.not_.overlaps(
                "allergens", recipe_filter.excluded_allergens
            )
        response = (
            query.order("rating", desc=True).order("created_at", desc=True).execute()
        )
        return [_parse_recipe(row) for row in response.data or []]

    def search_recipes(
        self, query: str, offset: int, limit: int
    ) -> tuple[list[Recipe], int]:
        """Case-insensitive search on title and description."""
        pattern = f"%{_FILTER_SYNTAX.sub(' ', query).strip()}%"
        response = (
            self.client.table("recipes")
            .select("*", count="exact")
            .or_(f"title.ilike.{pattern},description.ilike.{pattern}")
            .order("rating", desc=True)
            .range(offset, offset + limit - 1)
            .execute()
        )
        items = [_parse_recipe(row) for row in response.data or []]
        total = response.count if response.count is not None else len(items)
        return items, total

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Create a recipe and return it."""
        response = self.client.table("recipes").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return _parse_recipe(response.data[0])

    def update_recipe(
        self, recipe_id: UUID, payload: dict[str, object]
    ) -> Recipe | None:
        """Update a recipe and return it, if it exists."""
        response = (
            self.client.table("recipes")
            .update({**payload, "updated_at": datetime.now(tz=UTC).isoformat()})
            .eq("id", str(recipe_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def delete_recipe(self, recipe_id: UUID) -> bool:
        """Delete a recipe; favorites referencing it simply stop resolving."""
        response = (
            self.client.table("recipes").delete().eq("id", str(recipe_id)).execute()
        )
        return bool(response.data)


def _parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipes row into a domain model."""
    ingredients = [
        RecipeIngredient(
            ref_id=str(item.get("id", "")),
            name=str(item.get("name", "")),
            quantity=str(item.get("quantity", "")),
        )
        for item in row.get("ingredients") or []
    ]
    nutrition = {
        str(key): str(value) for key, value in (row.get("nutrition") or {}).items()
    }
    return Recipe(
        id=UUID(str(row["id"])),
        title=str(row.get("title", "")),
        image=str(row.get("image") or ""),
        description=str(row.get("description", "")),
        country=str(row.get("country", "")),
        main_ingredient=str(row.get("main_ingredient", "")),
        cook_time=str(row.get("cook_time", "")),
        rating=float(row.get("rating") or 0.0),
        instructions=str(row.get("instructions", "")),
        allergens=[str(item) for item in row.get("allergens") or []],
        ingredients=ingredients,
        nutrition=nutrition,
        created_at=parse_timestamp(row.get("created_at")),
    )
