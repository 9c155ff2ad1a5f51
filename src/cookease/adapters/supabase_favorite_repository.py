"""Supabase implementation for favorite recipes."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from cookease.services.favorites import FavoriteRepository


@dataclass
class SupabaseFavoriteRepository(FavoriteRepository):
    """Favorite set stored as one row per (user, recipe) pair."""

    client: Client

    def add_favorite(self, user_id: UUID, recipe_id: UUID) -> None:
        """Insert the pair unless it already exists."""
        self.client.table("favorite_recipes").upsert(
            {"user_id": str(user_id), "recipe_id": str(recipe_id)},
            on_conflict="user_id,recipe_id",
            ignore_duplicates=True,
        ).execute()

    def remove_favorite(self, user_id: UUID, recipe_id: UUID) -> bool:
        """Delete the pair and report whether a row was removed."""
        response = (
            self.client.table("favorite_recipes")
            .delete()
            .eq("user_id", str(user_id))
            .eq("recipe_id", str(recipe_id))
            .execute()
        )
        return bool(response.data)

    def list_favorite_ids(self, user_id: UUID) -> list[UUID]:
        """Return favorite recipe ids, oldest first."""
        response = (
            self.client.table("favorite_recipes")
            .select("recipe_id")
            .eq("user_id", str(user_id))
            .order("created_at")
            .execute()
        )
        return [UUID(str(row["recipe_id"])) for row in response.data or []]
