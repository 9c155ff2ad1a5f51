"""Favorite recipe toggling."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from cookease.domain.recipes import Recipe
from cookease.services.errors import RecipeNotFound, UserNotFound
from cookease.services.recipes import RecipeRepository, order_by_ids, parse_recipe_id
from cookease.services.users import UserRepository


class FavoriteRepository(Protocol):
    """Persistence interface for a user's favorite set."""

    def add_favorite(self, user_id: UUID, recipe_id: UUID) -> None:
        """Add the recipe to the set; adding an existing member is a no-op."""

    def remove_favorite(self, user_id: UUID, recipe_id: UUID) -> bool:
        """Remove the recipe from the set; return True if it was a member."""

    def list_favorite_ids(self, user_id: UUID) -> list[UUID]:
        """Return favorite recipe ids in the order they were added."""


@dataclass(frozen=True)
class FavoriteToggle:
    """Outcome of a favorite toggle."""

    is_favorited: bool
    favorite_ids: list[UUID]


@dataclass
class FavoritesService:
    """Application service for favorite recipes."""

    repository: FavoriteRepository
    recipe_repository: RecipeRepository
    user_repository: UserRepository

    def toggle(self, user_id: UUID, recipe_id: str | UUID) -> FavoriteToggle:
        """Flip membership of a recipe in the user's favorite set.

        Removal is attempted first; if nothing was removed the recipe is added.
        Both steps are single set operations in storage, so repeated or
        concurrent toggles never leave a duplicate.
        """
        parsed_id = parse_recipe_id(recipe_id)
        if self.recipe_repository.get_recipe(parsed_id) is None:
            raise RecipeNotFound()
        if self.user_repository.get_by_id(user_id) is None:
            raise UserNotFound()

        removed = self.repository.remove_favorite(user_id, parsed_id)
        if not removed:
            self.repository.add_favorite(user_id, parsed_id)
        return FavoriteToggle(
            is_favorited=not removed,
            favorite_ids=self.repository.list_favorite_ids(user_id),
        )

    def list_favorites(self, user_id: UUID) -> list[Recipe]:
        """Return favorite recipes, skipping any that were deleted."""
        favorite_ids = self.repository.list_favorite_ids(user_id)
        if not favorite_ids:
            return []
        recipes = self.recipe_repository.get_recipes(favorite_ids)
        return order_by_ids(recipes, favorite_ids)
