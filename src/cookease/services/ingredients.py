"""Ingredient catalog service."""

from dataclasses import dataclass
from typing import Protocol

from cookease.domain.ingredients import Ingredient
from cookease.services.errors import IngredientNotFound


class IngredientRepository(Protocol):
    """Persistence interface for ingredients."""

    def list_ingredients(self) -> list[Ingredient]:
        """Return all ingredients."""

    def get_ingredient(self, ingredient_id: str) -> Ingredient | None:
        """Return an ingredient by id, if present."""


@dataclass
class IngredientService:
    """Application service for ingredient lookups."""

    repository: IngredientRepository

    def list_ingredients(self) -> list[Ingredient]:
        """Return every ingredient in the shop."""
        return self.repository.list_ingredients()

    def get_ingredient(self, ingredient_id: str) -> Ingredient:
        """Return an ingredient or raise ``IngredientNotFound``."""
        ingredient = self.repository.get_ingredient(ingredient_id)
        if ingredient is None:
            raise IngredientNotFound()
        return ingredient
