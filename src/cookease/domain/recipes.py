"""Domain models for the recipe catalog."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class RecipeIngredient:
    """An ingredient line inside a recipe."""

    ref_id: str
    name: str
    quantity: str


@dataclass(frozen=True)
class Recipe:
    """A recipe from the catalog."""

    id: UUID
    title: str
    image: str
    description: str
    country: str
    main_ingredient: str
    cook_time: str
    rating: float
    instructions: str
    allergens: list[str] = field(default_factory=list)
    ingredients: list[RecipeIngredient] = field(default_factory=list)
    nutrition: dict[str, str] = field(default_factory=dict)
    created_at: datetime | None = None


@dataclass(frozen=True)
class RecipeFilter:
    """Catalog filter; allergens are excluded rather than matched."""

    countries: list[str] = field(default_factory=list)
    main_ingredients: list[str] = field(default_factory=list)
    excluded_allergens: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FilterOptions:
    """Distinct values available for filtering."""

    countries: list[str]
    main_ingredients: list[str]
    allergens: list[str]


@dataclass(frozen=True)
class RecipePage:
    """One page of search results."""

    items: list[Recipe]
    total: int
    page: int
    limit: int
