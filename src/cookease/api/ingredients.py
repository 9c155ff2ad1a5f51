"""Ingredient catalog endpoints."""

from fastapi import APIRouter, Request

from cookease.api.deps import get_container
from cookease.api.serializers import ingredient_payload

router = APIRouter(prefix="/ingredients", tags=["ingredients"])


@router.get("")
def list_ingredients(request: Request) -> list[dict[str, object]]:
    """Return all ingredients."""
    ingredients = get_container(request).ingredient_service.list_ingredients()
    return [ingredient_payload(ingredient) for ingredient in ingredients]


@router.get("/{ingredient_id}")
def get_ingredient(ingredient_id: str, request: Request) -> dict[str, object]:
    """Return one ingredient by its catalog id."""
    ingredient = get_container(request).ingredient_service.get_ingredient(
        ingredient_id
    )
    return ingredient_payload(ingredient)
