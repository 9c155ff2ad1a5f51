"""Supabase implementation for ingredients."""

from dataclasses import dataclass

from supabase import Client

from cookease.domain.ingredients import Ingredient
from cookease.services.ingredients import IngredientRepository


@dataclass
class SupabaseIngredientRepository(IngredientRepository):
    """Supabase-backed repository for ingredients."""

    client: Client

    def list_ingredients(self) -> list[Ingredient]:
        """Return all ingredients ordered by name."""
        response = self.client.table("ingredients").select("*").order("name").execute()
        return [_parse_ingredient(row) for row in response.data or []]

    def get_ingredient(self, ingredient_id: str) -> Ingredient | None:
        """Return an ingredient by its catalog id, if present."""
        response = (
            self.client.table("ingredients")
            .select("*")
            .eq("id", ingredient_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_ingredient(response.data[0])


def _parse_ingredient(row: dict[str, object]) -> Ingredient:
    return Ingredient(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        price=float(row.get("price") or 0.0),
        unit=str(row.get("unit", "")),
        sell=bool(row.get("sell", False)),
        description=str(row.get("description", "")),
        image=str(row.get("image") or ""),
        url={str(k): str(v) for k, v in (row.get("url") or {}).items() if v},
        nutrition={str(k): str(v) for k, v in (row.get("nutrition") or {}).items()},
        additional_info=str(row.get("additional_info") or ""),
    )
