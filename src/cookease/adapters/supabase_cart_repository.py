"""Supabase implementation for shopping cart lines."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from cookease.adapters._rows import parse_timestamp
from cookease.domain.cart import CartLine
from cookease.services.cart import CartRepository


@dataclass
class SupabaseCartRepository(CartRepository):
    """Cart lines stored one row per (user, ingredient)."""

    client: Client

    def list_lines(self, user_id: UUID) -> list[CartLine]:
        """Return cart lines in the order they were added."""
        response = (
            self.client.table("cart_items")
            .select("*")
            .eq("user_id", str(user_id))
            .order("added_at")
            .execute()
        )
        return [_parse_line(row) for row in response.data or []]

    def add_line(self, user_id: UUID, line: CartLine) -> CartLine:
        """Insert or increment the line in a single statement."""
        response = self.client.rpc(
            "add_cart_item",
            {
                "p_user_id": str(user_id),
                "p_ingredient_id": line.ingredient_id,
                "p_name": line.name,
                "p_unit": line.unit,
                "p_price": line.price,
                "p_image": line.image,
                "p_quantity": line.quantity,
            },
        ).execute()
        rows = response.data
        if isinstance(rows, dict):
            rows = [rows]
        if not rows:
            raise RuntimeError("Failed to add cart item")
        return _parse_line(rows[0])

    def set_quantity(
        self, user_id: UUID, ingredient_id: str, quantity: int
    ) -> CartLine | None:
        """Overwrite the quantity of an existing line."""
        response = (
            self.client.table("cart_items")
            .update({"quantity": quantity})
            .eq("user_id", str(user_id))
            .eq("ingredient_id", ingredient_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_line(response.data[0])

    def remove_line(self, user_id: UUID, ingredient_id: str) -> bool:
        """Delete a line and report whether it existed."""
        response = (
            self.client.table("cart_items")
            .delete()
            .eq("user_id", str(user_id))
            .eq("ingredient_id", ingredient_id)
            .execute()
        )
        return bool(response.data)

    def clear(self, user_id: UUID) -> None:
        """Delete every line for the user."""
        self.client.table("cart_items").delete().eq("user_id", str(user_id)).execute()


def _parse_line(row: dict[str, object]) -> CartLine:
    """Parse a cart_items row into a domain model."""
    return CartLine(
        ingredient_id=str(row["ingredient_id"]),
        name=str(row.get("name", "")),
        unit=str(row.get("unit", "")),
        price=float(row.get("price") or 0.0),
        quantity=int(row.get("quantity", 1)),
        image=str(row.get("image") or ""),
        added_at=parse_timestamp(row.get("added_at")),
    )
