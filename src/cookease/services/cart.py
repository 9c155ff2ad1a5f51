"""Shopping cart service."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol
from uuid import UUID

from cookease.domain.cart import CartLine, CartSummary
from cookease.services.errors import (
    IngredientNotFound,
    ItemNotInCart,
    ValidationFailed,
)
from cookease.services.ingredients import IngredientRepository

_CENT = Decimal("0.01")


class CartRepository(Protocol):
    """Persistence interface for cart lines."""

    def list_lines(self, user_id: UUID) -> list[CartLine]:
        """Return the user's cart lines in the order they were added."""

    def add_line(self, user_id: UUID, line: CartLine) -> CartLine:
        """Insert the line, or add its quantity to an existing one.

        An existing line keeps its snapshot fields. Returns the stored line.
        """

    def set_quantity(
        self, user_id: UUID, ingredient_id: str, quantity: int
    ) -> CartLine | None:
        """Overwrite a line's quantity; return None when there is no line."""

    def remove_line(self, user_id: UUID, ingredient_id: str) -> bool:
        """Delete a line; return False when there was none."""

    def clear(self, user_id: UUID) -> None:
        """Delete all lines for the user."""


@dataclass
class CartService:
    """Application service for cart operations."""

    repository: CartRepository
    ingredient_repository: IngredientRepository

    def get_cart(self, user_id: UUID) -> CartSummary:
        """Return the cart with item count and price totals."""
        lines = self.repository.list_lines(user_id)
        return CartSummary(
            items=lines,
            total_items=sum(line.quantity for line in lines),
            total_price=cart_total(lines),
        )

    def add(
        self, user_id: UUID, ingredient_id: str, quantity: int, unit: str
    ) -> CartLine:
        """Add an ingredient, merging with an existing line for it."""
        if not ingredient_id or not unit or quantity is None:
            raise ValidationFailed("Ingredient ID, quantity, and unit are required")
        _check_quantity(quantity)
        ingredient = self.ingredient_repository.get_ingredient(ingredient_id)
        if ingredient is None:
            raise IngredientNotFound()
        return self.repository.add_line(
            user_id,
            CartLine(
                ingredient_id=ingredient.id,
                name=ingredient.name,
                unit=unit,
                price=ingredient.price,
                quantity=quantity,
                image=ingredient.image,
            ),
        )

    def update(self, user_id: UUID, ingredient_id: str, quantity: int) -> CartLine:
        """Set the absolute quantity of an existing line."""
        _check_quantity(quantity)
        line = self.repository.set_quantity(user_id, ingredient_id, quantity)
        if line is None:
            raise ItemNotInCart()
        return line

    def remove(self, user_id: UUID, ingredient_id: str) -> None:
        """Remove a line from the cart."""
        if not self.repository.remove_line(user_id, ingredient_id):
            raise ItemNotInCart()

    def clear(self, user_id: UUID) -> None:
        """Empty the cart."""
        self.repository.clear(user_id)


def cart_total(lines: list[CartLine]) -> Decimal:
    """Sum price times quantity, rounded half-up to cents."""
    total = sum(
        (Decimal(str(line.price)) * line.quantity for line in lines), Decimal("0")
    )
    return total.quantize(_CENT, rounding=ROUND_HALF_UP)


def _check_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationFailed("Quantity must be at least 1")
