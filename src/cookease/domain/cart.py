"""Domain models for the shopping cart."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class CartLine:
    """One ingredient in a user's cart.

    ``name``, ``price`` and ``image`` are copied from the ingredient when the
    line is first added and are not refreshed afterwards.
    """

    ingredient_id: str
    name: str
    unit: str
    price: float
    quantity: int
    image: str
    added_at: datetime | None = None


@dataclass(frozen=True)
class CartSummary:
    """Cart lines with computed totals."""

    items: list[CartLine]
    total_items: int
    total_price: Decimal
