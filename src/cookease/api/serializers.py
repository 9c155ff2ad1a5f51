"""JSON representations of domain objects."""

from cookease.domain.cart import CartLine, CartSummary
from cookease.domain.ingredients import Ingredient
from cookease.domain.recipes import Recipe
from cookease.domain.users import UserRecord


def user_payload(user: UserRecord) -> dict[str, object]:
    """Serialize a user without any credential material."""
    return {
        "id": str(user.id),
        "username": user.username,
        "email": user.email,
        "authMethods": [str(method) for method in user.auth_methods],
        "createdAt": user.created_at.isoformat() if user.created_at else None,
    }


def recipe_payload(recipe: Recipe) -> dict[str, object]:
    return {
        "id": str(recipe.id),
        "title": recipe.title,
        "image": recipe.image,
        "description": recipe.description,
        "country": recipe.country,
        "mainIngredient": recipe.main_ingredient,
        "allergens": recipe.allergens,
        "cookTime": recipe.cook_time,
        "rating": recipe.rating,
        "ingredients": [
            {"id": item.ref_id, "name": item.name, "quantity": item.quantity}
            for item in recipe.ingredients
        ],
        "instructions": recipe.instructions,
        "nutrition": recipe.nutrition,
        "createdAt": recipe.created_at.isoformat() if recipe.created_at else None,
    }


def ingredient_payload(ingredient: Ingredient) -> dict[str, object]:
    return {
        "id": ingredient.id,
        "name": ingredient.name,
        "price": ingredient.price,
        "unit": ingredient.unit,
        "image": ingredient.image,
        "sell": ingredient.sell,
        "url": ingredient.url,
        "description": ingredient.description,
        "nutrition": ingredient.nutrition,
        "additionalInfo": ingredient.additional_info,
    }


def cart_line_payload(line: CartLine) -> dict[str, object]:
    return {
        "ingredientId": line.ingredient_id,
        "name": line.name,
        "unit": line.unit,
        "price": line.price,
        "quantity": line.quantity,
        "image": line.image,
        "addedAt": line.added_at.isoformat() if line.added_at else None,
    }


def cart_payload(summary: CartSummary) -> dict[str, object]:
    return {
        "items": [cart_line_payload(line) for line in summary.items],
        "totalItems": summary.total_items,
        "totalPrice": float(summary.total_price),
    }
