"""Shopping cart endpoints."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from cookease.api.deps import get_container, require_user
from cookease.api.schemas import AddToCartRequest, UpdateCartItemRequest
from cookease.api.serializers import cart_line_payload, cart_payload
from cookease.domain.users import UserRecord

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("")
def get_cart(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the cart with totals."""
    summary = get_container(request).cart_service.get_cart(user.id)
    return {"success": True, "data": cart_payload(summary)}


@router.post("/add")
def add_to_cart(
    body: AddToCartRequest, request: Request, user: UserRecord = Depends(require_user)
) -> JSONResponse:
    """Add an ingredient to the cart."""
    line = get_container(request).cart_service.add(
        user.id, body.ingredient_id, body.quantity, body.unit
    )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "success": True,
            "message": "Item added to cart successfully",
            "data": {"item": cart_line_payload(line)},
        },
    )


@router.put("/{ingredient_id}")
def update_cart_item(
    ingredient_id: str,
    body: UpdateCartItemRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Set the quantity of a cart line."""
    line = get_container(request).cart_service.update(
        user.id, ingredient_id, body.quantity
    )
    return {
        "success": True,
        "message": "Cart item updated successfully",
        "data": cart_line_payload(line),
    }


@router.delete("/{ingredient_id}")
def remove_from_cart(
    ingredient_id: str, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Remove a line from the cart."""
    get_container(request).cart_service.remove(user.id, ingredient_id)
    return {"success": True, "message": "Item removed from cart successfully"}


@router.delete("")
def clear_cart(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Remove every line from the cart."""
    get_container(request).cart_service.clear(user.id)
    return {"success": True, "message": "Cart cleared successfully"}
