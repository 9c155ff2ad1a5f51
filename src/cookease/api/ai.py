"""AI recommendation endpoints."""

from fastapi import APIRouter, Depends, Request

from cookease.api.deps import get_container, optional_user
from cookease.api.serializers import recipe_payload
from cookease.domain.users import UserRecord

router = APIRouter(prefix="/ai", tags=["ai"])


@router.get("/recommendations")
async def recommendations(
    request: Request, user: UserRecord | None = Depends(optional_user)
) -> dict[str, object]:
    """Recommend recipes; signed-in users get picks based on their favorites."""
    result = await get_container(request).recommendation_service.recommend(
        user.id if user else None
    )
    message = (
        "AI recommendations based on your favorites"
        if result.based_on_favorites
        else "AI recommendations for new user"
    )
    return {
        "success": True,
        "message": message,
        "count": len(result.recipes),
        "data": [recipe_payload(recipe) for recipe in result.recipes],
    }
