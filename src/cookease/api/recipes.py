"""Recipe catalog and favorite endpoints."""

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from cookease.api.deps import get_container, require_user
from cookease.api.schemas import RecipeCreateRequest, RecipeUpdateRequest
from cookease.api.serializers import recipe_payload
from cookease.domain.recipes import RecipeFilter
from cookease.domain.users import UserRecord

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("")
def list_recipes(request: Request) -> dict[str, object]:
    """Return all recipes, newest first."""
    recipes = get_container(request).recipe_service.list_recipes()
    return {
        "success": True,
        "count": len(recipes),
        "data": [recipe_payload(recipe) for recipe in recipes],
    }


@router.get("/filter-options")
def filter_options(request: Request) -> dict[str, object]:
    """Return the values available for filtering."""
    options = get_container(request).recipe_service.filter_options()
    return {
        "success": True,
        "data": {
            "countries": options.countries,
            "mainIngredients": options.main_ingredients,
            "allergens": options.allergens,
        },
    }


@router.get("/favorites")
def list_favorites(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the current user's favorite recipes."""
    favorites = get_container(request).favorites_service.list_favorites(user.id)
    return {
        "success": True,
        "count": len(favorites),
        "data": [recipe_payload(recipe) for recipe in favorites],
    }


@router.get("/filter")
def filter_recipes(
    request: Request,
    country: list[str] = Query(default=[]),
    main_ingredient: list[str] = Query(default=[], alias="mainIngredient"),
    allergens: list[str] = Query(default=[]),
) -> dict[str, object]:
    """Filter by country and main ingredient, excluding listed allergens."""
    recipe_filter = RecipeFilter(
        countries=country,
        main_ingredients=main_ingredient,
        excluded_allergens=allergens,
    )
    recipes = get_container(request).recipe_service.filter_recipes(recipe_filter)
    return {
        "success": True,
        "count": len(recipes),
        "filters": {
            "country": country,
            "mainIngredient": main_ingredient,
            "allergens": allergens,
        },
        "data": [recipe_payload(recipe) for recipe in recipes],
    }


@router.get("/search")
def search_recipes(
    request: Request,
    q: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> dict[str, object]:
    """Search recipe titles and descriptions."""
    result = get_container(request).recipe_service.search(q, page=page, limit=limit)
    return {
        "success": True,
        "count": len(result.items),
        "total": result.total,
        "page": result.page,
        "limit": result.limit,
        "query": q,
        "data": [recipe_payload(recipe) for recipe in result.items],
    }


@router.get("/{recipe_id}")
def get_recipe(recipe_id: str, request: Request) -> dict[str, object]:
    """Return a single recipe."""
    recipe = get_container(request).recipe_service.get_recipe(recipe_id)
    return {"success": True, "data": recipe_payload(recipe)}


@router.post("", dependencies=[Depends(require_user)])
def create_recipe(body: RecipeCreateRequest, request: Request) -> JSONResponse:
    """Create a recipe."""
    recipe = get_container(request).recipe_service.create_recipe(body.model_dump())
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "success": True,
            "message": "Recipe created successfully",
            "data": recipe_payload(recipe),
        },
    )


@router.put("/{recipe_id}", dependencies=[Depends(require_user)])
def update_recipe(
    recipe_id: str, body: RecipeUpdateRequest, request: Request
) -> dict[str, object]:
    """Update fields of a recipe."""
    recipe = get_container(request).recipe_service.update_recipe(
        recipe_id, body.model_dump(exclude_unset=True, exclude_none=True)
    )
    return {
        "success": True,
        "message": "Recipe updated successfully",
        "data": recipe_payload(recipe),
    }


@router.delete("/{recipe_id}", dependencies=[Depends(require_user)])
def delete_recipe(recipe_id: str, request: Request) -> dict[str, object]:
    """Delete a recipe."""
    get_container(request).recipe_service.delete_recipe(recipe_id)
    return {"success": True, "message": "Recipe deleted successfully"}


@router.patch("/{recipe_id}/favorite")
def toggle_favorite(
    recipe_id: str, request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Add the recipe to favorites, or remove it if already there."""
    toggle = get_container(request).favorites_service.toggle(user.id, recipe_id)
    action = "added to" if toggle.is_favorited else "removed from"
    return {
        "success": True,
        "message": f"Recipe {action} favorites",
        "isFavorited": toggle.is_favorited,
        "favoriteRecipes": [str(favorite) for favorite in toggle.favorite_ids],
    }
