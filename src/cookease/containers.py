"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from cookease.adapters.google_oauth_client import (
    GoogleOAuthClient,
    HttpxGoogleOAuthClient,
)
from cookease.adapters.openai_text_generator import OpenAITextGenerator
from cookease.adapters.supabase_cart_repository import SupabaseCartRepository
from cookease.adapters.supabase_favorite_repository import (
    SupabaseFavoriteRepository,
)
from cookease.adapters.supabase_ingredient_repository import (
    SupabaseIngredientRepository,
)
from cookease.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from cookease.adapters.supabase_user_repository import SupabaseUserRepository
from cookease.config import Settings
from cookease.services.cart import CartService
from cookease.services.favorites import FavoritesService
from cookease.services.google_accounts import GoogleAccountService
from cookease.services.ingredients import IngredientService
from cookease.services.passwords import BcryptPasswordHasher
from cookease.services.recipes import RecipeService
from cookease.services.recommendations import RecommendationService
from cookease.services.tokens import JwtTokenIssuer
from cookease.services.users import AuthService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    google_account_service: GoogleAccountService
    google_oauth_client: GoogleOAuthClient | None
    recipe_service: RecipeService
    ingredient_service: IngredientService
    favorites_service: FavoritesService
    cart_service: CartService
    recommendation_service: RecommendationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    ingredient_repository = SupabaseIngredientRepository(supabase_client)
    favorite_repository = SupabaseFavoriteRepository(supabase_client)
    cart_repository = SupabaseCartRepository(supabase_client)

    tokens = JwtTokenIssuer(
        secret=resolved_settings.jwt_secret,
        expire_hours=resolved_settings.jwt_expire_hours,
    )
    auth_service = AuthService(
        repository=user_repository,
        hasher=BcryptPasswordHasher(rounds=resolved_settings.bcrypt_rounds),
        tokens=tokens,
    )
    google_account_service = GoogleAccountService(user_repository)
    google_oauth_client: HttpxGoogleOAuthClient | None = None
    if resolved_settings.google_enabled:
        google_oauth_client = HttpxGoogleOAuthClient.create(
            client_id=resolved_settings.google_client_id,
            client_secret=resolved_settings.google_client_secret,
            redirect_uri=resolved_settings.google_callback_url,
        )

    recipe_service = RecipeService(recipe_repository)
    ingredient_service = IngredientService(ingredient_repository)
    favorites_service = FavoritesService(
        repository=favorite_repository,
        recipe_repository=recipe_repository,
        user_repository=user_repository,
    )
    cart_service = CartService(
        repository=cart_repository,
        ingredient_repository=ingredient_repository,
    )
    text_generator = OpenAITextGenerator.create(
        api_key=resolved_settings.openai_api_key,
        model=resolved_settings.openai_model,
    )
    recommendation_service = RecommendationService(
        generator=text_generator,
        recipe_repository=recipe_repository,
        user_repository=user_repository,
        favorites_service=favorites_service,
        timeout_seconds=resolved_settings.recommendation_timeout_seconds,
    )

    async def close_resources() -> None:
        await text_generator.close()
        if google_oauth_client is not None:
            await google_oauth_client.close()

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        google_account_service=google_account_service,
        google_oauth_client=google_oauth_client,
        recipe_service=recipe_service,
        ingredient_service=ingredient_service,
        favorites_service=favorites_service,
        cart_service=cart_service,
        recommendation_service=recommendation_service,
        close_resources=close_resources,
    )
