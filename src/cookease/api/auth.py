"""Authentication endpoints: local credentials and Google OAuth."""

import logging
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Header, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, RedirectResponse

from cookease.api.deps import bearer_token, get_container, require_user
from cookease.api.schemas import LoginRequest, SignupRequest, UpdateProfileRequest
from cookease.api.serializers import recipe_payload, user_payload
from cookease.containers import AppContainer
from cookease.domain.users import UserRecord
from cookease.services.errors import (
    CookEaseError,
    GoogleAuthDisabled,
    InvalidToken,
    TokenExpired,
    UserNotFound,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup")
def signup(body: SignupRequest, request: Request) -> JSONResponse:
    """Register with username, email and password."""
    container = get_container(request)
    result = container.auth_service.register(body.username, body.email, body.password)
    if result.created:
        message = "User registered successfully"
        status_code = status.HTTP_201_CREATED
    else:
        message = "Local authentication added to existing Google account"
        status_code = status.HTTP_200_OK
    return JSONResponse(
        status_code=status_code,
        content={
            "success": True,
            "message": message,
            "token": result.token,
            "user": user_payload(result.user),
        },
    )


@router.post("/login")
def login(body: LoginRequest, request: Request) -> dict[str, object]:
    """Log in with email and password."""
    container = get_container(request)
    result = container.auth_service.login(body.email, body.password)
    return {
        "success": True,
        "message": "Login successful",
        "token": result.token,
        "user": user_payload(result.user),
    }


@router.get("/verify-token")
def verify_token(user: UserRecord = Depends(require_user)) -> dict[str, object]:
    """Confirm that the bearer token is valid."""
    return {"valid": True, "user": user_payload(user)}


@router.post("/verify-google-token")
def verify_google_token(
    request: Request, authorization: str | None = Header(default=None)
) -> JSONResponse:
    """Confirm the token handed to the frontend after a Google login."""
    token = bearer_token(authorization)
    if token is None:
        return _invalid_token("No token provided")
    try:
        user = get_container(request).auth_service.verify(token)
    except UserNotFound:
        return _invalid_token("User not found")
    except (InvalidToken, TokenExpired):
        return _invalid_token("Invalid token")
    return JSONResponse(content={"valid": True, "user": user_payload(user)})


def _invalid_token(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"valid": False, "message": message},
    )


@router.get("/user")
def current_user(
    request: Request, user: UserRecord = Depends(require_user)
) -> dict[str, object]:
    """Return the current user with their favorite recipes."""
    container = get_container(request)
    favorites = container.favorites_service.list_favorites(user.id)
    return {
        **user_payload(user),
        "favoriteRecipes": [recipe_payload(recipe) for recipe in favorites],
    }


@router.put("/update-profile")
def update_profile(
    body: UpdateProfileRequest,
    request: Request,
    user: UserRecord = Depends(require_user),
) -> dict[str, object]:
    """Change the username and/or password of the current user."""
    container = get_container(request)
    updated = container.auth_service.update_profile(
        user.id, username=body.username, password=body.password
    )
    return {
        "success": True,
        "message": "Profile updated successfully",
        "user": user_payload(updated),
    }


@router.get("/google")
async def google_login(request: Request) -> RedirectResponse:
    """Redirect the browser to Google's consent page."""
    container = get_container(request)
    if container.google_oauth_client is None:
        raise GoogleAuthDisabled()
    state = container.auth_service.tokens.issue_state()
    return RedirectResponse(container.google_oauth_client.authorization_url(state))


@router.get("/google/callback")
async def google_callback(
    request: Request,
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """Finish the Google flow and hand a session token to the frontend."""
    container = get_container(request)
    if container.google_oauth_client is None:
        raise GoogleAuthDisabled()
    if error or not code or not container.auth_service.tokens.verify_state(state):
        return _frontend_redirect(container, {"error": "google_auth_failed"})

    try:
        profile = await container.google_oauth_client.fetch_profile(code)
        user = await run_in_threadpool(
            container.google_account_service.reconcile, profile
        )
    except CookEaseError as exc:
        return _frontend_redirect(container, {"error": exc.code})
    except Exception:
        logger.exception("Google callback failed")
        return _frontend_redirect(container, {"error": "google_auth_failed"})

    token = container.auth_service.issue_token(user)
    return _frontend_redirect(container, {"token": token, "success": "google_login"})


def _frontend_redirect(
    container: AppContainer, params: dict[str, str]
) -> RedirectResponse:
    base = container.settings.frontend_url.rstrip("/")
    return RedirectResponse(
        f"{base}/#/login?{urlencode(params)}", status_code=status.HTTP_302_FOUND
    )
