"""Request dependencies shared by the API routers."""

from fastapi import Header, Request

from cookease.containers import AppContainer
from cookease.domain.users import UserRecord
from cookease.services.errors import InvalidToken, MissingToken, UserNotFound


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _resolve_user(container: AppContainer, token: str) -> UserRecord:
    try:
        return container.auth_service.verify(token)
    except UserNotFound as exc:
        raise InvalidToken("Invalid token - user not found") from exc


def require_user(
    request: Request, authorization: str | None = Header(default=None)
) -> UserRecord:
    """Authenticate the request with its bearer token."""
    token = bearer_token(authorization)
    if token is None:
        raise MissingToken()
    return _resolve_user(get_container(request), token)


def optional_user(
    request: Request, authorization: str | None = Header(default=None)
) -> UserRecord | None:
    """Authenticate when a bearer token is sent; anonymous otherwise."""
    token = bearer_token(authorization)
    if token is None:
        return None
    return _resolve_user(get_container(request), token)
