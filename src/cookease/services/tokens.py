"""Signed session and OAuth state tokens."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt

from cookease.services.errors import InvalidToken, TokenExpired

_ALGORITHM = "HS256"
_STATE_PURPOSE = "oauth_state"
_STATE_TTL = timedelta(minutes=10)


@dataclass
class JwtTokenIssuer:
    """Issues and verifies HS256 JSON Web Tokens."""

    secret: str
    expire_hours: float = 24

    def issue(self, user_id: UUID) -> str:
        """Return a session token for the user."""
        now = datetime.now(tz=UTC)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + timedelta(hours=self.expire_hours),
        }
        return jwt.encode(payload, self.secret, algorithm=_ALGORITHM)

    def decode(self, token: str) -> UUID:
        """Return the user id encoded in a session token."""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[_ALGORITHM],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpired() from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidToken() from exc
        try:
            return UUID(str(payload["sub"]))
        except ValueError as exc:
            raise InvalidToken() from exc

    def issue_state(self) -> str:
        """Return a short-lived token used as the OAuth ``state`` parameter."""
        now = datetime.now(tz=UTC)
        payload = {"purpose": _STATE_PURPOSE, "iat": now, "exp": now + _STATE_TTL}
        return jwt.encode(payload, self.secret, algorithm=_ALGORITHM)

    def verify_state(self, state: str | None) -> bool:
        """Return True when ``state`` was issued by this server and is fresh."""
        if not state:
            return False
        try:
            payload = jwt.decode(state, self.secret, algorithms=[_ALGORITHM])
        except jwt.InvalidTokenError:
            return False
        return payload.get("purpose") == _STATE_PURPOSE
