"""Domain models for user identities."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class AuthMethod(StrEnum):
    """Ways a user can authenticate."""

    LOCAL = "local"
    GOOGLE = "google"


@dataclass(frozen=True)
class UserRecord:
    """A user identity with its attached authentication capabilities.

    ``password_hash`` is the local capability and ``google_id`` the Google one.
    The supported methods are derived from them rather than stored, so the two
    can never disagree.
    """

    id: UUID
    username: str
    email: str
    password_hash: str | None = None
    google_id: str | None = None
    created_at: datetime | None = None

    @property
    def auth_methods(self) -> list[AuthMethod]:
        """Return the authentication methods this account supports."""
        methods: list[AuthMethod] = []
        if self.password_hash:
            methods.append(AuthMethod.LOCAL)
        if self.google_id:
            methods.append(AuthMethod.GOOGLE)
        return methods

    def supports(self, method: AuthMethod) -> bool:
        """Return True when the account can log in with ``method``."""
        return method in self.auth_methods


def normalize_email(email: str) -> str:
    """Normalize an email address for storage and lookup."""
    return email.strip().lower()


@dataclass(frozen=True)
class GoogleProfile:
    """Identity asserted by a completed Google OAuth flow."""

    external_id: str
    email: str
    display_name: str | None = None
