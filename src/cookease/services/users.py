"""User registration, login and profile logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from cookease.domain.users import AuthMethod, UserRecord, normalize_email
from cookease.services.errors import (
    EmailTaken,
    InvalidCredentials,
    NoLocalAuth,
    UsernameTaken,
    UserNotFound,
)
from cookease.services.passwords import PasswordHasher
from cookease.services.tokens import JwtTokenIssuer

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user identities."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with the given normalized email, if present."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""

    def create_user(
        self,
        username: str,
        email: str,
        password_hash: str | None = None,
        google_id: str | None = None,
    ) -> UserRecord | None:
        """Insert a user unless the email exists; return None when it does."""

    def link_google_id(self, user_id: UUID, google_id: str) -> UserRecord | None:
        """Set the Google id if the user has none; return None otherwise."""

    def add_local_credentials(
        self, user_id: UUID, username: str, password_hash: str
    ) -> UserRecord | None:
        """Set username and password if no password exists; None otherwise."""

    def update_profile(
        self,
        user_id: UUID,
        username: str | None = None,
        password_hash: str | None = None,
    ) -> UserRecord | None:
        """Update the given profile fields and return the user."""


@dataclass(frozen=True)
class AuthResult:
    """An authenticated user with a fresh session token."""

    user: UserRecord
    token: str
    created: bool = False


@dataclass
class AuthService:
    """Application service for local credentials and session tokens."""

    repository: UserRepository
    hasher: PasswordHasher
    tokens: JwtTokenIssuer

    def register(self, username: str, email: str, password: str) -> AuthResult:
        """Register a local account or add a password to a Google-only one.

        An email owned by a Google-only account is upgraded in place: the
        account keeps its id and gains the submitted username and password.
        """
        email = normalize_email(email)
        existing_by_username = self.repository.get_by_username(username)
        existing_by_email = self.repository.get_by_email(email)

        upgradable = (
            existing_by_email is not None
            and existing_by_email.supports(AuthMethod.GOOGLE)
            and not existing_by_email.supports(AuthMethod.LOCAL)
        )
        if existing_by_username is not None and not (
            upgradable and existing_by_username.id == existing_by_email.id
        ):
            raise UsernameTaken()
        if existing_by_email is not None:
            if upgradable:
                return self._upgrade_google_account(
                    existing_by_email, username, password
                )
            raise EmailTaken()

        created = self.repository.create_user(
            username=username,
            email=email,
            password_hash=self.hasher.hash(password),
        )
        if created is None:
            raise EmailTaken()
        logger.info("Registered local account", extra={"user_id": str(created.id)})
        return AuthResult(
            user=created, token=self.tokens.issue(created.id), created=True
        )

    def _upgrade_google_account(
        self, account: UserRecord, username: str, password: str
    ) -> AuthResult:
        conflict = self.repository.get_by_username(username)
        if conflict is not None and conflict.id != account.id:
            raise UsernameTaken()
        upgraded = self.repository.add_local_credentials(
            account.id, username, self.hasher.hash(password)
        )
        if upgraded is None:
            raise EmailTaken()
        logger.info(
            "Added local credentials to Google account",
            extra={"user_id": str(upgraded.id)},
        )
        return AuthResult(user=upgraded, token=self.tokens.issue(upgraded.id))

    def login(self, email: str, password: str) -> AuthResult:
        """Check local credentials and return a session token."""
        user = self.repository.get_by_email(normalize_email(email))
        if user is None:
            raise InvalidCredentials()
        if not user.supports(AuthMethod.LOCAL):
            raise NoLocalAuth()
        if not self.hasher.verify(password, user.password_hash):
            raise InvalidCredentials()
        return AuthResult(user=user, token=self.tokens.issue(user.id))

    def verify(self, token: str) -> UserRecord:
        """Resolve a session token to its user."""
        user_id = self.tokens.decode(token)
        return self.get_user(user_id)

    def get_user(self, user_id: UUID) -> UserRecord:
        """Return a user or raise ``UserNotFound``."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise UserNotFound()
        return user

    def update_profile(
        self,
        user_id: UUID,
        username: str | None = None,
        password: str | None = None,
    ) -> UserRecord:
        """Change username and/or password; a new password enables local login."""
        if username:
            conflict = self.repository.get_by_username(username)
            if conflict is not None and conflict.id != user_id:
                raise UsernameTaken()
        password_hash = self.hasher.hash(password) if password else None
        if not username and password_hash is None:
            return self.get_user(user_id)
        updated = self.repository.update_profile(
            user_id, username=username or None, password_hash=password_hash
        )
        if updated is None:
            raise UserNotFound()
        return updated

    def issue_token(self, user: UserRecord) -> str:
        """Return a session token for an already authenticated user."""
        return self.tokens.issue(user.id)
