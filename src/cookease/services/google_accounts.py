"""Reconciliation of Google identities with existing accounts."""

import logging
from dataclasses import dataclass

from cookease.domain.users import GoogleProfile, UserRecord, normalize_email
from cookease.services.errors import (
    EmailLinkedToDifferentGoogleAccount,
    GoogleAuthFailed,
)
from cookease.services.users import UserRepository

logger = logging.getLogger(__name__)

_USERNAME_MIN = 3
_USERNAME_MAX = 30
_MAX_ATTEMPTS = 3
_MAX_SUFFIX = 10_000


@dataclass
class GoogleAccountService:
    """Maps a Google login onto exactly one account per email."""

    repository: UserRepository

    def reconcile(self, profile: GoogleProfile) -> UserRecord:
        """Return the account for a Google profile, creating or linking it.

        Creation only succeeds if no row exists for the email, and linking only
        succeeds if the account has no Google id yet. When another request wins
        either race the lookup is repeated against the fresh state.
        """
        email = normalize_email(profile.email)
        for _ in range(_MAX_ATTEMPTS):
            existing = self.repository.get_by_email(email)
            if existing is None:
                created = self.repository.create_user(
                    username=self._available_username(profile, email),
                    email=email,
                    google_id=profile.external_id,
                )
                if created is not None:
                    logger.info(
                        "Created account from Google login",
                        extra={"user_id": str(created.id)},
                    )
                    return created
                continue

            if existing.google_id is None:
                linked = self.repository.link_google_id(
                    existing.id, profile.external_id
                )
                if linked is not None:
                    logger.info(
                        "Linked Google identity to existing account",
                        extra={"user_id": str(linked.id)},
                    )
                    return linked
                continue

            if existing.google_id == profile.external_id:
                return existing

            logger.warning(
                "Rejected Google login for email linked to another Google account",
                extra={"user_id": str(existing.id)},
            )
            raise EmailLinkedToDifferentGoogleAccount()

        raise GoogleAuthFailed("Could not reconcile Google account")

    def _available_username(self, profile: GoogleProfile, email: str) -> str:
        """Pick an unused username from the display name or email."""
        base = (profile.display_name or "").strip() or email.split("@")[0]
        base = base[:_USERNAME_MAX]
        if len(base) < _USERNAME_MIN:
            base = f"{base}_user"
        if self.repository.get_by_username(base) is None:
            return base
        for suffix in range(1, _MAX_SUFFIX):
            tail = str(suffix)
            candidate = f"{base[: _USERNAME_MAX - len(tail)]}{tail}"
            if self.repository.get_by_username(candidate) is None:
                return candidate
        raise GoogleAuthFailed("Could not allocate a username")
