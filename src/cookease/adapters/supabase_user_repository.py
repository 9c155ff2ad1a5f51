"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from cookease.adapters._rows import is_unique_violation, parse_timestamp
from cookease.domain.users import UserRecord
from cookease.services.errors import UsernameTaken
from cookease.services.users import UserRepository

_COLUMNS = "id, username, email, password_hash, google_id, created_at"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""
        return self._get_one("id", str(user_id))

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with the given email, if present."""
        return self._get_one("email", email)

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the given username, if present."""
        return self._get_one("username", username)

    def create_user(
        self,
        username: str,
        email: str,
        password_hash: str | None = None,
        google_id: str | None = None,
    ) -> UserRecord | None:
        """Insert a user keyed on the unique email; None if the email exists."""
        try:
            response = (
                self.client.table("users")
                .upsert(
                    {
                        "username": username,
                        "email": email,
                        "password_hash": password_hash,
                        "google_id": google_id,
                    },
                    on_conflict="email",
                    ignore_duplicates=True,
                )
                .execute()
            )
        except APIError as exc:
            if is_unique_violation(exc, "username"):
                raise UsernameTaken() from exc
            raise
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def link_google_id(self, user_id: UUID, google_id: str) -> UserRecord | None:
        """Set the Google id only while the account has none."""
        response = (
            self.client.table("users")
            .update({"google_id": google_id, "updated_at": _now()})
            .eq("id", str(user_id))
            .is_("google_id", "null")
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def add_local_credentials(
        self, user_id: UUID, username: str, password_hash: str
    ) -> UserRecord | None:
        """Set username and password only while the account has no password."""
        try:
            response = (
                self.client.table("users")
                .update(
                    {
                        "username": username,
                        "password_hash": password_hash,
                        "updated_at": _now(),
                    }
                )
                .eq("id", str(user_id))
                .is_("password_hash", "null")
                .execute()
            )
        except APIError as exc:
            if is_unique_violation(exc, "username"):
                raise UsernameTaken() from exc
            raise
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def update_profile(
        self,
        user_id: UUID,
        username: str | None = None,
        password_hash: str | None = None,
    ) -> UserRecord | None:
        """Update username and/or password hash."""
        payload: dict[str, object] = {"updated_at": _now()}
        if username is not None:
            payload["username"] = username
        if password_hash is not None:
            payload["password_hash"] = password_hash
        try:
            response = (
                self.client.table("users")
                .update(payload)
                .eq("id", str(user_id))
                .execute()
            )
        except APIError as exc:
            if is_unique_violation(exc, "username"):
                raise UsernameTaken() from exc
            raise
        if not response.data:
            return None
        return _parse_user(response.data[0])

    def _get_one(self, column: str, value: str) -> UserRecord | None:
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_user(response.data[0])


def _now() -> str:
    return datetime.now(tz=UTC).isoformat()


def _parse_user(row: dict[str, object]) -> UserRecord:
    """Parse a users row into a domain model."""
    return UserRecord(
        id=UUID(str(row["id"])),
        username=str(row["username"]),
        email=str(row["email"]),
        password_hash=row.get("password_hash") or None,
        google_id=row.get("google_id") or None,
        created_at=parse_timestamp(row.get("created_at")),
    )
