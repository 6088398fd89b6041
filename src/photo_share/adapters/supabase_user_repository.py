"""Supabase-backed user repository."""

from collections.abc import Iterable
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from photo_share.adapters.supabase_errors import translate_errors
from photo_share.domain.errors import InternalError
from photo_share.domain.models import NewUser, PublicUser, UserRecord
from photo_share.services.users import UserRepository

_USER_COLUMNS = (
    "id, first_name, last_name, location, description, occupation, "
    "login_name, password"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence.

    Login name uniqueness is enforced by a unique index on ``users.login_name``;
    a violation surfaces as ConflictError from the insert itself.
    """

    client: Client

    def create_user(self, new_user: NewUser) -> UserRecord:
        """Insert a user row and return it."""
        with translate_errors(conflict_message="User already exists"):
            response = (
                self.client.table("users")
                .insert(
                    {
                        "first_name": new_user.first_name,
                        "last_name": new_user.last_name,
                        "location": new_user.location,
                        "description": new_user.description,
                        "occupation": new_user.occupation,
                        "login_name": new_user.login_name,
                        "password": new_user.password,
                    }
                )
                .execute()
            )
        if not response.data:
            raise InternalError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        with translate_errors():
            response = (
                self.client.table("users")
                .select(_USER_COLUMNS)
                .eq("id", str(user_id))
                .limit(1)
                .execute()
            )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def list_users(self) -> list[PublicUser]:
        """Return every user as id and names only."""
        with translate_errors():
            response = (
                self.client.table("users")
                .select("id, first_name, last_name")
                .execute()
            )
        return [
            PublicUser(
                id=UUID(row["id"]),
                first_name=row["first_name"],
                last_name=row["last_name"],
            )
            for row in response.data or []
        ]

    def find_users_by_ids(self, user_ids: Iterable[UUID]) -> list[UserRecord]:
        """Return users for a batch of ids in one query."""
        ids = sorted(str(user_id) for user_id in user_ids)
        if not ids:
            return []
        with translate_errors():
            response = (
                self.client.table("users")
                .select(_USER_COLUMNS)
                .in_("id", ids)
                .execute()
            )
        return [_parse_user(row) for row in response.data or []]

    def find_by_credentials(self, login_name: str, password: str) -> UserRecord | None:
        """Return the user matching both login name and password."""
        with translate_errors():
            response = (
                self.client.table("users")
                .select(_USER_COLUMNS)
                .eq("login_name", login_name)
                .eq("password", password)
                .limit(1)
                .execute()
            )
        if response.data:
            return _parse_user(response.data[0])
        return None


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        first_name=str(row.get("first_name") or ""),
        last_name=str(row.get("last_name") or ""),
        location=str(row.get("location") or ""),
        description=str(row.get("description") or ""),
        occupation=str(row.get("occupation") or ""),
        login_name=str(row.get("login_name") or ""),
        password=str(row.get("password") or ""),
    )
