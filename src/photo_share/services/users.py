"""User-related business logic."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_share.domain.errors import NotFoundError, ValidationError
from photo_share.domain.models import NewUser, PublicUser, UserRecord, parse_entity_id

logger = logging.getLogger(__name__)

REQUIRED_USER_FIELDS = ("first_name", "last_name", "login_name", "password")


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def create_user(self, new_user: NewUser) -> UserRecord:
        """Insert a user, raising ConflictError on a duplicate login name."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""

    def list_users(self) -> list[PublicUser]:
        """Return every user projected to id and names."""

    def find_users_by_ids(self, user_ids: Iterable[UUID]) -> list[UserRecord]:
        """Return the users matching any of the ids."""

    def find_by_credentials(self, login_name: str, password: str) -> UserRecord | None:
        """Return the user whose login name and password match."""


@dataclass
class UserService:
    """Application service for user registration and lookup."""

    repository: UserRepository

    def register(self, new_user: NewUser) -> UserRecord:
        """Validate required fields and create the user."""
        for name in REQUIRED_USER_FIELDS:
            if not getattr(new_user, name):
                raise ValidationError(f"{name} is required")
        user = self.repository.create_user(new_user)
        logger.info("Registered user", extra={"user_id": str(user.id)})
        return user

    def get_user(self, raw_user_id: str) -> UserRecord:
        """Return a user by path id."""
        user_id = parse_entity_id(raw_user_id)
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def list_users(self) -> list[PublicUser]:
        """Return the public listing of all users."""
        return self.repository.list_users()
