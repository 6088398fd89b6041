"""Domain models for the photo sharing app."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID

from photo_share.domain.errors import InvalidIdError


@dataclass(frozen=True)
class PublicUser:
    """Public profile projection safe to show next to a comment."""

    id: UUID
    first_name: str
    last_name: str


@dataclass(frozen=True)
class UserProfile:
    """User details without credentials."""

    id: UUID
    first_name: str
    last_name: str
    location: str
    description: str
    occupation: str


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    first_name: str
    last_name: str
    location: str
    description: str
    occupation: str
    login_name: str
    password: str

    def public(self) -> PublicUser:
        """Return the {id, first_name, last_name} projection."""
        return PublicUser(
            id=self.id, first_name=self.first_name, last_name=self.last_name
        )

    def profile(self) -> UserProfile:
        """Return the user without login_name and password."""
        return UserProfile(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            location=self.location,
            description=self.description,
            occupation=self.occupation,
        )


@dataclass(frozen=True)
class NewUser:
    """Registration fields for a user that does not exist yet."""

    first_name: str
    last_name: str
    login_name: str
    password: str
    location: str = ""
    description: str = ""
    occupation: str = ""


@dataclass(frozen=True)
class CommentRecord:
    """A comment embedded in a photo."""

    id: UUID
    comment: str
    date_time: datetime
    user_id: UUID


@dataclass(frozen=True)
class PhotoRecord:
    """A photo with its comments in append order."""

    id: UUID
    file_name: str
    date_time: datetime
    user_id: UUID
    comments: list[CommentRecord] = field(default_factory=list)


@dataclass(frozen=True)
class SchemaInfo:
    """Singleton record describing the loaded database schema."""

    id: UUID
    version: str
    load_date_time: datetime | None


class CollectionName(str, Enum):
    """Collections exposed by the metadata counter."""

    USER = "user"
    PHOTO = "photo"
    SCHEMA_INFO = "schemaInfo"


def parse_entity_id(raw: str) -> UUID:
    """Parse a path identifier, raising InvalidIdError when malformed."""
    try:
        return UUID(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidIdError(f"Invalid id: {raw!r}") from exc
