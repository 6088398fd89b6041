"""Client-facing photo views."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from photo_share.domain.models import PublicUser


@dataclass(frozen=True)
class CommentView:
    """A comment joined with its author's public profile."""

    id: UUID
    comment: str
    date_time: datetime
    author: PublicUser | None


@dataclass(frozen=True)
class PhotoView:
    """A photo with its comments, ready for serialization."""

    id: UUID
    file_name: str
    date_time: datetime
    user_id: UUID
    comments: list[CommentView]


@dataclass(frozen=True)
class NewPhoto:
    """Metadata for a photo that has just been stored."""

    file_name: str
    date_time: datetime
    user_id: UUID
