"""Photo ingestion and comment posting."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from photo_share.domain.errors import NotAuthenticatedError, ValidationError
from photo_share.domain.models import CommentRecord, PhotoRecord, parse_entity_id
from photo_share.domain.photos import NewPhoto

logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photos and their comments."""

    def create_photo(self, new_photo: NewPhoto) -> PhotoRecord:
        """Create a photo with no comments, raising NotFoundError for unknown owners."""

    def append_comment(self, photo_id: UUID, comment: CommentRecord) -> None:
        """Atomically append a comment, raising NotFoundError for unknown photos."""

    def list_photos_by_user(self, user_id: UUID) -> list[PhotoRecord]:
        """Return the photos owned by a user in storage order."""


class BlobStore(Protocol):
    """Durable storage for uploaded photo bytes."""

    def put(self, name: str, data: bytes, content_type: str | None) -> None:
        """Store bytes under the given name."""

    def remove(self, name: str) -> None:
        """Delete a stored blob."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class StorageNameFactory:
    """Builds U<millis><filename> names that never repeat within a process."""

    clock: Callable[[], datetime] = _utc_now
    _last_millis: int = field(default=0, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False)

    def build(self, original_filename: str) -> str:
        """Return a storage name for an uploaded file."""
        millis = int(self.clock().timestamp() * 1000)
        with self._lock:
            millis = max(millis, self._last_millis + 1)
            self._last_millis = millis
        base_name = original_filename.replace("\\", "/").rsplit("/", maxsplit=1)[-1]
        return f"U{millis}{base_name}"


@dataclass
class PhotoService:
    """Stores uploaded photos and records comments on them."""

    repository: PhotoRepository
    blob_store: BlobStore
    name_factory: StorageNameFactory = field(default_factory=StorageNameFactory)
    clock: Callable[[], datetime] = _utc_now

    def ingest_photo(  # noqa: PLR0913
        self,
        owner_user_id: UUID,
        session_user_id: UUID,
        raw_bytes: bytes,
        original_filename: str | None,
        content_type: str | None = None,
    ) -> PhotoRecord:
        """Write the blob, then the photo record.

        If the record cannot be created the blob is removed again.
        """
        if owner_user_id != session_user_id:
            raise NotAuthenticatedError("Photo owner must be the logged in user")
        if not raw_bytes or not original_filename:
            raise ValidationError("photo required")

        file_name = self.name_factory.build(original_filename)
        self.blob_store.put(file_name, raw_bytes, content_type)
        try:
            photo = self.repository.create_photo(
                NewPhoto(
                    file_name=file_name,
                    date_time=self.clock(),
                    user_id=owner_user_id,
                )
            )
        except Exception:
            logger.exception(
                "Failed to record photo, removing stored blob",
                extra={"file_name": file_name},
            )
            self._discard_blob(file_name)
            raise
        logger.info(
            "Stored photo",
            extra={"photo_id": str(photo.id), "file_name": file_name},
        )
        return photo

    def add_comment(
        self, raw_photo_id: str, session_user_id: UUID, text: str
    ) -> CommentRecord:
        """Append a comment authored by the session user to a photo."""
        if not text:
            raise ValidationError("comment required")
        photo_id = parse_entity_id(raw_photo_id)
        comment = CommentRecord(
            id=uuid4(),
            comment=text,
            date_time=self.clock(),
            user_id=session_user_id,
        )
        self.repository.append_comment(photo_id, comment)
        logger.info(
            "Added comment",
            extra={"photo_id": str(photo_id), "comment_id": str(comment.id)},
        )
        return comment

    def _discard_blob(self, file_name: str) -> None:
        try:
            self.blob_store.remove(file_name)
        except Exception:
            logger.exception(
                "Failed to remove orphaned blob", extra={"file_name": file_name}
            )
