"""Supabase-backed photo repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from photo_share.adapters.supabase_errors import translate_errors
from photo_share.domain.errors import InternalError, NotFoundError
from photo_share.domain.models import CommentRecord, PhotoRecord
from photo_share.domain.photos import NewPhoto
from photo_share.services.photos import PhotoRepository


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photos with an embedded comments array."""

    client: Client

    def create_photo(self, new_photo: NewPhoto) -> PhotoRecord:
        """Insert a photo row with an empty comments array."""
        with translate_errors(missing_message=f"User {new_photo.user_id} not found"):
            response = (
                self.client.table("photos")
                .insert(
                    {
                        "file_name": new_photo.file_name,
                        "date_time": new_photo.date_time.isoformat(),
                        "user_id": str(new_photo.user_id),
                        "comments": [],
                    }
                )
                .execute()
            )
        if not response.data:
            raise InternalError("Failed to create photo metadata")
        return _parse_photo(response.data[0])

    def append_comment(self, photo_id: UUID, comment: CommentRecord) -> None:
        """Append a comment through the append_photo_comment function.

        The function updates ``comments = comments || new`` in a single
        statement and returns whether the photo existed.
        """
        with translate_errors():
            response = self.client.rpc(
                "append_photo_comment",
                {
                    "p_photo_id": str(photo_id),
                    "p_comment": _serialize_comment(comment),
                },
            ).execute()
        if not response.data:
            raise NotFoundError(f"Photo {photo_id} not found")

    def list_photos_by_user(self, user_id: UUID) -> list[PhotoRecord]:
        """Return a user's photos ordered by creation time."""
        with translate_errors():
            response = (
                self.client.table("photos")
                .select("id, file_name, date_time, user_id, comments")
                .eq("user_id", str(user_id))
                .order("date_time", desc=False)
                .order("id", desc=False)
                .execute()
            )
        return [_parse_photo(row) for row in response.data or []]


def _serialize_comment(comment: CommentRecord) -> dict[str, str]:
    return {
        "id": str(comment.id),
        "comment": comment.comment,
        "date_time": comment.date_time.isoformat(),
        "user_id": str(comment.user_id),
    }


def _parse_photo(row: dict[str, object]) -> PhotoRecord:
    raw_comments = row.get("comments")
    comments = raw_comments if isinstance(raw_comments, list) else []
    return PhotoRecord(
        id=UUID(str(row["id"])),
        file_name=str(row["file_name"]),
        date_time=_parse_datetime(row.get("date_time")),
        user_id=UUID(str(row["user_id"])),
        comments=[_parse_comment(item) for item in comments],
    )


def _parse_comment(item: dict[str, object]) -> CommentRecord:
    return CommentRecord(
        id=UUID(str(item["id"])),
        comment=str(item.get("comment") or ""),
        date_time=_parse_datetime(item.get("date_time")),
        user_id=UUID(str(item["user_id"])),
    )


def _parse_datetime(raw: object) -> datetime:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return datetime.min.replace(tzinfo=UTC)
