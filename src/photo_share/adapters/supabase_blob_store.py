"""Supabase Storage bucket for uploaded photo bytes."""

from dataclasses import dataclass

from supabase import Client

from photo_share.domain.errors import InternalError, PhotoWriteError
from photo_share.services.photos import BlobStore


@dataclass
class SupabaseBlobStore(BlobStore):
    """Stores photos as objects in a Supabase Storage bucket."""

    client: Client
    bucket: str

    def put(self, name: str, data: bytes, content_type: str | None) -> None:
        """Upload bytes without overwriting an existing object."""
        try:
            self.client.storage.from_(self.bucket).upload(
                name,
                data,
                file_options={
                    "content-type": content_type or "application/octet-stream",
                    "upsert": "false",
                },
            )
        except Exception as exc:
            raise PhotoWriteError(f"Error writing photo: {exc}") from exc

    def remove(self, name: str) -> None:
        """Delete an object from the bucket."""
        try:
            self.client.storage.from_(self.bucket).remove([name])
        except Exception as exc:
            raise InternalError(f"Error removing photo: {exc}") from exc
