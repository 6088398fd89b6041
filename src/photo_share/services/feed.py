"""Nested photo views joined with comment authors."""

from dataclasses import dataclass
from uuid import UUID

from photo_share.domain.errors import NotFoundError
from photo_share.domain.models import PhotoRecord, PublicUser, parse_entity_id
from photo_share.domain.photos import CommentView, PhotoView
from photo_share.services.photos import PhotoRepository
from photo_share.services.users import UserRepository


@dataclass
class PhotoFeedService:
    """Builds the photos-of-user view.

    Comment authors are resolved with one batched lookup per request: the
    distinct author ids across every photo are collected first, fetched
    together, and then projected to their public profile.
    """

    user_repository: UserRepository
    photo_repository: PhotoRepository

    def get_photos_of_user(self, raw_user_id: str) -> list[PhotoView]:
        """Return the user's photos with comments and their authors."""
        user_id = parse_entity_id(raw_user_id)
        if self.user_repository.get_user(user_id) is None:
            raise NotFoundError(f"User {user_id} not found")

        photos = self.photo_repository.list_photos_by_user(user_id)
        authors = self._resolve_authors(photos)
        return [_build_view(photo, authors) for photo in photos]

    def _resolve_authors(self, photos: list[PhotoRecord]) -> dict[UUID, PublicUser]:
        author_ids = {comment.user_id for photo in photos for comment in photo.comments}
        if not author_ids:
            return {}
        users = self.user_repository.find_users_by_ids(author_ids)
        return {user.id: user.public() for user in users}


def _build_view(photo: PhotoRecord, authors: dict[UUID, PublicUser]) -> PhotoView:
    return PhotoView(
        id=photo.id,
        file_name=photo.file_name,
        date_time=photo.date_time,
        user_id=photo.user_id,
        comments=[
            CommentView(
                id=comment.id,
                comment=comment.comment,
                date_time=comment.date_time,
                author=authors.get(comment.user_id),
            )
            for comment in photo.comments
        ],
    )
