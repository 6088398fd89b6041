"""JSON serialization of domain objects."""

from photo_share.domain.models import PublicUser, SchemaInfo, UserRecord
from photo_share.domain.photos import CommentView, PhotoView


def serialize_profile(user: UserRecord) -> dict[str, object]:
    """Serialize a user without login_name and password."""
    profile = user.profile()
    return {
        "id": str(profile.id),
        "first_name": profile.first_name,
        "last_name": profile.last_name,
        "location": profile.location,
        "description": profile.description,
        "occupation": profile.occupation,
    }


def serialize_public_user(user: PublicUser) -> dict[str, object]:
    return {
        "id": str(user.id),
        "first_name": user.first_name,
        "last_name": user.last_name,
    }


def serialize_photo(photo: PhotoView) -> dict[str, object]:
    return {
        "id": str(photo.id),
        "file_name": photo.file_name,
        "date_time": photo.date_time.isoformat(),
        "user_id": str(photo.user_id),
        "comments": [_serialize_comment(comment) for comment in photo.comments],
    }


def serialize_schema_info(info: SchemaInfo) -> dict[str, object]:
    return {
        "id": str(info.id),
        "version": info.version,
        "load_date_time": info.load_date_time.isoformat()
        if info.load_date_time
        else None,
    }


def _serialize_comment(comment: CommentView) -> dict[str, object]:
    return {
        "id": str(comment.id),
        "comment": comment.comment,
        "date_time": comment.date_time.isoformat(),
        "author": serialize_public_user(comment.author) if comment.author else None,
    }
