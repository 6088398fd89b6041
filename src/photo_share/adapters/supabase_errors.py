"""Translate Supabase client failures into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import httpx
from postgrest.exceptions import APIError

from photo_share.domain.errors import (
    ConflictError,
    InternalError,
    NotFoundError,
    PhotoShareError,
)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


@contextmanager
def translate_errors(
    conflict_message: str = "Already exists",
    missing_message: str = "Referenced record not found",
) -> Iterator[None]:
    """Re-raise PostgREST and transport errors as PhotoShareError subclasses."""
    try:
        yield
    except APIError as exc:
        raise _from_api_error(exc, conflict_message, missing_message) from exc
    except httpx.HTTPError as exc:
        raise InternalError(f"{type(exc).__name__}: {exc}") from exc


def _from_api_error(
    exc: APIError, conflict_message: str, missing_message: str
) -> PhotoShareError:
    if exc.code == UNIQUE_VIOLATION:
        return ConflictError(conflict_message)
    if exc.code == FOREIGN_KEY_VIOLATION:
        return NotFoundError(missing_message)
    return InternalError(exc.message or str(exc))
