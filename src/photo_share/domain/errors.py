"""Error taxonomy shared by services, adapters and the HTTP layer."""


class PhotoShareError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500


class ValidationError(PhotoShareError):
    """A required field is missing or empty."""

    status_code = 400


class ConflictError(PhotoShareError):
    """The login name is already taken."""

    status_code = 400


class InvalidIdError(PhotoShareError):
    """An identifier is not well formed."""

    status_code = 400


class NotFoundError(PhotoShareError):
    """A referenced entity does not exist."""

    status_code = 400


class AuthError(PhotoShareError):
    """The request is not authorized."""

    status_code = 401


class NotAuthenticatedError(AuthError):
    """No authenticated session is bound to the request."""


class InvalidCredentialsError(AuthError):
    """Login name and password did not match any user."""

    status_code = 400


class InternalError(PhotoShareError):
    """Storage or infrastructure failure."""

    status_code = 500


class PhotoWriteError(PhotoShareError):
    """The uploaded photo could not be written to blob storage."""

    status_code = 400
