"""FastAPI application factory."""

import logging
from uuid import UUID

from fastapi import Depends, FastAPI, File, Request, Response, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from photo_share.api.admin import require_session, set_session_cookie
from photo_share.api.admin import router as admin_router
from photo_share.api.schemas import CommentRequest, RegisterRequest
from photo_share.api.serializers import (
    serialize_photo,
    serialize_profile,
    serialize_public_user,
    serialize_schema_info,
)
from photo_share.app_logging import configure_logging
from photo_share.containers import AppContainer
from photo_share.domain.errors import PhotoShareError, ValidationError
from photo_share.domain.models import NewUser


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(PhotoShareError)
    async def photo_share_error_handler(
        request: Request, exc: PhotoShareError
    ) -> JSONResponse:
        if exc.status_code >= 500:  # noqa: PLR2004
            logger.error(
                "Request failed",
                extra={"path": request.url.path, "error": type(exc).__name__},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": _format_error(container, exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": "Invalid request body"})

    app.include_router(admin_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Simple status endpoint."""
        return "Photo share API is running"

    @app.get("/test")
    @app.get("/test/info")
    async def schema_info(request: Request) -> dict[str, object]:
        """Return the SchemaInfo record."""
        state_container: AppContainer = request.app.state.container
        return serialize_schema_info(state_container.stats_service.get_schema_info())

    @app.get("/test/counts")
    async def collection_counts(request: Request) -> dict[str, int]:
        """Return the record count of every collection."""
        state_container: AppContainer = request.app.state.container
        return await state_container.stats_service.get_collection_counts()

    @app.get("/test/{param}")
    async def unknown_test_param(param: str) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": f"Bad param {param}"})

    @app.post("/user")
    async def register_user(
        request: Request, response: Response, payload: RegisterRequest | None = None
    ) -> dict[str, object]:
        """Register a new user and log them in."""
        state_container: AppContainer = request.app.state.container
        body = payload or RegisterRequest()
        user = state_container.user_service.register(
            NewUser(
                first_name=body.first_name,
                last_name=body.last_name,
                login_name=body.login_name,
                password=body.password,
                location=body.location,
                description=body.description,
                occupation=body.occupation,
            )
        )
        token = state_container.session_gate.bind(user.id)
        set_session_cookie(state_container, response, token)
        return serialize_profile(user)

    @app.get("/user/list")
    async def list_users(request: Request) -> list[dict[str, object]]:
        """Return id and names of every user."""
        state_container: AppContainer = request.app.state.container
        users = state_container.user_service.list_users()
        if not users:
            raise ValidationError("No users")
        return [serialize_public_user(user) for user in users]

    @app.get("/user/{user_id}")
    async def user_detail(user_id: str, request: Request) -> dict[str, object]:
        """Return a user without credentials."""
        state_container: AppContainer = request.app.state.container
        return serialize_profile(state_container.user_service.get_user(user_id))

    @app.get("/photosOfUser/{user_id}")
    async def photos_of_user(user_id: str, request: Request) -> list[dict[str, object]]:
        """Return a user's photos with comments and comment authors."""
        state_container: AppContainer = request.app.state.container
        photos = state_container.feed_service.get_photos_of_user(user_id)
        return [serialize_photo(photo) for photo in photos]

    @app.post("/photos/new")
    async def upload_photo(
        request: Request,
        session_user_id: UUID = Depends(require_session),
        uploadedphoto: UploadFile | None = File(default=None),
    ) -> Response:
        """Store an uploaded photo for the logged in user."""
        state_container: AppContainer = request.app.state.container
        if uploadedphoto is None:
            raise ValidationError("photo required")
        raw_bytes = await uploadedphoto.read()
        state_container.photo_service.ingest_photo(
            owner_user_id=session_user_id,
            session_user_id=session_user_id,
            raw_bytes=raw_bytes,
            original_filename=uploadedphoto.filename,
            content_type=uploadedphoto.content_type,
        )
        return Response()

    @app.post("/commentsOfPhoto/{photo_id}")
    async def add_comment(
        photo_id: str,
        request: Request,
        payload: CommentRequest | None = None,
        session_user_id: UUID = Depends(require_session),
    ) -> Response:
        """Append a comment by the logged in user to a photo."""
        state_container: AppContainer = request.app.state.container
        body = payload or CommentRequest()
        state_container.photo_service.add_comment(
            photo_id, session_user_id, body.comment
        )
        return Response()

    return app


def _format_error(state_container: AppContainer, exc: PhotoShareError) -> str:
    """Return the client-facing error message; 5xx detail only in local runs."""
    is_server_error = exc.status_code >= 500  # noqa: PLR2004
    if not is_server_error or state_container.settings.environment == "local":
        return str(exc) or type(exc).__name__
    return "Internal Server Error"
