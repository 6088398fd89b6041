"""Pydantic models for request bodies.

Fields default to empty strings so that missing values reach the services
and fail there with a ValidationError instead of a framework 422.
"""

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    """Body of POST /user."""

    first_name: str = ""
    last_name: str = ""
    location: str = ""
    description: str = ""
    occupation: str = ""
    login_name: str = ""
    password: str = ""


class LoginRequest(BaseModel):
    """Body of POST /admin/login."""

    login_name: str = ""
    password: str = ""


class CommentRequest(BaseModel):
    """Body of POST /commentsOfPhoto/{photo_id}."""

    comment: str = ""
