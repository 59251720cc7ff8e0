"""Authentication schemas for request/response models.

Field checks (emptiness, pattern, length) happen in the application
service so that every failure reports its own message; the schemas only
fix the wire names.
"""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Request schema for login.

    ``username`` is ignored in single-password mode.
    """

    username: str | None = None
    password: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"username": "alice", "password": "secret1"},
        },
    )


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    username: str | None = None
    password: str | None = None
    confirm_password: str | None = Field(default=None, alias="confirmPassword")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "username": "alice",
                "password": "secret1",
                "confirmPassword": "secret1",
            },
        },
    )


class OkResponse(BaseModel):
    ok: bool = True
    message: str | None = None


class PasswordChangeStatusResponse(BaseModel):
    disabled: bool
