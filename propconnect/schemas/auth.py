"""Authentication schemas."""

from pydantic import EmailStr, Field

from propconnect.schemas.base import ApiModel


class UserRegister(ApiModel):
    """User registration request."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)


class UserLogin(ApiModel):
    """User login request.

    Deliberately loose: every malformed attempt ends as "Invalid credentials."
    """

    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class UserResponse(ApiModel):
    """User information response; never carries the password hash."""

    id: int
    name: str
    email: str


class AuthResponse(ApiModel):
    """Authentication response with token and user info."""

    message: str
    token: str
    user: UserResponse


class CurrentUserResponse(ApiModel):
    user: UserResponse
