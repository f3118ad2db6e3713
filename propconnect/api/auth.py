"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from propconnect.api.dependencies import CurrentIdentity, get_auth_service
from propconnect.schemas.auth import (
    AuthResponse,
    CurrentUserResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from propconnect.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    session = auth.register(name=user_data.name, email=user_data.email, password=user_data.password)
    return AuthResponse(
        message="User registered successfully",
        token=session.token,
        user=UserResponse.model_validate(session.user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    session = auth.login(credentials.email, credentials.password)
    return AuthResponse(
        message="Login successful",
        token=session.token,
        user=UserResponse.model_validate(session.user),
    )


@router.get("/me", response_model=CurrentUserResponse)
def get_me(
    identity: CurrentIdentity,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Get current user information."""
    user = auth.current_user(identity)
    return CurrentUserResponse(user=UserResponse.model_validate(user))


@router.post("/logout")
def logout(identity: CurrentIdentity):
    """Logout (client should discard token; it stays valid until expiry)."""
    return {"message": "Logged out successfully"}
