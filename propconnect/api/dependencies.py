"""FastAPI dependencies for authentication, tokens and storage."""

import logging
from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from propconnect.config import get_settings
from propconnect.database import get_db
from propconnect.errors import Unauthenticated
from propconnect.services.auth import AuthService
from propconnect.services.storage import LocalImageStore
from propconnect.services.tokens import TokenIdentity, TokenService

BEARER_PREFIX = "Bearer "


@lru_cache
def get_token_service() -> TokenService:
    """Build the token service from settings, once per process."""
    settings = get_settings()
    return TokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        lifetime=timedelta(minutes=settings.jwt_expiration_minutes),
        logger=logging.getLogger("propconnect.services.tokens"),
    )


def extract_token(authorization: str | None) -> str | None:
    """Pull the token out of an Authorization header value.

    A value without the ``Bearer `` prefix is taken as the token itself.
    """
    if not authorization:
        return None
    if authorization.startswith(BEARER_PREFIX):
        authorization = authorization[len(BEARER_PREFIX) :]
    return authorization.strip() or None


class BearerAuth:
    """Verifies the request's bearer token and records who is calling.

    Missing or empty tokens raise Unauthenticated (401); tokens that fail
    verification raise InvalidToken (403). On success the identity is
    stored on ``request.state.user`` and returned.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)

    def __call__(
        self,
        request: Request,
        tokens: Annotated[TokenService, Depends(get_token_service)],
    ) -> TokenIdentity:
        token = extract_token(request.headers.get("Authorization"))
        if token is None:
            self.logger.info(f"No token on {request.method} {request.url.path}")
            raise Unauthenticated()

        identity = tokens.verify(token)
        request.state.user = identity
        return identity


get_current_identity = BearerAuth()

CurrentIdentity = Annotated[TokenIdentity, Depends(get_current_identity)]


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, tokens)


@lru_cache
def get_image_store() -> LocalImageStore:
    """Get the image store configured for this process."""
    settings = get_settings()
    return LocalImageStore(
        directory=settings.upload_dir,
        base_url=settings.api_base_url,
        max_bytes=settings.max_upload_bytes,
    )
