"""Registration, login and current-user flows."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from propconnect.errors import InvalidCredentials, NotFound
from propconnect.models.user import User
from propconnect.services.credentials import CredentialStore
from propconnect.services.tokens import TokenIdentity, TokenService


@dataclass
class AuthSession:
    """Token plus the user it was issued for."""

    token: str
    user: User


class AuthService:
    """Combines the credential store and the token service."""

    def __init__(self, db: Session, tokens: TokenService, logger: logging.Logger | None = None):
        self.credentials = CredentialStore(db)
        self.tokens = tokens
        self.logger = logger or logging.getLogger(__name__)

    def register(self, name: str, email: str, password: str) -> AuthSession:
        """Create a user and sign a token for them."""
        user = self.credentials.create(email=email, name=name, password=password)
        self.logger.info(f"Registered user {user.id}")
        return AuthSession(token=self.tokens.issue(user.id, user.email), user=user)

    def login(self, email: str, password: str) -> AuthSession:
        """Check credentials and sign a token.

        Unknown emails and wrong passwords raise the same InvalidCredentials.
        """
        user = self.credentials.find_by_email(email or "")
        if user is None:
            self.credentials.dummy_verify()
            self.logger.info("Login rejected")
            raise InvalidCredentials()
        if not self.credentials.verify_password(user, password or ""):
            self.logger.info("Login rejected")
            raise InvalidCredentials()

        self.logger.info(f"User {user.id} logged in")
        return AuthSession(token=self.tokens.issue(user.id, user.email), user=user)

    def current_user(self, identity: TokenIdentity) -> User:
        """Load the user a verified token refers to."""
        user = self.credentials.find_by_id(identity.id)
        if user is None:
            raise NotFound("User not found")
        return user
