"""Credential store: user records with salted password hashes."""

import logging
import re

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from propconnect.errors import DuplicateEmail, ValidationError
from propconnect.models.user import User

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r".+@.+\..+")
MIN_PASSWORD_LENGTH = 6

# Password hashing context; bcrypt generates a fresh salt per hash
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class CredentialStore:
    """Creates, finds and checks users against their stored hashes."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, email: str, name: str, password: str) -> User:
        """Validate and persist a new user, hashing the password first.

        Raises ValidationError for bad input and DuplicateEmail when the
        address is taken, in either case without writing anything.
        """
        email = normalize_email(email or "")
        name = (name or "").strip()
        errors = {}
        if not name:
            errors["name"] = "Name is required"
        if not email:
            errors["email"] = "Email is required"
        elif not EMAIL_PATTERN.fullmatch(email):
            errors["email"] = "Please fill a valid email address"
        if not password:
            errors["password"] = "Password is required"
        elif len(password) < MIN_PASSWORD_LENGTH:
            errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        if errors:
            raise ValidationError("Validation Error", errors=errors)

        if self.find_by_email(email) is not None:
            raise DuplicateEmail()

        user = User(email=email, name=name, password_hash=get_password_hash(password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same address
            self.db.rollback()
            raise DuplicateEmail() from None
        self.db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user

    def set_password(self, user: User, password: str) -> None:
        """Replace a user's password; the only path that rehashes."""
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                "Validation Error",
                errors={"password": f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"},
            )
        user.password_hash = get_password_hash(password)
        self.db.commit()

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email, ignoring case."""
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def find_by_id(self, user_id: int | str) -> User | None:
        """Get a user by id; non-numeric ids never match."""
        try:
            user_id = int(user_id)
        except (TypeError, ValueError):
            return None
        return self.db.get(User, user_id)

    @staticmethod
    def verify_password(user: User, candidate: str) -> bool:
        """Check a plaintext candidate against the user's stored hash."""
        return pwd_context.verify(candidate, user.password_hash)

    @staticmethod
    def dummy_verify() -> None:
        """Spend the same effort as a real check when there is no user."""
        pwd_context.dummy_verify()
