"""User model."""

from sqlalchemy import Column, Integer, String

from propconnect.database import Base
from propconnect.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # Always stored lowercased; the unique index is the duplicate guard.
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
