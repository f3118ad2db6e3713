"""Settings validation tests."""

import pytest
from pydantic import ValidationError

from propconnect.config import LEGACY_JWT_SECRET, Settings


def test_missing_secret_is_fatal(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize("secret", ["", "   ", LEGACY_JWT_SECRET])
def test_unusable_secret_is_fatal(secret):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, jwt_secret=secret)


def test_defaults():
    settings = Settings(_env_file=None, jwt_secret="s3cret", database_url="sqlite:///./x.db")
    assert settings.jwt_algorithm == "HS256"
    assert settings.jwt_expiration_minutes == 60
    assert settings.is_development


def test_production_rejects_localhost_database():
    with pytest.raises(ValidationError):
        Settings(
            _env_file=None,
            jwt_secret="s3cret",
            environment="production",
            database_url="postgresql://u:p@localhost:5432/realestate",
        )
