"""Signed, time-limited bearer tokens."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from propconnect.errors import InvalidToken

TOKEN_LIFETIME = timedelta(hours=1)


@dataclass(frozen=True)
class TokenIdentity:
    """Identity carried by a verified token."""

    id: int | str
    email: str | None = None


class TokenService:
    """Issues and verifies HMAC-signed JWTs.

    Verification is purely cryptographic: there is no store lookup, no
    refresh and no revocation. Expiry is the only way a token stops working.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        lifetime: timedelta = TOKEN_LIFETIME,
        clock: Callable[[], datetime] | None = None,
        logger: logging.Logger | None = None,
    ):
        if not secret:
            raise ValueError("TokenService requires a signing secret")
        self._secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime
        self._clock = clock or (lambda: datetime.now(UTC))
        self.logger = logger or logging.getLogger(__name__)

    def issue(self, user_id: int | str, email: str | None = None) -> str:
        """Create a token for the given user."""
        issued_at = self._clock()
        claims = {
            "id": user_id,
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        if email is not None:
            claims["email"] = email
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenIdentity:
        """Decode a token, raising InvalidToken on any problem.

        Expiry is judged against this service's clock; a token is valid up to
        and including its ``exp`` second.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False, "require_exp": True},
            )
        except JWTError as e:
            self.logger.info(f"Rejected token: {e}")
            raise InvalidToken() from None

        expires_at = payload.get("exp")
        if not isinstance(expires_at, int | float) or expires_at < int(self._clock().timestamp()):
            self.logger.info("Rejected expired token")
            raise InvalidToken()

        user_id = payload.get("id")
        if user_id is None:
            self.logger.info("Rejected token without an id claim")
            raise InvalidToken()
        return TokenIdentity(id=user_id, email=payload.get("email"))
