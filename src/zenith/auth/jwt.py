"""JWT token creation and verification.

Learn: JWT (JSON Web Token) provides stateless authentication. Each
token carries the account id as `sub`, the account email as a claim,
and `iat`/`exp` timestamps. The token is HMAC-signed (HS256) with the
one secret loaded at startup.

The secret is handed to TokenIssuer at construction instead of being
read from a global on every call, so tests (and any second issuer)
can use their own key. The issuer never prints the secret.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from zenith.config import Settings


class TokenError(Exception):
    """Raised when token verification fails."""


class MalformedTokenError(TokenError):
    """Not a decodable JWT, or a required claim is missing."""


class SignatureMismatchError(TokenError):
    """Signature was not produced with our secret."""


class ExpiredTokenError(TokenError):
    """Current time is at or past the token's expiry."""


REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


@dataclass(frozen=True)
class TokenClaims:
    subject_id: int
    email: str
    issued_at: datetime
    expires_at: datetime


class TokenIssuer:
    """Mints and verifies signed bearer tokens."""

    def __init__(
        self,
        secret: str,
        lifetime: timedelta,
        algorithm: str = "HS256",
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        if lifetime <= timedelta(0):
            raise ValueError("Token lifetime must be positive")
        self._secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret=settings.jwt_secret.get_secret_value(),
            lifetime=timedelta(minutes=settings.token_lifetime_minutes),
            algorithm=settings.jwt_algorithm,
        )

    def __repr__(self) -> str:
        return f"TokenIssuer(algorithm={self.algorithm!r}, lifetime={self.lifetime!r})"

    def issue(
        self,
        subject_id: int,
        email: str,
        now: Optional[datetime] = None,
    ) -> str:
        """Create a signed token for an account.

        `now` is only overridable so callers can mint tokens with a known
        issue time; it defaults to the current UTC time.
        """
        issued_at = (now or datetime.now(timezone.utc)).replace(microsecond=0)
        payload = {
            # PyJWT requires `sub` to be a string
            "sub": str(subject_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Verify and decode a token.

        Returns the claims on success.
        Raises MalformedTokenError, SignatureMismatchError or
        ExpiredTokenError on failure.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError("Token has expired")
        except jwt.InvalidSignatureError:
            raise SignatureMismatchError("Token signature mismatch")
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(f"Invalid token: {e}")

        try:
            subject_id = int(payload["sub"])
        except (TypeError, ValueError):
            raise MalformedTokenError("Invalid token: subject is not an account id")

        return TokenClaims(
            subject_id=subject_id,
            email=payload["email"],
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
