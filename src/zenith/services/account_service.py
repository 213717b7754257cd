"""Account service — registration, login, account lookups.

Learn: Registration and login are the only two flows that touch the
password. Everything else is a plain lookup by id or email.

Email uniqueness is checked twice on registration: a SELECT for the
common case, and the uq_users_email constraint for the race where two
requests register the same email at once. Both surface as
DuplicateIdentityError.
"""

from dataclasses import dataclass
from typing import Optional

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from zenith.auth.jwt import TokenIssuer
from zenith.auth.password import DEFAULT_ROUNDS, hash_password, verify_password
from zenith.db.models import User
from zenith.errors import (
    DuplicateIdentityError,
    InvalidCredentialsError,
    NotFoundError,
)

logger = structlog.get_logger()


@dataclass
class AuthResult:
    """An account together with a freshly issued token."""

    user: User
    token: str


class AccountService:
    """Business logic for accounts and credentials."""

    def __init__(
        self,
        db: AsyncSession,
        issuer: TokenIssuer,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ):
        self.db = db
        self.issuer = issuer
        self.bcrypt_rounds = bcrypt_rounds

    # ─── Register ────────────────────────────────────────

    async def register(
        self,
        email: str,
        password: str,
        name: Optional[str] = None,
    ) -> AuthResult:
        """Create an account and issue its first token."""
        if await self.get_by_email(email):
            raise DuplicateIdentityError(f"User with email {email} already exists")

        user = User(
            email=email,
            name=name,
            password_hash=hash_password(password, rounds=self.bcrypt_rounds),
        )
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            # Lost the race against a concurrent registration
            await self.db.rollback()
            raise DuplicateIdentityError(f"User with email {email} already exists")
        await self.db.refresh(user)

        logger.info("account.registered", user_id=user.id)
        return AuthResult(user=user, token=self.issuer.issue(user.id, user.email))

    # ─── Login ───────────────────────────────────────────

    async def login(self, email: str, password: str) -> AuthResult:
        """Check credentials and issue a new token.

        Every login gets an independent token; earlier tokens stay valid
        until they expire.
        """
        user = await self.find_by_email(email)
        if not verify_password(password, user.password_hash):
            logger.info("account.login_failed", user_id=user.id)
            raise InvalidCredentialsError("Invalid password")

        return AuthResult(user=user, token=self.issuer.issue(user.id, user.email))

    # ─── Lookups ─────────────────────────────────────────

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalars().first()

    async def find_by_email(self, email: str) -> User:
        user = await self.get_by_email(email)
        if not user:
            raise NotFoundError(f"User not found with email: {email}")
        return user

    async def find_by_id(self, user_id: int) -> User:
        user = await self.db.get(User, user_id)
        if not user:
            raise NotFoundError(f"User not found with id: {user_id}")
        return user
