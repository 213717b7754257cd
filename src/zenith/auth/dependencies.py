"""FastAPI auth dependencies.

Learn: These are used as Depends() in route handlers. The TokenIssuer
is built once in create_app() and parked on app.state, so every
request sees the same immutable signing key without a module global.

get_current_user validates a Bearer token and loads the account it
names. Any token problem (malformed, bad signature, expired) is a 401.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from zenith.auth.jwt import TokenError, TokenIssuer
from zenith.auth.ownership import OwnershipGuard
from zenith.config import settings
from zenith.db.engine import get_db
from zenith.db.models import User
from zenith.errors import NotFoundError
from zenith.services.account_service import AccountService
from zenith.services.task_service import TaskService


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_account_service(
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AccountService:
    return AccountService(db, issuer, bcrypt_rounds=settings.bcrypt_rounds)


def get_task_service(
    db: AsyncSession = Depends(get_db),
    accounts: AccountService = Depends(get_account_service),
) -> TaskService:
    return TaskService(db, OwnershipGuard(accounts))


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=401,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    authorization: Optional[str] = Header(None),
    issuer: TokenIssuer = Depends(get_token_issuer),
    accounts: AccountService = Depends(get_account_service),
) -> User:
    """Resolve the account behind a Bearer token (401 if absent or invalid)."""
    if not authorization or not authorization.startswith("Bearer "):
        raise _unauthorized("Authentication required")

    try:
        claims = issuer.verify(authorization[7:])
    except TokenError as e:
        raise _unauthorized(str(e))

    try:
        return await accounts.find_by_id(claims.subject_id)
    except NotFoundError:
        raise _unauthorized("Account no longer exists")
