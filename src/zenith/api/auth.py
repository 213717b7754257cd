"""Auth API — registration, login, current account.

Learn: Routes for account authentication:
- POST /users → create an account, returns {user, token} (409 if email taken)
- POST /auth/login → email/password → {user, token}
- GET /auth/me → account behind the Bearer token

Login deliberately answers 401 for both "no such email" and "wrong
password" so the response doesn't reveal which emails are registered.
"""

from fastapi import APIRouter, Depends, HTTPException

from zenith.auth.dependencies import get_account_service, get_current_user
from zenith.db.models import User
from zenith.errors import ServiceError
from zenith.schemas.account import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserRead,
)
from zenith.services.account_service import AccountService

router = APIRouter()


# ─── Register ────────────────────────────────────────────


@router.post("/users", response_model=AuthResponse, status_code=201)
async def register(
    body: RegisterRequest,
    accounts: AccountService = Depends(get_account_service),
):
    """Create a new account and return it with its first token."""
    result = await accounts.register(body.email, body.password, name=body.name)
    return AuthResponse(user=UserRead.model_validate(result.user), token=result.token)


# ─── Login ───────────────────────────────────────────────


@router.post("/auth/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    accounts: AccountService = Depends(get_account_service),
):
    """Login with email and password → fresh token."""
    try:
        result = await accounts.login(body.email, body.password)
    except ServiceError:
        raise HTTPException(
            status_code=401,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return AuthResponse(user=UserRead.model_validate(result.user), token=result.token)


# ─── Current user ───────────────────────────────────────


@router.get("/auth/me", response_model=UserRead)
async def get_me(user: User = Depends(get_current_user)):
    """Get the current authenticated account."""
    return user
