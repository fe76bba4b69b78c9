"""
api/routes/auth.py
------------------
Authentication endpoints.

POST /auth/signup — Applicant self-registration.
POST /auth/login  — Exchange credentials for a session token.
                    Accepts OAuth2 form data (Swagger UI compatible).
GET  /auth/me     — The authenticated user plus their resolved role.
"""

from datetime import timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from jobboard.access.roles import PlatformSuperAdmin, TenantMember
from jobboard.core.config import settings
from jobboard.core.security import create_access_token
from jobboard.dependencies import DB, Context
from jobboard.schemas.user import (
    AccessRead,
    MeResponse,
    SignupRequest,
    TokenResponse,
    UserRead,
)
from jobboard.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/signup",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new applicant account",
)
async def signup(body: SignupRequest, db: DB) -> UserRead:
    try:
        user = await UserService.signup(db, body)
        return UserRead.model_validate(user)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login and receive a session token",
)
async def login(
    # The OAuth2 "username" field carries the email address.
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    db: DB,
) -> TokenResponse:
    user = await UserService.authenticate(db, form_data.username, form_data.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    token = create_access_token(subject=user.id, expires_delta=expires)

    return TokenResponse(
        access_token=token,
        token_type="bearer",
        expires_in=int(expires.total_seconds()),
        user=UserRead.model_validate(user),
    )


@router.get(
    "/me",
    response_model=MeResponse,
    summary="Get the currently authenticated user and role",
)
async def get_me(ctx: Context) -> MeResponse:
    user = await ctx.require_user()
    role = await ctx.role()

    access = AccessRead(role="applicant")
    if isinstance(role, PlatformSuperAdmin):
        access = AccessRead(role="platform_super_admin")
    elif isinstance(role, TenantMember):
        access = AccessRead(role="tenant_member", tenant_id=role.tenant_id, level=role.level.value)

    return MeResponse(user=UserRead.model_validate(user), access=access)
