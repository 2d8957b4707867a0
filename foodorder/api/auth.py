"""
Food Ordering API — Auth routes
"""
import logging

from fastapi import APIRouter, Depends, status
from jose import JWTError

from foodorder.api.deps import get_current_user
from foodorder.core.errors import Conflict, Forbidden, Unauthorized
from foodorder.core.security import REFRESH, decode_token, hash_password, issue_tokens, verify_password
from foodorder.db.repositories import Store
from foodorder.db.store import get_store
from foodorder.schemas.auth import (
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    TokenResponse,
    UserOut,
)
from foodorder.schemas.common import ok
from foodorder.schemas.records import UserRecord

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(payload: RegisterRequest, store: Store = Depends(get_store)):
    """Create a customer or restaurant-owner account and sign it in."""
    if await store.users.get_by_email(payload.email):
        raise Conflict("User already exists with this email")

    user = await store.users.add(UserRecord(
        name=payload.name,
        email=payload.email,
        password_hash=hash_password(payload.password),
        phone=payload.phone,
        role=payload.role,
        addresses=payload.addresses,
    ))
    logger.info("Registered %s user %s", user.role, user.id)
    return ok(
        {"user": UserOut.from_record(user), **TokenResponse(**issue_tokens(user.id, user.role)).model_dump()},
        message="User registered successfully",
    )


@router.post("/login")
async def login(payload: LoginRequest, store: Store = Depends(get_store)):
    """Validate credentials and issue JWT tokens."""
    user = await store.users.get_by_email(payload.email)
    if not user or not verify_password(payload.password, user.password_hash):
        raise Unauthorized("Invalid email or password")
    if not user.is_active:
        raise Forbidden("Account is disabled")

    return ok(
        {"user": UserOut.from_record(user), **TokenResponse(**issue_tokens(user.id, user.role)).model_dump()},
        message="Login successful",
    )


@router.post("/refresh")
async def refresh_token(payload: RefreshRequest, store: Store = Depends(get_store)):
    """Issue a new token pair from a valid refresh token."""
    try:
        claims = decode_token(payload.refresh_token, expected_type=REFRESH)
    except JWTError:
        raise Unauthorized("Invalid or expired refresh token")

    user = await store.users.get(claims.get("sub", ""))
    if not user or not user.is_active:
        raise Unauthorized("User not found")

    return ok(TokenResponse(**issue_tokens(user.id, user.role)).model_dump())


@router.get("/me")
async def me(user: UserRecord = Depends(get_current_user)):
    return ok({"user": UserOut.from_record(user)})
