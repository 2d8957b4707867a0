"""
Food Ordering API — Password hashing and JWT issue/verify

Every token carries sub (user id), type (access | refresh), jti and exp.
Access tokens also carry the user's role.
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from foodorder.core.config import get_settings

settings = get_settings()

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS = "access"
REFRESH = "refresh"


# ─── Password Hashing ─────────────────────────────────────────────────────────

def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


# ─── JWT ───────────────────────────────────────────────────────────────────────

def _encode(subject: str, token_type: str, lifetime: timedelta, **claims: Any) -> str:
    payload = {
        **claims,
        "sub": subject,
        "type": token_type,
        "jti": str(uuid.uuid4()),
        "exp": datetime.now(tz=timezone.utc) + lifetime,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def create_access_token(user_id: str, role: str) -> str:
    lifetime = timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    return _encode(user_id, ACCESS, lifetime, role=role)


def create_refresh_token(user_id: str) -> str:
    return _encode(user_id, REFRESH, timedelta(days=settings.JWT_REFRESH_TOKEN_EXPIRE_DAYS))


def decode_token(token: str, expected_type: str | None = None) -> dict[str, Any]:
    """
    Verify signature and expiry, and optionally the token type.
    Raises JWTError (ExpiredSignatureError for stale tokens) on failure.
    """
    claims = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    if expected_type is not None and claims.get("type") != expected_type:
        raise JWTError(f"Expected a {expected_type} token")
    return claims


def issue_tokens(user_id: str, role: str) -> dict[str, Any]:
    """Access + refresh pair, shaped like TokenResponse."""
    return {
        "access_token": create_access_token(user_id, role),
        "refresh_token": create_refresh_token(user_id),
        "token_type": "bearer",
        "expires_in": settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    }
