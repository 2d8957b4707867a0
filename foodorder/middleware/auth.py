"""
Food Ordering API — JWT Authentication Middleware

Decodes the Bearer token (when one is sent) and attaches the claims to
request.state.claims. Public routes ignore the result; protected routes go
through api.deps.get_current_user, which turns a missing or rejected token
into a 401.
"""
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from jose import ExpiredSignatureError, JWTError

from foodorder.core.security import ACCESS, decode_token


class JWTAuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request.state.claims = None
        request.state.auth_error = None

        if request.method == "OPTIONS":
            return await call_next(request)

        auth_header = request.headers.get("Authorization", "")
        if not auth_header:
            return await call_next(request)

        if not auth_header.startswith("Bearer "):
            request.state.auth_error = "Malformed Authorization header. Expected: Bearer <token>"
            return await call_next(request)

        token = auth_header.split(" ", 1)[1]
        try:
            request.state.claims = decode_token(token, expected_type=ACCESS)
        except ExpiredSignatureError:
            request.state.auth_error = "Token expired"
        except JWTError:
            request.state.auth_error = "Invalid token"

        return await call_next(request)
