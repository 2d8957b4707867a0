"""
Food Ordering API — Shared route dependencies
"""
from fastapi import Depends, Query, Request

from foodorder.core.errors import Unauthorized
from foodorder.core.policy import authorize
from foodorder.db.repositories import Store
from foodorder.db.store import get_store
from foodorder.schemas.records import Role, UserRecord


async def get_current_user(request: Request, store: Store = Depends(get_store)) -> UserRecord:
    claims = getattr(request.state, "claims", None)
    if claims is None:
        raise Unauthorized(getattr(request.state, "auth_error", None) or "Access token required")

    user = await store.users.get(claims.get("sub", ""))
    if user is None or not user.is_active:
        raise Unauthorized("Invalid or expired token")
    return user


def require_roles(*roles: Role):
    """Dependency: the authenticated caller must hold one of `roles`."""
    async def dependency(user: UserRecord = Depends(get_current_user)) -> UserRecord:
        authorize(user, roles=roles)
        return user
    return dependency


class PageParams:
    def __init__(
        self,
        page: int = Query(1, ge=1),
        limit: int = Query(10, ge=1, le=100),
    ):
        self.page = page
        self.limit = limit

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit
