"""
Food Ordering API — User management routes
"""
import logging

from fastapi import APIRouter, Depends

from foodorder.api.deps import PageParams, get_current_user, require_roles
from foodorder.core.errors import NotFound, ValidationFailed
from foodorder.core.policy import authorize
from foodorder.db.repositories import Store
from foodorder.db.store import get_store
from foodorder.schemas.auth import UserOut, UserUpdateRequest
from foodorder.schemas.common import Pagination, ok
from foodorder.schemas.records import Role, UserRecord

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def list_users(
    paging: PageParams = Depends(),
    admin: UserRecord = Depends(require_roles(Role.ADMIN)),
    store: Store = Depends(get_store),
):
    """Active users, newest first."""
    users, total = await store.users.list_active(skip=paging.skip, limit=paging.limit)
    return ok({
        "users": [UserOut.from_record(u) for u in users],
        "pagination": Pagination.build(paging.page, paging.limit, total),
    })


@router.get("/{user_id}")
async def get_user(
    user_id: str,
    caller: UserRecord = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    authorize(caller, owner_id=user_id, message="Access denied. You can only access your own profile")
    user = await store.users.get(user_id)
    if user is None:
        raise NotFound("User not found")
    return ok({"user": UserOut.from_record(user)})


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    caller: UserRecord = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    """Profile fields only: name, phone, addresses."""
    authorize(caller, owner_id=user_id, message="Access denied. You can only update your own profile")
    user = await store.users.update(user_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    if user is None:
        raise NotFound("User not found")
    return ok({"user": UserOut.from_record(user)}, message="Profile updated successfully")


@router.delete("/{user_id}")
async def deactivate_user(
    user_id: str,
    admin: UserRecord = Depends(require_roles(Role.ADMIN)),
    store: Store = Depends(get_store),
):
    """Soft delete: the account is deactivated, never removed."""
    if admin.id == user_id:
        raise ValidationFailed("You cannot delete your own account")
    user = await store.users.update(user_id, {"is_active": False})
    if user is None:
        raise NotFound("User not found")
    logger.info("User %s deactivated by %s", user_id, admin.id)
    return ok(message="User deactivated successfully")
