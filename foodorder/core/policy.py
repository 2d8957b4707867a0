"""
Food Ordering API — Authorization policy

Pure checks over (caller, resource owner, allowed roles). They never touch the
store; a failed check raises Forbidden and a passing one returns nothing.
"""
from collections.abc import Iterable

from foodorder.core.errors import Forbidden
from foodorder.schemas.records import Role, UserRecord

_UNCHECKED = object()


def is_admin(caller: UserRecord) -> bool:
    return caller.role == Role.ADMIN


def has_role(caller: UserRecord, roles: Iterable[Role | str]) -> bool:
    return caller.role in {Role(r).value for r in roles}


def owns(caller: UserRecord, owner_id: str | None) -> bool:
    return owner_id is not None and caller.id == owner_id


def authorize(
    caller: UserRecord,
    owner_id: str | None | object = _UNCHECKED,
    roles: Iterable[Role | str] | None = None,
    message: str = "Access denied",
) -> None:
    """
    Role gate when `roles` is given, ownership gate when `owner_id` is given.

    Admins always pass the ownership gate. An owner_id of None means the
    resource has no resolvable owner, so only admins get through.
    """
    if roles is not None and not has_role(caller, roles):
        raise Forbidden("Insufficient permissions")
    if owner_id is not _UNCHECKED and not (owns(caller, owner_id) or is_admin(caller)):
        raise Forbidden(message)
