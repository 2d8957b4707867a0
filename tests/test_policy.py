"""
Authorization policy: role gate and ownership gate.
"""
import pytest

from foodorder.core.errors import Forbidden
from foodorder.core.policy import authorize, has_role, is_admin, owns
from foodorder.schemas.records import Role, UserRecord


def _user(role: Role, user_id: str = "u1") -> UserRecord:
    return UserRecord(id=user_id, name="Someone", email=f"{user_id}@example.com", password_hash="x", role=role)


def test_role_helpers():
    admin = _user(Role.ADMIN)
    customer = _user(Role.CUSTOMER)

    assert is_admin(admin)
    assert not is_admin(customer)
    assert has_role(customer, [Role.CUSTOMER, Role.RESTAURANT])
    assert has_role(customer, ["customer"])
    assert not has_role(customer, [Role.ADMIN])


def test_owns_requires_matching_id():
    user = _user(Role.RESTAURANT, "owner-1")
    assert owns(user, "owner-1")
    assert not owns(user, "owner-2")
    assert not owns(user, None)


def test_role_gate_rejects_other_roles():
    with pytest.raises(Forbidden, match="Insufficient permissions"):
        authorize(_user(Role.CUSTOMER), roles=[Role.RESTAURANT, Role.ADMIN])

    authorize(_user(Role.RESTAURANT), roles=[Role.RESTAURANT, Role.ADMIN])


def test_ownership_gate_passes_owner_and_admin():
    authorize(_user(Role.RESTAURANT, "o1"), owner_id="o1")
    authorize(_user(Role.ADMIN, "a1"), owner_id="o1")

    with pytest.raises(Forbidden, match="not yours"):
        authorize(_user(Role.RESTAURANT, "o2"), owner_id="o1", message="not yours")


def test_unresolvable_owner_admits_admins_only():
    authorize(_user(Role.ADMIN), owner_id=None)
    with pytest.raises(Forbidden):
        authorize(_user(Role.RESTAURANT), owner_id=None)


def test_no_gates_always_passes():
    authorize(_user(Role.CUSTOMER))
